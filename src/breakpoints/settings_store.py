"""File-backed breakpoint settings.

Stores the site's breakpoint selection and per-breakpoint pixel overrides in a
small JSON document and exposes them through the settings provider contract.

Design principles:
- Explicit schema with version field to enable future migrations.
- Graceful fallback: missing, corrupt or incompatible files produce the
  unconfigured defaults instead of raising.
- The provider reads the file once; later edits are seen by a new provider.

File layout::

    {
      "version": 1,
      "options": ["mobile", "tablet", "laptop"],
      "values": {"tablet": 1100}
    }

``options`` is null (or absent) until a selection has been saved.
"""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass, field
from pathlib import Path
from threading import RLock
from typing import Any, Dict, List, Optional

from .config import (
    BREAKPOINT_OPTION_PREFIX,
    BREAKPOINTS_SELECT_CONTROL_ID,
    SETTINGS_DIR,
    SETTINGS_FILENAME,
    SETTINGS_VERSION,
)

_logger = logging.getLogger(__name__)

__all__ = [
    "BreakpointSettings",
    "JsonSettingsProvider",
    "load_settings",
    "save_settings",
]


@dataclass(slots=True)
class BreakpointSettings:
    """Serializable breakpoint settings.

    Attributes
    ----------
    version: Schema version for migration handling.
    options: Enabled breakpoint names, or None if no selection was ever saved.
    values: Pixel overrides keyed by breakpoint name.
    """

    version: int = SETTINGS_VERSION
    options: Optional[List[str]] = None
    values: Dict[str, int] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "BreakpointSettings":
        options = data.get("options")
        values = data.get("values") or {}
        return cls(
            version=int(data.get("version", SETTINGS_VERSION)),
            options=[str(o) for o in options] if isinstance(options, list) else None,
            values=dict(values) if isinstance(values, dict) else {},
        )

    def as_provider_settings(self) -> Dict[str, Any]:
        """Flatten into the ids queried through ``get_current_settings``."""
        flat: Dict[str, Any] = {}
        if self.options is not None:
            flat[BREAKPOINTS_SELECT_CONTROL_ID] = {"options": list(self.options)}
        for name, value in self.values.items():
            flat[f"{BREAKPOINT_OPTION_PREFIX}{name}"] = value
        return flat


def _resolve_path(base_dir: str | Path | None) -> Path:
    base = Path(base_dir) if base_dir else Path(SETTINGS_DIR)
    return base / SETTINGS_FILENAME


def load_settings(base_dir: str | Path | None = None) -> BreakpointSettings:
    """Load breakpoint settings from directory.

    Parameters
    ----------
    base_dir: The directory containing the settings file (defaults to
        ``BREAKPOINTS_SETTINGS_DIR`` or the current directory).
    """
    path = _resolve_path(base_dir)
    if not path.exists():
        return BreakpointSettings()
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
        settings = BreakpointSettings.from_dict(data)
    except (OSError, ValueError, TypeError, AttributeError) as exc:
        _logger.warning("Unreadable breakpoint settings %s (%s); using defaults", path, exc)
        return BreakpointSettings()
    if settings.version != SETTINGS_VERSION:
        _logger.warning(
            "Breakpoint settings version %s unsupported (expected %s); using defaults",
            settings.version,
            SETTINGS_VERSION,
        )
        return BreakpointSettings()
    return settings


def save_settings(settings: BreakpointSettings, base_dir: str | Path | None = None) -> Path:
    """Persist breakpoint settings to directory.

    Returns the path written for convenience.
    """
    path = _resolve_path(base_dir)
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp = path.with_suffix(path.suffix + ".tmp")
    tmp.write_text(json.dumps(settings.to_dict(), indent=2, ensure_ascii=False), encoding="utf-8")
    tmp.replace(path)
    return path


class JsonSettingsProvider:
    """Settings provider reading a breakpoint settings file on first query."""

    def __init__(self, base_dir: str | Path | None = None) -> None:
        self._base_dir = base_dir
        self._lock = RLock()
        self._flat: Optional[Dict[str, Any]] = None

    @property
    def path(self) -> Path:
        return _resolve_path(self._base_dir)

    def get_current_settings(self, setting_id: str) -> Any:
        if self._flat is None:
            with self._lock:
                if self._flat is None:
                    self._flat = load_settings(self._base_dir).as_provider_settings()
        return self._flat.get(setting_id)
