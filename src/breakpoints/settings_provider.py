"""Settings provider contract.

The resolver reads site settings through a single call,
``get_current_settings(setting_id)``. Two kinds of ids are queried:

 - ``active_breakpoints``: either a falsy value (nothing saved yet) or a mapping
   whose ``options`` entry lists the enabled breakpoint names.
 - ``viewport_<name>``: the stored pixel override for one breakpoint, or a falsy
   value when none is stored.

Raw values are normalized here so the resolver only deals with well formed
data. Anything malformed counts as "not configured" rather than an error.

A saved selection that is empty, or names no known breakpoint, is deliberately
treated as unsaved: mobile and tablet stay enabled instead of the site
resolving to no breakpoints at all.

Exceptions raised by the provider itself are not caught here.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, FrozenSet, Mapping, Optional, Protocol, runtime_checkable

from .config import BREAKPOINTS_SELECT_CONTROL_ID, option_key
from .registry import BreakpointName

_logger = logging.getLogger(__name__)

__all__ = [
    "SettingsProvider",
    "DictSettingsProvider",
    "read_selection",
    "read_value_override",
]


@runtime_checkable
class SettingsProvider(Protocol):  # pragma: no cover - structural
    def get_current_settings(self, setting_id: str) -> Any: ...


class DictSettingsProvider:
    """In-memory provider backed by a snapshot of a settings mapping."""

    def __init__(self, settings: Mapping[str, Any] | None = None) -> None:
        self._settings: Dict[str, Any] = dict(settings or {})

    def get_current_settings(self, setting_id: str) -> Any:
        return self._settings.get(setting_id)


def read_selection(provider: SettingsProvider) -> Optional[FrozenSet[BreakpointName]]:
    """Return the enabled breakpoint names, or None when nothing is configured."""
    raw = provider.get_current_settings(BREAKPOINTS_SELECT_CONTROL_ID)
    if not raw:
        return None
    if not isinstance(raw, Mapping):
        _logger.debug("Ignoring non-mapping breakpoint selection: %r", raw)
        return None
    options = raw.get("options")
    if not options or isinstance(options, (str, bytes)):
        return None
    try:
        items = list(options)
    except TypeError:
        _logger.debug("Ignoring non-iterable breakpoint options: %r", options)
        return None
    selected = set()
    for item in items:
        name = BreakpointName.parse(item)
        if name is None:
            _logger.debug("Unknown breakpoint in selection: %r", item)
            continue
        selected.add(name)
    # A selection naming no known breakpoint is treated as unsaved
    return frozenset(selected) or None


def read_value_override(provider: SettingsProvider, name: BreakpointName) -> Optional[int]:
    """Return the stored pixel value for ``name`` or None if absent or invalid."""
    raw = provider.get_current_settings(option_key(name.value))
    if not raw:
        return None
    try:
        if isinstance(raw, bool):
            raise TypeError("boolean override")
        if isinstance(raw, float) and not raw.is_integer():
            raise ValueError("fractional override")
        value = int(raw)
    except (TypeError, ValueError):
        _logger.warning("Invalid override for breakpoint %s: %r", name.value, raw)
        return None
    if value <= 0:
        _logger.warning("Non-positive override for breakpoint %s ignored: %r", name.value, raw)
        return None
    return value
