"""Breakpoints manager.

Resolves the registry defaults against the current site settings and exposes
the enabled breakpoints plus derived views for style generation.

A manager caches everything it computes for its own lifetime and never
rebuilds. Settings may change between requests, so create one manager per
request (or session) instead of sharing a long-lived instance. Lazy
initialisation is guarded by a re-entrant lock so a shared instance still
builds its cache exactly once.
"""

from __future__ import annotations

import logging
from threading import RLock
from typing import Dict, Mapping, Optional, TypeVar

from .breakpoint import Breakpoint, BreakpointConfig
from .registry import BreakpointName, get_default_config
from .settings_provider import SettingsProvider, read_selection, read_value_override

_logger = logging.getLogger(__name__)

T = TypeVar("T")

__all__ = ["BreakpointsManager", "get_items", "get_item"]

# Enabled regardless of stored values when no selection was ever saved
_BACKWARD_COMPATIBLE_DEFAULTS = frozenset({BreakpointName.MOBILE, BreakpointName.TABLET})


def get_items(collection: Mapping[BreakpointName, T]) -> Mapping[BreakpointName, T]:
    return collection


def get_item(collection: Mapping[BreakpointName, T], name: BreakpointName | str) -> Optional[T]:
    """Return the entry for ``name`` or None when the name is unknown or absent."""
    key = BreakpointName.parse(name)
    if key is None:
        return None
    return collection.get(key)


class BreakpointsManager:
    def __init__(self, provider: SettingsProvider) -> None:
        self._provider = provider
        self._lock = RLock()
        self._breakpoints: Optional[Dict[BreakpointName, Breakpoint]] = None
        self._config: Optional[Dict[BreakpointName, BreakpointConfig]] = None

    # Breakpoint instances ---------------------------------------------
    def get_breakpoints(self) -> Mapping[BreakpointName, Breakpoint]:
        """All breakpoint instances, enabled or not, in canonical order."""
        if self._breakpoints is None:
            with self._lock:
                if self._breakpoints is None:
                    self._breakpoints = self._init_breakpoints()
        return get_items(self._breakpoints)

    def get_breakpoint(self, name: BreakpointName | str) -> Optional[Breakpoint]:
        return get_item(self.get_breakpoints(), name)

    # Enabled config ---------------------------------------------------
    def get_config(self) -> Mapping[BreakpointName, BreakpointConfig]:
        """Config of the enabled breakpoints only, in canonical order."""
        if self._config is None:
            with self._lock:
                if self._config is None:
                    self._config = self._init_config()
        return get_items(self._config)

    def get_breakpoint_config(self, name: BreakpointName | str) -> Optional[BreakpointConfig]:
        return get_item(self.get_config(), name)

    # Derived views ----------------------------------------------------
    def get_active_breakpoints_with_previous_values(self) -> Dict[BreakpointName, int]:
        """Map each enabled breakpoint to the value of the one enabled below it.

        The lowest enabled breakpoint has an implicit minimum of 0 and is left
        out. The skip is positional: when mobile is disabled, whichever
        breakpoint is now lowest takes its place.
        """
        config = self.get_config()
        names = list(config.keys())
        previous_values: Dict[BreakpointName, int] = {}
        for index, name in enumerate(names):
            if index == 0:
                continue
            previous_values[name] = config[names[index - 1]].value
        return previous_values

    def has_custom_breakpoints(self) -> bool:
        return any(bp.is_custom for bp in self.get_breakpoints().values())

    # Internal ---------------------------------------------------------
    def _init_breakpoints(self) -> Dict[BreakpointName, Breakpoint]:
        selection = read_selection(self._provider)
        breakpoints: Dict[BreakpointName, Breakpoint] = {}
        for name, definition in get_default_config().items():
            if selection is None and name in _BACKWARD_COMPATIBLE_DEFAULTS:
                # Sites saved before breakpoint selection existed keep mobile and
                # tablet at their defaults, ignoring any stored value
                breakpoints[name] = Breakpoint.from_definition(definition, is_enabled=True)
                continue
            value = read_value_override(self._provider, name)
            is_enabled = selection is not None and name in selection
            breakpoints[name] = Breakpoint.from_definition(
                definition, value=value, is_enabled=is_enabled
            )
        _logger.debug(
            "Resolved breakpoints (selection=%s): %s",
            "saved" if selection is not None else "none",
            ", ".join(f"{bp.name.value}={bp.value}" for bp in breakpoints.values() if bp.is_enabled),
        )
        return breakpoints

    def _init_config(self) -> Dict[BreakpointName, BreakpointConfig]:
        config: Dict[BreakpointName, BreakpointConfig] = {}
        for name, instance in self.get_breakpoints().items():
            if instance.is_enabled:
                config[name] = instance.get_config()
        return config
