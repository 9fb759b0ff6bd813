"""Breakpoint registry.

Canonical default definitions for the six responsive breakpoints a site can
enable. The registry is a pure constant: definitions are immutable and the
declaration order below is the canonical order (ascending pixel value). The
order is assumed, never computed, so new entries must be inserted in place.

Breakpoint Scale:
 - mobile:       max-width 767px
 - mobile_extra: max-width 880px
 - tablet:       max-width 1024px
 - tablet_extra: max-width 1366px
 - laptop:       max-width 1620px
 - widescreen:   min-width 2400px
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional

__all__ = [
    "BreakpointName",
    "Direction",
    "BreakpointDefinition",
    "get_default_config",
    "list_definitions",
    "get_definition",
]


class BreakpointName(str, Enum):
    MOBILE = "mobile"
    MOBILE_EXTRA = "mobile_extra"
    TABLET = "tablet"
    TABLET_EXTRA = "tablet_extra"
    LAPTOP = "laptop"
    WIDESCREEN = "widescreen"

    @classmethod
    def parse(cls, value: object) -> Optional["BreakpointName"]:
        """Return the member for ``value`` or None if it names no breakpoint."""
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return None
        try:
            return cls(value)
        except ValueError:
            return None


class Direction(str, Enum):
    MAX = "max"  # media query applies up to the value (max-width)
    MIN = "min"  # media query applies from the value (min-width)


@dataclass(frozen=True)
class BreakpointDefinition:
    """Static breakpoint definition.

    Attributes
    ----------
    name: BreakpointName
        Semantic identifier.
    label: str
        Human readable label shown in settings UIs.
    default_value: int
        Pixel width used when no override is stored.
    direction: Direction
        Whether the media query is a max-width or min-width query.
    """

    name: BreakpointName
    label: str
    default_value: int
    direction: Direction


_REGISTRY: Dict[BreakpointName, BreakpointDefinition] = {}


def _register(definition: BreakpointDefinition) -> None:
    if definition.name in _REGISTRY:
        raise ValueError(f"Duplicate breakpoint: {definition.name.value}")
    _REGISTRY[definition.name] = definition


_register(BreakpointDefinition(BreakpointName.MOBILE, "Mobile", 767, Direction.MAX))
_register(BreakpointDefinition(BreakpointName.MOBILE_EXTRA, "Mobile Extra", 880, Direction.MAX))
_register(BreakpointDefinition(BreakpointName.TABLET, "Tablet", 1024, Direction.MAX))
_register(BreakpointDefinition(BreakpointName.TABLET_EXTRA, "Tablet Extra", 1366, Direction.MAX))
_register(BreakpointDefinition(BreakpointName.LAPTOP, "Laptop", 1620, Direction.MAX))
_register(BreakpointDefinition(BreakpointName.WIDESCREEN, "Widescreen", 2400, Direction.MIN))


def get_default_config() -> Dict[BreakpointName, BreakpointDefinition]:
    """Return the default definitions keyed by name, in canonical order."""
    return dict(_REGISTRY)


def list_definitions() -> List[BreakpointDefinition]:
    return list(_REGISTRY.values())


def get_definition(name: BreakpointName | str) -> Optional[BreakpointDefinition]:
    key = BreakpointName.parse(name)
    if key is None:
        return None
    return _REGISTRY.get(key)
