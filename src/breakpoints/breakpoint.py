"""Resolved breakpoint instances.

A `Breakpoint` pairs a registry definition with the value and enablement
resolved from site settings. `BreakpointConfig` is the immutable view handed
to style generation consumers.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict

from .registry import BreakpointDefinition, BreakpointName, Direction

__all__ = ["Breakpoint", "BreakpointConfig"]


@dataclass(frozen=True)
class BreakpointConfig:
    name: BreakpointName
    label: str
    value: int
    direction: Direction
    is_enabled: bool
    is_custom: bool

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["name"] = self.name.value
        data["direction"] = self.direction.value
        return data


@dataclass(frozen=True)
class Breakpoint:
    """Breakpoint resolved against site settings.

    Attributes
    ----------
    definition: BreakpointDefinition
        Registry entry this instance was built from.
    value: int
        Effective pixel width (stored override or the default).
    is_enabled: bool
        Whether the breakpoint takes part in the resolved config.
    """

    definition: BreakpointDefinition
    value: int
    is_enabled: bool

    @classmethod
    def from_definition(
        cls, definition: BreakpointDefinition, *, value: int | None = None, is_enabled: bool
    ) -> "Breakpoint":
        return cls(
            definition=definition,
            value=definition.default_value if value is None else value,
            is_enabled=is_enabled,
        )

    @property
    def name(self) -> BreakpointName:
        return self.definition.name

    @property
    def label(self) -> str:
        return self.definition.label

    @property
    def direction(self) -> Direction:
        return self.definition.direction

    @property
    def default_value(self) -> int:
        return self.definition.default_value

    @property
    def is_custom(self) -> bool:
        # Disabled breakpoints never count as customised, whatever is stored
        return self.is_enabled and self.value != self.definition.default_value

    def get_config(self) -> BreakpointConfig:
        return BreakpointConfig(
            name=self.name,
            label=self.label,
            value=self.value,
            direction=self.direction,
            is_enabled=self.is_enabled,
            is_custom=self.is_custom,
        )
