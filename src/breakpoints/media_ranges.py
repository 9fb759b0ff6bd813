"""Width ranges covered by each enabled breakpoint.

Translates the resolved config and previous-value map into explicit pixel
ranges, the numbers a stylesheet generator needs for its media queries. No
CSS text is produced here.

Range Model
-----------
 - max direction: from ``previous + 1`` (or 0 for the lowest enabled
   breakpoint) up to and including ``value``.
 - min direction: from ``value`` upwards, open ended.

Widths above the largest max breakpoint and below any min breakpoint fall in
the base (desktop) range, which has no breakpoint of its own.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional

from .manager import BreakpointsManager
from .registry import BreakpointName, Direction

__all__ = ["MediaRange", "compute_media_ranges", "classify_width"]


@dataclass(frozen=True)
class MediaRange:
    """Inclusive pixel range; None on either side means unbounded."""

    name: BreakpointName
    min_width: Optional[int]
    max_width: Optional[int]

    def contains(self, width: int) -> bool:
        if self.min_width is not None and width < self.min_width:
            return False
        if self.max_width is not None and width > self.max_width:
            return False
        return True


def compute_media_ranges(manager: BreakpointsManager) -> Dict[BreakpointName, MediaRange]:
    previous_values = manager.get_active_breakpoints_with_previous_values()
    ranges: Dict[BreakpointName, MediaRange] = {}
    for name, config in manager.get_config().items():
        if config.direction is Direction.MIN:
            ranges[name] = MediaRange(name, min_width=config.value, max_width=None)
            continue
        previous = previous_values.get(name)
        ranges[name] = MediaRange(
            name,
            min_width=None if previous is None else previous + 1,
            max_width=config.value,
        )
    return ranges


def classify_width(manager: BreakpointsManager, width: int) -> Optional[BreakpointName]:
    """Return the breakpoint whose range holds ``width`` (None for the base range)."""
    if width < 0:
        raise ValueError("Width must be non-negative")
    ranges = compute_media_ranges(manager)
    for media_range in ranges.values():
        if media_range.max_width is not None and media_range.contains(width):
            return media_range.name
    # Widest min breakpoint wins when several apply
    for media_range in reversed(list(ranges.values())):
        if media_range.max_width is None and media_range.contains(width):
            return media_range.name
    return None
