"""Responsive breakpoint resolution.

Contains the default breakpoint registry, the settings-driven resolver and
helpers deriving media query ranges from the resolved config.
"""

from .registry import (  # noqa: F401
    BreakpointName,
    Direction,
    BreakpointDefinition,
    get_default_config,
    list_definitions,
    get_definition,
)
from .breakpoint import Breakpoint, BreakpointConfig  # noqa: F401
from .settings_provider import (  # noqa: F401
    SettingsProvider,
    DictSettingsProvider,
    read_selection,
    read_value_override,
)
from .settings_store import (  # noqa: F401
    BreakpointSettings,
    JsonSettingsProvider,
    load_settings,
    save_settings,
)
from .manager import BreakpointsManager, get_items, get_item  # noqa: F401
from .media_ranges import MediaRange, compute_media_ranges, classify_width  # noqa: F401

__version__ = "0.1.0"
