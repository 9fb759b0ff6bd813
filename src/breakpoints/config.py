"""Global configuration and constants for breakpoint resolution."""

from __future__ import annotations

import os
from typing import Final

# Site settings key holding the list of enabled breakpoint names
BREAKPOINTS_SELECT_CONTROL_ID: Final = "active_breakpoints"
# Per-breakpoint value overrides live under "<prefix><name>", e.g. viewport_tablet
BREAKPOINT_OPTION_PREFIX: Final = "viewport_"

SETTINGS_FILENAME: Final = "breakpoint_settings.json"
SETTINGS_DIR: Final = os.environ.get("BREAKPOINTS_SETTINGS_DIR", ".")
SETTINGS_VERSION: Final = 1  # Increment when the settings file structure changes


def option_key(name: str) -> str:
    return f"{BREAKPOINT_OPTION_PREFIX}{name}"
