"""Breakpoint report CLI.

Resolves the breakpoint settings stored in a directory and prints the enabled
breakpoints together with the previous-value map used for min-width bounds.

Features:
 - Reads ``breakpoint_settings.json`` from ``--settings-dir`` (falls back to
   ``BREAKPOINTS_SETTINGS_DIR`` / current directory).
 - Emits either a human-readable table or JSON (via ``--json``).
 - ``--verbose`` enables debug logging of the resolution.

Example:
  breakpoints-report --settings-dir ./site --json
"""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from typing import Any, Dict

from .manager import BreakpointsManager
from .settings_store import JsonSettingsProvider


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Show the resolved responsive breakpoints")
    p.add_argument(
        "--settings-dir",
        default=None,
        help="Directory containing breakpoint_settings.json (default: BREAKPOINTS_SETTINGS_DIR or CWD)",
    )
    p.add_argument("--json", action="store_true", help="Emit JSON instead of human-readable text")
    p.add_argument("--verbose", action="store_true", help="Log resolution details to stderr")
    return p.parse_args(argv)


def build_report(manager: BreakpointsManager) -> Dict[str, Any]:
    return {
        "breakpoints": [config.to_dict() for config in manager.get_config().values()],
        "previous_values": {
            name.value: value
            for name, value in manager.get_active_breakpoints_with_previous_values().items()
        },
        "has_custom": manager.has_custom_breakpoints(),
    }


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, stream=sys.stderr)
    if args.settings_dir and not os.path.isdir(args.settings_dir):
        print(f"Settings directory not found: {args.settings_dir}", file=sys.stderr)
        return 2
    manager = BreakpointsManager(JsonSettingsProvider(args.settings_dir))
    report = build_report(manager)
    if args.json:
        print(json.dumps(report, ensure_ascii=False, indent=2))
        return 0
    print("Enabled Breakpoints:")
    for bp in report["breakpoints"]:
        marker = " (custom)" if bp["is_custom"] else ""
        print(f"  {bp['label']:<13} {bp['direction']}-width {bp['value']}px{marker}")
    if report["previous_values"]:
        previous = ", ".join(f"{k}={v}" for k, v in report["previous_values"].items())
        print(f"Previous values: {previous}")
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
