from __future__ import annotations

from typing import Any, Callable, Dict, List

import pytest

from breakpoints.manager import BreakpointsManager
from breakpoints.settings_provider import DictSettingsProvider


class RecordingProvider:
    """Provider over a live dict that records every id it was asked for."""

    def __init__(self, settings: Dict[str, Any] | None = None) -> None:
        self.settings: Dict[str, Any] = settings if settings is not None else {}
        self.calls: List[str] = []

    def get_current_settings(self, setting_id: str) -> Any:
        self.calls.append(setting_id)
        return self.settings.get(setting_id)


@pytest.fixture
def make_manager() -> Callable[..., BreakpointsManager]:
    def _make(settings: Dict[str, Any] | None = None) -> BreakpointsManager:
        return BreakpointsManager(DictSettingsProvider(settings))

    return _make


@pytest.fixture
def recording_provider() -> RecordingProvider:
    return RecordingProvider()
