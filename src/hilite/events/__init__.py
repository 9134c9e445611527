"""Event system: bus and event types for theme and highlight notifications."""

from hilite.events.bus import EventBus
from hilite.events.types import (
    HighlighterEvent,
    HighlightFailed,
    ThemeChanged,
    ThemeLoadFailed,
)

__all__ = [
    "EventBus",
    "HighlighterEvent",
    "HighlightFailed",
    "ThemeChanged",
    "ThemeLoadFailed",
]
