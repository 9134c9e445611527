"""Event types emitted by the highlighter."""

from __future__ import annotations

from dataclasses import dataclass

from hilite.theme.theme import Theme


class HighlighterEvent:
    """Base class of every highlighter notification."""


@dataclass(frozen=True)
class ThemeChanged(HighlighterEvent):
    """A theme or font change took effect."""

    theme: Theme
    previous: str


@dataclass(frozen=True)
class ThemeLoadFailed(HighlighterEvent):
    name: str
    error: str


@dataclass(frozen=True)
class HighlightFailed(HighlighterEvent):
    language: str | None
    error: str
