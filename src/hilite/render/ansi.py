"""Render styled runs for a 24-bit color terminal."""

from __future__ import annotations

import click

from hilite.model.color import Color
from hilite.model.runs import StyledRun, StyledText


def _terminal_color(color: Color | None) -> tuple[int, int, int] | None:
    # Terminals have no alpha; translucent colors are shown opaque.
    return color.to_rgb255() if color is not None else None


def _style_run(run: StyledRun, background: Color | None) -> str:
    attrs = run.attributes
    options = {
        "fg": _terminal_color(attrs.foreground),
        "bg": _terminal_color(attrs.background or background),
        "bold": attrs.font.is_bold or None,
        "italic": attrs.font.is_italic or None,
    }
    # Style each line separately so a background never runs past a newline.
    lines = run.text.split("\n")
    return "\n".join(click.style(line, **options) if line else "" for line in lines)


def to_ansi(styled: StyledText, background: Color | None = None) -> str:
    """Return *styled* as text with ANSI escape sequences.

    *background* is used for runs that set no background of their own.
    """
    return "".join(_style_run(run, background) for run in styled)
