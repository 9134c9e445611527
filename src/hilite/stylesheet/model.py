"""Stylesheet model: StyleRule and the per-class ClassStyle."""

from __future__ import annotations

from dataclasses import dataclass

from hilite.model.color import Color
from hilite.model.font import FontVariant


@dataclass(frozen=True)
class StyleRule:
    """One rule block: the class names it targets and its declarations.

    Class names are stored without the leading ``.``.
    """

    classes: tuple[str, ...]
    properties: dict[str, str]


@dataclass(frozen=True)
class ClassStyle:
    """The resolved attributes of one style class.

    A ``None`` field means the class does not set that attribute, so an
    enclosing scope's value stays in effect.
    """

    foreground: Color | None = None
    background: Color | None = None
    variant: FontVariant | None = None

    @property
    def is_empty(self) -> bool:
        return self.foreground is None and self.background is None and self.variant is None
