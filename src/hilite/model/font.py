"""Font model, font variants and the font lookup capability."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Mapping, Protocol

FACE_REGULAR = "Regular"
FACE_BOLD = "Bold"
FACE_ITALIC = "Italic"
FACE_OBLIQUE = "Oblique"
FACE_ULTRALIGHT = "UltraLight"

DEFAULT_FAMILY = "Courier"
PLATFORM_DEFAULT_FAMILY = "monospace"
DEFAULT_SIZE = 14.0


@dataclass(frozen=True)
class Font:
    """A resolved, renderable font: family, face and point size."""

    family: str
    size: float = DEFAULT_SIZE
    face: str = FACE_REGULAR

    @property
    def is_bold(self) -> bool:
        return self.face == FACE_BOLD

    @property
    def is_italic(self) -> bool:
        return self.face in (FACE_ITALIC, FACE_OBLIQUE)

    def __str__(self) -> str:
        return f"{self.family} {self.face} {self.size:g}pt"


class FontVariant(Enum):
    """Which of a theme's three fonts a style class selects."""

    BASE = "base"
    BOLD = "bold"
    ITALIC = "italic"


_BOLD_VALUES = frozenset({"bold", "bolder", "600", "700", "800", "900"})
_ITALIC_VALUES = frozenset({"italic", "oblique"})


def font_variant(value: str) -> FontVariant:
    """Map a ``font-weight`` or ``font-style`` value to a font variant."""
    value = value.strip()
    if value in _BOLD_VALUES:
        return FontVariant.BOLD
    if value in _ITALIC_VALUES:
        return FontVariant.ITALIC
    return FontVariant.BASE


class FontResolver(Protocol):
    """Turns a family name and face into a font, or None when unavailable."""

    def resolve(self, family: str, face: str, size: float) -> Font | None: ...


# Faces provided by each family known to the default catalog.
_DEFAULT_FAMILIES: dict[str, frozenset[str]] = {
    "courier": frozenset({FACE_REGULAR, FACE_BOLD, FACE_OBLIQUE}),
    "courier new": frozenset({FACE_REGULAR, FACE_BOLD, FACE_ITALIC}),
    "menlo": frozenset({FACE_REGULAR, FACE_BOLD, FACE_ITALIC}),
    "monaco": frozenset({FACE_REGULAR}),
    "consolas": frozenset({FACE_REGULAR, FACE_BOLD, FACE_ITALIC}),
    "dejavu sans mono": frozenset({FACE_REGULAR, FACE_BOLD, FACE_OBLIQUE}),
    "fira code": frozenset({FACE_REGULAR, FACE_BOLD}),
    "jetbrains mono": frozenset({FACE_REGULAR, FACE_BOLD, FACE_ITALIC}),
    "sf mono": frozenset({FACE_REGULAR, FACE_BOLD, FACE_ITALIC, FACE_ULTRALIGHT}),
    "monospace": frozenset({FACE_REGULAR, FACE_BOLD, FACE_ITALIC, FACE_ULTRALIGHT}),
}


class FontCatalog:
    """A table-driven :class:`FontResolver`.

    Family names match case-insensitively; the returned font keeps the
    family name as the caller spelled it.
    """

    def __init__(self, families: Mapping[str, frozenset[str]] | None = None) -> None:
        source = _DEFAULT_FAMILIES if families is None else families
        self._families = {name.lower(): frozenset(faces) for name, faces in source.items()}

    def resolve(self, family: str, face: str, size: float) -> Font | None:
        faces = self._families.get(family.lower())
        if faces is None or face not in faces:
            return None
        return Font(family=family, size=size, face=face)

    def families(self) -> list[str]:
        return sorted(self._families)
