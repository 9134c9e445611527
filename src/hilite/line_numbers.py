"""Prefix already-styled output with zero-padded line numbers."""

from __future__ import annotations

from dataclasses import dataclass

from hilite.model.color import Color
from hilite.model.font import FACE_ULTRALIGHT, PLATFORM_DEFAULT_FAMILY, Font
from hilite.model.runs import StyledText, TextAttributes

DEFAULT_SEPARATOR = "  "
DEFAULT_FONT_SIZE = 16.0
MIN_WIDTH = 2

_NUMBER_ALPHA = 0.2
_DARK_THEME_NUMBER = Color.white(0.8, _NUMBER_ALPHA)
_LIGHT_THEME_NUMBER = Color.white(0.2, _NUMBER_ALPHA)


@dataclass(frozen=True)
class LineNumberConfig:
    """Options for one line-numbering pass.

    Out-of-range values are normalized rather than rejected: ``start``
    below 1 becomes 1, ``min_width`` below 2 becomes 2 and an empty
    ``separator`` becomes two spaces.
    """

    start: int = 1
    min_width: int = MIN_WIDTH
    separator: str = DEFAULT_SEPARATOR
    line_break: str = "\n"
    using_dark_theme: bool = False
    font_size: float = DEFAULT_FONT_SIZE

    def __post_init__(self) -> None:
        if not self.line_break:
            raise ValueError("line_break must be a non-empty string")
        object.__setattr__(self, "start", max(self.start, 1))
        object.__setattr__(self, "min_width", max(self.min_width, MIN_WIDTH))
        if not self.separator:
            object.__setattr__(self, "separator", DEFAULT_SEPARATOR)


def number_width(line_count: int, config: LineNumberConfig) -> int:
    """Digits needed for the highest line number.

    Grows by one digit per factor of 100 above 99, starting from
    ``config.min_width``.
    """
    width = config.min_width
    total = line_count + (config.start - 1 if config.start > 1 else 0)
    while total > 99:
        width += 1
        total //= 100
    return width


def number_attributes(config: LineNumberConfig) -> TextAttributes:
    color = _DARK_THEME_NUMBER if config.using_dark_theme else _LIGHT_THEME_NUMBER
    font = Font(family=PLATFORM_DEFAULT_FAMILY, size=config.font_size, face=FACE_ULTRALIGHT)
    return TextAttributes(font=font, foreground=color)


def add_line_numbers(styled: StyledText, config: LineNumberConfig | None) -> StyledText:
    """Return *styled* with every line prefixed by its number.

    Each line becomes: number, separator, the line's original runs, line
    break. The number, separator and break share the number style. A
    ``None`` config returns *styled* unchanged.
    """
    if config is None:
        return styled

    lines = styled.split(config.line_break)
    width = number_width(len(lines), config)
    attributes = number_attributes(config)

    result = StyledText()
    for number, line in enumerate(lines, start=max(config.start, 1)):
        result.append(f"{number:0{width}d}", attributes)
        result.append(config.separator, attributes)
        result.extend(line)
        result.append(config.line_break, attributes)
    return result
