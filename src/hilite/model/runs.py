"""Styled text runs: the rendered-text boundary of the highlighter."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, Iterator

from hilite.model.color import Color
from hilite.model.font import Font


@dataclass(frozen=True)
class TextAttributes:
    """The attributes applied to a run: a font and optional colors."""

    font: Font
    foreground: Color | None = None
    background: Color | None = None

    def to_dict(self) -> dict[str, Any]:
        """Return the attribute map, keyed the way hosts expect."""
        attrs: dict[str, Any] = {"font": self.font}
        if self.foreground is not None:
            attrs["foreground-color"] = self.foreground
        if self.background is not None:
            attrs["background-color"] = self.background
        return attrs


@dataclass(frozen=True)
class StyledRun:
    """A contiguous span of text and the attributes in effect for it."""

    text: str
    attributes: TextAttributes

    def __len__(self) -> int:
        return len(self.text)


@dataclass
class StyledText:
    """An ordered sequence of styled runs.

    Runs are kept exactly as appended: adjacent runs with equal attributes
    are not merged.
    """

    runs: list[StyledRun] = field(default_factory=list)

    @property
    def text(self) -> str:
        """The plain text of every run, concatenated."""
        return "".join(run.text for run in self.runs)

    def append(self, text: str, attributes: TextAttributes) -> None:
        """Append a run; empty text is ignored."""
        if text:
            self.runs.append(StyledRun(text, attributes))

    def extend(self, other: Iterable[StyledRun]) -> None:
        self.runs.extend(other)

    def __iter__(self) -> Iterator[StyledRun]:
        return iter(self.runs)

    def __len__(self) -> int:
        return len(self.runs)

    def __add__(self, other: StyledText) -> StyledText:
        return StyledText(self.runs + other.runs)

    def split(self, separator: str) -> list[StyledText]:
        """Split at every occurrence of *separator*, like ``str.split``.

        The split happens on the plain text, so a separator may straddle
        two runs. N separators give N + 1 parts; each fragment keeps the
        attributes of the run it came from.
        """
        if not separator:
            raise ValueError("empty separator")
        runs = self.runs
        parts: list[StyledText] = []
        index = 0
        run_start = 0
        start = 0
        for piece in self.text.split(separator):
            end = start + len(piece)
            while index < len(runs) and run_start + len(runs[index].text) <= start:
                run_start += len(runs[index].text)
                index += 1
            part = StyledText()
            j, j_start = index, run_start
            while j < len(runs) and j_start < end:
                run = runs[j]
                lo = max(start, j_start) - j_start
                hi = min(end, j_start + len(run.text)) - j_start
                part.append(run.text[lo:hi], run.attributes)
                j_start += len(run.text)
                j += 1
            parts.append(part)
            start = end + len(separator)
        return parts

    def to_dicts(self) -> list[dict[str, Any]]:
        """Serialize as ``{"text": ..., **attributes}`` mappings."""
        return [{"text": run.text, **run.attributes.to_dict()} for run in self.runs]
