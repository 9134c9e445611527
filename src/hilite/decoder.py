"""Convert tokenizer HTML into styled runs in one forward pass.

The tokenizer emits a fixed grammar: text, ``<span class="NAME">`` and
``</span>``, with ``&``, ``<`` and ``>`` escaped as entities. This module
reads exactly that grammar; it is not a general HTML parser. Anything that
looks like a tag but is neither form is emitted as literal text.
"""

from __future__ import annotations

import html
import logging
import re
from dataclasses import replace

from hilite.model.runs import StyledText, TextAttributes
from hilite.theme.theme import BASE_SCOPE, Theme

logger = logging.getLogger(__name__)

TAG_START = "<"
SPAN_OPEN = 'span class="'
SPAN_OPEN_END = '">'
SPAN_CLOSE = "/span>"

_ENTITY_RE = re.compile(r"&#?[a-z0-9]+?;", re.IGNORECASE)


class _Cursor:
    """A read position over an immutable string. Every read is bounds-checked."""

    __slots__ = ("text", "pos")

    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0

    @property
    def at_end(self) -> bool:
        return self.pos >= len(self.text)

    def peek(self) -> str:
        """Return the character under the cursor, or ``""`` at the end."""
        return self.text[self.pos] if self.pos < len(self.text) else ""

    def advance(self, count: int = 1) -> None:
        self.pos = min(self.pos + count, len(self.text))

    def skip(self, token: str) -> bool:
        """Step over *token* if it is next; report whether it was."""
        if self.text.startswith(token, self.pos):
            self.pos += len(token)
            return True
        return False

    def read_until(self, marker: str) -> tuple[str, bool]:
        """Read up to *marker* (not consumed) or the end of the text.

        Returns the text read and whether the marker was found.
        """
        index = self.text.find(marker, self.pos)
        found = index != -1
        if not found:
            index = len(self.text)
        chunk = self.text[self.pos : index]
        self.pos = index
        return chunk, found


class ScopeStack:
    """The open style classes, outermost first.

    The bottom entry is always :data:`BASE_SCOPE`. The composed attributes
    for every depth are cached, so push and pop are the only points where
    styles are resolved.
    """

    def __init__(self, theme: Theme) -> None:
        self._theme = theme
        self._names: list[str] = [BASE_SCOPE]
        self._attributes: list[TextAttributes] = [
            self._compose(theme.base_attributes, BASE_SCOPE)
        ]

    @property
    def depth(self) -> int:
        return len(self._names)

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(self._names)

    @property
    def attributes(self) -> TextAttributes:
        """Attributes in effect for text emitted at the current depth."""
        return self._attributes[-1]

    def push(self, scope: str) -> None:
        self._names.append(scope)
        self._attributes.append(self._compose(self._attributes[-1], scope))

    def pop(self) -> bool:
        """Close the innermost scope. Closing the base scope is a no-op."""
        if len(self._names) == 1:
            logger.debug("Ignoring unmatched </span>")
            return False
        self._names.pop()
        self._attributes.pop()
        return True

    def _compose(self, attributes: TextAttributes, scope: str) -> TextAttributes:
        styles = self._theme.styles
        # A class attribute may list several classes ("hljs-title function_").
        names = (scope,) if scope in styles else scope.split()
        for name in names:
            style = styles.get(name)
            if style is None:
                continue
            if style.variant is not None:
                attributes = replace(attributes, font=self._theme.font_for(style.variant))
            if style.foreground is not None:
                attributes = replace(attributes, foreground=style.foreground)
            if style.background is not None:
                attributes = replace(attributes, background=style.background)
        return attributes


class HtmlRunDecoder:
    """Decodes tokenizer HTML into :class:`StyledText` using one theme."""

    def __init__(self, theme: Theme) -> None:
        self.theme = theme

    def decode(self, markup: str) -> StyledText:
        """Decode *markup*. Never raises on malformed input.

        A tag cut off by the end of the input ends the scan; the runs
        produced so far are returned.
        """
        result = StyledText()
        stack = ScopeStack(self.theme)
        cursor = _Cursor(markup)

        while not cursor.at_end:
            text, found = cursor.read_until(TAG_START)
            result.append(text, stack.attributes)
            if not found:
                break

            cursor.advance()
            next_char = cursor.peek()
            if next_char == "s" and cursor.skip(SPAN_OPEN):
                scope, closed = cursor.read_until(SPAN_OPEN_END)
                if not closed:
                    logger.debug("Unterminated span tag at offset %d", cursor.pos)
                    break
                cursor.skip(SPAN_OPEN_END)
                stack.push(scope)
            elif next_char == "/" and cursor.skip(SPAN_CLOSE):
                stack.pop()
            else:
                # Not a tag: keep the bracket and rescan from the next character.
                result.append(TAG_START, stack.attributes)

        if stack.depth > 1:
            logger.debug("%d span(s) left open at end of input", stack.depth - 1)
        return decode_entities(result)


def decode_html(markup: str, theme: Theme) -> StyledText:
    """Decode tokenizer *markup* with *theme*."""
    return HtmlRunDecoder(theme).decode(markup)


def decode_entities(styled: StyledText) -> StyledText:
    """Replace character entity references throughout *styled*.

    Matches are found in the concatenated text, so offsets are global; each
    run is rebuilt with its matches replaced. Unknown entities are kept as
    written. A reference spanning two runs is decoded into the first.
    """
    text = styled.text
    matches = list(_ENTITY_RE.finditer(text))
    if not matches:
        return styled

    result = StyledText()
    index = 0
    consumed = 0
    run_start = 0
    for run in styled:
        run_end = run_start + len(run.text)
        pieces = []
        cursor = max(run_start, consumed)
        while index < len(matches) and matches[index].start() < run_end:
            match = matches[index]
            entity = match.group()
            decoded = html.unescape(entity)
            pieces.append(text[cursor : match.start()])
            pieces.append(decoded)
            cursor = match.end()
            index += 1
        if cursor < run_end:
            pieces.append(text[cursor:run_end])
        consumed = cursor
        result.append("".join(pieces), run.attributes)
        run_start = run_end
    return result
