"""Pygments-backed tokenizer emitting highlight.js style markup."""

from __future__ import annotations

import logging

import pygments
from pygments.formatter import Formatter
from pygments.lexer import Lexer
from pygments.lexers import get_all_lexers, get_lexer_by_name, guess_lexer
from pygments.token import (
    Comment,
    Error,
    Generic,
    Keyword,
    Name,
    Number,
    Operator,
    String,
    Token,
    _TokenType,
)
from pygments.util import ClassNotFound

from hilite.errors import TokenizerError, UnknownLanguageError

logger = logging.getLogger(__name__)

CLASS_PREFIX = "hljs-"

# Pygments token type -> highlight.js scope. Subtypes inherit from the
# nearest listed ancestor; unlisted types get no span.
SCOPES: dict[_TokenType, str] = {
    Comment: "comment",
    Comment.Preproc: "meta",
    Comment.PreprocFile: "meta string",
    Keyword: "keyword",
    Keyword.Constant: "literal",
    Keyword.Type: "type",
    Name.Builtin: "built_in",
    Name.Builtin.Pseudo: "variable language_",
    Name.Class: "title class_",
    Name.Exception: "title class_",
    Name.Function: "title function_",
    Name.Decorator: "meta",
    Name.Tag: "name",
    Name.Attribute: "attr",
    Name.Variable: "variable",
    Name.Constant: "variable constant_",
    Name.Label: "symbol",
    String: "string",
    String.Escape: "char escape_",
    String.Interpol: "subst",
    String.Regex: "regexp",
    String.Symbol: "symbol",
    Number: "number",
    Operator: "operator",
    Operator.Word: "keyword",
    Generic.Heading: "section",
    Generic.Subheading: "section",
    Generic.Deleted: "deletion",
    Generic.Inserted: "addition",
    Generic.Emph: "emphasis",
    Generic.Strong: "strong",
}

_ESCAPES = {
    ord("&"): "&amp;",
    ord("<"): "&lt;",
    ord(">"): "&gt;",
    ord('"'): "&quot;",
    ord("'"): "&#x27;",
}


def escape(text: str) -> str:
    return text.translate(_ESCAPES)


def _class_attribute(scope: str) -> str:
    # Sub-scopes such as "function_" are left unprefixed, as highlight.js does.
    return " ".join(
        part if part.endswith("_") else CLASS_PREFIX + part for part in scope.split()
    )


def scope_for(ttype: _TokenType) -> str | None:
    """Return the span class for *ttype*, or None for unstyled text."""
    while ttype is not None and ttype is not Token:
        scope = SCOPES.get(ttype)
        if scope is not None:
            return _class_attribute(scope)
        ttype = ttype.parent
    return None


class HljsSpanFormatter(Formatter):
    """Write tokens as flat ``<span class="hljs-...">`` runs.

    Consecutive tokens with the same scope share one span.
    """

    name = "hljs spans"
    aliases = ["hljs"]

    def format(self, tokensource, outfile):
        current: str | None = None
        buffer: list[str] = []

        def flush() -> None:
            if not buffer:
                return
            text = escape("".join(buffer))
            if current is None:
                outfile.write(text)
            else:
                outfile.write(f'<span class="{current}">{text}</span>')
            buffer.clear()

        for ttype, value in tokensource:
            scope = scope_for(ttype)
            if scope != current:
                flush()
                current = scope
            buffer.append(value)
        flush()


class PygmentsTokenizer:
    """A :class:`~hilite.tokenizer.base.Tokenizer` built on Pygments."""

    def __init__(self) -> None:
        self._formatter = HljsSpanFormatter()

    def _lexer(self, code: str, language: str | None) -> Lexer:
        options = {"stripnl": False, "ensurenl": False}
        if language is None:
            try:
                return guess_lexer(code, **options)
            except ClassNotFound as exc:
                raise TokenizerError("Could not detect a language", cause=exc) from exc
        try:
            return get_lexer_by_name(language, **options)
        except ClassNotFound as exc:
            raise UnknownLanguageError(language, cause=exc) from exc

    def tokenize(
        self, code: str, language: str | None = None, ignore_illegals: bool = False
    ) -> str:
        """Highlight *code* as HTML markup.

        Unless *ignore_illegals* is set, code the lexer cannot read is
        returned escaped and without markup.
        """
        lexer = self._lexer(code, language)
        tokens = list(lexer.get_tokens(code))
        if not ignore_illegals and any(ttype in Error for ttype, _ in tokens):
            logger.debug("Illegal syntax for %s, returning plain text", lexer.name)
            return escape("".join(value for _, value in tokens))
        return pygments.format(tokens, self._formatter)

    def list_languages(self) -> list[str]:
        """Return the primary alias of every lexer."""
        return sorted({aliases[0] for _, aliases, _, _ in get_all_lexers() if aliases})
