"""Error hierarchy for hilite."""
from __future__ import annotations


class HighlighterError(Exception):
    """Base error for all hilite errors."""

    def __init__(self, message: str, *, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.cause = cause


# ---------------------------------------------------------------------------
# Tokenizer errors
# ---------------------------------------------------------------------------


class TokenizerError(HighlighterError):
    """The tokenizer failed to produce markup for the code."""


class UnknownLanguageError(TokenizerError):
    """The requested language is not supported by the tokenizer."""

    def __init__(self, language: str, **kwargs) -> None:
        super().__init__(f"Unknown language: {language!r}", **kwargs)
        self.language = language


# ---------------------------------------------------------------------------
# Theme errors
# ---------------------------------------------------------------------------


class ThemeNotFoundError(HighlighterError):
    """No theme stylesheet exists under the requested name."""

    def __init__(self, name: str, **kwargs) -> None:
        super().__init__(f"Theme not found: {name!r}", **kwargs)
        self.name = name


class FontResolutionError(HighlighterError):
    """Neither the requested font nor a platform default could be resolved."""
