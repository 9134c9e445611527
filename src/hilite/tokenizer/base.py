"""Tokenizer protocol definition."""

from __future__ import annotations

from typing import Protocol

# Some tokenizers report failure through their output instead of an error.
UNDEFINED_RESULT = "undefined"


class Tokenizer(Protocol):
    """Turns code into HTML with ``<span class="...">`` markup.

    ``tokenize`` raises :class:`~hilite.errors.UnknownLanguageError` for a
    language it does not know; ``language=None`` asks for auto-detection.
    """

    def tokenize(
        self, code: str, language: str | None = None, ignore_illegals: bool = False
    ) -> str: ...

    def list_languages(self) -> list[str]: ...
