"""Highlighter: code + language + theme -> styled runs."""

from __future__ import annotations

import logging
from typing import Callable, Protocol

from hilite.config import HighlighterConfig
from hilite.decoder import decode_html
from hilite.errors import HighlighterError, TokenizerError
from hilite.events import EventBus, HighlightFailed, ThemeChanged, ThemeLoadFailed
from hilite.line_numbers import LineNumberConfig, add_line_numbers
from hilite.model.font import FontCatalog, FontResolver
from hilite.model.runs import StyledText
from hilite.theme import BASE_SCOPE, Theme, ThemeLoader, build_theme, resolve_base_font
from hilite.tokenizer import UNDEFINED_RESULT, PygmentsTokenizer, Tokenizer

logger = logging.getLogger(__name__)


class HtmlRenderer(Protocol):
    """A host's generic HTML to styled text converter."""

    def __call__(self, document: str) -> StyledText | None: ...


def wrap_html(markup: str, theme: Theme) -> str:
    """Embed tokenizer markup in a standalone document styled by *theme*."""
    return (
        f"<style>{theme.css}</style>"
        f'<pre><code class="{BASE_SCOPE}">{markup}</code></pre>'
    )


def render(
    code: str,
    language: str | None,
    theme: Theme,
    tokenizer: Tokenizer,
    *,
    ignore_illegals: bool = False,
    line_numbers: LineNumberConfig | None = None,
) -> StyledText:
    """Tokenize and decode *code* with *theme*.

    Raises :class:`~hilite.errors.TokenizerError` (or its subclass
    ``UnknownLanguageError``) when the tokenizer produces nothing.
    """
    markup = tokenizer.tokenize(code, language, ignore_illegals)
    if markup == UNDEFINED_RESULT:
        raise TokenizerError(f"Tokenizer returned no result for {language or 'auto'}")
    return add_line_numbers(decode_html(markup, theme), line_numbers)


class Highlighter:
    """Highlights code with the currently selected theme.

    Failures (unknown language, unknown theme, unusable font) are logged
    and reported as ``None``; they never raise out of :meth:`highlight` or
    :meth:`set_theme`. The constructor does raise
    :class:`~hilite.errors.HighlighterError` if the initial theme cannot
    be built.
    """

    def __init__(
        self,
        config: HighlighterConfig | None = None,
        *,
        tokenizer: Tokenizer | None = None,
        loader: ThemeLoader | None = None,
        font_resolver: FontResolver | None = None,
        html_renderer: HtmlRenderer | None = None,
        events: EventBus | None = None,
    ) -> None:
        self.config = config or HighlighterConfig()
        self.tokenizer = tokenizer or PygmentsTokenizer()
        self.loader = loader or ThemeLoader(self.config.theme_dir)
        self.font_resolver = font_resolver or FontCatalog()
        self.html_renderer = html_renderer
        self.events = events or EventBus()
        self.ignore_illegals = self.config.ignore_illegals
        self._themes: dict[tuple[str, str | None, float], Theme] = {}
        self.theme: Theme = self.load_theme(
            self.config.theme, self.config.font_family, self.config.font_size
        )

    # -- themes --------------------------------------------------------------

    def load_theme(
        self,
        name: str,
        font_family: str | None = None,
        font_size: float | None = None,
    ) -> Theme:
        """Build (or reuse) theme *name* without selecting it.

        Raises :class:`~hilite.errors.ThemeNotFoundError` or
        :class:`~hilite.errors.FontResolutionError`.
        """
        key = (name, font_family, font_size or self.config.font_size)
        theme = self._themes.get(key)
        if theme is None:
            source = self.loader.load(name)
            theme = build_theme(
                name, source, font_family, key[2], resolver=self.font_resolver
            )
            self._themes[key] = theme
        return theme

    def set_theme(
        self,
        name: str,
        font_family: str | None = None,
        font_size: float | None = None,
    ) -> Theme | None:
        """Select theme *name*; on failure keep the current theme and return None."""
        try:
            theme = self.load_theme(name, font_family, font_size)
        except HighlighterError as exc:
            logger.warning("Could not set theme %r: %s", name, exc)
            self.events.emit(ThemeLoadFailed(name=name, error=str(exc)))
            return None
        self._select(theme)
        return theme

    def set_font(self, font_family: str, font_size: float | None = None) -> Theme | None:
        """Re-font the current theme, rebuilding its bold and italic variants."""
        try:
            font = resolve_base_font(
                font_family, font_size or self.theme.font.size, self.font_resolver
            )
        except HighlighterError as exc:
            logger.warning("Could not set font %r: %s", font_family, exc)
            return None
        theme = self.theme.with_font(font, self.font_resolver)
        self._select(theme)
        return theme

    def _select(self, theme: Theme) -> None:
        previous = self.theme.name
        self.theme = theme
        logger.info("Theme set to %r (%s)", theme.name, theme.font)
        self.events.emit(ThemeChanged(theme=theme, previous=previous))

    def on_theme_changed(
        self, callback: Callable[[ThemeChanged], None]
    ) -> Callable[[], None]:
        """Call *callback* after every successful theme or font change.

        Returns a function that removes the callback again.
        """
        return self.events.subscribe(ThemeChanged, callback)

    def available_themes(self) -> list[str]:
        return self.loader.list_themes()

    def supported_languages(self) -> list[str]:
        return self.tokenizer.list_languages()

    # -- highlighting --------------------------------------------------------

    def highlight(
        self,
        code: str,
        language: str | None = None,
        *,
        fast_render: bool | None = None,
        line_numbers: LineNumberConfig | None = None,
    ) -> StyledText | None:
        """Highlight *code*, auto-detecting the language when it is None.

        Returns None if the language is unknown, the tokenizer fails, or
        the slow path is requested without an ``html_renderer``.
        """
        if fast_render is None:
            fast_render = self.config.fast_render

        if fast_render:
            try:
                return render(
                    code,
                    language,
                    self.theme,
                    self.tokenizer,
                    ignore_illegals=self.ignore_illegals,
                    line_numbers=line_numbers,
                )
            except TokenizerError as exc:
                return self._failed(language, exc)

        if self.html_renderer is None:
            logger.warning("Slow rendering requested but no HTML renderer is configured")
            return None
        try:
            markup = self.tokenizer.tokenize(code, language, self.ignore_illegals)
        except TokenizerError as exc:
            return self._failed(language, exc)
        if markup == UNDEFINED_RESULT:
            return self._failed(language, TokenizerError("Tokenizer returned no result"))

        styled = self.html_renderer(wrap_html(markup, self.theme))
        if styled is None:
            return None
        return add_line_numbers(styled, line_numbers)

    def _failed(self, language: str | None, exc: Exception) -> None:
        logger.warning("Highlighting failed for %s: %s", language or "auto", exc)
        self.events.emit(HighlightFailed(language=language, error=str(exc)))
        return None
