"""Utilities for rendering prose markdown and syntax-highlighted code samples."""

from __future__ import annotations

import logging
import re
from html import escape

from markdown import Markdown
from pygments import highlight
from pygments.formatters.html import HtmlFormatter
from pygments.lexers import get_lexer_by_name, guess_lexer
from pygments.util import ClassNotFound

logger = logging.getLogger(__name__)

CODEHILITE_OPEN_TAG = re.compile(r'<div class="codehilite">')
LANGUAGE_ALIASES: dict[str, str] = {
    "js": "javascript",
    "ts": "typescript",
}


class HtmlContentRenderer:
    """Render markdown and code snippets with consistent styling."""

    def __init__(self, pygments_style: str = "monokai") -> None:
        """Initialize a renderer with the Pygments style used for code blocks."""
        self.pygments_style = pygments_style
        self._formatter = HtmlFormatter(style=pygments_style, cssclass="codehilite")
        self._markdown_extensions = ["sane_lists", "tables", "fenced_code"]

    @property
    def stylesheet(self) -> str:
        """Return the CSS used for highlighted code blocks."""
        return self._formatter.get_style_defs(".codehilite")

    def markdown(self, text: str | None) -> str:
        """Render descriptive prose into HTML; blank input yields ``""``."""
        normalized = (text or "").strip()
        if not normalized:
            return ""
        md = Markdown(extensions=self._markdown_extensions, output_format="html")
        return md.convert(normalized)

    def code_block(self, code: str, language: str | None = None) -> str:
        """Render ``code`` into highlighted HTML with a language tag.

        Parameters
        ----------
        code : str
            Source snippet to highlight.
        language : str, optional
            Language tag from the corpus. Unknown tags fall back to a lexer
            guessed from the code itself, and then to plain text.

        Returns
        -------
        str
            HTML containing the highlighted block with ``data-language``
            metadata set to the tag as written in the corpus.
        """
        lang = (language or "text").strip() or "text"
        lexer_name = LANGUAGE_ALIASES.get(lang.lower(), lang.lower())
        try:
            lexer = get_lexer_by_name(lexer_name)
        except ClassNotFound:
            logger.warning("no lexer for %r; guessing from content", lang)
            try:
                lexer = guess_lexer(code)
            except ClassNotFound:
                lexer = get_lexer_by_name("text")
        html = highlight(code, lexer, self._formatter)
        return self._attach_language_attribute(html, lang)

    @staticmethod
    def _attach_language_attribute(html: str, language: str) -> str:
        """Add a single language attribute to an already highlighted block."""
        safe_lang = escape(language or "text", quote=True)

        def _repl(match: re.Match[str]) -> str:
            return f'<div class="codehilite" data-language="{safe_lang}">'

        return CODEHILITE_OPEN_TAG.sub(_repl, html, 1)


__all__ = ["LANGUAGE_ALIASES", "HtmlContentRenderer"]
