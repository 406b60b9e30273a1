"""Syntax highlighting for fenced code blocks.

Cards end up inside Anki, which has no access to an external stylesheet, so
highlighting is rendered with inline styles. Unknown or missing language tags
always fall back to the plain text lexer.
"""

from __future__ import annotations

from functools import lru_cache

from pygments import highlight
from pygments.formatters import HtmlFormatter
from pygments.lexer import Lexer
from pygments.lexers import TextLexer, get_lexer_by_name, get_lexer_for_filename
from pygments.util import ClassNotFound

from vault2anki.utils.logging import get_logger

logger = get_logger(__name__)

DEFAULT_STYLE = "default"


@lru_cache(maxsize=None)
def _resolve_lexer(key: str) -> Lexer:
    """Resolve a normalised language tag, memoised for the process."""
    if not key:
        return TextLexer()
    try:
        return get_lexer_by_name(key)
    except ClassNotFound:
        pass
    try:
        return get_lexer_for_filename(f"snippet.{key}")
    except ClassNotFound:
        logger.debug(f"No lexer for {key!r}, rendering as plain text")
        return TextLexer()


class CodeRenderer:
    """Render code to highlighted HTML with a fixed style."""

    def __init__(self, style: str = DEFAULT_STYLE) -> None:
        try:
            self._formatter = HtmlFormatter(noclasses=True, style=style)
        except ClassNotFound:
            logger.warning(f"Unknown highlight style {style!r}, using {DEFAULT_STYLE!r}")
            self._formatter = HtmlFormatter(noclasses=True, style=DEFAULT_STYLE)

    def lexer_for(self, lang: str | None) -> Lexer:
        """Resolve a language tag to a lexer.

        Tags are matched against lexer aliases first and file extensions
        second (so both ``python`` and ``py`` work).

        Args:
            lang: Language tag from the code fence, possibly empty

        Returns:
            Matching lexer, or a plain text lexer
        """
        return _resolve_lexer((lang or "").strip().lower())

    def render(self, code: str, lang: str | None = None) -> str:
        """Render code as highlighted HTML.

        Args:
            code: Raw code text
            lang: Optional language tag

        Returns:
            HTML markup with inline styles
        """
        return highlight(code, self.lexer_for(lang), self._formatter)


@lru_cache(maxsize=None)
def get_code_renderer(style: str = DEFAULT_STYLE) -> CodeRenderer:
    """Return the process-wide renderer for a style."""
    return CodeRenderer(style)
