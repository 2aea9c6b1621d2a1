"""Render fenced code blocks, highlighting them with Pygments when possible."""

from __future__ import annotations

import re
import typing as typ
from html import escape
from textwrap import dedent

from markdown.preprocessors import Preprocessor
from pygments import highlight
from pygments.lexers import get_lexer_by_name
from pygments.util import ClassNotFound

if typ.TYPE_CHECKING:
    from markdown import Markdown
    from pygments.formatters.html import HtmlFormatter
    from pygments.lexer import Lexer

FENCED_INDENT_PATTERN = re.compile(r"^[ ]{1,3}([`~]{3,})", re.MULTILINE)
FENCED_BLOCK_PATTERN = re.compile(
    r"(?P<fence>^(?:~{3,}|`{3,}))[ ]*(?P<lang>[\w#.+-]*)[^\n]*\n"
    r"(?P<code>.*?)(?<=\n)(?P=fence)[ ]*$",
    re.MULTILINE | re.DOTALL,
)
LANGUAGE_ALIASES = {"htmlcb": "html", "latte": "html", "javascript": "js"}


def normalize_language(tag: str | None) -> str:
    """Lower-case a fence language tag and fold its aliases."""
    lang = (tag or "").strip().lower()
    return LANGUAGE_ALIASES.get(lang, lang)


def find_lexer(lang: str) -> Lexer | None:
    """Return the Pygments lexer registered for ``lang``, if any."""
    if not lang:
        return None
    try:
        return get_lexer_by_name(lang)
    except ClassNotFound:
        return None


def render_code_block(code: str, tag: str | None, formatter: HtmlFormatter) -> str:
    """Render ``code`` as ``<pre class="src-<lang>"><code>...</code></pre>``.

    Parameters
    ----------
    code : str
        Block content; common indentation is removed.
    tag : str or None
        Language tag declared on the fence.
    formatter : HtmlFormatter
        Pygments formatter configured with ``nowrap=True``.

    Returns
    -------
    str
        HTML for the block. Languages without a registered lexer are emitted
        escaped and unhighlighted; untagged blocks get a bare ``src-`` class.
    """
    lang = normalize_language(tag)
    source = dedent(code)
    lexer = find_lexer(lang)
    if lexer is None:
        content = escape(source, quote=False)
    else:
        content = highlight(source, lexer, formatter)
    return f'<pre class="src-{escape(lang, quote=True)}"><code>{content.rstrip()}</code></pre>'


def normalize_fenced_blocks(text: str) -> str:
    """Pull fences indented by up to three spaces back to the line start."""
    return FENCED_INDENT_PATTERN.sub(r"\1", text)


class CodeBlockPreprocessor(Preprocessor):
    """Replace fenced blocks with stashed, pre-rendered HTML."""

    def __init__(self, md: Markdown, formatter: HtmlFormatter) -> None:
        super().__init__(md)
        self.formatter = formatter

    def run(self, lines: list[str]) -> list[str]:
        """Return ``lines`` with each fenced block swapped for a placeholder."""
        text = "\n".join(lines)
        while match := FENCED_BLOCK_PATTERN.search(text):
            html = render_code_block(
                match.group("code"), match.group("lang"), self.formatter
            )
            placeholder = self.md.htmlStash.store(html)
            text = f"{text[: match.start()]}\n{placeholder}\n{text[match.end() :]}"
        return text.split("\n")


__all__ = [
    "LANGUAGE_ALIASES",
    "CodeBlockPreprocessor",
    "find_lexer",
    "normalize_fenced_blocks",
    "normalize_language",
    "render_code_block",
]
