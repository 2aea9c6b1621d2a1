"""Markdown hooks that turn wiki markup into HTML pages."""

from .code_blocks import normalize_language, render_code_block
from .directives import Directive, apply_directive, parse_directive
from .link_rewriter import LinkRewriter
from .renderer import Convertor, WikiExtension
from .toc import Heading, TocEntry, extract_toc

__all__ = [
    "Convertor",
    "Directive",
    "Heading",
    "LinkRewriter",
    "TocEntry",
    "WikiExtension",
    "apply_directive",
    "extract_toc",
    "normalize_language",
    "parse_directive",
    "render_code_block",
]
