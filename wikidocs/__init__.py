"""Render wiki markup for a documentation site.

This package resolves ``[book:lang:path#section]`` cross-references into
canonical site URLs, flags broken references, and renders wiki pages through
Python-Markdown with Pygments highlighting. It also exposes the ``wikidocs``
console script.

Exports
-------
- ``Convertor``: renders markup into a :class:`Page`.
- ``PageId``: identifier of a wiki page.
- ``resolve_link`` / ``create_url``: the link resolution core.
- ``app`` / ``main``: Cyclopts CLI entry points.

Examples
--------
>>> from wikidocs import Convertor, PageId
>>> page = Convertor().parse(PageId("www", "en", "homepage"), "# Hello")
>>> page.title
'Hello'
"""

from __future__ import annotations

from .cli import app, main
from .context import Page, RenderContext
from .convertor import Convertor
from .identifiers import External, Internal, PageId
from .resolver import resolve_link
from .urls import create_url

__all__ = [
    "Convertor",
    "External",
    "Internal",
    "Page",
    "PageId",
    "RenderContext",
    "app",
    "create_url",
    "main",
    "resolve_link",
]
