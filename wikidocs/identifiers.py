"""Structured identifiers for wiki pages and link resolution results."""

from __future__ import annotations

import dataclasses as dc


@dc.dataclass(frozen=True, slots=True)
class PageId:
    """Reference to a single wiki page, optionally pointing at a section.

    Attributes
    ----------
    book : str
        Content collection the page belongs to (``www``, ``doc-2.1``, ...).
    lang : str
        Two-letter language code.
    name : str
        Slash-separated page path without leading or trailing slashes; the
        ``homepage`` sentinel marks the root page of a book.
    fragment : str | None
        Slugged anchor name (``toc-...``) or ``None``.
    """

    book: str
    lang: str
    name: str
    fragment: str | None = None

    def __str__(self) -> str:
        text = f"{self.book}:{self.lang}:{self.name}"
        if self.fragment:
            text = f"{text}#{self.fragment}"
        return text


@dc.dataclass(frozen=True, slots=True)
class LinkMatch:
    """Captured parts of a structured ``[book:][lang]name[#section]`` link.

    Absent parts are ``None`` rather than empty strings.
    """

    book: str | None
    lang: str | None
    name: str | None
    section: str | None


@dc.dataclass(frozen=True, slots=True)
class External:
    """Resolution result that is already a final URL (or literal text)."""

    url: str


@dc.dataclass(frozen=True, slots=True)
class Internal:
    """Resolution result pointing at another wiki page."""

    page_id: PageId


ResolutionOutcome = External | Internal


__all__ = ["External", "Internal", "LinkMatch", "PageId", "ResolutionOutcome"]
