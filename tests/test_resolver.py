"""Unit tests for link classification and resolution.

These tests drive :func:`wikidocs.resolver.resolve_link` directly with a
render context rooted at ``doc:en:guide/intro`` and cover every class of
link target: external URLs, section anchors, structured internal references
and the books that map straight onto URLs (``download``, ``attachment``,
``api``, ``user``, ``php``).

Usage
-----
Run ``pytest tests/test_resolver.py -v``.
"""

from __future__ import annotations

import typing as typ

import pytest

from wikidocs.identifiers import External, Internal, LinkMatch, PageId
from wikidocs.resolver import parse_link, resolve_link, section_anchor

if typ.TYPE_CHECKING:
    from wikidocs.context import RenderContext

MakeContext = typ.Callable[..., "RenderContext"]


@pytest.mark.parametrize(
    "raw",
    [
        "http://example.com/a b",
        "https://nette.org",
        "HTTPS://NETTE.ORG",
        "ftp://files.example.org",
        "ftp.example.org",
        "www.example.org/page",
        "mailto:dev@example.org",
        "dev@example.org",
    ],
)
def test_external_targets_are_returned_verbatim(
    raw: str, make_context: MakeContext
) -> None:
    """URLs and e-mail addresses pass through untouched."""
    assert resolve_link(raw, make_context()) == External(raw)


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("#Getting Started", "#toc-getting-started"),
        ("#toc-getting-started", "#toc-getting-started"),
        ("#Příliš žluťoučký", "#toc-prilis-zlutoucky"),
        ("#", "#toc-"),
    ],
)
def test_section_anchor_links(raw: str, expected: str, make_context: MakeContext) -> None:
    """Anchors get the ``toc-`` prefix exactly once and are slugged."""
    assert resolve_link(raw, make_context()) == External(expected)


def test_section_anchor_is_idempotent(make_context: MakeContext) -> None:
    """Resolving an already resolved anchor yields the same anchor."""
    ctx = make_context()
    first = resolve_link("#Some Section", ctx)
    assert isinstance(first, External)
    assert resolve_link(first.url, ctx) == first


def test_parse_link_maps_absent_groups_to_none() -> None:
    """Missing parts of a structured link are ``None``, not empty strings."""
    assert parse_link("setup") == LinkMatch(None, None, "setup", None)
    assert parse_link("doc-2.1:cs:forms#rules") == LinkMatch(
        "doc-2.1", "cs", ":forms", "rules"
    )
    assert parse_link("en") == LinkMatch(None, "en", None, None)


def test_unparseable_link_degrades_to_literal(make_context: MakeContext) -> None:
    """Targets the structured pattern cannot match come back unchanged."""
    raw = "first#line\nsecond"
    assert resolve_link(raw, make_context()) == External(raw)


def test_relative_name_expands_against_current_directory(
    make_context: MakeContext,
) -> None:
    """Unqualified names resolve next to the current page."""
    outcome = resolve_link("setup", make_context())
    assert outcome == Internal(PageId("doc", "en", "guide/setup"))


def test_leading_slash_keeps_name_absolute(make_context: MakeContext) -> None:
    """A leading slash opts out of relative expansion."""
    outcome = resolve_link("/setup/", make_context())
    assert outcome == Internal(PageId("doc", "en", "setup"))


def test_qualified_names_are_not_expanded(make_context: MakeContext) -> None:
    """Explicit book or language disables relative expansion."""
    ctx = make_context()
    assert resolve_link("cs:setup", ctx) == Internal(PageId("doc", "cs", "setup"))
    assert resolve_link("www:about", ctx) == Internal(PageId("www", "en", "about"))


def test_top_level_page_does_not_expand(make_context: MakeContext) -> None:
    """Pages without a directory resolve unqualified names at the book root."""
    outcome = resolve_link("setup", make_context(name="intro"))
    assert outcome == Internal(PageId("doc", "en", "setup"))


def test_colons_fold_into_slashes(make_context: MakeContext) -> None:
    """``:`` separators in names become path separators."""
    outcome = resolve_link("nette:en:forms:validation/", make_context())
    assert outcome == Internal(PageId("nette", "en", "forms/validation"))


@pytest.mark.parametrize("raw", ["www:", "www:en:", "www:HomePage", "www:/homepage/"])
def test_homepage_collapses_to_sentinel(raw: str, make_context: MakeContext) -> None:
    """Empty names and any spelling of the homepage collapse to the sentinel."""
    outcome = resolve_link(raw, make_context())
    assert isinstance(outcome, Internal)
    assert outcome.page_id.name == "homepage"


def test_versioned_book_with_section(make_context: MakeContext) -> None:
    """Versioned books, languages and sections are captured together."""
    outcome = resolve_link("doc-2.1:cs:forms#toc-Validation Rules", make_context())
    assert outcome == Internal(
        PageId("doc-2.1", "cs", "forms", "toc-validation-rules")
    )


def test_meta_book_defaults_to_www(make_context: MakeContext) -> None:
    """Links written on ``meta`` pages default to the ``www`` book."""
    outcome = resolve_link("about", make_context(book="meta", name="rules"))
    assert outcome == Internal(PageId("www", "en", "about"))


def test_download_links(make_context: MakeContext) -> None:
    """Download links point into the download directory."""
    outcome = resolve_link("download:nette:2.1/", make_context())
    assert outcome == External("https://files.example.org/download/nette/2.1")


def test_attachment_present(make_context: MakeContext, file_exists: typ.Any) -> None:
    """Existing attachments resolve without warnings."""
    ctx = make_context()
    outcome = resolve_link("attachment:manual.pdf", ctx)
    assert outcome == External("/media/doc/manual.pdf")
    file_exists.assert_called_once_with("/srv/media/doc/manual.pdf")
    assert ctx.warnings == []


def test_attachment_missing_records_warning(
    make_context: MakeContext, file_exists: typ.Any
) -> None:
    """Missing attachments still resolve but add exactly one warning."""
    file_exists.return_value = False
    ctx = make_context()
    outcome = resolve_link("attachment:img/logo.png", ctx)
    assert outcome == External("/media/doc/img/logo.png")
    assert ctx.warnings == ["Missing file img/logo.png"]


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("api:Foo\\Bar::baz()", "https://api.example.org/Foo.Bar.html#_baz"),
        ("api:Foo\\Bar::VERSION", "https://api.example.org/Foo.Bar.html#VERSION"),
        ("api:Nette\\Forms\\Form", "https://api.example.org/Nette.Forms.Form.html"),
    ],
)
def test_api_links(raw: str, expected: str, make_context: MakeContext) -> None:
    """Classes, members and methods map onto API documentation pages."""
    assert resolve_link(raw, make_context()) == External(expected)


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("user:42", "https://forum.example.org/profile/42"),
        ("user:7-david", "https://forum.example.org/profile/7"),
        ("user:david", "https://forum.example.org/profile/0"),
    ],
)
def test_user_links(raw: str, expected: str, make_context: MakeContext) -> None:
    """Profile links use the numeric prefix of the name."""
    assert resolve_link(raw, make_context()) == External(expected)


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("php:strlen()", "http://php.net/strlen"),
        ("php:strlen", "http://php.net/strlen"),
        ("php:array_map#parameters", "http://php.net/array_map#parameters"),
        ("php:language.oop5 basic", "http://php.net/language.oop5+basic"),
    ],
)
def test_php_links(raw: str, expected: str, make_context: MakeContext) -> None:
    """PHP manual links url-encode the name and keep the raw section."""
    assert resolve_link(raw, make_context()) == External(expected)


def test_resolution_does_not_touch_discovered_links(make_context: MakeContext) -> None:
    """Recording discovered links is left to the caller."""
    ctx = make_context()
    resolve_link("setup", ctx)
    assert ctx.links == []


@pytest.mark.parametrize(
    ("section", "expected"),
    [(None, None), ("", None), ("toc-", None), ("Intro", "toc-intro")],
)
def test_section_anchor_helper(section: str | None, expected: str | None) -> None:
    """Empty sections yield no fragment."""
    assert section_anchor(section) == expected
