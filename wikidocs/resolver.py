r"""Classify raw wiki link targets and resolve them against the current page.

A raw target taken from markup is one of:

* an external URL or e-mail address (``https://...``, ``www.``, ``a@b``),
* a same-document section anchor (``#install``),
* a structured reference ``[book:][lang][:/]name[#section]``.

Structured references to the ``download``, ``attachment``, ``api``, ``user``
and ``php`` books turn straight into URLs; every other book yields a
:class:`~wikidocs.identifiers.PageId` that :func:`wikidocs.urls.create_url`
turns into the final address. Nothing here raises on bad input: unparseable
targets come back verbatim as :class:`~wikidocs.identifiers.External`.

Example
-------
>>> from wikidocs.config import PathsConfig
>>> from wikidocs.context import Page, RenderContext
>>> from wikidocs.identifiers import PageId
>>> ctx = RenderContext(Page(PageId("doc", "en", "guide/intro")), PathsConfig())
>>> resolve_link("setup#Options", ctx)
Internal(page_id=PageId(book='doc', lang='en', name='guide/setup', fragment='toc-options'))
>>> resolve_link("php:strlen()", ctx)
External(url='http://php.net/strlen')
"""

from __future__ import annotations

import logging
import re
import typing as typ
from urllib.parse import quote_plus

from ._constants import HOMEPAGE, META_BOOK, TOC_PREFIX, WWW_BOOK
from .identifiers import External, Internal, LinkMatch, PageId
from .slug import webalize

if typ.TYPE_CHECKING:
    from .context import RenderContext
    from .identifiers import ResolutionOutcome

logger = logging.getLogger(__name__)

EXTERNAL_PATTERN = re.compile(r"(?:.+@|https?:|ftp:|mailto:|ftp\.|www\.)", re.IGNORECASE)
LINK_PATTERN = re.compile(
    r"""
    ^
    (?:(?P<book>[a-z]{3,}(?:-\d\.\d)?):)?      # book, optionally versioned
    (?:[:/]?(?P<lang>[a-z]{2})(?=[:/\#]|$))?   # two-letter language
    (?P<name>[^\#]+)?                          # page path
    (?:\#(?P<section>.*))?                     # section
    $
    """,
    re.VERBOSE,
)
LEADING_INT_PATTERN = re.compile(r"\s*([+-]?\d+)")


def parse_link(raw: str) -> LinkMatch | None:
    """Split a structured link into its parts, or return ``None`` if it does not parse."""
    match = LINK_PATTERN.match(raw)
    if match is None:
        return None
    return LinkMatch(
        book=match.group("book") or None,
        lang=match.group("lang") or None,
        name=match.group("name") or None,
        section=match.group("section") or None,
    )


def section_anchor(section: str | None) -> str | None:
    """Return the ``toc-`` anchor for ``section``, or ``None`` when it is empty."""
    if not section:
        return None
    section = section.removeprefix(TOC_PREFIX)
    if not section:
        return None
    return TOC_PREFIX + webalize(section)


def resolve_link(raw: str, ctx: RenderContext) -> ResolutionOutcome:
    """Resolve ``raw`` as written on the page described by ``ctx``.

    Parameters
    ----------
    raw : str
        Link target exactly as it appears in the markup.
    ctx : RenderContext
        State of the current render; supplies the current page, the
        external path roots and the file-existence predicate. A missing
        attachment is recorded in ``ctx.warnings``.

    Returns
    -------
    External | Internal
        ``External`` carrying a final URL (or the untouched input when it
        could not be parsed), or ``Internal`` carrying the target page.
    """
    if EXTERNAL_PATTERN.match(raw):
        return External(raw)

    if raw.startswith("#"):
        return External("#" + (section_anchor(raw[1:]) or TOC_PREFIX))

    match = parse_link(raw)
    if match is None:
        logger.debug("unparseable link %r left as-is", raw)
        return External(raw)

    current = ctx.page_id
    name = _normalize_name(match, current)
    book = match.book or (WWW_BOOK if current.book == META_BOOK else current.book)
    lang = match.lang or current.lang
    raw_name = match.name or ""
    paths = ctx.paths

    match book:
        case "download":
            return External(f"{paths.download_dir}/{name}")

        case "attachment":
            if not ctx.file_exists(f"{paths.file_media_path}/{current.book}/{name}"):
                ctx.warn(f"Missing file {name}")
            return External(f"{paths.media_path}/{current.book}/{name}")

        case "api":
            return External(f"{paths.api_url}/{_api_path(raw_name)}")

        case "user":
            return External(f"{paths.profile_url}{_leading_int(raw_name)}")

        case "php":
            function = raw_name.removesuffix("()")
            suffix = f"#{match.section}" if match.section else ""
            return External(f"http://php.net/{quote_plus(function)}{suffix}")

        case _:
            page_id = PageId(book, lang, name, section_anchor(match.section))
            logger.debug("resolved %r to page %s", raw, page_id)
            return Internal(page_id)


def _normalize_name(match: LinkMatch, current: PageId) -> str:
    """Fold separators, collapse the homepage and expand names relative to ``current``."""
    name = (match.name or "").replace(":", "/").rstrip("/")
    if name == "" or name.lower().strip("/") == HOMEPAGE:
        name = HOMEPAGE

    if (
        not name.startswith("/")
        and not match.book
        and not match.lang
        and "/" in current.name
    ):
        name = current.name[: current.name.rfind("/") + 1] + name

    return name.strip("/")


def _api_path(name: str) -> str:
    """Map ``Ns\\Class``, ``Class::method()`` and ``Class::CONST`` to API doc paths."""
    path = name.replace("\\", ".")
    if "()" in path:
        return path.replace("()", "").replace("::", ".html#_")
    if "::" in path:
        return path.replace("::", ".html#")
    return f"{path}.html"


def _leading_int(text: str) -> int:
    """Return the integer prefix of ``text``; ``0`` when there is none."""
    match = LEADING_INT_PATTERN.match(text)
    return int(match.group(1)) if match else 0


__all__ = ["parse_link", "resolve_link", "section_anchor"]
