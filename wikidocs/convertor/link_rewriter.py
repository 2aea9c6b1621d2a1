"""Inline processors that route Markdown links through the wiki resolver.

Three link forms are handled:

``[text](target)``
    Phrase link; ``target`` is resolved and replaced by the final URL.
``[text][target]``
    Reference link whose ``target`` is not a defined Markdown reference.
    ``[text][api]`` and ``[text][php]`` are shorthands for ``api:text`` and
    ``php:text``.
``[target]``
    New reference; the visible label is derived from the resolved target.

Every link to another wiki page is appended to the render's discovered links.
"""

from __future__ import annotations

import re
import typing as typ
from xml.etree import ElementTree as etree

from markdown.inlinepatterns import LinkInlineProcessor, ReferenceInlineProcessor
from markdown.util import AtomicString

from wikidocs.identifiers import External, Internal
from wikidocs.resolver import resolve_link
from wikidocs.urls import create_url, link_index_entry

if typ.TYPE_CHECKING:
    from xml.etree.ElementTree import Element

    from markdown import Markdown

    from wikidocs.context import RenderContext
    from wikidocs.identifiers import ResolutionOutcome

SHORTHAND_BOOKS = ("api", "php")
REFERENCE_LABEL_PATTERN = re.compile(r"\A(?:(?!http|ftp|mailto)[a-z]+:|#)+")


class LinkRewriter:
    """Resolve link targets for one render and record discovered pages."""

    def __init__(self, ctx: RenderContext) -> None:
        self.ctx = ctx

    def rewrite_phrase(self, el: Element) -> Element:
        """Replace the ``href`` of an ``<a>`` element with its resolved URL."""
        outcome = resolve_link(el.get("href", ""), self.ctx)
        el.set("href", self._href(outcome))
        self._decorate(el)
        return el

    def new_reference(self, target: str) -> Element:
        """Build an ``<a>`` element for a bare ``[target]`` reference."""
        outcome = resolve_link(target, self.ctx)
        el = etree.Element("a")
        match outcome:
            case Internal(page_id=page_id):
                label = page_id.name.split("/")[-1]
                if page_id.lang != self.ctx.page_id.lang:
                    el.set("lang", page_id.lang)
            case External():
                label = REFERENCE_LABEL_PATTERN.sub("", target)
        el.set("href", self._href(outcome))
        el.text = AtomicString(label)
        self._decorate(el)
        return el

    def _href(self, outcome: ResolutionOutcome) -> str:
        match outcome:
            case Internal(page_id=page_id):
                self.ctx.links.append(link_index_entry(page_id))
                return create_url(page_id, self.ctx.page_id, self.ctx.paths.domain)
            case External(url=url):
                return url

    def _decorate(self, el: Element) -> None:
        if self.ctx.nofollow and "//" in el.get("href", ""):
            el.set("rel", "nofollow")


class WikiLinkInlineProcessor(LinkInlineProcessor):
    """Resolve ``[text](target)`` links."""

    def __init__(self, pattern: str, md: Markdown, rewriter: LinkRewriter) -> None:
        super().__init__(pattern, md)
        self.rewriter = rewriter

    def handleMatch(  # type: ignore[override]  # noqa: N802
        self, m: re.Match[str], data: str
    ) -> tuple[Element | None, int | None, int | None]:
        """Build the link as Markdown does, then rewrite its target."""
        el, start, end = super().handleMatch(m, data)
        if el is not None:
            self.rewriter.rewrite_phrase(el)
        return el, start, end


class WikiReferenceInlineProcessor(ReferenceInlineProcessor):
    """Resolve ``[text][target]`` (or, with ``short``, ``[target]``) links.

    Targets matching a reference definition in the document keep the
    standard Markdown behaviour.
    """

    def __init__(
        self,
        pattern: str,
        md: Markdown,
        rewriter: LinkRewriter,
        *,
        short: bool = False,
    ) -> None:
        super().__init__(pattern, md)
        self.rewriter = rewriter
        self.short = short

    def handleMatch(  # type: ignore[override]  # noqa: N802
        self, m: re.Match[str], data: str
    ) -> tuple[Element | None, int | None, int | None]:
        """Return a resolved ``<a>`` element for the matched reference."""
        text, index, handled = self.getText(data, m.end(0))
        if not handled:
            return None, None, None

        if self.short:
            target, end = text, index
        else:
            second = self.RE_LINK.match(data, pos=index)
            if second is None:
                return None, None, None
            target, end = second.group(1) or text, second.end(0)

        key = self.NEWLINE_CLEANUP_RE.sub(" ", target.lower())
        if key in self.md.references:
            href, title = self.md.references[key]
            return self.makeTag(href, title, text), m.start(0), end

        if self.short:
            if not target or any(char.isspace() for char in target):
                return None, m.start(0), end
            return self.rewriter.new_reference(target), m.start(0), end

        shorthand = target.rstrip(":")
        if shorthand in SHORTHAND_BOOKS:
            target = f"{shorthand}:{text}"
        el = etree.Element("a")
        el.text = text
        el.set("href", target)
        return self.rewriter.rewrite_phrase(el), m.start(0), end


__all__ = [
    "LinkRewriter",
    "WikiLinkInlineProcessor",
    "WikiReferenceInlineProcessor",
]
