"""Convert wiki markup into HTML pages with resolved cross-references."""

from __future__ import annotations

import logging
import os
import typing as typ

from markdown import Markdown
from markdown.extensions import Extension
from markdown.inlinepatterns import LINK_RE, REFERENCE_RE
from markdown.treeprocessors import Treeprocessor
from pygments.formatters.html import HtmlFormatter

from wikidocs._constants import TOC_THRESHOLD
from wikidocs.config import PathsConfig
from wikidocs.context import Page, RenderContext

from .code_blocks import CodeBlockPreprocessor, normalize_fenced_blocks
from .directives import DirectivePreprocessor
from .link_rewriter import (
    LinkRewriter,
    WikiLinkInlineProcessor,
    WikiReferenceInlineProcessor,
)
from .toc import extract_toc, flatten_headings, heading_slug

if typ.TYPE_CHECKING:
    import collections.abc as cabc
    from xml.etree.ElementTree import Element

    from wikidocs.identifiers import PageId

logger = logging.getLogger(__name__)

HEADING_TAGS = ("h1", "h2", "h3", "h4", "h5", "h6")


class HeadingShiftTreeprocessor(Treeprocessor):
    """Demote headings when a directive moved the top heading level down."""

    def __init__(self, md: Markdown, ctx: RenderContext) -> None:
        super().__init__(md)
        self.ctx = ctx

    def run(self, root: Element) -> None:
        """Rename ``hN`` elements to ``h(N + top - 1)``, capped at ``h6``."""
        shift = self.ctx.heading_top - 1
        if shift <= 0:
            return
        for element in root.iter():
            if element.tag in HEADING_TAGS:
                level = min(int(element.tag[1]) + shift, 6)
                element.tag = f"h{level}"


class WikiExtension(Extension):
    """Bind the wiki hooks for one render onto a ``markdown.Markdown`` instance."""

    def __init__(self, ctx: RenderContext, formatter: HtmlFormatter) -> None:
        super().__init__()
        self.ctx = ctx
        self.formatter = formatter

    def extendMarkdown(self, md: Markdown) -> None:  # type: ignore[override]  # noqa: N802
        """Register the directive, code block, link and heading processors."""
        rewriter = LinkRewriter(self.ctx)
        md.preprocessors.register(
            CodeBlockPreprocessor(md, self.formatter), "wiki_code_blocks", 25
        )
        md.preprocessors.register(
            DirectivePreprocessor(md, self.ctx), "wiki_directives", 23
        )
        md.inlinePatterns.register(
            WikiReferenceInlineProcessor(REFERENCE_RE, md, rewriter), "reference", 170
        )
        md.inlinePatterns.register(
            WikiLinkInlineProcessor(LINK_RE, md, rewriter), "link", 160
        )
        md.inlinePatterns.register(
            WikiReferenceInlineProcessor(REFERENCE_RE, md, rewriter, short=True),
            "short_reference",
            130,
        )
        md.treeprocessors.register(
            HeadingShiftTreeprocessor(md, self.ctx), "wiki_heading_top", 15
        )


class Convertor:
    """Render wiki markup for a page and collect its metadata."""

    def __init__(
        self,
        paths: PathsConfig | None = None,
        *,
        pygments_style: str = "default",
        file_exists: cabc.Callable[[str], bool] = os.path.isfile,
        toc_threshold: int = TOC_THRESHOLD,
    ) -> None:
        """Initialize a convertor shared by any number of sequential renders.

        Parameters
        ----------
        paths : PathsConfig, optional
            External URL roots; empty roots when omitted.
        pygments_style : str, optional
            Pygments style backing :attr:`stylesheet`. Defaults to
            ``"default"``.
        file_exists : Callable[[str], bool], optional
            Predicate used to validate attachment links; defaults to
            :func:`os.path.isfile`.
        toc_threshold : int, optional
            HTML length above which a table of contents is built
            automatically.
        """
        self.paths = paths or PathsConfig()
        self.pygments_style = pygments_style
        self.file_exists = file_exists
        self.toc_threshold = toc_threshold
        self._formatter = HtmlFormatter(style=pygments_style, nowrap=True)

    @property
    def stylesheet(self) -> str:
        """Return the CSS used for highlighted code blocks."""
        return self._formatter.get_style_defs('pre[class^="src-"]')

    def parse(self, page_id: PageId, text: str) -> Page:
        """Render ``text`` as the page ``page_id``.

        Parameters
        ----------
        page_id : PageId
            Identifier of the page being rendered; relative links and
            default books/languages are taken from it.
        text : str
            Wiki markup source.

        Returns
        -------
        Page
            Rendered HTML plus title, directive metadata, table of contents,
            discovered links and warnings. Rendering never fails on bad
            markup; problems end up in ``Page.warnings``.
        """
        page = Page(id=page_id)
        ctx = RenderContext(page=page, paths=self.paths, file_exists=self.file_exists)
        md = self._create_markdown(ctx)
        page.html = md.convert(normalize_fenced_blocks(text))

        headings = flatten_headings(getattr(md, "toc_tokens", []))
        if ctx.title is not None:
            page.title = ctx.title
        elif headings:
            page.title = headings[0].title
        page.toc = extract_toc(headings, len(page.html), ctx.toc_mode, self.toc_threshold)
        logger.debug(
            "rendered %s: %d links, %d warnings", page_id, len(page.links), len(page.warnings)
        )
        return page

    def _create_markdown(self, ctx: RenderContext) -> Markdown:
        """Return a Markdown instance wired to ``ctx``."""
        return Markdown(
            extensions=[
                "tables",
                "sane_lists",
                "toc",
                WikiExtension(ctx, self._formatter),
            ],
            extension_configs={
                "toc": {
                    "slugify": heading_slug,
                    "marker": "",
                }
            },
        )


__all__ = ["Convertor", "HeadingShiftTreeprocessor", "WikiExtension"]
