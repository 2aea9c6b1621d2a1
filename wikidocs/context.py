"""Per-render state shared by the resolver and the markup hooks."""

from __future__ import annotations

import dataclasses as dc
import logging
import os
import typing as typ

from .identifiers import PageId

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from .config import PathsConfig
    from .convertor.toc import TocEntry

logger = logging.getLogger(__name__)


@dc.dataclass(slots=True)
class Page:
    """Rendered document together with the metadata collected by directives.

    Attributes
    ----------
    id : PageId
        Identifier of the rendered page.
    html : str
        Rendered HTML body.
    title : str | None
        Document title (``{{title}}`` directive or the first heading).
    main_title : str | None
        Value of the ``{{maintitle}}`` directive.
    theme : str | None
        Value of the ``{{theme}}`` directive.
    sidebar : bool
        ``False`` when ``{{sidebar: no}}`` was used.
    tags : list[str]
        Tags collected from ``{{tags}}`` directives.
    langs : dict[str, str]
        Language code to page path of translations declared via ``{{lang}}``.
    toc : list[TocEntry]
        Extracted table of contents; empty when disabled.
    links : list[PageId]
        Internal pages referenced by the document, slugged and without
        fragments.
    warnings : list[str]
        Problems noticed while rendering.
    """

    id: PageId
    html: str = ""
    title: str | None = None
    main_title: str | None = None
    theme: str | None = None
    sidebar: bool = True
    tags: list[str] = dc.field(default_factory=list)
    langs: dict[str, str] = dc.field(default_factory=dict)
    toc: list[TocEntry] = dc.field(default_factory=list)
    links: list[PageId] = dc.field(default_factory=list)
    warnings: list[str] = dc.field(default_factory=list)


@dc.dataclass(slots=True)
class RenderContext:
    """Mutable state owned by exactly one document render.

    A fresh instance is created for every call to
    :meth:`wikidocs.convertor.Convertor.parse`; nothing here is shared across
    renders.
    """

    page: Page
    paths: PathsConfig
    file_exists: cabc.Callable[[str], bool] = os.path.isfile
    title: str | None = None
    toc_mode: bool | str | None = None
    nofollow: bool = False
    heading_top: int = 1

    @property
    def page_id(self) -> PageId:
        """Return the identifier of the page being rendered."""
        return self.page.id

    @property
    def links(self) -> list[PageId]:
        """Return the discovered-links index of the page being rendered."""
        return self.page.links

    @property
    def warnings(self) -> list[str]:
        """Return the warnings recorded for the page being rendered."""
        return self.page.warnings

    def warn(self, message: str) -> None:
        """Record a render warning and mirror it to the module logger."""
        self.warnings.append(message)
        logger.warning("%s: %s", self.page.id, message)


__all__ = ["Page", "RenderContext"]
