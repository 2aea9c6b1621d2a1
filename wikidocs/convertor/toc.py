"""Table-of-contents extraction from the headings of a rendered page."""

from __future__ import annotations

import dataclasses as dc
import typing as typ

from wikidocs._constants import TOC_PREFIX, TOC_THRESHOLD, TOC_TITLE_MODE
from wikidocs.slug import webalize

if typ.TYPE_CHECKING:
    import collections.abc as cabc


@dc.dataclass(frozen=True, slots=True)
class Heading:
    """Heading as registered by the Markdown ``toc`` extension."""

    level: int
    id: str
    title: str


@dc.dataclass(frozen=True, slots=True)
class TocEntry:
    """Single table-of-contents row."""

    level: int
    title: str
    id: str


def heading_slug(value: str, separator: str = "-") -> str:  # noqa: ARG001
    """Return the ``toc-`` prefixed anchor id for a heading title."""
    return TOC_PREFIX + webalize(value)


def flatten_headings(tokens: cabc.Iterable[cabc.Mapping[str, typ.Any]]) -> list[Heading]:
    """Flatten nested ``md.toc_tokens`` into headings in document order."""
    headings: list[Heading] = []
    for token in tokens:
        headings.append(
            Heading(
                level=int(token["level"]),
                id=str(token.get("id") or ""),
                title=str(token.get("name") or ""),
            )
        )
        headings.extend(flatten_headings(token.get("children", [])))
    return headings


def extract_toc(
    headings: cabc.Sequence[Heading],
    html_length: int,
    mode: bool | str | None,
    threshold: int = TOC_THRESHOLD,
) -> list[TocEntry]:
    """Select the headings that make up the page's table of contents.

    Parameters
    ----------
    headings : Sequence[Heading]
        Headings in document order.
    html_length : int
        Length of the final HTML in characters.
    mode : bool | str | None
        ``None`` enables the TOC only for documents longer than
        ``threshold``; ``False`` disables it; any other truthy value forces
        it. ``"title"`` keeps the first heading, demoted by one level,
        instead of dropping it.
    threshold : int, optional
        Automatic-mode length threshold; defaults to ``4000``.

    Returns
    -------
    list[TocEntry]
        Headings that have both an id and a title, minus the first one
        unless ``mode`` is ``"title"``.
    """
    if mode is None:
        mode = html_length > threshold
    if not mode:
        return []

    entries = [
        TocEntry(level=heading.level, title=heading.title, id=heading.id)
        for heading in headings
        if heading.id and heading.title
    ]
    if entries and mode == TOC_TITLE_MODE:
        entries[0] = dc.replace(entries[0], level=entries[0].level + 1)
    else:
        entries = entries[1:]
    return entries


__all__ = ["Heading", "TocEntry", "extract_toc", "flatten_headings", "heading_slug"]
