"""Cyclopts CLI entrypoint for rendering wiki pages and resolving links.

The ``wikidocs`` console script renders a wiki markup file into HTML the same
way the site does, reporting discovered cross-references and warnings, and
can resolve a single link target from the point of view of any page.

Examples
--------
Render a page and print its metadata as JSON:

>>> from wikidocs.cli import app
>>> app.run(
...     ["render", "guide.texy", "--book", "doc", "--name", "guide/intro", "--json"]
... )  # doctest: +SKIP

Resolve a link as written on the homepage of the ``doc`` book:

>>> app.run(["resolve", "api:Nette\\Forms\\Form", "--book", "doc"])  # doctest: +SKIP
"""

from __future__ import annotations

import dataclasses as dc
import json
import logging
import sys
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from ._constants import HOMEPAGE
from .config import SiteConfig, load_site_config
from .context import Page, RenderContext
from .convertor import Convertor
from .identifiers import Internal, PageId
from .resolver import resolve_link
from .urls import create_url

DEFAULT_CONFIG = Path("config/wiki.yaml")

app = App(name="wikidocs", config=cyclopts.config.Env("WIKIDOCS_", command=False))  # type: ignore[unknown-argument]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


def _configure_logging(verbose: bool) -> None:
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


def _page_id(site: SiteConfig, book: str | None, lang: str | None, name: str) -> PageId:
    """Build the identifier of the page a command acts on, applying config defaults."""
    return PageId(
        book=book or site.default_book,
        lang=lang or site.default_lang,
        name=name.strip("/") or HOMEPAGE,
    )


def _summary(page: Page) -> dict[str, typ.Any]:
    """Return the JSON-serializable metadata of a rendered page."""
    return {
        "id": str(page.id),
        "title": page.title,
        "main_title": page.main_title,
        "theme": page.theme,
        "sidebar": page.sidebar,
        "tags": page.tags,
        "langs": page.langs,
        "toc": [dc.asdict(entry) for entry in page.toc],
        "links": [str(link) for link in page.links],
        "warnings": page.warnings,
    }


@app.command(help="Render a wiki markup file to HTML.")
def render(
    source: typ.Annotated[Path, Parameter(help="Wiki markup file to render")],
    *,
    book: typ.Annotated[str | None, Parameter(help="Book of the rendered page")] = None,
    lang: typ.Annotated[str | None, Parameter(help="Language of the rendered page")] = None,
    name: typ.Annotated[str, Parameter(help="Path of the rendered page")] = HOMEPAGE,
    config: typ.Annotated[
        Path, Parameter(help="Path to site config", env_var="WIKIDOCS_CONFIG")
    ] = DEFAULT_CONFIG,
    output: typ.Annotated[
        Path | None, Parameter(help="Write HTML here instead of stdout")
    ] = None,
    json_output: typ.Annotated[
        bool, Parameter(name="--json", help="Print page metadata as JSON")
    ] = False,
    verbose: typ.Annotated[bool, Parameter(help="Enable debug logging")] = False,
) -> None:
    """Render ``source`` as a wiki page and report what was found.

    Parameters
    ----------
    source : Path
        Wiki markup file.
    book, lang : str or None, optional
        Book and language of the rendered page; default to the values in the
        site configuration.
    name : str, optional
        Page path used for relative links; defaults to ``homepage``.
    config : Path, optional
        Path to the ``wiki.yaml`` configuration file (overridable via
        ``WIKIDOCS_CONFIG``).
    output : Path or None, optional
        File receiving the HTML; printed to stdout when omitted (unless
        ``--json`` is given).
    json_output : bool, optional
        Print a JSON summary of the page metadata.
    verbose : bool, optional
        Log resolution details to stderr.

    Returns
    -------
    None
        Warnings are printed to stderr as ``warning: <text>``.
    """
    _configure_logging(verbose)
    site = load_site_config(config)
    page_id = _page_id(site, book, lang, name)
    convertor = Convertor(
        site.paths,
        pygments_style=site.pygments_style,
        toc_threshold=site.toc_threshold,
    )
    page = convertor.parse(page_id, source.read_text(encoding="utf-8"))

    if output is not None:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(page.html, encoding="utf-8")
        print(f"wrote {_format_path(output)}")
    elif not json_output:
        print(page.html)
    if json_output:
        print(json.dumps(_summary(page), ensure_ascii=False))
    for warning in page.warnings:
        print(f"warning: {warning}", file=sys.stderr)


@app.command(help="Resolve a single link target to its final URL.")
def resolve(
    link: typ.Annotated[str, Parameter(help="Raw link target, e.g. doc:en:forms")],
    *,
    book: typ.Annotated[str | None, Parameter(help="Book of the linking page")] = None,
    lang: typ.Annotated[str | None, Parameter(help="Language of the linking page")] = None,
    name: typ.Annotated[str, Parameter(help="Path of the linking page")] = HOMEPAGE,
    config: typ.Annotated[
        Path, Parameter(help="Path to site config", env_var="WIKIDOCS_CONFIG")
    ] = DEFAULT_CONFIG,
    verbose: typ.Annotated[bool, Parameter(help="Enable debug logging")] = False,
) -> None:
    """Print the URL ``link`` points to when written on the given page."""
    _configure_logging(verbose)
    site = load_site_config(config)
    page_id = _page_id(site, book, lang, name)
    ctx = RenderContext(page=Page(id=page_id), paths=site.paths)
    outcome = resolve_link(link, ctx)
    if isinstance(outcome, Internal):
        print(create_url(outcome.page_id, page_id, site.paths.domain))
    else:
        print(outcome.url)
    for warning in ctx.warnings:
        print(f"warning: {warning}", file=sys.stderr)


def main() -> None:
    """Invoke the Cyclopts application that powers the ``wikidocs`` command.

    Examples
    --------
    >>> main()  # doctest: +SKIP
    """
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
