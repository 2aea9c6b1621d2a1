"""Typed dataclasses describing wikidocs site configuration structures."""

from __future__ import annotations

import dataclasses as dc

from wikidocs._constants import TOC_THRESHOLD, WWW_BOOK


class SiteConfigError(ValueError):
    """Raised when the site configuration is invalid or incomplete."""


@dc.dataclass(slots=True)
class PathsConfig:
    """External roots used when composing non-page URLs.

    Every field defaults to an empty string; missing roots simply produce
    degenerate URLs instead of failing.
    """

    media_path: str = ""
    file_media_path: str = ""
    api_url: str = ""
    download_dir: str = ""
    domain: str = ""
    profile_url: str = ""


@dc.dataclass(slots=True)
class SiteConfig:
    """Paths alongside the defaults used for pages rendered from the CLI."""

    paths: PathsConfig = dc.field(default_factory=PathsConfig)
    default_book: str = WWW_BOOK
    default_lang: str = "en"
    pygments_style: str = "default"
    toc_threshold: int = TOC_THRESHOLD


__all__ = ["PathsConfig", "SiteConfig", "SiteConfigError"]
