"""Load site configuration YAML into typed dataclasses."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

from .helpers import (
    _build_paths_config,
    _optional_str,
    _validate_lang,
    _validate_threshold,
)
from .models import SiteConfig, SiteConfigError


def load_site_config(path: Path) -> SiteConfig:
    """Load the YAML configuration describing URL roots and render defaults.

    Parameters
    ----------
    path : Path
        Filesystem path to the YAML configuration file (for example,
        ``config/wiki.yaml``).

    Returns
    -------
    SiteConfig
        Parsed configuration with the external path roots and the default
        book, language, Pygments style and TOC threshold.

    Raises
    ------
    FileNotFoundError
        If the configuration file does not exist at ``path``.
    TypeError
        If the top-level YAML structure is not a mapping.
    SiteConfigError
        If a section or field holds an invalid value (for example, a default
        language that is not a two-letter code).
    YAMLError
        If the YAML content cannot be parsed by the underlying loader.

    Examples
    --------
    >>> from pathlib import Path
    >>> from wikidocs.config import load_site_config
    >>> config = load_site_config(Path("config/wiki.yaml"))  # doctest: +SKIP
    >>> config.paths.domain  # doctest: +SKIP
    'example.org'
    """
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):
        msg = "Top-level YAML structure must be a mapping."
        raise TypeError(msg)
    raw: dict[str, typ.Any] = dict(loaded)

    defaults = raw.get("defaults") or {}
    if not isinstance(defaults, dict):
        msg = "The 'defaults' section must be a mapping."
        raise SiteConfigError(msg)

    base = SiteConfig()
    paths = _build_paths_config(raw.get("paths"))
    default_book = _optional_str(defaults.get("book")) or base.default_book
    default_lang = _validate_lang(defaults.get("lang", base.default_lang))
    pygments_style = _optional_str(defaults.get("pygments_style")) or base.pygments_style
    toc_threshold = _validate_threshold(
        defaults.get("toc_threshold", base.toc_threshold)
    )

    return SiteConfig(
        paths=paths,
        default_book=default_book,
        default_lang=default_lang,
        pygments_style=pygments_style,
        toc_threshold=toc_threshold,
    )


__all__ = ["load_site_config"]
