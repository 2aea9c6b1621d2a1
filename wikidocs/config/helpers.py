"""Utility helpers shared by the wikidocs configuration loader."""

from __future__ import annotations

import re
import typing as typ

from .models import PathsConfig, SiteConfigError

LANG_PATTERN = re.compile(r"^[a-z]{2}$")


def _optional_str(value: object | None) -> str | None:
    """Return a stripped string value or None when empty."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _build_paths_config(payload: object | None) -> PathsConfig:
    """Build a PathsConfig from the ``paths`` mapping, stripping trailing slashes."""
    if payload is None:
        return PathsConfig()
    if not isinstance(payload, dict):
        msg = "The 'paths' section must be a mapping."
        raise SiteConfigError(msg)
    mapping = typ.cast("dict[str, typ.Any]", payload)
    values: dict[str, str] = {}
    for field in ("media_path", "file_media_path", "api_url", "download_dir"):
        text = _optional_str(mapping.get(field))
        values[field] = text.rstrip("/") if text else ""
    values["domain"] = _optional_str(mapping.get("domain")) or ""
    # profile ids are appended directly, so a trailing slash is meaningful here
    values["profile_url"] = _optional_str(mapping.get("profile_url")) or ""
    return PathsConfig(**values)


def _validate_lang(value: object) -> str:
    """Return ``value`` as a two-letter language code or raise SiteConfigError."""
    text = str(value).strip().lower()
    if not LANG_PATTERN.match(text):
        msg = f"Default language '{value}' must be a two-letter code."
        raise SiteConfigError(msg)
    return text


def _validate_threshold(value: object) -> int:
    """Return ``value`` as a positive integer or raise SiteConfigError."""
    try:
        threshold = int(typ.cast("typ.Any", value))
    except (TypeError, ValueError) as exc:
        msg = f"toc_threshold must be an integer, got {value!r}."
        raise SiteConfigError(msg) from exc
    if threshold <= 0:
        msg = f"toc_threshold must be positive, got {threshold}."
        raise SiteConfigError(msg)
    return threshold


__all__ = [
    "LANG_PATTERN",
    "_build_paths_config",
    "_optional_str",
    "_validate_lang",
    "_validate_threshold",
]
