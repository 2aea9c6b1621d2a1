"""Shared fixtures for the wikidocs test suite."""

from __future__ import annotations

import typing as typ

import pytest

from wikidocs.config import PathsConfig
from wikidocs.context import Page, RenderContext
from wikidocs.identifiers import PageId


@pytest.fixture
def paths() -> PathsConfig:
    """Return path roots resembling a production site."""
    return PathsConfig(
        media_path="/media",
        file_media_path="/srv/media",
        api_url="https://api.example.org",
        download_dir="https://files.example.org/download",
        domain="example.org",
        profile_url="https://forum.example.org/profile/",
    )


@pytest.fixture
def file_exists(mocker: typ.Any) -> typ.Any:
    """Return a file-existence predicate that reports every file as present."""
    return mocker.Mock(return_value=True)


@pytest.fixture
def make_context(
    paths: PathsConfig, file_exists: typ.Any
) -> typ.Callable[..., RenderContext]:
    """Return a factory for render contexts rooted at a given page."""

    def _make(
        book: str = "doc", lang: str = "en", name: str = "guide/intro"
    ) -> RenderContext:
        return RenderContext(
            page=Page(id=PageId(book, lang, name)),
            paths=paths,
            file_exists=file_exists,
        )

    return _make
