"""Compose site URLs for resolved wiki page identifiers.

Books map onto the site like this:

* ``www`` lives on the bare domain,
* ``<book>`` lives on the ``<book>.<domain>`` subdomain,
* ``<book>-<version>`` lives on ``<book>.<domain>`` under a ``<version>/``
  segment placed right after the language.

Links inside the book of the current page are emitted host-relative.

Example
-------
>>> from wikidocs.identifiers import PageId
>>> current = PageId("www", "en", "homepage")
>>> create_url(PageId("doc-2.1", "cs", "Forms/Validation"), current, "example.org")
'http://doc.example.org/cs/2.1/forms/validation'
>>> create_url(PageId("www", "en", "homepage", "toc-news"), current, "example.org")
'/en/#toc-news'
"""

from __future__ import annotations

import dataclasses as dc

from ._constants import HOMEPAGE, WWW_BOOK
from .identifiers import PageId
from .slug import webalize


def create_url(link: PageId, current: PageId, domain: str) -> str:
    """Return the URL of ``link`` as seen from the page ``current``.

    Parameters
    ----------
    link : PageId
        Resolved target page.
    current : PageId
        Page being rendered; decides whether the URL needs a host.
    domain : str
        Site domain used for cross-book links.

    Returns
    -------
    str
        Host-relative URL for same-book links, absolute ``http://`` URL
        otherwise. The page path is slugged; the homepage has no path segment.
    """
    primary, _, version = link.book.partition("-")
    if link.book == current.book:
        origin = ""
    else:
        host = domain if primary == WWW_BOOK else f"{primary}.{domain}"
        origin = f"http://{host}"

    name = webalize(link.name, "/")
    url = f"{origin}/{link.lang}/"
    if version:
        url += f"{version}/"
    if name != HOMEPAGE:
        url += name
    if link.fragment:
        url += f"#{link.fragment}"
    return url


def link_index_entry(link: PageId) -> PageId:
    """Return the form of ``link`` stored in the discovered-links index."""
    return dc.replace(link, name=webalize(link.name, "/"), fragment=None)


__all__ = ["create_url", "link_index_entry"]
