r"""Turn arbitrary text into URL-safe slugs.

Diacritics are folded to ASCII, everything is lower-cased and runs of
characters outside ``[a-z0-9]`` (plus an optional ``keep`` charlist) collapse
into a single hyphen.

Example
-------
>>> from wikidocs.slug import webalize
>>> webalize("Žluťoučký kůň")
'zlutoucky-kun'
>>> webalize("Guide/Getting Started", keep="/")
'guide/getting-started'
"""

from __future__ import annotations

import re
from unicodedata import normalize


def webalize(text: str, keep: str = "", *, lower: bool = True) -> str:
    """Return ``text`` as a slug, preserving the characters listed in ``keep``.

    Parameters
    ----------
    text : str
        Arbitrary input, possibly containing non-ASCII characters.
    keep : str, optional
        Extra characters allowed to pass through untouched (``"/"`` keeps
        path separators intact).
    lower : bool, optional
        Lower-case the result; defaults to ``True``.

    Returns
    -------
    str
        The slug, with leading and trailing hyphens stripped. May be empty.
    """
    ascii_text = normalize("NFKD", text).encode("ascii", "ignore").decode("ascii")
    if lower:
        ascii_text = ascii_text.lower()
    pattern = f"[^a-z0-9{re.escape(keep)}]+"
    return re.sub(pattern, "-", ascii_text, flags=re.IGNORECASE).strip("-")


__all__ = ["webalize"]
