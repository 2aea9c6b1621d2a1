"""Common literal values used across wikidocs.

These constants keep sentinel names and thresholds centralized so the
resolver, the URL builder, the convertor and tests can import the same values
without drifting.

Examples
--------
>>> from wikidocs import _constants
>>> _constants.HOMEPAGE
'homepage'
>>> _constants.TOC_PREFIX + "install"
'toc-install'
"""

HOMEPAGE = "homepage"
META_BOOK = "meta"
WWW_BOOK = "www"
TOC_PREFIX = "toc-"
TOC_THRESHOLD = 4000
TOC_TITLE_MODE = "title"
