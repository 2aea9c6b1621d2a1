"""Load and validate the wikidocs site configuration.

This subpackage parses the project's ``wiki.yaml`` file into slotted
dataclasses: :class:`PathsConfig` holds the external URL roots the link
resolver needs (media, downloads, API docs, user profiles, site domain) and
:class:`SiteConfig` adds the defaults used when rendering from the command
line. The primary entry point is :func:`load_site_config`.

Examples
--------
>>> from pathlib import Path
>>> from wikidocs.config import load_site_config
>>> site = load_site_config(Path("config/wiki.yaml"))  # doctest: +SKIP
>>> site.paths.api_url  # doctest: +SKIP
'https://api.example.org'
"""

from .loader import load_site_config
from .models import PathsConfig, SiteConfig, SiteConfigError

__all__ = ["PathsConfig", "SiteConfig", "SiteConfigError", "load_site_config"]
