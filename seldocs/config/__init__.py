"""Load and validate site configuration YAML for seldocs builds.

This subpackage parses the project's ``site.yaml`` file, merges it over the
built-in defaults, resolves the corpus path, and produces strongly typed
dataclasses (:class:`SiteConfig`, :class:`ThemeConfig`, etc.) that the
generators and CLI consume. The primary entry point is
:func:`load_site_config`.

Examples
--------
>>> from pathlib import Path
>>> from seldocs.config import load_site_config
>>> site = load_site_config(Path("config/site.yaml"))  # doctest: +SKIP
>>> site.theme.site_name  # doctest: +SKIP
'Selenium WebDriver Docs'
"""

from .loader import load_site_config
from .models import (
    FooterConfig,
    FooterLinkConfig,
    SiteConfig,
    SiteConfigError,
    ThemeConfig,
)

__all__ = [
    "FooterConfig",
    "FooterLinkConfig",
    "SiteConfig",
    "SiteConfigError",
    "ThemeConfig",
    "load_site_config",
]
