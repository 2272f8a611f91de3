"""Typed dataclasses describing seldocs site configuration structures."""

from __future__ import annotations

import dataclasses as dc
from pathlib import Path

from .._constants import DEFAULT_CORPUS_PATH, SEARCH_INDEX_FILENAME


class SiteConfigError(ValueError):
    """Raised when the site configuration is invalid or incomplete."""


@dc.dataclass(slots=True)
class ThemeConfig:
    """Visual theming and page metadata applied to generated documentation."""

    site_name: str = "Selenium WebDriver Docs"
    brand: str = "Selenium"
    tagline: str = "WebDriver Documentation"
    description: str = (
        "Complete guide to Selenium WebDriver properties, elements, and "
        "automation best practices"
    )
    keywords: list[str] = dc.field(
        default_factory=lambda: ["Selenium", "WebDriver", "Automation", "Testing"]
    )
    version: str = "1.0.0"
    author: str | None = None
    author_url: str | None = None
    search_placeholder: str = "Search documentation..."
    official_docs_url: str | None = "https://www.selenium.dev"


@dc.dataclass(slots=True)
class FooterLinkConfig:
    """Footer hyperlink metadata."""

    label: str
    href: str


@dc.dataclass(slots=True)
class FooterConfig:
    """Footer copy, quick links, and topic list."""

    blurb: str = ""
    links: list[FooterLinkConfig] = dc.field(default_factory=list)
    topics: list[str] = dc.field(default_factory=list)
    copyright: str = ""


@dc.dataclass(slots=True)
class SiteConfig:
    """A fully resolved site definition sourced from YAML config."""

    corpus_path: Path = DEFAULT_CORPUS_PATH
    output_dir: Path = Path("public")
    filename_prefix: str = "docs-"
    pygments_style: str = "monokai"
    syntax_language: str = "java"
    search_index: str = SEARCH_INDEX_FILENAME
    theme: ThemeConfig = dc.field(default_factory=ThemeConfig)
    footer: FooterConfig = dc.field(default_factory=FooterConfig)


__all__ = [
    "FooterConfig",
    "FooterLinkConfig",
    "SiteConfig",
    "SiteConfigError",
    "ThemeConfig",
]
