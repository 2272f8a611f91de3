"""Utility helpers shared by the seldocs configuration loader."""

from __future__ import annotations

import typing as typ

from .models import FooterConfig, FooterLinkConfig, SiteConfigError, ThemeConfig


def _optional_str(value: object | None) -> str | None:
    """Return a stripped string value or None when empty."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _normalize_keywords(value: str | list[object] | None) -> list[str] | None:
    """Normalize comma-separated or list keywords into non-empty strings."""
    if isinstance(value, str):
        return [segment.strip() for segment in value.split(",") if segment.strip()]
    if isinstance(value, list):
        normalized: list[str] = []
        for segment in value:
            text = str(segment).strip()
            if text:
                normalized.append(text)
        return normalized
    return None


def _require_mapping(value: object, label: str) -> typ.Mapping[str, typ.Any]:
    """Return ``value`` when it is a mapping, treating None as empty."""
    if value is None:
        return {}
    if not isinstance(value, dict):
        msg = f"'{label}' must be a mapping."
        raise SiteConfigError(msg)
    return value


def _build_theme_config(payload: typ.Mapping[str, typ.Any]) -> ThemeConfig:
    """Build a ThemeConfig instance from the provided mapping payload."""
    base = ThemeConfig()
    keywords = _normalize_keywords(payload.get("keywords"))
    return ThemeConfig(
        site_name=payload.get("site_name", base.site_name),
        brand=payload.get("brand", base.brand),
        tagline=payload.get("tagline", base.tagline),
        description=payload.get("description", base.description),
        keywords=base.keywords if keywords is None else keywords,
        version=str(payload.get("version", base.version)),
        author=_optional_str(payload.get("author")),
        author_url=_optional_str(payload.get("author_url")),
        search_placeholder=payload.get("search_placeholder", base.search_placeholder),
        official_docs_url=_optional_str(
            payload.get("official_docs_url", base.official_docs_url)
        ),
    )


def _build_footer_config(payload: typ.Mapping[str, typ.Any]) -> FooterConfig:
    """Build the footer block, skipping link entries without an href."""
    links: list[FooterLinkConfig] = []
    for entry in payload.get("links") or []:
        if not isinstance(entry, dict):
            msg = "Footer links must be mappings with 'label' and 'href'."
            raise SiteConfigError(msg)
        href = _optional_str(entry.get("href"))
        if not href:
            continue
        label = _optional_str(entry.get("label")) or href
        links.append(FooterLinkConfig(label=label, href=href))
    topics = [str(topic).strip() for topic in payload.get("topics") or []]
    return FooterConfig(
        blurb=str(payload.get("blurb") or "").strip(),
        links=links,
        topics=[topic for topic in topics if topic],
        copyright=str(payload.get("copyright") or "").strip(),
    )


__all__ = [
    "_build_footer_config",
    "_build_theme_config",
    "_normalize_keywords",
    "_optional_str",
    "_require_mapping",
]
