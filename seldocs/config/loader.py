"""Load site configuration YAML into typed dataclasses."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

from .._constants import DEFAULT_CORPUS_PATH, SEARCH_INDEX_FILENAME
from .helpers import _build_footer_config, _build_theme_config, _require_mapping
from .models import SiteConfig


def load_site_config(path: Path | None = None) -> SiteConfig:
    """Load the YAML configuration describing the corpus and site output.

    Parameters
    ----------
    path : Path, optional
        Filesystem path to the YAML configuration file (for example,
        ``config/site.yaml``). When ``None`` the built-in defaults are
        returned, pointing at the packaged sample corpus.

    Returns
    -------
    SiteConfig
        Parsed configuration with the corpus path resolved relative to the
        configuration file's directory.

    Raises
    ------
    FileNotFoundError
        If the configuration file does not exist at ``path``.
    TypeError
        If the top-level YAML structure is not a mapping.
    SiteConfigError
        If the ``defaults``, ``theme`` or ``footer`` blocks are malformed.
    YAMLError
        If the YAML content cannot be parsed by the underlying loader.

    Examples
    --------
    >>> from pathlib import Path
    >>> from seldocs.config import load_site_config
    >>> config = load_site_config(Path("config/site.yaml"))  # doctest: +SKIP
    >>> config.filename_prefix  # doctest: +SKIP
    'docs-'
    """
    if path is None:
        return SiteConfig()
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):  # pragma: no cover - config error guard
        msg = "Top-level YAML structure must be a mapping."
        raise TypeError(msg)
    raw: dict[str, typ.Any] = dict(loaded)
    defaults = _require_mapping(raw.get("defaults"), "defaults")
    theme_raw = _require_mapping(raw.get("theme"), "theme")
    footer_raw = _require_mapping(raw.get("footer"), "footer")

    base = SiteConfig()
    return SiteConfig(
        corpus_path=_resolve_corpus_path(defaults.get("corpus"), path.parent),
        output_dir=Path(defaults.get("output_dir", base.output_dir)),
        filename_prefix=defaults.get("filename_prefix", base.filename_prefix),
        pygments_style=defaults.get("pygments_style", base.pygments_style),
        syntax_language=defaults.get("syntax_language", base.syntax_language),
        search_index=defaults.get("search_index", SEARCH_INDEX_FILENAME),
        theme=_build_theme_config(theme_raw),
        footer=_build_footer_config(footer_raw),
    )


def _resolve_corpus_path(value: str | None, relative_to: Path) -> Path:
    """Return the corpus path, resolving relative entries against the config dir."""
    if not value:
        return DEFAULT_CORPUS_PATH
    candidate = Path(value)
    if candidate.is_absolute():
        return candidate
    return relative_to / candidate


__all__ = ["load_site_config"]
