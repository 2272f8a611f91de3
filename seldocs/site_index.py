"""Build and render the seldocs landing page.

This module takes a resolved :class:`~seldocs.config.SiteConfig` and a
:class:`~seldocs.content_index.ContentIndex` and produces ``index.html`` in
the output directory, listing every section with its description, topic
count, and a link to its generated page.

Typical usage follows the section pages:

>>> from seldocs.config import load_site_config
>>> from seldocs.content_index import ContentIndex
>>> from seldocs.corpus import load_default_corpus
>>> from seldocs.site_index import SiteIndexBuilder
>>> builder = SiteIndexBuilder(
...     load_site_config(), ContentIndex(load_default_corpus())
... )  # doctest: +SKIP
>>> print(builder.run())  # doctest: +SKIP
public/index.html

The builder reads Jinja templates from ``seldocs/templates`` by default and
writes UTF-8 encoded HTML.
"""

from __future__ import annotations

import datetime as dt
import typing as typ
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape
from markdown import markdown

from ._constants import SECTION_PAGE_TEMPLATE, SITE_INDEX_FILENAME, TEMPLATES_DIR

if typ.TYPE_CHECKING:  # pragma: no cover - import for type hints only
    from .config import SiteConfig
    from .content_index import ContentIndex


class SiteIndexBuilder:
    """Render a landing page enumerating the documentation sections."""

    def __init__(
        self,
        site_config: SiteConfig,
        index: ContentIndex,
        *,
        templates_dir: Path | None = None,
        output_dir: Path | None = None,
    ) -> None:
        """Initialize the site index builder.

        Parameters
        ----------
        site_config : SiteConfig
            Parsed site configuration (produced by
            :func:`seldocs.config.load_site_config`).
        index : ContentIndex
            Corpus lookups providing the ordered sections.
        templates_dir : Path, optional
            Directory containing the Jinja templates. Defaults to the
            ``seldocs/templates`` directory when ``None``.
        output_dir : Path, optional
            Override for the output directory; defaults to the config value.
        """
        self.site_config = site_config
        self.index = index
        self.output_dir = output_dir or site_config.output_dir
        self.templates_dir = templates_dir or TEMPLATES_DIR
        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            autoescape=select_autoescape(["html", "xml", "jinja"]),
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.template = self.env.get_template("site_index.jinja")
        self._markdown_extensions = ["sane_lists", "tables", "fenced_code"]

    def run(self) -> Path:
        """Render the landing page HTML file and return its path."""
        output_path = self.output_dir / SITE_INDEX_FILENAME
        output_path.parent.mkdir(parents=True, exist_ok=True)
        context = {
            "theme": self.site_config.theme,
            "footer": self.site_config.footer,
            "entries": self._gather_entries(),
            "generated_at": dt.datetime.now(dt.UTC),
        }
        html = self.template.render(**context)
        if not html.endswith("\n"):
            html += "\n"
        output_path.write_text(html, encoding="utf-8")
        return output_path

    def _gather_entries(self) -> list[dict[str, typ.Any]]:
        """Collect one card dictionary per section in corpus order."""
        total = self.index.section_count
        entries: list[dict[str, typ.Any]] = []
        for position, section in enumerate(self.index.get_sections()):
            entries.append(
                {
                    "id": section.id,
                    "label": section.title,
                    "description_html": self._render_description(section.description),
                    "href": SECTION_PAGE_TEMPLATE.format(
                        prefix=self.site_config.filename_prefix, section=section.id
                    ),
                    "topic_count": len(section.items),
                    "position_label": f"{position + 1} / {total}",
                }
            )
        return entries

    def _render_description(self, text: str) -> str:
        normalized = (text or "").strip()
        if not normalized:
            return ""
        return markdown(
            normalized,
            extensions=self._markdown_extensions,
            output_format="html",
        )


__all__ = ["SiteIndexBuilder"]
