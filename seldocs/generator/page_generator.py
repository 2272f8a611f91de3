"""High-level orchestration for documentation site generation.

This module turns a loaded corpus into themed static HTML: one page per
section, the JSON search index the page script reads, and the landing page. It exposes
:class:`SiteGenerator`, which consumes a :class:`~seldocs.config.SiteConfig`
and a :class:`~seldocs.content_index.ContentIndex`, drives a
:class:`~seldocs.navigation.NavigationEngine` across every section, and
renders each snapshot with ``HtmlContentRenderer`` and the Jinja templates.

Example
-------
>>> from pathlib import Path
>>> from seldocs.config import load_site_config
>>> from seldocs.content_index import ContentIndex
>>> from seldocs.corpus import load_corpus
>>> from seldocs.generator import SiteGenerator
>>> config = load_site_config(Path("config/site.yaml"))  # doctest: +SKIP
>>> index = ContentIndex(load_corpus(config.corpus_path))  # doctest: +SKIP
>>> SiteGenerator(config, index).run()  # doctest: +SKIP
[PosixPath('public/docs-basics.html'), ...]
"""

from __future__ import annotations

import datetime as dt
import logging
import typing as typ
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape

from seldocs._constants import SECTION_PAGE_TEMPLATE, TEMPLATES_DIR
from seldocs.generator.models import ExampleModel, ItemModel, SectionPageModel
from seldocs.generator.renderer import HtmlContentRenderer
from seldocs.generator.search_index import (
    build_section_entries,
    encode_entries,
    inline_json,
)
from seldocs.navigation import NavigationEngine, NavigationView
from seldocs.site_index import SiteIndexBuilder

if typ.TYPE_CHECKING:
    from seldocs.config import SiteConfig
    from seldocs.content_index import ContentIndex
    from seldocs.corpus import Item, Section

logger = logging.getLogger(__name__)


class SiteGenerator:
    """Render every corpus section into themed HTML pages."""

    def __init__(
        self,
        site_config: SiteConfig,
        index: ContentIndex,
        *,
        templates_dir: Path | None = None,
        output_dir: Path | None = None,
    ) -> None:
        """Initialize the generator with configuration and template context.

        Parameters
        ----------
        site_config : SiteConfig
            Site configuration describing theming, output paths, and styles.
        index : ContentIndex
            Corpus lookups for the sections being rendered.
        templates_dir : Path, optional
            Directory containing Jinja templates; defaults to the package templates.
        output_dir : Path, optional
            Override for the HTML output directory; defaults to the config output.
        """
        self.site = site_config
        self.index = index
        self.output_dir = output_dir or site_config.output_dir
        self.templates_dir = templates_dir or TEMPLATES_DIR
        self.renderer = HtmlContentRenderer(site_config.pygments_style)
        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            autoescape=select_autoescape(["html", "xml", "jinja"]),
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.template = self.env.get_template("section_page.jinja")

    def run(self) -> list[Path]:
        """Render every section page, the search index, and the landing page.

        Returns
        -------
        list[Path]
            Paths to the generated section pages in section order, followed
            by the search index file and the landing page.

        Notes
        -----
        Each page is rendered from a fresh navigation snapshot with an empty
        query and no highlighted item, so the static markup lists every item
        of its section.
        """
        self.output_dir.mkdir(parents=True, exist_ok=True)
        generated_at = dt.datetime.now(dt.UTC)
        engine = NavigationEngine(self.index)
        nav_groups = self._build_nav_groups()
        written: list[Path] = []
        for section in self.index.get_sections():
            engine.set_active_section(section.id)
            view = engine.snapshot()
            written.append(self.render_view(view, nav_groups, generated_at))
        written.append(self._write_search_index())
        written.append(
            SiteIndexBuilder(
                self.site,
                self.index,
                templates_dir=self.templates_dir,
                output_dir=self.output_dir,
            ).run()
        )
        return written

    def render_view(
        self,
        view: NavigationView,
        nav_groups: list[dict[str, typ.Any]] | None = None,
        generated_at: dt.datetime | None = None,
        *,
        output_path: Path | None = None,
    ) -> Path:
        """Render ``view`` to HTML and return the written path.

        Every item of the active section is emitted; items outside
        ``view.visible_items`` carry the ``hidden`` attribute, so the markup
        always matches the section records embedded for the page script.

        Parameters
        ----------
        view : NavigationView
            Snapshot to render, possibly filtered or with a highlighted item.
        nav_groups : list[dict[str, Any]], optional
            Prebuilt sidebar groups; built on demand when omitted.
        generated_at : datetime, optional
            Timestamp stamped into the page metadata.
        output_path : Path, optional
            Destination file. Defaults to the section's canonical page, which
            ``run`` fills from unfiltered snapshots; pass another path to keep
            a filtered rendering from replacing it.
        """
        section = view.active_section
        context = {
            "section": self._build_section_model(view),
            "nav_groups": nav_groups or self._build_nav_groups(),
            "active_section_id": section.id,
            "search_query": view.search_query,
            "is_searching": view.is_searching,
            "has_no_results": view.has_no_results,
            "theme": self.site.theme,
            "footer": self.site.footer,
            "pygments_css": self.renderer.stylesheet,
            "search_json": inline_json(
                build_section_entries(section, self.page_href(section))
            ),
            "generated_at": generated_at or dt.datetime.now(dt.UTC),
            "html_title": self._format_page_title(section),
        }
        html = self.template.render(**context)
        if not html.endswith("\n"):
            html += "\n"
        output_path = output_path or self.output_dir / self.page_href(section)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(html, encoding="utf-8")
        logger.debug("rendered %s (%d items)", output_path, len(view.visible_items))
        return output_path

    def page_href(self, section: Section) -> str:
        """Return the relative filename of ``section``'s page."""
        return SECTION_PAGE_TEMPLATE.format(
            prefix=self.site.filename_prefix, section=section.id
        )

    def _write_search_index(self) -> Path:
        entries = [
            build_section_entries(section, self.page_href(section))
            for section in self.index.get_sections()
        ]
        path = self.output_dir / self.site.search_index
        path.write_bytes(encode_entries(entries))
        return path

    def _build_nav_groups(self) -> list[dict[str, typ.Any]]:
        """Build sidebar groups: one per section with its item anchors."""
        groups: list[dict[str, typ.Any]] = []
        for section in self.index.get_sections():
            href = self.page_href(section)
            groups.append(
                {
                    "id": section.id,
                    "label": section.title,
                    "href": href,
                    "entries": [
                        {"id": item.id, "label": item.title, "href": f"{href}#{item.id}"}
                        for item in section.items
                    ],
                }
            )
        return groups

    def _build_section_model(self, view: NavigationView) -> SectionPageModel:
        """Construct a SectionPageModel with rendered items and pager links."""
        section = view.active_section
        position = view.section_position
        sections = self.index.get_sections()
        previous_href = (
            self.page_href(sections[position.index - 1])
            if view.can_step_previous
            else None
        )
        next_href = (
            self.page_href(sections[position.index + 1]) if view.can_step_next else None
        )
        visible_ids = {item.id for item in view.visible_items}
        return SectionPageModel(
            id=section.id,
            title=section.title,
            description=section.description,
            items=[
                self._build_item_model(
                    item,
                    is_active=item.id == view.active_item_id,
                    is_hidden=item.id not in visible_ids,
                )
                for item in section.items
            ],
            topic_count=len(view.visible_items),
            position_label=position.label,
            previous_href=previous_href,
            next_href=next_href,
        )

    def _build_item_model(
        self, item: Item, *, is_active: bool, is_hidden: bool = False
    ) -> ItemModel:
        syntax_language = item.language or self.site.syntax_language
        examples = [
            ExampleModel(
                number=number,
                title=example.title,
                description_html=self.renderer.markdown(example.description),
                code_html=self.renderer.code_block(example.code, example.language),
                code=example.code,
                language=example.language,
            )
            for number, example in enumerate(item.examples, start=1)
        ]
        return ItemModel(
            id=item.id,
            title=item.title,
            description_html=self.renderer.markdown(item.description),
            syntax=item.syntax,
            syntax_html=self.renderer.code_block(item.syntax, syntax_language),
            syntax_language=syntax_language,
            examples=examples,
            notes_html=self.renderer.markdown(item.notes),
            is_active=is_active,
            is_hidden=is_hidden,
        )

    def _format_page_title(self, section: Section) -> str:
        """Compose the HTML title from the section title and site name."""
        return f"{section.title} | {self.site.theme.site_name}"


__all__ = ["SiteGenerator"]
