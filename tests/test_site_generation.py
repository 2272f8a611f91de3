"""End-to-end tests for the static section pages.

The fixtures render the two-section corpus with :class:`SiteGenerator` into a
temporary directory and parse the pages with BeautifulSoup, so assertions
target the same markup a browser would receive.
"""

from __future__ import annotations

import typing as typ

import msgspec.json as msgspec_json
import pytest
from bs4 import BeautifulSoup

from seldocs.generator import SectionEntries, SiteGenerator, decode_entries
from seldocs.navigation import NavigationEngine

if typ.TYPE_CHECKING:
    from pathlib import Path

    from seldocs.config import SiteConfig
    from seldocs.content_index import ContentIndex


def _soup(path: Path) -> BeautifulSoup:
    return BeautifulSoup(path.read_text(encoding="utf-8"), "html.parser")


@pytest.fixture
def generator(site_config: SiteConfig, small_index: ContentIndex) -> SiteGenerator:
    return SiteGenerator(site_config, small_index)


@pytest.fixture
def written(generator: SiteGenerator) -> list[Path]:
    return generator.run()


@pytest.fixture
def pages(written: list[Path]) -> dict[str, BeautifulSoup]:
    """Map page filenames to parsed HTML."""
    return {
        path.name: _soup(path)
        for path in written
        if path.name.startswith("docs-") and path.suffix == ".html"
    }


def test_run_writes_pages_then_index(written: list[Path]) -> None:
    names = [path.name for path in written]
    assert names == [
        "docs-basics.html",
        "docs-advanced-waits.html",
        "search-index.json",
        "index.html",
    ], f"unexpected outputs: {names}"
    assert all(path.exists() for path in written)


def test_page_lists_every_item(pages: dict[str, BeautifulSoup]) -> None:
    soup = pages["docs-basics.html"]
    ids = [node["data-item-id"] for node in soup.select("article.doc-item")]
    assert ids == ["implicit-wait", "explicit-wait", "window-management"]
    count = soup.select_one(".doc-hero__count")
    assert count is not None
    assert count.get_text(strip=True) == "3"


def test_page_title_and_hero(pages: dict[str, BeautifulSoup]) -> None:
    soup = pages["docs-basics.html"]
    assert soup.title is not None
    assert soup.title.get_text(strip=True) == "WebDriver Basics | Selenium WebDriver Docs"
    hero = soup.select_one(".doc-hero")
    assert hero is not None
    assert not hero.has_attr("hidden"), "hero should show when not searching"
    no_results = soup.select_one(".doc-no-results")
    assert no_results is not None
    assert no_results.has_attr("hidden")


def test_examples_are_numbered(pages: dict[str, BeautifulSoup]) -> None:
    article = pages["docs-basics.html"].select_one("article#explicit-wait")
    assert article is not None
    titles = [
        node.get_text(strip=True) for node in article.select(".doc-example__title")
    ]
    assert titles == ["1. Visible", "2. Script"]
    languages = [
        block["data-language"]
        for block in article.select(".doc-item__examples div.codehilite")
    ]
    assert languages == ["java", "js"]


def test_syntax_block_uses_site_language(pages: dict[str, BeautifulSoup]) -> None:
    article = pages["docs-basics.html"].select_one("article#implicit-wait")
    assert article is not None
    block = article.select_one(".doc-item__syntax div.codehilite")
    assert block is not None
    assert block["data-language"] == "java"
    copy = article.select_one(".doc-item__syntax button.doc-code__copy")
    assert copy is not None
    assert copy["data-copy"] == "driver.manage().timeouts().implicitlyWait(d);"


def test_notes_render_only_when_present(pages: dict[str, BeautifulSoup]) -> None:
    soup = pages["docs-basics.html"]
    assert soup.select_one("article#implicit-wait .doc-item__notes") is not None
    assert soup.select_one("article#window-management .doc-item__notes") is None


def test_pager_disables_boundaries(pages: dict[str, BeautifulSoup]) -> None:
    first = pages["docs-basics.html"]
    last = pages["docs-advanced-waits.html"]
    prev_first = first.select_one(".doc-pager__prev")
    next_first = first.select_one(".doc-pager__next")
    assert prev_first is not None and prev_first.name == "span"
    assert "is-disabled" in prev_first["class"]
    assert next_first is not None and next_first["href"] == "docs-advanced-waits.html"
    next_last = last.select_one(".doc-pager__next")
    prev_last = last.select_one(".doc-pager__prev")
    assert next_last is not None and next_last.name == "span"
    assert prev_last is not None and prev_last["href"] == "docs-basics.html"


def test_pager_position_label(pages: dict[str, BeautifulSoup]) -> None:
    labels = {
        name: soup.select_one(".doc-pager__position").get_text(strip=True)
        for name, soup in pages.items()
    }
    assert labels == {"docs-basics.html": "1 / 2", "docs-advanced-waits.html": "2 / 2"}


def test_sidebar_expands_active_group(pages: dict[str, BeautifulSoup]) -> None:
    soup = pages["docs-advanced-waits.html"]
    active = soup.select(".doc-nav-group__title.is-active")
    assert [node.get_text(strip=True) for node in active] == ["Waits & Timeouts"]
    items = [node["data-item-id"] for node in soup.select("a.doc-nav-item")]
    assert items == ["expected-conditions"], (
        "only the active section should list its items in the sidebar"
    )


def test_inline_search_data_is_scoped(pages: dict[str, BeautifulSoup]) -> None:
    script = pages["docs-basics.html"].select_one("script#search-data")
    assert script is not None
    payload = script.get_text()
    assert '"id":"basics"' in payload
    assert "expected-conditions" not in payload


def test_search_index_decodes(written: list[Path]) -> None:
    entries = decode_entries(written[-2].read_bytes())
    assert [entry.id for entry in entries] == ["basics", "advanced-waits"]
    assert entries[0].href == "docs-basics.html"
    assert [item.id for item in entries[0].items] == [
        "implicit-wait",
        "explicit-wait",
        "window-management",
    ]


def test_render_view_highlights_item(
    generator: SiteGenerator, small_index: ContentIndex
) -> None:
    engine = NavigationEngine(small_index)
    engine.set_active_item("explicit-wait")
    soup = _soup(generator.render_view(engine.snapshot()))
    active = [node["id"] for node in soup.select("article.doc-item.is-active")]
    assert active == ["explicit-wait"]


def _shown_ids(soup: BeautifulSoup) -> list[str]:
    return [
        node["id"]
        for node in soup.select("article.doc-item")
        if not node.has_attr("hidden")
    ]


def test_render_view_filtered(
    generator: SiteGenerator, small_index: ContentIndex
) -> None:
    engine = NavigationEngine(small_index)
    engine.set_search_query("wait")
    soup = _soup(generator.render_view(engine.snapshot()))
    assert _shown_ids(soup) == ["implicit-wait", "explicit-wait"]
    hero = soup.select_one(".doc-hero")
    assert hero is not None and hero.has_attr("hidden")
    search = soup.select_one("#doc-search-input")
    assert search is not None and search["value"] == "wait"
    count = soup.select_one(".doc-hero__count")
    assert count is not None and count.get_text(strip=True) == "2"


def test_filtered_markup_matches_search_data(
    generator: SiteGenerator, small_index: ContentIndex
) -> None:
    """Filtered pages keep every article so the page script can restore them."""
    engine = NavigationEngine(small_index)
    engine.set_search_query("wait")
    soup = _soup(generator.render_view(engine.snapshot()))
    script = soup.select_one("script#search-data")
    assert script is not None
    entries = msgspec_json.decode(script.get_text(), type=SectionEntries)
    data_ids = [entry.id for entry in entries.items]
    article_ids = [node["id"] for node in soup.select("article.doc-item")]
    assert article_ids == data_ids, (
        f"expected articles {article_ids} to match search data {data_ids}"
    )
    hidden = [node["id"] for node in soup.select("article.doc-item[hidden]")]
    assert hidden == ["window-management"]


def test_filtered_render_keeps_canonical_page(
    generator: SiteGenerator, small_index: ContentIndex, tmp_path: Path
) -> None:
    """A filtered snapshot written elsewhere leaves the generated page intact."""
    canonical = generator.run()[0]
    before = canonical.read_text(encoding="utf-8")
    engine = NavigationEngine(small_index)
    engine.set_search_query("wait")
    target = tmp_path / "previews" / "basics-wait.html"
    written = generator.render_view(engine.snapshot(), output_path=target)
    assert written == target
    assert target.exists()
    assert canonical.read_text(encoding="utf-8") == before, (
        "rendering to another path must not touch the canonical page"
    )
    assert _shown_ids(_soup(canonical)) == [
        "implicit-wait",
        "explicit-wait",
        "window-management",
    ]


def test_render_view_no_results(
    generator: SiteGenerator, small_index: ContentIndex
) -> None:
    engine = NavigationEngine(small_index)
    engine.set_search_query("xyz-no-match")
    soup = _soup(generator.render_view(engine.snapshot()))
    assert _shown_ids(soup) == [], "every article should be hidden"
    assert len(soup.select("article.doc-item")) == 3
    notice = soup.select_one(".doc-no-results")
    assert notice is not None and not notice.has_attr("hidden")
    query = soup.select_one(".doc-no-results__query")
    assert query is not None and query.get_text() == "xyz-no-match"



def test_footer_and_theme_render(
    site_config: SiteConfig, small_index: ContentIndex
) -> None:
    site_config.theme.author = "Fixture Author"
    site_config.footer.copyright = "Fixture copyright"
    path = SiteGenerator(site_config, small_index).run()[0]
    soup = _soup(path)
    author = soup.select_one(".doc-sidebar__author")
    assert author is not None and "Fixture Author" in author.get_text()
    copyright_node = soup.select_one(".doc-footer__copyright")
    assert copyright_node is not None
    assert copyright_node.get_text(strip=True) == "Fixture copyright"
