"""Tests for the line-oriented ``BrowseSession``."""

from __future__ import annotations

import typing as typ

import pytest

from seldocs.session import HELP_TEXT, BrowseSession

if typ.TYPE_CHECKING:
    from seldocs.content_index import ContentIndex


@pytest.fixture
def session(small_index: ContentIndex) -> BrowseSession:
    return BrowseSession(small_index)


def test_initial_render(session: BrowseSession) -> None:
    assert session.render().splitlines() == [
        "WebDriver Basics [1 / 2]",
        "3 Topics",
        "  - implicit-wait: Implicit Wait",
        "  - explicit-wait: Explicit Wait",
        "  - window-management: Window Management",
    ]


def test_search_command_filters(session: BrowseSession) -> None:
    lines = session.execute("search wait").splitlines()
    assert lines[0] == 'WebDriver Basics [1 / 2] search: "wait"'
    assert lines[1:] == [
        "  - implicit-wait: Implicit Wait",
        "  - explicit-wait: Explicit Wait",
    ]


def test_search_keeps_inner_spaces(session: BrowseSession) -> None:
    session.execute("search explicit wait")
    assert session.state.search_query == "explicit wait"


def test_no_results_message(session: BrowseSession) -> None:
    output = session.execute("search xyz")
    assert output.splitlines()[-1] == 'No results found for "xyz".'


def test_clear_restores_topics(session: BrowseSession) -> None:
    session.execute("search xyz")
    output = session.execute("clear")
    assert "3 Topics" in output
    assert session.state.search_query == ""


def test_item_highlight_marker(session: BrowseSession) -> None:
    output = session.execute("item explicit-wait")
    assert "  * explicit-wait: Explicit Wait" in output.splitlines()
    session.execute("item none")
    assert session.state.active_item_id is None


def test_section_switch_keeps_query(session: BrowseSession) -> None:
    session.execute("search wait")
    output = session.execute("section advanced-waits")
    assert output.splitlines() == [
        'Waits & Timeouts [2 / 2] search: "wait"',
        "  - expected-conditions: Expected Conditions",
    ]


def test_unknown_section_reports_error(session: BrowseSession) -> None:
    output = session.execute("section nope")
    assert output == "Unknown section 'nope'."
    assert session.state.active_section_id == "basics"


def test_step_commands(session: BrowseSession) -> None:
    session.execute("prev")
    assert session.state.active_section_id == "basics"
    session.execute("next")
    assert session.state.active_section_id == "advanced-waits"
    session.execute("next")
    assert session.state.active_section_id == "advanced-waits"
    session.execute("previous")
    assert session.state.active_section_id == "basics"


def test_sections_listing(session: BrowseSession) -> None:
    assert session.execute("sections").splitlines() == [
        "> 1/2 basics: WebDriver Basics (3 items)",
        "  2/2 advanced-waits: Waits & Timeouts (1 items)",
    ]


def test_help_and_unknown(session: BrowseSession) -> None:
    assert session.execute("help") == HELP_TEXT
    assert session.execute("dance") == "Unknown command 'dance'. Type 'help'."
    assert session.execute("   ") == ""


def test_run_stops_at_quit(session: BrowseSession) -> None:
    written: list[str] = []
    session.run(["next\n", "quit\n", "prev\n"], write=written.append)
    assert len(written) == 2, f"expected initial render plus one command: {written}"
    assert written[1].startswith("Waits & Timeouts [2 / 2]")
    assert session.state.active_section_id == "advanced-waits"
