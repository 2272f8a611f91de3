"""Shared fixtures for the seldocs test suite.

The ``small_sections`` fixture mirrors the two-section corpus used throughout
the navigation tests: a ``basics`` section holding two wait items and a
window item, followed by an ``advanced-waits`` section. Tests that need the
full bundled corpus load it through ``load_default_corpus`` instead.
"""

from __future__ import annotations

import typing as typ

import pytest

from seldocs.config import SiteConfig
from seldocs.content_index import ContentIndex
from seldocs.corpus import build_sections

if typ.TYPE_CHECKING:
    from pathlib import Path

    from seldocs.corpus import Section

SMALL_CORPUS: list[dict[str, typ.Any]] = [
    {
        "id": "basics",
        "title": "WebDriver Basics",
        "description": "Setup and fundamentals.",
        "items": [
            {
                "id": "implicit-wait",
                "title": "Implicit Wait",
                "description": "Global timeout applied to every element lookup.",
                "syntax": "driver.manage().timeouts().implicitlyWait(d);",
                "examples": [
                    {
                        "title": "Setup Implicit Wait",
                        "description": "Configure once in **BeforeClass**.",
                        "code": "driver.manage().timeouts().implicitlyWait(d);",
                        "language": "java",
                    }
                ],
                "notes": "Applies to all findElement calls.",
            },
            {
                "id": "explicit-wait",
                "title": "Explicit Wait",
                "description": "Wait for a specific condition with WebDriverWait.",
                "syntax": "new WebDriverWait(driver, d).until(condition);",
                "examples": [
                    {
                        "title": "Visible",
                        "description": "Wait until visible.",
                        "code": "wait.until(visibilityOf(el));",
                        "language": "java",
                    },
                    {
                        "title": "Script",
                        "description": "Poll from JavaScript.",
                        "code": "return document.readyState;",
                        "language": "js",
                    },
                ],
            },
            {
                "id": "window-management",
                "title": "Window Management",
                "description": "Maximise and resize the browser window.",
                "syntax": "driver.manage().window().maximize();",
            },
        ],
    },
    {
        "id": "advanced-waits",
        "title": "Waits & Timeouts",
        "description": "Expected conditions and page loads.",
        "items": [
            {
                "id": "expected-conditions",
                "title": "Expected Conditions",
                "description": "Conditions usable with WebDriverWait.",
                "syntax": "ExpectedConditions.elementToBeClickable(by);",
            }
        ],
    },
]


@pytest.fixture
def small_sections() -> tuple[Section, ...]:
    """Return the two-section corpus as frozen Section records."""
    return build_sections(SMALL_CORPUS)


@pytest.fixture
def small_index(small_sections: tuple[Section, ...]) -> ContentIndex:
    """Return a ContentIndex over the two-section corpus."""
    return ContentIndex(small_sections)


@pytest.fixture
def site_config(tmp_path: Path) -> SiteConfig:
    """Return default site settings writing into a per-test directory."""
    return SiteConfig(output_dir=tmp_path / "public")
