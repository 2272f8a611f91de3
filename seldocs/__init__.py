"""Static documentation corpus with section navigation and search.

This package loads a sections → items → examples corpus, exposes read-only
lookups over it, and drives per-session navigation and free-text filtering.
It also renders the corpus as a static HTML site and offers a terminal
browse session, both through the ``seldocs`` console script.

Exports
-------
- ``ContentIndex``: read-only lookups over the corpus.
- ``NavigationEngine``: applies navigation actions and derives visible items.
- ``app`` / ``main``: the Cyclopts application and its entry point.

Examples
--------
>>> from seldocs import ContentIndex, NavigationEngine
>>> from seldocs.corpus import load_default_corpus
>>> engine = NavigationEngine(ContentIndex(load_default_corpus()))
>>> engine.state.active_section_id
'basics'
"""

from __future__ import annotations

from .cli import app, main
from .content_index import ContentIndex
from .navigation import (
    InvalidSectionError,
    NavigationEngine,
    NavigationState,
    StepDirection,
)

__all__ = [
    "ContentIndex",
    "InvalidSectionError",
    "NavigationEngine",
    "NavigationState",
    "StepDirection",
    "app",
    "main",
]
