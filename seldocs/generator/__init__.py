"""Utilities for rendering and generating seldocs documentation pages."""

from .models import ExampleModel, ItemModel, SectionPageModel
from .page_generator import SiteGenerator
from .renderer import HtmlContentRenderer
from .search_index import SearchEntry, SectionEntries, decode_entries

__all__ = [
    "ExampleModel",
    "HtmlContentRenderer",
    "ItemModel",
    "SearchEntry",
    "SectionEntries",
    "SectionPageModel",
    "SiteGenerator",
    "decode_entries",
]
