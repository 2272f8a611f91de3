"""Shared dataclasses used by the page generation pipeline."""

from __future__ import annotations

import dataclasses as dc


@dc.dataclass(slots=True)
class ExampleModel:
    """Rendered example passed to the item template.

    Attributes
    ----------
    number : int
        One-based position of the example within its item.
    title : str
        Example heading.
    description_html : str
        Rendered HTML for the example description.
    code_html : str
        Highlighted code block markup.
    code : str
        Raw code, kept for the copy button.
    language : str
        Language tag shown in the code block header.
    """

    number: int
    title: str
    description_html: str
    code_html: str
    code: str
    language: str


@dc.dataclass(slots=True)
class ItemModel:
    """Structured data passed to the doc item template.

    Attributes
    ----------
    id : str
        Anchor identifier of the item.
    title : str
        Item heading.
    description_html : str
        Rendered HTML for the description paragraph.
    syntax : str
        Raw syntax text, kept for the copy button.
    syntax_html : str
        Highlighted syntax block.
    syntax_language : str
        Language tag used for the syntax block.
    examples : list[ExampleModel]
        Rendered examples in corpus order.
    notes_html : str
        Rendered notes call-out; empty when the item has no notes.
    is_active : bool
        Whether the item is the highlighted one.
    is_hidden : bool
        Whether the current search query filters the item out.
    """

    id: str
    title: str
    description_html: str
    syntax: str
    syntax_html: str
    syntax_language: str
    examples: list[ExampleModel]
    notes_html: str
    is_active: bool = False
    is_hidden: bool = False


@dc.dataclass(slots=True)
class SectionPageModel:
    """Context for one rendered section page.

    Attributes
    ----------
    id : str
        Section identifier.
    title : str
        Section title used for the hero and HTML title.
    description : str
        Section summary shown in the hero.
    items : list[ItemModel]
        Every item of the section, flagged hidden when filtered out.
    topic_count : int
        Number of visible items, shown as the hero badge.
    position_label : str
        One-based ``"n / total"`` pager label.
    previous_href : str or None
        Link to the previous section page, ``None`` on the first section.
    next_href : str or None
        Link to the next section page, ``None`` on the last section.
    """

    id: str
    title: str
    description: str
    items: list[ItemModel]
    topic_count: int
    position_label: str
    previous_href: str | None
    next_href: str | None


__all__ = ["ExampleModel", "ItemModel", "SectionPageModel"]
