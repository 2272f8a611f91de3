"""Typed dataclasses describing the documentation corpus."""

from __future__ import annotations

import dataclasses as dc


class CorpusError(ValueError):
    """Raised when a corpus file is malformed or violates its invariants."""


@dc.dataclass(frozen=True, slots=True)
class Example:
    """One illustrative code sample attached to an item.

    Attributes
    ----------
    title : str
        Short heading shown above the sample.
    description : str
        One-line explanation of what the sample demonstrates.
    code : str
        Source code of the sample.
    language : str
        Language tag passed to the syntax highlighter.
    """

    title: str
    description: str
    code: str
    language: str


@dc.dataclass(frozen=True, slots=True)
class Item:
    """A single documented topic within a section.

    Attributes
    ----------
    id : str
        Identifier unique across the whole corpus; doubles as the page anchor.
    title : str
        Topic heading.
    description : str
        Prose summary; searched alongside ``title``.
    syntax : str
        Canonical call signature shown above the examples.
    examples : tuple[Example, ...]
        Ordered code samples.
    notes : str or None
        Optional call-out rendered after the examples.
    language : str or None
        Language tag for ``syntax``; ``None`` defers to the site default.
    """

    id: str
    title: str
    description: str
    syntax: str
    examples: tuple[Example, ...] = ()
    notes: str | None = None
    language: str | None = None


@dc.dataclass(frozen=True, slots=True)
class Section:
    """Top-level grouping of related items; order defines navigation."""

    id: str
    title: str
    description: str
    items: tuple[Item, ...] = ()


__all__ = ["CorpusError", "Example", "Item", "Section"]
