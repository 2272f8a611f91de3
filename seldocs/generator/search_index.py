"""Serialize the per-section search records consumed by the page script.

The page script applies the same predicate as
:func:`seldocs.navigation.matches_query`: lowercase the query, then test
substring containment against each entry's title and description, within the
active section only. Only those two fields are exported.
"""

from __future__ import annotations

import typing as typ

import msgspec
import msgspec.json as msgspec_json

if typ.TYPE_CHECKING:
    from seldocs.corpus import Section


class SearchEntry(msgspec.Struct, frozen=True):
    """Searchable fields of one item."""

    id: str
    title: str
    description: str


class SectionEntries(msgspec.Struct, frozen=True):
    """Search entries for one section, in corpus order."""

    id: str
    title: str
    href: str
    items: list[SearchEntry]


def build_section_entries(section: Section, href: str) -> SectionEntries:
    """Return the search record for ``section`` linked at ``href``."""
    return SectionEntries(
        id=section.id,
        title=section.title,
        href=href,
        items=[
            SearchEntry(id=item.id, title=item.title, description=item.description)
            for item in section.items
        ],
    )


def encode_entries(entries: SectionEntries | list[SectionEntries]) -> bytes:
    """Encode search records as compact JSON."""
    return msgspec_json.encode(entries)


def inline_json(entries: SectionEntries) -> str:
    """Return JSON safe to embed inside a ``<script>`` element."""
    return encode_entries(entries).decode("utf-8").replace("</", "<\\/")


def decode_entries(payload: bytes | str) -> list[SectionEntries]:
    """Decode a search index file written by :func:`encode_entries`."""
    return msgspec_json.decode(payload, type=list[SectionEntries])


__all__ = [
    "SearchEntry",
    "SectionEntries",
    "build_section_entries",
    "decode_entries",
    "encode_entries",
    "inline_json",
]
