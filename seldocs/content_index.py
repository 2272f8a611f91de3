"""Read-only lookups over the static documentation corpus.

:class:`ContentIndex` wraps the tuple of sections produced by
:func:`seldocs.corpus.load_corpus`. It never raises for unknown ids: lookups
answer ``None`` and positions answer ``-1``, because the corpus is trusted
input validated at load time.

>>> from seldocs.corpus import load_default_corpus
>>> index = ContentIndex(load_default_corpus())
>>> index.get_section_index("basics")
0
>>> index.get_section_index("missing")
-1
"""

from __future__ import annotations

import typing as typ

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from .corpus import Item, Section


class ContentIndex:
    """Immutable, ordered view over the corpus sections."""

    def __init__(self, sections: cabc.Iterable[Section]) -> None:
        self._sections: tuple[Section, ...] = tuple(sections)
        self._positions: dict[str, int] = {
            section.id: idx for idx, section in enumerate(self._sections)
        }
        self._items: dict[str, tuple[Item, Section]] = {
            item.id: (item, section)
            for section in self._sections
            for item in section.items
        }

    def __len__(self) -> int:
        return len(self._sections)

    @property
    def section_count(self) -> int:
        """Return the number of sections in the corpus."""
        return len(self._sections)

    @property
    def first_section(self) -> Section:
        """Return the section a new navigation session starts on."""
        return self._sections[0]

    def get_sections(self) -> tuple[Section, ...]:
        """Return every section in corpus order."""
        return self._sections

    def get_section_by_id(self, section_id: str) -> Section | None:
        """Return the section with ``section_id`` or ``None`` when unknown."""
        position = self._positions.get(section_id)
        if position is None:
            return None
        return self._sections[position]

    def get_section_index(self, section_id: str) -> int:
        """Return the zero-based position of ``section_id`` or ``-1``."""
        return self._positions.get(section_id, -1)

    def get_item_by_id(self, item_id: str) -> Item | None:
        """Return the item with ``item_id`` from any section, or ``None``."""
        entry = self._items.get(item_id)
        return entry[0] if entry else None

    def find_section_for_item(self, item_id: str) -> Section | None:
        """Return the section that owns ``item_id``, or ``None``."""
        entry = self._items.get(item_id)
        return entry[1] if entry else None


__all__ = ["ContentIndex"]
