"""Section navigation and free-text filtering over a :class:`ContentIndex`.

A browsing session owns one :class:`NavigationState` (active section, optional
highlighted item, search text). :class:`NavigationEngine` applies user actions
to that state and derives the list of visible items after every change.

Rules worth knowing before changing anything here:

* Switching sections keeps the search text; the filter re-scopes to the new
  section's items.
* The highlighted item is never validated or cleared; it is display emphasis
  only.
* An empty result for a non-empty query is final. Callers show a "no results"
  notice rather than the unfiltered list.
* Stepping past either end of the corpus does nothing.

Examples
--------
>>> from seldocs.content_index import ContentIndex
>>> from seldocs.corpus import load_default_corpus
>>> engine = NavigationEngine(ContentIndex(load_default_corpus()))
>>> engine.set_search_query("wait")
>>> [item.id for item in engine.get_visible_items()]
['implicit-wait', 'explicit-wait']
>>> engine.step_section(StepDirection.PREVIOUS)
>>> engine.state.active_section_id
'basics'
"""

from __future__ import annotations

import dataclasses as dc
import enum
import logging
import typing as typ

if typ.TYPE_CHECKING:
    from .content_index import ContentIndex
    from .corpus import Item, Section

logger = logging.getLogger(__name__)


class InvalidSectionError(LookupError):
    """Raised when navigation targets a section id absent from the corpus."""

    def __init__(self, section_id: str) -> None:
        self.section_id = section_id
        super().__init__(f"Unknown section '{section_id}'.")


class StepDirection(enum.Enum):
    """Direction for :meth:`NavigationEngine.step_section`."""

    PREVIOUS = "previous"
    NEXT = "next"

    @property
    def offset(self) -> int:
        return -1 if self is StepDirection.PREVIOUS else 1


@dc.dataclass(slots=True)
class NavigationState:
    """Mutable selection state for one browsing session.

    Attributes
    ----------
    active_section_id : str
        Id of the section being displayed; always a known section.
    active_item_id : str or None
        Item to emphasise when rendering; may refer to a hidden item.
    search_query : str
        Raw search text exactly as typed.
    """

    active_section_id: str
    active_item_id: str | None = None
    search_query: str = ""


@dc.dataclass(frozen=True, slots=True)
class SectionPosition:
    """Zero-based position of the active section among ``total`` sections."""

    index: int
    total: int

    @property
    def label(self) -> str:
        """Return the one-based ``"n / total"`` label used by pagers."""
        return f"{self.index + 1} / {self.total}"


@dc.dataclass(frozen=True, slots=True)
class NavigationView:
    """Everything the presentation layer needs to render the current state."""

    active_section: Section
    active_item_id: str | None
    visible_items: tuple[Item, ...]
    section_position: SectionPosition
    search_query: str
    can_step_previous: bool
    can_step_next: bool

    @property
    def is_searching(self) -> bool:
        """Return True when a non-empty query is filtering the section."""
        return self.search_query != ""

    @property
    def has_no_results(self) -> bool:
        """Return True when a query is active and nothing matched it."""
        return self.is_searching and not self.visible_items


def matches_query(item: Item, query: str) -> bool:
    """Return True when ``query`` occurs in the item's title or description.

    Matching is plain substring containment after lowercasing both sides;
    there is no tokenising, stemming or fuzzy matching.
    """
    needle = query.lower()
    return needle in item.title.lower() or needle in item.description.lower()


def filter_items(items: typ.Sequence[Item], query: str) -> tuple[Item, ...]:
    """Return the order-preserving subsequence of ``items`` matching ``query``."""
    if query == "":
        return tuple(items)
    return tuple(item for item in items if matches_query(item, query))


class NavigationEngine:
    """Apply navigation actions to a session state and derive visible items."""

    def __init__(
        self, index: ContentIndex, state: NavigationState | None = None
    ) -> None:
        """Bind the engine to a corpus index and a session state.

        Parameters
        ----------
        index : ContentIndex
            Corpus lookups; must hold at least one section.
        state : NavigationState, optional
            Existing state to drive. A fresh state positioned on the first
            section is created when omitted.

        Raises
        ------
        InvalidSectionError
            If ``state`` points at a section the index does not know.
        """
        self.index = index
        if state is None:
            state = NavigationState(active_section_id=index.first_section.id)
        elif index.get_section_by_id(state.active_section_id) is None:
            raise InvalidSectionError(state.active_section_id)
        self.state = state

    @property
    def active_section(self) -> Section:
        """Return the section record for the current state."""
        section = self.index.get_section_by_id(self.state.active_section_id)
        if section is None:  # pragma: no cover - guarded by every setter
            raise InvalidSectionError(self.state.active_section_id)
        return section

    def set_active_section(self, section_id: str) -> None:
        """Make ``section_id`` the active section.

        The search query and highlighted item are left as they are.

        Raises
        ------
        InvalidSectionError
            If ``section_id`` is unknown; the state is not modified.
        """
        if self.index.get_section_by_id(section_id) is None:
            logger.warning("rejected navigation to unknown section %r", section_id)
            raise InvalidSectionError(section_id)
        self.state.active_section_id = section_id
        logger.debug("active section -> %s", section_id)

    def set_active_item(self, item_id: str | None) -> None:
        """Record ``item_id`` for highlighting; unknown ids are accepted."""
        self.state.active_item_id = item_id

    def set_search_query(self, text: str) -> None:
        """Replace the search text verbatim."""
        self.state.search_query = text
        logger.debug("search query -> %r", text)

    def clear_search(self) -> None:
        """Reset the search text so every item of the section is visible."""
        self.set_search_query("")

    def get_visible_items(self) -> tuple[Item, ...]:
        """Return the active section's items filtered by the search query.

        Returns
        -------
        tuple[Item, ...]
            All items in corpus order when the query is empty; otherwise the
            items whose title or description contains the query,
            case-insensitively, in corpus order. May be empty.
        """
        return filter_items(self.active_section.items, self.state.search_query)

    def can_step(self, direction: StepDirection) -> bool:
        """Return True when stepping in ``direction`` would change section."""
        target = self.index.get_section_index(self.state.active_section_id)
        target += direction.offset
        return 0 <= target < self.index.section_count

    def step_section(self, direction: StepDirection) -> None:
        """Move to the neighbouring section; a no-op at either boundary."""
        if not self.can_step(direction):
            return
        position = self.index.get_section_index(self.state.active_section_id)
        target = self.index.get_sections()[position + direction.offset]
        self.state.active_section_id = target.id
        logger.debug("stepped %s -> %s", direction.value, target.id)

    def section_position(self) -> SectionPosition:
        """Return the active section's zero-based position and the total."""
        return SectionPosition(
            index=self.index.get_section_index(self.state.active_section_id),
            total=self.index.section_count,
        )

    def snapshot(self) -> NavigationView:
        """Return the presentation view for the current state."""
        return NavigationView(
            active_section=self.active_section,
            active_item_id=self.state.active_item_id,
            visible_items=self.get_visible_items(),
            section_position=self.section_position(),
            search_query=self.state.search_query,
            can_step_previous=self.can_step(StepDirection.PREVIOUS),
            can_step_next=self.can_step(StepDirection.NEXT),
        )


__all__ = [
    "InvalidSectionError",
    "NavigationEngine",
    "NavigationState",
    "NavigationView",
    "SectionPosition",
    "StepDirection",
    "filter_items",
    "matches_query",
]
