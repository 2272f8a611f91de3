"""Line-oriented browse session over one navigation state.

:class:`BrowseSession` owns a :class:`~seldocs.navigation.NavigationEngine`
and turns text commands into state changes, returning a plain-text rendering
of the resulting view after each one. It backs the ``seldocs browse``
command and is easy to drive from tests:

>>> from seldocs.content_index import ContentIndex
>>> from seldocs.corpus import load_default_corpus
>>> session = BrowseSession(ContentIndex(load_default_corpus()))
>>> print(session.execute("search zzz-no-match"))  # doctest: +ELLIPSIS
WebDriver Basics [1 / ...] search: "zzz-no-match"
No results found for "zzz-no-match".
"""

from __future__ import annotations

import dataclasses as dc
import typing as typ

from .navigation import (
    InvalidSectionError,
    NavigationEngine,
    NavigationState,
    NavigationView,
    StepDirection,
)

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from .content_index import ContentIndex

HELP_TEXT = """\
Commands:
  sections            list every section
  section <id>        switch to a section (keeps the search text)
  item <id>|none      highlight an item
  search <text>       filter the active section
  clear               clear the search text
  next / prev         step to the neighbouring section
  show                redraw the current view
  help                show this message
  quit                leave the session"""


@dc.dataclass(slots=True)
class CommandResult:
    """Outcome of one session command."""

    output: str
    finished: bool = False


class BrowseSession:
    """Interpret browse commands against a single navigation state."""

    def __init__(
        self, index: ContentIndex, state: NavigationState | None = None
    ) -> None:
        self.engine = NavigationEngine(index, state)
        self._handlers: dict[str, cabc.Callable[[str], str]] = {
            "sections": self._list_sections,
            "section": self._select_section,
            "item": self._select_item,
            "search": self._search,
            "clear": self._clear,
            "next": self._step_next,
            "prev": self._step_previous,
            "previous": self._step_previous,
            "show": self._show,
            "help": self._help,
        }

    @property
    def state(self) -> NavigationState:
        return self.engine.state

    def execute(self, line: str) -> str:
        """Run one command line and return the text to display."""
        return self.handle(line).output

    def handle(self, line: str) -> CommandResult:
        """Parse ``line`` and dispatch it.

        The command word is separated from its argument by the first space;
        the rest of the line is passed on verbatim, so search text keeps any
        further leading or trailing spaces.
        """
        stripped = line.lstrip()
        if not stripped:
            return CommandResult(output="")
        command, _, argument = stripped.partition(" ")
        command = command.lower().rstrip("\n")
        argument = argument.rstrip("\n")
        if command in {"quit", "exit"}:
            return CommandResult(output="", finished=True)
        handler = self._handlers.get(command)
        if handler is None:
            return CommandResult(output=f"Unknown command '{command}'. Type 'help'.")
        return CommandResult(output=handler(argument))

    def run(
        self,
        lines: cabc.Iterable[str],
        write: cabc.Callable[[str], typ.Any] = print,
    ) -> None:
        """Process ``lines`` until exhausted or a quit command is seen."""
        write(self.render())
        for line in lines:
            result = self.handle(line)
            if result.finished:
                return
            if result.output:
                write(result.output)

    def render(self, view: NavigationView | None = None) -> str:
        """Render ``view`` (the current snapshot by default) as text."""
        view = view or self.engine.snapshot()
        lines = [f"{view.active_section.title} [{view.section_position.label}]"]
        if view.is_searching:
            lines[0] += f' search: "{view.search_query}"'
        if view.has_no_results:
            lines.append(f'No results found for "{view.search_query}".')
            return "\n".join(lines)
        if not view.is_searching:
            lines.append(f"{len(view.visible_items)} Topics")
        for item in view.visible_items:
            marker = "*" if item.id == view.active_item_id else "-"
            lines.append(f"  {marker} {item.id}: {item.title}")
        return "\n".join(lines)

    def _list_sections(self, _argument: str) -> str:
        total = self.engine.index.section_count
        active = self.state.active_section_id
        rows = []
        for position, section in enumerate(self.engine.index.get_sections()):
            marker = ">" if section.id == active else " "
            rows.append(
                f"{marker} {position + 1}/{total} {section.id}: {section.title} "
                f"({len(section.items)} items)"
            )
        return "\n".join(rows)

    def _select_section(self, argument: str) -> str:
        section_id = argument.strip()
        try:
            self.engine.set_active_section(section_id)
        except InvalidSectionError as exc:
            return str(exc)
        return self.render()

    def _select_item(self, argument: str) -> str:
        item_id = argument.strip()
        self.engine.set_active_item(None if item_id in {"", "none"} else item_id)
        return self.render()

    def _search(self, argument: str) -> str:
        self.engine.set_search_query(argument)
        return self.render()

    def _clear(self, _argument: str) -> str:
        self.engine.clear_search()
        return self.render()

    def _step_next(self, _argument: str) -> str:
        self.engine.step_section(StepDirection.NEXT)
        return self.render()

    def _step_previous(self, _argument: str) -> str:
        self.engine.step_section(StepDirection.PREVIOUS)
        return self.render()

    def _show(self, _argument: str) -> str:
        return self.render()

    @staticmethod
    def _help(_argument: str) -> str:
        return HELP_TEXT


__all__ = ["HELP_TEXT", "BrowseSession", "CommandResult"]
