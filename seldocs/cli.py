"""Cyclopts CLI entrypoint for rendering and browsing the seldocs corpus.

The ``seldocs`` console script defined here can render the static HTML site,
list the corpus sections, run a one-off search against a section, and open
an interactive browse session on stdin. Every option may also be supplied
through a ``SELDOCS_`` prefixed environment variable.

Examples
--------
Generate the site for the default configuration:

>>> from seldocs.cli import main
>>> main()  # doctest: +SKIP

Search one section from Python:

>>> from seldocs.cli import app
>>> app(["search", "wait", "--section", "basics"])  # doctest: +SKIP
"""

from __future__ import annotations

import logging
import sys
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from .config import SiteConfig, load_site_config
from .content_index import ContentIndex
from .corpus import load_corpus
from .generator import SiteGenerator
from .navigation import InvalidSectionError
from .session import BrowseSession

app = App(name="seldocs", config=cyclopts.config.Env("SELDOCS_", command=False))  # type: ignore[unknown-argument]

ConfigOption = typ.Annotated[
    Path | None,
    Parameter(help="Path to site config (defaults to built-in settings)"),
]
VerboseOption = typ.Annotated[bool, Parameter(help="Enable debug logging")]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _load(config: Path | None) -> tuple[SiteConfig, ContentIndex]:
    """Load the site config and build the content index it points at."""
    site_config = load_site_config(config)
    return site_config, ContentIndex(load_corpus(site_config.corpus_path))


@app.command(help="Render the static HTML documentation site.")
def generate(
    *,
    config: ConfigOption = None,
    output_dir: typ.Annotated[
        Path | None, Parameter(help="Override the output folder")
    ] = None,
    verbose: VerboseOption = False,
) -> None:
    """Render every section page, the search index, and the landing page.

    Parameters
    ----------
    config : Path or None, optional
        Path to the ``site.yaml`` configuration file; built-in defaults (and
        the packaged corpus) are used when omitted.
    output_dir : Path or None, optional
        Override for the configured output directory.
    verbose : bool, optional
        Emit debug logging while rendering.

    Returns
    -------
    None
        Writes rendered artifacts and prints the generated paths.
    """
    _configure_logging(verbose)
    site_config, index = _load(config)
    written = SiteGenerator(site_config, index, output_dir=output_dir).run()
    for path in written:
        print(f"wrote {_format_path(path)}")


@app.command(help="List the corpus sections in navigation order.")
def sections(*, config: ConfigOption = None, verbose: VerboseOption = False) -> None:
    """Print one line per section: position, id, title, and item count."""
    _configure_logging(verbose)
    _site_config, index = _load(config)
    print(BrowseSession(index).execute("sections"))


@app.command(help="Filter one section's items by a case-insensitive query.")
def search(
    query: str,
    *,
    section: typ.Annotated[
        str | None, Parameter(help="Section id (defaults to the first section)")
    ] = None,
    config: ConfigOption = None,
    verbose: VerboseOption = False,
) -> None:
    """Print the items of ``section`` whose title or description match ``query``.

    Raises
    ------
    SystemExit
        With status 1 when ``section`` is not a known section id.
    """
    _configure_logging(verbose)
    _site_config, index = _load(config)
    session = BrowseSession(index)
    if section is not None:
        try:
            session.engine.set_active_section(section)
        except InvalidSectionError as exc:
            print(exc, file=sys.stderr)
            raise SystemExit(1) from exc
    session.engine.set_search_query(query)
    print(session.render())


@app.command(help="Browse the corpus interactively; type 'help' for commands.")
def browse(*, config: ConfigOption = None, verbose: VerboseOption = False) -> None:
    """Run a browse session reading commands from standard input."""
    _configure_logging(verbose)
    _site_config, index = _load(config)
    BrowseSession(index).run(sys.stdin)


def main() -> None:
    """Invoke the Cyclopts application that powers the ``seldocs`` command."""
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
