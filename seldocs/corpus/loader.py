"""Load the documentation corpus YAML into frozen dataclasses."""

from __future__ import annotations

import logging
import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

from .._constants import DEFAULT_CORPUS_PATH
from .models import CorpusError, Example, Item, Section

logger = logging.getLogger(__name__)


def load_corpus(path: Path) -> tuple[Section, ...]:
    """Load and validate a corpus file.

    Parameters
    ----------
    path : Path
        YAML file holding either a top-level ``sections`` list or a bare list
        of section mappings.

    Returns
    -------
    tuple[Section, ...]
        Sections in file order, each carrying its items and examples.

    Raises
    ------
    FileNotFoundError
        If ``path`` does not exist.
    CorpusError
        If a required field is missing, an id is duplicated, or the corpus
        holds no sections.
    YAMLError
        If the YAML content cannot be parsed.

    Examples
    --------
    >>> from seldocs.corpus import load_default_corpus
    >>> sections = load_default_corpus()
    >>> sections[0].id
    'basics'
    """
    if not path.exists():
        msg = f"Corpus file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle)

    match loaded:
        case {"sections": list() as raw_sections}:
            pass
        case list() as raw_sections:
            pass
        case _:
            msg = "Corpus must be a list of sections or a mapping with 'sections'."
            raise CorpusError(msg)

    sections = build_sections(raw_sections)
    logger.debug(
        "loaded %d sections (%d items) from %s",
        len(sections),
        sum(len(section.items) for section in sections),
        path,
    )
    return sections


def load_default_corpus() -> tuple[Section, ...]:
    """Return the sample corpus bundled with the package."""
    return load_corpus(DEFAULT_CORPUS_PATH)


def build_sections(payload: typ.Sequence[typ.Any]) -> tuple[Section, ...]:
    """Build sections from plain mappings, enforcing id uniqueness."""
    if not payload:
        msg = "Corpus defines no sections."
        raise CorpusError(msg)

    section_ids: set[str] = set()
    item_ids: set[str] = set()
    sections: list[Section] = []
    for index, raw in enumerate(payload):
        if not isinstance(raw, dict):
            msg = f"Section #{index + 1} must be a mapping."
            raise CorpusError(msg)
        section_id = _require_str(raw, "id", f"section #{index + 1}")
        if section_id in section_ids:
            msg = f"Duplicate section id '{section_id}'."
            raise CorpusError(msg)
        section_ids.add(section_id)
        where = f"section '{section_id}'"
        items = tuple(
            _build_item(item, where, item_ids) for item in raw.get("items") or []
        )
        sections.append(
            Section(
                id=section_id,
                title=_require_str(raw, "title", where),
                description=str(raw.get("description") or ""),
                items=items,
            )
        )
    return tuple(sections)


def _build_item(raw: object, where: str, seen: set[str]) -> Item:
    """Build one item, recording its id in ``seen``."""
    if not isinstance(raw, dict):
        msg = f"Items in {where} must be mappings."
        raise CorpusError(msg)
    item_id = _require_str(raw, "id", f"an item of {where}")
    if item_id in seen:
        msg = f"Duplicate item id '{item_id}' in {where}."
        raise CorpusError(msg)
    seen.add(item_id)
    item_where = f"item '{item_id}'"
    examples = tuple(
        _build_example(example, item_where) for example in raw.get("examples") or []
    )
    return Item(
        id=item_id,
        title=_require_str(raw, "title", item_where),
        description=str(raw.get("description") or ""),
        syntax=str(raw.get("syntax") or ""),
        examples=examples,
        notes=_optional_text(raw.get("notes")),
        language=_optional_text(raw.get("language")),
    )


def _build_example(raw: object, where: str) -> Example:
    if not isinstance(raw, dict):
        msg = f"Examples in {where} must be mappings."
        raise CorpusError(msg)
    return Example(
        title=_require_str(raw, "title", f"an example of {where}"),
        description=str(raw.get("description") or ""),
        code=str(raw.get("code") or ""),
        language=str(raw.get("language") or "text"),
    )


def _require_str(raw: typ.Mapping[str, typ.Any], key: str, where: str) -> str:
    """Return ``raw[key]`` as a non-empty string or raise CorpusError."""
    value = raw.get(key)
    if value is None or not str(value).strip():
        msg = f"Missing '{key}' in {where}."
        raise CorpusError(msg)
    return str(value)


def _optional_text(value: object | None) -> str | None:
    if value is None:
        return None
    text = str(value)
    return text if text.strip() else None


__all__ = ["build_sections", "load_corpus", "load_default_corpus"]
