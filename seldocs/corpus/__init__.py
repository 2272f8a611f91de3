"""Load the static documentation corpus (sections → items → examples).

The corpus is read once at startup from YAML and handed to
:class:`~seldocs.content_index.ContentIndex` as an immutable tuple of
:class:`Section` records. Validation happens here, at load time; the index
and the navigation engine trust their input.

Examples
--------
>>> from seldocs.corpus import load_default_corpus
>>> sections = load_default_corpus()
>>> [item.id for item in sections[0].items][:2]
['implicit-wait', 'explicit-wait']
"""

from .loader import build_sections, load_corpus, load_default_corpus
from .models import CorpusError, Example, Item, Section

__all__ = [
    "CorpusError",
    "Example",
    "Item",
    "Section",
    "build_sections",
    "load_corpus",
    "load_default_corpus",
]
