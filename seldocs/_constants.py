"""Common literal values used across seldocs.

These constants keep filenames and packaged data paths centralized so the
loaders, generators, and tests can import the same values without drifting.
Intended for internal use within the seldocs package.

Examples
--------
>>> from seldocs import _constants
>>> _constants.SECTION_PAGE_TEMPLATE.format(prefix="docs-", section="basics")
'docs-basics.html'
>>> _constants.DEFAULT_CORPUS_PATH.name
'documentation.yaml'
"""

from pathlib import Path

PACKAGE_ROOT = Path(__file__).resolve().parent
DEFAULT_CORPUS_PATH = PACKAGE_ROOT / "data" / "documentation.yaml"
TEMPLATES_DIR = PACKAGE_ROOT / "templates"
SECTION_PAGE_TEMPLATE = "{prefix}{section}.html"
SITE_INDEX_FILENAME = "index.html"
SEARCH_INDEX_FILENAME = "search-index.json"
