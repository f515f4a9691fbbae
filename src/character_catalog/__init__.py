"""
Character Catalog

Parses a plain-text game-character database, numbers the forms of
characters that share a name, and serves sorted, filtered and exported views
of the resulting table.
"""

__version__ = "1.0.0"

from .characters import (
    CharacterRecord,
    ExportRow,
    SortDirection,
    SortField,
    ViewState,
    build_catalog,
    derive_forms,
    parse_database,
)
from .characters.catalog import Catalog

__all__ = [
    "Catalog",
    "CharacterRecord",
    "ExportRow",
    "SortDirection",
    "SortField",
    "ViewState",
    "build_catalog",
    "derive_forms",
    "parse_database",
    "__version__",
]
