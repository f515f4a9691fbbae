"""
Character records: parsing, form numbering and the catalog built from them.
"""

from .forms import build_catalog, derive_forms
from .parser import parse_database, parse_line, parse_locale_number
from .types import (
    EXPORT_COLUMNS,
    CharacterRecord,
    ExportRow,
    SortDirection,
    SortField,
    ViewState,
)

__all__ = [
    "EXPORT_COLUMNS",
    "CharacterRecord",
    "ExportRow",
    "SortDirection",
    "SortField",
    "ViewState",
    "build_catalog",
    "derive_forms",
    "parse_database",
    "parse_line",
    "parse_locale_number",
]
