"""
Search operations for catalog management.

Handles the beast filter and column sorting over the loaded collection.
"""

import logging
import unicodedata
from typing import Any, Callable, List, Sequence, Tuple, Union

from ...types import CharacterRecord, SortDirection, SortField

logger = logging.getLogger(__name__)


def filter_records(
    records: Sequence[CharacterRecord], show_beasts: bool, only_beasts: bool
) -> List[CharacterRecord]:
    """Return the records visible under the beast toggles, in collection order.

    Hiding beasts takes precedence: with ``show_beasts=False`` no beast is
    returned even if ``only_beasts`` is set, so that combination yields the
    non-beasts.
    """
    if not show_beasts:
        return [record for record in records if not record.beast]
    if only_beasts:
        return [record for record in records if record.beast]
    return list(records)


def name_sort_key(name: str) -> Tuple[List[Tuple[int, str]], str, str]:
    """Collation key approximating locale-aware comparison.

    Letters and digits are compared without accents or case, and any other
    character weighs less than all of them (``"~x"`` before ``"alpha"``).
    Accents break ties next, then case with lowercase first
    (``"alpha"`` before ``"Alpha"``).
    """
    decomposed = unicodedata.normalize("NFKD", name)
    primary = [
        (1, ch.casefold()) if ch.isalnum() else (0, ch)
        for ch in decomposed
        if not unicodedata.combining(ch)
    ]
    return (primary, decomposed.casefold(), name.swapcase())


def _sort_key(sort_field: SortField) -> Callable[[CharacterRecord], Any]:
    attribute = sort_field.attribute
    if sort_field.is_text:
        return lambda record: name_sort_key(getattr(record, attribute))
    if sort_field is SortField.AVERAGE_STATS:
        # Underived records sort as zero rather than failing the comparison
        return lambda record: record.average_stats or 0.0
    return lambda record: getattr(record, attribute)


def sort_records(
    records: Sequence[CharacterRecord],
    sort_field: Union[str, int, SortField],
    direction: SortDirection = SortDirection.ASCENDING,
) -> List[CharacterRecord]:
    """Stable sort of ``records`` by one column.

    Records that compare equal keep their relative order in both directions.
    """
    resolved = SortField.parse(sort_field)
    return sorted(
        records,
        key=_sort_key(resolved),
        reverse=direction is SortDirection.DESCENDING,
    )
