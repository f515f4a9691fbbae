"""
Form numbering for characters that share a name.

Records with the same name are forms of one character. Each form is labelled
``"<name> (Form k)"`` where k ranks it by average stats, weakest first.
"""

from dataclasses import replace
from typing import Dict, List, Sequence

from .parser import parse_database
from .types import CharacterRecord


def average_stats(record: CharacterRecord) -> float:
    return record.stats_total / 4


def form_label(name: str, rank: int) -> str:
    return f"{name} (Form {rank})"


def group_by_name(records: Sequence[CharacterRecord]) -> Dict[str, List[int]]:
    """Map each name to the indices of its records, in first-seen order."""
    groups: Dict[str, List[int]] = {}
    for index, record in enumerate(records):
        groups.setdefault(record.name, []).append(index)
    return groups


def derive_forms(records: Sequence[CharacterRecord]) -> List[CharacterRecord]:
    """Fill in ``average_stats`` and ``display_name`` for every record.

    Returns new records in the same order as ``records``; the input is left
    untouched. Forms are ranked by a stable sort, so equal averages keep their
    original relative order.
    """
    derived = [
        replace(record, average_stats=average_stats(record), display_name=record.name)
        for record in records
    ]

    for name, indices in group_by_name(derived).items():
        if len(indices) < 2:
            continue
        ranked = sorted(indices, key=lambda i: derived[i].average_stats)
        for rank, index in enumerate(ranked, start=1):
            derived[index].display_name = form_label(name, rank)

    return derived


def build_catalog(raw_text: str) -> List[CharacterRecord]:
    """Parse raw database text and derive form labels in one pass."""
    return derive_forms(parse_database(raw_text))
