"""
Analytics operations for catalog management.

Handles catalog statistics: counts by category, form groups and per-stat
ranges.
"""

import logging
from typing import Any, Dict, Sequence

from ...forms import group_by_name
from ...types import CharacterRecord

logger = logging.getLogger(__name__)

STAT_ATTRIBUTES = ("damage", "defense", "energy_rate", "move_speed", "average_stats")


def get_catalog_statistics(records: Sequence[CharacterRecord]) -> Dict[str, Any]:
    """Get catalog statistics for a collection of derived records."""
    groups = group_by_name(records)
    beasts = sum(1 for record in records if record.beast)

    stats: Dict[str, Any] = {
        "total_characters": len(records),
        "beasts": beasts,
        "non_beasts": len(records) - beasts,
        "distinct_names": len(groups),
        "multi_form_characters": sum(1 for idx in groups.values() if len(idx) > 1),
        "largest_form_group": max((len(idx) for idx in groups.values()), default=0),
        "stats": {},
    }

    for attribute in STAT_ATTRIBUTES:
        values = [
            value
            for value in (getattr(record, attribute) for record in records)
            if value is not None
        ]
        if not values:
            continue
        stats["stats"][attribute] = {
            "min": min(values),
            "max": max(values),
            "mean": sum(values) / len(values),
        }

    return stats
