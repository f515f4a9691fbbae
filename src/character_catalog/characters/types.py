"""
Character catalog types and data structures.

Records parsed from the database, the rows handed to the spreadsheet
exporter, and the caller-owned view state (filter toggles and sort column).
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional, Tuple, Union

from ..core.exceptions import ValidationError

# Column headers of the exported sheet, in order
EXPORT_COLUMNS: Tuple[str, ...] = (
    "name",
    "damage",
    "defense",
    "energyRate",
    "moveSpeed",
    "average",
    "beast",
)


@dataclass
class CharacterRecord:
    """One parsed character line.

    ``display_name`` and ``average_stats`` stay unset until the record has
    been through :func:`~character_catalog.characters.forms.derive_forms`.
    """

    name: str
    damage: float
    defense: float
    energy_rate: float
    move_speed: float
    beast: bool
    display_name: str = ""
    average_stats: Optional[float] = None

    @property
    def stats_total(self) -> float:
        return self.damage + self.defense + self.energy_rate + self.move_speed

    @property
    def form_number(self) -> Optional[int]:
        """Form rank encoded in the display name, None for single-form characters."""
        prefix = f"{self.name} (Form "
        if self.display_name.startswith(prefix) and self.display_name.endswith(")"):
            rank = self.display_name[len(prefix) : -1]
            if rank.isdigit():
                return int(rank)
        return None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "displayName": self.display_name or self.name,
            "damage": self.damage,
            "defense": self.defense,
            "energyRate": self.energy_rate,
            "moveSpeed": self.move_speed,
            "averageStats": self.average_stats,
            "beast": self.beast,
        }


@dataclass(frozen=True)
class ExportRow:
    """A record flattened for the spreadsheet exporter."""

    name: str
    damage: float
    defense: float
    energy_rate: float
    move_speed: float
    average: str
    beast: bool

    def to_dict(self) -> Dict[str, Any]:
        """Row keyed by the exported column headers, in column order."""
        values = (
            self.name,
            self.damage,
            self.defense,
            self.energy_rate,
            self.move_speed,
            self.average,
            self.beast,
        )
        return dict(zip(EXPORT_COLUMNS, values))


class SortDirection(Enum):
    """Sort direction, valued as the comparison multiplier."""

    ASCENDING = 1
    DESCENDING = -1

    def flipped(self) -> "SortDirection":
        if self is SortDirection.ASCENDING:
            return SortDirection.DESCENDING
        return SortDirection.ASCENDING


class SortField(Enum):
    """Sortable table columns, in display order."""

    NAME = "name"
    DAMAGE = "damage"
    DEFENSE = "defense"
    ENERGY_RATE = "energyRate"
    MOVE_SPEED = "moveSpeed"
    AVERAGE_STATS = "averageStats"
    BEAST = "beast"

    @property
    def attribute(self) -> str:
        """CharacterRecord attribute holding this column's value."""
        return _SORT_ATTRIBUTES[self]

    @property
    def is_text(self) -> bool:
        return self is SortField.NAME

    @classmethod
    def parse(cls, value: Union[str, int, "SortField"]) -> "SortField":
        """Resolve a field from its column name, attribute name or column index."""
        if isinstance(value, SortField):
            return value

        columns = list(cls)
        if isinstance(value, int) or (isinstance(value, str) and value.isdigit()):
            index = int(value)
            if 0 <= index < len(columns):
                return columns[index]
            raise ValidationError(
                "sort_field", value, f"column index must be 0..{len(columns) - 1}"
            )

        key = value.strip()
        for member in columns:
            if key in (member.value, member.attribute, member.name.lower()):
                return member
        raise ValidationError(
            "sort_field",
            value,
            f"expected one of {', '.join(m.value for m in columns)}",
        )


_SORT_ATTRIBUTES = {
    SortField.NAME: "name",
    SortField.DAMAGE: "damage",
    SortField.DEFENSE: "defense",
    SortField.ENERGY_RATE: "energy_rate",
    SortField.MOVE_SPEED: "move_speed",
    SortField.AVERAGE_STATS: "average_stats",
    SortField.BEAST: "beast",
}


@dataclass
class ViewState:
    """Filter toggles and sort column chosen by the caller.

    ``show_beasts=False`` always wins over ``only_beasts``: the toggles keep
    the two consistent, and the filter treats hiding as authoritative if they
    are ever set inconsistently by hand.
    """

    show_beasts: bool = True
    only_beasts: bool = False
    sort_field: Optional[SortField] = None
    sort_direction: SortDirection = field(default=SortDirection.ASCENDING)

    def toggle_beasts(self) -> None:
        self.show_beasts = not self.show_beasts
        if not self.show_beasts:
            self.only_beasts = False

    def toggle_only_beasts(self) -> None:
        self.only_beasts = not self.only_beasts
        if self.only_beasts:
            self.show_beasts = True

    def select_sort(self, sort_field: Union[str, int, SortField]) -> SortDirection:
        """Register a click on a column header and return the direction to use.

        Clicking the current column again flips the direction; any other
        column starts ascending.
        """
        selected = SortField.parse(sort_field)
        if self.sort_field is selected:
            self.sort_direction = self.sort_direction.flipped()
        else:
            self.sort_direction = SortDirection.ASCENDING
        self.sort_field = selected
        return self.sort_direction
