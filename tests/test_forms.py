"""
Tests for form numbering of characters that share a name.
"""

import pytest

from character_catalog.characters import (
    CharacterRecord,
    build_catalog,
    derive_forms,
    parse_database,
)
from character_catalog.characters.forms import group_by_name


def _record(name: str, stat: float, beast: bool = False) -> CharacterRecord:
    return CharacterRecord(
        name=name,
        damage=stat,
        defense=stat,
        energy_rate=stat,
        move_speed=stat,
        beast=beast,
    )


class TestDeriveForms:
    """Test average stats and display name derivation."""

    def test_end_to_end_example(self, sample_database_text: str) -> None:
        """Test the Wolf/Cat example."""
        records = build_catalog(sample_database_text)

        assert len(records) == 3
        assert [r.display_name for r in records] == [
            "Wolf (Form 1)",
            "Wolf (Form 2)",
            "Cat",
        ]
        assert [r.average_stats for r in records] == [6.25, 16.25, 8.0]

    def test_single_form_keeps_name(self) -> None:
        """Test that a unique name is its own display name."""
        (record,) = derive_forms([_record("Cat", 8)])
        assert record.display_name == "Cat"
        assert record.form_number is None

    def test_forms_ranked_by_average_not_position(self) -> None:
        """Test that ranks follow average stats while order is preserved."""
        records = derive_forms(
            [_record("Fox", 30), _record("Owl", 1), _record("Fox", 10), _record("Fox", 20)]
        )

        assert [r.name for r in records] == ["Fox", "Owl", "Fox", "Fox"]
        assert [r.display_name for r in records] == [
            "Fox (Form 3)",
            "Owl",
            "Fox (Form 1)",
            "Fox (Form 2)",
        ]
        assert [r.form_number for r in records] == [3, None, 1, 2]

    def test_ties_keep_input_order(self) -> None:
        """Test that equal averages are ranked in original order."""
        first = _record("Fox", 5)
        second = CharacterRecord(
            name="Fox", damage=8, defense=2, energy_rate=5, move_speed=5, beast=True
        )
        records = derive_forms([first, second])

        assert records[0].average_stats == records[1].average_stats == 5
        assert records[0].display_name == "Fox (Form 1)"
        assert records[1].display_name == "Fox (Form 2)"

    def test_input_not_mutated(self) -> None:
        """Test that derivation writes to new records."""
        records = [_record("Fox", 1), _record("Fox", 2)]
        derive_forms(records)

        assert all(r.display_name == "" for r in records)
        assert all(r.average_stats is None for r in records)

    def test_idempotent(self, sample_database_text: str) -> None:
        """Test that deriving twice yields identical output."""
        parsed = parse_database(sample_database_text)
        assert derive_forms(parsed) == derive_forms(parsed)
        assert derive_forms(derive_forms(parsed)) == derive_forms(parsed)

    def test_never_drops_records(self) -> None:
        """Test that every record comes back populated."""
        records = derive_forms([_record(n, i) for i, n in enumerate("abcab")])
        assert len(records) == 5
        assert all(r.display_name and r.average_stats is not None for r in records)

    def test_names_are_case_sensitive(self) -> None:
        """Test that grouping uses exact name equality."""
        records = derive_forms([_record("wolf", 1), _record("Wolf", 2)])
        assert [r.display_name for r in records] == ["wolf", "Wolf"]

    def test_average_of_decimal_stats(self) -> None:
        """Test the arithmetic mean with comma-decimal inputs."""
        (record,) = build_catalog(
            'Character "Imp": Damage: 1,5, Defense: 2,5, Energy Rate: 3 '
            "Move Speed: 1, Beast: False"
        )
        assert record.average_stats == pytest.approx(2.0)


class TestGroupByName:
    """Test name grouping."""

    def test_first_seen_order(self) -> None:
        """Test that groups and members keep first-seen order."""
        groups = group_by_name(
            [_record("b", 1), _record("a", 1), _record("b", 2), _record("c", 1)]
        )
        assert list(groups) == ["b", "a", "c"]
        assert groups["b"] == [0, 2]
