"""
Character database parser.

The database is plain text. Every line whose stripped form starts with
``Character`` is a candidate and must match::

    Character "<name>": Damage: <d>, Defense: <df>, Energy Rate: <er> Move Speed: <ms>, Beast: <bool>

Numerals use a comma as the decimal separator (``"1,234"`` is 1.234, not one
thousand two hundred thirty-four). Lines that fail the grammar are dropped
without error; database files carry metadata lines that are expected to be
skipped.
"""

import logging
import math
import re
from typing import List, Optional

from .types import CharacterRecord

logger = logging.getLogger(__name__)

CANDIDATE_PREFIX = "Character"

# The energy-rate group also swallows an optional trailing comma, so both
# "Energy Rate: 3 Move Speed" and "Energy Rate: 3, Move Speed" match.
CHARACTER_LINE_RE = re.compile(
    r'Character\s+"?([^"]+)"?:\s+'
    r"Damage:\s+([\d,]+),\s+"
    r"Defense:\s+([\d,]+),\s+"
    r"Energy Rate:\s+([\d,]+)\s+"
    r"Move Speed:\s+([\d,]+),\s+"
    r"Beast:\s+(\w+)",
    re.ASCII,
)

_LEADING_DECIMAL_RE = re.compile(r"\d+(?:\.\d*)?|\.\d+")


def parse_locale_number(text: str) -> Optional[float]:
    """Convert a comma-decimal numeral to float.

    Only the first comma becomes the decimal point; the value is the longest
    decimal prefix of what remains, so ``"3,"`` is 3.0 and ``"1,5,0"`` is 1.5.
    Returns None when there are no digits to read or the numeral is too long
    to be a finite float.
    """
    match = _LEADING_DECIMAL_RE.match(text.strip().replace(",", ".", 1))
    if match is None:
        return None
    value = float(match.group())
    if not math.isfinite(value):
        return None
    return value


def parse_line(line: str) -> Optional[CharacterRecord]:
    """Parse a single line, returning None if it is not a valid character line."""
    if not line.strip().startswith(CANDIDATE_PREFIX):
        return None

    match = CHARACTER_LINE_RE.search(line)
    if match is None:
        return None

    name, damage, defense, energy_rate, move_speed, beast = match.groups()
    stats = [
        parse_locale_number(value)
        for value in (damage, defense, energy_rate, move_speed)
    ]
    if any(value is None for value in stats):
        return None

    return CharacterRecord(
        name=name,
        damage=stats[0],  # type: ignore[arg-type]
        defense=stats[1],  # type: ignore[arg-type]
        energy_rate=stats[2],  # type: ignore[arg-type]
        move_speed=stats[3],  # type: ignore[arg-type]
        beast=beast == "True",
    )


def parse_database(raw_text: str) -> List[CharacterRecord]:
    """Parse raw database text into records, in source line order.

    The returned records have no display name or average yet.
    """
    records: List[CharacterRecord] = []
    dropped = 0

    for line in raw_text.split("\n"):
        if not line.strip().startswith(CANDIDATE_PREFIX):
            continue
        record = parse_line(line)
        if record is None:
            dropped += 1
            continue
        records.append(record)

    if dropped:
        logger.debug(f"Skipped {dropped} malformed character lines")

    return records
