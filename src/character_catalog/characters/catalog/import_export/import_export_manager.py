"""
Import/Export operations for catalog management.

Handles export row preparation and writing the character table to a
spreadsheet workbook.
"""

import logging
from decimal import ROUND_HALF_UP, Decimal
from pathlib import Path
from typing import List, Optional, Sequence

import pandas as pd

from ....core.config import ExportConfig
from ....core.exceptions import ExportError
from ...types import EXPORT_COLUMNS, CharacterRecord, ExportRow

logger = logging.getLogger(__name__)

_TWO_PLACES = Decimal("0.01")


def format_average(value: Optional[float]) -> str:
    """Two-decimal string of an average, rounding halves up (6.125 -> "6.13")."""
    if value is None:
        value = 0.0
    return str(Decimal(value).quantize(_TWO_PLACES, rounding=ROUND_HALF_UP))


def prepare_export_rows(records: Sequence[CharacterRecord]) -> List[ExportRow]:
    """Flatten records for export, keeping their order."""
    return [
        ExportRow(
            name=record.display_name or record.name,
            damage=record.damage,
            defense=record.defense,
            energy_rate=record.energy_rate,
            move_speed=record.move_speed,
            average=format_average(record.average_stats),
            beast=record.beast,
        )
        for record in records
    ]


class ImportExportService:
    """Handles catalog export operations."""

    def __init__(self, export_config: Optional[ExportConfig] = None) -> None:
        self.config = export_config or ExportConfig()
        self.exports_dir = self.config.exports_dir

    def build_frame(self, rows: Sequence[ExportRow]) -> pd.DataFrame:
        """Tabulate export rows with the exported column headers."""
        return pd.DataFrame(
            [row.to_dict() for row in rows], columns=list(EXPORT_COLUMNS)
        )

    def export_workbook(
        self, rows: Sequence[ExportRow], output_file: Optional[Path] = None
    ) -> Path:
        """Write rows to an .xlsx workbook with a single sheet."""
        if not rows:
            raise ExportError.empty(component="ImportExportService")

        if output_file is None:
            # Create exports directory if it doesn't exist
            if not self.exports_dir.exists():
                self.exports_dir.mkdir(parents=True, exist_ok=True)
            output_file = self.exports_dir / self.config.filename

        frame = self.build_frame(rows)
        try:
            with pd.ExcelWriter(output_file, engine="openpyxl") as writer:
                frame.to_excel(writer, sheet_name=self.config.sheet_name, index=False)
        except OSError as e:
            logger.error(f"Error exporting catalog: {e}")
            raise ExportError(
                f"Could not write {output_file}: {e}",
                error_code="EXPORT_ERROR",
                details={"output_file": str(output_file)},
                component="ImportExportService",
            ) from e

        logger.info(f"Exported {len(rows)} characters to {output_file}")
        return output_file
