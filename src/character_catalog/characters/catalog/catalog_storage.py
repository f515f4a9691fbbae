"""
Catalog storage for parsed characters.

Holds the single in-memory collection, replaces it atomically on each
successful load and delegates querying, analytics and export to the
sub-services.
"""

from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from ...core.config import ExportConfig
from ...core.exceptions import ExportError, SourceLoadError
from ...core.logging import (
    ProcessingTimer,
    clear_load_context,
    get_logger,
    set_load_context,
)
from ..forms import build_catalog
from ..loaders import DatabaseSource
from ..types import CharacterRecord, ExportRow, SortDirection, SortField, ViewState
from .analytics import get_catalog_statistics
from .import_export import ImportExportService, prepare_export_rows
from .search import filter_records, sort_records

logger = get_logger(__name__)


class Catalog:
    """In-memory character catalog with load, query and export operations."""

    def __init__(self, export_config: Optional[ExportConfig] = None) -> None:
        self._characters: List[CharacterRecord] = []
        self.fetch_failed = False
        self.import_export_manager = ImportExportService(export_config)

    # Loading
    def load_text(self, raw_text: str) -> int:
        """Replace the collection with the characters parsed from ``raw_text``.

        Returns the new character count; zero is a valid outcome.
        """
        with ProcessingTimer(logger, "build_catalog", "Catalog", chars=len(raw_text)):
            characters = build_catalog(raw_text)
        self._characters = characters
        logger.info("Catalog loaded", character_count=len(characters))
        return len(characters)

    async def _load_from(self, source: DatabaseSource, event_type: str) -> bool:
        set_load_context(source=source.describe(), operation=event_type)
        try:
            raw_text = await source.fetch()
        except SourceLoadError as e:
            logger.log_source_event(event_type, success=False, error=str(e))
            clear_load_context()
            return False

        try:
            self.load_text(raw_text)
            logger.log_source_event(
                event_type, success=True, character_count=self.character_count
            )
        finally:
            clear_load_context()
        return True

    async def load_database(self, source: DatabaseSource) -> bool:
        """Load from the primary (remote) source.

        On failure the previous collection is kept and ``fetch_failed`` is set
        so that the next reload goes to the local file instead.
        """
        success = await self._load_from(source, "load_database")
        self.fetch_failed = not success
        return success

    async def load_local_file(self, source: DatabaseSource) -> bool:
        """Load from a local file; the previous collection is kept on failure."""
        return await self._load_from(source, "load_local_file")

    async def reload(
        self, remote: Optional[DatabaseSource], local: DatabaseSource
    ) -> bool:
        """Reload from the remote source, or from the local file if the last fetch failed."""
        if self.fetch_failed or remote is None:
            return await self.load_local_file(local)
        return await self.load_database(remote)

    # Queries
    @property
    def character_count(self) -> int:
        return len(self._characters)

    @property
    def characters(self) -> List[CharacterRecord]:
        """Copy of the collection in its current order."""
        return list(self._characters)

    def get_characters(self, view: Optional[ViewState] = None) -> List[CharacterRecord]:
        """Characters visible under ``view``'s beast toggles."""
        if view is None:
            return self.characters
        return filter_records(self._characters, view.show_beasts, view.only_beasts)

    def get_forms(self, name: str) -> List[CharacterRecord]:
        """All forms of one base name, weakest first."""
        forms = [record for record in self._characters if record.name == name]
        return sorted(forms, key=lambda record: record.form_number or 0)

    def sort(
        self, view: ViewState, sort_field: Union[str, int, SortField]
    ) -> SortDirection:
        """Sort the whole collection as a click on ``sort_field``'s header would.

        The view decides the direction (repeat clicks flip it) and the
        collection is reordered in place. Returns the direction used.
        """
        direction = view.select_sort(sort_field)
        self.sort_by(view.sort_field, direction)  # type: ignore[arg-type]
        return direction

    def sort_by(
        self,
        sort_field: Union[str, int, SortField],
        direction: SortDirection = SortDirection.ASCENDING,
    ) -> None:
        """Reorder the collection in place by one column."""
        self._characters[:] = sort_records(self._characters, sort_field, direction)

    # Analytics operations
    def get_statistics(self) -> Dict[str, Any]:
        return get_catalog_statistics(self._characters)

    # Export operations
    def prepare_for_export(self, view: Optional[ViewState] = None) -> List[ExportRow]:
        """Export rows for the full collection, or for ``view`` if given."""
        return prepare_export_rows(self.get_characters(view))

    def export_workbook(
        self, output_file: Optional[Path] = None, view: Optional[ViewState] = None
    ) -> Path:
        """Write the current table to the spreadsheet workbook."""
        if self.character_count == 0:
            raise ExportError.empty(component="Catalog")
        return self.import_export_manager.export_workbook(
            self.prepare_for_export(view), output_file
        )
