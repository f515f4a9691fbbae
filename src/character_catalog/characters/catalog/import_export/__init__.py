"""
Import/Export operations for catalog management.

Provides export row preparation and spreadsheet export.
"""

from .import_export_manager import ImportExportService, prepare_export_rows

__all__ = ["ImportExportService", "prepare_export_rows"]
