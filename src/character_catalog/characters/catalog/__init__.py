"""
Catalog of parsed characters.

Owns the loaded collection and exposes filtered, sorted and exported views.
"""

from .catalog_storage import Catalog

__all__ = ["Catalog"]
