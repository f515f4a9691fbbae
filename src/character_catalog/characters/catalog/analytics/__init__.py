"""
Analytics operations for catalog management.

Provides catalog statistics.
"""

from .analytics_manager import get_catalog_statistics

__all__ = ["get_catalog_statistics"]
