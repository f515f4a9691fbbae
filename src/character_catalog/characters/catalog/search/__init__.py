"""
Search operations for catalog management.

Provides beast filtering and stable column sorting.
"""

from .search_manager import filter_records, sort_records

__all__ = ["filter_records", "sort_records"]
