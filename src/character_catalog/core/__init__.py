"""
Core infrastructure for the Character Catalog: configuration, errors and logging.
"""
