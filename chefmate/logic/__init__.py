"""Core business logic layer.

Subpackages:
- shopping: shopping list aggregation, categorization and export

The web layer and the repositories call into this package; nothing here does I/O.
"""
__all__ = ["shopping"]
