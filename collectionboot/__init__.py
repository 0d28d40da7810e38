"""Collection helpers: background tasks, a hash set and chainable queries."""

__version__ = "0.1.0"
__all__ = ["hashset", "query", "tasks"]