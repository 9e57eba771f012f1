"""Storage backends for solved-graph databases."""

from .base import StorageBackend, GraphResult
from .sqlite import SQLiteBackend
from .postgresql import PostgreSQLBackend

__all__ = ["StorageBackend", "GraphResult", "SQLiteBackend", "PostgreSQLBackend"]
