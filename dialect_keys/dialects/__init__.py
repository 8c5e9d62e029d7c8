"""Per-dialect constraint introspection.

Each descriptor builds the query that lists a table's key constraints and
classifies the rows that query returns.
"""

from .base import DialectDescriptor, FOREIGN_KEY, UNIQUE, SERIAL_KEY, SHOW_TABLES
from .sqlite import SQLiteDialect
from .mysql import MySQLDialect
from .postgres import PostgresDialect
from .mssql import MSSQLDialect
from .registry import Dialect, DIALECTS, get_dialect, resolve_dialect, supported_dialects

__all__ = [
    # Base classes
    "DialectDescriptor",
    # Capability names
    "FOREIGN_KEY",
    "UNIQUE",
    "SERIAL_KEY",
    "SHOW_TABLES",
    # Descriptors
    "SQLiteDialect",
    "MySQLDialect",
    "PostgresDialect",
    "MSSQLDialect",
    # Registry
    "Dialect",
    "DIALECTS",
    "get_dialect",
    "resolve_dialect",
    "supported_dialects",
]
