"""SQLite dialect descriptor."""

from typing import Any

from .base import DialectDescriptor, _field


class SQLiteDialect(DialectDescriptor):
    """SQLite reports foreign keys through a pragma, one row per column."""

    __slots__ = ()

    name = "sqlite"

    def get_foreign_keys_query(self, table_name: str, schema_name: str) -> str:
        # No multi-schema distinction for the pragma
        return f"PRAGMA foreign_key_list({self.format_literal(table_name)});"

    def is_primary_key(self, row: Any) -> bool:
        present, value = _field(row, "primaryKey")
        return present and value is True
