"""SQL Server dialect descriptor."""

from typing import Any

from .base import DialectDescriptor, _field, FOREIGN_KEY, SERIAL_KEY


class MSSQLDialect(DialectDescriptor):
    """Both sides of each foreign key plus identity status from ``sys.COLUMNS``."""

    __slots__ = ()

    name = "mssql"
    capabilities = frozenset({FOREIGN_KEY, SERIAL_KEY})

    def format_literal(self, value: str) -> str:
        """Quote as a string literal, dropping any embedded single quotes."""
        return "'" + value.replace("'", "") + "'"

    def get_foreign_keys_query(self, table_name: str, schema_name: str) -> str:
        return f"""SELECT
      ccu.table_name AS source_table,
      ccu.constraint_name AS constraint_name,
      ccu.column_name AS source_column,
      kcu.table_name AS target_table,
      kcu.column_name AS target_column,
      tc.constraint_type AS constraint_type,
      c.is_identity AS is_identity
    FROM INFORMATION_SCHEMA.TABLE_CONSTRAINTS tc
    INNER JOIN INFORMATION_SCHEMA.CONSTRAINT_COLUMN_USAGE ccu
      ON ccu.CONSTRAINT_NAME = tc.CONSTRAINT_NAME
    LEFT JOIN INFORMATION_SCHEMA.REFERENTIAL_CONSTRAINTS rc
      ON ccu.CONSTRAINT_NAME = rc.CONSTRAINT_NAME
    LEFT JOIN INFORMATION_SCHEMA.KEY_COLUMN_USAGE kcu
      ON kcu.CONSTRAINT_NAME = rc.UNIQUE_CONSTRAINT_NAME AND tc.CONSTRAINT_TYPE = 'FOREIGN KEY'
    INNER JOIN sys.COLUMNS c
      ON c.name = ccu.column_name
      AND c.object_id = OBJECT_ID(ccu.table_name)
    WHERE ccu.table_name = {self.format_literal(table_name)}"""

    def _constraint_type_is(self, row: Any, constraint_type: str) -> bool:
        present, value = _field(row, "constraint_type")
        return present and value == constraint_type

    def is_primary_key(self, row: Any) -> bool:
        return self._constraint_type_is(row, "PRIMARY KEY")

    def is_foreign_key(self, row: Any) -> bool:
        return self._constraint_type_is(row, "FOREIGN KEY")

    def is_serial_key(self, row: Any) -> bool:
        if not self.is_primary_key(row):
            return False
        present, value = _field(row, "is_identity")
        return present and bool(value)
