"""MySQL dialect descriptor (also registered for MariaDB)."""

from typing import Any

from .base import DialectDescriptor, _field, FOREIGN_KEY, UNIQUE, SERIAL_KEY


class MySQLDialect(DialectDescriptor):
    """Key-column usage joined with column metadata.

    MariaDB exposes the same information schema, so the registry maps both
    identifiers to one instance of this class.
    """

    __slots__ = ()

    name = "mysql"
    capabilities = frozenset({FOREIGN_KEY, UNIQUE, SERIAL_KEY})

    def get_foreign_keys_query(self, table_name: str, schema_name: str) -> str:
        table = self.format_literal(table_name)
        schema = self.format_literal(schema_name)
        return f"""SELECT
        K.CONSTRAINT_NAME as constraint_name
      , K.CONSTRAINT_SCHEMA as source_schema
      , K.TABLE_SCHEMA as source_table
      , K.COLUMN_NAME as source_column
      , K.REFERENCED_TABLE_SCHEMA AS target_schema
      , K.REFERENCED_TABLE_NAME AS target_table
      , K.REFERENCED_COLUMN_NAME AS target_column
      , C.extra
      , C.COLUMN_KEY AS column_key
      FROM INFORMATION_SCHEMA.KEY_COLUMN_USAGE AS K
      LEFT JOIN INFORMATION_SCHEMA.COLUMNS AS C
        ON C.TABLE_NAME = K.TABLE_NAME AND C.COLUMN_NAME = K.COLUMN_NAME
      WHERE
        K.TABLE_NAME = '{table}'
        AND K.CONSTRAINT_SCHEMA = '{schema}';"""

    def is_primary_key(self, row: Any) -> bool:
        present, value = _field(row, "constraint_name")
        return present and value == "PRIMARY"

    def is_foreign_key(self, row: Any) -> bool:
        # Anything that is not auto_increment counts, including plain columns
        present, value = _field(row, "extra")
        return present and value != "auto_increment"

    def is_unique(self, row: Any) -> bool:
        present, value = _field(row, "column_key")
        return present and isinstance(value, str) and value.upper() == "UNI"

    def is_serial_key(self, row: Any) -> bool:
        present, value = _field(row, "extra")
        return present and value == "auto_increment"
