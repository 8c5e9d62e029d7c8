"""PostgreSQL dialect descriptor."""

from typing import Any

from .base import DialectDescriptor, _field, FOREIGN_KEY, UNIQUE, SERIAL_KEY, SHOW_TABLES

# PostGIS metadata table, never a user table
SPATIAL_REF_TABLE = "spatial_ref_sys"


class PostgresDialect(DialectDescriptor):
    """Information-schema constraints with a single-character ``contype``.

    The constraint query is always scoped to the ``public`` schema; the
    schema argument is accepted but not used.
    """

    __slots__ = ()

    name = "postgres"
    capabilities = frozenset({FOREIGN_KEY, UNIQUE, SERIAL_KEY, SHOW_TABLES})

    def get_foreign_keys_query(self, table_name: str, schema_name: str) -> str:
        table = self.format_literal(table_name)
        return f"""SELECT DISTINCT
    tc.constraint_name as constraint_name,
    CASE
    WHEN tc.constraint_type = 'PRIMARY KEY' THEN 'p'
    WHEN tc.constraint_type = 'FOREIGN KEY' THEN 'f'
    WHEN tc.constraint_type = 'UNIQUE' THEN 'u'
    WHEN tc.constraint_type = 'CHECK' THEN 'c'
    END as contype,
    tc.constraint_schema as source_schema,
    tc.table_name as source_table,
    kcu.column_name as source_column,
    CASE WHEN tc.constraint_type = 'FOREIGN KEY' THEN ccu.constraint_schema ELSE null END AS target_schema,
    CASE WHEN tc.constraint_type = 'FOREIGN KEY' THEN ccu.table_name ELSE null END AS target_table,
    CASE WHEN tc.constraint_type = 'FOREIGN KEY' THEN ccu.column_name ELSE null END AS target_column,
    co.column_default as extra,
    co.identity_generation as generation
    FROM information_schema.table_constraints AS tc
    JOIN information_schema.key_column_usage AS kcu
      ON tc.table_schema = kcu.table_schema AND tc.table_name = kcu.table_name AND tc.constraint_name = kcu.constraint_name
    JOIN information_schema.constraint_column_usage AS ccu
      ON ccu.constraint_schema = tc.constraint_schema AND ccu.constraint_name = tc.constraint_name
    JOIN information_schema.columns AS co
      ON co.table_schema = kcu.table_schema AND co.table_name = kcu.table_name AND co.column_name = kcu.column_name
    WHERE tc.table_name = '{table}' AND tc.constraint_schema = 'public'"""

    def show_tables_query(self, schema: str) -> str:
        return (
            "SELECT table_name FROM information_schema.tables "
            f"WHERE table_schema = '{self.format_literal(schema)}' "
            "AND table_type LIKE '%TABLE' "
            f"AND table_name != '{SPATIAL_REF_TABLE}';"
        )

    def _contype_is(self, row: Any, code: str) -> bool:
        present, value = _field(row, "contype")
        return present and value == code

    def is_primary_key(self, row: Any) -> bool:
        return self._contype_is(row, "p")

    def is_foreign_key(self, row: Any) -> bool:
        return self._contype_is(row, "f")

    def is_unique(self, row: Any) -> bool:
        return self._contype_is(row, "u")

    def is_serial_key(self, row: Any) -> bool:
        """Primary key whose default draws from a sequence.

        Matches defaults such as ``nextval('users_id_seq'::regclass)``.
        """
        if not self.is_primary_key(row):
            return False
        present, default = _field(row, "extra")
        if not present or not isinstance(default, str):
            return False
        return (
            default.startswith("nextval")
            and "_seq" in default
            and "::regclass" in default
        )
