"""Run generated constraint queries through a caller-supplied executor.

Nothing here opens a connection. The caller passes any callable that takes a
SQL string and returns rows as mappings (a DB-API cursor wrapper, a
SQLAlchemy ``connection.execute(...).mappings()`` adapter, a test fake).
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Callable, Iterable, List, Union

from .dialects import Dialect, DialectDescriptor, get_dialect
from .errors import QueryExecutionError

logger = logging.getLogger(__name__)

QueryExecutor = Callable[[str], Iterable[Mapping]]


@dataclass
class RowClassification:
    """Classifier results for one constraint row.

    The row is kept as returned; its field names stay dialect-specific.
    """
    row: Any
    primary_key: bool = False
    foreign_key: bool = False
    unique: bool = False
    serial_key: bool = False

    @property
    def kinds(self) -> List[str]:
        """Names of the constraint kinds this row matched."""
        flags = [
            ("primary_key", self.primary_key),
            ("foreign_key", self.foreign_key),
            ("unique", self.unique),
            ("serial_key", self.serial_key),
        ]
        return [name for name, matched in flags if matched]

    def to_dict(self) -> dict:
        return {
            "row": dict(self.row) if isinstance(self.row, Mapping) else self.row,
            "primary_key": self.primary_key,
            "foreign_key": self.foreign_key,
            "unique": self.unique,
            "serial_key": self.serial_key,
        }


def classify_row(descriptor: DialectDescriptor, row: Any) -> RowClassification:
    """Apply every classifier of ``descriptor`` to one row."""
    if not isinstance(row, Mapping):
        logger.warning("Skipping non-mapping row: %s", type(row).__name__)
    return RowClassification(
        row=row,
        primary_key=descriptor.is_primary_key(row),
        foreign_key=descriptor.is_foreign_key(row),
        unique=descriptor.is_unique(row),
        serial_key=descriptor.is_serial_key(row),
    )


class ConstraintReader:
    """Builds a dialect's constraint query, executes it, classifies the rows.

    Example usage:
        reader = ConstraintReader("postgres", lambda sql: run(sql))
        for result in reader.read("users", "public"):
            if result.primary_key:
                ...
    """

    def __init__(self, dialect: Union[str, Dialect, DialectDescriptor], executor: QueryExecutor):
        if isinstance(dialect, DialectDescriptor):
            self.descriptor = dialect
        else:
            self.descriptor = get_dialect(dialect)
        self._executor = executor

    def _execute_query(self, sql: str, **context: Any) -> List[Mapping]:
        """Run ``sql`` through the executor and materialize the rows."""
        logger.debug("Executing %s query: %s", self.descriptor.name, sql)
        try:
            rows = list(self._executor(sql))
        except Exception as e:
            raise QueryExecutionError(
                f"Query failed for dialect '{self.descriptor.name}': {e}",
                details={"dialect": self.descriptor.name, "sql": sql, **context},
            ) from e
        logger.debug("Query returned %d row(s)", len(rows))
        return rows

    def read(self, table_name: str, schema_name: str) -> List[RowClassification]:
        """Fetch and classify the constraint rows of one table.

        Args:
            table_name: Table to introspect
            schema_name: Schema the table lives in

        Returns:
            One RowClassification per returned row, in result order
        """
        sql = self.descriptor.get_foreign_keys_query(table_name, schema_name)
        rows = self._execute_query(sql, table=table_name, schema=schema_name)
        return [classify_row(self.descriptor, row) for row in rows]

    def list_tables(self, schema: str) -> List[str]:
        """List table names in ``schema``.

        Raises:
            UnsupportedOperationError: If the dialect has no table-listing query
        """
        sql = self.descriptor.show_tables_query(schema)
        rows = self._execute_query(sql, schema=schema)
        return [row["table_name"] for row in rows]
