"""Abstract base class for dialect descriptors."""

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any, FrozenSet, Tuple

from ..errors import UnsupportedOperationError

# Capability names reported by DialectDescriptor.capabilities
FOREIGN_KEY = "foreign_key"
UNIQUE = "unique"
SERIAL_KEY = "serial_key"
SHOW_TABLES = "show_tables"


def _field(row: Any, key: str) -> Tuple[bool, Any]:
    """Look up ``key`` in a result row.

    Returns ``(present, value)``. Anything that is not a mapping has no
    fields, so predicates built on this never raise.
    """
    if not isinstance(row, Mapping):
        return False, None
    if key not in row:
        return False, None
    return True, row[key]


class DialectDescriptor(ABC):
    """Query builder and row classifiers for one SQL dialect.

    Subclasses must implement ``get_foreign_keys_query`` and
    ``is_primary_key``. The other classifiers default to ``False`` for
    dialects whose introspection rows carry no such information; check
    ``capabilities`` to tell "not supported" apart from "not matched".

    Descriptors carry no state. Rows passed to the predicates must come from
    the same descriptor's query, since column names differ per dialect.
    """

    __slots__ = ()

    # Override in subclasses
    name: str = ""
    capabilities: FrozenSet[str] = frozenset()

    def supports(self, capability: str) -> bool:
        """Whether this dialect defines the given capability."""
        return capability in self.capabilities

    def format_literal(self, value: str) -> str:
        """Render a caller-supplied identifier for use inside SQL text.

        The default interpolates the value verbatim, so callers must pass
        trusted identifiers. Override to add escaping or allow-listing.
        """
        return value

    @abstractmethod
    def get_foreign_keys_query(self, table_name: str, schema_name: str) -> str:
        """Build the constraint query for a table.

        Args:
            table_name: Table name, interpolated into the SQL text
            schema_name: Schema name (ignored by some dialects)

        Returns:
            Complete SQL returning one row per constraint column
        """
        pass

    @abstractmethod
    def is_primary_key(self, row: Any) -> bool:
        """Whether a constraint row describes a primary key column."""
        pass

    def is_foreign_key(self, row: Any) -> bool:
        """Whether a constraint row describes a foreign key column."""
        return False

    def is_unique(self, row: Any) -> bool:
        """Whether a constraint row describes a unique key column."""
        return False

    def is_serial_key(self, row: Any) -> bool:
        """Whether a constraint row describes an auto-increment/identity column."""
        return False

    def show_tables_query(self, schema: str) -> str:
        """Build a query listing the tables in ``schema``."""
        raise UnsupportedOperationError(self.name, SHOW_TABLES)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"
