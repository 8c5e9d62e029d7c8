"""dialect-keys - constraint introspection queries per SQL dialect."""

from .dialects import (
    Dialect,
    DialectDescriptor,
    DIALECTS,
    get_dialect,
    supported_dialects,
)
from .errors import (
    DialectKeysError,
    UnsupportedDialectError,
    UnsupportedOperationError,
    QueryExecutionError,
)
from .introspection import ConstraintReader, RowClassification, classify_row

__version__ = "0.1.0"

__all__ = [
    "Dialect",
    "DialectDescriptor",
    "DIALECTS",
    "get_dialect",
    "supported_dialects",
    "DialectKeysError",
    "UnsupportedDialectError",
    "UnsupportedOperationError",
    "QueryExecutionError",
    "ConstraintReader",
    "RowClassification",
    "classify_row",
]
