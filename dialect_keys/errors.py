"""Error types for dialect-keys."""

from typing import Optional, Dict, Any, List


class DialectKeysError(Exception):
    """Base exception for dialect-keys errors."""

    def __init__(self, message: str, code: str = "DIALECT_KEYS_ERROR", details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary for structured output."""
        return {
            "code": self.code,
            "message": self.message,
            "details": self.details,
        }


class UnsupportedDialectError(DialectKeysError):
    """Dialect identifier is not in the registry."""

    def __init__(self, dialect: Any, supported: Optional[List[str]] = None):
        super().__init__(
            f"Unsupported dialect: {dialect!r}",
            code="UNSUPPORTED_DIALECT",
            details={"dialect": str(dialect), "supported": supported or []},
        )
        self.dialect = dialect


class UnsupportedOperationError(DialectKeysError):
    """Operation is not defined for the selected dialect."""

    def __init__(self, dialect: str, operation: str):
        super().__init__(
            f"Dialect '{dialect}' does not support '{operation}'",
            code="UNSUPPORTED_OPERATION",
            details={"dialect": dialect, "operation": operation},
        )
        self.dialect = dialect
        self.operation = operation


class QueryExecutionError(DialectKeysError):
    """The caller-supplied executor failed to run a generated query."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, code="QUERY_EXECUTION_ERROR", details=details)
