"""Dialect registry: maps dialect identifiers to their descriptors."""

import logging
from enum import Enum
from types import MappingProxyType
from typing import List, Mapping, Union

from ..errors import UnsupportedDialectError
from .base import DialectDescriptor
from .mssql import MSSQLDialect
from .mysql import MySQLDialect
from .postgres import PostgresDialect
from .sqlite import SQLiteDialect

logger = logging.getLogger(__name__)


class Dialect(str, Enum):
    """Supported dialect identifiers."""
    SQLITE = "sqlite"
    MYSQL = "mysql"
    MARIADB = "mariadb"
    POSTGRES = "postgres"
    MSSQL = "mssql"


_mysql = MySQLDialect()

DIALECTS: Mapping[Dialect, DialectDescriptor] = MappingProxyType({
    Dialect.SQLITE: SQLiteDialect(),
    Dialect.MYSQL: _mysql,
    # MariaDB's information schema is MySQL-compatible
    Dialect.MARIADB: _mysql,
    Dialect.POSTGRES: PostgresDialect(),
    Dialect.MSSQL: MSSQLDialect(),
})


def supported_dialects() -> List[str]:
    """Dialect identifiers in declaration order."""
    return [d.value for d in Dialect]


def resolve_dialect(name: Union[str, Dialect]) -> Dialect:
    """Turn an identifier such as ``"MySQL"`` into a ``Dialect`` member."""
    if isinstance(name, Dialect):
        return name
    if isinstance(name, str):
        try:
            return Dialect(name.strip().lower())
        except ValueError:
            pass
    raise UnsupportedDialectError(name, supported=supported_dialects())


def get_dialect(name: Union[str, Dialect]) -> DialectDescriptor:
    """Look up the descriptor for a dialect.

    Args:
        name: Dialect identifier or ``Dialect`` member

    Returns:
        The shared descriptor instance for that dialect

    Raises:
        UnsupportedDialectError: If the identifier is not registered
    """
    dialect = resolve_dialect(name)
    descriptor = DIALECTS[dialect]
    logger.debug("Resolved dialect %s to %r", dialect.value, descriptor)
    return descriptor
