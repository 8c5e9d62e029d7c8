"""Shared pytest fixtures for dialect-keys tests."""

import pytest
from typing import Any, Dict, List

from dialect_keys.dialects import get_dialect


@pytest.fixture
def sqlite():
    return get_dialect("sqlite")


@pytest.fixture
def mysql():
    return get_dialect("mysql")


@pytest.fixture
def postgres():
    return get_dialect("postgres")


@pytest.fixture
def mssql():
    return get_dialect("mssql")


@pytest.fixture
def mysql_rows() -> List[Dict[str, Any]]:
    """Rows as returned by the MySQL constraint query for an ``orders`` table."""
    return [
        {
            "constraint_name": "PRIMARY",
            "source_schema": "shop",
            "source_table": "shop",
            "source_column": "id",
            "target_schema": None,
            "target_table": None,
            "target_column": None,
            "extra": "auto_increment",
            "column_key": "PRI",
        },
        {
            "constraint_name": "fk_orders_user",
            "source_schema": "shop",
            "source_table": "shop",
            "source_column": "user_id",
            "target_schema": "shop",
            "target_table": "users",
            "target_column": "id",
            "extra": "",
            "column_key": "MUL",
        },
        {
            "constraint_name": "uq_orders_reference",
            "source_schema": "shop",
            "source_table": "shop",
            "source_column": "reference",
            "target_schema": None,
            "target_table": None,
            "target_column": None,
            "extra": "",
            "column_key": "uni",
        },
    ]


@pytest.fixture
def postgres_rows() -> List[Dict[str, Any]]:
    """Rows as returned by the PostgreSQL constraint query for ``orders``."""
    return [
        {
            "constraint_name": "orders_pkey",
            "contype": "p",
            "source_schema": "public",
            "source_table": "orders",
            "source_column": "id",
            "target_schema": None,
            "target_table": None,
            "target_column": None,
            "extra": "nextval('orders_id_seq'::regclass)",
            "generation": None,
        },
        {
            "constraint_name": "orders_user_id_fkey",
            "contype": "f",
            "source_schema": "public",
            "source_table": "orders",
            "source_column": "user_id",
            "target_schema": "public",
            "target_table": "users",
            "target_column": "id",
            "extra": None,
            "generation": None,
        },
        {
            "constraint_name": "orders_reference_key",
            "contype": "u",
            "source_schema": "public",
            "source_table": "orders",
            "source_column": "reference",
            "target_schema": None,
            "target_table": None,
            "target_column": None,
            "extra": None,
            "generation": None,
        },
    ]


class FakeExecutor:
    """Records executed SQL and returns canned rows."""

    def __init__(self, rows=None, error: Exception = None):
        self.rows = rows or []
        self.error = error
        self.queries: List[str] = []

    def __call__(self, sql: str):
        self.queries.append(sql)
        if self.error is not None:
            raise self.error
        return iter(self.rows)


@pytest.fixture
def fake_executor():
    return FakeExecutor
