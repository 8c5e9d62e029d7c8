"""Tests for the dialect-keys command-line interface."""

import json

import pytest
from typer.testing import CliRunner

from dialect_keys.main import app

runner = CliRunner()


@pytest.fixture
def rows_file(tmp_path, mysql_rows):
    path = tmp_path / "rows.json"
    path.write_text(json.dumps(mysql_rows))
    return path


class TestQueryCommand:

    def test_raw_query(self):
        result = runner.invoke(app, ["query", "users", "--dialect", "postgres", "--raw"])

        assert result.exit_code == 0
        assert "tc.table_name = 'users'" in result.output

    def test_schema_option(self):
        result = runner.invoke(app, ["query", "users", "-d", "mysql", "-s", "shop", "--raw"])

        assert result.exit_code == 0
        assert "K.CONSTRAINT_SCHEMA = 'shop'" in result.output

    def test_unknown_dialect(self):
        result = runner.invoke(app, ["query", "users", "--dialect", "oracle"])

        assert result.exit_code == 1
        assert "Unsupported dialect" in result.output


class TestTablesCommand:

    def test_postgres(self):
        result = runner.invoke(app, ["tables", "--dialect", "postgres", "--schema", "app"])

        assert result.exit_code == 0
        assert "table_schema = 'app'" in result.output

    def test_unsupported(self):
        result = runner.invoke(app, ["tables", "--dialect", "sqlite"])

        assert result.exit_code == 1
        assert "does not support" in result.output


class TestClassifyCommand:

    def test_json_output(self, rows_file):
        result = runner.invoke(app, ["classify", str(rows_file), "--dialect", "mysql", "--json"])

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert [d["primary_key"] for d in data] == [True, False, False]
        assert [d["foreign_key"] for d in data] == [False, True, True]
        assert [d["unique"] for d in data] == [False, False, True]

    def test_table_output(self, rows_file):
        result = runner.invoke(app, ["classify", str(rows_file), "--dialect", "mysql"])

        assert result.exit_code == 0
        assert "PRIMARY" in result.output

    def test_missing_file(self, tmp_path):
        result = runner.invoke(app, ["classify", str(tmp_path / "missing.json"), "-d", "mysql"])
        assert result.exit_code == 1

    def test_not_an_array(self, tmp_path):
        path = tmp_path / "rows.json"
        path.write_text('{"constraint_name": "PRIMARY"}')

        result = runner.invoke(app, ["classify", str(path), "-d", "mysql"])
        assert result.exit_code == 1


class TestInfoCommands:

    def test_dialects(self):
        result = runner.invoke(app, ["dialects"])

        assert result.exit_code == 0
        assert "mariadb" in result.output
        assert "postgres" in result.output

    def test_config(self):
        result = runner.invoke(app, ["config"])

        assert result.exit_code == 0
        assert "Default Schema" in result.output
