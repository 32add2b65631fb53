"""Tests for column metadata resolution, using stand-in connections."""

import datetime
import decimal
from types import SimpleNamespace

import pytest

from rmlkit.access.metadata import (
    ColumnInfo,
    describe_columns,
    python_type_name,
    row_type_name,
    type_code_name,
    value_type_name,
)


class _FakeConnection:
    """Connection stand-in: a dialect name and canned catalog rows."""

    def __init__(self, dialect_name: str, catalog_rows=None):
        self.dialect = SimpleNamespace(name=dialect_name)
        self.catalog_rows = catalog_rows or []
        self.executed: list[dict] = []

    def execute(self, statement, params=None):
        self.executed.append(params)
        return iter(self.catalog_rows)


def _description(*columns):
    return [(label, code, None, None, None, None, None) for label, code in columns]


def test_python_type_names():
    assert python_type_name(bool) == "BOOLEAN"
    assert python_type_name(int) == "INTEGER"
    assert python_type_name(float) == "DOUBLE"
    assert python_type_name(decimal.Decimal) == "DECIMAL"
    assert python_type_name(bytes) == "VARBINARY"
    assert python_type_name(datetime.datetime) == "TIMESTAMP"
    assert python_type_name(datetime.date) == "DATE"
    assert python_type_name(object) is None


def test_value_type_name():
    assert value_type_name(None) is None
    assert value_type_name(3.0) == "DOUBLE"
    assert value_type_name(True) == "BOOLEAN"


def test_type_code_name_variants():
    oracle_number = SimpleNamespace(name="DB_TYPE_NUMBER")
    assert type_code_name(None) is None
    assert type_code_name("DOUBLE") == "DOUBLE"
    assert type_code_name(float) == "DOUBLE"
    assert type_code_name(oracle_number) == "NUMBER"
    assert type_code_name(1234) is None


def test_no_description_gives_no_columns():
    assert describe_columns(None, _FakeConnection("sqlite")) == []


def test_sqlite_reports_no_types():
    conn = _FakeConnection("sqlite")
    columns = describe_columns(_description(("id", None), ("name", None)), conn)
    assert columns == [
        ColumnInfo(label="id", type_name=None),
        ColumnInfo(label="name", type_name=None),
    ]


def test_postgres_oids_are_looked_up_once():
    conn = _FakeConnection("postgresql", catalog_rows=[(23, "int4"), (701, "float8")])
    columns = describe_columns(
        _description(("id", 23), ("price", 701), ("code", 23), ("note", 25)), conn
    )

    assert [c.type_name for c in columns] == ["int4", "float8", "int4", None]
    assert conn.executed == [{"oids": [23, 25, 701]}]


def test_mysql_field_codes():
    conn = _FakeConnection("mysql")
    columns = describe_columns(
        _description(("id", 3), ("price", 5), ("amount", 246), ("name", 253)), conn
    )
    assert [c.type_name for c in columns] == ["INT", "DOUBLE", "DECIMAL", "VARCHAR"]


def test_pyodbc_python_types():
    conn = _FakeConnection("mssql")
    columns = describe_columns(
        _description(("flag", bool), ("at", datetime.datetime), ("blob", bytearray)),
        conn,
    )
    assert [c.type_name for c in columns] == ["BOOLEAN", "TIMESTAMP", "VARBINARY"]


def test_labels_are_kept_verbatim():
    conn = _FakeConnection("sqlite")
    columns = describe_columns(_description(("", None), (None, None)), conn)
    assert [c.label for c in columns] == ["", None]


@pytest.mark.parametrize(
    "type_name,value,expected",
    [
        (None, 3, "INTEGER"),
        (None, None, None),
        ("VARCHAR", b"\xca\xfe", "VARBINARY"),
        ("CHAR", bytearray(b"\x00"), "VARBINARY"),
        ("BLOB", b"\x01", "VARBINARY"),
        ("VARCHAR", "text", "VARCHAR"),
        ("BYTEA", b"\x01", "BYTEA"),
        ("INT", 3, "INT"),
    ],
)
def test_row_type_name(type_name, value, expected):
    column = ColumnInfo(label="c", type_name=type_name)
    assert row_type_name(column, value) == expected
