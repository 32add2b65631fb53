"""Column metadata of relational query results.

DB-API drivers describe result columns through ``cursor.description``, but the
type code in each entry is driver specific: PostgreSQL reports type OIDs, the
MySQL drivers report numeric field type codes, pyodbc reports Python types,
python-oracledb reports ``DbType`` objects and SQLite reports nothing at all.
This module turns those codes into vendor type names such as ``INTEGER`` or
``float8`` that :func:`rmlkit.access.datatypes.column_datatype` understands.
"""

from __future__ import annotations

import datetime
import decimal
import logging
from typing import Any, Sequence

from pydantic import BaseModel
from sqlalchemy import bindparam, text
from sqlalchemy.engine import Connection

from rmlkit.access.datatypes import column_datatype

logger = logging.getLogger(__name__)

# MySQL protocol field type codes (as exposed by PyMySQL / mysqlclient)
MYSQL_FIELD_TYPES: dict[int, str] = {
    0: "DECIMAL",
    1: "TINYINT",
    2: "SMALLINT",
    3: "INT",
    4: "FLOAT",
    5: "DOUBLE",
    7: "TIMESTAMP",
    8: "BIGINT",
    9: "MEDIUMINT",
    10: "DATE",
    11: "TIME",
    12: "DATETIME",
    13: "YEAR",
    15: "VARCHAR",
    16: "BIT",
    245: "JSON",
    246: "DECIMAL",
    247: "ENUM",
    248: "SET",
    249: "TINYBLOB",
    250: "MEDIUMBLOB",
    251: "LONGBLOB",
    252: "BLOB",
    253: "VARCHAR",
    254: "CHAR",
    255: "GEOMETRY",
}

# Python value types -> vendor-neutral SQL type names
PYTHON_TYPE_NAMES: dict[type, str] = {
    bool: "BOOLEAN",
    int: "INTEGER",
    float: "DOUBLE",
    decimal.Decimal: "DECIMAL",
    bytes: "VARBINARY",
    bytearray: "VARBINARY",
    memoryview: "VARBINARY",
    datetime.datetime: "TIMESTAMP",
    datetime.date: "DATE",
    datetime.time: "TIME",
    str: "VARCHAR",
}

_PG_TYPE_QUERY = text(
    "SELECT oid, typname FROM pg_catalog.pg_type WHERE oid IN :oids"
).bindparams(bindparam("oids", expanding=True))


class ColumnInfo(BaseModel):
    """One result column: its label and its vendor type name, when known."""

    label: str | None
    type_name: str | None = None


def python_type_name(py_type: type) -> str | None:
    """Return the SQL type name for a Python type, walking its MRO."""
    for klass in py_type.__mro__:
        if klass in PYTHON_TYPE_NAMES:
            return PYTHON_TYPE_NAMES[klass]
    return None


def value_type_name(value: Any) -> str | None:
    """SQL type name of a value, for drivers that do not describe columns."""
    if value is None:
        return None
    return python_type_name(type(value))


def row_type_name(column: ColumnInfo, value: Any) -> str | None:
    """Type name to use for one value of ``column``.

    Falls back to the value's Python type when the driver reported nothing, or
    when it reported a name without a datatype for a binary value (PyMySQL
    describes BINARY/VARBINARY as CHAR/VARCHAR and BLOB as BLOB).
    """
    if column.type_name is None:
        return value_type_name(value)
    if isinstance(value, (bytes, bytearray, memoryview)) and (
        column_datatype(column.type_name) is None
    ):
        return value_type_name(value)
    return column.type_name


def type_code_name(type_code: Any) -> str | None:
    """Resolve a driver-independent type code to a vendor type name.

    Handles plain strings, Python type objects and objects exposing a ``name``
    (python-oracledb's ``DbType``). Numeric codes need the dialect and are
    resolved by :func:`describe_columns`.
    """
    if type_code is None:
        return None
    if isinstance(type_code, str):
        return type_code
    if isinstance(type_code, type):
        return python_type_name(type_code)
    name = getattr(type_code, "name", None)
    if isinstance(name, str):
        return name.removeprefix("DB_TYPE_")
    return None


def postgres_type_names(
    connection: Connection, oids: Sequence[Any]
) -> dict[int, str]:
    """Look up PostgreSQL type names for the given type OIDs."""
    wanted = sorted({oid for oid in oids if isinstance(oid, int)})
    if not wanted:
        return {}
    rows = connection.execute(_PG_TYPE_QUERY, {"oids": wanted})
    return {int(oid): typname for oid, typname in rows}


def describe_columns(
    description: Sequence[Sequence[Any]] | None, connection: Connection
) -> list[ColumnInfo]:
    """Build column metadata from a DB-API cursor description.

    Args:
        description: ``cursor.description`` of the executed statement
        connection: Connection the statement ran on; selects the dialect and
            serves catalog lookups

    Returns:
        list[ColumnInfo]: One entry per result column, in result order
    """
    if not description:
        return []
    dialect = connection.dialect.name
    codes = [entry[1] for entry in description]

    if dialect == "postgresql":
        oid_names = postgres_type_names(connection, codes)
        names = [
            oid_names.get(code) if isinstance(code, int) else type_code_name(code)
            for code in codes
        ]
    elif dialect in ("mysql", "mariadb"):
        names = [
            MYSQL_FIELD_TYPES.get(code) if isinstance(code, int) else type_code_name(code)
            for code in codes
        ]
    else:
        names = [type_code_name(code) for code in codes]

    columns = [
        ColumnInfo(label=entry[0], type_name=name)
        for entry, name in zip(description, names)
    ]
    logger.debug(
        f"Result columns ({dialect}): "
        f"{[(c.label, c.type_name) for c in columns]}"
    )
    return columns
