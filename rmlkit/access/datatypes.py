"""XSD datatype inference for relational columns.

Maps vendor column type names to XSD datatype IRIs and renders driver values
as the lexical text written to the intermediate CSV.
"""

from __future__ import annotations

import datetime
import decimal
from typing import Any

XSD_NS = "http://www.w3.org/2001/XMLSchema#"

DOUBLE = XSD_NS + "double"
HEX_BINARY = XSD_NS + "hexBinary"
DECIMAL = XSD_NS + "decimal"
INTEGER = XSD_NS + "integer"
BOOLEAN = XSD_NS + "boolean"
DATE = XSD_NS + "date"
TIME = XSD_NS + "time"
DATETIME = XSD_NS + "dateTime"

# upper-cased vendor type name -> XSD datatype IRI
SQL_TYPE_TO_XSD: dict[str, str] = {
    "BYTEA": HEX_BINARY,
    "BINARY": HEX_BINARY,
    "BINARY VARYING": HEX_BINARY,
    "BINARY LARGE OBJECT": HEX_BINARY,
    "VARBINARY": HEX_BINARY,
    "NUMERIC": DECIMAL,
    "DECIMAL": DECIMAL,
    "SMALLINT": INTEGER,
    "INT": INTEGER,
    "INT4": INTEGER,
    "INT8": INTEGER,
    "INTEGER": INTEGER,
    "BIGINT": INTEGER,
    "FLOAT": DOUBLE,
    "FLOAT4": DOUBLE,
    "FLOAT8": DOUBLE,
    "REAL": DOUBLE,
    "DOUBLE": DOUBLE,
    "DOUBLE PRECISION": DOUBLE,
    "BIT": BOOLEAN,
    "BOOL": BOOLEAN,
    "BOOLEAN": BOOLEAN,
    "DATE": DATE,
    "TIME": TIME,
    "TIMESTAMP": DATETIME,
    "DATETIME": DATETIME,
}


def column_datatype(type_name: str | None) -> str | None:
    """Return the XSD datatype IRI for a vendor type name, if there is one.

    Args:
        type_name: Column type name as reported by the database (any case)

    Returns:
        The datatype IRI, or None for unknown or missing type names
    """
    if not type_name:
        return None
    return SQL_TYPE_TO_XSD.get(type_name.upper())


def value_to_text(value: Any) -> str:
    """Render a driver value as text; ``None`` becomes the empty string."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value).hex().upper()
    if isinstance(value, (datetime.date, datetime.time)):
        # datetime.datetime is a date subclass
        return value.isoformat()
    if isinstance(value, decimal.Decimal):
        return format(value, "f")
    return str(value)


def normalize_value(text: str, datatype: str | None) -> str:
    """Normalize the text of a value given the column datatype.

    Some drivers render integral doubles with a trailing ``.0``; every
    ``.0`` substring is removed from double values.
    """
    if datatype == DOUBLE:
        return text.replace(".0", "")
    return text
