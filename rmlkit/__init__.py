"""rmlkit: intermediate layer of an RDF-generation pipeline.

rmlkit buffers the quads produced while mapping rules are evaluated, and reads
relational sources into typed tabular data that mapping rules consume.

Key Features:
    - In-memory quad store with duplicate removal and N-Quads output
    - Relational access over SQLAlchemy with XSD datatype inference per column
    - Vendor profiles for MySQL, PostgreSQL, SQL Server, Oracle, Db2 and SQLite
    - YAML-loadable access configuration

Example:
    >>> from rmlkit import SimpleQuadStore, iri
    >>> store = SimpleQuadStore()
    >>> store.add_quad(iri("ex/s"), iri("ex/p"), iri("ex/o"))
    >>> store.to_nquads(sys.stdout)
    <ex/s> <ex/p> <ex/o>.
"""

# --- Quad stores -------------------------------------------------------------
from .store import Quad, QuadStore, SimpleQuadStore, UnsupportedSerializationError

# --- Access ------------------------------------------------------------------
from .access import (
    Access,
    DatabaseType,
    DatatypesNotReadyError,
    RDBAccess,
    RDBAccessConfig,
    TypedResult,
)

# --- Terms, enums & configuration -------------------------------------------
from .base import ConfigBaseModel
from .onto import BaseEnum, SerializationFormat
from .term import Term, blank_node, iri, literal, to_nt

__all__ = [
    # Quad stores
    "Quad",
    "QuadStore",
    "SimpleQuadStore",
    "UnsupportedSerializationError",
    # Access
    "Access",
    "DatabaseType",
    "DatatypesNotReadyError",
    "RDBAccess",
    "RDBAccessConfig",
    "TypedResult",
    # Terms, enums & configuration
    "BaseEnum",
    "ConfigBaseModel",
    "SerializationFormat",
    "Term",
    "blank_node",
    "iri",
    "literal",
    "to_nt",
]
