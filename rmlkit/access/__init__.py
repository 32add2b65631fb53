"""Access layer for tabular sources.

Key Components:
    - Access: Base class producing typed rows and CSV streams
    - TypedResult: Rows of one execution plus their inferred datatypes
    - DatabaseType: Supported relational database vendors
    - RDBAccess: Access to the result of a SQL query

Example:
    >>> from rmlkit.access import DatabaseType, RDBAccess, RDBAccessConfig
    >>> access = RDBAccess(
    ...     RDBAccessConfig(
    ...         dsn="data/shop.db",
    ...         database_type=DatabaseType.SQLITE,
    ...         query="SELECT * FROM product",
    ...     )
    ... )
    >>> stream = access.get_input_stream()
    >>> access.get_datatypes()
"""

from .base import Access, DatatypesNotReadyError, TypedResult
from .database_type import DATABASE_PROFILES, DatabaseProfile, DatabaseType
from .rdb import NULL_HEADER, RDBAccess, RDBAccessConfig, build_connection_string

__all__ = [
    "Access",
    "DATABASE_PROFILES",
    "DatabaseProfile",
    "DatabaseType",
    "DatatypesNotReadyError",
    "NULL_HEADER",
    "RDBAccess",
    "RDBAccessConfig",
    "TypedResult",
    "build_connection_string",
]
