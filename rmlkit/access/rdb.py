"""Relational database access.

``RDBAccess`` runs one SQL query against a configured database and turns the
result into typed rows: every value as text, and every column annotated with
the XSD datatype inferred from its vendor type name.

Key Features:
    - Vendor-specific connection strings (credentials, MySQL and SQL Server quirks)
    - Connection through SQLAlchemy, one connection per execution, no pooling
    - Datatype inference and double normalization per column
    - Identity defined by the six configuration fields, usable as a cache key

The query string is passed to the database verbatim; nothing is bound or
escaped. A long-running query blocks the caller: there is no timeout,
cancellation or retry at this level.

Example:
    >>> config = RDBAccessConfig(
    ...     dsn="localhost:3306/shop",
    ...     database_type=DatabaseType.MYSQL,
    ...     username="reader",
    ...     password="secret",
    ...     query="SELECT id, price FROM product",
    ... )
    >>> access = RDBAccess(config)
    >>> access.connection_string
    'jdbc:mysql://localhost:3306/shop?user=reader&password=secret&serverTimezone=UTC&useSSL=false'
    >>> csv_stream = access.get_input_stream()
    >>> access.get_datatypes()
    {'id': 'http://www.w3.org/2001/XMLSchema#integer', 'price': '...#double'}
"""

from __future__ import annotations

import contextlib
import logging
import re
from typing import Any, Callable, Generator

from pydantic import ConfigDict, Field
from sqlalchemy import create_engine
from sqlalchemy.engine import URL, Engine
from sqlalchemy.pool import NullPool
from suthing import Timer

from rmlkit.access.base import Access, TypedResult
from rmlkit.access.database_type import DatabaseType
from rmlkit.access.datatypes import column_datatype, normalize_value, value_to_text
from rmlkit.access.metadata import ColumnInfo, describe_columns, row_type_name
from rmlkit.base import ConfigBaseModel

logger = logging.getLogger(__name__)

# Header used for columns without a label; mapping documents cannot reference it
NULL_HEADER = "rmlkit.access.rdb.RDBAccess.nullheader"

SQL_SERVER_ODBC_DRIVER = "ODBC Driver 18 for SQL Server"


class RDBAccessConfig(ConfigBaseModel):
    """Everything needed to run one query against one database.

    Attributes:
        dsn: Data source name, ``host[:port]/database`` (a file path for SQLite)
        database_type: Vendor of the database
        username: User running the query (optional)
        password: Password of that user (optional)
        query: SQL query, sent as-is
        content_type: Content type of the produced data
    """

    model_config = ConfigDict(frozen=True)

    dsn: str = Field(..., description="Data source name")
    database_type: DatabaseType = Field(..., description="Database vendor")
    username: str | None = Field(default=None, description="Database user")
    password: str | None = Field(default=None, description="Database password")
    query: str = Field(..., description="SQL query to execute")
    content_type: str = Field(
        default="text/csv", description="Content type of the produced data"
    )

    @property
    def db_type(self) -> DatabaseType:
        return DatabaseType(self.database_type)

    @property
    def has_credentials(self) -> bool:
        return bool(self.username) and bool(self.password)


def build_connection_string(config: RDBAccessConfig) -> str:
    """Build the vendor connection string for a configuration.

    Credentials are spliced in first; the MySQL and SQL Server fixups run
    afterwards and rely on that order.
    """
    db_type = config.db_type
    connection_string = f"jdbc:{db_type.url_prefix}//{config.dsn}"
    query_started = False

    if config.has_credentials:
        if db_type == DatabaseType.ORACLE:
            connection_string = connection_string.replace(
                ":@", f":{config.username}/{config.password}@"
            )
        elif "user=" not in connection_string:
            connection_string += f"?user={config.username}&password={config.password}"
            query_started = True

    if db_type == DatabaseType.MYSQL:
        connection_string += "&" if query_started else "?"
        connection_string += "serverTimezone=UTC&useSSL=false"

    if db_type == DatabaseType.SQL_SERVER:
        connection_string = connection_string.replace("?", ";").replace("&", ";")
        if not connection_string.endswith(";"):
            connection_string += ";"

    return connection_string


def mask_password(connection_string: str, password: str | None) -> str:
    if not password:
        return connection_string
    return connection_string.replace(password, "***")


def split_dsn(dsn: str) -> tuple[str | None, int | None, str | None]:
    """Split ``host[:port][/database]`` into its parts.

    Connection parameters following ``?`` or ``;`` are not part of the result.
    """
    dsn = re.split(r"[?;]", dsn, maxsplit=1)[0]
    location, _, database = dsn.partition("/")
    host, _, port = location.partition(":")
    return (
        host or None,
        int(port) if port else None,
        database or None,
    )


def _release(name: str, release: Callable[[], Any]) -> None:
    """Release a resource, logging instead of raising on failure."""
    try:
        release()
    except Exception as e:
        logger.warning(f"Error releasing {name}: {e}", exc_info=True)


class RDBAccess(Access):
    """Access to the result of a SQL query on a relational database.

    Two accesses are equal when their configurations are equal, so an access
    can key a cache of already-read sources.

    Attributes:
        config: Connection and query configuration
    """

    def __init__(self, config: RDBAccessConfig):
        super().__init__()
        self.config = config

    @property
    def connection_string(self) -> str:
        return build_connection_string(self.config)

    def sqlalchemy_url(self) -> URL:
        """SQLAlchemy URL reaching the same database as the connection string."""
        config = self.config
        db_type = config.db_type
        if db_type == DatabaseType.SQLITE:
            return URL.create(db_type.sqlalchemy_driver, database=config.dsn)

        host, port, database = split_dsn(config.dsn)
        query: dict[str, str] = {}
        if db_type == DatabaseType.ORACLE and database:
            query["service_name"] = database
            database = None
        elif db_type == DatabaseType.SQL_SERVER:
            query["driver"] = SQL_SERVER_ODBC_DRIVER

        return URL.create(
            db_type.sqlalchemy_driver,
            username=config.username or None,
            password=config.password or None,
            host=host,
            port=port,
            database=database,
            query=query,
        )

    def create_engine(self) -> Engine:
        return create_engine(self.sqlalchemy_url(), poolclass=NullPool)

    def execute(self) -> TypedResult:
        """Run the query and return its typed rows.

        The connection stays open until the rows are exhausted or the result
        is closed.

        Raises:
            sqlalchemy.exc.SQLAlchemyError: On connection or execution failure
            ImportError: If the vendor's DB-API driver is not installed
        """
        datatypes: dict[str, str] = {}
        return TypedResult(self._typed_rows(datatypes), datatypes)

    def _typed_rows(
        self, datatypes: dict[str, str]
    ) -> Generator[list[str], None, None]:
        """Yield the header, then every row as text, filling ``datatypes``.

        The datatype of a column is recorded while reading the first row only.
        """
        logger.debug(
            f"Connecting to {mask_password(self.connection_string, self.config.password)}"
        )
        with contextlib.ExitStack() as stack:
            try:
                engine = self.create_engine()
                stack.callback(_release, "engine", engine.dispose)
                connection = engine.connect()
                stack.callback(_release, "connection", connection.close)
                with Timer() as klepsidra:
                    # raw driver SQL: no bind-parameter parsing, no % formatting
                    result = connection.exec_driver_sql(
                        self.config.query,
                        execution_options={"no_parameters": True},
                    )
                stack.callback(_release, "result", result.close)
                description = (
                    result.cursor.description if result.returns_rows else None
                )
                columns = describe_columns(description, connection)
            except Exception as e:
                logger.error(
                    f"Failed to run query on {self.config.dsn} "
                    f"({self.config.db_type.profile.vendor_name}): {e}",
                    exc_info=True,
                )
                raise
            logger.info(
                f"Query on {self.config.dsn} executed in {klepsidra.elapsed:.3f} sec"
            )

            header = csv_header(columns)
            yield header

            if not columns:
                return
            n_rows = 0
            rows = iter(result)
            while True:
                try:
                    row = next(rows, None)
                    if row is None:
                        break
                    typed = self._typed_row(
                        header, columns, row, datatypes, first=(n_rows == 0)
                    )
                except Exception as e:
                    logger.error(
                        f"Failed to read row {n_rows + 1} from {self.config.dsn}: {e}",
                        exc_info=True,
                    )
                    raise
                yield typed
                n_rows += 1
            logger.info(f"Read {n_rows} rows from {self.config.dsn}")

    @staticmethod
    def _typed_row(
        header: list[str],
        columns: list[ColumnInfo],
        row: Any,
        datatypes: dict[str, str],
        first: bool,
    ) -> list[str]:
        values: list[str] = []
        for label, column, value in zip(header, columns, row):
            type_name = row_type_name(column, value)
            datatype = column_datatype(type_name)
            if first and datatype is not None:
                datatypes.setdefault(label, datatype)
            values.append(normalize_value(value_to_text(value), datatype))
        return values

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RDBAccess):
            return NotImplemented
        return self.config == other.config

    def __hash__(self) -> int:
        c = self.config
        return hash(
            f"{c.dsn}{c.database_type}{c.username}{c.password}{c.query}{c.content_type}"
        )

    def __repr__(self) -> str:
        return (
            f"RDBAccess(dsn={self.config.dsn!r}, "
            f"database_type={self.config.db_type}, query={self.config.query!r})"
        )


def csv_header(columns: list[ColumnInfo]) -> list[str]:
    """Column labels, with the placeholder for missing or empty labels."""
    return [column.label if column.label else NULL_HEADER for column in columns]
