"""Relational database vendor profiles.

Each vendor profile pairs the driver identifier that mapping documents use to
name a database engine with the URL prefix of its connection strings, and with
the SQLAlchemy dialect used to actually connect. The table is built once at
import time and is read-only.

Example:
    >>> DatabaseType.MYSQL.url_prefix
    'mysql:'
    >>> DatabaseType.from_driver("com.mysql.cj.jdbc.Driver")
    mysql
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from pydantic import BaseModel, ConfigDict

from rmlkit.onto import BaseEnum


class DatabaseProfile(BaseModel):
    """Static connection conventions of one database vendor."""

    model_config = ConfigDict(frozen=True)

    vendor_name: str
    driver: str
    url_prefix: str
    sqlalchemy_driver: str
    keyword: str


class DatabaseType(BaseEnum):
    """Supported relational database vendors.

    SQLITE is the generic fallback: a local database file needing no server.
    """

    MYSQL = "mysql"
    POSTGRES = "postgres"
    SQL_SERVER = "sqlserver"
    ORACLE = "oracle"
    DB2 = "db2"
    SQLITE = "sqlite"

    @property
    def profile(self) -> DatabaseProfile:
        return DATABASE_PROFILES[self]

    @property
    def driver(self) -> str:
        return self.profile.driver

    @property
    def url_prefix(self) -> str:
        return self.profile.url_prefix

    @property
    def sqlalchemy_driver(self) -> str:
        return self.profile.sqlalchemy_driver

    @classmethod
    def from_driver(cls, driver: str) -> DatabaseType:
        """Resolve a vendor from a driver identifier.

        An exact driver match wins; otherwise the first vendor whose keyword
        occurs in ``driver`` (case-insensitive) is returned.

        Raises:
            ValueError: If no vendor matches
        """
        for db_type, profile in DATABASE_PROFILES.items():
            if profile.driver == driver:
                return db_type
        lowered = driver.lower()
        for db_type, profile in DATABASE_PROFILES.items():
            if profile.keyword in lowered:
                return db_type
        raise ValueError(f"No database type matches driver '{driver}'")


DATABASE_PROFILES: Mapping[DatabaseType, DatabaseProfile] = MappingProxyType(
    {
        DatabaseType.MYSQL: DatabaseProfile(
            vendor_name="MySQL",
            driver="com.mysql.cj.jdbc.Driver",
            url_prefix="mysql:",
            sqlalchemy_driver="mysql+pymysql",
            keyword="mysql",
        ),
        DatabaseType.POSTGRES: DatabaseProfile(
            vendor_name="PostgreSQL",
            driver="org.postgresql.Driver",
            url_prefix="postgresql:",
            sqlalchemy_driver="postgresql+psycopg2",
            keyword="postgres",
        ),
        DatabaseType.SQL_SERVER: DatabaseProfile(
            vendor_name="Microsoft SQL Server",
            driver="com.microsoft.sqlserver.jdbc.SQLServerDriver",
            url_prefix="sqlserver:",
            sqlalchemy_driver="mssql+pyodbc",
            keyword="sqlserver",
        ),
        DatabaseType.ORACLE: DatabaseProfile(
            vendor_name="Oracle",
            driver="oracle.jdbc.OracleDriver",
            url_prefix="oracle:thin:@",
            sqlalchemy_driver="oracle+oracledb",
            keyword="oracle",
        ),
        DatabaseType.DB2: DatabaseProfile(
            vendor_name="IBM Db2",
            driver="com.ibm.db2.jcc.DB2Driver",
            url_prefix="db2:",
            sqlalchemy_driver="db2+ibm_db",
            keyword="db2",
        ),
        DatabaseType.SQLITE: DatabaseProfile(
            vendor_name="SQLite",
            driver="org.sqlite.JDBC",
            url_prefix="sqlite:",
            sqlalchemy_driver="sqlite",
            keyword="sqlite",
        ),
    }
)
