"""Shared fixtures: a SQLite product database and simple quads."""

import logging

import pytest
from sqlalchemy import create_engine, text

from rmlkit.access import DatabaseType, RDBAccessConfig
from rmlkit.term import iri

logger = logging.getLogger(__name__)


@pytest.fixture(scope="function")
def sqlite_path(tmp_path):
    """Create a SQLite file DB with a product table and return its path.

    A file (not ``:memory:``) so that the access under test opens its own
    connection to the same data.
    """
    path = tmp_path / "shop.db"
    engine = create_engine(f"sqlite:///{path}")
    with engine.begin() as conn:
        conn.execute(
            text(
                """
                CREATE TABLE product (
                    id INTEGER PRIMARY KEY,
                    name TEXT,
                    price REAL,
                    weight REAL,
                    picture BLOB
                )
                """
            )
        )
        conn.execute(
            text(
                """
                INSERT INTO product (id, name, price, weight, picture) VALUES
                    (1, 'Widget', 3.0, 2.5, x'CAFE'),
                    (2, 'Gadget, deluxe', 3.14, NULL, NULL),
                    (3, NULL, 10.0, 1.0, x'00FF')
                """
            )
        )
    engine.dispose()
    logger.debug(f"Created test database {path}")
    return str(path)


@pytest.fixture(scope="function")
def sqlite_config(sqlite_path):
    def make(query: str) -> RDBAccessConfig:
        return RDBAccessConfig(
            dsn=sqlite_path,
            database_type=DatabaseType.SQLITE,
            query=query,
        )

    return make


@pytest.fixture(scope="function")
def spo():
    return iri("ex/s"), iri("ex/p"), iri("ex/o")
