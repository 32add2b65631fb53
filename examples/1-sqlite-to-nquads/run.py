"""Example 1: Turn the rows of a SQLite table into N-Quads.

This example demonstrates:
- Reading a SQL query result as typed CSV with RDBAccess
- Using the inferred column datatypes to build typed literals
- Buffering quads in a SimpleQuadStore, dropping duplicates and writing N-Quads

Prerequisites:
- None: the example creates its own SQLite database next to this script
"""

import csv
import io
import logging
import sys
from pathlib import Path

from sqlalchemy import create_engine, text

from rmlkit import DatabaseType, RDBAccess, RDBAccessConfig, SimpleQuadStore
from rmlkit.term import Namespace, iri, literal

logger = logging.getLogger(__name__)

EX = Namespace("http://example.org/")

db_path = Path(__file__).parent / "shop.db"

# Step 1: Create a small product database
engine = create_engine(f"sqlite:///{db_path}")
with engine.begin() as conn:
    conn.execute(text("DROP TABLE IF EXISTS product"))
    conn.execute(
        text("CREATE TABLE product (id INTEGER PRIMARY KEY, name TEXT, price REAL)")
    )
    conn.execute(
        text(
            "INSERT INTO product VALUES "
            "(1, 'Widget', 3.0), (2, 'Gadget', 3.14), (3, 'Gizmo', 10.0)"
        )
    )
engine.dispose()

# Step 2: Read the query result; the same config could be loaded from YAML
# with RDBAccessConfig.from_yaml("access.yaml")
access = RDBAccess(
    RDBAccessConfig(
        dsn=str(db_path),
        database_type=DatabaseType.SQLITE,
        query="SELECT id, name, price FROM product ORDER BY id",
    )
)
stream = access.get_input_stream()
datatypes = access.get_datatypes()

# Step 3: One subject per row, one quad per column value
store = SimpleQuadStore()
graph = iri(EX["products"])
rows = csv.DictReader(io.TextIOWrapper(stream, encoding="utf-8", newline=""))
for row in rows:
    subject = iri(EX[f"product/{row['id']}"])
    for column, value in row.items():
        if value == "":
            continue
        store.add_quad(
            subject, iri(EX[column]), literal(value, datatype=datatypes.get(column)), graph
        )
    # same statement on every row; removed below
    store.add_quad(graph, iri(EX["source"]), literal(access.config.dsn))

store.remove_duplicates()
logger.info(f"Generated {store.size()} quads")

# Step 4: Write N-Quads
store.to_nquads(sys.stdout)
