"""Dump the typed CSV of a relational source.

Usage:
    rmlkit-sql2csv access.yaml -o out.csv --datatypes

``access.yaml`` holds an :class:`~rmlkit.access.RDBAccessConfig`::

    dsn: data/shop.db
    database_type: sqlite
    query: SELECT id, price FROM product
"""

import argparse
import logging
import shutil
import sys

import yaml

from rmlkit.access import RDBAccess, RDBAccessConfig

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rmlkit-sql2csv",
        description="Run a configured SQL query and write the result as typed CSV",
    )
    parser.add_argument("config", help="YAML file with the access configuration")
    parser.add_argument(
        "-o", "--output", default=None, help="output CSV file (default: stdout)"
    )
    parser.add_argument(
        "--datatypes",
        action="store_true",
        help="print the inferred column datatypes to stderr as YAML",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    access = RDBAccess(RDBAccessConfig.from_yaml(args.config))
    stream = access.get_input_stream()

    if args.output is None:
        shutil.copyfileobj(stream, sys.stdout.buffer)
        sys.stdout.flush()
    else:
        with open(args.output, "wb") as f:
            shutil.copyfileobj(stream, f)
        logger.info(f"Wrote {args.output}")

    if args.datatypes:
        sys.stderr.write(
            yaml.safe_dump(access.get_datatypes(), default_flow_style=False)
        )
    return 0


if __name__ == "__main__":
    sys.exit(main())
