"""Access abstraction for tabular sources.

An access produces the rows of a source together with the XSD datatype
inferred for each column. Datatypes are only final once every row has been
read, so the contract has two explicit phases:

1. :meth:`Access.execute` returns a :class:`TypedResult`; iterating it yields
   the header-ordered rows.
2. :attr:`TypedResult.datatypes` becomes readable once the rows are
   exhausted; reading it earlier raises :class:`DatatypesNotReadyError`.

:meth:`Access.get_input_stream` and :meth:`Access.get_datatypes` are built on
top of it for consumers that want the rows as CSV bytes.

Example:
    >>> with access.execute() as result:
    ...     rows = list(result)
    ...     datatypes = result.datatypes
"""

from __future__ import annotations

import abc
import io
import logging
from typing import BinaryIO, Generator, Iterator

import pandas as pd

logger = logging.getLogger(__name__)


class DatatypesNotReadyError(RuntimeError):
    """Raised when column datatypes are read before all rows were consumed."""


class TypedResult(Iterator[list[str]]):
    """Rows of an executed access plus the datatypes inferred while reading.

    ``rows`` is a generator that first yields the header and then one list of
    strings per row, filling ``datatypes`` as it goes. Creating the result
    pulls the header, which runs the underlying statement.

    Attributes:
        header: Column labels, in row order
    """

    def __init__(
        self,
        rows: Generator[list[str], None, None],
        datatypes: dict[str, str],
    ):
        self._rows = rows
        self._datatypes = datatypes
        self._exhausted = False
        self._closed = False
        self.header: list[str] = next(rows)

    def __iter__(self) -> TypedResult:
        return self

    def __next__(self) -> list[str]:
        # a closed result stops without ever counting as exhausted
        if self._closed:
            raise StopIteration
        try:
            return next(self._rows)
        except StopIteration:
            self._exhausted = True
            raise

    @property
    def exhausted(self) -> bool:
        return self._exhausted

    @property
    def datatypes(self) -> dict[str, str]:
        """Column label to XSD datatype IRI, for columns with a known type.

        Raises:
            DatatypesNotReadyError: If rows remain unread
        """
        if not self._exhausted:
            raise DatatypesNotReadyError(
                "Column datatypes are only available after all rows were read"
            )
        return dict(self._datatypes)

    def close(self) -> None:
        """Stop reading and release the underlying resources.

        Rows left unread stay unread: a result closed before exhaustion keeps
        raising :class:`DatatypesNotReadyError`.
        """
        self._closed = True
        self._rows.close()

    def __enter__(self) -> TypedResult:
        return self

    def __exit__(self, exc_type, exc_value, exc_traceback):
        self.close()
        return False


def to_csv_bytes(header: list[str], rows: list[list[str]]) -> bytes:
    """Render header and rows as UTF-8 CSV with minimal quoting."""
    frame = pd.DataFrame(rows, columns=header, dtype=object)
    buffer = io.StringIO()
    frame.to_csv(buffer, index=False, lineterminator="\r\n")
    return buffer.getvalue().encode("utf-8")


class Access(abc.ABC):
    """Source of typed tabular data."""

    def __init__(self):
        self._datatypes: dict[str, str] = {}

    @abc.abstractmethod
    def execute(self) -> TypedResult:
        """Run the access and return its typed rows."""

    def get_input_stream(self) -> BinaryIO:
        """Read every row and return them as a CSV byte stream.

        Also records the column datatypes returned by :meth:`get_datatypes`;
        they are cleared first, so a failed call leaves them empty.
        """
        self._datatypes = {}
        with self.execute() as result:
            rows = list(result)
            self._datatypes = result.datatypes
            header = result.header
        logger.debug(f"Rendering {len(rows)} rows as CSV ({len(header)} columns)")
        return io.BytesIO(to_csv_bytes(header, rows))

    def get_datatypes(self) -> dict[str, str]:
        """Datatypes of the last stream returned by :meth:`get_input_stream`.

        Empty until :meth:`get_input_stream` has been called.
        """
        return self._datatypes
