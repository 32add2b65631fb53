"""Abstract quad store.

A quad store buffers the statements produced while a mapping is evaluated and
serializes them once evaluation is done. Concrete stores decide which output
formats they can produce; a store that cannot produce a format raises
:class:`UnsupportedSerializationError` from the matching ``to_*`` method.

Key Components:
    - QuadStore: Base class for all quad stores
    - UnsupportedSerializationError: Raised for formats a store does not produce
"""

from __future__ import annotations

import abc
import logging
from typing import Iterable, Iterator, TextIO

from rmlkit.onto import SerializationFormat
from rmlkit.store.onto import Quad
from rmlkit.term import Namespace, Term

logger = logging.getLogger(__name__)


class UnsupportedSerializationError(NotImplementedError):
    """Raised when a store is asked for a serialization it does not provide."""

    def __init__(self, store: QuadStore, fmt: SerializationFormat | str):
        self.store_type = type(store).__name__
        self.format = str(fmt)
        super().__init__(
            f"{self.store_type} does not support {self.format} serialization"
        )


class QuadStore(abc.ABC):
    """Contract for quad buffering, size queries and serialization."""

    @abc.abstractmethod
    def add_quad(
        self,
        subject: Term | None,
        predicate: Term | None,
        obj: Term | None,
        graph: Term | None = None,
    ) -> None:
        """Add a statement; ``graph=None`` targets the default graph."""

    def add_quads(self, quads: Iterable[Quad]) -> None:
        for q in quads:
            self.add_quad(q.subject, q.predicate, q.object, q.graph)

    @abc.abstractmethod
    def get_quads(
        self,
        subject: Term | None = None,
        predicate: Term | None = None,
        obj: Term | None = None,
        graph: Term | None = None,
    ) -> list[Quad]:
        """Return the quads matching the non-``None`` arguments."""

    @abc.abstractmethod
    def remove_duplicates(self) -> None:
        """Drop repeated statements, keeping the first occurrence."""

    @abc.abstractmethod
    def is_empty(self) -> bool: ...

    @abc.abstractmethod
    def size(self) -> int: ...

    def __len__(self) -> int:
        return self.size()

    def __iter__(self) -> Iterator[Quad]:
        return iter(self.get_quads())

    @abc.abstractmethod
    def to_nquads(self, out: TextIO) -> None: ...

    @abc.abstractmethod
    def to_turtle(self, out: TextIO) -> None: ...

    @abc.abstractmethod
    def to_jsonld(self, out: TextIO) -> None: ...

    @abc.abstractmethod
    def to_trix(self, out: TextIO) -> None: ...

    @abc.abstractmethod
    def to_trig(self, out: TextIO) -> None: ...

    @abc.abstractmethod
    def set_namespaces(self, namespaces: set[tuple[str, Namespace]]) -> None:
        """Register ``(prefix, namespace)`` bindings for prefixed formats."""

    def write(self, out: TextIO, fmt: SerializationFormat | str) -> None:
        """Serialize the store to ``out`` in the requested format.

        Args:
            out: Text sink to write to
            fmt: A SerializationFormat or its string value (e.g. ``"nquads"``)

        Raises:
            ValueError: If ``fmt`` is not a known format
            UnsupportedSerializationError: If this store cannot produce ``fmt``
        """
        if fmt not in SerializationFormat:
            raise ValueError(
                f"Unknown serialization format '{fmt}'. "
                f"Known: {[f.value for f in SerializationFormat]}"
            )
        fmt = SerializationFormat(fmt)
        writers = {
            SerializationFormat.NQUADS: self.to_nquads,
            SerializationFormat.TURTLE: self.to_turtle,
            SerializationFormat.JSONLD: self.to_jsonld,
            SerializationFormat.TRIX: self.to_trix,
            SerializationFormat.TRIG: self.to_trig,
        }
        logger.debug(f"Writing {self.size()} quads as {fmt}")
        writers[fmt](out)
