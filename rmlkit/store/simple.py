"""In-memory, list-backed quad store.

``SimpleQuadStore`` keeps quads in insertion order and can only produce
N-Quads. Its ``get_quads`` does not filter: whatever the arguments, the whole
backing list is returned and callers filter themselves. A store needing
pattern matching is a different implementation.

Example:
    >>> store = SimpleQuadStore()
    >>> store.add_quad(iri("ex/s"), iri("ex/p"), iri("ex/o"))
    >>> store.to_nquads(sys.stdout)
    <ex/s> <ex/p> <ex/o>.
"""

from __future__ import annotations

import logging
from typing import TextIO

from rmlkit.onto import SerializationFormat
from rmlkit.store.base import QuadStore, UnsupportedSerializationError
from rmlkit.store.onto import Quad
from rmlkit.term import Namespace, Term

logger = logging.getLogger(__name__)


class SimpleQuadStore(QuadStore):
    """Quad store backed by a plain list.

    Not safe for concurrent mutation; callers sharing a store serialize
    access themselves.

    Attributes:
        quads: Backing list, in insertion order
    """

    def __init__(self, quads: list[Quad] | None = None):
        self.quads: list[Quad] = quads if quads is not None else []

    def add_quad(
        self,
        subject: Term | None,
        predicate: Term | None,
        obj: Term | None,
        graph: Term | None = None,
    ) -> None:
        """Append a quad when subject, predicate and object are all present.

        Incomplete statements are dropped without raising.
        """
        if subject is None or predicate is None or obj is None:
            logger.debug(
                f"Dropping incomplete statement: s={subject} p={predicate} o={obj}"
            )
            return
        self.quads.append(Quad(subject, predicate, obj, graph))

    def get_quads(
        self,
        subject: Term | None = None,
        predicate: Term | None = None,
        obj: Term | None = None,
        graph: Term | None = None,
    ) -> list[Quad]:
        """Return the backing list; the arguments are ignored."""
        return self.quads

    def remove_duplicates(self) -> None:
        """Keep only the first of structurally equal quads, preserving order.

        Quadratic in the number of quads.
        """
        unique: list[Quad] = []
        for q in self.quads:
            if not any(kept.same_as(q) for kept in unique):
                unique.append(q)
        removed = len(self.quads) - len(unique)
        if removed:
            logger.debug(f"Removed {removed} duplicate quads")
        self.quads = unique

    def is_empty(self) -> bool:
        return not self.quads

    def size(self) -> int:
        return len(self.quads)

    def to_nquads(self, out: TextIO) -> None:
        for q in self.quads:
            out.write(q.to_nquad() + "\n")

    def to_turtle(self, out: TextIO) -> None:
        raise UnsupportedSerializationError(self, SerializationFormat.TURTLE)

    def to_jsonld(self, out: TextIO) -> None:
        raise UnsupportedSerializationError(self, SerializationFormat.JSONLD)

    def to_trix(self, out: TextIO) -> None:
        raise UnsupportedSerializationError(self, SerializationFormat.TRIX)

    def to_trig(self, out: TextIO) -> None:
        raise UnsupportedSerializationError(self, SerializationFormat.TRIG)

    def set_namespaces(self, namespaces: set[tuple[str, Namespace]]) -> None:
        pass
