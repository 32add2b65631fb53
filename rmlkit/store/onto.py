"""Quad value type."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict

from rmlkit.term import Term, to_nt


class Quad(BaseModel):
    """Immutable RDF statement with an optional named graph.

    A ``graph`` of ``None`` stands for the default graph.

    Example:
        >>> q = Quad(iri("ex/s"), iri("ex/p"), iri("ex/o"))
        >>> q.graph is None
        True
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    subject: Term
    predicate: Term
    object: Term
    graph: Term | None = None

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        """Allow Quad(s, p, o[, g]) as well as keyword construction."""
        if args:
            names = ("subject", "predicate", "object", "graph")
            if len(args) > len(names):
                raise TypeError(
                    f"Quad takes at most {len(names)} positional arguments"
                )
            kwargs = {**dict(zip(names, args)), **kwargs}
        super().__init__(**kwargs)

    def same_as(self, other: Quad) -> bool:
        """Structural equivalence used for duplicate removal.

        Graphs match when both are absent or both are present and equal; an
        absent graph never matches a present one.
        """
        return (
            self.subject == other.subject
            and self.predicate == other.predicate
            and self.object == other.object
            and graph_equal(self.graph, other.graph)
        )

    def to_nquad(self) -> str:
        """Render as one N-Quads statement, without the line terminator."""
        parts = [to_nt(self.subject), to_nt(self.predicate), to_nt(self.object)]
        if self.graph is not None:
            parts.append(to_nt(self.graph))
        return " ".join(parts) + "."

    def __str__(self) -> str:
        return self.to_nquad()


def graph_equal(a: Term | None, b: Term | None) -> bool:
    if a is None or b is None:
        return a is None and b is None
    return a == b
