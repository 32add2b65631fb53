"""RDF terms used by quad stores.

Terms are rdflib nodes: ``URIRef`` for IRIs, ``Literal`` for literals (with an
optional datatype or language tag) and ``BNode`` for blank nodes. rdflib
compares them structurally: a term equals another term only when both are the
same variant with the same fields.

Example:
    >>> to_nt(iri("http://example.org/s"))
    '<http://example.org/s>'
    >>> to_nt(literal("42", datatype=XSD.integer))
    '"42"^^<http://www.w3.org/2001/XMLSchema#integer>'
"""

from __future__ import annotations

from typing import TypeAlias

from rdflib.namespace import XSD, Namespace
from rdflib.term import BNode, Literal, URIRef

Term: TypeAlias = URIRef | Literal | BNode

__all__ = [
    "Term",
    "Namespace",
    "XSD",
    "iri",
    "literal",
    "blank_node",
    "to_nt",
]


def iri(value: str) -> URIRef:
    return URIRef(value)


def literal(
    value: str, datatype: str | None = None, language: str | None = None
) -> Literal:
    """Create a literal; ``datatype`` and ``language`` are mutually exclusive."""
    if datatype is not None and language is not None:
        raise ValueError("A literal cannot have both a datatype and a language tag")
    return Literal(
        value,
        datatype=URIRef(datatype) if datatype is not None else None,
        lang=language,
    )


def blank_node(identifier: str | None = None) -> BNode:
    return BNode(identifier)


def to_nt(term: Term) -> str:
    """Return the canonical N-Triples/N-Quads lexical form of a term."""
    return term.n3()
