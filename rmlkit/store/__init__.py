"""Quad stores.

Key Components:
    - Quad: Immutable statement with an optional named graph
    - QuadStore: Abstract store contract
    - SimpleQuadStore: List-backed store producing N-Quads only

Example:
    >>> from rmlkit.store import SimpleQuadStore
    >>> from rmlkit.term import iri
    >>> store = SimpleQuadStore()
    >>> store.add_quad(iri("ex/s"), iri("ex/p"), iri("ex/o"), iri("ex/g"))
    >>> store.size()
    1
"""

from .base import QuadStore, UnsupportedSerializationError
from .onto import Quad, graph_equal
from .simple import SimpleQuadStore

__all__ = [
    "Quad",
    "QuadStore",
    "SimpleQuadStore",
    "UnsupportedSerializationError",
    "graph_equal",
]
