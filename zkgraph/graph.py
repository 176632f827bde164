"""
Labeled simple graphs and vertex permutations.

A Graph on n vertices uses labels 0..n-1. Edges are undirected and stored
normalised as (min, max), so (u, v) and (v, u) are the same edge.

A Permutation is a tuple p of length n where p[i] is the new label of
vertex i. Applying p to G gives the graph with edge (p[u], p[v]) for every
edge (u, v) of G.
"""

from collections.abc import Iterable, Sequence

import networkx as nx

from .errors import (
    DimensionMismatchError,
    InvalidGraphError,
    InvalidPermutationError,
    InvalidSizeError,
    OutOfRangeError,
)

Permutation = tuple[int, ...]


# =============================================================================
# Permutations
# =============================================================================


def identity_permutation(n: int) -> Permutation:
    """Return the identity permutation on [0, n)."""
    return tuple(range(n))


def is_permutation(p: Sequence[int], n: int) -> bool:
    """Return True iff p is a bijection on [0, n) given as a length-n sequence."""
    if not isinstance(p, Sequence) or len(p) != n:
        return False
    seen = [False] * n
    for x in p:
        if isinstance(x, bool) or not isinstance(x, int):
            return False
        if not 0 <= x < n or seen[x]:
            return False
        seen[x] = True
    return True


def check_permutation(p: Sequence[int], n: int) -> Permutation:
    """
    Validate p as a permutation of [0, n) and return it as a tuple.

    Raises:
        DimensionMismatchError: len(p) != n
        InvalidPermutationError: p is not a bijection on [0, n)
    """
    if not isinstance(p, Sequence):
        raise InvalidPermutationError(f"Permutation must be a sequence, got {p!r}")
    if len(p) != n:
        raise DimensionMismatchError(
            f"Permutation has length {len(p)}, graph has {n} vertices"
        )
    if not is_permutation(p, n):
        raise InvalidPermutationError(f"Not a permutation of [0, {n}): {list(p)}")
    return tuple(p)


def invert_permutation(p: Sequence[int]) -> Permutation:
    """Return p^{-1}, so that inv[p[i]] == i."""
    inv = [0] * len(p)
    for i, x in enumerate(p):
        inv[x] = i
    return tuple(inv)


def compose_permutations(first: Sequence[int], then: Sequence[int]) -> Permutation:
    """
    Return the permutation that relabels by `first` and then by `then`.

    G.apply_permutation(first).apply_permutation(then) equals
    G.apply_permutation(compose_permutations(first, then)).
    """
    if len(first) != len(then):
        raise DimensionMismatchError(
            f"Cannot compose permutations of length {len(first)} and {len(then)}"
        )
    return tuple(then[x] for x in first)


# =============================================================================
# Graph
# =============================================================================


class Graph:
    """
    Immutable labeled simple undirected graph on vertices 0..n-1.

    Equality is exact labeled equality (same n, same edge set), not
    isomorphism. Use IsomorphismOracle for the latter.
    """

    __slots__ = ("_n", "_edges", "_adj")

    def __init__(self, n: int, edges: Iterable[tuple[int, int]] = ()):
        """
        Build a graph from a vertex count and an edge list.

        Args:
            n: Number of vertices (at least 1)
            edges: Pairs (u, v) with u, v in [0, n) and u != v.
                Duplicates in either orientation collapse to one edge.

        Raises:
            InvalidSizeError: n < 1
            OutOfRangeError: an endpoint lies outside [0, n)
            InvalidGraphError: a self-loop (v, v)
        """
        if isinstance(n, bool) or not isinstance(n, int) or n < 1:
            raise InvalidSizeError(f"Vertex count must be a positive integer, got {n!r}")

        normalised = set()
        adj = [set() for _ in range(n)]
        for u, v in edges:
            _check_vertex(u, n)
            _check_vertex(v, n)
            if u == v:
                raise InvalidGraphError(f"Self-loop at vertex {u}")
            normalised.add((min(u, v), max(u, v)))
            adj[u].add(v)
            adj[v].add(u)

        self._n = n
        self._edges = frozenset(normalised)
        self._adj = tuple(frozenset(s) for s in adj)

    # -------------------------------------------------------------------------
    # Alternate constructors
    # -------------------------------------------------------------------------

    @classmethod
    def from_adjacency(cls, matrix: Sequence[Sequence[int]]) -> "Graph":
        """
        Build a graph from a square 0/1 adjacency matrix.

        Raises:
            InvalidGraphError: matrix is not square or not symmetric
        """
        n = len(matrix)
        for u, row in enumerate(matrix):
            if len(row) != n:
                raise InvalidGraphError(f"Row {u} has length {len(row)}, expected {n}")

        edges = []
        for u, row in enumerate(matrix):
            for v, cell in enumerate(row):
                if bool(cell) != bool(matrix[v][u]):
                    raise InvalidGraphError(f"Adjacency is not symmetric at ({u}, {v})")
                if cell and u < v:
                    edges.append((u, v))
                elif cell and u == v:
                    raise InvalidGraphError(f"Self-loop at vertex {u}")
        return cls(n, edges)

    @classmethod
    def from_networkx(cls, G: nx.Graph) -> "Graph":
        """
        Convert a NetworkX graph.

        Nodes are relabeled to 0..n-1 in G's node iteration order.
        Directed graphs are read as undirected.
        """
        if G.is_directed():
            G = G.to_undirected()
        nodes = list(G.nodes())
        index = {node: i for i, node in enumerate(nodes)}
        return cls(len(nodes), [(index[u], index[v]) for u, v in G.edges()])

    def to_networkx(self) -> nx.Graph:
        """Return an equivalent networkx.Graph on nodes 0..n-1."""
        H = nx.Graph()
        H.add_nodes_from(range(self._n))
        H.add_edges_from(self._edges)
        return H

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    @property
    def vertex_count(self) -> int:
        """Number of vertices n."""
        return self._n

    @property
    def edge_count(self) -> int:
        return len(self._edges)

    @property
    def edges(self) -> tuple[tuple[int, int], ...]:
        """Edges as sorted (min, max) pairs."""
        return tuple(sorted(self._edges))

    def has_edge(self, u: int, v: int) -> bool:
        """Return whether {u, v} is an edge. Raises OutOfRangeError outside [0, n)."""
        _check_vertex(u, self._n)
        _check_vertex(v, self._n)
        return v in self._adj[u]

    def neighbors(self, v: int) -> frozenset[int]:
        _check_vertex(v, self._n)
        return self._adj[v]

    def degree(self, v: int) -> int:
        _check_vertex(v, self._n)
        return len(self._adj[v])

    def degree_sequence(self) -> tuple[int, ...]:
        """Vertex degrees sorted in descending order (an isomorphism invariant)."""
        return tuple(sorted((len(a) for a in self._adj), reverse=True))

    # -------------------------------------------------------------------------
    # Relabeling and comparison
    # -------------------------------------------------------------------------

    def apply_permutation(self, p: Sequence[int]) -> "Graph":
        """
        Return a new graph with vertex i relabeled to p[i].

        Edge (u, v) exists in the result iff (p^{-1}(u), p^{-1}(v)) is an
        edge here. This graph is left unchanged.

        Raises:
            DimensionMismatchError: len(p) != n
            InvalidPermutationError: p is not a bijection on [0, n)
        """
        p = check_permutation(p, self._n)
        return Graph(self._n, ((p[u], p[v]) for u, v in self._edges))

    def equals(self, other: "Graph") -> bool:
        """Exact labeled equality. Same as ==."""
        return self == other

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Graph):
            return NotImplemented
        return self._n == other._n and self._edges == other._edges

    def __hash__(self) -> int:
        return hash((self._n, self._edges))

    def __repr__(self) -> str:
        return f"Graph(n={self._n}, edges={list(self.edges)})"


def _check_vertex(v: int, n: int) -> None:
    if isinstance(v, bool) or not isinstance(v, int) or not 0 <= v < n:
        raise OutOfRangeError(f"Vertex {v!r} outside [0, {n})")
