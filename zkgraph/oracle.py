"""
Isomorphism oracle: exhaustive search and witness checking.

find_isomorphism is a backtracking search, exponential in the worst case.
It stands in for the computationally unbounded GNI prover and is only
meant for toy graphs (a dozen or so vertices). No attempt is made to scale
it; set max_vertices to refuse larger inputs up front.

verify_isomorphism is the verifier-side check. It is pure: it performs no
search, touches no randomness and has no side effects.
"""

import logging
from collections.abc import Sequence

from .errors import InvalidSizeError
from .graph import Graph, Permutation, is_permutation

logger = logging.getLogger(__name__)


def verify_isomorphism(g0: Graph, g1: Graph, p: Sequence[int]) -> bool:
    """
    Return whether g1 == g0.apply_permutation(p).

    Malformed p (wrong length, not a bijection) gives False rather than an
    error, since it is just a failed proof.
    """
    if g0.vertex_count != g1.vertex_count or g0.edge_count != g1.edge_count:
        return False
    if not is_permutation(p, g0.vertex_count):
        return False
    return g0.apply_permutation(p) == g1


class IsomorphismOracle:
    """
    Decides and finds isomorphisms between small graphs.

    Pruning used by the search:
    - vertex count, edge count and sorted degree sequence must match
    - u in g0 may only map to a vertex of g1 with the same degree
    - each new pair (u, v) must agree with every already mapped pair (w, x):
      g0.has_edge(u, w) == g1.has_edge(v, x)
    - vertices are mapped most constrained first (fewest candidates,
      then most neighbours already in the order)
    """

    def __init__(self, max_vertices: int | None = None):
        """
        Initialize oracle.

        Args:
            max_vertices: Refuse to search graphs larger than this.
                None means no bound.
        """
        if max_vertices is not None and max_vertices < 1:
            raise InvalidSizeError("max_vertices must be at least 1")
        self.max_vertices = max_vertices

    verify_isomorphism = staticmethod(verify_isomorphism)

    def are_isomorphic(self, g0: Graph, g1: Graph) -> bool:
        return self.find_isomorphism(g0, g1) is not None

    def find_isomorphism(self, g0: Graph, g1: Graph) -> Permutation | None:
        """
        Search for p with g1 == g0.apply_permutation(p).

        Args:
            g0: Source graph
            g1: Target graph

        Returns:
            Some such permutation, or None if the graphs are not isomorphic

        Raises:
            InvalidSizeError: a graph exceeds max_vertices
        """
        n = g0.vertex_count
        if self.max_vertices is not None and max(n, g1.vertex_count) > self.max_vertices:
            raise InvalidSizeError(
                f"Isomorphism search limited to {self.max_vertices} vertices, "
                f"got {max(n, g1.vertex_count)}"
            )

        if n != g1.vertex_count or g0.edge_count != g1.edge_count:
            return None
        if g0.degree_sequence() != g1.degree_sequence():
            return None

        candidates = [
            [v for v in range(n) if g1.degree(v) == g0.degree(u)] for u in range(n)
        ]
        order = _search_order(g0, candidates)

        mapping = [-1] * n
        used = [False] * n
        visited = 0

        def extend(depth: int) -> bool:
            nonlocal visited
            if depth == n:
                return True
            u = order[depth]
            for v in candidates[u]:
                if used[v]:
                    continue
                visited += 1
                if not _consistent(g0, g1, order, mapping, depth, u, v):
                    continue
                mapping[u] = v
                used[v] = True
                if extend(depth + 1):
                    return True
                mapping[u] = -1
                used[v] = False
            return False

        found = extend(0)
        logger.debug("Isomorphism search on %d vertices: found=%s, visited=%d", n, found, visited)
        return tuple(mapping) if found else None


def _search_order(g: Graph, candidates: list[list[int]]) -> list[int]:
    """Order vertices so each next one is the most constrained."""
    n = g.vertex_count
    order = []
    placed = [False] * n
    for _ in range(n):
        best = min(
            (u for u in range(n) if not placed[u]),
            key=lambda u: (
                len(candidates[u]),
                -sum(1 for w in g.neighbors(u) if placed[w]),
                -g.degree(u),
                u,
            ),
        )
        placed[best] = True
        order.append(best)
    return order


def _consistent(
    g0: Graph,
    g1: Graph,
    order: list[int],
    mapping: list[int],
    depth: int,
    u: int,
    v: int,
) -> bool:
    for i in range(depth):
        w = order[i]
        if g0.has_edge(u, w) != g1.has_edge(v, mapping[w]):
            return False
    return True
