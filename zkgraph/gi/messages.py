"""
Message types for the Graph Isomorphism proof.
"""

from dataclasses import dataclass

from ..graph import Graph, Permutation


@dataclass(frozen=True)
class Commitment:
    """
    First message, prover to verifier.

    An honest prover sends H = G0 relabeled by a fresh random permutation,
    a uniform member of the class shared by G0 and G1.
    """

    graph: Graph


@dataclass(frozen=True)
class Challenge:
    """Public coin, verifier to prover: which of G0, G1 to map onto H."""

    bit: int


@dataclass(frozen=True)
class Response:
    """
    Second message, prover to verifier.

    A permutation q claimed to satisfy H == G_b.apply_permutation(q).
    Left unvalidated: a malformed q is rejected by the verifier.
    """

    permutation: Permutation
