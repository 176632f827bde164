"""
Message types for the Graph Nonisomorphism proof.
"""

from dataclasses import dataclass

from ..graph import Graph


@dataclass(frozen=True)
class Challenge:
    """
    First message, verifier to prover.

    H = G_b relabeled by a random permutation. Only H is sent; the bit b
    and the permutation stay with the verifier.
    """

    graph: Graph


@dataclass(frozen=True)
class Guess:
    """Second message, prover to verifier: which graph H came from."""

    bit: int
