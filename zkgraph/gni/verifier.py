"""
Verifier for the Graph Nonisomorphism proof.
"""

from ..graph import Graph
from ..randomness import RandomSource
from ..sampler import PermutationSampler
from .messages import Challenge, Guess


class Verifier:
    """
    GNI verifier (private coin).

    Picks a secret bit b and a secret permutation p, sends H = G_b^p, and
    accepts iff the prover names b.
    """

    def __init__(self, g0: Graph, g1: Graph, randomness: RandomSource):
        self.g0 = g0
        self.g1 = g1
        self._sampler = PermutationSampler(randomness)
        self._b: int | None = None

    def challenge(self) -> Challenge:
        """Draw the private coin and send only the relabeled graph."""
        if self._b is not None:
            raise RuntimeError("Round already has a challenge")
        self._b = self._sampler.bit()
        gb = self.g1 if self._b else self.g0
        sigma = self._sampler.sample(gb.vertex_count)
        return Challenge(graph=gb.apply_permutation(sigma))

    def decide(self, guess: Guess) -> bool:
        if self._b is None:
            raise RuntimeError("Must call challenge() before decide()")
        return guess.bit == self._b
