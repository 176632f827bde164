"""
Verifier for the Graph Isomorphism proof.
"""

from ..graph import Graph
from ..oracle import verify_isomorphism
from ..randomness import RandomSource
from ..sampler import PermutationSampler
from .messages import Challenge, Commitment, Response


class Verifier:
    """
    GI verifier (public coin).

    Receives H, sends a uniform bit b in the clear, and accepts iff the
    prover's permutation q satisfies H == G_b.apply_permutation(q).
    """

    def __init__(self, g0: Graph, g1: Graph, randomness: RandomSource):
        self.g0 = g0
        self.g1 = g1
        self._sampler = PermutationSampler(randomness)
        self._commitment: Commitment | None = None
        self._challenge: Challenge | None = None

    def challenge(self, commitment: Commitment) -> Challenge:
        """Store the prover's commitment and draw the public coin."""
        if self._commitment is not None:
            raise RuntimeError("Round already has a commitment")
        self._commitment = commitment
        self._challenge = Challenge(bit=self._sampler.bit())
        return self._challenge

    def decide(self, response: Response) -> bool:
        """Accept iff the response maps G_b onto the committed graph."""
        if self._challenge is None:
            raise RuntimeError("Must call challenge() before decide()")
        h = self._commitment.graph
        if not isinstance(h, Graph):
            return False
        gb = self.g1 if self._challenge.bit else self.g0
        return verify_isomorphism(gb, h, response.permutation)
