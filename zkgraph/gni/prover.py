"""
Provers for the Graph Nonisomorphism proof.
"""

from ..graph import Graph
from ..oracle import IsomorphismOracle
from ..randomness import RandomSource
from ..sampler import PermutationSampler
from .messages import Challenge, Guess


class HonestProver:
    """
    Computationally unbounded GNI prover, modeled by exhaustive search.

    Answers 0 if H is isomorphic to G0, else 1 if H is isomorphic to G1.
    When G0 and G1 are not isomorphic the two classes are disjoint and the
    answer is always right. A graph in neither class cannot come from an
    honest verifier; the prover answers 0 for it.
    """

    def __init__(self, g0: Graph, g1: Graph, oracle: IsomorphismOracle | None = None):
        self.g0 = g0
        self.g1 = g1
        self.oracle = oracle if oracle is not None else IsomorphismOracle()

    def respond(self, challenge: Challenge) -> Guess:
        h = challenge.graph
        if self.oracle.find_isomorphism(self.g0, h) is not None:
            return Guess(bit=0)
        if self.oracle.find_isomorphism(self.g1, h) is not None:
            return Guess(bit=1)
        return Guess(bit=0)


class GuessingProver:
    """
    GNI prover that ignores H and guesses.

    Answers 1 with probability p_one. Against an isomorphic pair no prover
    does better than this, since H carries no information about b.
    """

    def __init__(self, randomness: RandomSource, p_one: float = 0.5):
        if not 0.0 <= p_one <= 1.0:
            raise ValueError("p_one must be in [0, 1]")
        self._sampler = PermutationSampler(randomness)
        self.p_one = p_one

    def respond(self, challenge: Challenge) -> Guess:
        return Guess(bit=self._sampler.bit(self.p_one))
