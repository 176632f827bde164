"""
Provers for the Graph Isomorphism proof.

HonestProver holds a witness w with G1 == G0.apply_permutation(w). It never
searches for one: finding w is the very problem being proven, so the
witness is an input.

CheatingProver has no witness. It commits to a relabeling of whichever
graph it bets the verifier will ask for, and answers with that one
permutation regardless of the challenge.
"""

from ..errors import MissingWitnessError
from ..graph import Graph, Permutation, compose_permutations, invert_permutation
from ..oracle import verify_isomorphism
from ..randomness import RandomSource
from ..sampler import PermutationSampler
from .messages import Challenge, Commitment, Response


class HonestProver:
    """
    GI prover that knows an isomorphism G0 -> G1.

    Round:
    1. commit(): sample p, send H = G0^p
    2. respond(b): send p if b == 0, else p composed after w^{-1}

    For b == 1: G1^(w^{-1} then p) = G0^(w then w^{-1} then p) = G0^p = H.
    """

    def __init__(
        self,
        g0: Graph,
        g1: Graph,
        witness: Permutation | None,
        randomness: RandomSource,
    ):
        """
        Initialize prover.

        Args:
            g0, g1: The instance
            witness: Permutation w with g1 == g0.apply_permutation(w)
            randomness: Prover's private randomness handle

        Raises:
            MissingWitnessError: witness is None or not an isomorphism g0 -> g1
        """
        if witness is None:
            raise MissingWitnessError("Honest GI prover requires an isomorphism witness")
        if not verify_isomorphism(g0, g1, witness):
            raise MissingWitnessError("Witness is not an isomorphism from G0 to G1")

        self.g0 = g0
        self.g1 = g1
        self._witness_inv = invert_permutation(witness)
        self._sampler = PermutationSampler(randomness)
        self._sigma: Permutation | None = None

    def commit(self) -> Commitment:
        self._sigma = self._sampler.sample(self.g0.vertex_count)
        return Commitment(graph=self.g0.apply_permutation(self._sigma))

    def respond(self, challenge: Challenge) -> Response:
        if self._sigma is None:
            raise RuntimeError("Must call commit() before respond()")
        sigma, self._sigma = self._sigma, None

        if challenge.bit == 0:
            return Response(permutation=sigma)
        return Response(permutation=compose_permutations(self._witness_inv, sigma))


class CheatingProver:
    """
    GI prover without a witness.

    Bets on a bit c (1 with probability p_one), commits H = G_c^p and
    answers p to every challenge. Accepted exactly when the verifier's bit
    equals c (or, by luck, when G0 and G1 happen to coincide on the needed
    relabeling), so 1/2 per round when G0 and G1 are not isomorphic,
    whatever p_one is.
    """

    def __init__(
        self,
        g0: Graph,
        g1: Graph,
        randomness: RandomSource,
        p_one: float = 0.5,
    ):
        if not 0.0 <= p_one <= 1.0:
            raise ValueError("p_one must be in [0, 1]")
        self.g0 = g0
        self.g1 = g1
        self.p_one = p_one
        self._sampler = PermutationSampler(randomness)
        self._sigma: Permutation | None = None
        self.predicted_challenge: int | None = None

    def commit(self) -> Commitment:
        self.predicted_challenge = self._sampler.bit(self.p_one)
        target = self.g1 if self.predicted_challenge else self.g0
        self._sigma = self._sampler.sample(target.vertex_count)
        return Commitment(graph=target.apply_permutation(self._sigma))

    def respond(self, challenge: Challenge) -> Response:
        if self._sigma is None:
            raise RuntimeError("Must call commit() before respond()")
        sigma, self._sigma = self._sigma, None
        return Response(permutation=sigma)
