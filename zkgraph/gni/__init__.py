"""
Graph Nonisomorphism (GNI): private-coin proof that G0 and G1 are not
isomorphic.

One round:
1. Verifier -> Prover: H = G_b relabeled by a random permutation;
   b and the permutation stay private
2. Prover -> Verifier: guess b'
The verifier accepts iff b' == b.

Completeness: if G0 and G1 are not isomorphic, an unbounded prover tells
the two classes apart and is always accepted.
Soundness: if they are isomorphic, H has the same distribution for either
b, so any prover is accepted with probability at most 1/2.

The components:
- Challenge, Guess: messages
- HonestProver: decides H's class by exhaustive search
- GuessingProver: answers at random
- Verifier
"""

from ..graph import Graph, Permutation
from ..oracle import IsomorphismOracle
from ..protocols import ProofTranscript
from ..randomness import RandomSource
from .messages import Challenge, Guess
from .prover import GuessingProver, HonestProver
from .verifier import Verifier

NAME = "GNI"


def create_prover(
    g0: Graph,
    g1: Graph,
    witness: Permutation | None,
    randomness: RandomSource,
    oracle: IsomorphismOracle | None = None,
) -> HonestProver:
    """
    Create the honest prover.

    GNI has no witness; `witness` and `randomness` are accepted for
    interface compatibility and ignored.
    """
    return HonestProver(g0, g1, oracle)


def create_verifier(g0: Graph, g1: Graph, randomness: RandomSource) -> Verifier:
    """Create a verifier for one round."""
    return Verifier(g0, g1, randomness)


def run_round(prover, verifier: Verifier) -> tuple[bool, ProofTranscript]:
    """
    Run one round.

    Args:
        prover: Any object with respond(challenge)
        verifier: Verifier for this round

    Returns:
        (accepted, transcript). The transcript holds no coin: b is private.
    """
    challenge = verifier.challenge()
    guess = prover.respond(challenge)
    accepted = verifier.decide(guess)
    transcript = ProofTranscript(protocol=NAME, first=challenge, response=guess)
    return accepted, transcript


__all__ = [
    "NAME",
    "Challenge",
    "Guess",
    "HonestProver",
    "GuessingProver",
    "Verifier",
    "create_prover",
    "create_verifier",
    "run_round",
]
