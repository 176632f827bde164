"""
Graph Isomorphism (GI): public-coin proof that G0 and G1 are isomorphic.

One round:
1. Prover -> Verifier: H = G0 relabeled by a fresh random permutation
2. Verifier -> Prover: uniform bit b, in the clear
3. Prover -> Verifier: q with H == G_b.apply_permutation(q)

Completeness: an honest prover holding a witness is always accepted.
Soundness: if G0 and G1 are not isomorphic, H is a relabeling of at most
one of them, so any prover is accepted with probability at most 1/2.
Zero knowledge: q is a uniform permutation whichever b was asked.

The components:
- Commitment, Challenge, Response: messages
- HonestProver: knows a witness
- CheatingProver: does not, bets on the challenge
- Verifier
"""

from ..graph import Graph, Permutation
from ..oracle import IsomorphismOracle
from ..protocols import ProofTranscript
from ..randomness import RandomSource
from .messages import Challenge, Commitment, Response
from .prover import CheatingProver, HonestProver
from .verifier import Verifier

NAME = "GI"


def create_prover(
    g0: Graph,
    g1: Graph,
    witness: Permutation | None,
    randomness: RandomSource,
    oracle: IsomorphismOracle | None = None,
) -> HonestProver:
    """
    Create the honest prover.

    The oracle is accepted for interface compatibility and never used:
    the prover's witness is an input, not something it searches for.

    Raises:
        MissingWitnessError: witness missing or invalid
    """
    return HonestProver(g0, g1, witness, randomness)


def create_verifier(g0: Graph, g1: Graph, randomness: RandomSource) -> Verifier:
    """Create a verifier for one round."""
    return Verifier(g0, g1, randomness)


def run_round(prover, verifier: Verifier) -> tuple[bool, ProofTranscript]:
    """
    Run one round.

    Args:
        prover: Any object with commit() and respond(challenge)
        verifier: Verifier for this round

    Returns:
        (accepted, transcript)
    """
    commitment = prover.commit()
    challenge = verifier.challenge(commitment)
    response = prover.respond(challenge)
    accepted = verifier.decide(response)
    transcript = ProofTranscript(
        protocol=NAME,
        first=commitment,
        response=response,
        coin=challenge.bit,
    )
    return accepted, transcript


__all__ = [
    "NAME",
    "Commitment",
    "Challenge",
    "Response",
    "HonestProver",
    "CheatingProver",
    "Verifier",
    "create_prover",
    "create_verifier",
    "run_round",
]
