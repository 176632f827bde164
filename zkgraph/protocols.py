"""
Shared interfaces and per-round records for the graph proof systems.

This module defines:
1. ProofTranscript and RoundResult: what one round leaves behind
2. ProofModule: what a proof-system module (gi, gni) must export

Both proof systems are two-message protocols. The transcript records the
first message and the response; for a public-coin protocol it also records
the verifier's coin, which was sent in the clear. A private coin never
appears in a transcript.
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Protocol

from .graph import Graph, Permutation
from .oracle import IsomorphismOracle
from .randomness import RandomSource


# =============================================================================
# Round Records
# =============================================================================


@dataclass(frozen=True)
class ProofTranscript:
    """
    The two messages of one round.

    Attributes:
        protocol: Name of the proof system ("GI" or "GNI")
        first: First message (GI: prover's commitment, GNI: verifier's challenge)
        response: Second message (GI: prover's permutation, GNI: prover's guess)
        coin: Public coin sent in the clear (GI challenge bit), None if private
    """

    protocol: str
    first: Any
    response: Any
    coin: int | None = None

    @property
    def messages(self) -> tuple[Any, Any]:
        return (self.first, self.response)

    def __len__(self) -> int:
        return 2


@dataclass(frozen=True)
class RoundResult:
    """Verdict of one round, with its transcript."""

    index: int
    accepted: bool
    transcript: ProofTranscript


ProverFactory = Callable[[Graph, Graph, RandomSource], Any]
"""Builds a (possibly dishonest) prover: factory(g0, g1, randomness) -> prover."""


# =============================================================================
# Module Interface
# =============================================================================


class ProofModule(Protocol):
    """
    Protocol for proof-system modules (zkgraph.gi, zkgraph.gni).

    A proof-system module must export:
    - NAME: short protocol name used in transcripts and logs
    - create_prover: builds the honest prover for one round
    - create_verifier: builds the verifier for one round
    - run_round: plays one two-message exchange and returns the verdict

    Example usage:
        from zkgraph import gi  # or gni

        prover = gi.create_prover(g0, g1, witness, randomness, oracle)
        verifier = gi.create_verifier(g0, g1, randomness)
        accepted, transcript = gi.run_round(prover, verifier)
    """

    NAME: str

    @staticmethod
    def create_prover(
        g0: Graph,
        g1: Graph,
        witness: Permutation | None,
        randomness: RandomSource,
        oracle: IsomorphismOracle,
    ) -> Any:
        """
        Create the honest prover.

        Args:
            g0, g1: The claimed instance
            witness: Isomorphism g0 -> g1 (required by GI, ignored by GNI)
            randomness: Prover's randomness handle
            oracle: Search oracle (used by the unbounded GNI prover)
        """
        ...

    @staticmethod
    def create_verifier(g0: Graph, g1: Graph, randomness: RandomSource) -> Any:
        """Create the verifier with its own randomness handle."""
        ...

    @staticmethod
    def run_round(prover: Any, verifier: Any) -> tuple[bool, ProofTranscript]:
        """Run one round and return (accepted, transcript)."""
        ...
