"""
Soundness amplification by independent repetition.

A single round of GI or GNI lets a cheating prover through with
probability up to 1/2. RoundRunner repeats the round k times with fresh
participants and fresh randomness and accepts only if every round
accepts, bringing the error down to 2^{-k}.

Rounds share no mutable state. Each one gets randomness.fork(index), split
again into independent prover and verifier handles, so rounds may also run
on a thread pool (Params.workers > 1). The verdict is computed only after
all rounds have finished.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from types import ModuleType

from .errors import InvalidRoundsError
from .graph import Graph, Permutation
from .oracle import IsomorphismOracle
from .params import Params
from .protocols import ProverFactory, RoundResult
from .randomness import RandomSource, default_randomness

logger = logging.getLogger(__name__)

_PROVER_LABEL = 0
_VERIFIER_LABEL = 1


class RoundRunner:
    """Runs k independent rounds of a proof system and AND-composes them."""

    def __init__(
        self,
        params: Params | None = None,
        randomness: RandomSource | None = None,
        oracle: IsomorphismOracle | None = None,
    ):
        """
        Initialize runner.

        Args:
            params: Run parameters (default Params())
            randomness: Root randomness handle (default OS CSPRNG)
            oracle: Search oracle for honest GNI provers
                (default bounded by params.max_vertices)
        """
        self.params = params if params is not None else Params()
        self.randomness = randomness if randomness is not None else default_randomness()
        self.oracle = oracle if oracle is not None else IsomorphismOracle(self.params.max_vertices)

    def run(
        self,
        protocol: ModuleType,
        g0: Graph,
        g1: Graph,
        rounds: int | None = None,
        witness: Permutation | None = None,
        prover_factory: ProverFactory | None = None,
    ) -> bool:
        """
        Run the proof and return the verdict.

        Args:
            protocol: Proof-system module, zkgraph.gi or zkgraph.gni
            g0, g1: The instance
            rounds: Number of rounds (default params.rounds)
            witness: Isomorphism g0 -> g1 for the honest GI prover
            prover_factory: Replaces the honest prover, called as
                prover_factory(g0, g1, randomness) once per round

        Returns:
            True iff every round accepted

        Raises:
            InvalidRoundsError: rounds < 1
            MissingWitnessError: honest GI prover without a valid witness
        """
        results = self.run_rounds(protocol, g0, g1, rounds, witness, prover_factory)
        verdict = all(r.accepted for r in results)
        logger.info(
            "%s proof over %d rounds: %s",
            protocol.NAME,
            len(results),
            "accepted" if verdict else "rejected",
        )
        return verdict

    def run_rounds(
        self,
        protocol: ModuleType,
        g0: Graph,
        g1: Graph,
        rounds: int | None = None,
        witness: Permutation | None = None,
        prover_factory: ProverFactory | None = None,
    ) -> list[RoundResult]:
        """
        Run every round and return the per-round results in round order.

        All rounds run, even after a rejection. Arguments as for run().
        """
        if rounds is None:
            rounds = self.params.rounds
        if isinstance(rounds, bool) or not isinstance(rounds, int) or rounds < 1:
            raise InvalidRoundsError(f"rounds must be at least 1, got {rounds!r}")

        def play(index: int) -> RoundResult:
            return self._run_round(protocol, g0, g1, index, witness, prover_factory)

        if self.params.workers == 1 or rounds == 1:
            return [play(i) for i in range(rounds)]

        with ThreadPoolExecutor(max_workers=self.params.workers) as pool:
            return list(pool.map(play, range(rounds)))

    def acceptance_rate(
        self,
        protocol: ModuleType,
        g0: Graph,
        g1: Graph,
        rounds: int | None = None,
        witness: Permutation | None = None,
        prover_factory: ProverFactory | None = None,
    ) -> float:
        """Fraction of rounds accepted. Used to measure per-round soundness."""
        results = self.run_rounds(protocol, g0, g1, rounds, witness, prover_factory)
        return sum(r.accepted for r in results) / len(results)

    def _run_round(
        self,
        protocol: ModuleType,
        g0: Graph,
        g1: Graph,
        index: int,
        witness: Permutation | None,
        prover_factory: ProverFactory | None,
    ) -> RoundResult:
        round_rng = self.randomness.fork(index)
        prover_rng = round_rng.fork(_PROVER_LABEL)
        verifier_rng = round_rng.fork(_VERIFIER_LABEL)

        if prover_factory is None:
            prover = protocol.create_prover(g0, g1, witness, prover_rng, self.oracle)
        else:
            prover = prover_factory(g0, g1, prover_rng)
        verifier = protocol.create_verifier(g0, g1, verifier_rng)

        accepted, transcript = protocol.run_round(prover, verifier)
        logger.debug("%s round %d: %s", protocol.NAME, index, "accept" if accepted else "reject")
        return RoundResult(index=index, accepted=accepted, transcript=transcript)
