#!/usr/bin/env python3
"""
Demo of the GI and GNI interactive proofs.

Usage:
    python3 demo.py --gni         # GNI: honest prover, then a guessing prover
    python3 demo.py --gi          # GI: honest prover, then a cheating prover
    python3 demo.py --all         # Both
    python3 demo.py --benchmark   # Empirical per-round soundness of cheaters
"""

import argparse
import logging
import time

from zkgraph import Graph, Params, RoundRunner, SeededRandomSource, gi, gni
from zkgraph.randomness import default_randomness


# =============================================================================
# Instances
# =============================================================================

# Two 4-vertex graphs with 4 and 5 edges: not isomorphic.
GNI_G0 = Graph(4, [(0, 1), (1, 2), (1, 3), (0, 3)])
GNI_G1 = Graph(4, [(0, 2), (2, 3), (1, 3), (2, 1), (3, 0)])

# GI_G1 is GI_G0 relabeled by GI_WITNESS.
GI_G0 = Graph(4, [(0, 1), (1, 2), (1, 3), (0, 3)])
GI_G1 = Graph(4, [(2, 1), (1, 0), (1, 3), (2, 3)])
GI_WITNESS = (2, 1, 0, 3)


# =============================================================================
# Formatting Utilities
# =============================================================================


def format_time(seconds: float) -> str:
    """Format time with appropriate unit."""
    if seconds >= 1:
        return f"{seconds:.2f}s"
    if seconds >= 0.001:
        return f"{seconds*1000:.2f}ms"
    return f"{seconds*1_000_000:.1f}us"


def format_message(message) -> str:
    """One-line rendering of a protocol message."""
    if hasattr(message, "graph"):
        return f"graph edges={list(message.graph.edges)}"
    if hasattr(message, "permutation"):
        return f"permutation={list(message.permutation)}"
    return f"bit={message.bit}"


def print_rounds(results) -> None:
    for r in results:
        t = r.transcript
        coin = "" if t.coin is None else f"  coin={t.coin}"
        print(f"  Round {r.index + 1:>3}: {'accept' if r.accepted else 'reject':<6}{coin}")
        print(f"      -> {format_message(t.first)}")
        print(f"      <- {format_message(t.response)}")


def run_proof(title: str, runner: RoundRunner, protocol, g0, g1, rounds: int, **kwargs) -> bool:
    print(f"\n{title:─^70}")
    start = time.perf_counter()
    results = runner.run_rounds(protocol, g0, g1, rounds, **kwargs)
    elapsed = time.perf_counter() - start
    print_rounds(results)
    verdict = all(r.accepted for r in results)
    print(f"  Verdict: {'ACCEPT' if verdict else 'REJECT'}  ({format_time(elapsed)})")
    return verdict


# =============================================================================
# Demos
# =============================================================================


def run_gni_demo(runner: RoundRunner, rounds: int):
    print("=" * 70)
    print("Graph Nonisomorphism (private coin)")
    print("=" * 70)
    run_proof("Honest prover, G0 ≇ G1", runner, gni, GNI_G0, GNI_G1, rounds)
    run_proof(
        "Guessing prover, G0 ≅ G1",
        runner,
        gni,
        GI_G0,
        GI_G1,
        rounds,
        prover_factory=lambda g0, g1, rng: gni.GuessingProver(rng),
    )


def run_gi_demo(runner: RoundRunner, rounds: int):
    print("=" * 70)
    print("Graph Isomorphism (public coin)")
    print("=" * 70)
    run_proof("Honest prover, G0 ≅ G1", runner, gi, GI_G0, GI_G1, rounds, witness=GI_WITNESS)
    run_proof(
        "Cheating prover, G0 ≇ G1",
        runner,
        gi,
        GNI_G0,
        GNI_G1,
        rounds,
        prover_factory=gi.CheatingProver,
    )


def run_benchmark(runner: RoundRunner, trials: int):
    print("=" * 70)
    print(f"Per-round acceptance of dishonest provers ({trials} rounds each)")
    print("=" * 70)
    start = time.perf_counter()
    gi_rate = runner.acceptance_rate(
        gi, GNI_G0, GNI_G1, trials, prover_factory=gi.CheatingProver
    )
    gni_rate = runner.acceptance_rate(
        gni, GI_G0, GI_G1, trials,
        prover_factory=lambda g0, g1, rng: gni.GuessingProver(rng),
    )
    honest_rate = runner.acceptance_rate(gni, GNI_G0, GNI_G1, trials)
    elapsed = time.perf_counter() - start
    print(f"  GI cheating prover:   {gi_rate:>8.3f}  (bound 0.5)")
    print(f"  GNI guessing prover:  {gni_rate:>8.3f}  (bound 0.5)")
    print(f"  GNI honest prover:    {honest_rate:>8.3f}  (expected 1.0)")
    print(f"  Time:                 {format_time(elapsed):>8}")


# =============================================================================
# Main
# =============================================================================

DEFAULT_ROUNDS = 10
DEFAULT_TRIALS = 2000


def main():
    parser = argparse.ArgumentParser(
        description="GI & GNI interactive proof demo",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python3 demo.py --gni                 # GNI demo
  python3 demo.py --gi --rounds 20      # GI demo with 20 rounds
  python3 demo.py --all --seed 7        # Reproducible run
  python3 demo.py --benchmark -v        # Soundness measurement with logging
        """,
    )
    parser.add_argument("--gi", action="store_true", help="Run GI demo")
    parser.add_argument("--gni", action="store_true", help="Run GNI demo")
    parser.add_argument("--all", action="store_true", help="Run GI and GNI demos")
    parser.add_argument("--benchmark", action="store_true", help="Measure dishonest provers' acceptance rate")
    parser.add_argument("--rounds", type=int, default=DEFAULT_ROUNDS, help=f"Rounds per proof (default: {DEFAULT_ROUNDS})")
    parser.add_argument("--trials", type=int, default=DEFAULT_TRIALS, help=f"Rounds per benchmark (default: {DEFAULT_TRIALS})")
    parser.add_argument("--workers", type=int, default=1, help="Threads for running rounds (default: 1)")
    parser.add_argument("--seed", type=int, default=None, help="Seed for reproducible (insecure) randomness")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    params = Params(rounds=args.rounds, workers=args.workers)
    randomness = SeededRandomSource(args.seed) if args.seed is not None else default_randomness()
    runner = RoundRunner(params, randomness)
    print(f"Parameters: {params}")

    if args.benchmark:
        run_benchmark(runner, args.trials)
    elif args.all:
        run_gni_demo(runner, args.rounds)
        run_gi_demo(runner, args.rounds)
    elif args.gni:
        run_gni_demo(runner, args.rounds)
    elif args.gi:
        run_gi_demo(runner, args.rounds)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
