"""
zkgraph: interactive proofs over labeled graphs.

This package provides two classical two-message interactive proofs:
- gi: Graph Isomorphism, public coin, zero knowledge
- gni: Graph Nonisomorphism, private coin

Modules:
- graph: Immutable graphs and permutation helpers
- randomness: Randomness handles (OS CSPRNG, seeded AES PRF)
- sampler: Uniform permutation sampling
- oracle: Isomorphism search and witness checking
- protocols: Transcripts and the proof-system module interface
- params: Run parameters
- runner: k-round repetition with AND composition

Example usage:
    from zkgraph import Graph, RoundRunner, gi

    g0 = Graph(4, [(0, 1), (1, 2), (2, 0)])
    g1 = g0.apply_permutation((1, 2, 0, 3))
    RoundRunner().run(gi, g0, g1, rounds=10, witness=(1, 2, 0, 3))
"""

from . import gi
from . import gni
from .errors import (
    ZKGraphError,
    OutOfRangeError,
    DimensionMismatchError,
    InvalidPermutationError,
    InvalidGraphError,
    InvalidSizeError,
    InvalidRoundsError,
    MissingWitnessError,
)
from .graph import (
    Graph,
    Permutation,
    check_permutation,
    compose_permutations,
    identity_permutation,
    invert_permutation,
    is_permutation,
)
from .oracle import IsomorphismOracle, verify_isomorphism
from .params import Params, create_params
from .protocols import ProofModule, ProofTranscript, RoundResult
from .randomness import RandomSource, SeededRandomSource, SystemRandomSource, default_randomness
from .runner import RoundRunner
from .sampler import PermutationSampler

__version__ = "0.1.0"
__all__ = [
    "gi",
    "gni",
    "ZKGraphError",
    "OutOfRangeError",
    "DimensionMismatchError",
    "InvalidPermutationError",
    "InvalidGraphError",
    "InvalidSizeError",
    "InvalidRoundsError",
    "MissingWitnessError",
    "Graph",
    "Permutation",
    "check_permutation",
    "compose_permutations",
    "identity_permutation",
    "invert_permutation",
    "is_permutation",
    "IsomorphismOracle",
    "verify_isomorphism",
    "Params",
    "create_params",
    "ProofModule",
    "ProofTranscript",
    "RoundResult",
    "RandomSource",
    "SeededRandomSource",
    "SystemRandomSource",
    "default_randomness",
    "RoundRunner",
    "PermutationSampler",
]
