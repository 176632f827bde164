"""
Error taxonomy for zkgraph.

Every error here is an input-validation failure raised at the call that
violates a precondition. None of them signal a cheating prover: a bad
proof is a rejection verdict, never an exception.
"""


class ZKGraphError(ValueError):
    """Base class for all zkgraph input errors."""


class OutOfRangeError(ZKGraphError):
    """Vertex index outside [0, n)."""


class DimensionMismatchError(ZKGraphError):
    """Permutation length does not match the graph's vertex count."""


class InvalidPermutationError(ZKGraphError):
    """Sequence of the right length that is not a bijection on [0, n)."""


class InvalidGraphError(ZKGraphError):
    """Graph input that is not a simple undirected graph."""


class InvalidSizeError(ZKGraphError):
    """Negative or otherwise invalid size."""


class InvalidRoundsError(ZKGraphError):
    """Non-positive round count."""


class MissingWitnessError(ZKGraphError):
    """Honest GI prover created without a valid isomorphism witness."""
