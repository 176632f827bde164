"""
Parameters for running graph proofs.

Key parameters:
- rounds: Independent repetitions; soundness error is 2^{-rounds}
- max_vertices: Largest graph the isomorphism search will accept
- workers: Threads used to run rounds (1 = sequential)

Tradeoffs:
- Each extra round halves the soundness error and costs one more exchange
- The GNI prover's search is exponential, so max_vertices stays small
"""

from dataclasses import dataclass

from .errors import InvalidRoundsError, InvalidSizeError


@dataclass
class Params:
    """Parameters for RoundRunner."""

    rounds: int = 10  # Soundness error 2^{-10}
    max_vertices: int | None = 12  # None disables the search bound
    workers: int = 1  # Threads for parallel rounds

    def __post_init__(self):
        if isinstance(self.rounds, bool) or not isinstance(self.rounds, int) or self.rounds < 1:
            raise InvalidRoundsError(f"rounds must be at least 1, got {self.rounds!r}")
        if self.max_vertices is not None and self.max_vertices < 1:
            raise InvalidSizeError("max_vertices must be at least 1")
        if self.workers < 1:
            raise ValueError("workers must be at least 1")

    @property
    def soundness_error(self) -> float:
        """Upper bound on a cheating prover's success over all rounds."""
        return 2.0 ** -self.rounds

    def __repr__(self) -> str:
        return (
            f"Params(rounds={self.rounds}, max_vertices={self.max_vertices}, "
            f"workers={self.workers}, soundness_error={self.soundness_error:.3g})"
        )


def create_params(**kwargs) -> Params:
    """
    Create run parameters.

    Args:
        **kwargs: rounds, max_vertices, workers

    Returns:
        Configured Params
    """
    return Params(**kwargs)
