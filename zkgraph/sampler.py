"""
Uniform permutation sampling.

Each protocol round draws a fresh permutation here. Permutations are never
reused across rounds: a repeated relabeling would let a verifier relate two
commitments and recover the witness.
"""

from .errors import InvalidSizeError
from .graph import Permutation
from .randomness import RandomSource, default_randomness


class PermutationSampler:
    """Draws permutations of [0, n) uniformly from all n! possibilities."""

    def __init__(self, randomness: RandomSource | None = None):
        """
        Initialize sampler.

        Args:
            randomness: Randomness handle. Defaults to the OS CSPRNG.
        """
        self.randomness = randomness if randomness is not None else default_randomness()

    def sample(self, n: int) -> Permutation:
        """
        Sample a uniformly random permutation (Fisher-Yates shuffle).

        Args:
            n: Domain size; n == 0 gives the empty permutation

        Returns:
            Tuple p of length n, a bijection on [0, n)

        Raises:
            InvalidSizeError: n is negative or not an integer
        """
        if isinstance(n, bool) or not isinstance(n, int) or n < 0:
            raise InvalidSizeError(f"Permutation size must be a non-negative integer, got {n!r}")

        p = list(range(n))
        for i in range(n - 1, 0, -1):
            j = self.randomness.randbelow(i + 1)
            p[i], p[j] = p[j], p[i]
        return tuple(p)

    def bit(self, p_one: float = 0.5) -> int:
        """
        Sample a bit from the same handle, 1 with probability p_one.

        Raises:
            ValueError: p_one is outside [0, 1]
        """
        if not 0.0 <= p_one <= 1.0:
            raise ValueError("p_one must be in [0, 1]")
        if p_one == 0.5:
            return self.randomness.randbit()
        # Threshold on 53 bits, the precision of p_one
        draw = self.randomness.randbelow(1 << 53)
        return int(draw < p_one * (1 << 53))
