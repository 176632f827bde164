"""
Randomness handles for provers and verifiers.

Protocol roles never touch ambient global randomness: every role takes a
RandomSource. Production code uses SystemRandomSource (the OS CSPRNG via
pycryptodome). Tests use SeededRandomSource, a deterministic AES-128 PRF
keyed by a seed, to make runs reproducible.

Two uses per round:
- randbelow(n): Fisher-Yates steps when sampling a permutation
- randbit(): the verifier's coin b
"""

import hashlib
import struct
import threading
from typing import Protocol

from Crypto.Cipher import AES
from Crypto.Random.random import StrongRandom


class RandomSource(Protocol):
    """
    Source of uniform random integers.

    fork(label) returns a handle whose output is independent of every other
    fork, so concurrent rounds never share a stream.
    """

    def randbelow(self, n: int) -> int:
        """Uniform integer in [0, n). Requires n >= 1."""
        ...

    def randbit(self) -> int:
        """Uniform bit in {0, 1}."""
        ...

    def fork(self, label: int) -> "RandomSource":
        """Independent handle for the given label (e.g. a round index)."""
        ...


class SystemRandomSource:
    """Cryptographically secure randomness from the operating system."""

    def __init__(self):
        self._rng = StrongRandom()

    def randbelow(self, n: int) -> int:
        if n < 1:
            raise ValueError("n must be at least 1")
        return self._rng.randrange(n)

    def randbit(self) -> int:
        return self._rng.getrandbits(1)

    def fork(self, label: int) -> "SystemRandomSource":
        # Stateless: every draw already comes fresh from the OS.
        return self

    def __repr__(self) -> str:
        return "SystemRandomSource()"


class SeededRandomSource:
    """
    Deterministic randomness from AES-128 in counter mode.

    Block i of the stream is AES_K("stream" || i). Integers are drawn by
    rejection sampling on the top bits of one block, so randbelow is exactly
    uniform. Children from fork(label) are keyed by AES_K("fork" || label).

    Not for production proofs: anyone who knows the seed can predict every
    challenge and permutation.
    """

    PREFIX_STREAM = b"stream"
    PREFIX_FORK = b"fork"
    BLOCK_BITS = 128

    def __init__(self, seed: bytes | int):
        """
        Initialize from a seed.

        Args:
            seed: 16-byte AES key, or an int that is hashed to one.
        """
        if isinstance(seed, int):
            seed = hashlib.shake_256(str(seed).encode()).digest(16)
        if len(seed) != 16:
            raise ValueError("Seed must be 16 bytes")
        self.seed = seed
        self._cipher = AES.new(seed, AES.MODE_ECB)
        self._counter = 0
        self._lock = threading.Lock()

    def _block(self, prefix: bytes, index: int) -> bytes:
        data = (prefix + struct.pack("<Q", index)).ljust(16, b"\x00")
        return self._cipher.encrypt(data)

    def _next_block(self) -> int:
        with self._lock:
            index = self._counter
            self._counter += 1
        return int.from_bytes(self._block(self.PREFIX_STREAM, index), "little")

    def randbelow(self, n: int) -> int:
        if n < 1:
            raise ValueError("n must be at least 1")
        bits = (n - 1).bit_length()
        if bits > self.BLOCK_BITS:
            raise ValueError(f"n must be below 2^{self.BLOCK_BITS}")
        if bits == 0:
            return 0
        while True:
            value = self._next_block() >> (self.BLOCK_BITS - bits)
            if value < n:
                return value

    def randbit(self) -> int:
        return self._next_block() & 1

    def fork(self, label: int) -> "SeededRandomSource":
        return SeededRandomSource(self._block(self.PREFIX_FORK, label))

    def __repr__(self) -> str:
        return f"SeededRandomSource(seed={self.seed.hex()})"


def default_randomness() -> RandomSource:
    """Randomness handle used when a caller does not supply one."""
    return SystemRandomSource()
