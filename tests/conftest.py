import os
import random

import pytest

from zkgraph import Graph, SeededRandomSource


@pytest.fixture(scope="session")
def rng_seed() -> int:
    """
    session-level random seed
    - if TEST_SEED env var is set, use that to reproduce a run
    - else, generate a random seed each pytest run
    - print the seed so runs can be reproduced
    """
    env_seed = os.getenv("TEST_SEED")
    if env_seed is not None:
        seed = int(env_seed)
        print("")
        print(f"Using TEST_SEED from environment: {seed}")
    else:
        seed = random.SystemRandom().randint(0, 2**32 - 1)
        print("")
        print(f"Random seed for this test run: {seed}")

    return seed


@pytest.fixture
def randomness(rng_seed) -> SeededRandomSource:
    return SeededRandomSource(rng_seed)


@pytest.fixture
def path4() -> Graph:
    """Path 0-1-2-3."""
    return Graph(4, [(0, 1), (1, 2), (2, 3)])


@pytest.fixture
def cycle4() -> Graph:
    """Cycle 0-1-2-3-0."""
    return Graph(4, [(0, 1), (1, 2), (2, 3), (3, 0)])


@pytest.fixture
def triangle_plus_isolated() -> Graph:
    """Triangle on 0, 1, 2 with vertex 3 isolated."""
    return Graph(4, [(0, 1), (1, 2), (2, 0)])
