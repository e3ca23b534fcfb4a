"""Pytest configuration and shared fixtures for pathgraph tests.

This module provides:
- A deterministic numpy RNG fixture
- Small reference graphs used across test modules
"""

import os

import numpy as np
import pytest

from pathgraph import Graph


@pytest.fixture(scope="function")
def rng() -> np.random.Generator:
    """Provide a deterministic numpy RNG for tests.

    Uses seed from TEST_RNG_SEED environment variable (default: 0).
    This ensures tests are reproducible while allowing override for debugging.

    Returns:
        A seeded numpy.random.Generator instance.
    """
    seed = int(os.environ.get("TEST_RNG_SEED", "0"))
    return np.random.default_rng(seed)


@pytest.fixture
def triangle() -> Graph:
    """Triangle where the two-hop route 0-1-2 beats the direct edge 0-2."""
    G = Graph(3)
    G.add_edge(0, 1, 1.0)
    G.add_edge(1, 2, 2.0)
    G.add_edge(0, 2, 5.0)
    return G


@pytest.fixture
def two_components() -> Graph:
    """Graph with components {0, 1, 2} and {3, 4}."""
    G = Graph(5)
    G.add_edge(0, 1, 1.0)
    G.add_edge(1, 2, 1.0)
    G.add_edge(3, 4, 2.0)
    return G
