"""Random graph generation with a given edge density and distance range."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

import numpy as np

from .core import Graph
from .logging import get_logger
from .utils import rng_default

logger = get_logger(__name__)


@dataclass(frozen=True)
class RandomGraphConfig:
    """
    Parameters of a random graph.

    Each unordered pair of distinct vertices becomes an edge with probability
    ``density``; edge weights are drawn uniformly from
    ``[distance_min, distance_max]``.
    """

    size: int
    density: float
    distance_min: float
    distance_max: float

    def __post_init__(self) -> None:
        """Validate RandomGraphConfig invariants."""
        if self.size < 0:
            raise ValueError(f"size must be non-negative, got {self.size}.")

        if not (0.0 <= self.density <= 1.0):
            raise ValueError(f"density must lie in [0, 1], got {self.density}.")

        if not (math.isfinite(self.distance_min) and math.isfinite(self.distance_max)):
            raise ValueError(
                f"Distances must be finite, got [{self.distance_min}, {self.distance_max}]."
            )

        if self.distance_min < 0:
            raise ValueError(f"distance_min must be non-negative, got {self.distance_min}.")

        if self.distance_min > self.distance_max:
            raise ValueError(
                f"distance_min ({self.distance_min}) must not exceed "
                f"distance_max ({self.distance_max})."
            )

    @property
    def expected_edges(self) -> float:
        """Expected edge count, self-loops included."""
        return self.density * self.size * (self.size - 1) / 2 + self.size


def generate_random_graph(
    config: RandomGraphConfig, rng: Optional[np.random.Generator] = None
) -> Graph:
    """
    Build a random graph from ``config``.

    Every vertex gets a self-loop of weight 0.0 (counted as an edge). Then for
    each pair i < j a uniform draw below ``density`` adds the edge (i, j)
    with a uniform random weight.

    Args:
        config: Validated generation parameters.
        rng: numpy Generator; a fresh unseeded one is used if None.

    Returns:
        The generated Graph.
    """
    if rng is None:
        rng = rng_default()

    n = config.size
    G = Graph(n)
    for i in range(n):
        G.add_edge(i, i, 0.0)
        for j in range(i + 1, n):
            if rng.random() < config.density:
                G.add_edge(i, j, rng.uniform(config.distance_min, config.distance_max))

    logger.debug(
        "Generated %r (expected %.1f edges)", G, config.expected_edges
    )
    return G


def random_graph(
    size: int,
    density: float,
    distance_min: float,
    distance_max: float,
    seed: Optional[int] = None,
    rng: Optional[np.random.Generator] = None,
) -> Graph:
    """
    Build a random graph.

    Args:
        size: Number of vertices.
        density: Probability of an edge between two distinct vertices.
        distance_min: Lower bound of edge weights.
        distance_max: Upper bound of edge weights.
        seed: Seed for a new RNG; ignored when ``rng`` is given.
        rng: numpy Generator to draw from.

    Raises:
        ValueError: If the parameters are invalid (see RandomGraphConfig).

    Example:
        >>> G = random_graph(5, 1.0, 1.0, 2.0, seed=0)
        >>> G.num_edges()
        15
    """
    config = RandomGraphConfig(size, density, distance_min, distance_max)
    if rng is None:
        rng = rng_default(seed)
    return generate_random_graph(config, rng)
