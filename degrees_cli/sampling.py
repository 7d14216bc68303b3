"""Start character selection with an explicit random source."""

from __future__ import annotations

import random
from typing import List, Sequence, TypeVar

from .graph import CharacterGraph

T = TypeVar("T")


def random_sample(items: Sequence[T], sample_size: int, rng: random.Random) -> List[T]:
    """Sample without replacement; ``sample_size`` is clamped to ``len(items)``."""
    return rng.sample(list(items), min(max(sample_size, 0), len(items)))


def choose_start(graph: CharacterGraph, sample_size: int, rng: random.Random) -> str:
    """Pick a start character from a random sample of the graph's nodes."""
    if not len(graph):
        raise ValueError("Cannot choose a start character from an empty graph.")
    candidates = random_sample(graph.names(), max(sample_size, 1), rng)
    return rng.choice(candidates)
