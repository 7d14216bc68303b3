"""Core data models shared by ingestion, graph building, and reporting."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, NamedTuple


class Edge(NamedTuple):
    source: str
    target: str


@dataclass(frozen=True)
class Node:
    node_id: int
    name: str


@dataclass
class IngestResult:
    edges: List[Edge] = field(default_factory=list)
    skipped: int = 0


@dataclass
class SeparationReport:
    start: str
    distances: Dict[str, int]
    elapsed_us: int
    node_count: int
    edge_count: int

    @property
    def reachable(self) -> int:
        return len(self.distances)

    def ranked(self) -> List[tuple]:
        """Distances ordered by hop count, then by name."""
        return sorted(self.distances.items(), key=lambda item: (item[1], item[0]))
