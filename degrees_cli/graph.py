"""Directed character graph with integer node handles."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Iterable, Iterator, List, Optional

from .ingest import read_edges
from .models import Edge, Node

logger = logging.getLogger(__name__)


class CharacterGraph:
    """Directed, unweighted graph keyed by node name.

    Handles are assigned in first-seen order starting at 0. Names map to
    handles in a dict and out-neighbours are kept per handle in a list, so
    name lookups are O(1) and adjacency queries are O(out-degree).
    """

    def __init__(self) -> None:
        self._ids: Dict[str, int] = {}
        self._names: List[str] = []
        self._adjacency: List[List[int]] = []
        self._edge_count = 0

    def __len__(self) -> int:
        return len(self._names)

    def __contains__(self, name: object) -> bool:
        return name in self._ids

    @property
    def node_count(self) -> int:
        return len(self._names)

    @property
    def edge_count(self) -> int:
        return self._edge_count

    def add_node(self, name: str) -> int:
        node_id = self._ids.get(name)
        if node_id is None:
            node_id = len(self._names)
            self._ids[name] = node_id
            self._names.append(name)
            self._adjacency.append([])
        return node_id

    def add_edge(self, source: int, target: int) -> None:
        self._adjacency[source].append(target)
        self._edge_count += 1

    def node_id(self, name: str) -> Optional[int]:
        return self._ids.get(name)

    def name(self, node_id: int) -> str:
        return self._names[node_id]

    def neighbors(self, node_id: int) -> List[int]:
        return self._adjacency[node_id]

    def nodes(self) -> Iterator[Node]:
        for node_id, name in enumerate(self._names):
            yield Node(node_id, name)

    def names(self) -> List[str]:
        return list(self._names)

    def edges(self) -> Iterator[Edge]:
        for source, targets in enumerate(self._adjacency):
            for target in targets:
                yield Edge(self._names[source], self._names[target])

    def adjacency(self) -> Dict[str, List[str]]:
        """Name-keyed view of the adjacency lists."""
        return {
            self._names[source]: [self._names[target] for target in targets]
            for source, targets in enumerate(self._adjacency)
        }


def build_graph(edges: Iterable[Edge]) -> CharacterGraph:
    """Build a graph with one directed edge per input edge.

    The input is not deduplicated here; pass it through
    :func:`~degrees_cli.ingest.remove_duplicates` first if needed.
    """
    graph = CharacterGraph()
    for source, target in edges:
        source_id = graph.add_node(source)
        target_id = graph.add_node(target)
        graph.add_edge(source_id, target_id)
    logger.info("Built graph with %d nodes and %d edges", graph.node_count, graph.edge_count)
    return graph


def load_graph(file_path: Path) -> CharacterGraph:
    """Load an edge file straight into a graph (no deduplication)."""
    return build_graph(read_edges(file_path).edges)
