"""Breadth-first shortest paths over a :class:`~degrees_cli.graph.CharacterGraph`."""

from __future__ import annotations

import logging
from collections import deque
from typing import Dict, List, Optional

from .graph import CharacterGraph

logger = logging.getLogger(__name__)


class NodeNotFoundError(LookupError):
    """Raised when a requested character is not a node of the graph."""

    def __init__(self, name: str):
        super().__init__(f"Character '{name}' not found in graph.")
        self.name = name


def _resolve(graph: CharacterGraph, name: str) -> int:
    node_id = graph.node_id(name)
    if node_id is None:
        raise NodeNotFoundError(name)
    return node_id


def degrees_of_separation(
    graph: CharacterGraph, start: str, include_start: bool = True
) -> Dict[str, int]:
    """Minimum hop count from ``start`` to every reachable character.

    Args:
        graph: Graph to traverse. It is not modified.
        start: Name of the source character.
        include_start: Keep ``start`` itself in the result at distance 0.

    Returns:
        Mapping of character name to hop count. Unreachable characters
        are absent.

    Raises:
        NodeNotFoundError: ``start`` is not in the graph.
    """
    start_id = _resolve(graph, start)

    distances: Dict[str, int] = {}
    seen = {start_id}
    queue = deque([(start_id, 0)])

    while queue:
        current, depth = queue.popleft()
        distances[graph.name(current)] = depth
        for nxt in graph.neighbors(current):
            if nxt not in seen:
                seen.add(nxt)
                queue.append((nxt, depth + 1))

    if not include_start:
        del distances[start]

    logger.info("Reached %d of %d characters from '%s'", len(seen), graph.node_count, start)
    return distances


def shortest_path(graph: CharacterGraph, start: str, target: str) -> Optional[List[str]]:
    """Names along one shortest directed path, or ``None`` if unreachable."""
    start_id = _resolve(graph, start)
    target_id = _resolve(graph, target)

    parents: Dict[int, int] = {start_id: start_id}
    queue = deque([start_id])
    while queue and target_id not in parents:
        current = queue.popleft()
        for nxt in graph.neighbors(current):
            if nxt not in parents:
                parents[nxt] = current
                queue.append(nxt)

    if target_id not in parents:
        return None

    path = [target_id]
    while path[-1] != start_id:
        path.append(parents[path[-1]])
    return [graph.name(node_id) for node_id in reversed(path)]
