"""End-to-end run: prepare a graph and time one degrees-of-separation query."""

from __future__ import annotations

import logging
import time
from pathlib import Path
from typing import Optional

from .graph import CharacterGraph, build_graph, load_graph
from .ingest import clean_file, read_edges, remove_duplicates
from .models import SeparationReport
from .paths import degrees_of_separation

logger = logging.getLogger(__name__)


def prepare_graph(input_path: Path, cleaned_path: Optional[Path] = None) -> CharacterGraph:
    """Deduplicate ``input_path`` and build its graph.

    When ``cleaned_path`` is given the deduplicated edges are written there
    first and the graph is loaded back from that file.
    """
    if cleaned_path is not None:
        clean_file(input_path, cleaned_path)
        return load_graph(cleaned_path)
    return build_graph(remove_duplicates(read_edges(input_path).edges))


def run_separation(
    graph: CharacterGraph, start: str, include_start: bool = True
) -> SeparationReport:
    began = time.perf_counter()
    distances = degrees_of_separation(graph, start, include_start=include_start)
    elapsed_us = int((time.perf_counter() - began) * 1_000_000)
    logger.debug("BFS from '%s' took %d us", start, elapsed_us)
    return SeparationReport(
        start=start,
        distances=distances,
        elapsed_us=elapsed_us,
        node_count=graph.node_count,
        edge_count=graph.edge_count,
    )
