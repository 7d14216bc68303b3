"""Edge ingestion: parse relationship records, deduplicate, read and write edge files.

Each record is one line holding two comma-separated names. Fields are
trimmed of surrounding whitespace; extra fields are ignored. Lines with
fewer than two fields are skipped without raising, and the number of
skipped lines is reported on :class:`~degrees_cli.models.IngestResult`.
"""

from __future__ import annotations

import io
import logging
from pathlib import Path
from typing import Dict, Iterable, List, Optional

from .models import Edge, IngestResult

logger = logging.getLogger(__name__)


def parse_line(line: str) -> Optional[Edge]:
    """Parse a single record, returning ``None`` for a malformed line."""
    fields = [part.strip() for part in line.split(",")]
    if len(fields) < 2:
        return None
    return Edge(fields[0], fields[1])


def parse_lines(lines: Iterable[str]) -> IngestResult:
    result = IngestResult()
    for lineno, line in enumerate(lines, 1):
        edge = parse_line(line.rstrip("\r\n"))
        if edge is None:
            result.skipped += 1
            logger.debug("Skipping malformed line %d: %r", lineno, line)
            continue
        result.edges.append(edge)
    return result


def parse_text(text: str) -> IngestResult:
    """Parse a string, splitting lines the same way a text file read does."""
    return parse_lines(io.StringIO(text, newline=None))


def remove_duplicates(edges: Iterable[Edge]) -> List[Edge]:
    """Drop exact duplicate (source, target) pairs.

    Callers must not depend on the order of the returned edges.
    """
    unique: Dict[Edge, None] = {}
    for source, target in edges:
        unique.setdefault(Edge(source, target), None)
    return list(unique)


def read_edges(input_path: Path) -> IngestResult:
    with open(input_path, "r", encoding="utf-8-sig") as f:
        result = parse_lines(f)
    logger.info(
        "Read %d edges from %s (%d malformed lines skipped)",
        len(result.edges),
        input_path,
        result.skipped,
    )
    return result


def write_edges(output_path: Path, edges: Iterable[Edge]) -> int:
    count = 0
    with open(output_path, "w", encoding="utf-8") as f:
        for source, target in edges:
            f.write(f"{source},{target}\n")
            count += 1
    logger.info("Wrote %d edges to %s", count, output_path)
    return count


def clean_file(input_path: Path, output_path: Path) -> int:
    """Read an edge file, remove duplicates, and write the cleaned list.

    Returns:
        Number of edges written.
    """
    result = read_edges(input_path)
    return write_edges(output_path, remove_duplicates(result.edges))
