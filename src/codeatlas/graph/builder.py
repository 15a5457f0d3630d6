"""Relationship graph construction from resolved imports.

Every resolved import becomes an ``imports`` edge. When the importer's type
and the target's type form a known layer transition (route -> controller,
page -> component, ...), a ``uses`` edge is added alongside it.
"""

from __future__ import annotations

from collections.abc import Iterable

from ..logging_config import get_logger
from ..scanning.models import ScannedFile
from .models import IMPORTS, USES, Relationship, RelationshipStats

logger = get_logger(__name__)

# Source type -> target types that make a legitimate architectural dependency.
# "hook" never comes out of classification; it is kept for parity with
# projects that label hooks explicitly.
LAYER_TRANSITIONS: dict[str, frozenset[str]] = {
    "route": frozenset({"controller", "service", "middleware"}),
    "controller": frozenset({"service", "model", "utility"}),
    "service": frozenset({"model", "utility"}),
    "middleware": frozenset({"service", "utility"}),
    "page": frozenset({"component", "hook", "service", "utility"}),
    "component": frozenset({"component", "hook", "utility"}),
}


def build_relationship_graph(files: Iterable[ScannedFile]) -> list[Relationship]:
    """Build the edge list for a scanned file set.

    Edges are emitted per file in input order: its ``imports`` edges, then
    its ``uses`` edges. Neither kind repeats for the same pair.
    """
    files = list(files)
    type_by_path = {f.path: f.type for f in files}

    relationships: list[Relationship] = []
    seen: set[Relationship] = set()

    def add(edge: Relationship) -> None:
        if edge not in seen:
            seen.add(edge)
            relationships.append(edge)

    for f in files:
        targets = f.analysis.resolved_imports
        for target in targets:
            add(Relationship(f.path, target, IMPORTS))

        allowed = LAYER_TRANSITIONS.get(f.type)
        if not allowed:
            continue
        for target in targets:
            if type_by_path.get(target) in allowed:
                add(Relationship(f.path, target, USES))

    logger.debug(f"Built {len(relationships)} relationships from {len(files)} files")
    return relationships


def filter_relationships_by_type(relationships: Iterable[Relationship], rel_type: str) -> list[Relationship]:
    return [r for r in relationships if r.type == rel_type]


def get_dependencies(relationships: Iterable[Relationship], file_path: str) -> list[tuple[str, str]]:
    """Outgoing edges of ``file_path`` as ``(target, edge_type)`` pairs."""
    file_path = file_path.replace("\\", "/")
    return [(r.to_path, r.type) for r in relationships if r.from_path == file_path]


def get_dependents(relationships: Iterable[Relationship], file_path: str) -> list[tuple[str, str]]:
    """Incoming edges of ``file_path`` as ``(source, edge_type)`` pairs."""
    file_path = file_path.replace("\\", "/")
    return [(r.from_path, r.type) for r in relationships if r.to_path == file_path]


def get_relationship_stats(relationships: Iterable[Relationship]) -> RelationshipStats:
    relationships = list(relationships)
    files_in_graph: set[str] = set()
    for r in relationships:
        files_in_graph.add(r.from_path)
        files_in_graph.add(r.to_path)

    return RelationshipStats(
        total_relationships=len(relationships),
        import_relationships=sum(1 for r in relationships if r.type == IMPORTS),
        uses_relationships=sum(1 for r in relationships if r.type == USES),
        files_in_graph=len(files_in_graph),
    )
