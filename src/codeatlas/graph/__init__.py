"""Relationship graph: import edges plus inferred layer-transition edges."""

from .builder import (
    LAYER_TRANSITIONS,
    build_relationship_graph,
    filter_relationships_by_type,
    get_dependencies,
    get_dependents,
    get_relationship_stats,
)
from .models import IMPORTS, USES, Relationship, RelationshipStats

__all__ = [
    "IMPORTS",
    "LAYER_TRANSITIONS",
    "USES",
    "Relationship",
    "RelationshipStats",
    "build_relationship_graph",
    "filter_relationships_by_type",
    "get_dependencies",
    "get_dependents",
    "get_relationship_stats",
]
