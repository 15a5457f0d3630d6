"""Relationship graph data models."""

from __future__ import annotations

from dataclasses import dataclass

IMPORTS = "imports"
USES = "uses"


@dataclass(frozen=True)
class Relationship:
    """A directed edge between two project files.

    Attributes:
        from_path: Importing file
        to_path: Imported file (always a member of the scanned path set)
        type: "imports" for every resolved import, "uses" when the pair
            also matches a layer transition
    """

    from_path: str
    to_path: str
    type: str


@dataclass
class RelationshipStats:
    total_relationships: int = 0
    import_relationships: int = 0
    uses_relationships: int = 0
    files_in_graph: int = 0
