"""Scan orchestrator: discovery, per-file analysis, then project-wide passes.

The first pass reads, classifies and analyzes every file independently. Every
later stage (reverse dependencies, frameworks, relationships, features) needs
the complete first-pass result in memory, so nothing is streamed past it.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from ..config import DEFAULT_CONFIG, ScanConfig
from ..exceptions import InvalidPathError
from ..features import Feature, compute_coverage, detect_features
from ..file_ops import read_file_content
from ..frameworks import detect_frameworks, flatten_frameworks, get_project_type
from ..graph import Relationship, RelationshipStats, build_relationship_graph, get_relationship_stats
from ..logging_config import get_logger
from ..scanning import ScannedFile, analyze_code, get_all_files
from ..semantics import classify_behavior, classify_by_content, classify_by_path

logger = get_logger(__name__)


@dataclass
class ScanMetadata:
    """Project-level facts derived from a scan.

    Attributes:
        total_files: Number of discovered files
        frameworks: Category -> detected framework names
        project_type: fullstack, backend, frontend or unknown
        frameworks_list: All detected frameworks, flattened
        relationship_stats: Edge and node counts of the relationship graph
        coverage: Fraction of files that belong to some feature
    """

    total_files: int = 0
    frameworks: dict[str, list[str]] = field(default_factory=dict)
    project_type: str = "unknown"
    frameworks_list: list[str] = field(default_factory=list)
    relationship_stats: RelationshipStats = field(default_factory=RelationshipStats)
    coverage: float = 0.0


@dataclass
class ScanResult:
    files: list[ScannedFile]
    metadata: ScanMetadata
    relationships: list[Relationship]
    features: dict[str, Feature]

    def get_file(self, path: str) -> Optional[ScannedFile]:
        path = path.replace("\\", "/")
        for f in self.files:
            if f.path == path:
                return f
        return None


def validate_root_directory(path: Path) -> Path:
    """Resolve ``path`` and check it is a readable directory.

    Raises:
        InvalidPathError: If the path is missing, not a directory or unreadable
    """
    try:
        resolved = Path(path).resolve()
    except (OSError, RuntimeError) as e:
        raise InvalidPathError(path, f"Cannot resolve path: {e}")

    if not resolved.exists():
        raise InvalidPathError(resolved, "Directory does not exist")
    if not resolved.is_dir():
        raise InvalidPathError(resolved, "Path is not a directory")
    if not os.access(resolved, os.R_OK):
        raise InvalidPathError(resolved, "Directory is not readable")
    return resolved


class ScanOrchestrator:
    """Runs the full scan pipeline over one project root."""

    def __init__(self, root_dir: Path | str, config: Optional[ScanConfig] = None):
        self.root_dir = validate_root_directory(Path(root_dir))
        self.config = config or DEFAULT_CONFIG
        logger.debug(
            f"Scan config: max_file_size={self.config.max_file_size_bytes}, "
            f"threshold={self.config.content_confidence_threshold}, "
            f"feature_depth={self.config.feature_max_depth}"
        )

    def run(self) -> ScanResult:
        logger.info(f"Scanning project at: {self.root_dir}")

        paths = get_all_files(
            self.root_dir,
            exclude_patterns=self.config.exclude_patterns,
            follow_symlinks=self.config.follow_symlinks,
        )
        path_set = frozenset(paths)

        files = [self.scan_file(path, path_set) for path in paths]
        self._link_imported_by(files)

        frameworks = detect_frameworks(files)
        project_type = get_project_type(frameworks)
        logger.info(f"Project type: {project_type}")

        relationships = build_relationship_graph(files)
        relationship_stats = get_relationship_stats(relationships)
        logger.info(
            f"Relationships: {relationship_stats.import_relationships} imports, "
            f"{relationship_stats.uses_relationships} uses"
        )

        features = detect_features(files, relationships, max_depth=self.config.feature_max_depth)
        coverage = compute_coverage(features, len(paths))
        logger.info(f"Feature coverage: {coverage:.1%} of {len(paths)} files")

        metadata = ScanMetadata(
            total_files=len(paths),
            frameworks=frameworks,
            project_type=project_type,
            frameworks_list=flatten_frameworks(frameworks),
            relationship_stats=relationship_stats,
            coverage=coverage,
        )
        return ScanResult(files=files, metadata=metadata, relationships=relationships, features=features)

    def scan_file(self, relative_path: str, path_set: frozenset[str]) -> ScannedFile:
        """Read, classify and analyze one file (first pass)."""
        content = read_file_content(
            self.root_dir / relative_path, max_bytes=self.config.max_file_size_bytes
        )

        by_path = classify_by_path(relative_path)
        file_type, role = by_path.type, by_path.role

        by_content = classify_by_content(content)
        if by_content is not None and by_content.confidence >= self.config.content_confidence_threshold:
            logger.debug(f"{relative_path}: content says {by_content.type} over path {by_path.type}")
            file_type, role = by_content.type, by_content.role

        analysis = analyze_code(content, relative_path, path_set)

        return ScannedFile(
            path=relative_path,
            content=content,
            type=file_type,
            role=role,
            category=by_path.category,
            behavior=classify_behavior(file_type, content, analysis),
            analysis=analysis,
        )

    @staticmethod
    def _link_imported_by(files: list[ScannedFile]) -> None:
        """Second pass: fill ``imported_by`` as the reverse of ``resolved_imports``."""
        imported_by: dict[str, list[str]] = {}
        for f in files:
            for target in f.analysis.resolved_imports:
                importers = imported_by.setdefault(target, [])
                if f.path not in importers:
                    importers.append(f.path)

        for f in files:
            f.analysis.imported_by = imported_by.get(f.path, [])


def scan_project(root_dir: Path | str, config: Optional[ScanConfig] = None) -> ScanResult:
    """Scan a project directory with the given (or default) configuration."""
    return ScanOrchestrator(root_dir, config).run()
