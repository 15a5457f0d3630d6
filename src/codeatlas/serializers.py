"""Conversion of scan results to JSON-ready dicts.

Keys use the camelCase names downstream consumers of the scan output
expect (``resolvedImports``, ``importedBy``, ``allFiles``, ...).
"""

from __future__ import annotations

import json
from typing import Any

from .core import ScanMetadata, ScanResult
from .features import Feature
from .graph import Relationship, RelationshipStats
from .scanning import FileAnalysis, ImportRecord, ScannedFile


def import_to_dict(imp: ImportRecord) -> dict[str, Any]:
    return {
        "path": imp.path,
        "value": imp.value,
        "type": imp.type,
        "imported": list(imp.imported),
        "resolvedPath": imp.resolved_path,
        "isTypeOnly": imp.is_type_only,
    }


def analysis_to_dict(analysis: FileAnalysis) -> dict[str, Any]:
    return {
        "imports": [import_to_dict(i) for i in analysis.imports],
        "resolvedImports": list(analysis.resolved_imports),
        "exports": [
            {"type": e.type, "name": e.name, "kind": e.kind, **({"source": e.source} if e.source else {})}
            for e in analysis.exports
        ],
        "routes": [{"method": r.method, "path": r.path} for r in analysis.routes],
        "apiCalls": [
            {"type": c.type, "url": c.url, **({"method": c.method} if c.method else {})}
            for c in analysis.api_calls
        ],
        "components": list(analysis.components),
        "functions": list(analysis.functions),
        "importedBy": list(analysis.imported_by),
    }


def file_to_dict(f: ScannedFile, include_content: bool = False) -> dict[str, Any]:
    data: dict[str, Any] = {"path": f.path}
    if include_content:
        data["content"] = f.content
    data.update(
        {
            "type": f.type,
            "role": f.role,
            "category": f.category,
            "behavior": f.behavior,
            "analysis": analysis_to_dict(f.analysis),
        }
    )
    return data


def relationship_to_dict(rel: Relationship) -> dict[str, str]:
    return {"from": rel.from_path, "to": rel.to_path, "type": rel.type}


def stats_to_dict(stats: RelationshipStats) -> dict[str, int]:
    return {
        "totalRelationships": stats.total_relationships,
        "importRelationships": stats.import_relationships,
        "usesRelationships": stats.uses_relationships,
        "filesInGraph": stats.files_in_graph,
    }


def metadata_to_dict(metadata: ScanMetadata) -> dict[str, Any]:
    return {
        "totalFiles": metadata.total_files,
        "frameworks": {k: list(v) for k, v in metadata.frameworks.items()},
        "projectType": metadata.project_type,
        "frameworksList": list(metadata.frameworks_list),
        "relationshipStats": stats_to_dict(metadata.relationship_stats),
        "coverage": round(metadata.coverage, 4),
    }


def feature_to_dict(feature: Feature) -> dict[str, Any]:
    return {
        "name": feature.name,
        "keyword": feature.keyword,
        "hubs": {k: list(v) for k, v in feature.hub_paths.items()},
        "fileCount": feature.file_count,
        "allFiles": list(feature.all_files),
        "categorized": {k: list(v) for k, v in feature.categorized.items()},
        "sharedDependencies": list(feature.shared_dependencies),
        "apiRoutes": [{"method": r.method, "path": r.path} for r in feature.api_routes],
    }


def scan_result_to_dict(result: ScanResult, include_content: bool = False) -> dict[str, Any]:
    """Convert a ScanResult to the ``{files, metadata, relationships, features}`` structure."""
    return {
        "files": [file_to_dict(f, include_content) for f in result.files],
        "metadata": metadata_to_dict(result.metadata),
        "relationships": [relationship_to_dict(r) for r in result.relationships],
        "features": {keyword: feature_to_dict(feat) for keyword, feat in result.features.items()},
    }


def scan_result_to_json(result: ScanResult, include_content: bool = False, indent: int = 2) -> str:
    return json.dumps(scan_result_to_dict(result, include_content), indent=indent)
