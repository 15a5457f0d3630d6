"""Feature detection: group hubs into named features and grow them.

Steps:
    1. Identify hubs (controllers, pages, API modules, route handlers)
    2. Name each hub from path conventions; unnamed hubs are dropped
    3. Canonicalize synonyms and merge on the singular keyword
    4. Expand each feature through the import graph, then pick up
       component siblings
    5. Categorize the resulting files
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable

from ..graph.models import Relationship
from ..logging_config import get_logger
from ..scanning.models import ScannedFile
from .expansion import build_outgoing_index, categorize_files, expand_siblings, find_connected_files
from .hubs import identify_hubs
from .models import Feature, Hub
from .naming import feature_keyword

logger = get_logger(__name__)


def group_hubs_by_feature(hubs: Iterable[Hub]) -> dict[str, Feature]:
    """Merge hubs into features keyed by singular keyword.

    The display name is the most frequent name variant among the merged
    hubs; ties go to the variant seen first.
    """
    features: dict[str, Feature] = {}
    variants: dict[str, Counter] = {}

    for hub in hubs:
        named = feature_keyword(hub.path)
        if named is None:
            logger.debug(f"Hub {hub.path} matches no naming convention, skipped")
            continue
        keyword, variant = named

        feature = features.get(keyword)
        if feature is None:
            feature = features[keyword] = Feature(name=keyword, keyword=keyword)
            variants[keyword] = Counter()
        variants[keyword][variant] += 1

        feature.hubs.append(hub)
        feature.hub_paths.setdefault(hub.type, []).append(hub.path)

    for keyword, feature in features.items():
        # Counter.most_common keeps insertion order among equal counts
        feature.name = variants[keyword].most_common(1)[0][0]

    return features


def expand_features(
    features: dict[str, Feature],
    files: list[ScannedFile],
    relationships: list[Relationship],
    max_depth: int = 2,
) -> dict[str, Feature]:
    """Fill in files, shared dependencies, categories and routes for each feature."""
    outgoing = build_outgoing_index(files, relationships)
    files_by_path = {f.path: f for f in files}
    all_paths = [f.path for f in files]

    for feature in features.values():
        connected: list[str] = []
        connected_seen: set[str] = set()
        shared: list[str] = []
        shared_seen: set[str] = set()

        for hub in feature.hubs:
            hub_files, hub_shared = find_connected_files(hub.path, outgoing, max_depth)
            for path in hub_files:
                if path not in connected_seen:
                    connected_seen.add(path)
                    connected.append(path)
            for path in hub_shared:
                if path not in shared_seen:
                    shared_seen.add(path)
                    shared.append(path)

        feature.all_files = expand_siblings(connected, all_paths)
        feature.file_count = len(feature.all_files)
        feature.shared_dependencies = shared
        feature.categorized = categorize_files(feature.all_files, files_by_path)
        feature.api_routes = [route for hub in feature.hubs for route in hub.routes]

    return features


def compute_coverage(features: dict[str, Feature], total_files: int) -> float:
    """Fraction of project files that belong to at least one feature."""
    if total_files <= 0:
        return 0.0
    covered: set[str] = set()
    for feature in features.values():
        covered.update(feature.all_files)
    return len(covered) / total_files


def detect_features(
    files: list[ScannedFile], relationships: list[Relationship], max_depth: int = 2
) -> dict[str, Feature]:
    """Detect features in a scanned project.

    Args:
        files: Every scanned file, with analysis filled in
        relationships: The project's relationship graph
        max_depth: Import hops followed from each hub

    Returns:
        Features keyed by singular keyword
    """
    hubs = identify_hubs(files)
    logger.info(f"Found {len(hubs)} feature hubs")

    features = group_hubs_by_feature(hubs)
    logger.info(f"Identified {len(features)} features")

    return expand_features(features, files, relationships, max_depth)
