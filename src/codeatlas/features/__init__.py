"""Feature detection: hubs, naming, graph expansion and categorization.

Usage:
    from codeatlas.features import detect_features

    features = detect_features(files, relationships)
    features["auth"].all_files
"""

from .detector import compute_coverage, detect_features, expand_features, group_hubs_by_feature
from .expansion import (
    SHARED_INFRA_PATTERNS,
    categorize_files,
    expand_siblings,
    find_connected_files,
    is_shared_infrastructure,
)
from .hubs import hub_type, identify_hubs
from .models import CATEGORY_BUCKETS, Feature, Hub
from .naming import canonical_feature_name, extract_feature_name, feature_keyword, singularize

__all__ = [
    # Detection
    "compute_coverage",
    "detect_features",
    "expand_features",
    "group_hubs_by_feature",
    # Hubs and naming
    "canonical_feature_name",
    "extract_feature_name",
    "feature_keyword",
    "hub_type",
    "identify_hubs",
    "singularize",
    # Expansion
    "SHARED_INFRA_PATTERNS",
    "categorize_files",
    "expand_siblings",
    "find_connected_files",
    "is_shared_infrastructure",
    # Models
    "CATEGORY_BUCKETS",
    "Feature",
    "Hub",
]
