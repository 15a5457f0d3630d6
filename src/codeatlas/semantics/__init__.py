"""File classification: path rules, content scoring, and behavior.

Usage:
    from codeatlas.semantics import classify_by_path, classify_by_content

    base = classify_by_path("server/routes/authRoutes.js")
    refined = classify_by_content(content)
"""

from .behavior import classify_behavior
from .content import classify_by_content, score_content
from .models import (
    BEHAVIORS,
    CATEGORIES,
    FILE_TYPES,
    Classification,
    ContentClassification,
)
from .paths import DIR_ROLES, classify_by_path, is_backend_root, is_frontend_root

__all__ = [
    # Classifiers
    "classify_behavior",
    "classify_by_content",
    "classify_by_path",
    "score_content",
    "is_backend_root",
    "is_frontend_root",
    # Models
    "BEHAVIORS",
    "CATEGORIES",
    "DIR_ROLES",
    "FILE_TYPES",
    "Classification",
    "ContentClassification",
]
