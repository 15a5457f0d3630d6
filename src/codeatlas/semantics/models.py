"""Classification vocabularies and result models.

Every file gets a ``type`` with a paired human-readable ``role``, a
``category`` set once from its path, and a derived ``behavior``.
"""

from __future__ import annotations

from dataclasses import dataclass

FILE_TYPES = (
    "route",
    "controller",
    "service",
    "model",
    "component",
    "page",
    "middleware",
    "config",
    "manifest",
    "utility",
    "types",
    "test",
    "style",
    "markup",
    "docs",
    "data",
    "script",
    "entry-point",
    "static",
    "api-client",
    "store",
)

CATEGORIES = (
    "backend",
    "frontend",
    "shared",
    "infrastructure",
    "test",
    "documentation",
    "other",
)

BEHAVIORS = (
    "request-handler",
    "data-layer",
    "http-client",
    "state",
    "ui-render",
    "logic",
    "config",
)


@dataclass(frozen=True)
class Classification:
    """Path-based classification result."""

    type: str
    role: str
    category: str


@dataclass(frozen=True)
class ContentClassification:
    """Content-based classification result.

    Attributes:
        type: Winning file type
        role: Role label for that type
        confidence: ``min(score / 22, 1)``
    """

    type: str
    role: str
    confidence: float
