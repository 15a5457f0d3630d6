"""Content-based file classification.

Each signal is a regex (optionally gated by a second condition) that adds a
weight to one candidate type when it matches anywhere in the file. The top
scorer wins if it clears ``MIN_SCORE``.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, Optional

from .models import ContentClassification

MIN_SCORE = 8
FULL_CONFIDENCE_SCORE = 22

# Declaration order doubles as the tie-break order
SCORED_TYPES = (
    "route",
    "controller",
    "service",
    "model",
    "component",
    "page",
    "middleware",
    "config",
    "types",
    "utility",
)

CONTENT_ROLES = {
    "route": "API route handler",
    "controller": "Request/response controller",
    "service": "Business logic service",
    "model": "Database model/schema",
    "component": "UI component",
    "page": "Page component",
    "middleware": "Middleware function",
    "config": "Configuration",
    "types": "Type definitions",
    "utility": "Utility function",
}


@dataclass(frozen=True)
class Signal:
    type: str
    pattern: re.Pattern
    weight: int
    guard: Optional[Callable[[str], bool]] = None

    def fires(self, content: str) -> bool:
        if not self.pattern.search(content):
            return False
        return self.guard is None or self.guard(content)


def _also(pattern: str) -> Callable[[str], bool]:
    compiled = re.compile(pattern)
    return lambda content: compiled.search(content) is not None


def _lacks(pattern: str) -> Callable[[str], bool]:
    compiled = re.compile(pattern)
    return lambda content: compiled.search(content) is None


def _shorter_than(limit: int) -> Callable[[str], bool]:
    return lambda content: len(content) < limit


SIGNALS: tuple[Signal, ...] = (
    # Express/Fastify style routing, Next.js route handlers
    Signal("route", re.compile(r"\.(get|post|put|delete|patch|all)\s*\("), 10),
    Signal("route", re.compile(r"router\.(get|post|put|delete|patch|all)"), 15),
    Signal("route", re.compile(r"app\.(get|post|put|delete|patch|all)"), 12),
    Signal("route", re.compile(r"Router\(\)|createRouter|defineRoute"), 8),
    Signal("route", re.compile(r"export\s+(const|default)\s+(get|post|put|delete|patch)\s+"), 12),
    # Controllers
    Signal("controller", re.compile(r"\(req,\s*res|\(request,\s*response"), 8),
    Signal("controller", re.compile(r"res\.(json|send|status|render|redirect)"), 5),
    Signal("controller", re.compile(r"req\.(body|params|query|headers|cookies)"), 3),
    Signal("controller", re.compile(r"async\s+\w+\s*\(\s*req\s*,\s*res"), 10),
    # Services
    Signal("service", re.compile(r"class\s+\w+Service"), 15),
    Signal("service", re.compile(r"@Injectable\s*\("), 8),
    Signal("service", re.compile(r"async\s+\w+\s*\([^)]*\)\s*{"), 5, _lacks(r"req|res")),
    Signal(
        "service",
        re.compile(r"\.find(Many|First|Unique)?\(|\.create\(|\.update\(|\.delete\(|\.upsert\("),
        3,
    ),
    # Models: Mongoose, Sequelize, TypeORM, Prisma
    Signal("model", re.compile(r"new\s+(mongoose\.)?Schema\s*\("), 20),
    Signal("model", re.compile(r"mongoose\.model\s*\("), 15),
    Signal("model", re.compile(r"sequelize\.define"), 15),
    Signal("model", re.compile(r"@Entity|@Table|@Column|@PrimaryColumn"), 15),
    Signal("model", re.compile(r"model\s+\w+\s*{"), 12, _also(r"@@map|@@id")),
    Signal("model", re.compile(r"defineModel|defineTable"), 8),
    # Components: React, Vue, Svelte
    Signal("component", re.compile(r"<[A-Z][a-zA-Z0-9]*[\s/>]"), 5),
    Signal(
        "component",
        re.compile(r"useState|useEffect|useContext|useReducer|useMemo|useCallback|useRef"),
        8,
    ),
    Signal("component", re.compile(r"export\s+(default\s+)?function\s+[A-Z]"), 5),
    Signal("component", re.compile(r"return\s*\(\s*<"), 10),
    Signal("component", re.compile(r"import\s+React|from\s+['\"]react['\"]"), 3),
    Signal("component", re.compile(r"<template>|<script>|<style>"), 10),
    Signal("component", re.compile(r"svelte:element|on:click|bind:"), 8),
    # Pages: Next, Remix
    Signal("page", re.compile(r"getServerSideProps|getStaticProps|getStaticPaths"), 15),
    Signal("page", re.compile(r"useRouter|useNavigate|useParams|useSearchParams|usePathname"), 5),
    Signal("page", re.compile(r"export\s+(const\s+)?(metadata|generateMetadata)"), 8),
    Signal("page", re.compile(r"loader|action\s*[:(]"), 6, _also(r"Form|useLoaderData")),
    # Middleware
    Signal("middleware", re.compile(r"\(req,\s*res,\s*next\)"), 15),
    Signal("middleware", re.compile(r"next\(\)|next\s*\("), 5),
    Signal("middleware", re.compile(r"export\s+const\s+config\s*=\s*{.*matcher"), 10),
    Signal("middleware", re.compile(r"middleware\s*\("), 10, _also(r"NextResponse|redirect")),
    # Small config modules
    Signal("config", re.compile(r"defineConfig\s*\(|defineProject\s*\("), 12),
    Signal("config", re.compile(r"module\.exports\s*=\s*{"), 5),
    Signal("config", re.compile(r"export\s+default\s+{"), 4, _shorter_than(2500)),
    Signal("config", re.compile(r"plugins?\s*:\s*\[|resolve\s*:\s*{"), 5, _shorter_than(3000)),
    # Type definitions
    Signal("types", re.compile(r"declare\s+(module|namespace|function|const|class|interface|type)"), 15),
    Signal("types", re.compile(r"interface\s+\w+\s*{"), 5),
    Signal("types", re.compile(r"type\s+\w+\s*=\s*"), 3, _lacks(r"useState|useReducer")),
)


def score_content(content: str) -> dict[str, int]:
    """Accumulate signal weights per type. A fresh map on every call."""
    scores = {type_: 0 for type_ in SCORED_TYPES}
    for signal in SIGNALS:
        if signal.fires(content):
            scores[signal.type] += signal.weight
    return scores


def classify_by_content(content: Optional[str]) -> Optional[ContentClassification]:
    """Classify a file by scoring its body.

    Args:
        content: File body; None or empty yields None

    Returns:
        ContentClassification when the top score reaches ``MIN_SCORE``,
        else None
    """
    if not content:
        return None

    scores = score_content(content)

    best_type = None
    best_score = 0
    for type_ in SCORED_TYPES:
        if scores[type_] > best_score:
            best_type, best_score = type_, scores[type_]

    if best_type is None or best_score < MIN_SCORE:
        return None

    return ContentClassification(
        type=best_type,
        role=CONTENT_ROLES[best_type],
        confidence=min(best_score / FULL_CONFIDENCE_SCORE, 1.0),
    )
