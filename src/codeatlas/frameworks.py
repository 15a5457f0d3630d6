"""Framework detection from import specifiers, filenames and extensions.

Each known framework carries a fingerprint (package names, root-level
filenames, file extensions) and a confidence weight. A project's score for
a framework is::

    weight * matching_packages + weight * matching_files
        + weight / 2 if any extension matches

Detected frameworks are reported per category, highest score first.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from .logging_config import get_logger
from .scanning.ignore import get_file_extension
from .scanning.models import ScannedFile

logger = get_logger(__name__)

FRAMEWORK_CATEGORIES = ("backend", "frontend", "database", "tooling")


@dataclass(frozen=True)
class FrameworkPattern:
    name: str
    confidence: float
    imports: tuple[str, ...] = ()
    files: tuple[str, ...] = ()
    extensions: tuple[str, ...] = ()


FRAMEWORK_PATTERNS: dict[str, tuple[FrameworkPattern, ...]] = {
    "backend": (
        FrameworkPattern("Express", 10, imports=("express",)),
        FrameworkPattern("Fastify", 10, imports=("fastify",)),
        FrameworkPattern("NestJS", 10, imports=("@nestjs/core", "@nestjs/common")),
        FrameworkPattern("Koa", 10, imports=("koa",)),
        FrameworkPattern("Hapi", 10, imports=("@hapi/hapi",)),
        FrameworkPattern("JWT Auth", 5, imports=("jsonwebtoken", "jose")),
        FrameworkPattern("Passport", 5, imports=("passport",)),
    ),
    "frontend": (
        FrameworkPattern("React", 10, imports=("react",), extensions=(".jsx", ".tsx")),
        FrameworkPattern("Vue", 10, imports=("vue",), extensions=(".vue",)),
        FrameworkPattern("Angular", 10, imports=("@angular/core",)),
        FrameworkPattern("Svelte", 10, imports=("svelte",), extensions=(".svelte",)),
        FrameworkPattern("Next.js", 10, imports=("next",), files=("next.config.js", "next.config.mjs")),
        FrameworkPattern("Nuxt", 10, imports=("nuxt",), files=("nuxt.config.js", "nuxt.config.ts")),
        FrameworkPattern("React Router", 5, imports=("react-router-dom", "react-router")),
        FrameworkPattern("Vue Router", 5, imports=("vue-router",)),
    ),
    "database": (
        FrameworkPattern("MongoDB", 10, imports=("mongodb",)),
        FrameworkPattern("Mongoose", 10, imports=("mongoose",)),
        FrameworkPattern(
            "Prisma",
            10,
            imports=("@prisma/client",),
            files=("prisma/schema.prisma", "schema.prisma"),
            extensions=(".prisma",),
        ),
        FrameworkPattern("Sequelize", 10, imports=("sequelize",)),
        FrameworkPattern("TypeORM", 10, imports=("typeorm",)),
        FrameworkPattern("PostgreSQL", 8, imports=("pg", "postgres")),
        FrameworkPattern("MySQL", 8, imports=("mysql", "mysql2")),
        FrameworkPattern("Redis", 8, imports=("redis", "ioredis")),
    ),
    "tooling": (
        FrameworkPattern(
            "Vite", 10, imports=("vite",), files=("vite.config.js", "vite.config.ts", "vite.config.mjs")
        ),
        FrameworkPattern("Webpack", 10, imports=("webpack",), files=("webpack.config.js", "webpack.config.ts")),
        FrameworkPattern("Axios", 5, imports=("axios",)),
        FrameworkPattern(
            "Tailwind CSS", 8, imports=("tailwindcss",), files=("tailwind.config.js", "tailwind.config.ts")
        ),
        FrameworkPattern("ESLint", 5, files=(".eslintrc.js", ".eslintrc.json", "eslint.config.js")),
        FrameworkPattern("Prettier", 5, files=(".prettierrc", ".prettierrc.js", "prettier.config.js")),
        FrameworkPattern("TypeScript", 8, files=("tsconfig.json",), extensions=(".ts", ".tsx")),
        FrameworkPattern("Jest", 5, imports=("jest", "@jest/globals"), files=("jest.config.js", "jest.config.ts")),
        FrameworkPattern("Vitest", 5, imports=("vitest",), files=("vitest.config.js", "vitest.config.ts")),
    ),
}


def package_name(specifier: str) -> str:
    """``@scope/pkg/sub`` -> ``@scope/pkg``; ``pkg/sub`` -> ``pkg``."""
    if specifier.startswith("@"):
        return "/".join(specifier.split("/")[:2])
    return specifier.split("/")[0]


def score_framework(
    pattern: FrameworkPattern, packages: set[str], paths: set[str], extensions: set[str]
) -> float:
    score = 0.0
    score += pattern.confidence * sum(1 for imp in pattern.imports if imp in packages)
    score += pattern.confidence * sum(1 for name in pattern.files if name.lower() in paths)
    if any(ext in extensions for ext in pattern.extensions):
        score += pattern.confidence * 0.5
    return score


def detect_frameworks(files: Iterable[ScannedFile]) -> dict[str, list[str]]:
    """Detect frameworks used by a scanned project.

    Args:
        files: Scanned files (with import analysis)

    Returns:
        Mapping of category -> framework names, highest score first
    """
    packages: set[str] = set()
    paths: set[str] = set()
    extensions: set[str] = set()

    for f in files:
        paths.add(f.path.lower())
        ext = get_file_extension(f.path)
        if ext:
            extensions.add(ext)
        for imp in f.analysis.imports:
            if imp.value:
                name = package_name(imp.value)
                if name:
                    packages.add(name)

    detected: dict[str, list[str]] = {}
    for category in FRAMEWORK_CATEGORIES:
        scored = []
        for pattern in FRAMEWORK_PATTERNS[category]:
            score = score_framework(pattern, packages, paths, extensions)
            if score > 0:
                scored.append((pattern.name, score))
        # sorted() is stable, so ties keep table order
        detected[category] = [name for name, _ in sorted(scored, key=lambda item: -item[1])]

    logger.debug(f"Detected frameworks: {detected}")
    return detected


def get_project_type(frameworks: dict[str, list[str]]) -> str:
    """fullstack, backend, frontend or unknown."""
    has_backend = bool(frameworks.get("backend"))
    has_frontend = bool(frameworks.get("frontend"))
    has_database = bool(frameworks.get("database"))

    if has_backend and has_frontend:
        return "fullstack"
    if has_backend or has_database:
        return "backend"
    if has_frontend:
        return "frontend"
    return "unknown"


def flatten_frameworks(frameworks: dict[str, list[str]]) -> list[str]:
    """All detected names, in category order."""
    return [name for category in FRAMEWORK_CATEGORIES for name in frameworks.get(category, [])]
