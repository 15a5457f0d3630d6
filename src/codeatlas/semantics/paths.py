"""Path-based file classification.

Classifies a file from its project-relative path alone. Rules are tried in a
fixed precedence order; first matching rule wins. Every path gets a result.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

from ..scanning.ignore import get_file_extension
from .models import Classification

FRONTEND_ROOT_PATTERN = re.compile(r"^(client|frontend|web|app|ui)/", re.IGNORECASE)
BACKEND_ROOT_PATTERN = re.compile(r"^(server|backend|api-server)/", re.IGNORECASE)

CODE_EXTENSIONS = frozenset({".js", ".jsx", ".ts", ".tsx", ".mjs", ".cjs", ".vue", ".svelte"})
STYLE_EXTENSIONS = frozenset({".css", ".scss", ".sass", ".less"})

# Lowercase; matched exactly or as a filename prefix
CONFIG_FILE_PATTERNS = (
    "package.json",
    "package-lock.json",
    "yarn.lock",
    "pnpm-lock.yaml",
    "pnpm-workspace.yaml",
    "bun.lockb",
    "lerna.json",
    "nx.json",
    "turbo.json",
    "tsconfig.json",
    "jsconfig.json",
    "tsconfig.base.json",
    "tsconfig.app.json",
    "tsconfig.node.json",
    "tsconfig.test.json",
    "tsconfig.build.json",
    "vercel.json",
    "netlify.toml",
    "netlify.json",
    "firebase.json",
    ".firebaserc",
    "vitest.config",
    "vite.config",
    "next.config",
    "nuxt.config",
    "svelte.config",
    "angular.json",
    "astro.config",
    "remix.config",
    "tailwind.config",
    "postcss.config",
    "jest.config",
    "jest.setup",
    "vitest.setup",
    "karma.conf",
    "mocha.opts",
    "cypress.config",
    "playwright.config",
    "webpack.config",
    "rollup.config",
    "rspack.config",
    "esbuild.config",
    "parcel.config",
    "babel.config",
    ".babelrc",
    "eslint.config",
    ".eslintrc",
    ".prettierrc",
    "prettier.config",
    "stylelint.config",
    ".stylelintrc",
    "commitlint.config",
    ".commitlintrc",
    "lint-staged.config",
    "husky",
    ".nvmrc",
    ".node-version",
    ".npmrc",
    ".yarnrc",
    "docker-compose",
    "dockerfile",
    ".dockerignore",
    "makefile",
    "justfile",
    "procfile",
    ".env.example",
    ".env.sample",
    ".env.template",
    ".editorconfig",
    ".gitignore",
    ".gitattributes",
    "renovate.json",
    "dependabot.yml",
    ".releaserc",
    "release.config",
)

_CONFIG_SUFFIX = re.compile(r"\.config\.(js|ts|mjs|cjs)$")
_TOOL_RC = re.compile(r"\.(eslintrc|prettierrc|babelrc)(\.(js|json|yml|yaml))?$")
_DOCKER_COMPOSE = re.compile(r"^docker-compose\.(yml|yaml|json)$")
_ENV_DOTFILE = re.compile(r"^\.(env\.example|env\.sample|env\.template|nvmrc|node-version|npmrc|yarnrc)$")

_TEST_FILE = re.compile(r"\.(test|spec)\.(js|jsx|ts|tsx|mjs|cjs|vue|svelte)$")
_DECLARATION_FILE = re.compile(r"\.d\.(ts|tsx)$")

ENTRY_POINT_NAMES = frozenset(
    {
        "server.js",
        "server.ts",
        "server.mjs",
        "app.js",
        "app.ts",
        "app.mjs",
        "main.js",
        "main.ts",
        "main.mjs",
        "main.tsx",
        "main.jsx",
        "index.js",
        "index.ts",
        "index.mjs",
        "index.tsx",
        "index.jsx",
    }
)


@dataclass(frozen=True)
class DirRole:
    """Role implied by a directory segment.

    ``backend_override`` replaces the role when the path sits under a
    backend root, or under no recognized root at all.
    """

    type: str
    role: str
    category: str
    backend_override: Optional[Classification] = None


DIR_ROLES: dict[str, DirRole] = {
    "routes": DirRole("route", "Route definition", "backend"),
    "route": DirRole("route", "Route definition", "backend"),
    "api": DirRole(
        "api-client",
        "API client module",
        "frontend",
        backend_override=Classification("route", "API route/handler", "backend"),
    ),
    "pages": DirRole("page", "Page/view", "frontend"),
    "page": DirRole("page", "Page/view", "frontend"),
    "app": DirRole("page", "App router / page", "frontend"),
    "views": DirRole("page", "View template", "frontend"),
    "components": DirRole("component", "UI component", "frontend"),
    "component": DirRole("component", "UI component", "frontend"),
    "ui": DirRole("component", "UI component", "frontend"),
    "widgets": DirRole("component", "UI widget", "frontend"),
    "controllers": DirRole("controller", "Controller", "backend"),
    "controller": DirRole("controller", "Controller", "backend"),
    "services": DirRole("service", "Service / business logic", "backend"),
    "service": DirRole("service", "Service / business logic", "backend"),
    "models": DirRole("model", "Data model", "backend"),
    "model": DirRole("model", "Data model", "backend"),
    "schemas": DirRole("model", "Schema definition", "backend"),
    "schema": DirRole("model", "Schema definition", "backend"),
    "middleware": DirRole("middleware", "Middleware", "backend"),
    "middlewares": DirRole("middleware", "Middleware", "backend"),
    "lib": DirRole("utility", "Library / shared code", "shared"),
    "libs": DirRole("utility", "Library / shared code", "shared"),
    "utils": DirRole("utility", "Utility", "shared"),
    "util": DirRole("utility", "Utility", "shared"),
    "helpers": DirRole("utility", "Helper", "shared"),
    "hooks": DirRole("utility", "React/hooks", "frontend"),
    "store": DirRole("store", "State store", "frontend"),
    "stores": DirRole("store", "State store", "frontend"),
    "providers": DirRole("component", "Context/provider", "frontend"),
    "layouts": DirRole("component", "Layout", "frontend"),
    "layout": DirRole("component", "Layout", "frontend"),
    "types": DirRole("types", "Type definitions", "shared"),
    "typings": DirRole("types", "Type definitions", "shared"),
    "interfaces": DirRole("types", "Type definitions", "shared"),
    "constants": DirRole("utility", "Constants", "shared"),
    "config": DirRole("config", "Configuration", "infrastructure"),
    "configs": DirRole("config", "Configuration", "infrastructure"),
    "__tests__": DirRole("test", "Test file", "test"),
    "__mocks__": DirRole("test", "Mock", "test"),
    "__fixtures__": DirRole("test", "Test fixture", "test"),
    "test": DirRole("test", "Test file", "test"),
    "tests": DirRole("test", "Test file", "test"),
    "spec": DirRole("test", "Test spec", "test"),
    "specs": DirRole("test", "Test spec", "test"),
    "e2e": DirRole("test", "E2E test", "test"),
    "integration": DirRole("test", "Integration test", "test"),
    "scripts": DirRole("script", "Script", "infrastructure"),
    "script": DirRole("script", "Script", "infrastructure"),
    "migrations": DirRole("script", "Migration", "backend"),
    "seed": DirRole("script", "Seed data", "backend"),
    "seeds": DirRole("script", "Seed data", "backend"),
    "public": DirRole("static", "Static asset (path)", "frontend"),
    "static": DirRole("static", "Static asset", "frontend"),
    "assets": DirRole("static", "Asset", "frontend"),
    "styles": DirRole("style", "Styles", "frontend"),
    "theme": DirRole("style", "Theme", "frontend"),
    "themes": DirRole("style", "Theme", "frontend"),
    "docs": DirRole("docs", "Documentation", "documentation"),
    "documentation": DirRole("docs", "Documentation", "documentation"),
    "workflows": DirRole("config", "CI workflow", "infrastructure"),
    "actions": DirRole("config", "GitHub Actions", "infrastructure"),
}


def is_frontend_root(path: str) -> bool:
    """True for ``client/``, ``frontend/``, ``web/``, ``app/``, ``ui/`` roots or a bare ``src/``."""
    if FRONTEND_ROOT_PATTERN.match(path):
        return True
    return path.startswith("src/") and not BACKEND_ROOT_PATTERN.match(path)


def is_backend_root(path: str) -> bool:
    return BACKEND_ROOT_PATTERN.match(path) is not None


def is_config_file_name(file_name: str) -> bool:
    lower = file_name.lower()
    if any(lower == p or lower.startswith(p) for p in CONFIG_FILE_PATTERNS):
        return True
    return bool(
        _CONFIG_SUFFIX.search(lower)
        or _TOOL_RC.search(lower)
        or _DOCKER_COMPOSE.match(lower)
        or _ENV_DOTFILE.match(lower)
    )


def _classify_config_file(name: str) -> Classification:
    """Sub-label a known config/manifest filename (``name`` is lowercase)."""
    infra = "infrastructure"
    if name == "package.json":
        return Classification("manifest", "Package manifest", infra)
    if re.match(r"^(package-lock\.json|yarn\.lock|pnpm-lock\.yaml|bun\.lockb)$", name):
        return Classification("manifest", "Lockfile", infra)
    if name in ("pnpm-workspace.yaml", "lerna.json", "nx.json", "turbo.json"):
        return Classification("manifest", "Monorepo / workspace config", infra)
    if re.match(r"^tsconfig\.?.*\.json$", name) or name == "jsconfig.json":
        return Classification("config", "TypeScript/JS project config", infra)
    if re.match(r"^(vercel|netlify|firebase)\.json$", name) or name == "netlify.toml":
        return Classification("config", "Hosting/deploy config", infra)
    if re.match(
        r"^(vite|vitest|next|nuxt|svelte|astro|remix|tailwind|postcss|webpack|rollup|babel"
        r"|eslint|prettier|stylelint|commitlint)\.config\.",
        name,
    ) or re.search(r"\.(eslintrc|prettierrc|babelrc)", name):
        return Classification("config", "Build/lint config", infra)
    if (
        re.match(r"^jest\.(config|setup)", name)
        or re.match(r"^vitest\.(config|setup)", name)
        or re.match(r"^(karma|cypress|playwright)\.(config|conf)", name)
    ):
        return Classification("config", "Test runner config", infra)
    if name.startswith("docker-compose.") or name in ("dockerfile", ".dockerignore"):
        return Classification("config", "Docker config", infra)
    if name in ("makefile", "justfile", "procfile"):
        return Classification("script", "Build/run script", infra)
    if re.match(
        r"^\.(env\.example|env\.sample|env\.template|gitignore|gitattributes|editorconfig"
        r"|npmrc|yarnrc|nvmrc|node-version)$",
        name,
    ):
        return Classification("config", "Environment/tool config", infra)
    return Classification("config", "Configuration file", infra)


def _classify_by_directory(
    parts: list[str], ext: str, in_frontend: bool, in_backend: bool
) -> Optional[Classification]:
    """Walk path segments from the deepest upward looking for a directory role."""
    for segment in reversed(parts):
        dir_role = DIR_ROLES.get(segment.lower())
        if dir_role is None or dir_role.type == "test":
            continue

        type_, role, category = dir_role.type, dir_role.role, dir_role.category
        override = dir_role.backend_override
        # Neither root recognized: api/ defaults to the backend reading
        if override is not None and (in_backend or not in_frontend):
            type_, role, category = override.type, override.role, override.category

        if category == "shared" and in_backend:
            category = "backend"
        elif category == "shared" and in_frontend:
            category = "frontend"

        if ext in CODE_EXTENSIONS:
            return Classification(type_, role, category)
        if type_ == "style" and ext in STYLE_EXTENSIONS:
            return Classification(type_, role, category)
        if type_ == "static" and ext not in (".js", ".ts"):
            return Classification(type_, role, category)

    return None


def classify_by_path(file_path: str) -> Classification:
    """Classify a file from its project-relative path.

    Args:
        file_path: Project-relative path (either slash direction)

    Returns:
        Classification; never None
    """
    path = file_path.replace("\\", "/")
    path_lower = path.lower()
    parts = path.split("/")
    file_name = parts[-1]
    name_lower = file_name.lower()
    ext = get_file_extension(file_name).lower()

    # 1. Config / manifest filenames
    if is_config_file_name(file_name):
        return _classify_config_file(name_lower)

    # 2. Tests, by filename or by directory
    if _TEST_FILE.search(name_lower):
        return Classification("test", "Test/spec file", "test")
    for part in parts:
        dir_role = DIR_ROLES.get(part.lower())
        if dir_role is not None and dir_role.type == "test":
            return Classification("test", dir_role.role, "test")

    # 3-9. Extension families
    if ext in (".html", ".htm"):
        return Classification("markup", "HTML file", "frontend")
    if ext in STYLE_EXTENSIONS:
        return Classification("style", "Stylesheet", "frontend")
    if ext == ".json":
        return Classification("data", "JSON data", "infrastructure")
    if ext in (".yml", ".yaml", ".toml"):
        in_workflows = "/.github/" in "/" + path_lower and (
            "workflows" in path_lower or "actions" in path_lower
        )
        role = "CI workflow" if in_workflows else "Configuration file"
        return Classification("config", role, "infrastructure")
    if ext in (".md", ".mdx"):
        return Classification("docs", "Documentation", "documentation")
    if _DECLARATION_FILE.search(file_name):
        return Classification("types", "Type declarations", "shared")
    if ext in (".graphql", ".gql"):
        return Classification("data", "GraphQL schema/query", "backend")
    if ext == ".prisma":
        return Classification("model", "Prisma schema", "backend")
    if ext == ".sql":
        return Classification("script", "SQL script", "backend")

    in_frontend = is_frontend_root(path)
    in_backend = is_backend_root(path)

    # 10. Entry points near the root
    if name_lower in ENTRY_POINT_NAMES and len(parts) <= 3:
        if in_backend or name_lower.startswith(("server.", "app.")):
            return Classification("entry-point", "Server entry point", "backend")
        if in_frontend:
            return Classification("entry-point", "App entry point", "frontend")

    # 11. Directory roles
    by_directory = _classify_by_directory(parts, ext, in_frontend, in_backend)
    if by_directory is not None:
        return by_directory

    # 12. Extension fallback for source files
    if ext in (".vue", ".svelte"):
        return Classification("component", "SFC component", "frontend")
    if ext in (".tsx", ".jsx"):
        return Classification("component", "JSX/TSX module", "backend" if in_backend else "frontend")
    if ext in (".ts", ".js", ".mjs", ".cjs"):
        if in_backend:
            category = "backend"
        elif in_frontend:
            category = "frontend"
        else:
            category = "shared"
        return Classification("utility", "Script/module", category)

    if ext == ".txt":
        return Classification("docs", "Text file", "documentation")
    if ext == ".xml":
        return Classification("markup", "XML file", "other")

    return Classification("utility", "Source file", "shared")
