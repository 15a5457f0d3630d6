"""Feature expansion: bounded traversal, sibling pickup and categorization."""

from __future__ import annotations

import re
from collections import deque
from collections.abc import Iterable, Mapping

from ..graph.models import Relationship
from ..scanning.models import ScannedFile
from .models import CATEGORY_BUCKETS

# Generic files that every feature touches: recorded, never absorbed or traversed
SHARED_INFRA_PATTERNS = (
    re.compile(r"/components/ui/", re.IGNORECASE),
    re.compile(r"/lib/utils\.(ts|js|tsx|jsx)$", re.IGNORECASE),
    re.compile(r"/api/index\.(ts|js|tsx|jsx)$", re.IGNORECASE),
)

_COMPONENT_SUBDIR = re.compile(r"^((?:.+/)?components/[^/]+)/")
_GENERIC_UI_DIR = re.compile(r"(^|/)components/ui$", re.IGNORECASE)

_FRONTEND_PATH = re.compile(r"(^|/)(client|frontend)/")
_BACKEND_PATH = re.compile(r"(^|/)(server|backend)/")


def is_shared_infrastructure(path: str) -> bool:
    # Directory patterns also match at the project root
    rooted = "/" + path.replace("\\", "/")
    return any(p.search(rooted) for p in SHARED_INFRA_PATTERNS)


def build_outgoing_index(
    files: Iterable[ScannedFile], relationships: Iterable[Relationship]
) -> dict[str, list[str]]:
    """Outgoing neighbours per file: relationship targets plus resolved imports.

    Neighbour order is stable (relationship order, then import order).
    """
    outgoing: dict[str, list[str]] = {}

    def link(source: str, target: str) -> None:
        targets = outgoing.setdefault(source, [])
        if target not in targets:
            targets.append(target)

    for rel in relationships:
        link(rel.from_path, rel.to_path)
    for f in files:
        for target in f.analysis.resolved_imports:
            link(f.path, target)
    return outgoing


def find_connected_files(
    hub_path: str, outgoing: Mapping[str, list[str]], max_depth: int = 2
) -> tuple[list[str], list[str]]:
    """Collect files reachable from a hub within ``max_depth`` hops.

    The hub is depth 0. A file found at depth ``max_depth`` is included but
    not expanded. Shared-infrastructure targets are recorded separately and
    never expanded. Each file is expanded at most once, so import cycles
    terminate.

    Returns:
        ``(connected, shared)``, both in discovery order
    """
    connected = [hub_path]
    seen = {hub_path}
    shared: list[str] = []
    shared_seen: set[str] = set()

    worklist = deque([(hub_path, 0)])
    while worklist:
        path, depth = worklist.popleft()
        if depth >= max_depth:
            continue
        for target in outgoing.get(path, ()):
            if target in seen or target in shared_seen:
                continue
            if is_shared_infrastructure(target):
                shared_seen.add(target)
                shared.append(target)
                continue
            seen.add(target)
            connected.append(target)
            worklist.append((target, depth + 1))

    return connected, shared


def expand_siblings(included: list[str], all_paths: Iterable[str]) -> list[str]:
    """Add files colocated in the same ``components/<subdir>/`` as an included file.

    Generic ``components/ui`` directories are not expanded, and
    shared-infrastructure files are never picked up.
    """
    sibling_dirs: list[str] = []
    for path in included:
        match = _COMPONENT_SUBDIR.match(path)
        if match and not _GENERIC_UI_DIR.search(match.group(1)) and match.group(1) not in sibling_dirs:
            sibling_dirs.append(match.group(1))

    if not sibling_dirs:
        return list(included)

    result = list(included)
    present = set(included)
    for path in all_paths:
        if path in present or is_shared_infrastructure(path):
            continue
        if any(path.startswith(d + "/") for d in sibling_dirs):
            present.add(path)
            result.append(path)
    return result


def categorize_files(paths: Iterable[str], files_by_path: Mapping[str, ScannedFile]) -> dict[str, list[str]]:
    """Bucket feature files by side (frontend/backend) and by sub-role.

    The side comes from the path root, falling back to the file's stored
    category. Sub-role buckets are substring matches and may overlap.
    """
    categorized: dict[str, list[str]] = {bucket: [] for bucket in CATEGORY_BUCKETS}

    for path in paths:
        f = files_by_path.get(path)
        if f is None:
            continue

        lower = path.lower()
        rooted = "/" + path
        path_frontend = _FRONTEND_PATH.search(lower) is not None
        path_backend = _BACKEND_PATH.search(lower) is not None
        is_frontend = path_frontend or (not path_backend and f.category == "frontend")
        is_backend = path_backend or (not path_frontend and f.category == "backend")

        if is_frontend:
            categorized["frontend"].append(path)
        if is_backend:
            categorized["backend"].append(path)

        if "/pages/" in rooted:
            categorized["pages"].append(path)
        if "/components/" in rooted:
            categorized["components"].append(path)
        if "/api/" in rooted and is_frontend:
            categorized["api"].append(path)
        if "/store/" in rooted or "/stores/" in rooted:
            categorized["stores"].append(path)
        if "/models/" in rooted or "/schemas/" in rooted:
            categorized["models"].append(path)
        if "/routes/" in rooted:
            categorized["routes"].append(path)
        if "/controllers/" in rooted:
            categorized["controllers"].append(path)
        if "/middleware/" in rooted or "/middlewares/" in rooted:
            categorized["middleware"].append(path)
        if "/utils/" in rooted or "/helpers/" in rooted or "/lib/" in rooted:
            categorized["utils"].append(path)
        if "/config/" in rooted or "/configs/" in rooted:
            categorized["config"].append(path)
        if "/services/" in rooted:
            categorized["services"].append(path)

        if f.category == "shared":
            categorized["shared"].append(path)

    return categorized
