"""Project-relative import resolution for JS/TS module specifiers.

Turns a raw specifier plus the importing file's path into a concrete path
from the project's file set. Handles relative specifiers, root-relative
specifiers, and the ``@/`` and ``~/`` alias conventions. Anything else is an
external package and never resolves.
"""

from __future__ import annotations

import posixpath
import re
from collections.abc import Collection
from typing import Optional

ALIAS_PREFIXES = ("@/", "~/")

# Generic alias roots, tried after the importing file's own src/ ancestor
ALIAS_BASE_DIRS = ("src", "lib", "app", "components", "utils", "pages", "routes")

# Per-root alias dirs: <first path segment>/<sub>
ROOT_ALIAS_SUBDIRS = ("src", "lib", "app")

RESOLVE_EXTENSIONS = (".ts", ".tsx", ".js", ".jsx", ".mjs", ".cjs", ".json", ".vue", ".svelte")

INDEX_FILES = (
    "index.ts",
    "index.tsx",
    "index.js",
    "index.jsx",
    "index.mjs",
    "index.cjs",
    "index.json",
)

_SRC_ANCESTOR = re.compile(r"^(.+?/src)/")
_ROOT_SEGMENT = re.compile(r"^([^/]+)/")


def is_external_specifier(specifier: str) -> bool:
    """True for bare package specifiers (``react``, ``@scope/pkg``, ``node:fs``)."""
    return not (
        specifier.startswith(".")
        or specifier.startswith("/")
        or specifier.startswith(ALIAS_PREFIXES)
    )


def alias_base_dirs(from_path: str) -> list[str]:
    """Candidate base directories for an alias import, in priority order.

    ``client/src/pages/Foo.tsx`` yields ``client/src`` first, then the
    generic roots, then ``client/src``, ``client/lib``, ``client/app``
    (skipping duplicates).
    """
    bases: list[str] = []

    src_match = _SRC_ANCESTOR.match(from_path)
    if src_match:
        bases.append(src_match.group(1))

    bases.extend(ALIAS_BASE_DIRS)

    root_match = _ROOT_SEGMENT.match(from_path)
    if root_match:
        root = root_match.group(1)
        for sub in ROOT_ALIAS_SUBDIRS:
            candidate = f"{root}/{sub}"
            if candidate not in bases:
                bases.append(candidate)

    return bases


def match_candidate(candidate: str, all_paths: Collection[str]) -> Optional[str]:
    """Match one candidate base path against the project file set.

    Tries the exact path, then each known extension, then index files inside
    a directory of that name. First match wins.
    """
    if not candidate or candidate.startswith(".."):
        return None

    if candidate in all_paths:
        return candidate

    for ext in RESOLVE_EXTENSIONS:
        with_ext = candidate + ext
        if with_ext in all_paths:
            return with_ext

    for index_file in INDEX_FILES:
        index_path = f"{candidate}/{index_file}"
        if index_path in all_paths:
            return index_path

    return None


def resolve_import_path(
    specifier: str, from_path: str, all_paths: Collection[str]
) -> Optional[str]:
    """Resolve an import specifier to a project file path.

    Args:
        specifier: Raw specifier as written (``./utils``, ``@/lib/db``)
        from_path: Project-relative path of the importing file
        all_paths: Every project-relative path known to the scan

    Returns:
        A member of ``all_paths``, or None for external packages and
        specifiers that match no file
    """
    if not specifier or is_external_specifier(specifier):
        return None

    from_path = from_path.replace("\\", "/")

    if specifier.startswith(ALIAS_PREFIXES):
        alias_path = specifier[2:].rstrip("/")
        if not alias_path:
            return None
        for base in alias_base_dirs(from_path):
            resolved = match_candidate(f"{base}/{alias_path}", all_paths)
            if resolved:
                return resolved
        return match_candidate(posixpath.normpath(alias_path), all_paths)

    if specifier.startswith("/"):
        root_relative = specifier.lstrip("/").rstrip("/")
        if not root_relative:
            return None
        return match_candidate(posixpath.normpath(root_relative), all_paths)

    from_dir = posixpath.dirname(from_path)
    joined = posixpath.normpath(posixpath.join(from_dir, specifier))
    if joined == ".":
        return None
    return match_candidate(joined, all_paths)
