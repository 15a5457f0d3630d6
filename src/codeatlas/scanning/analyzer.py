"""Per-file code analyzer: imports, exports, routes, API calls and more."""

from __future__ import annotations

import re
from collections.abc import Collection
from typing import Optional

from .exports import extract_exports
from .imports import derive_import_name, extract_raw_imports, merge_imports
from .models import ApiCall, FileAnalysis, ImportRecord, RouteDecl
from .resolver import resolve_import_path

_AXIOS_CALL = re.compile(r"axios\.(get|post|put|delete|patch)\s*\(\s*['\"`]([^'\"`]+)")
_FETCH_CALL = re.compile(r"fetch\s*\(\s*['\"`]([^'\"`]+)")
_ROUTE_DECL = re.compile(
    r"(?:router|app|express)\.(get|post|put|delete|patch|options|head|all)"
    r"\s*\(\s*['\"`]([^'\"`]+)['\"`]"
)
_JSX_COMPONENT = re.compile(r"<([A-Z][a-zA-Z0-9_]*)")
_FUNCTION_DECL = re.compile(r"function\s+([A-Za-z0-9_]+)\s*\(")
_ARROW_DECL = re.compile(r"const\s+([A-Za-z0-9_]+)\s*=\s*\(?\s*.*=>")


def _unique(items):
    seen = set()
    result = []
    for item in items:
        if item not in seen:
            seen.add(item)
            result.append(item)
    return result


def extract_imports(content: str, file_path: str, all_paths: Collection[str]) -> list[ImportRecord]:
    """Extract, merge and resolve the import statements of one file."""
    records = []
    for raw in merge_imports(extract_raw_imports(content)):
        resolved = resolve_import_path(raw.value, file_path, all_paths)
        records.append(
            ImportRecord(
                path=resolved or raw.value,
                value=raw.value,
                type=raw.type,
                imported=raw.bound_names() or [derive_import_name(raw.value)],
                resolved_path=resolved,
                is_type_only=raw.is_type_only,
            )
        )
    return records


def extract_routes(content: str) -> list[RouteDecl]:
    """``router.get('/x', ...)`` style declarations, deduplicated by (method, path)."""
    return _unique(RouteDecl(m.group(1).upper(), m.group(2)) for m in _ROUTE_DECL.finditer(content))


def extract_api_calls(content: str) -> list[ApiCall]:
    calls = [
        ApiCall(type="axios", url=m.group(2), method=m.group(1).upper())
        for m in _AXIOS_CALL.finditer(content)
    ]
    calls.extend(ApiCall(type="fetch", url=m.group(1)) for m in _FETCH_CALL.finditer(content))
    return calls


def extract_components(content: str) -> list[str]:
    return _unique(m.group(1) for m in _JSX_COMPONENT.finditer(content))


def extract_functions(content: str) -> list[str]:
    names = [m.group(1) for m in _FUNCTION_DECL.finditer(content)]
    names.extend(m.group(1) for m in _ARROW_DECL.finditer(content))
    return _unique(names)


def analyze_code(
    content: Optional[str], file_path: str, all_paths: Collection[str]
) -> FileAnalysis:
    """Run every extractor over one file.

    Args:
        content: File body, or None when it could not be read
        file_path: Project-relative path of the file
        all_paths: Every project-relative path in the scan (for resolution)

    Returns:
        FileAnalysis; empty when there is no content
    """
    if not content:
        return FileAnalysis()

    imports = extract_imports(content, file_path, all_paths)
    return FileAnalysis(
        imports=imports,
        resolved_imports=_unique(i.resolved_path for i in imports if i.resolved_path),
        exports=extract_exports(content),
        routes=extract_routes(content),
        api_calls=extract_api_calls(content),
        components=extract_components(content),
        functions=extract_functions(content),
    )
