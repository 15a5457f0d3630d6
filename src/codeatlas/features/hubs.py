"""Hub identification: the files that anchor features."""

from __future__ import annotations

import re
from collections.abc import Iterable

from ..scanning.models import ScannedFile
from .models import Hub

_TSX_JSX = re.compile(r"\.(tsx|jsx)$")
_NEXT_SPECIAL = re.compile(r"/_(app|document|error)\.")
_APP_PAGE = re.compile(r"/app/(?:.*/)?page\.(tsx|jsx)$")
_APP_ROUTE = re.compile(r"/app/(?:.*/)?route\.(ts|js)$")
_API_DIR = re.compile(r"/(api)/")
_APP_API_DIR = re.compile(r"/app/api/")
_INDEX_FILE = re.compile(r"index\.(ts|js|tsx|jsx)$")


def hub_type(file: ScannedFile) -> str | None:
    """Return the hub type of a file, or None when it is not a hub.

    Priority when several apply: controller, page, api, route.
    """
    path = file.path.replace("\\", "/")
    # Directory checks also match at the project root
    rooted = "/" + path

    is_controller = "/controllers/" in rooted

    is_pages_page = "/pages/" in rooted and _TSX_JSX.search(path) and not _NEXT_SPECIAL.search(rooted)
    is_page = bool(is_pages_page or _APP_PAGE.search(rooted))

    is_app_route = _APP_ROUTE.search(rooted) is not None
    is_api_module = (
        _API_DIR.search(rooted) is not None
        and (
            "client/" in path
            or "frontend/" in path
            or "src/api/" in path
            or _APP_API_DIR.search(rooted) is not None
        )
        and not _INDEX_FILE.search(path)
        and not is_app_route
    )
    is_route_handler = (
        (file.type == "route" and bool(file.analysis.routes)) or "/routes/" in rooted or is_app_route
    )

    if is_controller:
        return "controller"
    if is_page:
        return "page"
    if is_api_module:
        return "api"
    if is_route_handler:
        return "route"
    return None


def identify_hubs(files: Iterable[ScannedFile]) -> list[Hub]:
    """Find every hub among the scanned files, in input order."""
    hubs = []
    for f in files:
        kind = hub_type(f)
        if kind is None:
            continue
        hubs.append(
            Hub(
                path=f.path.replace("\\", "/"),
                type=kind,
                routes=list(f.analysis.routes),
                imports=list(f.analysis.resolved_imports),
            )
        )
    return hubs
