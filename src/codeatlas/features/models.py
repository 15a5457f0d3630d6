"""Feature detection data models."""

from __future__ import annotations

from dataclasses import dataclass, field

from ..scanning.models import RouteDecl

# Order is the reporting order of the categorized buckets
CATEGORY_BUCKETS = (
    "frontend",
    "backend",
    "shared",
    "models",
    "routes",
    "controllers",
    "pages",
    "components",
    "api",
    "utils",
    "middleware",
    "config",
    "stores",
    "services",
)


@dataclass
class Hub:
    """A file that anchors a feature.

    Attributes:
        path: Project-relative path
        type: controller, page, api or route
        routes: Route declarations found in the file
        imports: The file's resolved imports
    """

    path: str
    type: str
    routes: list[RouteDecl] = field(default_factory=list)
    imports: list[str] = field(default_factory=list)


@dataclass
class Feature:
    """A named cluster of files grown from one or more hubs.

    Attributes:
        name: Display name (most frequent name variant among the hubs)
        keyword: Lowercase singular merge key, unique per scan
        hubs: Hubs assigned to this feature
        hub_paths: Hub paths grouped by hub type
        all_files: Hubs plus every file reached from them
        file_count: ``len(all_files)``
        categorized: Bucket name -> files (buckets overlap)
        shared_dependencies: Shared-infrastructure files reached but not
            absorbed
        api_routes: Route declarations of all hubs, flattened
    """

    name: str
    keyword: str
    hubs: list[Hub] = field(default_factory=list)
    hub_paths: dict[str, list[str]] = field(default_factory=dict)
    all_files: list[str] = field(default_factory=list)
    file_count: int = 0
    categorized: dict[str, list[str]] = field(default_factory=dict)
    shared_dependencies: list[str] = field(default_factory=list)
    api_routes: list[RouteDecl] = field(default_factory=list)
