"""Per-file scan models.

One ``ScannedFile`` per discovered text file. ``analysis`` holds everything
extracted from the file body by regex; it stays empty when the file had no
readable content.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class ImportRecord:
    """A single import or require statement.

    Attributes:
        path: Resolved project path when the import resolved, else the raw
            specifier
        value: Raw specifier as written in the source
        type: "esm" or "cjs"
        imported: Bound local names ("Foo", "bar as baz", "* as ns",
            "(side-effect)"), or a name derived from the module path
        resolved_path: Project path the specifier resolved to, if any
        is_type_only: True for ``import type ...`` statements
    """

    path: str
    value: str
    type: str
    imported: list[str] = field(default_factory=list)
    resolved_path: Optional[str] = None
    is_type_only: bool = False


@dataclass
class ExportRecord:
    """An exported binding.

    Attributes:
        type: es_default, es_named, es_reexport, cjs_default or cjs_named
        name: Exported name (or a placeholder like "(anonymous function)")
        kind: function, class, const, let, var, type, interface, model,
            named, default or unknown
        source: Module specifier for re-exports
    """

    type: str
    name: str
    kind: str
    source: Optional[str] = None


@dataclass(frozen=True)
class RouteDecl:
    """An HTTP route declaration such as ``router.post('/login', ...)``."""

    method: str
    path: str


@dataclass
class ApiCall:
    """An outgoing HTTP call (axios or fetch)."""

    type: str
    url: str
    method: Optional[str] = None


@dataclass
class FileAnalysis:
    """Everything the code analyzer extracts from one file."""

    imports: list[ImportRecord] = field(default_factory=list)
    resolved_imports: list[str] = field(default_factory=list)
    exports: list[ExportRecord] = field(default_factory=list)
    routes: list[RouteDecl] = field(default_factory=list)
    api_calls: list[ApiCall] = field(default_factory=list)
    components: list[str] = field(default_factory=list)
    functions: list[str] = field(default_factory=list)
    # Filled in by the orchestrator's second pass
    imported_by: list[str] = field(default_factory=list)


@dataclass
class ScannedFile:
    """A discovered file with its classification and analysis.

    Attributes:
        path: Project-relative, forward-slash path (unique within a scan)
        content: Raw text, or None when unreadable or oversized
        type: Final file type (path-based, possibly overridden by content)
        role: Human-readable label paired with ``type``
        category: backend, frontend, shared, infrastructure, test,
            documentation or other (path-based only)
        behavior: request-handler, data-layer, http-client, state,
            ui-render, logic or config
        analysis: Regex extraction results
    """

    path: str
    content: Optional[str]
    type: str
    role: str
    category: str
    behavior: str
    analysis: FileAnalysis = field(default_factory=FileAnalysis)

    @property
    def has_content(self) -> bool:
        return self.content is not None
