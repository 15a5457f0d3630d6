"""File discovery and per-file regex analysis.

Usage:
    from codeatlas.scanning import get_all_files, analyze_code

    paths = get_all_files(root)
    analysis = analyze_code(content, "src/app.js", set(paths))
"""

from .analyzer import analyze_code
from .exports import extract_exports, infer_export_kind
from .imports import derive_import_name, extract_raw_imports, merge_imports
from .models import ApiCall, ExportRecord, FileAnalysis, ImportRecord, RouteDecl, ScannedFile
from .resolver import resolve_import_path
from .walker import get_all_files, iter_project_files

__all__ = [
    # Discovery
    "get_all_files",
    "iter_project_files",
    # Analysis
    "analyze_code",
    "derive_import_name",
    "extract_exports",
    "extract_raw_imports",
    "infer_export_kind",
    "merge_imports",
    "resolve_import_path",
    # Models
    "ApiCall",
    "ExportRecord",
    "FileAnalysis",
    "ImportRecord",
    "RouteDecl",
    "ScannedFile",
]
