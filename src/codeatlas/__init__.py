"""
codeatlas - Structural model of JavaScript/TypeScript repositories

Classifies every file by role, builds the import/export graph, detects
frameworks and groups files into features. Regex and path conventions only:
no AST, no type checking, no code execution.
"""

__version__ = "0.1.0"

from .api import scan
from .core import ScanOrchestrator, ScanResult, scan_project
from .serializers import scan_result_to_dict

__all__ = [
    "scan",  # Main entry point
    "scan_project",
    "ScanOrchestrator",
    "ScanResult",
    "scan_result_to_dict",
]
