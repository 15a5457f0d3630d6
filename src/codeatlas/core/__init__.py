"""Scan pipeline orchestration."""

from .orchestrator import ScanMetadata, ScanOrchestrator, ScanResult, scan_project

__all__ = ["ScanMetadata", "ScanOrchestrator", "ScanResult", "scan_project"]
