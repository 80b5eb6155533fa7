"""Bulk import of binning output directories."""

from __future__ import annotations

from .importer import ImportConfig, ImportReport, discover_candidates, import_all, prepare_output, run_import

__all__ = [
    "ImportConfig",
    "ImportReport",
    "discover_candidates",
    "import_all",
    "prepare_output",
    "run_import",
]
