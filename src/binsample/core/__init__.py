"""binsample core: genome records, error taxonomy and tabular views.

This package is intentionally standalone and must not import archive/ingest/CLI
at runtime to avoid circular dependencies.
"""

from __future__ import annotations

from .errors import ConversionError, FormatError, SampleError, ValidationError, error_kind
from .genome import Genome, GenomeParseError, GenomeRecord

__all__ = [
    "ConversionError",
    "FormatError",
    "Genome",
    "GenomeParseError",
    "GenomeRecord",
    "SampleError",
    "ValidationError",
    "error_kind",
]
