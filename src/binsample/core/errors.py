"""Error taxonomy for sample conversion, archive loading and import configuration.

Every error raised by this package carries a stable `kind` string so callers can
branch on the category without importing each class:

- "conversion": a sample's bin files are invalid or lack quality data
- "format": an archive on disk is corrupt or not in the expected structure
- "validation": import options are inconsistent or point at missing inputs

Filesystem failures are left as the builtin `OSError` and map to kind "io".
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional


class SampleError(Exception):
    """Base class for all binsample errors."""

    kind = "unknown"


class ConversionError(SampleError):
    """A binning output directory could not be converted into a sample."""

    kind = "conversion"

    def __init__(self, message: str, *, path: Optional[Path] = None) -> None:
        super().__init__(message)
        self.path = path


class FormatError(SampleError):
    """An archive file is not in the expected `.sample.gz` structure."""

    kind = "format"

    def __init__(self, message: str, *, path: Optional[Path] = None, line: Optional[int] = None) -> None:
        super().__init__(message)
        self.path = path
        self.line = line


class ValidationError(SampleError, ValueError):
    """Import options are invalid; raised before any work begins."""

    kind = "validation"


def error_kind(exc: BaseException) -> str:
    """Map an exception to its category name."""
    if isinstance(exc, SampleError):
        return exc.kind
    if isinstance(exc, OSError):
        return "io"
    return "unknown"


__all__ = [
    "ConversionError",
    "FormatError",
    "SampleError",
    "ValidationError",
    "error_kind",
]
