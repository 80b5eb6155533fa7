"""Annotated sample archives (`.sample.gz`).

- line 1: metadata JSON object
- lines 2..N: one GTO per line
- whole stream gzip-compressed, written atomically
"""

from __future__ import annotations

from .sample import SAMPLE_SUFFIX, SampleArchive, default_file_name, is_bin_file

__all__ = [
    "SAMPLE_SUFFIX",
    "SampleArchive",
    "default_file_name",
    "is_bin_file",
]
