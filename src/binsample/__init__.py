"""binsample: annotated-sample archives for binning pipeline output.

A sample is a metadata object plus the quality-checked genomes (GTOs) binned
from one specimen, stored as a single gzip line archive `<name>.sample.gz`.
"""

from __future__ import annotations

from binsample.archive import SampleArchive, default_file_name
from binsample.core import ConversionError, FormatError, Genome, SampleError, ValidationError

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "ConversionError",
    "FormatError",
    "Genome",
    "SampleArchive",
    "SampleError",
    "ValidationError",
    "default_file_name",
]
