"""Bulk import of binning output directories into `.sample.gz` archives.

The input root holds one subdirectory per sample. A subdirectory is a
completed binning run if it contains the evaluation index `Eval/index.tbl`;
anything else is skipped. Each completed run is converted with
`SampleArchive.convert` and written to `<output_root>/<name>.sample.gz`.

Policies:
- `missing_only`: leave samples that already have an archive untouched
- `clear_first`: erase the output directory before importing
The two are mutually exclusive.

A `ConversionError` only fails its own sample; the batch keeps going. Any
other error (I/O, unexpected content) stops the run.
"""

from __future__ import annotations

import shutil
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Iterable

from binsample.archive.sample import SampleArchive, default_file_name
from binsample.core.errors import ConversionError, ValidationError
from binsample.utils.logger import get_logger

LOG = get_logger("import")

MARKER_FILE = Path("Eval") / "index.tbl"


@dataclass(frozen=True)
class ImportConfig:
    input_root: Path
    output_root: Path
    missing_only: bool = False
    clear_first: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "input_root", Path(self.input_root))
        object.__setattr__(self, "output_root", Path(self.output_root))
        if self.missing_only and self.clear_first:
            raise ValidationError("--missing and --clear are mutually exclusive.")

    def validate(self) -> None:
        """Check the inputs exist; called before anything is written."""
        if not self.input_root.is_dir():
            raise ValidationError(f"Input directory {self.input_root} is not found or invalid.")
        if self.output_root.exists() and not self.output_root.is_dir():
            raise ValidationError(f"Output path {self.output_root} exists and is not a directory.")


@dataclass
class ImportReport:
    examined: int = 0
    imported: int = 0
    skipped: int = 0
    failed: int = 0
    imported_names: list[str] = field(default_factory=list)
    imported_paths: list[Path] = field(default_factory=list)
    skipped_names: list[str] = field(default_factory=list)
    failures: list[tuple[str, str]] = field(default_factory=list)

    def summary(self) -> str:
        return (
            f"{self.examined} samples checked: {self.imported} imported, "
            f"{self.skipped} skipped, {self.failed} failed."
        )


def is_complete(sample_dir: Path) -> bool:
    return sample_dir.is_dir() and (sample_dir / MARKER_FILE).is_file()


def discover_candidates(input_root: str | Path) -> list[Path]:
    """Return the completed binning runs under `input_root`, sorted by name."""
    root = Path(input_root)
    candidates: list[Path] = []
    for child in sorted(root.iterdir()):
        if not child.is_dir():
            continue
        if is_complete(child):
            candidates.append(child)
        else:
            LOG.info("Skipping %s: binning run is incomplete.", child.name)
    LOG.info("%d binned samples found in %s.", len(candidates), root)
    return candidates


def prepare_output(output_root: str | Path, clear_first: bool = False) -> None:
    """Create the output directory, or erase its contents when `clear_first` is set."""
    out = Path(output_root)
    if not out.is_dir():
        LOG.info("Creating output directory %s.", out)
        out.mkdir(parents=True, exist_ok=True)
    elif clear_first:
        LOG.info("Erasing output directory %s.", out)
        for child in out.iterdir():
            if child.is_dir() and not child.is_symlink():
                shutil.rmtree(child)
            else:
                child.unlink()
    else:
        LOG.info("Samples will be copied into %s.", out)


def import_all(
    candidates: Iterable[Path],
    output_root: str | Path,
    missing_only: bool = False,
    *,
    convert: Callable[[Path], SampleArchive] = SampleArchive.convert,
) -> ImportReport:
    """Convert and save each candidate directory, returning the tallies."""
    out = Path(output_root)
    samples = list(candidates)
    report = ImportReport()
    for sample_dir in samples:
        report.examined += 1
        sample_name = sample_dir.name
        target = out / default_file_name(sample_name)
        if missing_only and target.exists():
            LOG.info("Skipping sample %s: sample already exists.", sample_name)
            report.skipped += 1
            report.skipped_names.append(sample_name)
            continue
        LOG.info("Loading sample %s (%d of %d).", sample_dir, report.examined, len(samples))
        try:
            imported = convert(sample_dir)
        except ConversionError as e:
            LOG.error("Sample %s needs to be rerun: %s", sample_name, e)
            report.failed += 1
            report.failures.append((sample_name, str(e)))
            continue
        LOG.info("Saving sample to %s.", target)
        imported.save(target)
        report.imported += 1
        report.imported_names.append(sample_name)
        report.imported_paths.append(target)
    LOG.info("All done. %s", report.summary())
    return report


def run_import(config: ImportConfig) -> ImportReport:
    """Validate `config`, prepare the output directory and import every completed run."""
    config.validate()
    LOG.info("Copying samples from %s.", config.input_root)
    prepare_output(config.output_root, clear_first=config.clear_first)
    candidates = discover_candidates(config.input_root)
    return import_all(candidates, config.output_root, missing_only=config.missing_only)


__all__ = [
    "ImportConfig",
    "ImportReport",
    "MARKER_FILE",
    "discover_candidates",
    "import_all",
    "is_complete",
    "prepare_output",
    "run_import",
]
