"""Annotated samples and their `.sample.gz` archive format.

An annotated sample is a metadata object plus a set of genomes keyed by genome
ID. On disk it is a gzip-compressed text file:

- line 1: the metadata as a single JSON object (at minimum {"name": ...})
- lines 2..N: one GTO per line, in the sample's genome order

Samples are built either from a binning output directory (`convert`) or from
an existing archive (`load`). Conversion requires every bin to carry quality
data; loading trusts what was previously written and does not re-check it.
"""

from __future__ import annotations

import json
import re
from contextlib import closing
from pathlib import Path
from typing import Any, Callable, Iterator, Optional

from binsample.core.errors import ConversionError, FormatError
from binsample.core.genome import Genome, GenomeParseError, GenomeRecord
from binsample.utils.logger import get_logger

from .io import iter_lines_gz, write_lines_gz

LOG = get_logger("sample")

SAMPLE_SUFFIX = ".sample.gz"
NAME_KEY = "name"

BIN_FILE_PATTERN = re.compile(r"bin[0-9]+\.gto")


def default_file_name(name: str) -> str:
    """Return the archive base name for the sample called `name`."""
    return name + SAMPLE_SUFFIX


def is_bin_file(file_name: str) -> bool:
    return BIN_FILE_PATTERN.fullmatch(file_name) is not None


class SampleArchive:
    """In-memory annotated sample: metadata plus genomes keyed by ID."""

    def __init__(
        self,
        metadata: Optional[dict[str, Any]] = None,
        genomes: Optional[dict[str, GenomeRecord]] = None,
    ) -> None:
        self.metadata: dict[str, Any] = dict(metadata) if metadata else {}
        self.genomes: dict[str, GenomeRecord] = dict(genomes) if genomes else {}

    # ---- metadata ----

    @property
    def name(self) -> str:
        """Sample name, or "" if the metadata has none."""
        value = self.metadata.get(NAME_KEY)
        if value is None:
            return ""
        return value if isinstance(value, str) else str(value)

    @name.setter
    def name(self, value: str) -> None:
        self.metadata[NAME_KEY] = value

    def get_name(self) -> str:
        return self.name

    # ---- genomes ----

    def get_genome(self, genome_id: str) -> Optional[GenomeRecord]:
        """Return the genome with the given ID, or None if it is not in the sample."""
        return self.genomes.get(genome_id)

    def get_all(self) -> list[GenomeRecord]:
        """Return a list of all the genomes in the sample."""
        return list(self.genomes.values())

    def ids(self) -> list[str]:
        return list(self.genomes.keys())

    def __len__(self) -> int:
        return len(self.genomes)

    def __contains__(self, genome_id: object) -> bool:
        return genome_id in self.genomes

    def __iter__(self) -> Iterator[GenomeRecord]:
        return iter(self.get_all())

    def __repr__(self) -> str:
        return f"SampleArchive(name={self.name!r}, genomes={len(self.genomes)})"

    def file_name(self, directory: str | Path) -> Path:
        """Return the default archive path for this sample inside `directory`."""
        return Path(directory) / default_file_name(self.name)

    # ---- conversion ----

    @classmethod
    def convert(
        cls,
        sample_dir: str | Path,
        *,
        parser: Callable[[Path], GenomeRecord] = Genome.from_file,
    ) -> "SampleArchive":
        """Create a sample from a binning output directory.

        Every file named `bin<digits>.gto` is parsed as a genome; other files
        are ignored. The whole conversion fails with `ConversionError` if any
        bin is not a valid GTO, has no quality information, or repeats a
        genome ID already taken by another bin in the same directory.
        """
        sample_dir = Path(sample_dir)
        retval = cls()
        retval.name = sample_dir.name

        bin_files = sorted(p for p in sample_dir.iterdir() if is_bin_file(p.name) and p.is_file())
        LOG.debug("%d bin files found in %s.", len(bin_files), sample_dir)

        sources: dict[str, Path] = {}
        for bin_file in bin_files:
            try:
                genome = parser(bin_file)
            except GenomeParseError as e:
                raise ConversionError(f"File {bin_file} is an invalid GTO.", path=bin_file) from e
            if not genome.has_quality():
                raise ConversionError(f"File {bin_file} has no quality information.", path=bin_file)
            if genome.id in sources:
                raise ConversionError(
                    f"File {bin_file} repeats genome {genome.id} already read from {sources[genome.id]}.",
                    path=bin_file,
                )
            sources[genome.id] = bin_file
            retval.genomes[genome.id] = genome
        return retval

    # ---- persistence ----

    def _archive_lines(self) -> Iterator[str]:
        yield json.dumps(self.metadata, separators=(",", ":"), ensure_ascii=False)
        for genome in self.genomes.values():
            yield genome.to_json_string()

    def save(self, path: str | Path) -> None:
        """Write this sample to `path` in `.sample.gz` format, replacing any existing file."""
        write_lines_gz(Path(path), self._archive_lines())

    @classmethod
    def load(
        cls,
        path: str | Path,
        *,
        parser: Callable[[str], GenomeRecord] = Genome.from_json,
    ) -> "SampleArchive":
        """Read a sample from a `.sample.gz` archive.

        Raises `FormatError` if the metadata line is missing or not a JSON
        object, or if any genome line does not parse. Genomes are not
        re-checked for quality.
        """
        path = Path(path)
        with closing(iter_lines_gz(path)) as lines:
            return cls._read_lines(path, lines, parser)

    @classmethod
    def _read_lines(
        cls,
        path: Path,
        lines: Iterator[tuple[int, str]],
        parser: Callable[[str], GenomeRecord],
    ) -> "SampleArchive":
        first = next(lines, None)
        if first is None:
            raise FormatError(f"{path}: archive is empty (no metadata line)", path=path, line=1)
        try:
            metadata = json.loads(first[1])
        except json.JSONDecodeError as e:
            raise FormatError(f"{path}: line 1: metadata is not valid JSON ({e.msg})", path=path, line=1) from e
        if not isinstance(metadata, dict):
            raise FormatError(
                f"{path}: line 1: metadata must be a JSON object, got {type(metadata).__name__}",
                path=path,
                line=1,
            )

        retval = cls(metadata=metadata)
        for lineno, text in lines:
            try:
                genome = parser(text)
            except GenomeParseError as e:
                raise FormatError(f"{path}: line {lineno}: invalid genome record ({e})", path=path, line=lineno) from e
            if genome.id in retval.genomes:
                raise FormatError(f"{path}: line {lineno}: duplicate genome {genome.id}", path=path, line=lineno)
            retval.genomes[genome.id] = genome
        return retval


__all__ = [
    "BIN_FILE_PATTERN",
    "NAME_KEY",
    "SAMPLE_SUFFIX",
    "SampleArchive",
    "default_file_name",
    "is_bin_file",
]
