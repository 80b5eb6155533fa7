"""Low-level helpers for the gzip line container.

Decompressed content is UTF-8 text with one record per `\\n`-terminated line.
Writes go to a sibling temporary file that is renamed into place only after the
stream has been fully flushed and closed, so a reader never observes a
half-written archive.

This module intentionally avoids any dependency on the genome model.
"""

from __future__ import annotations

import gzip
import zlib
from pathlib import Path
from typing import Iterable, Iterator

from binsample.core.errors import FormatError


def _temp_path(path: Path) -> Path:
    return path.with_name(f".{path.name}.tmp")


def write_lines_gz(path: Path, lines: Iterable[str]) -> None:
    """Write lines into a gzip file at `path`, replacing it atomically."""
    path = Path(path)
    tmp = _temp_path(path)
    try:
        # newline="\n" prevents platform newline translation inside the stream
        with gzip.open(tmp, "wt", encoding="utf-8", newline="\n") as f:
            for line in lines:
                f.write(line)
                f.write("\n")
        tmp.replace(path)
    except BaseException:
        tmp.unlink(missing_ok=True)
        raise


def iter_lines_gz(path: Path) -> Iterator[tuple[int, str]]:
    """Yield `(line_number, text)` pairs from a gzip file, 1-based, newline stripped.

    A corrupt compressed stream or non-UTF-8 content raises `FormatError`;
    a missing or unreadable file raises `OSError` when the generator starts.
    """
    path = Path(path)
    with path.open("rb") as raw:
        with gzip.open(raw, "rt", encoding="utf-8", newline="\n") as f:
            lineno = 0
            try:
                for line in f:
                    lineno += 1
                    yield lineno, line[:-1] if line.endswith("\n") else line
            except (gzip.BadGzipFile, EOFError, zlib.error) as e:
                raise FormatError(f"{path}: corrupt gzip stream ({e})", path=path, line=lineno + 1) from e
            except UnicodeDecodeError as e:
                raise FormatError(f"{path}: content is not UTF-8 text", path=path, line=lineno + 1) from e


__all__ = [
    "iter_lines_gz",
    "write_lines_gz",
]
