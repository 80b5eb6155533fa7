"""Genome records (GTO) as seen by the sample archive.

The archive only needs four capabilities from a genome record: an identifier,
a display name, a quality check and a single-line serialization. These are
captured by the `GenomeRecord` protocol; `Genome` is the concrete
implementation backed by a Genome Typed Object (GTO) JSON document.

GTO fields used here:
- "id": genome identifier, e.g. "1773.22803" (required, non-empty)
- "scientific_name": display name (optional)
- "quality": evaluation results object; present and non-empty once the
  binning evaluation step has run

All other fields are carried through untouched.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Protocol, runtime_checkable


class GenomeParseError(ValueError):
    """Raised when text or a file is not a well-formed GTO."""


@runtime_checkable
class GenomeRecord(Protocol):
    @property
    def id(self) -> str: ...

    @property
    def name(self) -> str: ...

    def has_quality(self) -> bool: ...

    def to_json_string(self) -> str: ...


class Genome:
    """A GTO genome held as its decoded JSON object."""

    def __init__(self, data: dict[str, Any]) -> None:
        if not isinstance(data, dict):
            raise GenomeParseError(f"GTO: expected JSON object, got {type(data).__name__}")
        gid = data.get("id")
        if not isinstance(gid, str) or not gid.strip():
            raise GenomeParseError("GTO: 'id' must be a non-empty string")
        self._data = data

    @classmethod
    def from_json(cls, text: str) -> "Genome":
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise GenomeParseError(f"GTO: invalid JSON ({e.msg} at line {e.lineno})") from e
        return cls(data)

    @classmethod
    def from_file(cls, path: str | Path) -> "Genome":
        """Read a GTO file from disk.

        I/O problems (missing file, permissions) are raised as `OSError`;
        only content problems become `GenomeParseError`.
        """
        p = Path(path)
        with p.open("r", encoding="utf-8") as f:
            try:
                text = f.read()
            except UnicodeDecodeError as e:
                raise GenomeParseError(f"GTO: {p.name} is not UTF-8 text") from e
        return cls.from_json(text)

    @property
    def id(self) -> str:
        return self._data["id"]

    @property
    def name(self) -> str:
        name = self._data.get("scientific_name")
        return name if isinstance(name, str) else ""

    @property
    def data(self) -> dict[str, Any]:
        return self._data

    def has_quality(self) -> bool:
        quality = self._data.get("quality")
        return isinstance(quality, dict) and bool(quality)

    def to_json_string(self) -> str:
        """Compact JSON on a single line; embedded newlines are escaped."""
        return json.dumps(self._data, separators=(",", ":"), ensure_ascii=False)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Genome):
            return NotImplemented
        return self._data == other._data

    def __repr__(self) -> str:
        return f"Genome(id={self.id!r}, name={self.name!r})"


__all__ = [
    "Genome",
    "GenomeParseError",
    "GenomeRecord",
]
