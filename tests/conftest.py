"""Pytest configuration: puts `src/` on `sys.path` and provides GTO and binning-directory builders."""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import Any, Iterator

import pytest


def pytest_configure() -> None:
    repo_root = Path(__file__).resolve().parents[1]
    src_dir = repo_root / "src"
    sys.path.insert(0, str(src_dir))


@pytest.fixture(autouse=True)
def _reset_binsample_logger() -> Iterator[None]:
    # CLI tests attach a handler bound to the runner's stderr; drop it afterwards.
    yield
    logger = logging.getLogger("binsample")
    for h in list(logger.handlers):
        logger.removeHandler(h)
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


# =============================================================================
# Shared Test Helpers for GTO / binning directories
# =============================================================================

MTB_ID = "1773.22803"
MTB_NAME = "Mycobacterium tuberculosis clonal population"


def make_gto(genome_id: str, name: str = "", *, quality: bool = True, **extra: Any) -> dict[str, Any]:
    """Create a minimal GTO dict."""
    gto: dict[str, Any] = {
        "id": genome_id,
        "scientific_name": name,
        "domain": "Bacteria",
        "contigs": [{"id": f"{genome_id}.con.0001", "dna": "acgt"}],
        "features": [],
    }
    if quality:
        gto["quality"] = {"checkm_completeness": 98.5, "checkm_contamination": 0.4, "genome_length": 4411532}
    gto.update(extra)
    return gto


def write_gto(path: Path, gto: dict[str, Any]) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    # Native GTO files are pretty-printed, unlike the single-line archive records.
    path.write_text(json.dumps(gto, indent=4) + "\n", encoding="utf-8")
    return path


def make_sample_dir(
    root: Path,
    name: str,
    bins: dict[str, Any],
    *,
    complete: bool = True,
) -> Path:
    """Create a binning output directory.

    `bins` maps file name -> GTO dict (written as JSON) or str (written verbatim).
    """
    sample_dir = root / name
    sample_dir.mkdir(parents=True, exist_ok=True)
    for file_name, content in bins.items():
        if isinstance(content, str):
            (sample_dir / file_name).write_text(content, encoding="utf-8")
        else:
            write_gto(sample_dir / file_name, content)
    if complete:
        marker = sample_dir / "Eval" / "index.tbl"
        marker.parent.mkdir(parents=True, exist_ok=True)
        marker.write_text("genome_id\tcompleteness\n", encoding="utf-8")
    return sample_dir


def make_rtest_dir(root: Path) -> Path:
    return make_sample_dir(
        root,
        "RTest",
        {
            "bin1.gto": make_gto(MTB_ID, MTB_NAME),
            "bin2.gto": make_gto("1280.44310", "Staphylococcus aureus clonal population"),
        },
    )
