"""Tabular views of samples and import reports (pandas).

Column order is fixed and rows are sorted so the TSV output is deterministic.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover
    import pandas as pd

    from binsample.archive.sample import SampleArchive
    from binsample.ingest.importer import ImportReport


GENOME_TABLE_COLUMNS = ["sample", "genome_id", "genome_name", "has_quality"]
REPORT_TABLE_COLUMNS = ["sample", "status", "message"]


def genome_table(sample: "SampleArchive") -> "pd.DataFrame":
    """One row per genome in the sample, sorted by genome ID."""
    import pandas as pd  # local import to keep module import-light

    rows = [
        {
            "sample": sample.name,
            "genome_id": g.id,
            "genome_name": g.name,
            "has_quality": bool(g.has_quality()),
        }
        for g in sample.get_all()
    ]
    df = pd.DataFrame(rows, columns=GENOME_TABLE_COLUMNS)
    df = df.astype({"sample": "string", "genome_id": "string", "genome_name": "string", "has_quality": "bool"})
    return df.sort_values("genome_id", kind="mergesort").reset_index(drop=True)


def report_table(report: "ImportReport") -> "pd.DataFrame":
    """One row per examined sample with status imported|skipped|failed."""
    import pandas as pd

    rows: list[dict[str, str]] = []
    for name, p in zip(report.imported_names, report.imported_paths):
        rows.append({"sample": name, "status": "imported", "message": str(p)})
    for name in report.skipped_names:
        rows.append({"sample": name, "status": "skipped", "message": "archive already exists"})
    for name, message in report.failures:
        rows.append({"sample": name, "status": "failed", "message": message})
    df = pd.DataFrame(rows, columns=REPORT_TABLE_COLUMNS)
    return df.sort_values(["sample", "status"], kind="mergesort").reset_index(drop=True)


def write_tsv(df: "pd.DataFrame", path: str | Path) -> None:
    df.to_csv(path, sep="\t", index=False, lineterminator="\n")


__all__ = [
    "GENOME_TABLE_COLUMNS",
    "REPORT_TABLE_COLUMNS",
    "genome_table",
    "report_table",
    "write_tsv",
]
