"""`binsample import` command.

Imports samples from a binning output directory complex. The input directory
holds one subdirectory per sample; the output directory receives one
`<sample>.sample.gz` archive per completed run.

Exit codes:
- 0: run finished (individual samples may still have failed conversion)
- 1: an archive could not be written or an unexpected I/O error occurred
- 2: invalid options (e.g. `--missing` with `--clear`, missing input directory)
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from binsample.core.errors import FormatError, ValidationError
from binsample.ingest.importer import ImportConfig, run_import
from binsample.utils.logger import get_logger

LOG = get_logger("cli")


def register(app: typer.Typer) -> None:
    @app.command("import")
    def import_samples(
        in_dir: str = typer.Argument(..., help="Input directory containing binned samples in subdirectories."),
        out_dir: str = typer.Argument(..., help="Output directory to contain the annotated samples."),
        missing: bool = typer.Option(False, "--missing", help="Only copy samples not already in the output directory."),
        clear: bool = typer.Option(False, "--clear", help="Erase the output directory before copying."),
        report: Optional[str] = typer.Option(
            None,
            "--report",
            help="Write a per-sample TSV report (sample, status, message) to this path.",
        ),
    ) -> None:
        """Copy samples from binning output directories into sample archives."""
        try:
            config = ImportConfig(
                input_root=Path(in_dir),
                output_root=Path(out_dir),
                missing_only=missing,
                clear_first=clear,
            )
            config.validate()
        except ValidationError as e:
            raise typer.BadParameter(str(e)) from e

        try:
            result = run_import(config)
        except (FormatError, OSError) as e:
            LOG.error("Import aborted: %s", e)
            typer.echo(f"error: {e}", err=True)
            raise typer.Exit(code=1) from e

        if report:
            from binsample.core.tables import report_table, write_tsv

            write_tsv(report_table(result), Path(report))

        typer.echo(result.summary())
