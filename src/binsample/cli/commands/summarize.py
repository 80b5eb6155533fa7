"""`binsample summarize` command.

Loads a `.sample.gz` archive and lists its genomes as TSV
(sample, genome_id, genome_name, has_quality).
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from binsample.archive.sample import SampleArchive
from binsample.core.errors import FormatError
from binsample.core.tables import genome_table, write_tsv


def register(app: typer.Typer) -> None:
    @app.command("summarize")
    def summarize(
        archive: str = typer.Argument(..., help="Path to a .sample.gz archive."),
        out: Optional[str] = typer.Option(None, "--out", help="Write the TSV here instead of stdout."),
    ) -> None:
        """List the genomes in a sample archive."""
        try:
            sample = SampleArchive.load(Path(archive))
        except (FormatError, OSError) as e:
            typer.echo(f"error: {e}", err=True)
            raise typer.Exit(code=1) from e

        df = genome_table(sample)
        if out:
            write_tsv(df, Path(out))
            typer.echo(str(out))
        else:
            typer.echo(df.to_csv(sep="\t", index=False, lineterminator="\n"), nl=False)
