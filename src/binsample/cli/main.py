"""binsample CLI entrypoint (Typer).

Subcommands live in `binsample.cli.commands` and register themselves on `app`.
"""

from __future__ import annotations

import typer

from binsample.utils.logger import setup_logger

app = typer.Typer(
    name="binsample",
    add_completion=False,
    no_args_is_help=True,
    help="Annotated sample archives for binning pipeline output.",
)


@app.callback()
def _callback(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Display more frequent log messages."),
) -> None:
    """binsample CLI."""
    setup_logger(verbose=verbose)


@app.command("version")
def version() -> None:
    """Print the installed binsample version."""
    from binsample import __version__

    typer.echo(__version__)


def _register_commands() -> None:
    """Register CLI subcommands.

    Importing these modules must remain lightweight so `binsample --help` is fast.
    """
    from binsample.cli.commands import import_samples as import_samples_cmd
    from binsample.cli.commands import summarize as summarize_cmd

    import_samples_cmd.register(app)
    summarize_cmd.register(app)


_register_commands()


def main() -> None:
    app()
