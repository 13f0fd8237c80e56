from __future__ import annotations

import typer

from relbranch import __version__
from relbranch.cli.commands.reconcile_cmd import reconcile
from relbranch.cli.commands.validate_cmd import validate


app = typer.Typer(
    add_completion=False,
    no_args_is_help=True,
    rich_markup_mode="rich",
)


app.command()(reconcile)
app.command()(validate)


def _show_version(value: bool) -> None:
    if value:
        typer.echo(__version__)
        raise typer.Exit(code=0)


@app.callback()
def _main(  # pyright: ignore[reportUnusedFunction]
    version: bool = typer.Option(
        False,
        "--version",
        help="Show version and exit.",
        callback=_show_version,
        is_eager=True,
    ),
) -> None:
    """Keep release/v<major> branches in sync with version tags."""
    del version


def main() -> None:
    app()
