"""Shared helpers for CLI commands."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import typer

from relbranch.output.outcome import outcome_exit_code, print_outcome
from relbranch.release.outcome import Outcome

if TYPE_CHECKING:
    from relbranch.cli.context import CLIContext


def finish(outcome: Outcome, ctx: CLIContext, *, as_json: bool) -> None:
    """Report the outcome and exit with its code when it failed.

    With as_json the outcome is written to stdout as JSON; diagnostics stay
    on stderr either way.
    """
    if as_json:
        typer.echo(json.dumps(outcome.to_dict(), indent=2))
    else:
        print_outcome(outcome, ctx.report_console)

    code = outcome_exit_code(outcome)
    if code != 0:
        raise typer.Exit(code=code)
