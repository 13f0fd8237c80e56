from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import typer

from relbranch.core.config import Config, load_repo_config
from relbranch.core.errors import ErrorCode
from relbranch.core.result import Err
from relbranch.output.console import ConsoleProtocol, QuietConsole, RichConsole


@dataclass(frozen=True, slots=True)
class CLIContext:
    """Per-invocation state.

    console carries progress and honours --quiet; report_console prints the
    final outcome and is never filtered.
    """

    repo_path: Path
    config: Config
    console: ConsoleProtocol
    report_console: ConsoleProtocol


def build_context(
    repo: Path,
    *,
    config_path: Path | None = None,
    quiet: bool = False,
) -> CLIContext:
    try:
        repo_path = repo.expanduser().resolve()
    except OSError as e:
        typer.echo(f"error: invalid --repo: {e}", err=True)
        raise typer.Exit(code=int(ErrorCode.USER_ERROR))

    config_result = load_repo_config(repo_path, config_path)
    if isinstance(config_result, Err):
        typer.echo(f"error: {config_result.error.message}", err=True)
        raise typer.Exit(code=int(ErrorCode.USER_ERROR))

    report_console = RichConsole()
    console: ConsoleProtocol = QuietConsole(report_console) if quiet else report_console

    return CLIContext(
        repo_path=repo_path,
        config=config_result.value,
        console=console,
        report_console=report_console,
    )
