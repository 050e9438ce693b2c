"""Root cli app wiring."""

import json
from pathlib import Path
from typing import List, Optional

import typer

from sudoku_profiles.cli.common import (
    GlobalOptions,
    echo,
    echo_json,
    get_service,
    run_service_call,
    version_callback,
)
from sudoku_profiles.errors import InvalidRequestError
from sudoku_profiles.helpers.logging_helpers import configure_logger
from sudoku_profiles.helpers.query_helpers import expand_dot
from sudoku_profiles.utils.misc import parse_kv

app = typer.Typer(
    add_completion=True,
    help="Command line interface for Sudoku user active games.",
)


def _filter_from(pairs: Optional[List[str]]) -> dict:
    try:
        return expand_dot(parse_kv(pairs or []))
    except (ValueError, InvalidRequestError) as e:
        raise typer.BadParameter(str(e))


@app.callback(invoke_without_command=False)
def main(
    ctx: typer.Context,
    quiet: bool = typer.Option(
        False, "--quiet", "-q", help="Suppress non-error output."
    ),
    verbose: int = typer.Option(
        0,
        "-v",
        "--verbose",
        count=True,
        help="Increase verbosity: -v for INFO, -vv for DEBUG.",
    ),
    yes: bool = typer.Option(
        False,
        "--yes",
        "-y",
        help='Assume "yes" for all prompts (non-interactive mode).',
    ),
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        help="Show version and exit.",
        callback=version_callback,
        is_eager=True,
    ),
) -> None:
    """Initialize global CLI options and context."""
    ctx.obj = GlobalOptions(quiet=quiet, yes=yes)
    configure_logger(source="sudoku-profiles-cli", quiet=quiet, verbose=verbose)


@app.command("create")
def create(
    ctx: typer.Context,
    path: Path = typer.Argument(
        ..., exists=True, dir_okay=False, help="JSON file: one object or an array."
    ),
) -> None:
    """Store the active games in a JSON file."""
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise typer.BadParameter(f"{path} is not valid JSON: {e}")
    result = run_service_call(get_service().create(data))
    echo(ctx, f"Stored {result['inserted_count']} active game(s).", style="success")
    echo_json(result)


@app.command("search")
def search(
    where: Optional[List[str]] = typer.Argument(
        None, help="Filter as key=value pairs; dotted keys nest."
    ),
) -> None:
    """Print the active games matching the filter."""
    echo_json(run_service_call(get_service().search(_filter_from(where))))


@app.command("update")
def update(
    ctx: typer.Context,
    set_: List[str] = typer.Option(
        ..., "--set", "-s", help="Field to set as key=value (repeatable)."
    ),
    where: Optional[List[str]] = typer.Option(
        None, "--where", "-w", help="Filter as key=value (repeatable)."
    ),
) -> None:
    """Set fields on every active game matching the filter."""
    try:
        patch = parse_kv(set_)
    except ValueError as e:
        raise typer.BadParameter(str(e))
    result = run_service_call(get_service().update(patch, _filter_from(where)))
    echo(ctx, f"Matched {result['matched_count']} active game(s).", style="success")
    echo_json(result)


@app.command("remove")
def remove(
    ctx: typer.Context,
    where: Optional[List[str]] = typer.Argument(
        None, help="Filter as key=value pairs; empty removes everything."
    ),
) -> None:
    """Delete every active game matching the filter."""
    query = _filter_from(where)
    assume_yes = isinstance(ctx.obj, GlobalOptions) and ctx.obj.yes
    if not query and not assume_yes:
        typer.confirm("No filter given; delete ALL active games?", abort=True)
    result = run_service_call(get_service().remove(query))
    echo(ctx, f"Deleted {result['deleted_count']} active game(s).", style="success")
    echo_json(result)


if __name__ == "__main__":
    app()
