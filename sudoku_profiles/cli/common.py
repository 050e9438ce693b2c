"""Shared cli utilities."""

import asyncio
import json
from dataclasses import dataclass
from typing import Any, Awaitable, Optional, TypeVar

import typer
from rich.console import Console
from rich.theme import Theme

from sudoku_profiles.errors import CustomError
from sudoku_profiles.helpers.database_helpers import MongoGateway, close_db, get_db
from sudoku_profiles.services.profile_service import ProfileQueryService
from sudoku_profiles.utils.misc import get_version

T = TypeVar("T")

cli_theme = Theme(
    {
        "info": "bold cyan",
        "warning": "bold yellow",
        "error": "bold red",
        "success": "bold green",
        "title": "bold magenta",
    }
)
console = Console(theme=cli_theme)


@dataclass
class GlobalOptions:
    """Global options for the CLI."""

    quiet: bool = False
    yes: bool = False


def echo(ctx: Optional[typer.Context], message: str, style: str = "info") -> None:
    """Respect global quiet flag; print only if not quiet."""
    quiet = False
    if ctx is not None and isinstance(getattr(ctx, "obj", None), GlobalOptions):
        quiet = ctx.obj.quiet

    if quiet:
        return

    console.print(message, style=style)


def echo_json(data: Any) -> None:
    """Print data as JSON (always, since it is the command's output)."""
    console.print_json(json.dumps(data, default=str))


def version_callback(value: bool) -> None:
    """Callback to display version and exit."""
    if value:
        console.print(
            f"sudoku-profiles v{get_version()}", style="title", highlight=False
        )
        raise typer.Exit()


def get_service() -> ProfileQueryService:
    """Build a service over the configured MongoDB database."""
    return ProfileQueryService(MongoGateway(get_db()))


def run_service_call(coro: Awaitable[T]) -> T:
    """Run one service coroutine, mapping domain errors to exit codes.

    Bad input exits with 2 (like a usage error), any other domain error with 1.
    """

    async def _run() -> T:
        try:
            return await coro
        finally:
            await close_db()

    try:
        return asyncio.run(_run())
    except CustomError as e:
        console.print(f"{e.code.value} (status {e.status_code}): {e}", style="error")
        raise typer.Exit(code=2 if e.status_code == 400 else 1)
