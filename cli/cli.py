"""CLI for the training planner core.

Thin adapter around the core: reads JSON files (or stdin), calls the pure
functions and prints the results. Fetching and pushing live elsewhere.
"""

import json
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import typer
from loguru import logger
from rich.console import Console

from likes_planner.analysis.report import analyze_activities
from likes_planner.config.settings import settings
from likes_planner.core.logger import setup_logger
from likes_planner.errors import LikesPlannerError
from likes_planner.i18n import resolve_locale
from likes_planner.notation.decoder import decode_workout_name
from likes_planner.plans.preview import build_plan_preview, render_plan_preview
from likes_planner.plans.types import PlanBatch

console = Console()
err_console = Console(stderr=True)

app = typer.Typer(
    name="likes-planner",
    help="Likes training planner - activity analysis, notation decoding and plan previews",
    add_completion=False,
)


@dataclass
class CliState:
    """Options shared by all commands."""

    locale: str


_state = CliState(locale=settings.locale)


def _read_json(file: Path | None) -> Any:
    """Read JSON from a file, or from stdin when no file is given.

    Raises:
        typer.Exit: If the file is missing or the content is not valid JSON
    """
    if file is not None:
        if not file.exists():
            err_console.print(f"[red]Error: File not found: {file}[/red]")
            raise typer.Exit(1)
        content = file.read_text(encoding="utf-8")
    else:
        content = sys.stdin.read()

    try:
        return json.loads(content)
    except json.JSONDecodeError as e:
        err_console.print(f"[red]Error: Invalid JSON input: {e}[/red]")
        raise typer.Exit(1) from e


def _format_output(data: dict, pretty: bool = True) -> str:
    if pretty:
        return json.dumps(data, indent=2, ensure_ascii=False)
    return json.dumps(data, ensure_ascii=False)


@app.callback()
def main(
    locale: str = typer.Option(settings.locale, "--locale", "-l", help="Display locale (zh or en)"),
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging"),
) -> None:
    """Configure logging and locale for every command."""
    setup_logger(settings, debug=debug)
    _state.locale = resolve_locale(locale)


@app.command()
def analyze(
    file: Path | None = typer.Argument(None, help="Activities JSON file (reads stdin when omitted)"),
    pretty: bool = typer.Option(True, "--pretty/--compact", help="Pretty-print JSON output"),
) -> None:
    """Summarize a period of activities as a JSON report."""
    payload = _read_json(file)
    try:
        report = analyze_activities(payload, _state.locale)
    except LikesPlannerError as e:
        err_console.print(f"[red]Error: {'; '.join(e.details)}[/red]")
        raise typer.Exit(1) from e

    if "error" in report:
        logger.warning(report["error"])
    # Plain stdout so the report stays machine-readable
    typer.echo(_format_output(report, pretty))


@app.command()
def decode(
    names: list[str] = typer.Argument(..., help="Workout names in compact notation"),
) -> None:
    """Decode workout notation into readable text."""
    for name in names:
        typer.echo(decode_workout_name(name, _state.locale))


@app.command()
def preview(
    file: Path = typer.Argument(..., help="Plans JSON file ({\"plans\": [...]} or a list)"),
) -> None:
    """Show a plan batch grouped by week, without pushing it."""
    payload = _read_json(file)
    try:
        batch = PlanBatch.from_payload(payload)
    except LikesPlannerError as e:
        err_console.print(f"[red]Error: {e.code}[/red]")
        for detail in e.details:
            err_console.print(f"  - {detail}")
        raise typer.Exit(1) from e

    logger.info(f"Previewing {len(batch.plans)} plan(s)")
    console.print(render_plan_preview(build_plan_preview(batch, _state.locale), _state.locale), markup=False, highlight=False, soft_wrap=True)


if __name__ == "__main__":
    app()
