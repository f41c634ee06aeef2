"""Batch log command: parse a workout log line by line."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import List, Optional, Tuple

import typer
from rich.markup import escape
from rich.table import Table

from lift_cli.commands.common import get_state, print_json_payload
from lift_cli.core.config import resolve_output_dir
from lift_cli.core.models import ExerciseSetEntry, NoMatch, ParseOutcome
from lift_cli.core.parser import InputParser
from lift_cli.core.session import WorkoutSession
from lift_cli.exporters.json_export import log_payload, write_json
from lift_cli.utils.formatting import format_reps, format_weight

logger = logging.getLogger(__name__)


def read_lines(file_path: Optional[Path], read_stdin: bool, stdin_text: str = "") -> List[str]:
    """Load non-blank input lines from a file or stdin text."""
    if file_path:
        text = file_path.read_text()
    elif read_stdin:
        text = stdin_text
    else:
        return []
    return [line.strip() for line in text.splitlines() if line.strip()]


def run_log(parser: InputParser, lines: List[str]) -> List[Tuple[str, ParseOutcome]]:
    """Parse lines in order; an end command stamps a workout id on the sets before it."""
    session = WorkoutSession()
    results: List[Tuple[str, ParseOutcome]] = []
    pending_rows: List[int] = []

    for line in lines:
        outcome = parser.parse(line)
        if isinstance(outcome, NoMatch):
            logger.warning("Unrecognized line: %s", line)
        if isinstance(outcome, ExerciseSetEntry):
            pending_rows.append(len(results))
        results.append((line, outcome))

        finalized = session.consume(outcome)
        if finalized:
            for row, entry in zip(pending_rows, finalized):
                results[row] = (results[row][0], entry)
            pending_rows = []

    if session.pending:
        logger.info("%d exercise(s) left without an end command", len(session.pending))
    return results


def log_command(
    ctx: typer.Context,
    file: Optional[Path] = typer.Option(None, help="Text file with one workout line per row"),
    stdin: bool = typer.Option(False, "--stdin", help="Read workout lines from stdin"),
    output: Optional[Path] = typer.Option(None, help="Write results as JSON to this file"),
) -> None:
    """Parse a workout log and group exercise sets into workouts."""
    state = get_state(ctx)

    stdin_text = sys.stdin.read() if stdin else ""
    lines = read_lines(file_path=file, read_stdin=stdin, stdin_text=stdin_text)
    if not lines:
        raise typer.BadParameter("Provide --file or --stdin with at least one non-blank line")

    results = run_log(state.parser, lines)
    payload = log_payload(results)

    json_path: Optional[Path] = None
    if output is not None:
        target = output if output.is_absolute() else resolve_output_dir(state.config) / output
        json_path = write_json(target, payload)
        payload["output_file"] = str(json_path)

    if state.json_output:
        print_json_payload(state, payload)
        return

    summary = payload["summary"]
    if state.plain_output:
        typer.echo("line\tkind\texercise\treps\tweight\tworkout_id")
        for line, outcome in results:
            if isinstance(outcome, ExerciseSetEntry):
                fields = [
                    outcome.exercise_name,
                    format_reps(outcome.reps_per_set),
                    format_weight(outcome.weight, outcome.unit),
                    outcome.workout_id or "-",
                ]
            else:
                fields = ["-", "-", "-", "-"]
            typer.echo("\t".join([line, outcome.kind, *fields]))
        typer.echo(f"workouts\t{len(summary['workouts'])}")
        if json_path:
            typer.echo(f"output_file\t{json_path}")
        return

    table = Table(title=f"Workout log ({summary['lines']} lines)")
    table.add_column("Line")
    table.add_column("Result")
    table.add_column("Reps")
    table.add_column("Weight")
    table.add_column("Workout")

    for line, outcome in results:
        if isinstance(outcome, ExerciseSetEntry):
            table.add_row(
                escape(line),
                escape(outcome.exercise_name),
                format_reps(outcome.reps_per_set),
                format_weight(outcome.weight, outcome.unit),
                (outcome.workout_id or "pending")[:8],
            )
        elif isinstance(outcome, NoMatch):
            table.add_row(escape(line), "[yellow]not recognized[/yellow]", "", "", "")
        else:
            table.add_row(escape(line), f"[bold]{outcome.action}[/bold]", "", "", "")

    state.console.print(table)
    state.console.print(
        f"Parsed {summary['exercise_sets']} exercise set(s) into {len(summary['workouts'])} workout(s); "
        f"{summary['unrecognized']} line(s) not recognized"
    )
    if json_path:
        state.console.print(f"Exported to: {json_path}")
