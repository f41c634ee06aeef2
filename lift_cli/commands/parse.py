"""Single-line parse command."""

from __future__ import annotations

from typing import List

import typer
from rich.markup import escape

from lift_cli.commands.common import get_state, print_json_payload
from lift_cli.core.models import ExerciseSetEntry, NoMatch
from lift_cli.utils.formatting import format_outcome, format_reps, format_weight


def parse_command(
    ctx: typer.Context,
    words: List[str] = typer.Argument(..., help="Workout line, e.g. 'bench 8, 8, 7 x 100'"),
) -> None:
    """Parse one workout line and show the structured result."""
    state = get_state(ctx)
    text = " ".join(words)
    outcome = state.parser.parse(text)
    exit_code = 1 if isinstance(outcome, NoMatch) else 0

    if state.json_output:
        print_json_payload(state, outcome.to_dict())
        raise typer.Exit(code=exit_code)

    if state.plain_output:
        typer.echo(f"kind\t{outcome.kind}")
        if isinstance(outcome, ExerciseSetEntry):
            typer.echo(f"exercise\t{outcome.exercise_name}")
            typer.echo(f"reps\t{format_reps(outcome.reps_per_set)}")
            typer.echo(f"weight\t{format_weight(outcome.weight, outcome.unit)}")
        elif not isinstance(outcome, NoMatch):
            typer.echo(f"action\t{outcome.action}")
        raise typer.Exit(code=exit_code)

    if isinstance(outcome, NoMatch):
        state.console.print(f"[yellow]Could not parse:[/yellow] {escape(text)}")
    else:
        state.console.print(escape(format_outcome(outcome)))
    raise typer.Exit(code=exit_code)
