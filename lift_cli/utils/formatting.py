"""Formatting helpers used by console output."""

from __future__ import annotations

from typing import Sequence

from lift_cli.core.models import CommandEntry, ExerciseSetEntry, ParseOutcome


def format_reps(reps: Sequence[int]) -> str:
    """Format reps per set as ``8/8/7``."""
    return "/".join(str(rep) for rep in reps)


def format_weight(weight: float, unit: str) -> str:
    """Format weight without a trailing ``.0`` for whole numbers."""
    value = int(weight) if float(weight).is_integer() else weight
    return f"{value} {unit}"


def format_outcome(outcome: ParseOutcome) -> str:
    """One-line human summary of a parse outcome."""
    if isinstance(outcome, ExerciseSetEntry):
        return (
            f"{outcome.exercise_name}: {format_reps(outcome.reps_per_set)} "
            f"x {format_weight(outcome.weight, outcome.unit)}"
        )
    if isinstance(outcome, CommandEntry):
        return f"command: {outcome.action}"
    return "not recognized"
