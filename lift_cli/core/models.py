"""Value types returned by the input parser."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, ClassVar, Dict, Optional, Tuple, Union

from lift_cli.core.constants import DEFAULT_UNIT


@dataclass(frozen=True)
class ExerciseSetEntry:
    """One logged exercise: reps for each set at a single weight."""

    exercise_name: str
    reps_per_set: Tuple[int, ...]
    weight: float
    captured_at: datetime
    unit: str = DEFAULT_UNIT
    workout_id: Optional[str] = None

    kind: ClassVar[str] = "exercise_set"

    def __post_init__(self) -> None:
        if not self.reps_per_set:
            raise ValueError("reps_per_set must contain at least one set")

    @property
    def set_count(self) -> int:
        return len(self.reps_per_set)

    @property
    def total_reps(self) -> int:
        return sum(self.reps_per_set)

    @property
    def volume(self) -> float:
        """Total reps times weight, in the entry's own unit."""
        return self.total_reps * self.weight

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": self.kind,
            "exercise_name": self.exercise_name,
            "reps_per_set": list(self.reps_per_set),
            "weight": self.weight,
            "unit": self.unit,
            "captured_at": self.captured_at.isoformat(),
            "workout_id": self.workout_id,
        }


@dataclass(frozen=True)
class CommandEntry:
    """A recognized control command such as ending the current workout."""

    action: str

    kind: ClassVar[str] = "command"

    def to_dict(self) -> Dict[str, Any]:
        return {"kind": self.kind, "action": self.action}


@dataclass(frozen=True)
class NoMatch:
    """Outcome for text that no recognizer could structure."""

    kind: ClassVar[str] = "no_match"

    def to_dict(self) -> Dict[str, Any]:
        return {"kind": self.kind}


NO_MATCH = NoMatch()

ParseOutcome = Union[ExerciseSetEntry, CommandEntry, NoMatch]
