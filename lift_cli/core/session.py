"""Workout session bookkeeping for parsed exercise sets."""

from __future__ import annotations

import logging
import uuid
from dataclasses import replace
from typing import List, Optional, Tuple

from lift_cli.core.constants import END_WORKOUT_ACTION
from lift_cli.core.models import CommandEntry, ExerciseSetEntry, ParseOutcome

logger = logging.getLogger(__name__)


class WorkoutSession:
    """Collect exercise sets until the workout is ended, then stamp a workout id."""

    def __init__(self) -> None:
        self._pending: List[ExerciseSetEntry] = []

    @property
    def pending(self) -> Tuple[ExerciseSetEntry, ...]:
        return tuple(self._pending)

    def add(self, entry: ExerciseSetEntry) -> None:
        self._pending.append(entry)

    def finalize(self, workout_id: Optional[str] = None) -> Tuple[ExerciseSetEntry, ...]:
        """Assign a workout id to all pending entries and start a new workout."""
        if not self._pending:
            return ()
        assigned = workout_id or uuid.uuid4().hex
        finalized = tuple(replace(entry, workout_id=assigned) for entry in self._pending)
        self._pending = []
        logger.info("Finalized workout %s with %d exercise(s)", assigned, len(finalized))
        return finalized

    def consume(
        self,
        outcome: ParseOutcome,
        workout_id: Optional[str] = None,
    ) -> Tuple[ExerciseSetEntry, ...]:
        """Apply a parser outcome; returns the entries finalized by it, if any."""
        if isinstance(outcome, ExerciseSetEntry):
            self.add(outcome)
            return ()
        if isinstance(outcome, CommandEntry) and outcome.action == END_WORKOUT_ACTION:
            return self.finalize(workout_id)
        return ()
