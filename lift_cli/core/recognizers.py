"""Recognizers that turn a single line of workout text into a parse outcome.

Each recognizer answers two questions about a raw line:

    can_handle(text) -> bool          # pure check, no side effects
    parse(text) -> ParseOutcome       # only called after can_handle(text)

The dispatcher in ``lift_cli.core.parser`` asks them in priority order.
"""

from __future__ import annotations

import math
from datetime import datetime, timezone
from typing import Callable, List, Optional, Tuple

from lift_cli.core.constants import (
    DEFAULT_UNIT,
    END_WORKOUT_ACTION,
    END_WORKOUT_PHRASES,
    EXERCISE_SET_RE,
    SET_SEPARATOR_RE,
)
from lift_cli.core.models import NO_MATCH, CommandEntry, ExerciseSetEntry, ParseOutcome

Clock = Callable[[], datetime]


class UnimplementedOperationError(NotImplementedError):
    """Raised when a recognizer operation was not overridden."""


class MalformedInputError(ValueError):
    """Raised when text has the exercise-set shape but its numbers do not parse."""


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class Recognizer:
    """Base recognizer. Subclasses must override both operations."""

    name = "recognizer"

    def can_handle(self, text: str) -> bool:
        raise UnimplementedOperationError("can_handle must be implemented")

    def parse(self, text: str) -> ParseOutcome:
        raise UnimplementedOperationError("parse must be implemented")

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


def _parse_reps(raw: str) -> List[int]:
    tokens = SET_SEPARATOR_RE.split(raw.strip())
    if any(not token.isdecimal() for token in tokens):
        raise MalformedInputError(f"Invalid set list: {raw.strip()!r}")
    try:
        return [int(token) for token in tokens]
    except ValueError as exc:
        raise MalformedInputError(f"Invalid set list: {raw.strip()!r}") from exc


def _parse_weight(raw: str) -> float:
    try:
        weight = float(raw.replace(",", "."))
    except ValueError as exc:
        raise MalformedInputError(f"Invalid weight: {raw!r}") from exc
    if not math.isfinite(weight):
        raise MalformedInputError(f"Weight out of range: {raw!r}")
    return weight


def _extract(text: str) -> Optional[Tuple[str, List[int], float, str]]:
    match = EXERCISE_SET_RE.match(text.lower())
    if match is None or not match.group("label").strip():
        return None
    return (
        match.group("label").strip(),
        _parse_reps(match.group("sets")),
        _parse_weight(match.group("weight")),
        match.group("unit") or DEFAULT_UNIT,
    )


class ExerciseSetRecognizer(Recognizer):
    """Recognize lines like ``bench 8, 8, 7 x 100`` or ``deadlift 10 x 225 lbs``."""

    name = "exercise_set"

    def __init__(self, clock: Clock = utc_now) -> None:
        self._clock = clock

    def can_handle(self, text: str) -> bool:
        try:
            return _extract(text) is not None
        except MalformedInputError:
            return False

    def parse(self, text: str) -> ParseOutcome:
        extracted = _extract(text)
        if extracted is None:
            raise MalformedInputError(f"Not an exercise set: {text!r}")
        label, reps, weight, unit = extracted
        return ExerciseSetEntry(
            exercise_name=label,
            reps_per_set=tuple(reps),
            weight=weight,
            unit=unit,
            captured_at=self._clock(),
        )


class EndWorkoutRecognizer(Recognizer):
    """Recognize the ``end`` / ``end workout`` command."""

    name = "end_workout"

    def can_handle(self, text: str) -> bool:
        return text.lower().strip() in END_WORKOUT_PHRASES

    def parse(self, text: str) -> ParseOutcome:
        return CommandEntry(action=END_WORKOUT_ACTION)


class FallbackRecognizer(Recognizer):
    """Catch-all placed last: accepts everything, structures nothing."""

    name = "fallback"

    def can_handle(self, text: str) -> bool:
        return True

    def parse(self, text: str) -> ParseOutcome:
        return NO_MATCH
