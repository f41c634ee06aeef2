import logging
from datetime import datetime, timezone

from lift_cli.core.models import NO_MATCH, CommandEntry, ExerciseSetEntry
from lift_cli.core.session import WorkoutSession

CAPTURED = datetime(2026, 2, 14, 7, 30, tzinfo=timezone.utc)


def _entry(name: str) -> ExerciseSetEntry:
    return ExerciseSetEntry(exercise_name=name, reps_per_set=(5,), weight=100.0, captured_at=CAPTURED)


def test_finalize_stamps_pending_entries() -> None:
    session = WorkoutSession()
    bench, squat = _entry("bench"), _entry("squat")
    session.add(bench)
    session.add(squat)

    finalized = session.finalize("w-1")
    assert [e.exercise_name for e in finalized] == ["bench", "squat"]
    assert {e.workout_id for e in finalized} == {"w-1"}
    assert session.pending == ()
    assert bench.workout_id is None


def test_finalize_generates_workout_id() -> None:
    session = WorkoutSession()
    session.add(_entry("bench"))
    (entry,) = session.finalize()
    assert entry.workout_id is not None
    assert len(entry.workout_id) == 32


def test_finalize_empty_session_returns_nothing() -> None:
    assert WorkoutSession().finalize() == ()


def test_consume_routes_outcomes() -> None:
    session = WorkoutSession()
    assert session.consume(_entry("bench")) == ()
    assert session.consume(NO_MATCH) == ()
    assert session.consume(CommandEntry(action="something_else")) == ()
    assert len(session.pending) == 1

    finalized = session.consume(CommandEntry(action="end_workout"), workout_id="w-2")
    assert [e.workout_id for e in finalized] == ["w-2"]
    assert session.pending == ()


def test_consecutive_workouts_get_distinct_ids() -> None:
    session = WorkoutSession()
    session.add(_entry("bench"))
    (first,) = session.consume(CommandEntry(action="end_workout"))
    session.add(_entry("squat"))
    (second,) = session.consume(CommandEntry(action="end_workout"))
    assert first.workout_id != second.workout_id


def test_finalize_logs_summary(caplog) -> None:
    caplog.set_level(logging.INFO, logger="lift_cli.core.session")
    session = WorkoutSession()
    session.add(_entry("bench"))
    session.finalize("w-3")
    assert "Finalized workout w-3 with 1 exercise(s)" in caplog.text
