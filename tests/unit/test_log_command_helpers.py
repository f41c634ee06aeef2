import logging
from pathlib import Path

from lift_cli.commands.log import read_lines, run_log
from lift_cli.core.models import CommandEntry, ExerciseSetEntry, NoMatch
from lift_cli.core.parser import InputParser


def test_read_lines_from_file_skips_blank(tmp_path: Path) -> None:
    path = tmp_path / "log.txt"
    path.write_text("bench 5 x 100\n\n   \n  end  \n")
    assert read_lines(file_path=path, read_stdin=False) == ["bench 5 x 100", "end"]


def test_read_lines_from_stdin_text() -> None:
    assert read_lines(file_path=None, read_stdin=True, stdin_text="a\nb\n") == ["a", "b"]


def test_read_lines_without_source_is_empty() -> None:
    assert read_lines(file_path=None, read_stdin=False) == []


def test_run_log_groups_sets_into_workouts(parser: InputParser) -> None:
    lines = [
        "bench 8, 8, 7 x 100",
        "hello there",
        "squat 5,5 x 120",
        "end",
        "curl 10 x 12,5",
        "end workout",
        "row 10 x 60",
    ]
    results = run_log(parser, lines)

    assert [line for line, _ in results] == lines
    bench, hello, squat, end, curl, end2, row = (outcome for _, outcome in results)
    assert isinstance(hello, NoMatch)
    assert end == CommandEntry(action="end_workout")
    assert end2 == CommandEntry(action="end_workout")
    assert isinstance(bench, ExerciseSetEntry)
    assert bench.workout_id is not None
    assert bench.workout_id == squat.workout_id
    assert curl.workout_id is not None
    assert curl.workout_id != bench.workout_id
    assert curl.weight == 12.5
    assert row.workout_id is None


def test_run_log_warns_on_unrecognized(parser: InputParser, caplog) -> None:
    caplog.set_level(logging.WARNING, logger="lift_cli.commands.log")
    run_log(parser, ["hello there"])
    assert "Unrecognized line: hello there" in caplog.text
