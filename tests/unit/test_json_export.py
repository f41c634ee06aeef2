import json
from pathlib import Path

from lift_cli.core.models import NO_MATCH, CommandEntry
from lift_cli.core.parser import InputParser
from lift_cli.exporters.json_export import log_payload, write_json


def test_log_payload_counts_and_rows(parser: InputParser) -> None:
    results = [
        ("bench 5 x 100", parser.parse("bench 5 x 100")),
        ("hello", NO_MATCH),
        ("end", CommandEntry(action="end_workout")),
    ]
    payload = log_payload(results)
    assert payload["summary"] == {
        "lines": 3,
        "exercise_sets": 1,
        "commands": 1,
        "unrecognized": 1,
        "workouts": [],
    }
    assert payload["results"][0]["line"] == "bench 5 x 100"
    assert payload["results"][0]["exercise_name"] == "bench"
    assert payload["results"][1] == {"line": "hello", "kind": "no_match"}


def test_write_json_creates_parent_dirs(tmp_path: Path) -> None:
    path = write_json(tmp_path / "nested" / "log.json", {"results": []})
    assert path.exists()
    assert json.loads(path.read_text()) == {"results": []}
