"""JSON export of parsed workout logs."""

from __future__ import annotations

import json
from collections import Counter
from pathlib import Path
from typing import Any, Dict, Sequence, Tuple

from lift_cli.core.models import ParseOutcome


def log_payload(results: Sequence[Tuple[str, ParseOutcome]]) -> Dict[str, Any]:
    """Pair each input line with its outcome and add per-kind counts."""
    counts = Counter(outcome.kind for _, outcome in results)
    workout_ids = []
    for _, outcome in results:
        workout_id = getattr(outcome, "workout_id", None)
        if workout_id and workout_id not in workout_ids:
            workout_ids.append(workout_id)
    return {
        "results": [{"line": line, **outcome.to_dict()} for line, outcome in results],
        "summary": {
            "lines": len(results),
            "exercise_sets": counts.get("exercise_set", 0),
            "commands": counts.get("command", 0),
            "unrecognized": counts.get("no_match", 0),
            "workouts": workout_ids,
        },
    }


def write_json(path: Path, payload: Any) -> Path:
    """Write payload as pretty JSON and return path."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(payload, indent=2, ensure_ascii=False) + "\n")
    return path
