"""Static constants and patterns for workout line parsing."""

from __future__ import annotations

import re

DEFAULT_UNIT = "kg"
UNITS = ("kg", "lb", "lbs")

END_WORKOUT_ACTION = "end_workout"
END_WORKOUT_PHRASES = ("end workout", "end")

# "<label> <set-list> x <weight>[ <unit>]", e.g. "bench 8, 8, 7 x 100 kg".
# The label is non-greedy so multi-word names stop at the first set-list run.
EXERCISE_SET_RE = re.compile(
    r"^(?P<label>.+?)\s+(?P<sets>[\d,\s]+)\s*x\s*(?P<weight>[\d.,]+)\s*(?P<unit>lbs?|kg)?\s*$"
)

SET_SEPARATOR_RE = re.compile(r"\s*,\s*|\s+")
