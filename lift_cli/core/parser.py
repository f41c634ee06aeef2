"""Dispatcher that routes a line of text to the first recognizer that accepts it."""

from __future__ import annotations

import logging
from typing import Optional, Sequence, Tuple

from lift_cli.core.models import NO_MATCH, ParseOutcome
from lift_cli.core.recognizers import (
    Clock,
    EndWorkoutRecognizer,
    ExerciseSetRecognizer,
    FallbackRecognizer,
    Recognizer,
    utc_now,
)

logger = logging.getLogger(__name__)


def default_recognizers(clock: Clock = utc_now) -> Tuple[Recognizer, ...]:
    """Build the standard chain: commands first, then exercise sets, then fallback."""
    return (
        EndWorkoutRecognizer(),
        ExerciseSetRecognizer(clock=clock),
        FallbackRecognizer(),
    )


class InputParser:
    """Ordered recognizer chain. The order is fixed once constructed."""

    def __init__(self, recognizers: Optional[Sequence[Recognizer]] = None) -> None:
        self._recognizers: Tuple[Recognizer, ...] = (
            tuple(recognizers) if recognizers is not None else default_recognizers()
        )

    @property
    def recognizers(self) -> Tuple[Recognizer, ...]:
        return self._recognizers

    def parse(self, text: str) -> ParseOutcome:
        """Return the outcome of the first recognizer whose can_handle accepts text."""
        for recognizer in self._recognizers:
            if recognizer.can_handle(text):
                outcome = recognizer.parse(text)
                logger.debug("%r handled by %s -> %s", text, recognizer.name, outcome.kind)
                return outcome
        logger.debug("%r matched no recognizer", text)
        return NO_MATCH


_default_parser = InputParser()


def parse_input(text: str) -> ParseOutcome:
    """Parse text with the process-wide default parser."""
    return _default_parser.parse(text)
