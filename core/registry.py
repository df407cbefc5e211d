"""
core/registry.py

Maps user-facing exercise names to the exercise functions and runs them.
"""

from dataclasses import dataclass
from typing import Any, Callable

from core.logging import get_logger
from exercises import DEFAULT_FILLER, is_palindrome, split_into_pairs

logger = get_logger(__name__)

EXERCISES: dict[str, Callable[..., Any]] = {
    "palindrome": is_palindrome,
    "pairs": split_into_pairs,
}


class ExerciseError(Exception):
    """Raised when an exercise cannot be dispatched."""


class UnknownExerciseError(ExerciseError):
    pass


@dataclass
class ExerciseResult:
    exercise: str
    text: str
    value: Any


def run_exercise(name: str, text: str, filler: str = DEFAULT_FILLER) -> ExerciseResult:
    """Run exercise `name` on `text`. Only the pair splitter takes `filler`."""
    try:
        func = EXERCISES[name]
    except KeyError:
        known = ", ".join(sorted(EXERCISES))
        raise UnknownExerciseError(f"Unknown exercise {name!r} (expected one of: {known})") from None

    logger.debug("Running %s on %r", name, text)
    if func is split_into_pairs:
        value = func(text, filler=filler)
    else:
        value = func(text)
    return ExerciseResult(exercise=name, text=text, value=value)
