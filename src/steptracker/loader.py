"""
Loading and validation of daily step counts from a text file.

Integers are read in encounter order until end of input or until a
token that is not an integer stops the read.
"""

import logging
import re
from pathlib import Path
from typing import Iterable, List, Union

from .sequence import StepSequence


logger = logging.getLogger(__name__)

INT_MIN = -(2 ** 31)
INT_MAX = 2 ** 31 - 1

_INT_PREFIX = re.compile(r"[+-]?[0-9]+")


class StepTrackerError(Exception):
    """Base exception for step tracker errors."""
    pass


class FileOpenError(StepTrackerError):
    """Input file could not be opened for reading."""

    def __init__(self, path: Union[str, Path], reason: str = ""):
        self.path = str(path)
        message = (
            f"Could not open input file '{self.path}'. "
            "Ensure the file exists in the working directory."
        )
        if reason:
            message += f" ({reason})"
        super().__init__(message)


class InsufficientDataError(StepTrackerError):
    """Fewer integers were parsed than the configured minimum."""

    def __init__(self, path: Union[str, Path], count: int, minimum: int):
        self.path = str(path)
        self.count = count
        self.minimum = minimum
        super().__init__(
            f"Only read {count} values from '{self.path}'. "
            f"Expected at least {minimum} integers (one per line). "
            "Tip: Check for non-numeric characters or missing lines."
        )


def parse_integers(tokens: Iterable[str]) -> List[int]:
    """
    Parse integers from whitespace-separated tokens.

    Mirrors formatted stream extraction:
    - a token may hold several signed integers back to back ("12-3")
    - trailing garbage ("12abc") keeps the leading value, then stops
    - a non-numeric token or a value outside 32-bit range stops the read
    """
    values: List[int] = []
    for token in tokens:
        rest = token
        while rest:
            match = _INT_PREFIX.match(rest)
            if match is None:
                return values
            value = int(match.group())
            if not INT_MIN <= value <= INT_MAX:
                logger.debug(f"Value out of range, stopping read: {match.group()}")
                return values
            values.append(value)
            rest = rest[match.end():]
    return values


def load_steps(
    path: Union[str, Path],
    min_count: int = 30,
    exact: bool = False,
) -> StepSequence:
    """
    Load integers from path into a new StepSequence.

    Args:
        path: Text file with whitespace/newline separated integers
        min_count: Lower bound on the number of values required
        exact: Keep only the first min_count values when more were read

    Returns:
        The loaded sequence

    Raises:
        FileOpenError: If the file cannot be opened
        InsufficientDataError: If fewer than min_count values were parsed
    """
    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8", errors="replace") as f:
            values = parse_integers(f.read().split())
    except OSError as e:
        raise FileOpenError(path, e.strerror or "") from e

    logger.info(f"Read {len(values)} values from {path}")

    if len(values) < min_count:
        raise InsufficientDataError(path, len(values), min_count)

    if exact and len(values) > min_count:
        logger.warning(
            f"File contains more than {min_count} integers. "
            f"Only the first {min_count} will be used."
        )
        values = values[:min_count]

    steps = StepSequence()
    steps.reserve(64)
    for value in values:
        steps.push_back(value)
    return steps
