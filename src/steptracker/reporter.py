"""
Reporting over the step sequence: raw listings, statistics and top-K.

Computation and printing are kept apart so the numbers can be checked
without parsing printed text.
"""

import logging
from typing import Iterable, List, Optional, Sequence, TextIO

from .models import SequenceStats, TrackerConfig
from .sequence import StepSequence


logger = logging.getLogger(__name__)


# ============================================================================
# Raw Display
# ============================================================================

def format_rows(values: Iterable[int], columns: int = 10, field_width: int = 6) -> List[str]:
    """
    Lay values out in right-justified fixed-width columns.

    Every full row and any trailing partial row becomes one line.
    """
    rows = []
    current = []
    for value in values:
        current.append(f"{value:>{field_width}}")
        if len(current) == columns:
            rows.append("".join(current))
            current = []
    if current:
        rows.append("".join(current))
    return rows


def print_sequence(
    values: Iterable[int],
    config: TrackerConfig,
    file: Optional[TextIO] = None,
) -> None:
    """Print values in rows of config.columns."""
    for row in format_rows(values, config.columns, config.field_width):
        print(row, file=file)


# ============================================================================
# Statistics
# ============================================================================

def compute_stats(steps: StepSequence, preview_count: int = 3) -> SequenceStats:
    """
    Compute count, sum, mean, min/max (first occurrence) and edges.

    Does not modify the sequence.
    """
    count = len(steps)
    total = sum(steps)
    mean = total / count if count else 0.0

    stats = SequenceStats(
        count=count,
        capacity=steps.capacity,
        total=total,
        mean=mean,
        preview=[steps.at(i) for i in range(min(preview_count, count))],
    )

    if count:
        min_index = 0
        max_index = 0
        for i, value in enumerate(steps):
            if value < steps[min_index]:
                min_index = i
            if value > steps[max_index]:
                max_index = i
        stats.minimum = steps[min_index]
        stats.min_index = min_index
        stats.maximum = steps[max_index]
        stats.max_index = max_index
        stats.front = steps.front()
        stats.back = steps.back()

    return stats


def print_stats(stats: SequenceStats, file: Optional[TextIO] = None) -> None:
    """Print a statistics block."""
    print("\n--- Stats ---", file=file)
    print(f"Days (size): {stats.count} (capacity: {stats.capacity})", file=file)

    if stats.count:
        print(f"Front (day 1): {stats.front}", file=file)
        print(f"Back  (day {stats.count}): {stats.back}", file=file)

    print(f"Sum: {stats.total}", file=file)
    print(f"Avg: {stats.mean_display}", file=file)

    if stats.count:
        print(f"Min: {stats.minimum} (index {stats.min_index})", file=file)
        print(f"Max: {stats.maximum} (index {stats.max_index})", file=file)

    print(f"Preview via at(): {', '.join(str(v) for v in stats.preview)}", file=file)


# ============================================================================
# Top-K
# ============================================================================

def top_k(values: Sequence[int], k: int) -> List[int]:
    """
    Return the k largest values in descending order.

    Sorts a copy; the input order is left untouched. k is clamped to the
    number of values, and k == 0 or empty input yields an empty list.
    """
    if not len(values) or k <= 0:
        return []
    k = min(k, len(values))
    ordered = sorted(values)
    ordered.reverse()
    return ordered[:k]


def print_top_k(
    steps: StepSequence,
    k: int,
    config: TrackerConfig,
    file: Optional[TextIO] = None,
) -> List[int]:
    """Print the top-k report; prints nothing when there is nothing to show."""
    best = top_k(steps.to_list(), k)
    if not best:
        logger.debug("Top-K report skipped (empty sequence or k == 0)")
        return best

    print(f"\nTop-{len(best)} (sorted copy, descending):", file=file)
    print_sequence(best, config, file=file)
    return best
