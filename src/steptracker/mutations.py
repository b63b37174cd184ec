"""
Scripted container mutations applied to the live step sequence.

Each step checks its own precondition; a step that cannot run is
reported as skipped and the script moves on.
"""

import logging
from typing import Callable, List, Optional, TextIO

from .models import MutationStepReport, TrackerConfig
from .reporter import print_sequence
from .sequence import StepSequence


logger = logging.getLogger(__name__)


def _report(steps: StepSequence, step: str, applied: bool, detail: str = "") -> MutationStepReport:
    if not applied:
        logger.debug(f"Mutation step '{step}' skipped: {detail}")
    return MutationStepReport(
        step=step,
        applied=applied,
        size=steps.size,
        capacity=steps.capacity,
        detail=detail,
    )


def reserve_headroom(
    steps: StepSequence,
    config: TrackerConfig,
    file: Optional[TextIO] = None,
) -> MutationStepReport:
    target = steps.size + config.reserve_headroom
    steps.reserve(target)
    return _report(steps, "reserve", True, f"requested capacity {target}")


def append_values(
    steps: StepSequence,
    config: TrackerConfig,
    file: Optional[TextIO] = None,
) -> MutationStepReport:
    first = steps.back() + config.append_step if not steps.empty() else config.seed_value
    steps.push_back(first)
    second = steps.back() + config.append_step
    steps.push_back(second)
    return _report(steps, "push_back", True, f"appended {first}, {second}")


def remove_last(
    steps: StepSequence,
    config: TrackerConfig,
    file: Optional[TextIO] = None,
) -> MutationStepReport:
    if steps.empty():
        return _report(steps, "pop_back", False, "sequence is empty")
    removed = steps.pop_back()
    return _report(steps, "pop_back", True, f"removed {removed}")


def adjust_edges(
    steps: StepSequence,
    config: TrackerConfig,
    file: Optional[TextIO] = None,
) -> MutationStepReport:
    if steps.empty():
        return _report(steps, "adjust_edges", False, "sequence is empty")
    # Front and back are the same slot for a single element; it gets both.
    steps[0] += config.edge_delta
    steps[steps.size - 1] += config.edge_delta
    return _report(
        steps, "adjust_edges", True,
        f"front={steps.front()} back={steps.back()}",
    )


def insert_sentinel(
    steps: StepSequence,
    config: TrackerConfig,
    file: Optional[TextIO] = None,
) -> MutationStepReport:
    if steps.size < 2:
        return _report(steps, "insert_sentinel", False, "needs at least 2 elements")
    steps.insert(1, config.sentinel)
    return _report(steps, "insert_sentinel", True, f"inserted {config.sentinel} at index 1")


def erase_sentinel(
    steps: StepSequence,
    config: TrackerConfig,
    file: Optional[TextIO] = None,
) -> MutationStepReport:
    if steps.size < 2 or steps.at(1) != config.sentinel:
        return _report(steps, "erase_sentinel", False, "index 1 does not hold the sentinel")
    steps.erase(1)
    return _report(steps, "erase_sentinel", True, f"erased {config.sentinel} from index 1")


def swap_with_baseline(
    steps: StepSequence,
    config: TrackerConfig,
    file: Optional[TextIO] = None,
) -> MutationStepReport:
    if steps.empty():
        return _report(steps, "swap_baseline", False, "sequence is empty")

    baseline = StepSequence([config.baseline_value] * steps.size)
    steps.swap(baseline)
    print(
        f"After swap, first {config.baseline_preview} of live (baseline) values:",
        file=file,
    )
    print_sequence(steps.to_list()[:config.baseline_preview], config, file=file)
    steps.swap(baseline)
    return _report(steps, "swap_baseline", True, "swapped with baseline and restored")


def shrink(
    steps: StepSequence,
    config: TrackerConfig,
    file: Optional[TextIO] = None,
) -> MutationStepReport:
    steps.shrink_to_fit()
    return _report(steps, "shrink_to_fit", True)


MUTATION_SCRIPT: List[Callable[..., MutationStepReport]] = [
    reserve_headroom,
    append_values,
    remove_last,
    adjust_edges,
    insert_sentinel,
    erase_sentinel,
    swap_with_baseline,
    shrink,
]


def run_mutation_script(
    steps: StepSequence,
    config: TrackerConfig,
    file: Optional[TextIO] = None,
) -> List[MutationStepReport]:
    """
    Apply the fixed mutation script in order and print a line per step.

    Returns:
        One report per step, including skipped ones
    """
    print("\n--- Container demo ---", file=file)
    reports = []
    for step in MUTATION_SCRIPT:
        report = step(steps, config, file=file)
        status = "ok" if report.applied else "skipped"
        line = f"[{report.step}] {status}: size={report.size} capacity={report.capacity}"
        if report.detail:
            line += f" ({report.detail})"
        print(line, file=file)
        reports.append(report)
    return reports


def uniform_shift(steps: StepSequence, delta: int = 100) -> None:
    """Add delta to every element, in index order, in place."""
    for i in range(len(steps)):
        steps[i] += delta
