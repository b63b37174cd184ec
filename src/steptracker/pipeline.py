"""
Pipeline orchestration for the step tracker.

Runs the fixed sequence of stages over one in-memory StepSequence:
load, raw display, statistics, mutation script, shift and top-K.
"""

import logging
from datetime import datetime
from pathlib import Path
from typing import Optional, TextIO, Union

import orjson

from .loader import load_steps
from .models import RunReport, SequenceStats, TrackerConfig, compute_hash, new_run_id
from .mutations import run_mutation_script, uniform_shift
from .reporter import compute_stats, print_sequence, print_stats, print_top_k
from .sequence import StepSequence


logger = logging.getLogger(__name__)


class StepTracker:
    """Owns the step sequence and drives it through the pipeline."""

    def __init__(self, config: Optional[TrackerConfig] = None, file: Optional[TextIO] = None):
        self.config = config or TrackerConfig()
        self.file = file
        self.steps: StepSequence = StepSequence()
        self.run_id = new_run_id()

    def _print(self, text: str = "") -> None:
        print(text, file=self.file)

    def load(self) -> StepSequence:
        """
        Load and validate the input file.

        Raises:
            FileOpenError, InsufficientDataError: propagated from the loader
        """
        self.steps = load_steps(
            self.config.input_file,
            min_count=self.config.min_days,
            exact=self.config.exact_count,
        )
        return self.steps

    def show_stats(self) -> SequenceStats:
        """Print the raw listing and statistics of the loaded sequence."""
        self._print("Raw step counts (from file):")
        print_sequence(self.steps, self.config, file=self.file)

        stats = compute_stats(self.steps, self.config.preview_count)
        print_stats(stats, file=self.file)
        return stats

    def run(self) -> RunReport:
        """
        Execute the full pipeline.

        Load failures propagate before anything else is printed beyond
        the banner; every later stage only checks preconditions.

        Returns:
            RunReport describing the run
        """
        start_time = datetime.utcnow().isoformat()
        logger.info(f"Pipeline started: run_id={self.run_id}")

        self._print("Step Tracker | daily step counts")
        self._print("Reading daily step counts from file and exercising the container...\n")

        self.load()
        input_hash = compute_hash(self.steps.to_list())

        initial_stats = self.show_stats()

        mutation_steps = run_mutation_script(self.steps, self.config, file=self.file)
        skipped = [r.step for r in mutation_steps if not r.applied]
        if skipped:
            logger.info(f"Skipped mutation steps: {', '.join(skipped)}")

        self._print("\nAfter container demo mutations:")
        print_sequence(self.steps, self.config, file=self.file)

        uniform_shift(self.steps, self.config.shift_delta)
        self._print(f"\nAfter uniform shift ({self.config.shift_delta:+d}):")
        print_sequence(self.steps, self.config, file=self.file)

        best = print_top_k(self.steps, self.config.top_k, self.config, file=self.file)

        self._print("\nDone. Program completed successfully.")

        report = RunReport(
            run_id=self.run_id,
            start_time=start_time,
            end_time=datetime.utcnow().isoformat(),
            config=self.config.model_dump(),
            input_file=self.config.input_file,
            input_hash=input_hash,
            initial_stats=initial_stats,
            mutation_steps=mutation_steps,
            final_values=self.steps.to_list(),
            top_k=best,
        )
        logger.info(f"Pipeline complete: {len(self.steps)} values, top-{len(best)} reported")
        return report


def save_report(report: RunReport, path: Union[str, Path]) -> Path:
    """Write the run report as indented, key-sorted JSON."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "wb") as f:
        f.write(
            orjson.dumps(
                report.model_dump(), option=orjson.OPT_INDENT_2 | orjson.OPT_SORT_KEYS
            )
        )
    logger.info(f"Run report saved to: {path}")
    return path
