"""
Command-line interface for the step tracker.

Provides commands for the full pipeline run and for a quick
load-and-statistics check of an input file.
"""

import argparse
import logging
import os
import sys
from typing import List, Optional

from dotenv import load_dotenv
from pydantic import ValidationError

from .loader import StepTrackerError
from .models import TrackerConfig
from .pipeline import StepTracker, save_report


logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False) -> None:
    """Configure root logging on stderr."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def load_config_from_env(env_file: Optional[str] = None) -> dict:
    """Load configuration overrides from environment variables."""
    load_dotenv(env_file)

    config = {}
    if os.getenv("STEPTRACKER_INPUT_FILE"):
        config["input_file"] = os.getenv("STEPTRACKER_INPUT_FILE")
    for key, name in (
        ("min_days", "STEPTRACKER_MIN_DAYS"),
        ("top_k", "STEPTRACKER_TOP_K"),
        ("shift_delta", "STEPTRACKER_SHIFT_DELTA"),
        ("field_width", "STEPTRACKER_FIELD_WIDTH"),
        ("columns", "STEPTRACKER_COLUMNS"),
    ):
        if os.getenv(name):
            config[key] = os.getenv(name)

    exact_str = os.getenv("STEPTRACKER_EXACT", "false").lower()
    config["exact_count"] = exact_str in ("true", "1", "yes")
    return config


def build_config(args: argparse.Namespace) -> TrackerConfig:
    """Merge defaults, environment and CLI flags (highest precedence)."""
    overrides = load_config_from_env(args.env_file)

    if args.input:
        overrides["input_file"] = args.input
    if args.min_days is not None:
        overrides["min_days"] = args.min_days
    if args.exact:
        overrides["exact_count"] = True
    if getattr(args, "top_k", None) is not None:
        overrides["top_k"] = args.top_k
    if getattr(args, "shift", None) is not None:
        overrides["shift_delta"] = args.shift

    return TrackerConfig(**overrides)


def cmd_run(args) -> None:
    """Run the full pipeline."""
    config = build_config(args)
    tracker = StepTracker(config)
    report = tracker.run()

    if args.report_json:
        save_report(report, args.report_json)


def cmd_stats(args) -> None:
    """Load the input file and show raw values and statistics."""
    config = build_config(args)
    tracker = StepTracker(config)
    tracker.load()
    tracker.show_stats()


def _add_input_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--input", type=str, help="Input file (default: from env or steps.txt)")
    parser.add_argument(
        "--min-days", type=int, help="Minimum number of values required (default: 30)"
    )
    parser.add_argument(
        "--exact",
        action="store_true",
        help="Keep only the first --min-days values when the file has more",
    )


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="steptracker",
        description="Step Tracker - daily step counts container demo",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--env-file", type=str, help="Path to a .env file")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # Run command
    run_parser = subparsers.add_parser("run", help="Run the full step tracker pipeline")
    _add_input_arguments(run_parser)
    run_parser.add_argument("--top-k", type=int, help="Size of the sorted report (default: 5)")
    run_parser.add_argument("--shift", type=int, help="Uniform shift delta (default: 100)")
    run_parser.add_argument("--report-json", type=str, help="Write a JSON run report to this path")
    run_parser.set_defaults(func=cmd_run)

    # Stats command
    stats_parser = subparsers.add_parser("stats", help="Show raw values and statistics only")
    _add_input_arguments(stats_parser)
    stats_parser.set_defaults(func=cmd_stats)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for CLI. Returns the process exit status."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    setup_logging(args.verbose)

    try:
        args.func(args)
    except StepTrackerError as e:
        print(f"ERROR: {e}")
        print("Terminating program due to input error.")
        logger.error(f"Command failed: {e}")
        return 1
    except ValidationError as e:
        logger.error(f"Invalid configuration: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
