"""
Entry point for running the step tracker as a module.

Usage:
    python -m steptracker run --input steps.txt
    python -m steptracker run --top-k 10 --report-json runs/report.json
    python -m steptracker stats --input steps.txt
"""

import sys

from .cli import main

if __name__ == "__main__":
    sys.exit(main())
