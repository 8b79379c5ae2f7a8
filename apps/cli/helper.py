# apps/cli/helper.py
"""
CLI entry point for the interactive wordle helper.

This script:
  1) Parses flags (word length, optional practice answer, log level).
  2) Configures logging to stderr so it never mixes with the dialogue.
  3) Runs the shell on stdin/stdout until the user exits or input ends.

Run:
  python -m apps.cli.helper
  python -m apps.cli.helper --N 5
  python -m apps.cli.helper --answer crane     # practice mode, feedback is computed
"""

from __future__ import annotations

import argparse
from typing import List, Optional

from packages.harness import HelperShell
from packages.tracker import LengthMismatchError
from packages.utils.logger import configure_logging


def _positive_int(raw: str) -> int:
    try:
        n = int(raw)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"not a number: {raw!r}") from e
    if n <= 0:
        raise argparse.ArgumentTypeError(f"must be positive; got {n}")
    return n


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        description="wordle-guard: flags guesses that contradict earlier feedback",
    )
    ap.add_argument("--N", type=_positive_int, default=None,
                    help="word length (prompted for when omitted)")
    ap.add_argument("--answer", default=None,
                    help="practice mode: score added guesses against this word")
    ap.add_argument("--log-level", default="WARNING",
                    help="logging level (DEBUG, INFO, WARNING, ERROR)")
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    ap = build_parser()
    args = ap.parse_args(argv)

    try:
        configure_logging(args.log_level)
    except ValueError as e:
        ap.error(str(e))

    try:
        shell = HelperShell(input, print, word_length=args.N, answer=args.answer)
    except LengthMismatchError as e:
        ap.error(str(e))

    shell.run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
