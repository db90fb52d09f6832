"""CLI entry point for skip-rm — I/O boundary only."""

from __future__ import annotations

import logging
import os
import sys
from collections.abc import Sequence

from skip_rm import SkipRmError
from skip_rm.config import Config, load_config
from skip_rm.filter import Classification, classify
from skip_rm.matcher import build_matcher_set
from skip_rm.runner import run_command


def filter_args(argv: Sequence[str], config: Config) -> Classification:
    """Classify ``argv`` with the patterns selected by ``config``.

    This function has no side effects beyond reading the pattern list
    and is the primary test target for CLI behavior.

    Args:
        argv: Argument list without program name.
        config: Loaded configuration.

    Returns:
        Classification: Forwarded and skipped arguments.

    Raises:
        SkipRmError: On an invalid configuration or pattern list.
    """
    mode = config.mode_value
    matcher_set = build_matcher_set(config.list_path, config.syntax)
    return classify(argv, matcher_set, mode)


def report_skipped(skipped: Sequence[str]) -> None:
    for arg in skipped:
        sys.stderr.write(f"skipping {arg}...\n")


def _setup_logging() -> None:
    level = os.environ.get("SKIP_RM_LOG_LEVEL", "WARNING").upper()
    logging.basicConfig(
        format="skip-rm: %(levelname)s %(name)s %(message)s",
        level=level if level in logging.getLevelNamesMapping() else "WARNING",
    )


def main() -> None:
    """Run the CLI entry point with process arguments.

    Every argument belongs to the wrapped command; skip-rm has no
    options of its own. Exits with the command's status, or with code
    1 on user-facing errors.
    """
    _setup_logging()
    try:
        config = load_config()
        result = filter_args(sys.argv[1:], config)
    except SkipRmError as exc:
        sys.stderr.write(f"skip-rm: {exc}\n")
        sys.exit(1)

    report_skipped(result.skipped)
    sys.stderr.flush()

    try:
        returncode = run_command(config.command, result.forward)
    except SkipRmError as exc:
        sys.stderr.write(f"skip-rm: {exc}\n")
        sys.exit(1)
    sys.exit(returncode)
