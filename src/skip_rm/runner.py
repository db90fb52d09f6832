"""Run the wrapped command with the forwarded arguments."""

from __future__ import annotations

import logging
import shlex
import subprocess
from collections.abc import Sequence

from skip_rm import SkipRmError

logger = logging.getLogger(__name__)


def quote(*values: object) -> str:
    return " ".join(shlex.quote(str(value)) for value in values)


def run_command(command: str, args: Sequence[str]) -> int:
    """Run ``command`` with ``args`` and wait for it.

    Standard streams are inherited, so output reaches the terminal
    unmodified.

    Args:
        command: Executable name or path.
        args: Arguments passed after the executable.

    Returns:
        int: Exit status; ``128 + N`` when killed by signal ``N``.

    Raises:
        SkipRmError: If the command cannot be started.
    """
    if not command:
        raise SkipRmError("no command configured")

    logger.debug("Running command %s", quote(command, *args))
    try:
        proc = subprocess.run([command, *args], shell=False, check=False)
    except OSError as exc:
        raise SkipRmError(f"cannot run {quote(command)}: {exc}") from exc

    if proc.returncode < 0:
        return 128 - proc.returncode
    return proc.returncode
