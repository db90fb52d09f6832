"""Pattern list files — one pattern per line."""

from __future__ import annotations

import logging
from pathlib import Path

from skip_rm import SkipRmError

logger = logging.getLogger(__name__)


def expand_user(path: str) -> str:
    """Expand a leading ``~`` to the current user's home directory.

    Only ``~`` and ``~/...`` are expanded; ``~other`` is left as is.

    Args:
        path: Path that may start with ``~``.

    Returns:
        str: Expanded path.

    Raises:
        SkipRmError: If the home directory cannot be determined.
    """
    if path != "~" and not path.startswith("~/"):
        return path
    try:
        home = Path.home()
    except (KeyError, RuntimeError) as exc:
        raise SkipRmError(f"cannot determine home directory: {exc}") from exc
    if path == "~":
        return str(home)
    return str(home / path[2:])


def read_patterns(list_path: str | Path) -> list[str]:
    """Read patterns from a list file.

    Empty lines are kept as empty patterns. A trailing newline does not
    add one.

    Args:
        list_path: Pattern list file, ``~`` is expanded.

    Returns:
        list[str]: Patterns in file order.

    Raises:
        SkipRmError: If the file cannot be read.
    """
    path = Path(expand_user(str(list_path)))
    try:
        # undecodable bytes round-trip the same way sys.argv does
        text = path.read_text(encoding="utf-8", errors="surrogateescape")
    except OSError as exc:
        raise SkipRmError(f"cannot read pattern list '{path}': {exc}") from exc
    # str.splitlines() would also split on \v, \f and unicode separators
    lines = [line.removesuffix("\r") for line in text.split("\n")]
    if lines[-1] == "":
        lines.pop()
    logger.debug("Read %d pattern(s) from %s", len(lines), path)
    return lines
