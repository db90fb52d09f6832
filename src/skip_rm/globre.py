"""Glob to regular expression translation.

Supports ``globstar`` (``**``). Does not support ``extglob``, and
character classes such as ``[:alpha:]`` inside brackets are passed
through untested.
"""

from __future__ import annotations

from typing import Final

# characters escaped outside bracket expressions
_SPECIAL: Final[str] = "/()[]{}?*+-|^$\\.&~# "


def translate(glob: str) -> str:
    """Translate a shell glob into an unanchored regex fragment.

    ``?`` and ``*`` never cross a ``/``; ``**`` does. A ``[`` without a
    closing ``]`` is taken literally.

    Args:
        glob: Glob pattern.

    Returns:
        str: Regex fragment. Callers add ``^`` and ``$``.
    """
    parts: list[str] = []
    i, n = 0, len(glob)
    while i < n:
        c = glob[i]
        if c == "?":
            parts.append("[^/]")
        elif c == "*":
            if i + 1 < n and glob[i + 1] == "*":
                parts.append(".*")
                i += 1
            else:
                parts.append("[^/]*")
        elif c == "[":
            j = glob.find("]", i + 1)
            if j < 0:
                parts.append("\\[")
            else:
                body = glob[i + 1 : j]
                if body.startswith("!"):
                    body = "^" + body[1:]
                parts.append("[" + body.replace("\\", "\\\\") + "]")
                i = j
        elif c in _SPECIAL:
            parts.append("\\" + c)
        else:
            parts.append(c)
        i += 1
    return "".join(parts)
