"""Argument filtering: blacklist/whitelist classification of argv."""

from __future__ import annotations

import enum
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Protocol

from skip_rm import SkipRmError


class Mode(enum.Enum):
    """Which arguments a matching pattern selects for skipping."""

    BLACKLIST = "blacklist"
    WHITELIST = "whitelist"

    @classmethod
    def parse(cls, value: str) -> Mode:
        """Convert a configuration value into a ``Mode``.

        Raises:
            SkipRmError: If ``value`` is not a known mode.
        """
        try:
            return cls(value)
        except ValueError:
            known = ", ".join(m.value for m in cls)
            raise SkipRmError(f"invalid mode '{value}'. Known modes: {known}") from None


class PathMatcher(Protocol):
    """Anything that can tell whether an argument matches a pattern."""

    def matches(self, path: str) -> bool: ...


@dataclass(frozen=True, slots=True)
class Classification:
    """Result of classifying an argument list.

    Attributes:
        forward: Arguments passed on to the command, in input order.
        skipped: Arguments dropped, in input order.
    """

    forward: list[str] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)


class ArgumentFilter:
    """Split argv into forwarded and skipped arguments.

    Flags are forwarded untested until ``--`` is seen; afterwards
    dash-prefixed arguments are ordinary operands. ``--`` itself is
    always forwarded, and a lone ``-`` is always tested.
    """

    def __init__(self, matcher: PathMatcher, mode: Mode) -> None:
        """Initialize argument filter.

        Args:
            matcher: Pattern set that arguments are tested against.
            mode: Blacklist skips matches, whitelist skips non-matches.
        """
        self._matcher = matcher
        self._mode = mode

    def should_skip(self, arg: str) -> bool:
        """Return whether a match-eligible argument is skipped.

        Args:
            arg: Argument to test.

        Returns:
            bool: ``True`` when the argument must not be forwarded.
        """
        matched = self._matcher.matches(arg)
        if self._mode is Mode.BLACKLIST:
            return matched
        return not matched

    def classify(self, args: Iterable[str]) -> Classification:
        """Classify arguments left to right.

        Args:
            args: Argument list without the program name.

        Returns:
            Classification: Forwarded and skipped arguments.
        """
        forward: list[str] = []
        skipped: list[str] = []
        ddash = False
        for arg in args:
            if arg == "--":
                ddash = True
                forward.append(arg)
            elif arg != "-" and arg.startswith("-") and not ddash:
                forward.append(arg)
            elif self.should_skip(arg):
                skipped.append(arg)
            else:
                forward.append(arg)
        return Classification(forward, skipped)


def classify(args: Iterable[str], matcher: PathMatcher, mode: Mode) -> Classification:
    """Classify ``args`` against ``matcher`` under ``mode``.

    Args:
        args: Argument list without the program name.
        matcher: Pattern set, usually a ``MatcherSet``.
        mode: Blacklist or whitelist.

    Returns:
        Classification: Forwarded and skipped arguments.
    """
    return ArgumentFilter(matcher, mode).classify(args)
