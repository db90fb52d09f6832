"""Compiled matchers for string, glob, and regex patterns."""

from __future__ import annotations

import enum
import logging
import os
import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from pathlib import Path

from skip_rm import SkipRmError
from skip_rm.globre import translate
from skip_rm.patterns import expand_user, read_patterns

logger = logging.getLogger(__name__)


class Syntax(enum.Enum):
    """How every pattern in a list is interpreted."""

    STRING = "string"
    GLOB = "glob"
    REGEX = "regex"

    @classmethod
    def parse(cls, value: str) -> Syntax:
        """Convert a configuration value into a ``Syntax``.

        Raises:
            SkipRmError: If ``value`` is not a known syntax.
        """
        try:
            return cls(value)
        except ValueError:
            known = ", ".join(s.value for s in cls)
            raise SkipRmError(
                f"invalid matcher '{value}'. Known matchers: {known}"
            ) from None


def canonical(path: str) -> str:
    """Return the absolute, lexically normalized form of ``path``.

    Symlinks are not resolved.

    Raises:
        SkipRmError: If the working directory cannot be determined.
    """
    try:
        return os.path.abspath(path)
    except OSError as exc:
        raise SkipRmError(f"cannot resolve '{path}': {exc}") from exc


def _compile(pattern: str, source: str) -> re.Pattern[str]:
    # \Z rather than $: "$" also matches before a trailing newline
    try:
        return re.compile(f"^{pattern}\\Z")
    except re.error as exc:
        raise SkipRmError(f"invalid pattern '{source}': {exc}") from exc


@dataclass(frozen=True, slots=True)
class Matcher:
    """A single compiled pattern.

    Attributes:
        pattern: Pattern text as written in the list file.
        syntax: Syntax the pattern was compiled with.
        regex: Anchored regex for glob and regex syntax, ``None`` for
            plain strings.
    """

    pattern: str
    syntax: Syntax
    regex: re.Pattern[str] | None = None

    def matches(self, path: str) -> bool:
        """Return whether the canonical form of ``path`` matches.

        The pattern itself is never canonicalized.
        """
        return self.matches_canonical(canonical(path))

    def matches_canonical(self, candidate: str) -> bool:
        """Match an already canonical path."""
        if self.regex is None:
            return candidate == self.pattern
        return self.regex.search(candidate) is not None


def build_matcher(pattern: str, syntax: Syntax) -> Matcher:
    """Compile one pattern.

    Glob patterns get ``~`` expansion before translation; string and
    regex patterns are used verbatim.

    Args:
        pattern: Pattern text.
        syntax: Pattern syntax.

    Returns:
        Matcher: Compiled matcher.

    Raises:
        SkipRmError: If the resulting regex does not compile.
    """
    if syntax is Syntax.STRING:
        return Matcher(pattern, syntax)
    if syntax is Syntax.GLOB:
        regex = _compile(translate(expand_user(pattern)), pattern)
        return Matcher(pattern, syntax, regex)
    return Matcher(pattern, syntax, _compile(pattern, pattern))


@dataclass(frozen=True, slots=True)
class MatcherSet:
    """Disjunction of matchers loaded from one list.

    Attributes:
        matchers: Matchers in list order.
    """

    matchers: tuple[Matcher, ...] = ()

    @classmethod
    def from_patterns(cls, patterns: Iterable[str], syntax: Syntax) -> MatcherSet:
        """Compile every pattern, preserving order.

        Empty patterns are compiled too.
        """
        return cls(tuple(build_matcher(pattern, syntax) for pattern in patterns))

    def matches(self, path: str) -> bool:
        """Return ``True`` when any matcher matches ``path``.

        ``path`` is made absolute once for the whole set.
        """
        if not self.matchers:
            return False
        candidate = canonical(path)
        return any(m.matches_canonical(candidate) for m in self.matchers)

    def __len__(self) -> int:
        return len(self.matchers)

    def __iter__(self) -> Iterator[Matcher]:
        return iter(self.matchers)


def build_matcher_set(list_path: str | Path, syntax: Syntax) -> MatcherSet:
    """Load a pattern list file and compile it.

    Args:
        list_path: Pattern list file.
        syntax: Syntax applied to every line.

    Returns:
        MatcherSet: Compiled set.

    Raises:
        SkipRmError: If the list cannot be read or a pattern is invalid.
    """
    matcher_set = MatcherSet.from_patterns(read_patterns(list_path), syntax)
    logger.debug("Compiled %d %s pattern(s)", len(matcher_set), syntax.value)
    return matcher_set
