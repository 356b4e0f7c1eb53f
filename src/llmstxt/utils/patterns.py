"""Exclusion patterns for the document collector.

Patterns use a deliberately small wildcard scheme rather than real glob
semantics: ``**`` splits a pattern into literal fragments and any ``*`` left
inside a fragment is dropped. A path matches when every fragment occurs
somewhere in it, in any order.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Tuple

LOGGER = logging.getLogger(__name__)

RECURSIVE_WILDCARD = "**"
WILDCARD = "*"


@dataclass(slots=True, frozen=True)
class PatternMatcher:
    pattern: str
    fragments: Tuple[str, ...]

    def matches(self, path: str) -> bool:
        return all(fragment in path for fragment in self.fragments)


def compile_pattern(pattern: str) -> PatternMatcher:
    """Split ``pattern`` into the literal fragments it requires."""
    if RECURSIVE_WILDCARD in pattern:
        parts = pattern.split(RECURSIVE_WILDCARD)
    else:
        parts = [pattern]
    fragments = tuple(part.replace(WILDCARD, "") for part in parts)
    return PatternMatcher(pattern=pattern, fragments=fragments)


class ExclusionMatcher:
    """Decides whether a root-relative path must be skipped."""

    def __init__(self, patterns: Iterable[str]) -> None:
        self.matchers = [compile_pattern(pattern) for pattern in patterns]

    def matches(self, path: str) -> bool:
        for matcher in self.matchers:
            if matcher.matches(path):
                LOGGER.debug("Skipping excluded path: %s (pattern %s)", path, matcher.pattern)
                return True
        return False
