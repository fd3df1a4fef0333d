# SPDX-License-Identifier: MIT
"""Comparable version value object."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from functools import lru_cache, total_ordering

from .items import Group, VersionKey, render
from .parser import InvalidVersionError, parse

logger = logging.getLogger(__name__)


@total_ordering
@dataclass(frozen=True, slots=True, eq=False)
class ComparableVersion:
    """A version identifier together with its parsed ordering key.

    Instances compare against each other and against plain strings:

        >>> ComparableVersion("1.0") == "1"
        True
        >>> ComparableVersion("1.0-rc-1") < ComparableVersion("1.0")
        True

    Attributes:
        value: The identifier exactly as given
        key: The normalized item tree used for ordering
    """

    value: str
    key: VersionKey = field(init=False, repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "key", parse(self.value))

    def __str__(self) -> str:
        return self.value

    @property
    def canonical(self) -> str:
        """Return the canonical form, e.g. ``(1,(1,alpha,1))``."""
        return render(self.key)

    def _other_key(self, other: object) -> VersionKey | None:
        if isinstance(other, ComparableVersion):
            return other.key
        if isinstance(other, (str, Group)):
            return parse(other)
        return None

    def compare_to(self, other: ComparableVersion | str) -> int:
        """Return -1, 0 or 1 as this version is older, equal or newer."""
        other_key = self._other_key(other)
        if other_key is None:
            raise InvalidVersionError(other)
        return self.key.compare(other_key)

    def __eq__(self, other: object) -> bool:
        other_key = self._other_key(other)
        if other_key is None:
            return NotImplemented
        return self.key.compare(other_key) == 0

    def __lt__(self, other: object) -> bool:
        other_key = self._other_key(other)
        if other_key is None:
            return NotImplemented
        return self.key.compare(other_key) < 0

    def __hash__(self) -> int:
        # A trailing group can equal a missing one ("1-0.alpha" == "1"), so
        # only the top-level numbers and tokens take part.
        return hash(tuple(item for item in self.key if not isinstance(item, Group)))


@lru_cache(maxsize=1024)
def parse_cached(value: str) -> ComparableVersion:
    """Return a ComparableVersion for ``value``, reusing earlier parses.

    Concurrent callers may build the same version twice; both results are
    equal and either may end up cached.
    """
    logger.debug("Version cache miss for %r", value)
    return ComparableVersion(value)
