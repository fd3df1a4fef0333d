# SPDX-License-Identifier: MIT
"""Item data model for parsed version identifiers.

A parsed version is a tree of items:

- ``Number``: an unbounded non-negative integer component
- ``Token``: a lowercase, alias-resolved qualifier such as ``alpha`` or ``sp``
- ``Group``: an ordered sequence of items introduced by a ``-`` separator

Every item knows how to compare itself against any other item, or against
``None`` which stands for the missing counterpart when one group is shorter
than the other.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional, Union

# Qualifier ordering (lower = earlier in release cycle). The empty string is
# the release itself ("ga", "final" and "release" all alias to it).
QUALIFIERS: tuple[str, ...] = ("alpha", "beta", "milestone", "rc", "snapshot", "", "sp")

RELEASE_RANK = QUALIFIERS.index("")

# Digits per int <-> str conversion step (below sys.get_int_max_str_digits())
DIGIT_CHUNK = 4000


def qualifier_key(value: str) -> tuple[int, str]:
    """Return the sort key of a qualifier.

    Known qualifiers sort by their position in ``QUALIFIERS``. Anything else
    sorts after every known qualifier, and unknown qualifiers sort among
    themselves lexicographically.

    Examples:
        >>> qualifier_key("rc")
        (3, '')
        >>> qualifier_key("xxx")
        (7, 'xxx')
    """
    try:
        return (QUALIFIERS.index(value), "")
    except ValueError:
        return (len(QUALIFIERS), value)


def _sign(left, right) -> int:
    if left == right:
        return 0
    return -1 if left < right else 1


@dataclass(frozen=True, slots=True)
class Number:
    """Numeric version component."""

    value: int

    def __str__(self) -> str:
        if self.value < 10**DIGIT_CHUNK:
            return str(self.value)
        chunks = []
        rest = self.value
        while rest >= 10**DIGIT_CHUNK:
            rest, chunk = divmod(rest, 10**DIGIT_CHUNK)
            chunks.append(str(chunk).zfill(DIGIT_CHUNK))
        chunks.append(str(rest))
        return "".join(reversed(chunks))

    def is_null(self) -> bool:
        return self.value == 0

    def compare(self, other: Optional[Item]) -> int:
        if other is None:
            return 0 if self.value == 0 else 1  # 1.0 == 1, 1.1 > 1
        if isinstance(other, Number):
            return _sign(self.value, other.value)
        # 1.1 > 1-sp, 1.1 > 1-1
        return 1


@dataclass(frozen=True, slots=True)
class Token:
    """Qualifier version component."""

    value: str

    def __str__(self) -> str:
        return self.value

    def is_null(self) -> bool:
        return self.value == QUALIFIERS[RELEASE_RANK]

    def compare(self, other: Optional[Item]) -> int:
        if other is None:
            # 1-rc < 1, 1-sp > 1
            return _sign(qualifier_key(self.value), (RELEASE_RANK, ""))
        if isinstance(other, Token):
            return _sign(qualifier_key(self.value), qualifier_key(other.value))
        # 1.any < 1.1, 1.any < 1-1
        return -1


@dataclass(frozen=True, slots=True)
class Group:
    """Nested sequence of version components."""

    items: tuple[Item, ...] = ()

    def __str__(self) -> str:
        return "(" + ",".join(str(item) for item in self.items) + ")"

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[Item]:
        return iter(self.items)

    def __getitem__(self, index: int) -> Item:
        return self.items[index]

    def is_null(self) -> bool:
        return not self.items

    def compare(self, other: Optional[Item]) -> int:
        if other is None:
            # 1-0 == 1; otherwise only the leading item decides
            if not self.items:
                return 0
            return self.items[0].compare(None)
        if isinstance(other, Number):
            return -1  # 1-1 < 1.0.x
        if isinstance(other, Token):
            return 1  # 1-1 > 1-sp

        length = max(len(self.items), len(other.items))
        for index in range(length):
            left = self.items[index] if index < len(self.items) else None
            right = other.items[index] if index < len(other.items) else None
            if left is None:
                # right cannot be None here since index < length
                result = -right.compare(None)
            else:
                result = left.compare(right)
            if result != 0:
                return result
        return 0


Item = Union[Number, Token, Group]

# The normalized root group of one parsed identifier.
VersionKey = Group


def trim_trailing(items: list[Item]) -> None:
    """Drop trailing null items from ``items`` in place.

    Nested groups that carry meaning are kept but do not stop the scan;
    the first meaningful number or token does.
    """
    index = len(items) - 1
    while index >= 0:
        item = items[index]
        if item.is_null():
            del items[index]
        elif not isinstance(item, Group):
            break
        index -= 1


def normalize(group: Group) -> Group:
    """Return ``group`` without trailing null items.

    Only the given level is trimmed; nested groups are expected to have been
    normalized when they were built. Normalizing twice is a no-op.

    Examples:
        >>> str(normalize(Group((Number(1), Number(0), Token("")))))
        '(1)'
    """
    items = list(group.items)
    trim_trailing(items)
    if len(items) == len(group.items):
        return group
    return Group(tuple(items))


def render(key: Group) -> str:
    """Return the canonical parenthesized form of a parsed version."""
    return str(key)
