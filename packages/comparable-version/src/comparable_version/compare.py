# SPDX-License-Identifier: MIT
"""Version comparison following Maven ordering semantics.

Qualifier ordering: alpha < beta < milestone < rc < snapshot < release < sp
Unknown qualifiers sort after all known ones, in lexicographic order.
A qualifier is always older than a number at the same position.
"""

from __future__ import annotations

from functools import cmp_to_key
from typing import Iterable, Union

from .items import Group, VersionKey
from .parser import parse
from .version import ComparableVersion

VersionLike = Union[str, Group, ComparableVersion]


def _key(version: VersionLike) -> VersionKey:
    if isinstance(version, ComparableVersion):
        return version.key
    return parse(version)


def compare_versions(version1: VersionLike, version2: VersionLike) -> int:
    """Compare two versions.

    Args:
        version1: First version (string, parsed key or ComparableVersion)
        version2: Second version (string, parsed key or ComparableVersion)

    Returns:
        -1 if version1 < version2
        0 if version1 == version2
        1 if version1 > version2

    Raises:
        InvalidVersionError: If either argument is not a version

    Examples:
        >>> compare_versions("1.0", "1")
        0
        >>> compare_versions("1.0-alpha-1", "1.0")
        -1
        >>> compare_versions("1.0-sp", "1.0-ga")
        1
    """
    return _key(version1).compare(_key(version2))


def versions_equal(version1: VersionLike, version2: VersionLike) -> bool:
    """Return True if both versions have the same ordering position."""
    return compare_versions(version1, version2) == 0


_SortKey = cmp_to_key(compare_versions)


def version_key(version: VersionLike):
    """Return a sort key for a version, suitable for sorting.

    Examples:
        >>> sorted(["1.0", "1.0-SNAPSHOT", "1.0-sp"], key=version_key)
        ['1.0-SNAPSHOT', '1.0', '1.0-sp']
    """
    return _SortKey(_key(version))


def sort_versions(versions: Iterable[str], reverse: bool = False) -> list[str]:
    """Sort version strings from oldest to newest (newest first if ``reverse``).

    The sort is stable, so equal versions keep their input order.
    """
    return sorted(versions, key=version_key, reverse=reverse)


def max_version(versions: Iterable[str]) -> str:
    """Return the newest of the given version strings.

    Raises:
        ValueError: If ``versions`` is empty
    """
    candidates = list(versions)
    if not candidates:
        raise ValueError("max_version() arg is an empty sequence")
    return max(candidates, key=version_key)
