# SPDX-License-Identifier: MIT
"""Parsing and ordering of free-form version identifiers.

This package orders dotted and hyphenated version strings the way Maven
does: numbers compare numerically, qualifiers follow
alpha < beta < milestone < rc < snapshot < release < sp, and trailing zeros
or release qualifiers are ignored.

Example:
    >>> from comparable_version import parse, compare_versions, ComparableVersion
    >>>
    >>> str(parse("1.0-alpha-1"))
    '(1,alpha,1)'
    >>>
    >>> compare_versions("1.0", "1.0.0-ga")
    0
    >>>
    >>> ComparableVersion("1.0-SNAPSHOT") < "1.0"
    True
"""

__version__ = "0.1.0"

from .items import (
    QUALIFIERS,
    Group,
    Item,
    Number,
    Token,
    VersionKey,
    normalize,
    render,
)
from .parser import (
    ALIASES,
    InvalidVersionError,
    parse,
)
from .version import (
    ComparableVersion,
    parse_cached,
)
from .compare import (
    compare_versions,
    max_version,
    sort_versions,
    version_key,
    versions_equal,
)

__all__ = [
    # Item model
    "QUALIFIERS",
    "Group",
    "Item",
    "Number",
    "Token",
    "VersionKey",
    "normalize",
    "render",
    # Parsing
    "ALIASES",
    "InvalidVersionError",
    "parse",
    "ComparableVersion",
    "parse_cached",
    # Version comparison
    "compare_versions",
    "max_version",
    "sort_versions",
    "version_key",
    "versions_equal",
]
