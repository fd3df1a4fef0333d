# SPDX-License-Identifier: MIT
"""Parsing of free-form version identifiers.

Any string is accepted. Components are separated by ``.`` and ``-``, and a
switch between digits and letters splits a component in two:

- ``1.0.1``      -> ``(1,0,1)``
- ``1.0-1``      -> ``(1,(1))``
- ``1-rc-2``     -> ``(1,rc,2)``
- ``m1``         -> ``(milestone,1)``
- ``1.0-final``  -> ``(1)``
"""

from __future__ import annotations

import logging
from typing import Union

from .items import (
    DIGIT_CHUNK,
    Group,
    Item,
    Number,
    Token,
    VersionKey,
    normalize,
    trim_trailing,
)

logger = logging.getLogger(__name__)

# Qualifier synonyms, applied after single letter expansion
ALIASES: dict[str, str] = {
    "ga": "",
    "final": "",
    "release": "",
    "cr": "rc",
}

# Single letter shorthands, only honoured when directly followed by a digit
SHORTHANDS: dict[str, str] = {
    "a": "alpha",
    "b": "beta",
    "m": "milestone",
}


class InvalidVersionError(TypeError):
    """Raised when something that is not a string is given as a version."""

    def __init__(self, version: object, message: str = ""):
        self.version = version
        self.message = message or (
            f"Version must be a string, got {type(version).__name__}"
        )
        super().__init__(self.message)


def make_token(text: str, followed_by_digit: bool = False) -> Token:
    """Build a qualifier token, resolving shorthands and aliases.

    Examples:
        >>> make_token("m", followed_by_digit=True)
        Token(value='milestone')
        >>> make_token("m")
        Token(value='m')
        >>> make_token("cr")
        Token(value='rc')
    """
    if followed_by_digit and len(text) == 1:
        text = SHORTHANDS.get(text, text)
    return Token(ALIASES.get(text, text))


def digits_to_int(text: str) -> int:
    """Convert a run of decimal digits of any length to an int.

    Converts in chunks to stay under the interpreter's integer string
    conversion limit.
    """
    value = 0
    for offset in range(0, len(text), DIGIT_CHUNK):
        chunk = text[offset : offset + DIGIT_CHUNK]
        value = value * 10 ** len(chunk) + int(chunk)
    return value


def _make_item(is_digit: bool, text: str) -> Item:
    return Number(digits_to_int(text)) if is_digit else make_token(text)


def parse(version: Union[str, Group]) -> VersionKey:
    """Parse a version identifier into its normalized item tree.

    Args:
        version: Raw identifier such as ``"1.0-SNAPSHOT"``. An already parsed
            ``Group`` is returned unchanged.

    Returns:
        The root ``Group`` of the parsed identifier

    Raises:
        InvalidVersionError: If ``version`` is not a string

    Examples:
        >>> str(parse("1.0-1-alpha-1"))
        '(1,(1,alpha,1))'
        >>> str(parse("final.0.0"))
        '()'
    """
    if isinstance(version, Group):
        return version
    if not isinstance(version, str):
        raise InvalidVersionError(version)

    text = version.lower()
    active: list = []
    stack: list[list] = [active]
    is_digit = False
    start = 0

    for index, char in enumerate(text):
        if char == "." or char == "-":
            if index == start:
                active.append(Number(0))
            else:
                active.append(_make_item(is_digit, text[start:index]))
            start = index + 1

            if char == "-" and is_digit:
                trim_trailing(active)  # 1.0-x is 1-x
                # only 1-1 needs a nested group to differ from 1.1
                if index + 1 < len(text) and text[index + 1].isdecimal():
                    nested: list = []
                    active.append(nested)
                    stack.append(nested)
                    active = nested
        elif char.isdecimal():
            if not is_digit and index > start:
                active.append(make_token(text[start:index], followed_by_digit=True))
                start = index
            is_digit = True
        else:
            if is_digit and index > start:
                active.append(_make_item(True, text[start:index]))
                start = index
            is_digit = False

    if len(text) > start:
        active.append(_make_item(is_digit, text[start:]))

    # A nested group is always the last item of its parent, so the tree can
    # be frozen from the innermost group outward.
    key = None
    for items in reversed(stack):
        if key is not None:
            items[-1] = key
        key = normalize(Group(tuple(items)))

    logger.debug("Parsed version %r as %s", version, key)
    return key
