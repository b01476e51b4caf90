"""
Numeric path parsing for interpreter commands.

Users address records with 1-based numbers typed in front of an optional
description, e.g. ``2.1 "walk to work"``. This module splits such a
remainder into a list of 0-based indices and the free-text description.
"""

import string
from dataclasses import dataclass, field

from lipla.exceptions.core import NegativeIdError, ZeroIdError

# Characters that close a number; '-' is not among them since it is the minus sign
DELIMITERS = frozenset(" .#,/|;:")
QUOTES = "'\""
MINUS = "-"
# ASCII digits only
DIGITS = frozenset(string.digits)


@dataclass
class ParsedPath:
    """Result of parsing a command remainder."""

    indices: list[int] = field(default_factory=list)
    description: str = ""

    def __len__(self) -> int:
        return len(self.indices)

    @property
    def numbers(self) -> list[int]:
        """The indices as the user typed them (1-based)."""
        return [index + 1 for index in self.indices]


def unquote(text: str) -> str:
    """
    Remove surrounding quotes and whitespace from a string.

    Quoting does not need to be balanced; any run of leading or trailing
    quote characters is dropped.

    Params:
        text: Raw text, possibly quoted

    Returns:
        The text without surrounding quotes and whitespace

    Examples:
        '"Lose weight"' -> 'Lose weight'
        "'unbalanced" -> 'unbalanced'
    """
    return text.strip().lstrip(QUOTES).rstrip(QUOTES).strip()


def parse_path(remainder: str) -> ParsedPath:
    """
    Parse a remainder string into path indices and a description.

    Numbers are separated by any of the characters in DELIMITERS. Scanning
    stops at the first character that is not a digit, a delimiter or a
    leading minus sign; the text from the start of the unconsumed token
    onwards is the description.

    Params:
        remainder: The input left after the command and item words

    Returns:
        ParsedPath with 0-based indices and the unquoted description

    Raises:
        ZeroIdError: If a number is 0
        NegativeIdError: If a number is negative

    Examples:
        '1.2 "eat fruit"' -> ParsedPath([0, 1], 'eat fruit')
        '2nd place' -> ParsedPath([], '2nd place')
    """
    text = remainder.strip()
    indices: list[int] = []
    token = ""
    consumed = 0  # start of the description; advanced past every closed token

    for position, character in enumerate(text):
        if character in DIGITS:
            token += character
        elif character == MINUS and not token:
            token = character
        elif character in DELIMITERS and token != MINUS:
            if token:
                indices.append(int(token) - 1)
                token = ""
            consumed = position + 1
        else:
            break
    else:
        if token and token != MINUS:
            indices.append(int(token) - 1)
            consumed = len(text)

    for index in indices:
        if index == -1:
            raise ZeroIdError()
        if index < -1:
            raise NegativeIdError(index + 1)

    return ParsedPath(indices=indices, description=unquote(text[consumed:]))
