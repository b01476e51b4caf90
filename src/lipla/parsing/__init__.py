"""
Lipla input parsing components.

This package provides word classification against the closed vocabulary and
resolution of whole input lines into commands and items.
"""

from lipla.parsing.resolver import Match, Resolution, resolve, resolve_window
from lipla.parsing.vocabulary import (
    COMPLETION_WORDS,
    VOCABULARY,
    Token,
    TokenKind,
    classify,
)

__all__ = [
    "Token",
    "TokenKind",
    "VOCABULARY",
    "COMPLETION_WORDS",
    "classify",
    "Match",
    "Resolution",
    "resolve",
    "resolve_window",
]
