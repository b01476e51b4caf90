"""
Exception classes for the Lipla interpreter.

This module defines specific exception types for the error conditions that
can occur while parsing, validating and executing interpreter commands, and
while loading or saving a life plan.
"""

from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from lipla.core.types import Command, Item

HELP_HINT = "Use help for a list of commands"


class LiplaError(Exception):
    """Base exception for all Lipla-related errors."""

    pass


class PathParseError(LiplaError):
    """Raised when a numeric path typed by the user cannot be used."""

    def __init__(self, number: int, reason: str):
        """
        Initialize the exception.

        Params:
            number: The number as typed by the user (1-based)
            reason: Why the number is invalid
        """
        self.number = number
        self.reason = reason
        super().__init__(f"Invalid number {number}: {reason}")


class ZeroIdError(PathParseError):
    """Raised when the user types 0 as a path number."""

    def __init__(self):
        super().__init__(0, "numbers start at 1")


class NegativeIdError(PathParseError):
    """Raised when the user types a negative path number."""

    def __init__(self, number: int):
        super().__init__(number, "numbers can't be negative")


class ArityError(LiplaError):
    """Base exception for a path of the wrong length."""

    def __init__(
        self, command: "Command", item: "Item", given: int, expected: int, message: str
    ):
        """
        Initialize the exception.

        Params:
            command: The resolved command
            item: The resolved item kind
            given: Number of indices typed
            expected: Number of indices the command requires
            message: Rendered error message
        """
        self.command = command
        self.item = item
        self.given = given
        self.expected = expected
        super().__init__(message)


class TooManyIndicesError(ArityError):
    """Raised when more indices are given than the command needs."""

    def __init__(self, command: "Command", item: "Item", given: int, expected: int):
        advice = "Use none" if expected == 0 else "Use less"
        super().__init__(command, item, given, expected, f"Too many indexes. {advice}")


class TooFewIndicesError(ArityError):
    """Raised when fewer indices are given than the command needs."""

    def __init__(
        self, command: "Command", item: "Item", given: int, expected: int, usage: str
    ):
        self.usage = usage
        super().__init__(
            command, item, given, expected, f"Not enough indexes. Usage: {usage}"
        )


class NodeReferenceError(LiplaError):
    """Base exception for a path that does not exist in the current plan."""

    verb = "do"

    def __init__(self, item: "Item", path: list[int]):
        """
        Initialize the exception.

        Params:
            item: The item kind that was addressed
            path: The 0-based path that failed to resolve
        """
        self.item = item
        self.path = list(path)
        super().__init__(f"Nothing to {self.verb}. {HELP_HINT}")


class NothingToAddError(NodeReferenceError):
    """Raised when the parent of a new node does not exist."""

    verb = "add"


class NothingToUpdateError(NodeReferenceError):
    """Raised when the node to update does not exist."""

    verb = "update"


class NothingToRemoveError(NodeReferenceError):
    """Raised when the node to remove does not exist."""

    verb = "remove"


class NothingToShowError(LiplaError):
    """Raised when a listing would be empty."""

    def __init__(self, item: "Item"):
        self.item = item
        super().__init__(f"Nothing to show. {HELP_HINT}")


class CapacityError(LiplaError):
    """Raised when a parent already holds the maximum number of children of a kind."""

    def __init__(self, item: "Item", limit: int):
        """
        Initialize the exception.

        Params:
            item: The item kind whose list is full
            limit: The maximum number of children of that kind
        """
        self.item = item
        self.limit = limit
        super().__init__(f"Maximum number of allowed {item.plural} is {limit}")


class UnknownCommandError(LiplaError):
    """Raised when a line does not resolve to a known command."""

    def __init__(self, words: list[str]):
        """
        Initialize the exception.

        Params:
            words: The offending words as typed by the user
        """
        self.words = list(words)
        super().__init__(f"Unknown command {' '.join(words)}. {HELP_HINT}")


class StorageError(LiplaError):
    """Base exception for failures reading or writing files."""

    action = "access"

    def __init__(self, filename: str | Path, reason: str | None = None):
        """
        Initialize the exception.

        Params:
            filename: The file that could not be read or written
            reason: Optional underlying reason
        """
        self.filename = str(filename)
        self.reason = reason
        message = f"Unable to {self.action} {self.filename}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class PlanLoadError(StorageError):
    """Raised when the life plan data file cannot be loaded."""

    action = "load"


class PlanSaveError(StorageError):
    """Raised when the life plan data file cannot be saved."""

    action = "save"


class HistoryError(StorageError):
    """Raised when the interpreter history cannot be loaded or saved."""

    def __init__(self, filename: str | Path, action: str, reason: str | None = None):
        self.action = action
        super().__init__(filename, reason)


class ExportError(StorageError):
    """Raised when a life plan cannot be exported."""

    action = "export data to"
