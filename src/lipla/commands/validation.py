"""
Validation of command paths against the current life plan.

Every check here runs before the plan is touched, so a failing command
never leaves the tree partially modified.
"""

from lipla.commands.help import usage
from lipla.core.path_utils import ParsedPath
from lipla.core.plan import Plan
from lipla.core.types import MAX_CHILDREN, Command, Item
from lipla.exceptions.core import (
    CapacityError,
    NothingToRemoveError,
    NothingToUpdateError,
    TooFewIndicesError,
    TooManyIndicesError,
)


def required_indices(command: Command, item: Item) -> int:
    """
    Number of path indices a command needs for a record kind.

    Adding addresses the parent, updating and removing address the record
    itself.

    Examples:
        required_indices(Command.ADD, Item.GOAL) -> 0
        required_indices(Command.REMOVE, Item.RESULT) -> 2
    """
    if command is Command.ADD:
        return item.depth - 1
    return item.depth


def validate_arity(command: Command, item: Item, parsed: ParsedPath) -> None:
    """
    Check the number of indices typed for a command.

    Raises:
        TooManyIndicesError: If more indices were given than needed
        TooFewIndicesError: If fewer indices were given than needed
    """
    expected = required_indices(command, item)
    given = len(parsed.indices)
    if given > expected:
        raise TooManyIndicesError(command, item, given, expected)
    if given < expected:
        raise TooFewIndicesError(command, item, given, expected, usage(command, item))


def validate_target(plan: Plan, command: Command, item: Item, indices: list[int]) -> None:
    """
    Check that a command can be applied to the current plan.

    Params:
        plan: The life plan as it is now
        command: ADD, UPDATE or REMOVE
        item: The record kind
        indices: 0-based path of the parent (ADD) or the record itself

    Raises:
        NothingToAddError: If the parent of a new record does not exist
        CapacityError: If the parent already holds the maximum number of records
        NothingToUpdateError: If the record to update does not exist
        NothingToRemoveError: If the record to remove does not exist
    """
    if command is Command.ADD:
        if len(plan.children(item, indices)) >= MAX_CHILDREN:
            raise CapacityError(item, MAX_CHILDREN)
    elif command is Command.UPDATE:
        plan.node(item, indices, NothingToUpdateError)
    elif command is Command.REMOVE:
        plan.node(item, indices, NothingToRemoveError)
    else:
        raise ValueError(f"Command '{command.value}' does not address a record")
