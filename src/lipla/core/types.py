"""
Core type definitions for the Lipla interpreter.

This module contains the command and item vocabularies shared by the
tree model, the resolver and the dispatcher, together with the static
shape of the life plan hierarchy.
"""

from enum import Enum

# Maximum number of children of a single kind under one parent
MAX_CHILDREN = 7


class Command(Enum):
    """Interpreter commands."""

    ADD = "add"
    SHOW = "show"
    UPDATE = "update"
    REMOVE = "remove"
    HELP = "help"
    CLEAR = "clear"
    ERASE = "erase"
    EXIT_SAVE = "exit"
    EXIT_NO_SAVE = "exit!"
    UNKNOWN = "unknown"

    @property
    def takes_item(self) -> bool:
        """Check if the command operates on an item kind."""
        return self in _ITEM_COMMANDS


_ITEM_COMMANDS = frozenset({Command.ADD, Command.SHOW, Command.UPDATE, Command.REMOVE})


class Item(Enum):
    """Record kinds of a life plan, plus the ALL selector."""

    GOAL = "goal"
    ACTION = "action"
    AGREEMENT = "agreement"
    ALERT = "alert"
    RESULT = "result"
    ALL = "all"

    @property
    def is_record(self) -> bool:
        """Check if the item names a concrete record kind."""
        return self in _LINEAGE

    @property
    def lineage(self) -> tuple["Item", ...]:
        """
        Record kinds from the plan down to this kind (inclusive).

        Raises:
            ValueError: If the item is not a concrete record kind
        """
        try:
            return _LINEAGE[self]
        except KeyError:
            raise ValueError(f"'{self.value}' is not a record kind") from None

    @property
    def depth(self) -> int:
        """Nesting depth below the plan (goals are at depth 1)."""
        return len(self.lineage)

    @property
    def plural(self) -> str:
        """Plural name, also the name of the child list holding this kind on its parent."""
        return f"{self.value}s"


_LINEAGE: dict[Item, tuple[Item, ...]] = {
    Item.GOAL: (Item.GOAL,),
    Item.ACTION: (Item.GOAL, Item.ACTION),
    Item.AGREEMENT: (Item.GOAL, Item.ACTION, Item.AGREEMENT),
    Item.ALERT: (Item.GOAL, Item.ACTION, Item.AGREEMENT, Item.ALERT),
    Item.RESULT: (Item.GOAL, Item.RESULT),
}

RECORD_ITEMS = tuple(_LINEAGE)
