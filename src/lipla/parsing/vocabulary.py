"""
The closed vocabulary of the Lipla interpreter.

Every accepted spelling maps to exactly one token. Commands and items may
be abbreviated, and the spellings ``r`` and ``re`` are shared between the
remove command and the result item; such words classify as AMBIGUOUS and
are settled by the resolver from the neighbouring words.
"""

from enum import Enum

from attrs import frozen

from lipla.core.types import Command, Item


class TokenKind(Enum):
    """Lexical class of a single word."""

    COMMAND = "command"
    ITEM = "item"
    AMBIGUOUS = "ambiguous"
    UNKNOWN = "unknown"


@frozen
class Token:
    """A classified word.

    Params:
        word: The lowercased spelling
        kind: Lexical class
        command: The command tag (COMMAND and AMBIGUOUS tokens)
        item: The item tag (ITEM and AMBIGUOUS tokens)
    """

    word: str
    kind: TokenKind
    command: Command | None = None
    item: Item | None = None

    @property
    def is_item_command(self) -> bool:
        """Check if the token is a command that operates on an item."""
        return self.kind is TokenKind.COMMAND and self.command.takes_item


COMMAND_SPELLINGS: dict[Command, tuple[str, ...]] = {
    Command.ADD: ("a", "ad", "add"),
    Command.SHOW: ("s", "sh", "show"),
    Command.UPDATE: ("u", "up", "update"),
    Command.REMOVE: ("remove",),
    Command.HELP: ("h", "he", "?", "help"),
    Command.CLEAR: ("c", "cl", "clear"),
    Command.ERASE: ("e", "er", "erase"),
    Command.EXIT_SAVE: ("x", "ex", "exit"),
    Command.EXIT_NO_SAVE: ("x!", "ex!", "exit!"),
}

ITEM_SPELLINGS: dict[Item, tuple[str, ...]] = {
    Item.GOAL: ("go", "goal", "goals"),
    Item.ACTION: ("ac", "action", "actions"),
    Item.AGREEMENT: ("ag", "agreement", "agreements"),
    Item.ALERT: ("al", "alert", "alerts"),
    Item.RESULT: ("result", "results"),
}

# Spellings shared by Command.REMOVE and Item.RESULT
AMBIGUOUS_SPELLINGS = ("r", "re")


def _build_table() -> dict[str, Token]:
    table: dict[str, Token] = {}
    for command, spellings in COMMAND_SPELLINGS.items():
        for word in spellings:
            table[word] = Token(word, TokenKind.COMMAND, command=command)
    for item, spellings in ITEM_SPELLINGS.items():
        for word in spellings:
            table[word] = Token(word, TokenKind.ITEM, item=item)
    for word in AMBIGUOUS_SPELLINGS:
        table[word] = Token(
            word, TokenKind.AMBIGUOUS, command=Command.REMOVE, item=Item.RESULT
        )
    return table


VOCABULARY: dict[str, Token] = _build_table()

# Full words offered by tab completion
COMPLETION_WORDS: tuple[str, ...] = tuple(
    sorted(
        {spellings[-1] for spellings in COMMAND_SPELLINGS.values()}
        | {word for spellings in ITEM_SPELLINGS.values() for word in spellings[1:]}
    )
)


def classify(word: str) -> Token:
    """
    Classify a single word.

    Classification is case-insensitive, context-free and never fails.

    Params:
        word: A whitespace-free word from the input line

    Returns:
        The vocabulary token, or an UNKNOWN token for unrecognised words
    """
    lowered = word.lower()
    return VOCABULARY.get(lowered) or Token(lowered, TokenKind.UNKNOWN)
