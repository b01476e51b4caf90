"""
Resolution of an input line into a command and an item.

Users may type commands and items in either order (``show goals`` and
``goals show``), abbreviate them, and use ``re``/``r`` for both remove and
result. Resolution works on a window of the first two classified words:
the pair of token kinds selects one rule from RULES, and each rule decides
the command, the item and how many words it consumed. ``help`` takes the
next window as its target.
"""

from collections.abc import Callable

from attrs import frozen

from lipla.core.types import Command, Item
from lipla.parsing.vocabulary import Token, TokenKind, classify


@frozen
class Match:
    """Outcome of applying one rule to a window."""

    command: Command
    item: Item | None
    consumed: int


UNRESOLVED = Match(Command.UNKNOWN, None, 0)


def _command_first(first: Token, second: Token | None) -> Match:
    """``add goal``, ``add re``, ``show``, ``exit``."""
    command = first.command
    if not command.takes_item:
        return Match(command, None, 1)
    if second is None:
        # A bare ``show`` lists the whole plan
        return Match(command, Item.ALL if command is Command.SHOW else None, 1)
    if second.kind is TokenKind.ITEM:
        return Match(command, second.item, 2)
    if second.kind is TokenKind.AMBIGUOUS:
        # The other word is a verb, so ``re`` is the result item
        return Match(command, Item.RESULT, 2)
    return Match(command, None, 1)


def _item_first(first: Token, second: Token | None) -> Match:
    """``goals show``, ``goal add``, ``goal re``."""
    if second is None:
        return UNRESOLVED
    if second.is_item_command:
        return Match(second.command, first.item, 2)
    if second.kind is TokenKind.AMBIGUOUS:
        # The other word is an item, so ``re`` is the remove command
        return Match(Command.REMOVE, first.item, 2)
    return UNRESOLVED


def _ambiguous_first(first: Token, second: Token | None) -> Match:
    """``re re``, ``re goal``, ``re add``."""
    if second is None:
        return UNRESOLVED
    if second.kind is TokenKind.AMBIGUOUS:
        return Match(Command.REMOVE, Item.RESULT, 2)
    if second.kind is TokenKind.ITEM:
        return Match(Command.REMOVE, second.item, 2)
    if second.is_item_command:
        return Match(second.command, Item.RESULT, 2)
    return UNRESOLVED


def _unresolved(first: Token, second: Token | None) -> Match:
    return UNRESOLVED


Rule = Callable[[Token, Token | None], Match]

# (kind of first word, kind of second word or None) -> rule
RULES: dict[tuple[TokenKind, TokenKind | None], Rule] = {
    (TokenKind.COMMAND, None): _command_first,
    (TokenKind.COMMAND, TokenKind.COMMAND): _command_first,
    (TokenKind.COMMAND, TokenKind.ITEM): _command_first,
    (TokenKind.COMMAND, TokenKind.AMBIGUOUS): _command_first,
    (TokenKind.COMMAND, TokenKind.UNKNOWN): _command_first,
    (TokenKind.ITEM, TokenKind.COMMAND): _item_first,
    (TokenKind.ITEM, TokenKind.AMBIGUOUS): _item_first,
    (TokenKind.AMBIGUOUS, TokenKind.AMBIGUOUS): _ambiguous_first,
    (TokenKind.AMBIGUOUS, TokenKind.ITEM): _ambiguous_first,
    (TokenKind.AMBIGUOUS, TokenKind.COMMAND): _ambiguous_first,
}


def resolve_window(tokens: list[Token]) -> Match:
    """
    Resolve up to two tokens into a command and an item.

    Params:
        tokens: Classified words; only the first two are considered

    Returns:
        The match of the rule selected by the kinds of the two tokens
    """
    if not tokens:
        return UNRESOLVED
    first = tokens[0]
    second = tokens[1] if len(tokens) > 1 else None
    key = (first.kind, second.kind if second else None)
    return RULES.get(key, _unresolved)(first, second)


@frozen
class Resolution:
    """
    A fully resolved input line.

    Params:
        command: The resolved command (UNKNOWN if nothing matched)
        item: The resolved item kind, if any
        consumed: Number of leading words that determined command and item
        words: The words of the line as typed
        line: The line as typed
        target: For HELP, the command the user asks about
    """

    command: Command
    item: Item | None
    consumed: int
    words: tuple[str, ...]
    line: str
    target: "Resolution | None" = None

    @property
    def is_complete(self) -> bool:
        """Check if the line names a command and, where needed, its item."""
        if self.command is Command.UNKNOWN:
            return False
        return not self.command.takes_item or self.item is not None

    @property
    def remainder(self) -> str:
        """The line without the consumed words, inner spacing preserved."""
        parts = self.line.split(None, self.consumed)
        if len(parts) <= self.consumed:
            return ""
        return parts[self.consumed].strip()

    @property
    def offending_words(self) -> list[str]:
        """Words to quote when the line cannot be executed."""
        if not self.words:
            return []
        if classify(self.words[0]).kind is TokenKind.UNKNOWN:
            return list(self.words[:1])
        return list(self.words[:2])


def resolve(line: str) -> Resolution:
    """
    Resolve an input line.

    Params:
        line: One line of user input

    Returns:
        Resolution with command, item and the number of consumed words

    Examples:
        "show goals"       -> (SHOW, GOAL)
        "goals show"       -> (SHOW, GOAL)
        "re re 1 2"        -> (REMOVE, RESULT), remainder "1 2"
        "help add action"  -> (HELP, None) targeting (ADD, ACTION)
    """
    words = tuple(line.split())
    tokens = [classify(word) for word in words[:3]]

    if tokens and tokens[0].kind is TokenKind.COMMAND and tokens[0].command is Command.HELP:
        target = None
        consumed = 1
        if len(words) > 1:
            nested = resolve_window(tokens[1:3])
            target = Resolution(
                nested.command,
                nested.item,
                nested.consumed,
                words[1:],
                line.split(None, 1)[1],
            )
            consumed += nested.consumed
        return Resolution(Command.HELP, None, consumed, words, line, target)

    match = resolve_window(tokens)
    return Resolution(match.command, match.item, match.consumed, words, line)
