"""
Help texts for interpreter commands.

The global table lists every documented command; per-command entries give
a one-line summary and, for commands that take a path, a usage line built
from the addressed item's lineage.
"""

from dataclasses import dataclass

from lipla.core.types import RECORD_ITEMS, Command, Item

HELP_TABLE = [
    "==================================================================================",
    "Documented commands (type [yellow]help[/yellow] <command> for more information):",
    "==================================================================================",
    "show, s      add goal        show goals        update goal        remove goal",
    "help, h, ?   add action      show actions      update action      remove action",
    "exit, x      add agreement   show agreements   update agreement   remove agreement",
    "exit!, x!    add alert       show alerts       update alert       remove alert",
    "clear, c     add result      show results      update result      remove result",
    "erase, e",
]


@dataclass(frozen=True)
class HelpEntry:
    """Help for a single command."""

    name: str
    summary: str
    usage: str | None = None


def usage(command: Command, item: Item) -> str:
    """
    Build the usage line of a command on a record kind.

    Params:
        command: ADD, UPDATE or REMOVE
        item: A record kind

    Returns:
        Usage such as "add action <goal number> [description]"

    Examples:
        usage(Command.REMOVE, Item.RESULT) -> "remove result <goal number> <result number>"
    """
    lineage = item.lineage[:-1] if command is Command.ADD else item.lineage
    parts = [command.value, item.value]
    parts.extend(f"<{kind.value} number>" for kind in lineage)
    if command is not Command.REMOVE:
        parts.append("[description]")
    return " ".join(parts)


_SUMMARIES = {
    Command.ADD: "add {article} {item}",
    Command.UPDATE: "update {article} {item}",
    Command.REMOVE: "remove {article} {item}",
}


def _article(item: Item) -> str:
    return "an" if item.value[0] in "aeiou" else "a"


def _build_entries() -> dict[tuple[Command, Item | None], HelpEntry]:
    entries = {
        (Command.SHOW, Item.ALL): HelpEntry("show", "show a life plan"),
        (Command.EXIT_SAVE, None): HelpEntry("exit", "save a life plan and exit"),
        (Command.EXIT_NO_SAVE, None): HelpEntry("exit!", "exit without saving a life plan"),
        (Command.CLEAR, None): HelpEntry("clear", "erase the screen"),
        (Command.ERASE, None): HelpEntry("erase", "clear the history"),
        (Command.HELP, None): HelpEntry("help", "prints help information"),
    }
    for item in RECORD_ITEMS:
        entries[(Command.SHOW, item)] = HelpEntry(
            f"show {item.plural}", f"show all {item.plural}"
        )
        for command, summary in _SUMMARIES.items():
            entries[(command, item)] = HelpEntry(
                f"{command.value} {item.value}",
                summary.format(article=_article(item), item=item.value),
                usage(command, item),
            )
    return entries


HELP_ENTRIES = _build_entries()


def help_for(command: Command, item: Item | None) -> HelpEntry | None:
    """Look up the help entry of a command, or None if there is none."""
    return HELP_ENTRIES.get((command, item))
