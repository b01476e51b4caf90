"""
Lipla command execution.

This package contains the dispatcher that runs resolved commands against a
life plan, path validation, and the help texts.
"""

from lipla.commands.dispatcher import (
    DESCRIPTION_PROMPT,
    MAIN_PROMPT,
    Dispatcher,
    History,
    Outcome,
    PendingDescription,
)
from lipla.commands.help import HELP_ENTRIES, HELP_TABLE, HelpEntry, help_for, usage
from lipla.commands.validation import required_indices, validate_arity, validate_target

__all__ = [
    "Dispatcher",
    "History",
    "Outcome",
    "PendingDescription",
    "MAIN_PROMPT",
    "DESCRIPTION_PROMPT",
    "HelpEntry",
    "HELP_ENTRIES",
    "HELP_TABLE",
    "help_for",
    "usage",
    "required_indices",
    "validate_arity",
    "validate_target",
]
