"""
Tests for help entries and usage lines.
"""

import pytest

from lipla.commands.help import HELP_ENTRIES, HELP_TABLE, help_for, usage
from lipla.core.types import RECORD_ITEMS, Command, Item


class TestUsage:
    """Usage lines list one number per level of the addressed path."""

    @pytest.mark.parametrize(
        "command, item, expected",
        [
            (Command.ADD, Item.GOAL, "add goal [description]"),
            (Command.ADD, Item.ACTION, "add action <goal number> [description]"),
            (Command.ADD, Item.RESULT, "add result <goal number> [description]"),
            (
                Command.ADD,
                Item.ALERT,
                "add alert <goal number> <action number> <agreement number> [description]",
            ),
            (Command.UPDATE, Item.GOAL, "update goal <goal number> [description]"),
            (Command.REMOVE, Item.GOAL, "remove goal <goal number>"),
            (Command.REMOVE, Item.RESULT, "remove result <goal number> <result number>"),
            (
                Command.REMOVE,
                Item.AGREEMENT,
                "remove agreement <goal number> <action number> <agreement number>",
            ),
        ],
    )
    def test_usage(self, command, item, expected):
        assert usage(command, item) == expected


class TestEntries:
    """Test lookup of per-command help."""

    @pytest.mark.parametrize("item", RECORD_ITEMS, ids=lambda item: item.value)
    def test_every_record_command_is_documented(self, item):
        for command in (Command.ADD, Command.UPDATE, Command.REMOVE):
            entry = help_for(command, item)
            assert entry.name == f"{command.value} {item.value}"
            assert entry.usage == usage(command, item)
        assert help_for(Command.SHOW, item).name == f"show {item.plural}"

    def test_articles(self):
        assert help_for(Command.ADD, Item.GOAL).summary == "add a goal"
        assert help_for(Command.ADD, Item.ACTION).summary == "add an action"
        assert help_for(Command.REMOVE, Item.ALERT).summary == "remove an alert"

    def test_standalone_commands(self):
        assert help_for(Command.SHOW, Item.ALL).summary == "show a life plan"
        assert help_for(Command.EXIT_NO_SAVE, None).name == "exit!"
        assert help_for(Command.HELP, None).usage is None

    def test_missing_entry(self):
        assert help_for(Command.UNKNOWN, None) is None
        assert help_for(Command.ADD, None) is None

    def test_entry_count(self):
        # 6 standalone entries plus show/add/update/remove for five record kinds
        assert len(HELP_ENTRIES) == 6 + 4 * len(RECORD_ITEMS)


def test_table_mentions_every_record_kind():
    text = "\n".join(HELP_TABLE)
    for item in RECORD_ITEMS:
        assert f"add {item.value}" in text
        assert f"show {item.plural}" in text
