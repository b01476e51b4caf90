"""
Tests for the lipla exception hierarchy and its user-facing messages.
"""

import pytest

from lipla.core.types import Command, Item
from lipla.exceptions import (
    ArityError,
    CapacityError,
    ExportError,
    HistoryError,
    LiplaError,
    NegativeIdError,
    NodeReferenceError,
    NothingToAddError,
    NothingToRemoveError,
    NothingToShowError,
    NothingToUpdateError,
    PathParseError,
    PlanLoadError,
    PlanSaveError,
    StorageError,
    TooFewIndicesError,
    TooManyIndicesError,
    UnknownCommandError,
    ZeroIdError,
)


class TestHierarchy:
    """Every error the interpreter reports derives from LiplaError."""

    @pytest.mark.parametrize(
        "error",
        [
            ZeroIdError(),
            NegativeIdError(-2),
            TooManyIndicesError(Command.ADD, Item.GOAL, 1, 0),
            TooFewIndicesError(Command.REMOVE, Item.GOAL, 0, 1, "remove goal <goal number>"),
            NothingToAddError(Item.ACTION, [3]),
            NothingToShowError(Item.GOAL),
            CapacityError(Item.GOAL, 7),
            UnknownCommandError(["foo"]),
            PlanLoadError("lipla.dat"),
        ],
        ids=lambda error: type(error).__name__,
    )
    def test_base_class(self, error):
        assert isinstance(error, LiplaError)

    def test_groups(self):
        assert issubclass(ZeroIdError, PathParseError)
        assert issubclass(TooManyIndicesError, ArityError)
        assert issubclass(NothingToRemoveError, NodeReferenceError)
        assert issubclass(HistoryError, StorageError)
        assert issubclass(ExportError, StorageError)


class TestMessages:
    """Test the single-line notices shown to the user."""

    def test_path_errors(self):
        assert str(ZeroIdError()) == "Invalid number 0: numbers start at 1"
        assert str(NegativeIdError(-4)) == "Invalid number -4: numbers can't be negative"

    def test_too_many_indices(self):
        none = TooManyIndicesError(Command.ADD, Item.GOAL, 1, 0)
        less = TooManyIndicesError(Command.ADD, Item.ACTION, 2, 1)
        assert str(none) == "Too many indexes. Use none"
        assert str(less) == "Too many indexes. Use less"
        assert less.given == 2
        assert less.expected == 1

    def test_too_few_indices(self):
        error = TooFewIndicesError(
            Command.UPDATE, Item.ACTION, 1, 2, "update action <goal number> <action number> [description]"
        )
        assert str(error).startswith("Not enough indexes. Usage: update action")
        assert error.usage.endswith("[description]")

    @pytest.mark.parametrize(
        "error_class, verb",
        [
            (NothingToAddError, "add"),
            (NothingToUpdateError, "update"),
            (NothingToRemoveError, "remove"),
        ],
    )
    def test_reference_errors(self, error_class, verb):
        error = error_class(Item.GOAL, [2])
        assert str(error) == f"Nothing to {verb}. Use help for a list of commands"
        assert error.item is Item.GOAL
        assert error.path == [2]

    def test_nothing_to_show(self):
        assert str(NothingToShowError(Item.ALERT)) == "Nothing to show. Use help for a list of commands"

    @pytest.mark.parametrize(
        "item, plural",
        [
            (Item.GOAL, "goals"),
            (Item.ACTION, "actions"),
            (Item.AGREEMENT, "agreements"),
            (Item.ALERT, "alerts"),
            (Item.RESULT, "results"),
        ],
    )
    def test_capacity_names_kind(self, item, plural):
        error = CapacityError(item, 7)
        assert str(error) == f"Maximum number of allowed {plural} is 7"
        assert error.limit == 7

    def test_unknown_command(self):
        error = UnknownCommandError(["foo", "bar"])
        assert str(error) == "Unknown command foo bar. Use help for a list of commands"
        assert error.words == ["foo", "bar"]

    def test_storage_errors(self):
        assert str(PlanLoadError("lipla.dat")) == "Unable to load lipla.dat"
        assert str(PlanSaveError("lipla.dat", "Permission denied")) == (
            "Unable to save lipla.dat: Permission denied"
        )
        assert str(HistoryError("lipla.his", "load")) == "Unable to load lipla.his"
        assert str(ExportError("out.xml")) == "Unable to export data to out.xml"
