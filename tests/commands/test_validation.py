"""
Tests for path validation before a command touches the plan.
"""

import pytest

from lipla.commands.validation import required_indices, validate_arity, validate_target
from lipla.core.path_utils import ParsedPath
from lipla.core.types import Command, Item
from lipla.exceptions import (
    CapacityError,
    NothingToAddError,
    NothingToRemoveError,
    NothingToUpdateError,
    TooFewIndicesError,
    TooManyIndicesError,
)


class TestRequiredIndices:
    @pytest.mark.parametrize(
        "item, add, other",
        [
            (Item.GOAL, 0, 1),
            (Item.ACTION, 1, 2),
            (Item.AGREEMENT, 2, 3),
            (Item.ALERT, 3, 4),
            (Item.RESULT, 1, 2),
        ],
    )
    def test_required(self, item, add, other):
        assert required_indices(Command.ADD, item) == add
        assert required_indices(Command.UPDATE, item) == other
        assert required_indices(Command.REMOVE, item) == other


class TestArity:
    """Test the number of typed indices."""

    def test_exact(self):
        validate_arity(Command.ADD, Item.ACTION, ParsedPath([0]))
        validate_arity(Command.REMOVE, Item.ALERT, ParsedPath([0, 0, 0, 0]))

    def test_too_many_for_goal(self):
        with pytest.raises(TooManyIndicesError) as exc_info:
            validate_arity(Command.ADD, Item.GOAL, ParsedPath([0]))
        assert str(exc_info.value) == "Too many indexes. Use none"

    def test_too_many(self):
        with pytest.raises(TooManyIndicesError) as exc_info:
            validate_arity(Command.UPDATE, Item.GOAL, ParsedPath([0, 1]))
        assert str(exc_info.value) == "Too many indexes. Use less"

    def test_too_few_includes_usage(self):
        with pytest.raises(TooFewIndicesError) as exc_info:
            validate_arity(Command.REMOVE, Item.RESULT, ParsedPath([0]))
        assert exc_info.value.usage == "remove result <goal number> <result number>"
        assert exc_info.value.given == 1
        assert exc_info.value.expected == 2


class TestTarget:
    """Test existence and capacity checks against the current plan."""

    def test_add_under_missing_parent(self, sample_plan):
        with pytest.raises(NothingToAddError):
            validate_target(sample_plan, Command.ADD, Item.AGREEMENT, [0, 2])

    def test_add_at_capacity(self, sample_plan):
        for _ in range(5):
            sample_plan.add(Item.GOAL, [], "more")
        with pytest.raises(CapacityError):
            validate_target(sample_plan, Command.ADD, Item.GOAL, [])
        assert sample_plan.count(Item.GOAL) == 7

    def test_update_missing(self, sample_plan):
        with pytest.raises(NothingToUpdateError):
            validate_target(sample_plan, Command.UPDATE, Item.GOAL, [2])

    def test_remove_missing(self, sample_plan):
        with pytest.raises(NothingToRemoveError):
            validate_target(sample_plan, Command.REMOVE, Item.ALERT, [1, 0, 0, 0])

    def test_existing_targets_pass(self, sample_plan):
        validate_target(sample_plan, Command.ADD, Item.ALERT, [0, 0, 0])
        validate_target(sample_plan, Command.UPDATE, Item.RESULT, [0, 0])
        validate_target(sample_plan, Command.REMOVE, Item.GOAL, [1])

    def test_non_record_command(self, sample_plan):
        with pytest.raises(ValueError):
            validate_target(sample_plan, Command.SHOW, Item.GOAL, [0])
