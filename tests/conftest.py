"""
Shared test fixtures and utilities for the lipla test suite.
"""

import io

import pytest
from rich.console import Console

from lipla.commands.dispatcher import Dispatcher
from lipla.core.plan import Plan
from lipla.core.types import Item


class FakeHistory:
    """In-memory interpreter history recording every added line."""

    def __init__(self):
        self.lines: list[str] = []
        self.cleared = 0

    def add(self, line: str) -> None:
        self.lines.append(line)

    def clear(self) -> None:
        self.lines = []
        self.cleared += 1


def make_console() -> Console:
    """Console writing plain text to a buffer; read it with `output(console)`."""
    return Console(
        file=io.StringIO(), force_terminal=False, color_system=None, width=200
    )


def output(console: Console) -> str:
    return console.file.getvalue()


@pytest.fixture
def console():
    return make_console()


@pytest.fixture
def history():
    return FakeHistory()


@pytest.fixture
def plan():
    return Plan()


@pytest.fixture
def sample_plan():
    """Plan with two goals, nested actions, agreements, alerts and results.

    Layout (1-based):
        Goal 1 "Lose weight"
            Action 1.1 "Diet"
                Agreement 1.1.1 "No sugar"
                    Alert 1.1.1.1 "Birthday parties"
            Action 1.2 "Exercise"
            Result 1.1 "Lost 2 kg"
        Goal 2 "Learn Spanish"
    """
    plan = Plan()
    plan.add(Item.GOAL, [], "Lose weight")
    plan.add(Item.ACTION, [0], "Diet")
    plan.add(Item.AGREEMENT, [0, 0], "No sugar")
    plan.add(Item.ALERT, [0, 0, 0], "Birthday parties")
    plan.add(Item.ACTION, [0], "Exercise")
    plan.add(Item.RESULT, [0], "Lost 2 kg")
    plan.add(Item.GOAL, [], "Learn Spanish")
    return plan


@pytest.fixture
def dispatcher(plan, console, history):
    return Dispatcher(plan, console, history)
