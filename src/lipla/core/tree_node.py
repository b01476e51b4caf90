"""
Record classes of a life plan.

A life plan consists of goals. To achieve a goal one executes actions,
every action is performed by fulfilling agreements, and alerts describe how
to avoid the temptations that would break an agreement. Results report on a
goal based on a process or product evaluation.
"""

from datetime import datetime

from pydantic import BaseModel, Field


def timestamp() -> str:
    """Return the current local time as an ISO-8601 string with seconds precision."""
    return datetime.now().astimezone().replace(microsecond=0).isoformat()


class TreeNode(BaseModel):
    """
    Base class for all records in the life plan tree.

    Every record has a free-text description and a creation timestamp.
    The timestamp is set once and never changed by an update.
    """

    date: str = Field(default_factory=timestamp)
    description: str = ""


class Alert(TreeNode):
    """Describes how to avoid a temptation."""

    pass


class Agreement(TreeNode):
    """A short-term performance that keeps an action on track."""

    alerts: list[Alert] = Field(default_factory=list)


class Action(TreeNode):
    """A medium-term performance towards a goal."""

    agreements: list[Agreement] = Field(default_factory=list)


class Result(TreeNode):
    """An evaluation of the progress made towards a goal."""

    pass


class Goal(TreeNode):
    """A long-term accomplishment."""

    actions: list[Action] = Field(default_factory=list)
    results: list[Result] = Field(default_factory=list)
