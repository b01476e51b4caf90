"""
The life plan root and its mutation primitives.

Paths are lists of 0-based indices walked top-down from the plan, one index
per level of the addressed kind's lineage. They are resolved against the
current tree on every call and never cached, so removing a node shifts the
positions of its later siblings.
"""

from collections.abc import Iterator

from pydantic import BaseModel, Field

from lipla.core.tree_node import (
    Action,
    Agreement,
    Alert,
    Goal,
    Result,
    TreeNode,
    timestamp,
)
from lipla.core.types import MAX_CHILDREN, Item
from lipla.exceptions.core import (
    CapacityError,
    NodeReferenceError,
    NothingToAddError,
    NothingToRemoveError,
    NothingToUpdateError,
)

NODE_CLASSES: dict[Item, type[TreeNode]] = {
    Item.GOAL: Goal,
    Item.ACTION: Action,
    Item.AGREEMENT: Agreement,
    Item.ALERT: Alert,
    Item.RESULT: Result,
}

PERSONAL_FIELDS = (
    "firstname",
    "lastname",
    "address",
    "zip",
    "city",
    "country",
    "state",
    "telephone",
    "mobile",
    "email",
    "about",
)


class Plan(BaseModel):
    """
    Represents a life plan.

    A plan consists of some personal information and an ordered list of at
    most seven goals. The plan itself is never destroyed, only cleared.
    """

    firstname: str = ""
    lastname: str = ""
    birthday: str = Field(default_factory=timestamp)
    address: str = ""
    zip: str = ""
    city: str = ""
    country: str = ""
    state: str = ""
    telephone: str = ""
    mobile: str = ""
    email: str = ""
    goals: list[Goal] = Field(default_factory=list)
    date: str = Field(default_factory=timestamp)
    about: str = ""

    def _walk_to(
        self,
        lineage: tuple[Item, ...],
        path: list[int],
        item: Item,
        error: type[NodeReferenceError],
    ) -> "Plan | TreeNode":
        """
        Follow a path down the given lineage.

        Params:
            lineage: Record kinds to descend through, one per path index
            path: 0-based indices, same length as lineage
            item: The kind reported in a failure
            error: Exception class raised when an index does not exist

        Returns:
            The node at the end of the path (the plan for an empty path)
        """
        if len(path) != len(lineage):
            raise ValueError(
                f"Path {path} does not address a {item.value} "
                f"(expected {len(lineage)} indices)"
            )
        node: Plan | TreeNode = self
        for kind, index in zip(lineage, path):
            children = getattr(node, kind.plural)
            if not 0 <= index < len(children):
                raise error(item, path)
            node = children[index]
        return node

    def children(
        self,
        item: Item,
        parent_path: list[int],
        error: type[NodeReferenceError] = NothingToAddError,
    ) -> list:
        """
        Return the live list of children of a kind under a parent.

        Params:
            item: Kind of the children
            parent_path: 0-based path of the parent (empty for goals)
            error: Exception class raised when the parent does not exist

        Returns:
            The list owned by the parent; mutating it mutates the plan
        """
        parent = self._walk_to(item.lineage[:-1], parent_path, item, error)
        return getattr(parent, item.plural)

    def node(
        self,
        item: Item,
        path: list[int],
        error: type[NodeReferenceError] = NodeReferenceError,
    ) -> TreeNode:
        """Return the node of a kind at a full path."""
        return self._walk_to(item.lineage, path, item, error)

    def add(self, item: Item, parent_path: list[int], description: str = "") -> TreeNode:
        """
        Append a new node under a parent.

        Params:
            item: Kind of the node to create
            parent_path: 0-based path of the parent (empty for goals)
            description: Description of the new node

        Returns:
            The new node

        Raises:
            NothingToAddError: If the parent does not exist
            CapacityError: If the parent already holds the maximum number of nodes of that kind
        """
        siblings = self.children(item, parent_path, NothingToAddError)
        if len(siblings) >= MAX_CHILDREN:
            raise CapacityError(item, MAX_CHILDREN)
        node = NODE_CLASSES[item](description=description)
        siblings.append(node)
        return node

    def update(self, item: Item, path: list[int], description: str) -> TreeNode:
        """
        Replace the description of an existing node.

        Position, sibling count and creation date are left untouched.

        Raises:
            NothingToUpdateError: If the node does not exist
        """
        node = self.node(item, path, NothingToUpdateError)
        node.description = description
        return node

    def remove(self, item: Item, path: list[int]) -> TreeNode:
        """
        Delete a node together with all of its descendants.

        Raises:
            NothingToRemoveError: If the node does not exist
        """
        self.node(item, path, NothingToRemoveError)
        siblings = self.children(item, path[:-1], NothingToRemoveError)
        return siblings.pop(path[-1])

    def walk(self) -> Iterator[tuple[Item, tuple[int, ...], TreeNode]]:
        """
        Iterate depth-first over every record in display order.

        A goal is followed by its actions (each followed by its agreements,
        each followed by its alerts) and then by its results.

        Yields:
            Tuples of (kind, 0-based path, node)
        """
        for go, goal in enumerate(self.goals):
            yield Item.GOAL, (go,), goal
            for ac, action in enumerate(goal.actions):
                yield Item.ACTION, (go, ac), action
                for ag, agreement in enumerate(action.agreements):
                    yield Item.AGREEMENT, (go, ac, ag), agreement
                    for al, alert in enumerate(agreement.alerts):
                        yield Item.ALERT, (go, ac, ag, al), alert
            for re, result in enumerate(goal.results):
                yield Item.RESULT, (go, re), result

    def count(self, item: Item = Item.ALL) -> int:
        """Count the records of a kind anywhere in the plan (ALL counts every record)."""
        return sum(1 for kind, _, _ in self.walk() if item in (Item.ALL, kind))

    def clear(self) -> None:
        """Reset all personal fields and remove every goal."""
        for name in PERSONAL_FIELDS:
            setattr(self, name, "")
        self.birthday = timestamp()
        self.date = timestamp()
        self.goals = []

    def is_empty(self) -> bool:
        """Check if the plan holds no data; birthday and date are ignored."""
        return not self.goals and not any(getattr(self, name) for name in PERSONAL_FIELDS)
