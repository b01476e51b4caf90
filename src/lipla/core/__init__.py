"""
Core Lipla components.

This package provides the life plan tree model, the item and command
vocabularies and the numeric path parser.
"""

from lipla.core.path_utils import ParsedPath, parse_path, unquote
from lipla.core.plan import NODE_CLASSES, Plan
from lipla.core.tree_node import (
    Action,
    Agreement,
    Alert,
    Goal,
    Result,
    TreeNode,
    timestamp,
)
from lipla.core.types import MAX_CHILDREN, RECORD_ITEMS, Command, Item

__all__ = [
    "Plan",
    "TreeNode",
    "Goal",
    "Action",
    "Agreement",
    "Alert",
    "Result",
    "NODE_CLASSES",
    "timestamp",
    "Command",
    "Item",
    "MAX_CHILDREN",
    "RECORD_ITEMS",
    "ParsedPath",
    "parse_path",
    "unquote",
]
