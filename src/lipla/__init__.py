"""
Lipla - A command line interpreter for hierarchical life plans

Lipla keeps goals, actions, agreements, alerts and results in a small tree
and edits it through short, forgiving commands such as ``add goal`` or
``re re 1 2``.
"""

from importlib.metadata import version

from lipla.commands.dispatcher import Dispatcher, Outcome
from lipla.core.path_utils import parse_path
from lipla.core.plan import Plan
from lipla.core.types import Command, Item
from lipla.parsing.resolver import resolve

__version__ = version("lipla")

__all__ = [
    "__version__",
    "Command",
    "Dispatcher",
    "Item",
    "Outcome",
    "Plan",
    "parse_path",
    "resolve",
]
