"""
Lipla exception classes.

This package provides all exception types used throughout the Lipla
interpreter for consistent error handling and reporting.
"""

from lipla.exceptions.core import (
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

__all__ = [
    "LiplaError",
    "PathParseError",
    "ZeroIdError",
    "NegativeIdError",
    "ArityError",
    "TooManyIndicesError",
    "TooFewIndicesError",
    "NodeReferenceError",
    "NothingToAddError",
    "NothingToUpdateError",
    "NothingToRemoveError",
    "NothingToShowError",
    "CapacityError",
    "UnknownCommandError",
    "StorageError",
    "PlanLoadError",
    "PlanSaveError",
    "HistoryError",
    "ExportError",
]
