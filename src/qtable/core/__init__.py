"""
Core data model of the action-value store.

Includes:
- QValue: bounded, immutable estimate
- State / Action: bounds-checked index handles
- QConfig: dimensions and learning parameters
- QTable: the grid, its read-only views and the Q-learning update
"""

from .errors import (
    QTableError,
    IndexOutOfBoundsError,
    InvalidStateIndexError,
    InvalidActionIndexError,
    QValueRangeError,
)
from .value import QValue, QVALUE_MIN, QVALUE_MAX
from .indices import State, Action
from .config import QConfig
from .snapshot import QTableSnapshot
from .table import QTable, QUpdate, ActionValues

__all__ = [
    "QTableError",
    "IndexOutOfBoundsError",
    "InvalidStateIndexError",
    "InvalidActionIndexError",
    "QValueRangeError",
    "QValue",
    "QVALUE_MIN",
    "QVALUE_MAX",
    "State",
    "Action",
    "QConfig",
    "QTableSnapshot",
    "QTable",
    "QUpdate",
    "ActionValues",
]
