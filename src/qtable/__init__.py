"""
qtable: a tabular action-value store for reinforcement learning.

A QTable holds bounded QValues for every (State, Action) pair, is read through
validated handles and is only ever written by its Q-learning `update`.
Strategies turn a row of values into an action choice.
"""

from .core import (
    QTableError,
    IndexOutOfBoundsError,
    InvalidStateIndexError,
    InvalidActionIndexError,
    QValueRangeError,
    QValue,
    QVALUE_MIN,
    QVALUE_MAX,
    State,
    Action,
    QConfig,
    QTableSnapshot,
    QTable,
    QUpdate,
    ActionValues,
)
from .strategies import Strategy, MostQValue, SoftMax, EpsilonGreedy, Random, softmax_probabilities

__version__ = "0.1.0"

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
    "Strategy",
    "MostQValue",
    "SoftMax",
    "EpsilonGreedy",
    "Random",
    "softmax_probabilities",
]
