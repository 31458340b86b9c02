from __future__ import annotations

import numpy as np

from qtable.common.seeding import make_rng
from qtable.core.indices import Action, State
from qtable.core.table import ActionValues, QTable
from .base import Strategy, _require_actions


def softmax_probabilities(values: ActionValues | np.ndarray) -> np.ndarray:
    """
    Softmax of a row of action values.

    Uses the shifted form exp(q - max q) / sum exp(q - max q): subtracting the maximum does
    not change the result but keeps exp() from overflowing.

    :param values: Row of action values.
        :type values: ActionValues | np.ndarray

    :return: Probabilities, same length as `values`, summing to 1.
        :rtype: np.ndarray
    """
    q = values.to_numpy() if isinstance(values, ActionValues) else np.asarray(values, dtype=np.float64)
    if q.size == 0:
        raise ValueError("softmax of an empty row is undefined.")

    exp = np.exp(q - np.max(q))
    return exp / np.sum(exp)


class SoftMax(Strategy):
    """
    Boltzmann selection: sample an action with probability softmax(Q(state, .)).

    Higher values are picked more often, but every action keeps a non-zero probability.
    """

    def determine(
        self,
        table: QTable,
        state: State,
        rng: np.random.Generator | int | None = None,
    ) -> Action:
        _require_actions(table)
        probabilities = softmax_probabilities(table.row(state))
        index = make_rng(rng).choice(table.action_size, p=probabilities)
        return Action.new_on(table, int(index))
