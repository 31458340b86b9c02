from __future__ import annotations

from abc import ABC, abstractmethod
import numpy as np

from qtable.core.indices import Action, State
from qtable.core.table import QTable


class Strategy(ABC):
    """
    Action-selection policy: a pure function (table, state) -> action.

    Strategies only read the table (through `QTable.row`) and keep no state of their own,
    so one instance can be shared freely. Randomness comes from the `rng` argument, or from
    a fresh Generator on every call.
    """

    @abstractmethod
    def determine(
        self,
        table: QTable,
        state: State,
        rng: np.random.Generator | int | None = None,
    ) -> Action:
        """
        Choose an action for `state`.

        :param table: Table to read action values from.
            :type table: QTable
        :param state: State validated against `table`.
            :type state: State
        :param rng: Generator or seed (a fresh Generator if None).
            :type rng: np.random.Generator | int | None

        :return: Selected action.
            :rtype: Action
        """

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


def _require_actions(table: QTable) -> None:
    if table.action_size == 0:
        raise ValueError("Cannot select an action on a table with action_size == 0.")
