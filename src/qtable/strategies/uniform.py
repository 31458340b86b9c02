from __future__ import annotations

import numpy as np

from qtable.common.seeding import make_rng
from qtable.core.indices import Action, State
from qtable.core.table import QTable
from .base import Strategy, _require_actions


class Random(Strategy):
    """
    Uniform selection over all actions, ignoring the values.
    """

    def determine(
        self,
        table: QTable,
        state: State,
        rng: np.random.Generator | int | None = None,
    ) -> Action:
        _require_actions(table)
        index = make_rng(rng).integers(low=0, high=table.action_size)
        return Action.new_on(table, int(index))
