from __future__ import annotations

import numpy as np

from qtable.common.seeding import make_rng
from qtable.core.indices import Action, State
from qtable.core.table import QTable
from .base import Strategy, _require_actions
from .uniform import Random


class MostQValue(Strategy):
    """
    Greedy selection: an action with the maximum Q-value at that state.

    All actions whose value equals the maximum (exact equality) are candidates and one is
    drawn uniformly among them.
    """

    def determine(
        self,
        table: QTable,
        state: State,
        rng: np.random.Generator | int | None = None,
    ) -> Action:
        _require_actions(table)
        rng = make_rng(rng)

        best_actions = table.row(state).argmax_all()
        return Action.new_on(table, int(rng.choice(best_actions)))  # tie-breaking -> the first argmax would bias towards low indices


class EpsilonGreedy(Strategy):
    """
    ε-greedy selection with ε read from the table (`table.epsilon`):
        1. With probability epsilon: explore -> Random
        2. Else: exploit -> MostQValue
    """

    def determine(
        self,
        table: QTable,
        state: State,
        rng: np.random.Generator | int | None = None,
    ) -> Action:
        rng = make_rng(rng)

        # Exploration
        if rng.random() < table.epsilon:
            return Random().determine(table, state, rng=rng)

        # Exploitation
        return MostQValue().determine(table, state, rng=rng)
