import numpy as np
import pytest

from qtable import QTable, QTableSnapshot


def table_from_grid(grid, gamma: float = 0.99, alpha: float = 0.5, epsilon: float = 0.5) -> QTable:
    """
    Build a table with known values through the snapshot path (the table has no cell setter).

    :param grid: Q-values, grid[state][action].
        :type grid: array-like
    :param gamma: Discount factor.
        :type gamma: float
    :param alpha: Learning rate.
        :type alpha: float
    :param epsilon: Exploration probability.
        :type epsilon: float

    :return: Table holding exactly `grid`.
        :rtype: QTable
    """
    grid = np.asarray(grid, dtype=np.float64)
    snapshot = QTableSnapshot.model_validate(
        {
            "config": {
                "state_size": grid.shape[0],
                "action_size": grid.shape[1],
                "gamma": gamma,
                "alpha": alpha,
                "epsilon": epsilon,
            },
            "qvalues": grid.tolist(),
        }
    )
    return QTable.from_snapshot(snapshot)


@pytest.fixture
def make_table():
    return table_from_grid
