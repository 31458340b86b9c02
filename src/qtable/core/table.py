from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path
from typing import TYPE_CHECKING, Iterator
import numpy as np

from qtable.common.seeding import make_rng
from .config import QConfig, warn_if_outside_unit_interval
from .indices import Action, State
from .snapshot import QConfigPayload, QTableSnapshot, read_snapshot, write_snapshot
from .value import QValue

if TYPE_CHECKING:
    from qtable.strategies.base import Strategy


@dataclass(frozen=True)
class QUpdate:
    """
    One observed transition fed back into the table.

    :param state: State the action was taken in.
        :type state: State
    :param action: Action taken.
        :type action: Action
    :param reward: Observed reward.
        :type reward: float
    :param next_state: State reached.
        :type next_state: State
    """
    state: State
    action: Action
    reward: float
    next_state: State


class ActionValues:
    """
    Read-only view of the action values of one state (one row of the table).

    Indexing takes Action handles and returns QValue objects. The NumPy row is kept as a
    private non-writeable view and only copies of it are handed out.

    :param row: One row of the table grid.
        :type row: np.ndarray
    """

    __slots__ = ("_row",)

    def __init__(self, row: np.ndarray) -> None:
        view = row.view()
        view.flags.writeable = False
        self._row = view

    def __getitem__(self, action: Action) -> QValue:
        if not isinstance(action, Action):
            raise TypeError(f"Action values are indexed by Action handles, got {type(action).__name__}")
        return QValue(self._row[action.index])

    def __len__(self) -> int:
        return int(self._row.shape[0])

    def __iter__(self) -> Iterator[QValue]:
        for value in self._row:
            yield QValue(value)

    def __repr__(self) -> str:
        return f"ActionValues({self._row.tolist()!r})"

    def max(self) -> QValue:
        """
        Largest value of the row.

        :raises ValueError: If the row is empty (action_size == 0).
        """
        if self._row.size == 0:
            raise ValueError("max() of an empty action-value row (action_size == 0).")
        return QValue(np.max(self._row))

    def argmax_all(self) -> np.ndarray:
        """
        Indices of every entry exactly equal to the row maximum (ties are kept, no tolerance).

        :return: Sorted action indices.
            :rtype: np.ndarray
        """
        return np.flatnonzero(self._row == float(self.max()))

    def to_numpy(self) -> np.ndarray:
        """
        Float64 copy of the row (editing it never touches the table).
        """
        return self._row.copy()


class QTable:
    """
    Tabular action-value store Q[s, a] with a single mutation path.

    The grid has shape (state_size, action_size) and is filled with independent random
    QValues at construction. Reads are unrestricted (`row`, `cell`, `table[s]`, `table[s, a]`),
    but no writable view of the grid is ever handed out: cells only change through `update`,
    which applies the one-step Q-learning rule

        Q(s,a) <- Q(s,a) + alpha * [r + gamma * max_a' Q(s',a') - Q(s,a)]

    The table is not thread-safe. A host that shares it between threads must hold one lock
    around each `update` (it reads row s' and writes cell (s,a) as one step).

    :param config: Dimensions and learning parameters (QConfig() defaults if None).
        :type config: QConfig | None
    :param rng: Generator or seed used for the random initial values.
        :type rng: np.random.Generator | int | None
    """

    def __init__(self, config: QConfig | None = None, rng: np.random.Generator | int | None = None):
        self._config = QConfig() if config is None else config

        rng = make_rng(rng)
        self._qvalues = np.array(
            [
                [float(q) for q in QValue.random_collect(self._config.action_size, rng)]
                for _ in range(self._config.state_size)
            ],
            dtype=np.float64,
        ).reshape(self._config.state_size, self._config.action_size)  # keeps the shape when a dimension is 0

    # Dimensions and parameters

    @property
    def config(self) -> QConfig:
        return self._config

    @property
    def state_size(self) -> int:
        return self._config.state_size

    @property
    def action_size(self) -> int:
        return self._config.action_size

    @property
    def gamma(self) -> float:
        return self._config.gamma

    @property
    def alpha(self) -> float:
        return self._config.alpha

    @property
    def epsilon(self) -> float:
        return self._config.epsilon

    def decay_alpha(self, rate: float) -> None:
        """
        Set alpha to alpha * rate (e.g. to shrink the learning rate over time).

        No bounds are enforced; a result outside [0, 1] only triggers a RuntimeWarning.

        :param rate: Multiplicative decay factor.
            :type rate: float

        :return: None.
            :rtype: None
        """
        alpha = self._config.alpha * float(rate)
        warn_if_outside_unit_interval("alpha", alpha)
        self._config = replace(self._config, alpha=alpha)

    def decay_epsilon(self, rate: float) -> None:
        """
        Set epsilon to epsilon * rate (e.g. to explore less as learning progresses).

        :param rate: Multiplicative decay factor.
            :type rate: float

        :return: None.
            :rtype: None
        """
        epsilon = self._config.epsilon * float(rate)
        warn_if_outside_unit_interval("epsilon", epsilon)
        self._config = replace(self._config, epsilon=epsilon)

    # Handles

    def state(self, index: int) -> State:
        return State.new_on(self, index)

    def action(self, index: int) -> Action:
        return Action.new_on(self, index)

    def states(self) -> Iterator[State]:
        return State.iter_on(self)

    def actions(self) -> Iterator[Action]:
        return Action.iter_on(self)

    # Read access

    def row(self, state: State) -> ActionValues:
        """
        Action values of `state`, as a read-only view.

        :param state: Validated state handle.
            :type state: State

        :return: Read-only row view indexed by Action handles.
            :rtype: ActionValues
        """
        if not isinstance(state, State):
            raise TypeError(f"Rows are indexed by State handles, got {type(state).__name__}")
        return ActionValues(self._qvalues[state.index])

    def cell(self, state: State, action: Action) -> QValue:
        """
        Value of a single (state, action) entry.

        :param state: Validated state handle.
            :type state: State
        :param action: Validated action handle.
            :type action: Action

        :return: Q(state, action).
            :rtype: QValue
        """
        return self.row(state)[action]

    def __getitem__(self, key):
        if isinstance(key, tuple):
            state, action = key
            return self.cell(state, action)
        return self.row(key)

    # Learning

    def update(self, state: State, action: Action, reward: float, next_state: State) -> QValue:
        """
        Apply the Q-learning update to Q(state, action). This is the only method that writes to the grid.

        Update:
            Q(s,a) <- Q(s,a) + alpha * [r + gamma * max_a' Q(s',a') - Q(s,a)]

        The new estimate is wrapped in a QValue before it is stored: if it leaves the
        QValue range the error propagates and the table is left unchanged.

        :param state: Current state.
            :type state: State
        :param action: Action taken.
            :type action: Action
        :param reward: Observed reward.
            :type reward: float
        :param next_state: Next state.
            :type next_state: State

        :return: The stored value.
            :rtype: QValue

        :raises QValueRangeError: If the new estimate falls outside the QValue range.
        """
        current = float(self.cell(state, action))
        next_max = float(self.row(next_state).max())

        td_error = float(reward) + self.gamma * next_max - current
        new_value = QValue(current + self.alpha * td_error)

        self._qvalues[state.index, action.index] = new_value.value
        return new_value

    def apply(self, transition: QUpdate) -> QValue:
        """
        Same as `update`, taking the transition as a QUpdate record.
        """
        return self.update(
            state=transition.state,
            action=transition.action,
            reward=transition.reward,
            next_state=transition.next_state,
        )

    def next_action(
        self,
        strategy: Strategy,
        state: State,
        rng: np.random.Generator | int | None = None,
    ) -> Action:
        """
        Pick an action for `state` with the strategy chosen by the caller.

        :param strategy: Action-selection policy.
            :type strategy: Strategy
        :param state: Current state.
            :type state: State
        :param rng: Generator or seed for the strategy's randomness.
            :type rng: np.random.Generator | int | None

        :return: Selected action.
            :rtype: Action
        """
        return strategy.determine(self, state, rng=rng)

    # Persistence

    def to_snapshot(self) -> QTableSnapshot:
        return QTableSnapshot(
            config=QConfigPayload(
                state_size=self.state_size,
                action_size=self.action_size,
                gamma=self.gamma,
                alpha=self.alpha,
                epsilon=self.epsilon,
            ),
            qvalues=self._qvalues.tolist(),
        )

    @classmethod
    def from_snapshot(cls, snapshot: QTableSnapshot) -> QTable:
        table = cls.__new__(cls)
        table._config = snapshot.to_config()
        table._qvalues = np.array(snapshot.qvalues, dtype=np.float64).reshape(
            table._config.state_size, table._config.action_size
        )
        return table

    def save(self, file_path: str | Path) -> None:
        """
        Write the table (configuration and every value) to a JSON file.

        Floats are written in shortest round-trip form, so `QTable.load` restores them exactly.

        :param file_path: Destination file.
            :type file_path: str | Path

        :return: None.
            :rtype: None
        """
        write_snapshot(self.to_snapshot(), file_path)

    @classmethod
    def load(cls, file_path: str | Path) -> QTable:
        """
        Rebuild a table from a file written by `save`.

        :param file_path: Source file.
            :type file_path: str | Path

        :return: Restored table.
            :rtype: QTable

        :raises OSError: If the file cannot be read.
        :raises pydantic.ValidationError: If the file is not a valid snapshot.
        """
        return cls.from_snapshot(read_snapshot(file_path))
