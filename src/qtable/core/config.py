from __future__ import annotations

from dataclasses import dataclass
import numbers
import warnings


@dataclass(frozen=True)
class QConfig:
    """
    Dimensions and learning parameters of a QTable.

    The dimensions are fixed for the lifetime of a table. gamma, alpha and epsilon are
    expected in [0, 1] but are not enforced: other values are accepted (with a RuntimeWarning)
    and simply make the update rule or the exploration behave strangely.

    :param state_size: Number of states (rows).
        :type state_size: int
    :param action_size: Number of actions (columns).
        :type action_size: int
    :param gamma: Discount factor.
        :type gamma: float
    :param alpha: Learning rate.
        :type alpha: float
    :param epsilon: Exploration probability for ε-greedy.
        :type epsilon: float
    """

    state_size: int = 14
    action_size: int = 14
    gamma: float = 0.99
    alpha: float = 0.5
    epsilon: float = 0.5

    def __post_init__(self) -> None:
        for name in ("state_size", "action_size"):
            size = getattr(self, name)
            if isinstance(size, bool) or not isinstance(size, numbers.Integral) or size < 0:
                raise ValueError(f"{name} must be a non-negative integer, got {size!r}")
            object.__setattr__(self, name, int(size))

        for name in ("gamma", "alpha", "epsilon"):
            object.__setattr__(self, name, float(getattr(self, name)))
            warn_if_outside_unit_interval(name, getattr(self, name))


def warn_if_outside_unit_interval(name: str, value: float) -> None:
    """
    Emit a RuntimeWarning when a learning parameter leaves [0, 1].

    :param name: Parameter name used in the message.
        :type name: str
    :param value: Parameter value.
        :type value: float

    :return: None.
        :rtype: None
    """
    if not 0.0 <= value <= 1.0:
        warnings.warn(
            message=f"{name}={value!r} is outside [0, 1]; it is accepted but the learning rule may misbehave.",
            category=RuntimeWarning,
            stacklevel=3,
        )
