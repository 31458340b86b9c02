from __future__ import annotations

from dataclasses import dataclass
import numpy as np

from qtable.common.seeding import make_rng
from .errors import QValueRangeError

QVALUE_MIN = -1.0
QVALUE_MAX = 1.0


@dataclass(frozen=True, order=True)  # order=True compares the wrapped float -> total order, no NaN can get in
class QValue:
    """
    Estimated value of a (state, action) pair, bounded to [QVALUE_MIN, QVALUE_MAX).

    A QValue is immutable: the table replaces cells with new QValues, it never edits one.
    Equality is exact float equality (no tolerance), which is what greedy tie-breaking relies on.

    :param value: The wrapped estimate.
        :type value: float

    :raises QValueRangeError: If value is NaN or outside [QVALUE_MIN, QVALUE_MAX).
    """

    value: float

    def __post_init__(self) -> None:
        raw = float(self.value)
        # NaN fails both comparisons
        if not (QVALUE_MIN <= raw < QVALUE_MAX):
            raise QValueRangeError(raw, QVALUE_MIN, QVALUE_MAX)
        object.__setattr__(self, "value", raw)  # normalise numpy scalars / ints to a plain float

    def __float__(self) -> float:
        return self.value

    def __repr__(self) -> str:
        return f"QValue({self.value!r})"

    @classmethod
    def random(cls, rng: np.random.Generator | None = None) -> QValue:
        """
        Draw a QValue uniformly from [QVALUE_MIN, QVALUE_MAX).

        :param rng: Generator to draw from (a fresh one if None).
            :type rng: np.random.Generator | None

        :return: Random QValue.
            :rtype: QValue
        """
        # rng.uniform may round up to `high`; an affine map of random() in [0, 1) cannot
        return cls(QVALUE_MIN + (QVALUE_MAX - QVALUE_MIN) * make_rng(rng).random())

    @classmethod
    def random_collect(cls, size: int, rng: np.random.Generator | None = None) -> list[QValue]:
        """
        Draw `size` independent random QValues (one table row).

        :param size: Number of values.
            :type size: int
        :param rng: Generator to draw from (a fresh one if None).
            :type rng: np.random.Generator | None

        :return: List of QValues.
            :rtype: list[QValue]
        """
        rng = make_rng(rng)
        return [cls.random(rng) for _ in range(int(size))]
