from __future__ import annotations


class QTableError(Exception):
    """
    Base class for every error raised by the qtable package.
    """


class IndexOutOfBoundsError(QTableError, IndexError):
    """
    An index handle was requested outside the table's dimension.

    Valid indices are 0 <= given < max.

    :param given: The rejected index.
        :type given: int
    :param max: The table size along that dimension.
        :type max: int
    """

    kind = "index"

    def __init__(self, given: int, max: int) -> None:
        self.given = int(given)
        self.max = int(max)
        super().__init__(f"Invalid {self.kind} index: {self.given} (max: {self.max})")


class InvalidStateIndexError(IndexOutOfBoundsError):
    kind = "state"


class InvalidActionIndexError(IndexOutOfBoundsError):
    kind = "action"


class QValueRangeError(QTableError, ValueError):
    """
    A value outside [low, high) (or NaN) was used to build a QValue.

    During `QTable.update` this means the learning parameters or the rewards push the
    estimates out of the representable range: it is a configuration error, so it is raised
    and the table is left as it was.

    :param value: The rejected value.
        :type value: float
    :param low: Inclusive lower bound.
        :type low: float
    :param high: Exclusive upper bound.
        :type high: float
    """

    def __init__(self, value: float, low: float, high: float) -> None:
        self.value = value
        self.low = low
        self.high = high
        super().__init__(f"Q-value {value!r} is outside the range [{low}, {high})")
