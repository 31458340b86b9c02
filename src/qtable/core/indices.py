from __future__ import annotations

from typing import Iterator, Protocol
import operator
import numpy as np

from .errors import IndexOutOfBoundsError, InvalidActionIndexError, InvalidStateIndexError


class SizedTable(Protocol):
    """
    What a handle needs from a table to validate an index: its two dimensions.
    """

    @property
    def state_size(self) -> int: ...

    @property
    def action_size(self) -> int: ...


class _IndexHandle:
    """
    Immutable, bounds-checked index into one dimension of a QTable.

    Handles are only minted by `new_on` (validated) or `iter_on` (valid by construction),
    so an out-of-range integer can never reach the grid.
    A handle does not remember which table validated it: using it with a table of
    different dimensions is the caller's responsibility.
    """

    __slots__ = ("_index",)

    _error: type[IndexOutOfBoundsError] = IndexOutOfBoundsError
    _dimension = ""  # name of the table attribute holding the size, e.g. "state_size"

    def __init__(self, *args, **kwargs) -> None:
        name = type(self).__name__
        raise TypeError(f"{name} cannot be built directly, use {name}.new_on(table, index).")

    @classmethod
    def _trusted(cls, index: int):
        handle = object.__new__(cls)
        object.__setattr__(handle, "_index", index)
        return handle

    @classmethod
    def _size_of(cls, table: SizedTable) -> int:
        return int(getattr(table, cls._dimension))

    @classmethod
    def new_on(cls, table: SizedTable, index: int):
        """
        Validate `index` against the table's dimension and wrap it.

        :param table: Table providing the dimension size.
            :type table: SizedTable
        :param index: Zero-based index (Python or NumPy integer).
            :type index: int

        :return: The validated handle.

        :raises IndexOutOfBoundsError: If index < 0 or index >= size (the subclass matching the dimension).
        :raises TypeError: If index is not an integer.
        """
        if isinstance(index, (bool, np.bool_)):
            raise TypeError(f"{cls.__name__} index must be an integer, not a bool.")
        index = operator.index(index)

        size = cls._size_of(table)
        if not 0 <= index < size:
            raise cls._error(given=index, max=size)
        return cls._trusted(index)

    @classmethod
    def iter_on(cls, table: SizedTable) -> Iterator:
        """
        Lazily yield every valid handle of the table's dimension in ascending order.

        Each call returns a new generator, so the sequence can be restarted.

        :param table: Table providing the dimension size.
            :type table: SizedTable

        :return: Generator of handles 0..size-1.
            :rtype: Iterator
        """
        for index in range(cls._size_of(table)):
            yield cls._trusted(index)

    @property
    def index(self) -> int:
        return self._index

    def __setattr__(self, name, value) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable.")

    def __reduce__(self):
        return type(self)._trusted, (self._index,)

    def __eq__(self, other) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._index == other._index

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._index))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._index})"


class State(_IndexHandle):
    """
    Validated row index of a QTable (0 <= index < state_size).
    """

    __slots__ = ()
    _error = InvalidStateIndexError
    _dimension = "state_size"


class Action(_IndexHandle):
    """
    Validated column index of a QTable (0 <= index < action_size).
    """

    __slots__ = ()
    _error = InvalidActionIndexError
    _dimension = "action_size"
