"""Matrix interface used by the dynamic programming algorithms

A cell (x, y) means "x source segments and y target segments consumed".
Implementations differ only in which cells they store; algorithms walk the
valid cells through MatrixIterator and never assume dense storage.
"""

from abc import ABC, abstractmethod
from typing import Any, Iterator, Optional, Tuple

from ..errors import ConfigurationError

Position = Tuple[int, int]


class Matrix(ABC):
    """Addressable 2-D storage for algorithm specific cell payloads."""

    def __init__(self, width: int, height: int):
        if width < 1 or height < 1:
            raise ConfigurationError(
                f"Matrix dimensions must be positive, got {width}x{height}"
            )
        self.width = width
        self.height = height

    @abstractmethod
    def row_range(self, y: int) -> Tuple[int, int]:
        """Inclusive range of valid x positions in row y (empty when min > max)."""
        raise NotImplementedError

    def element_exists(self, x: int, y: int) -> bool:
        """Whether (x, y) is a valid position of this matrix."""
        if not 0 <= y < self.height:
            return False
        min_x, max_x = self.row_range(y)
        return min_x <= x <= max_x

    @abstractmethod
    def get(self, x: int, y: int) -> Optional[Any]:
        """Payload at (x, y) or None when absent or outside the matrix."""
        raise NotImplementedError

    @abstractmethod
    def set(self, x: int, y: int, value: Any):
        raise NotImplementedError

    def iterator(self) -> "MatrixIterator":
        return MatrixIterator(self)

    def __iter__(self) -> Iterator[Position]:
        return iter(self.iterator())

    def __reversed__(self) -> Iterator[Position]:
        return reversed(self.iterator())

    @property
    def corner(self) -> Position:
        """Position where all segments are consumed."""
        return self.width - 1, self.height - 1


class MatrixIterator:
    """Bidirectional row-major iterator over valid matrix positions.

    Typical use::

        iterator.before_first()
        while iterator.has_next():
            x, y = iterator.next()
    """

    _BEFORE = "before"
    _AT = "at"
    _AFTER = "after"

    def __init__(self, matrix: Matrix):
        self.matrix = matrix
        self._state = self._BEFORE
        self._position: Optional[Position] = None

    def before_first(self):
        self._state = self._BEFORE
        self._position = None

    def after_last(self):
        self._state = self._AFTER
        self._position = None

    def has_next(self) -> bool:
        return self._peek_next() is not None

    def has_previous(self) -> bool:
        return self._peek_previous() is not None

    def next(self) -> Position:
        position = self._peek_next()
        if position is None:
            raise StopIteration
        return self._move_to(position)

    def previous(self) -> Position:
        position = self._peek_previous()
        if position is None:
            raise StopIteration
        return self._move_to(position)

    def __iter__(self):
        self.before_first()
        return self

    def __next__(self) -> Position:
        return self.next()

    def __reversed__(self) -> Iterator[Position]:
        self.after_last()
        while self.has_previous():
            yield self.previous()

    def _move_to(self, position: Position) -> Position:
        self._state = self._AT
        self._position = position
        return position

    def _first_in_row_from(self, y: int) -> Optional[Position]:
        for row in range(y, self.matrix.height):
            min_x, max_x = self.matrix.row_range(row)
            if min_x <= max_x:
                return min_x, row
        return None

    def _last_in_row_from(self, y: int) -> Optional[Position]:
        for row in range(y, -1, -1):
            min_x, max_x = self.matrix.row_range(row)
            if min_x <= max_x:
                return max_x, row
        return None

    def _peek_next(self) -> Optional[Position]:
        if self._state == self._AFTER:
            return None
        if self._state == self._BEFORE:
            return self._first_in_row_from(0)
        x, y = self._position
        if x < self.matrix.row_range(y)[1]:
            return x + 1, y
        return self._first_in_row_from(y + 1)

    def _peek_previous(self) -> Optional[Position]:
        if self._state == self._BEFORE:
            return None
        if self._state == self._AFTER:
            return self._last_in_row_from(self.matrix.height - 1)
        x, y = self._position
        if x > self.matrix.row_range(y)[0]:
            return x - 1, y
        return self._last_in_row_from(y - 1)


class MatrixFactory(ABC):
    """Creates matrices of requested dimensions."""

    @abstractmethod
    def create_matrix(self, width: int, height: int) -> Matrix:
        raise NotImplementedError
