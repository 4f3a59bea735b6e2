import logging
import numbers
from collections.abc import Iterable
from typing import Self

import numpy as np
import numpy.typing as npt

from elemat.context import getcontext
from elemat.linalg.errors import DimensionError, check_index
from elemat.linalg.rowop import RowOperation, apply

logger = logging.getLogger(__name__)


def _checkdim(rows: int, cols: int) -> None:
    for name, n in (("rows", rows), ("cols", cols)):
        if isinstance(n, bool) or not isinstance(n, int | np.integer):
            raise TypeError(f"{name} must be an integer, not {type(n).__name__}")

        if n < 1:
            raise DimensionError(f"{name} must be positive, got {n}", rows, cols)


class Matrix:
    """Dense real matrix stored in row-major order.

    All indices are 1-based: ``a.entry(1, 1)`` is the top-left entry. The entry at
    row `r` and column `c` lives at flat offset ``(r - 1) * cols + (c - 1)``.

    Row operations mutate a matrix in place (see :meth:`apply`). Use :meth:`copy`
    first if the original is still needed.

    Parameters
    ----------
    rows : int
        Number of rows, must be positive.
    cols : int
        Number of columns, must be positive.
    entries : Iterable[float]
        ``rows * cols`` entries in row-major order. They are copied and converted to
        the floating-point type of the current context.

    Raises
    ------
    DimensionError
        If the number of entries is not ``rows * cols``, or a dimension is not
        positive.
    TypeError
        If an entry is not a real number.

    Examples
    --------
    >>> a = Matrix(2, 3, [1, 2, 3, 4, 5, 6])
    >>> a.entry(2, 1)
    4.0
    >>> a.shape
    (2, 3)
    """

    __slots__ = ("_rows", "_cols", "_entries")
    _rows: int
    _cols: int
    _entries: npt.NDArray[np.floating]

    def __init__(self, rows: int, cols: int, entries: Iterable[float], **kwargs):
        if kwargs.get("_skipcheck"):
            self._rows = rows
            self._cols = cols
            self._entries = entries  # type: ignore
            return

        _checkdim(rows, cols)

        if isinstance(entries, np.ndarray):
            if entries.dtype.kind not in "biuf":
                raise TypeError(f"expected real entries, got dtype {entries.dtype}")
        else:
            entries = list(entries)

            for x in entries:
                if np.ndim(x) != 0:
                    raise DimensionError("entries must be a flat sequence", rows, cols)

                if not isinstance(x, numbers.Real):
                    raise TypeError(f"expected a real number, got {type(x).__name__}")

        tmp = np.array(entries, dtype=getcontext().dtype)

        if tmp.ndim != 1:
            raise DimensionError(
                f"entries must be a flat sequence, got {tmp.ndim} dimensions",
                rows,
                cols,
            )

        if len(tmp) != rows * cols:
            raise DimensionError(
                f"a {rows}x{cols} matrix needs {rows * cols} entries, got {len(tmp)}",
                rows,
                cols,
                len(tmp),
            )

        self._rows = int(rows)
        self._cols = int(cols)
        self._entries = tmp
        logger.debug("created a %dx%d matrix of %s", rows, cols, tmp.dtype)

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    @property
    def dtype(self) -> np.dtype:
        """Floating-point type of the entries."""
        return self._entries.dtype

    @property
    def shape(self) -> tuple[int, int]:
        """Tuple ``(rows, cols)``."""
        return (self._rows, self._cols)

    @property
    def size(self) -> int:
        return self._entries.size

    @classmethod
    def filled(cls, rows: int, cols: int, value: float) -> Self:
        """Return a new matrix of given shape, filled with `value`."""
        _checkdim(rows, cols)
        return cls(rows, cols, [value] * (rows * cols))

    @classmethod
    def zeros(cls, rows: int, cols: int) -> Self:
        """Return a new matrix of given shape, filled with zeros."""
        return cls.filled(rows, cols, 0.0)

    @classmethod
    def identity(cls, size: int) -> Self:
        """Return a square matrix with ones on the diagonal and zeros elsewhere.

        Examples
        --------
        >>> Matrix.identity(2).snapshot()
        [1.0, 0.0, 0.0, 1.0]
        """
        result = cls.zeros(size, size)

        for i in range(size):
            result._entries[i * (size + 1)] = 1.0

        return result

    @classmethod
    def elementary(cls, size: int, operation: RowOperation) -> Self:
        """Return the elementary matrix of `operation`.

        This is the identity matrix of order `size` with `operation` applied.
        Multiplying a matrix with `size` rows from the left by the result performs
        `operation` on it.

        Raises
        ------
        MatrixError
            If a row of `operation` exceeds `size`.

        Examples
        --------
        >>> from elemat.linalg import Swap
        >>> Matrix.elementary(2, Swap(1, 2)).snapshot()
        [0.0, 1.0, 1.0, 0.0]
        """
        return apply(operation, cls.identity(size))

    @classmethod
    def fromarray(cls, a: npt.ArrayLike) -> Self:
        """Return a new matrix with the entries of the two-dimensional array `a`."""
        tmp = np.asarray(a)

        if tmp.ndim != 2 or 0 in tmp.shape:
            raise DimensionError(f"expected a non-empty 2-D array, got {tmp.shape}")

        return cls(tmp.shape[0], tmp.shape[1], tmp.ravel())

    def apply(self, operation: RowOperation) -> Self:
        """Apply a row operation in place and return `self`.

        See Also
        --------
        elemat.linalg.apply
        """
        return apply(operation, self)

    def col(self, col: int) -> list[float]:
        """Return a copy of the 1-based column `col`."""
        check_index(col, self._cols, "column")
        return self._entries[col - 1 :: self._cols].tolist()

    def copy(self) -> Self:
        """Return a copy of the matrix."""
        cls, entries = type(self), self._entries.copy()
        return cls(self._rows, self._cols, entries, _skipcheck=True)

    def entry(self, row: int, col: int) -> float:
        """Return the entry at 1-based position (`row`, `col`).

        Raises
        ------
        BelowRangeError
            If `row` or `col` is less than 1.
        OutOfRangeError
            If `row` or `col` exceeds the shape of the matrix.
        """
        return float(self._entries[self._offset(row, col)])

    def row(self, row: int) -> list[float]:
        """Return a copy of the 1-based row `row`."""
        check_index(row, self._rows, "row")
        return self._entries[(row - 1) * self._cols : row * self._cols].tolist()

    def snapshot(self) -> list[float]:
        """Return a copy of all entries in row-major order.

        Later changes to the matrix are not reflected in the returned list.
        """
        return self._entries.tolist()

    def toarray(self) -> npt.NDArray[np.floating]:
        """Return a copy of the matrix as a two-dimensional ndarray."""
        return self._entries.reshape(self.shape).copy()

    def update(self, row: int, col: int, value: float) -> None:
        """Overwrite the entry at 1-based position (`row`, `col`) with `value`.

        Raises
        ------
        BelowRangeError
            If `row` or `col` is less than 1.
        OutOfRangeError
            If `row` or `col` exceeds the shape of the matrix.
        TypeError
            If `value` is not a real number.
        """
        if not isinstance(value, numbers.Real):
            raise TypeError(f"expected a real number, got {type(value).__name__}")

        self._entries[self._offset(row, col)] = value

    def _offset(self, row: int, col: int) -> int:
        check_index(row, self._rows, "row")
        check_index(col, self._cols, "column")
        return (row - 1) * self._cols + (col - 1)

    def __eq__(self, other) -> bool:
        if type(other) is not type(self):
            return NotImplemented

        if other.shape != self.shape:
            return False

        return bool(np.array_equal(other._entries, self._entries))

    def __getitem__(self, key: tuple[int, int]) -> float:
        if not (isinstance(key, tuple) and len(key) == 2):
            raise TypeError("matrix indices must be a (row, col) pair")

        return self.entry(*key)

    def __setitem__(self, key: tuple[int, int], value: float) -> None:
        if not (isinstance(key, tuple) and len(key) == 2):
            raise TypeError("matrix indices must be a (row, col) pair")

        self.update(*key, value)

    def __matmul__(self, rhs: Self) -> Self:
        if not isinstance(rhs, Matrix):
            return NotImplemented

        if self._cols != rhs._rows:
            raise DimensionError(
                f"cannot multiply a {self._rows}x{self._cols} matrix "
                f"by a {rhs._rows}x{rhs._cols} matrix"
            )

        tmp = self.toarray() @ rhs.toarray()
        entries = tmp.ravel().astype(self.dtype, copy=False)
        return type(self)(self._rows, rhs._cols, entries, _skipcheck=True)

    def __repr__(self):
        return f"{type(self).__name__}({self._rows}, {self._cols}, {self.snapshot()!r})"

    def __copy__(self) -> Self:
        return self.copy()
