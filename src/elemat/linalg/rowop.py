import dataclasses
import logging
import numbers

from elemat.linalg.errors import MatrixError, MatrixIndexError, check_index
from elemat.typing import RowAccess

logger = logging.getLogger(__name__)


@dataclasses.dataclass(frozen=True, slots=True)
class Swap:
    """Exchange two rows.

    Applying the same swap twice restores the original matrix.

    Attributes
    ----------
    row_a : int
    row_b : int
    """

    row_a: int
    row_b: int

    def rowindices(self) -> tuple[int, ...]:
        return (self.row_a, self.row_b)


@dataclasses.dataclass(frozen=True, slots=True)
class Sum:
    """Add `source_row` to `target_row`.

    `source_row` is left unchanged. If both rows are the same, the row is doubled.

    Attributes
    ----------
    target_row : int
    source_row : int
    """

    target_row: int
    source_row: int

    def rowindices(self) -> tuple[int, ...]:
        return (self.target_row, self.source_row)


@dataclasses.dataclass(frozen=True, slots=True)
class Multiply:
    """Scale a row by `coefficient`.

    Zero and negative coefficients are allowed.

    Attributes
    ----------
    row : int
    coefficient : float
    """

    row: int
    coefficient: float

    def rowindices(self) -> tuple[int, ...]:
        return (self.row,)


type RowOperation = Swap | Sum | Multiply


def apply[T: RowAccess](operation: RowOperation, a: T) -> T:
    """Apply an elementary row operation to `a` in place.

    Every row referenced by `operation` is validated before any entry is touched, so
    `a` is left unchanged when this function raises. Copy `a` beforehand to keep the
    original.

    Parameters
    ----------
    operation : Swap | Sum | Multiply
    a : Matrix
        Matrix to be modified.

    Returns
    -------
    Matrix
        `a` itself, so that operations can be chained.

    Raises
    ------
    MatrixError
        If a row of `operation` is out of range. The underlying
        :class:`MatrixIndexError` is available as ``error``.
    TypeError
        If `operation` is not a row operation.

    Examples
    --------
    >>> from elemat import Matrix
    >>> a = Matrix(3, 3, [1, 2, 3, 4, 5, 6, 7, 8, 9])
    >>> apply(Swap(1, 3), a).snapshot()
    [7.0, 8.0, 9.0, 4.0, 5.0, 6.0, 1.0, 2.0, 3.0]
    """
    if not isinstance(operation, Swap | Sum | Multiply):
        raise TypeError(f"not a row operation: {operation!r}")

    if isinstance(operation, Multiply) and not isinstance(
        operation.coefficient, numbers.Real
    ):
        raise TypeError(f"coefficient must be a real number: {operation!r}")

    try:
        for row in operation.rowindices():
            check_index(row, a.rows, "row")
    except MatrixIndexError as e:
        logger.debug("rejected %r on a %dx%d matrix: %s", operation, a.rows, a.cols, e)
        raise MatrixError(e, operation) from e

    logger.debug("applying %r to a %dx%d matrix", operation, a.rows, a.cols)

    match operation:
        case Swap(row_a, row_b):
            for col in range(1, a.cols + 1):
                tmp = a.entry(row_a, col)
                a.update(row_a, col, a.entry(row_b, col))
                a.update(row_b, col, tmp)

        case Sum(target, source):
            for col in range(1, a.cols + 1):
                a.update(target, col, a.entry(target, col) + a.entry(source, col))

        case Multiply(row, coefficient):
            for col in range(1, a.cols + 1):
                a.update(row, col, a.entry(row, col) * coefficient)

    return a
