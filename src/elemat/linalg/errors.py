import numpy as np


class DimensionError(ValueError):
    """Error raised when the entries of a matrix do not fit its declared shape.

    Parameters
    ----------
    message : str
    rows : int | None, optional
    cols : int | None, optional
    length : int | None, optional
        Number of entries that were supplied.
    """

    rows: int | None
    cols: int | None
    length: int | None

    def __init__(self, message, rows=None, cols=None, length=None):
        super().__init__(message)
        self.rows = rows
        self.cols = cols
        self.length = length


class MatrixIndexError(IndexError):
    """Base class of the errors raised for an invalid 1-based index.

    Attributes
    ----------
    index : int
        Offending index.
    limit : int
        Largest index allowed.
    """

    index: int
    limit: int

    def __init__(self, message: str, index: int, limit: int):
        super().__init__(message)
        self.index = index
        self.limit = limit


class BelowRangeError(MatrixIndexError):
    """Raised when an index smaller than 1 is given.

    This usually means that the caller assumed 0-based indexing.
    """

    def __init__(self, index: int, limit: int, axis: str = "index"):
        message = f"matrices index from 1, but {axis} {index} was provided"
        super().__init__(message, index, limit)


class OutOfRangeError(MatrixIndexError):
    """Raised when an index exceeds the dimension it addresses."""

    def __init__(self, index: int, limit: int, axis: str = "index"):
        super().__init__(f"{axis} {index} exceeds maximum {limit}", index, limit)


class MatrixError(ValueError):
    """Error raised when a row operation cannot be applied to a matrix.

    Parameters
    ----------
    error : MatrixIndexError
        Index error found while validating the rows of the operation.
    operation : RowOperation, optional

    Attributes
    ----------
    error : MatrixIndexError
    operation : RowOperation | None
    """

    error: MatrixIndexError
    operation: object

    def __init__(self, error: MatrixIndexError, operation=None):
        if operation is None:
            message = str(error)
        else:
            message = f"cannot apply {operation!r}: {error}"

        super().__init__(message)
        self.error = error
        self.operation = operation


def check_index(index: int, limit: int, axis: str = "index") -> None:
    """Check a 1-based `index` against the dimension `limit`.

    Parameters
    ----------
    index : int
    limit : int
    axis : str, default="index"
        Name of the indexed axis, used only in the error message.

    Raises
    ------
    BelowRangeError
        If `index` is less than 1, whatever `limit` is.
    OutOfRangeError
        If `index` is greater than `limit`.
    TypeError
        If `index` is not an integer.

    Examples
    --------
    >>> check_index(3, 3)
    >>> check_index(0, 3)
    Traceback (most recent call last):
        ...
    elemat.linalg.errors.BelowRangeError: matrices index from 1, but index 0 was provided
    """
    if isinstance(index, bool) or not isinstance(index, int | np.integer):
        raise TypeError(f"{axis} must be an integer, not {type(index).__name__}")

    if index < 1:
        raise BelowRangeError(int(index), limit, axis)

    if index > limit:
        raise OutOfRangeError(int(index), limit, axis)
