import logging

from .linalg import (
    BelowRangeError,
    DimensionError,
    Matrix,
    MatrixError,
    MatrixIndexError,
    Multiply,
    OutOfRangeError,
    Sum,
    Swap,
)
from .literal import mat

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "mat",
    "Matrix",
    "Multiply",
    "Sum",
    "Swap",
    "BelowRangeError",
    "DimensionError",
    "MatrixError",
    "MatrixIndexError",
    "OutOfRangeError",
]
