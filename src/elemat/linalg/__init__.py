"""
#####################################
Linear algebra (:mod:`elemat.linalg`)
#####################################

.. currentmodule:: elemat.linalg

This module provides dense matrices and elementary row operations. Rows and columns
are indexed from 1 throughout.

Matrices
========

.. autosummary::
    :toctree: generated/

    Matrix

Row operations
==============

.. autosummary::
    :toctree: generated/

    Multiply
    Sum
    Swap
    apply

Indices and errors
==================

.. autosummary::
    :toctree: generated/

    check_index
    BelowRangeError
    DimensionError
    MatrixError
    MatrixIndexError
    OutOfRangeError

"""

from .errors import (
    BelowRangeError,
    DimensionError,
    MatrixError,
    MatrixIndexError,
    OutOfRangeError,
    check_index,
)
from .matrix import Matrix
from .rowop import Multiply, RowOperation, Sum, Swap, apply

__all__ = [
    "Matrix",
    "Multiply",
    "RowOperation",
    "Sum",
    "Swap",
    "apply",
    "check_index",
    "BelowRangeError",
    "DimensionError",
    "MatrixError",
    "MatrixIndexError",
    "OutOfRangeError",
]
