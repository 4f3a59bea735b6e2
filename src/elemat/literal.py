"""
#######################################
Matrix literals (:mod:`elemat.literal`)
#######################################

.. currentmodule:: elemat.literal

This module provides a shorthand for writing small matrices.

.. autosummary::
    :toctree: generated/

    mat

"""

import numbers
import re
from collections.abc import Sequence
from typing import overload

from elemat.linalg.matrix import Matrix

_PATTERN = re.compile(
    r"\s*(?P<rows>\d+)\s*;"
    r"\s*(?P<cols>\d+)\s*;"
    r"\s*\[(?P<values>[^\[\]]*)\]\s*"
)


def _parsevalue(token: str) -> float:
    try:
        return float(token)
    except ValueError:
        raise ValueError(f"invalid matrix entry: {token!r}") from None


@overload
def mat(text: str, /) -> Matrix: ...


@overload
def mat(rows: int, cols: int, values: Sequence[float | int], /) -> Matrix: ...


def mat(*args):
    """Build a matrix from its size and a flat list of values.

    The size and values can be given either as three arguments or as a single
    string of the form ``"rows; cols; [v1, v2, ...]"``. Integer values are converted
    to floating point.

    Raises
    ------
    DimensionError
        If the number of values is not ``rows * cols``.
    ValueError
        If the string cannot be parsed.
    TypeError
        If a value is not a real number.

    Examples
    --------
    >>> mat("2; 2; [1, 2, 3, 4]").snapshot()
    [1.0, 2.0, 3.0, 4.0]
    >>> mat(2, 3, [1, 2, 3, 4, 5, 6]).entry(2, 1)
    4.0
    """
    match args:
        case (str() as text,):
            if (match := _PATTERN.fullmatch(text)) is None:
                raise ValueError(f"invalid matrix literal: {text!r}")

            rows, cols = int(match.group("rows")), int(match.group("cols"))
            values = match.group("values")
            tokens = values.split(",") if values.strip() else []
            entries = [_parsevalue(x) for x in tokens]

        case (rows, cols, values):
            entries = []

            for x in values:
                if not isinstance(x, numbers.Real):
                    raise TypeError(f"expected a real number, got {type(x).__name__}")

                entries.append(float(x))

        case _:
            raise TypeError("mat() takes a literal string or (rows, cols, values)")

    return Matrix(rows, cols, entries)
