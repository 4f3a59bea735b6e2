"""
#####################################
Configuration (:mod:`elemat.context`)
#####################################

.. currentmodule:: elemat.context

This module manages the floating-point kind in which new matrices store their
entries. A matrix holds a single numeric kind for its whole lifetime; changing the
context only affects matrices created afterwards.

.. autosummary::
    :toctree: generated/

    Context
    getcontext
    localcontext
    setcontext

"""

import contextlib
import contextvars
from typing import Self

import numpy as np
import numpy.typing as npt


class Context:
    """Create a new context.

    Parameters
    ----------
    dtype : DTypeLike, default="float64"
        Floating-point type of the entries of newly created matrices.

    Raises
    ------
    ValueError
        If `dtype` is not a floating-point type.
    """

    __slots__ = ("_dtype",)
    _dtype: np.dtype

    def __init__(self, dtype: npt.DTypeLike = "float64"):
        dtype = np.dtype(dtype)

        if not np.issubdtype(dtype, np.floating):
            raise ValueError(f"expected a floating-point dtype, got {dtype}")

        self._dtype = dtype

    @property
    def dtype(self) -> np.dtype:
        return self._dtype

    def copy(self) -> Self:
        return self.__class__(self._dtype)

    def __eq__(self, other) -> bool:
        if type(other) is not type(self):
            return NotImplemented

        return self._dtype == other._dtype

    def __hash__(self) -> int:
        return hash(self._dtype)

    def __str__(self):
        return f"{type(self).__name__}({self._dtype.name!r})"

    def __copy__(self) -> Self:
        return self.copy()


_var: contextvars.ContextVar[Context] = contextvars.ContextVar("elemat")


def getcontext() -> Context:
    """Return the current context for the active thread."""
    if context := _var.get(None):
        return context

    context = Context()
    _var.set(context)
    return context


def setcontext(ctx: Context) -> None:
    """Set the current context for the active thread to `ctx`."""
    if not isinstance(ctx, Context):
        raise TypeError(f"expected a Context, got {type(ctx).__name__}")

    _var.set(ctx)


@contextlib.contextmanager
def localcontext(ctx: Context | None = None, *, dtype: npt.DTypeLike | None = None):
    """Return a context manager that will set the current context for the active thread
    to a copy of `ctx` on entry to the with-statement and restore the previous context
    when exiting the with-statement.

    Examples
    --------
    >>> from elemat import Matrix
    >>> with localcontext(dtype="float32"):
    ...     a = Matrix.identity(2)
    >>> a.dtype
    dtype('float32')
    """
    if ctx is None:
        ctx = getcontext()

    if dtype is None:
        dtype = ctx._dtype

    ctx = Context(dtype)
    token = _var.set(ctx)

    try:
        yield ctx
    finally:
        _var.reset(token)
