"""
#############################
Typing (:mod:`elemat.typing`)
#############################

This module provides type definitions commonly used between modules.

.. autoclass:: RowAccess
    :show-inheritance:
    :no-members:

"""

from abc import abstractmethod
from typing import Protocol


class RowAccess(Protocol):
    """Protocol for objects that row operations can act on.

    Indices passed to :meth:`entry` and :meth:`update` are 1-based.
    """

    __slots__ = ()

    @property
    @abstractmethod
    def rows(self) -> int: ...

    @property
    @abstractmethod
    def cols(self) -> int: ...

    @abstractmethod
    def entry(self, row: int, col: int) -> float: ...

    @abstractmethod
    def update(self, row: int, col: int, value: float) -> None: ...
