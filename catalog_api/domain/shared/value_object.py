"""
Value object base.

A value object has no identity: two instances are equal when their
components are equal. Components are fixed once assigned.
"""

from abc import ABC, abstractmethod
from typing import Any, Tuple


class ValueObject(ABC):
    """
    Immutable value compared by its components.

    Subclasses assign every attribute once in ``__init__`` and list the
    attributes that define equality in ``_components``.

    Usage:
        class Sku(ValueObject):
            def __init__(self, code: str):
                self.code = code.strip().upper()

            def _components(self):
                return (self.code,)
    """

    @abstractmethod
    def _components(self) -> Tuple[Any, ...]:
        """Values that define equality and hashing."""

    def __eq__(self, other: Any) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._components() == other._components()

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._components()))

    def __repr__(self) -> str:
        values = ", ".join(repr(value) for value in self._components())
        return f"{type(self).__name__}({values})"

    def __setattr__(self, name: str, value: Any) -> None:
        if name in self.__dict__:
            raise AttributeError(
                f"{type(self).__name__} is immutable: cannot reassign '{name}'"
            )
        object.__setattr__(self, name, value)
