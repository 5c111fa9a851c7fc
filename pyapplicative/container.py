""" The plain Container: an identity applicative holding exactly one value """
from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, TypeVar

from .applicative import ensure_same
from .functor import Functor
from .monad import ap_from_chain

A = TypeVar("A")
B = TypeVar("B")
C = TypeVar("C")

@dataclass(frozen=True)
class Container[A](Functor[A]):
    """
    Holds a single value with no extra context.
    """
    value: A

    @classmethod
    def pure(cls, value: A) -> Container[A]:
        """Wraps a value in a Container."""
        return cls(value)

    @classmethod
    def of(cls, value: A) -> Container[A]:
        """Alias of pure."""
        return cls.pure(value)

    def map(self, f: Callable[[A], B]) -> Container[B]:
        return Container(f(self.value))

    def __mul__(self: Container[Callable[[B], C]], other: Container[B]) \
        -> Container[C]:
        """Overrides the * operator for use as ap."""
        return self.ap(other)

    def ap(self: Container[Callable[[B], C]], other: Container[B]) \
        -> Container[C]:
        """Applies the function in this Container to the other's value."""
        ensure_same(Container, other)
        return ap_from_chain(self, other, Container)

    def __rshift__(self, m: Callable[[A], Container[B]]) -> Container[B]:
        return self.chain(m)

    def chain(self, m: Callable[[A], Container[B]]) -> Container[B]:
        """Passes the value to m, which returns a new Container."""
        return m(self.value)

    def join(self: Container[Container[B]]) -> Container[B]:
        """Flattens a Container of a Container."""
        return self.value

    def __repr__(self):
        return f"Container({self.value!r})"
