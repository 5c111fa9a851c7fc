"""
Implementation of Either monad
"""
from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, TypeVar, Callable, overload

from .applicative import ensure_same
from .functor import Functor
from .monad import ap_from_chain

L = TypeVar("L")
R = TypeVar("R")
S = TypeVar("S")
T = TypeVar("T")


class Either[L, R](Functor[R], ABC):
    """
    Either a failure (Left) or a success (Right).
    Left short-circuits: the first Left encountered is the result.
    """

    @classmethod
    def pure(cls, value: R) -> Either[Any, R]:
        """
        Wraps a value in the Right context.
        """
        return Right(value)

    @classmethod
    def of(cls, value: R) -> Either[Any, R]:
        """Alias of pure."""
        return cls.pure(value)

    def __mul__(self, other: Either) -> Either:
        """Overrides the * operator for use as ap."""
        return self.ap(other)

    def __rshift__(self, m: Callable[[R], Either[L, S]]) -> Either[L, S]:
        """Overrides the >> operator for use as chain."""
        return self.chain(m)

    @abstractmethod
    def map(self, f: Callable[[R], S]) -> Either[L, S]: ...

    @abstractmethod
    def ap(self, other: Either) -> Either: ...

    @abstractmethod
    def chain(self, m: Callable[[R], Either[L, S]]) -> Either[L, S]: ...

    @abstractmethod
    def join(self) -> Either: ...


@dataclass(frozen=True)
class Left[L](Either[L, Any]):
    """
    Represents a left value in an Either type.
    """
    l: L

    def map(self, f: Callable[[R], S]) -> Left[L]:
        return self

    def ap(self, other: Either[L, Any]) -> Left[L]:
        """The function side failed first; its error is kept."""
        ensure_same(Either, other)
        return self

    def chain(self, m: Callable[[R], Either[L, S]]) -> Left[L]:  # pylint: disable=unused-argument
        return self

    def join(self) -> Left[L]:
        return self

    def __repr__(self):
        """String representation of the Left."""
        return f"Left({self.l!r})"

    def __eq__(self, other) -> bool:
        """Equality check for Left."""
        return isinstance(other, Left) and self.l == other.l

    def __hash__(self):
        return hash(("Left", self.l))

@dataclass(frozen=True)
class Right[R](Either[Any, R]):
    """
    Represents a right value in an Either type.
    """
    r: R

    @overload
    def __mul__(self: Right[Callable[[S], T]], other: Left[L]) -> Left[L]: ...
    @overload
    def __mul__(self: Right[Callable[[S], T]], other: Right[S])\
        -> Right[T]: ...

    def __mul__(self: Right[Callable[[S], T]], other: Either[L, S])\
        -> Either[L, T]:
        """Overrides the * operator for use as ap."""
        return self.ap(other)

    def map(self, f: Callable[[R], S]) -> Right[S]:
        return Right(f(self.r))

    def ap(self: Right[Callable[[S], T]], other: Either[L, S])\
        -> Either[L, T]:
        """Applies the function wrapped in Right to another Either value."""
        ensure_same(Either, other)
        return ap_from_chain(self, other, Right)

    def chain(self, m: Callable[[R], Either[L, S]]) -> Either[L, S]:
        return m(self.r)

    def join(self: Right[Either[L, S]]) -> Either[L, S]:
        return self.r

    @classmethod
    def pure(cls, value: R) -> Right[R]:
        """
        Wraps a value in the Right context.
        """
        return cls(value)

    def __repr__(self):
        """String representation of the Right."""
        return f"Right({self.r!r})"

    def __eq__(self, other) -> bool:
        """Equality check for Right."""
        return isinstance(other, Right) and self.r == other.r

    def __hash__(self):
        return hash(("Right", self.r))


def either(on_left: Callable[[L], T], on_right: Callable[[R], T],
           e: Either[L, R]) -> T:
    """Folds an Either into a single value."""
    match e:
        case Left(l):
            return on_left(l)
        case Right(r):
            return on_right(r)
        case _:
            raise TypeError(f"Expected Either, got {type(e).__name__}")

def from_either(default: R, e: Either[Any, R]) -> R:
    """Extracts the Right value, or returns a default value."""
    return either(lambda _: default, lambda r: r, e)
