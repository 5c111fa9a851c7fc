""" Implementation of Maybe in Python."""
from __future__ import annotations
from abc import ABC, abstractmethod, ABCMeta
from enum import Enum, EnumMeta
from dataclasses import dataclass
from typing import Callable, TypeVar, overload

from .applicative import ensure_same
from .functor import Functor
from .monad import ap_from_chain

A = TypeVar("A")
B = TypeVar("B")
C = TypeVar("C")


class Maybe[A](Functor[A], ABC):
    """
    A value that may be absent.
    Just holds a value; Nothing skips every function handed to it.
    """

    @classmethod
    def of(cls, value: A | None) -> Maybe[A]:
        """
        Lifts a possibly missing value: None becomes Nothing.
        Use pure (or Just) to wrap None itself.
        """
        return from_nullable(value)

    @classmethod
    def pure(cls, value: A) -> Maybe[A]:
        """Wraps any value in the Just context."""
        return Just(value)

    def __mul__(self, other: Maybe) -> Maybe:
        """Overrides the * operator for use as ap."""
        return self.ap(other)

    def __rshift__(self, m: Callable[[A], Maybe[B]]) -> Maybe[B]:
        """Overrides the >> operator for use as chain."""
        return self.chain(m)

    @abstractmethod
    def map(self, f: Callable[[A], B]) -> Maybe[B]:
        """Applies a function to the value inside Maybe."""

    @abstractmethod
    def ap(self, other: Maybe) -> Maybe:
        """Applies a function wrapped in Maybe to a value wrapped in Maybe."""

    @abstractmethod
    def chain(self, m: Callable[[A], Maybe[B]]) -> Maybe[B]:
        """Chains computations by passing the value inside Maybe to m."""

    @abstractmethod
    def join(self) -> Maybe:
        """Flattens a Maybe of a Maybe."""


class NothingMaybeMeta(ABCMeta, EnumMeta):
    pass


class _Nothing(Maybe, Enum, metaclass=NothingMaybeMeta):
    NOTHING = "Nothing"

    def map(self, f: Callable[[A], B]) -> _Nothing:
        return Nothing

    def ap(self, other: Maybe) -> _Nothing:
        ensure_same(Maybe, other)
        return Nothing

    def chain(self, m: Callable[[A], Maybe[B]]) -> _Nothing:
        return Nothing

    def join(self) -> _Nothing:
        return Nothing

    def __repr__(self):
        """String representation of Nothing."""
        return "Nothing"

    def __str__(self):
        return "Nothing"

    def __eq__(self, other) -> bool:
        """Equality check for Nothing."""
        return isinstance(other, _Nothing)

    def __hash__(self):
        return hash("Nothing")

# singleton instance
Nothing: _Nothing = _Nothing.NOTHING

@dataclass(frozen=True)
class Just[A](Maybe[A]):
    a: A

    def map(self, f: Callable[[A], B]) -> Just[B]:
        return Just(f(self.a))

    @overload
    def __mul__(self: Just[Callable[[B], C]], other: Just[B]) -> Just[C]: ...
    @overload
    def __mul__(self: Just[Callable[[B], C]], other: _Nothing) -> _Nothing: ...
    @overload
    def __mul__(self: Just[Callable[[B], C]], other: Maybe[B]) -> Maybe[C]: ...

    def __mul__(self: Just[Callable[[B], C]], other: Maybe[B]) -> Maybe[C]:
        return self.ap(other)

    def ap(self: Just[Callable[[B], C]], other: Maybe[B]) -> Maybe[C]:
        """Applies a function wrapped in Just to a value wrapped in Maybe."""
        ensure_same(Maybe, other)
        return ap_from_chain(self, other, Just)

    def chain(self, m: Callable[[A], Maybe[B]]) -> Maybe[B]:
        return m(self.a)

    def join(self: Just[Maybe[B]]) -> Maybe[B]:
        return self.a

    def __repr__(self):
        """String representation of the Just."""
        return f"Just({self.a!r})"

    def __eq__(self, other) -> bool:
        """Equality check for Just."""
        return isinstance(other, Just) and self.a == other.a

    def __hash__(self):
        return hash(("Just", self.a))


def from_nullable(value: A | None) -> Maybe[A]:
    """Nothing for None, Just otherwise."""
    return Nothing if value is None else Just(value)

def from_maybe(default: A, m: Maybe[A]) -> A:
    """Extracts the value from a Maybe, or returns a default value."""
    match m:
        case Just(value):
            return value
        case _:
            return default

def maybe(default: B, f: Callable[[A], B], m: Maybe[A]) -> B:
    """Applies f to the value in a Just, or returns the default."""
    match m:
        case Just(value):
            return f(value)
        case _:
            return default

def is_just(m: Maybe) -> bool:
    """True when m holds a value."""
    return isinstance(m, Just)

def is_nothing(m: Maybe) -> bool:
    """True when m is Nothing."""
    return isinstance(m, _Nothing)
