"""
Functor: a container whose value can be transformed in place.

Every container in pyapplicative is a Functor. map never changes which
variant a container is, so absence and failure come back out untouched:

    inc & Just(1)   == Just(2)
    inc & Nothing   == Nothing
    replace("x", Right(1)) == Right("x")
"""
from abc import ABC, abstractmethod
from typing import Callable, Self, TypeVar

# pylint:disable=C0105
A = TypeVar('A', covariant=True)
B = TypeVar('B', covariant=True)

class Functor[A](ABC):
    """Base class for the containers.

    Subclasses override map so that the functor laws hold:

        fa.map(identity) == fa
        fa.map(comp(g, f)) == fa.map(f).map(g)

    and get the f & fa operator for free.
    """

    def __rand__(self, other: Callable[[A], B]) -> "Functor[B]":
        return map(other, self)

    @abstractmethod
    def map(self: Self, f: Callable[[A], B]) -> "Functor[B]":
        """Applies f to the contained value, if there is one."""

def map(fn, f):  # pylint:disable=W0622
    """map as a free function, with the function first: map(fn, f)"""
    return f.map(fn)

def replace(value: B, f: Functor[A]) -> Functor[B]:
    """Swaps the contained value for value, keeping the container's shape."""
    return f.map(lambda _: value)

def void(f: Functor[A]) -> Functor[None]:
    """Forgets the contained value; only the shape is kept."""
    return replace(None, f)
