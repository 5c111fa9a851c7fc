"""
Applicative functor protocol definitions and lifting helpers.

An applicative is a pointed functor (it has pure/of) that can also apply a
function held in one container to the value held in another:

    Container.of(add) * Container.of(2) * Container.of(3)  ->  Container(5)

The operands of ap do not depend on each other, so they can be built (and,
for Task, run) independently.
"""
from __future__ import annotations
# pylint:disable=W2301
from typing import Any, Callable, Protocol, TypeVar, runtime_checkable, Self

from .curry import arity, curry_n
from .errors import ArityError, ContainerMismatchError, NotAFunctionError

T = TypeVar('T')
U = TypeVar('U')
V = TypeVar('V')

@runtime_checkable
class Applicative(Protocol[T]):
    """
    Protocol for Applicative functors, providing methods for pure, map,
    and applicative application.
    """
    @classmethod
    def pure(cls, value: T) -> Self:
        """
        Wraps a value in the Applicative context.
        """
        ...

    @classmethod
    def of(cls, value: T) -> Self:
        """
        Alias of pure.
        """
        ...

    def map(self, f: Callable[[T], U]) -> Applicative[U]:
        """
        Applies a function to the value inside the Applicative context.
        """
        ...

    def ap(self: Applicative[Callable[[U], V]], other: Applicative[U]) \
        -> Applicative[V]:
        """
        Applies the function wrapped in this Applicative context to the value
        in another Applicative context.
        """
        ...

    def __rand__(self, f: Callable[[T], U]) -> Applicative[U]:
        """
        Enables using the & operator for mapping a function
        over the Applicative.
        """
        ...

    def __mul__(self: Applicative[Callable[[U], V]], other: Applicative[U]) \
        -> Applicative[V]:
        """
        Enables using the * operator for applicative application.
        """
        ...


def ap(mf, mx):
    """ Applies the function in mf to the value in mx """
    return mf.ap(mx)


def ensure_callable(f: Any) -> Callable:
    """ Raise NotAFunctionError unless f can be applied """
    if not callable(f):
        raise NotAFunctionError(f)
    return f


def ensure_same(expected: type, other: Any) -> None:
    """ Raise ContainerMismatchError unless other belongs to expected """
    if not isinstance(other, expected):
        raise ContainerMismatchError(expected.__name__, other)


def _curried(f: Callable, n: int) -> Callable:
    # a unary f is taken to be curried already
    try:
        if arity(f) == 1:
            return f
    except ArityError:
        pass
    return curry_n(f, n)


def lift_a2(f: Callable, a: Applicative, b: Applicative) -> Applicative:
    """
    Lifts a binary function over two applicatives:
        lift_a2(add, Just(2), Just(3)) == Just(5)
    f may be a plain two-argument function or already curried.
    """
    return a.map(_curried(f, 2)).ap(b)


def lift_a3(f: Callable, a: Applicative, b: Applicative,
            c: Applicative) -> Applicative:
    """ Lifts a ternary function over three applicatives """
    return a.map(_curried(f, 3)).ap(b).ap(c)


def lift_an(f: Callable, *operands: Applicative) -> Applicative:
    """
    Lifts a function of len(operands) arguments over the operands.
    """
    if not operands:
        raise ValueError("lift_an needs at least one operand")
    first, *rest = operands
    result = first.map(_curried(f, len(operands)))
    for operand in rest:
        result = result.ap(operand)
    return result
