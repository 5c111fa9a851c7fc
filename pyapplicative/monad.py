""" monad protocol
"""
# pylint: disable=W2301
from typing import Any, Callable, Protocol, TypeVar, cast

from .applicative import Applicative, ensure_callable

A = TypeVar('A')
B = TypeVar('B')
C = TypeVar('C')

class Monad[A](Applicative[A], Protocol):
    """
    Protocol for Monad, extending Applicative
    with chain and right-shift operations.
    Unlike ap, each chain step is built from the previous step's value.
    """
    def __rshift__(self, m: Callable):
        """ Override >> operator """
        ...

    def chain(self, m: Callable):
        """
        Chains computations by passing the value inside the Monad to function m.
        """
        ...

    def join(self):
        """
        Flattens one level of nesting.
        """
        ...

def compose_kleisli(g: Callable[[B], Any], f: Callable[[A], Any]) \
    -> Callable[[A], Any]:
    """
    Composes two Kleisli functions.
    """
    return lambda x: f(x).chain(g)

class Kleisli:
    """ Kleisli functions """
    def __init__(self, func: Callable[[A], Any]):
        self.func: Callable[[Any], Monad] = cast(Callable[[Any], Monad], func)

    def __lshift__(self, other):
        # Compose self.func after other.func
        return Kleisli(compose_kleisli(self.func, other.func))

    def __call__(self, x):
        return self.func(x)

def ap_from_chain(mf, mx, mtype):
    """
    Used to implement ap in terms of chain.
    The chains provide the monadic logic that would need to be replicated
    in both chain and ap
    """
    return \
        mf >> (lambda f:
        mx >> (lambda x:
        mtype.pure(ensure_callable(f)(x))
        ))

def comp(f: Callable, g: Callable) -> Callable:
    """
    Composes two functions f and g into a single function.
    """
    return lambda x: f(g(x))

def compose(f: Callable) -> Callable:
    """
    Curried composition, the shape the composition law lifts:
        compose(f)(g)(x) == f(g(x))
    """
    return lambda g: lambda x: f(g(x))

def const(x, _):
    """
    Ignores its second argument and always returns x.
    """
    return x

def identity(x):
    """
    Returns the argument unchanged.
    """
    return x
