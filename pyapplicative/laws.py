"""
Executable functor and applicative laws.

Every check builds both sides of a law and compares them, returning a
LawResult rather than raising, so results can be tabulated:

    identity:      pure(identity).ap(v)              == v
    homomorphism:  pure(f).ap(pure(x))               == pure(f(x))
    interchange:   u.ap(pure(x))                     == pure(lambda f: f(x)).ap(u)
    composition:   pure(compose).ap(u).ap(v).ap(w)   == u.ap(v.ap(w))
    map via ap:    pure(x).map(f)                    == pure(f).ap(pure(x))

Deferred containers (IO, Task) can't be compared directly; pass
equals=equal_by(runner) to compare what they produce.
"""
from dataclasses import dataclass
import operator
from typing import Any, Callable

from .array import Array
from .monad import comp, compose, identity as id_

type Equals = Callable[[Any, Any], bool]
type Pure = Callable[[Any], Any]


@dataclass(frozen=True)
class LawResult:
    """ Outcome of checking one law """
    name: str
    holds: bool
    left: Any
    right: Any


def equal_by(runner: Callable[[Any], Any]) -> Equals:
    """ Compares two containers by the results runner extracts from them """
    return lambda a, b: runner(a) == runner(b)


def _check(name: str, left: Any, right: Any, equals: Equals) -> LawResult:
    return LawResult(name, bool(equals(left, right)), left, right)


def functor_identity(fa: Any, equals: Equals = operator.eq) -> LawResult:
    """ fa.map(identity) == fa """
    return _check("functor identity", fa.map(id_), fa, equals)


def functor_composition(fa: Any, f: Callable, g: Callable,
                        equals: Equals = operator.eq) -> LawResult:
    """ fa.map(comp(g, f)) == fa.map(f).map(g) """
    return _check("functor composition",
                  fa.map(comp(g, f)), fa.map(f).map(g), equals)


def identity(pure: Pure, v: Any, equals: Equals = operator.eq) -> LawResult:
    """ pure(identity).ap(v) == v """
    return _check("identity", pure(id_).ap(v), v, equals)


def homomorphism(pure: Pure, f: Callable, x: Any,
                 equals: Equals = operator.eq) -> LawResult:
    """ pure(f).ap(pure(x)) == pure(f(x)) """
    return _check("homomorphism", pure(f).ap(pure(x)), pure(f(x)), equals)


def interchange(pure: Pure, u: Any, x: Any,
                equals: Equals = operator.eq) -> LawResult:
    """ u.ap(pure(x)) == pure(lambda f: f(x)).ap(u) """
    return _check("interchange",
                  u.ap(pure(x)), pure(lambda f: f(x)).ap(u), equals)


def composition(pure: Pure, u: Any, v: Any, w: Any,
                equals: Equals = operator.eq) -> LawResult:
    """ pure(compose).ap(u).ap(v).ap(w) == u.ap(v.ap(w)) """
    return _check("composition",
                  pure(compose).ap(u).ap(v).ap(w), u.ap(v.ap(w)), equals)


def map_via_ap(pure: Pure, f: Callable, x: Any,
               equals: Equals = operator.eq) -> LawResult:
    """ pure(x).map(f) == pure(f).ap(pure(x)) """
    return _check("map via ap", pure(x).map(f), pure(f).ap(pure(x)), equals)


def check_applicative(pure: Pure, f: Callable, g: Callable, x: Any,
                      equals: Equals = operator.eq) -> Array[LawResult]:
    """
    Runs every law for the applicative built by pure, using
    unary functions f and g and a value x they both accept.
    """
    u, v, w = pure(f), pure(g), pure(x)
    return Array.make(
        functor_identity(w, equals),
        functor_composition(w, f, g, equals),
        identity(pure, w, equals),
        homomorphism(pure, f, x, equals),
        interchange(pure, u, x, equals),
        composition(pure, u, v, w, equals),
        map_via_ap(pure, f, x, equals),
    )
