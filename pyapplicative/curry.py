""" Currying helpers so that lifted functions take one argument per ap """
from functools import wraps
import inspect
from typing import Callable, TypeVar

from .errors import ArityError

X = TypeVar('X')
Y = TypeVar('Y')
Z = TypeVar('Z')

def curry2(f: Callable[[X, Y], Z]) -> Callable[[X], Callable[[Y], Z]]:
    """Curry a binary function into two unary functions."""
    return lambda a: lambda b: f(a, b)

def curry3(f):
    """Curry a ternary function into three unary functions."""
    return lambda a: lambda b: lambda c: f(a, b, c)

def _required(f: Callable) -> list[inspect.Parameter]:
    params = inspect.signature(f).parameters.values()
    return [p for p in params
            if p.kind in (p.POSITIONAL_ONLY, p.POSITIONAL_OR_KEYWORD)
            and p.default is p.empty]

def arity(f: Callable) -> int:
    """
    Number of positional parameters a function requires.
    Parameters with defaults and *args are not counted.
    """
    try:
        return len(_required(f))
    except (TypeError, ValueError) as ex:
        raise ArityError(f"Cannot determine arity of {f!r}") from ex

def curry_n(f: Callable, n: int | None = None) -> Callable:
    """
    Curry any function f of n arguments.

    The curried function accepts its arguments one or several at a time:
        add3 = curry_n(lambda a, b, c: a + b + c)
        add3(1)(2)(3) == add3(1, 2)(3) == add3(1, 2, 3) == 6
    Every partial application returns a fresh function, so intermediate
    results can be reused safely. Each one reports the parameters it
    still expects, so arity(add3(1)) == 2.
    """
    if n is None:
        n = arity(f)
    if n < 1:
        raise ArityError(
            f"Cannot curry {getattr(f, '__name__', f)!r} with arity {n}")
    try:
        params = _required(f)
    except (TypeError, ValueError):
        params = []
    if len(params) != n:
        params = [inspect.Parameter(f"arg{i}", inspect.Parameter.POSITIONAL_ONLY)
                  for i in range(n)]

    def collect(args: tuple) -> Callable:
        @wraps(f)
        def curried(*more):
            if not more:
                raise ArityError(
                    f"{getattr(f, '__name__', 'function')} expects "
                    f"{n - len(args)} more argument(s)")
            collected = args + more
            if len(collected) > n:
                raise ArityError(
                    f"{getattr(f, '__name__', 'function')} takes {n} "
                    f"argument(s), got {len(collected)}")
            if len(collected) == n:
                return f(*collected)
            return collect(collected)
        curried.__signature__ = inspect.Signature(  # type: ignore[attr-defined]
            params[len(args):])
        return curried
    return collect(())
