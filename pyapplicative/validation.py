"""
Implements purescript-like Validation applicative in Python

Unlike Either, which stops at the first Left, V evaluates every
independent check and combines the errors of all failing ones:

    V.of(create_user) * check_email(form) * check_name(form)
"""
from __future__ import annotations
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, TypeVar, cast

from .applicative import ensure_callable, ensure_same
from .array import Array
from .either import Either, Left, Right
from .functor import Functor
from .semigroup import Semigroup

S = TypeVar('S')
T = TypeVar('T')
E = TypeVar('E', bound=Semigroup)

Valid = Right
Invalid = Left
type Validity[E, R] = Invalid[E] | Valid[R]

@dataclass(frozen=True)
class V[E, R](Functor[R]):
    """
    Applicative validation type that accumulates errors.
    The error type must be a Semigroup (Array of messages by default).
    """
    either: Either[E, R]

    @property
    def validity(self) -> Validity[E, R]:
        """ Access underlying Either value """
        return cast("Validity[E, R]", self.either)

    @property
    def errors(self) -> E | None:
        """ The accumulated errors, or None when valid """
        match self.validity:
            case Invalid(err):
                return err
            case _:
                return None

    def map(self, f: Callable[[R], S]) -> V[E, S]:
        """ Functor map delegated to Either """
        return V(self.either.map(f))

    def __mul__(self: V[E, Callable[[S], T]], other: V[E, S]) -> V[E, T]:
        """Overrides the * operator for use as ap."""
        return self.ap(other)

    def ap(self: V[E, Callable[[S], T]], other: V[E, S]) -> V[E, T]:
        """ Accumulates errors in Invalid, applies function in Valid """
        ensure_same(V, other)
        match self.validity, other.validity:
            case Valid(f), Valid(x):
                return V(Valid(ensure_callable(f)(x)))
            case Valid(_), Invalid(err):
                return V(Invalid(err))
            case Invalid(err1), Valid(_):
                return V(Invalid(err1))
            case Invalid(err1), Invalid(err2):
                erra = cast(Semigroup, err1)
                return V(Invalid(erra.append(err2)))
            case _:
                raise TypeError(f"V must wrap an Either, got {self.either!r}")

    @classmethod
    def pure(cls, value: T) -> V[Any, T]:
        """ Wraps a value in a successful Validation """
        return V(Valid(value))

    @classmethod
    def of(cls, value: T) -> V[Any, T]:
        """ Alias of pure """
        return cls.pure(value)

    @classmethod
    def invalid(cls, error: E) -> V[E, Any]:
        """ Wraps an error in a failed Validation """
        return V(Invalid(error))

    @classmethod
    def fail(cls, message: str) -> V[Array[str], Any]:
        """ A failed Validation carrying a single message """
        return V(Invalid(Array.pure(message)))

    @classmethod
    def from_either(cls, e: Either[E, T]) -> V[E, T]:
        """ Lifts an Either into Validation """
        return V(e)

    def to_either(self) -> Either[E, R]:
        """ Returns the underlying Either """
        return self.either

    def is_valid(self) -> bool:
        """ Returns True if the Validation is valid (i.e., contains a Right) """
        return isinstance(self.either, Valid)

    def apply_second(self, other: V[E, T]) -> V[E, T]:
        """
        Sequences two Validations, discarding the value of the first.
        Accumulates errors if either is invalid.
        """
        def f(_: R) -> Callable[[T], T]:
            # Replaces the first result with an identity function
            return lambda y: y
        return (f & self) * other

    def __xor__(self, other: V[E, T]) -> V[E, T]:
        """
        Overrides the ^ operator to use apply_second.
        """
        return self.apply_second(other)

    def __repr__(self):
        match self.validity:
            case Valid(x):
                return f"Valid({x!r})"
            case Invalid(err):
                return f"Invalid({err!r})"
            case _:
                return f"V({self.either!r})"
