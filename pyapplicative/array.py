""" Implements purescript-like Array type in Python."""
from __future__ import annotations
from dataclasses import dataclass
from functools import reduce
from typing import Callable, TypeVar, Type, Self

from .applicative import Applicative, ensure_callable, ensure_same
from .curry import curry2
from .functor import Functor
from .monoid import Monoid

A = TypeVar('A')
B = TypeVar('B')
C = TypeVar('C')
M = TypeVar('M', bound=Monoid)

@dataclass(frozen=True)
class Array[A](Functor[A], Monoid):
    """
    Represents an immutable array.
    As a monoid it concatenates; validation uses it to collect errors.
    """
    a: tuple[A, ...]

    def __iter__(self):
        """Iterates over the elements of the Array."""
        return iter(self.a)

    def __add__(self: Array[A], other: Array[A]) -> Array[A]:
        """
        Overloads + operator to concatenate two Arrays.
        __iter__ and __add__ together allow for sum to work correctly.
        """
        return self.append(other)

    def __len__(self):
        return len(self.a)

    def __getitem__(self, index: int) -> A:
        return self.a[index]

    @property
    def length(self) -> int:
        """Returns the length of the Array."""
        return len(self.a)

    def append(self: Array[A], other: Array[A]) -> Array[A]:
        return Array(self.a + other.a)

    @classmethod
    def cons(cls, x: B, ar: Array[B]) -> Array[B]:
        """Prepends an element to the Array."""
        return cls((x,) + ar.a)

    @classmethod
    def snoc(cls, ar: Self, x: A) -> Self:
        """Appends an element to the Array."""
        return cls(ar.a + (x,))

    @classmethod
    def make(cls, *items: A) -> Array[A]:
        """Creates a new Array from the given elements."""
        return cls(tuple(items))

    @classmethod
    def mempty(cls) -> Array:
        """Returns an empty Array."""
        return cls(())

    def map(self, f: Callable[[A], B]) -> Array[B]:
        return Array(tuple(f(x) for x in self.a))

    def __mul__(self: Array[Callable[[B], C]], other: Array[B]) -> Array[C]:
        """Overrides the * operator for use as ap."""
        return self.ap(other)

    def _concat(self: Array[Array[B]]) -> Array[B]:
        """Concatenates an array of arrays into a single array."""
        return sum(self, Array.mempty())

    def ap(self: Array[Callable[[B], C]], other: Array[B]) -> Array[C]:
        """
        Applies every function in this Array to every value in the other.
        The result is the cartesian product, functions varying slowest.
        """
        ensure_same(Array, other)
        return ((lambda f: ensure_callable(f) & other) & self)._concat()

    @classmethod
    def pure(cls, x: A) -> Array[A]:
        """Creates a new Array instance with the one given element."""
        return cls((x,))

    @classmethod
    def of(cls, x: A) -> Array[A]:
        """Alias of pure."""
        return cls.pure(x)

    def __rshift__(self, m: Callable[[A], Array[B]]) -> Array[B]:
        """Overrides the >> operator for use as chain."""
        return self.chain(m)

    def chain(self, m: Callable[[A], Array[B]]) -> Array[B]:
        """
        Passes each element of the Array to function m
        and concatenates the resulting Arrays.
        """
        return (m & self)._concat()

    def __repr__(self):
        """String representation of the Array."""
        return f"[{', '.join(map(repr, self.a))}]"

    def __contains__(self, item: A) -> bool:
        """
        Membership test: allows "item in my_array".
        """
        return item in self.a

    def foldl(self, f: Callable[[B, A], B], acc: B) -> B:
        """
        Left fold over the Array.
        """
        return reduce(f, self.a, acc)

    def foldr(self, f: Callable[[A, B], B], acc: B) -> B:
        """
        Right fold over the Array.
        """
        return reduce(lambda x, y: f(y, x), reversed(self.a), acc)

    def foldmap(self, f: Callable[[A], M], m_cls: Type[M]) -> M:
        """
        Maps each element of the Array to a Monoid and combines them.
        """
        return reduce(lambda x, y: x.append(f(y)), self.a, m_cls.mempty())

    def filter(self, predicate: Callable[[A], bool]) -> Array[A]:
        """
        Keeps only the elements that satisfy the predicate.
        """
        return Array(tuple(filter(predicate, self.a)))

    def traverse(self, f: Callable[[A], Applicative[B]],
                 pure: Callable[[Array[B]], Applicative[Array[B]]] | None = None) \
        -> Applicative[Array[B]]:
        """
        Applies an applicative-returning f to each element, left to right,
        and collects the results as an Array within the applicative.
        An empty Array needs pure to know which applicative to return.
        """
        if not self.a:
            if pure is None:
                raise ValueError("Cannot traverse an empty Array without pure.")
            return pure(Array.mempty())

        snoc = curry2(self.__class__.snoc)
        acc0 = f(self.a[0]).map(self.__class__.pure)

        def step(acc: Applicative[Array[B]], x: A) -> Applicative[Array[B]]:
            return (snoc & acc) * f(x)
        return reduce(step, self.a[1:], acc0)

    def sequence(self: Array[Applicative[B]],
                 pure: Callable[[Array[B]], Applicative[Array[B]]] | None = None) \
        -> Applicative[Array[B]]:
        """
        Turns an Array of Applicatives into an Applicative of Array.
        """
        return self.traverse(lambda x: x, pure)

    def __eq__(self, other) -> bool:
        """Equality check for Array."""
        return isinstance(other, Array) and self.a == other.a

    def __hash__(self):
        return hash(self.a)

    @classmethod
    def replicate(cls, n: int, x: A) -> Array[A]:
        """Creates an Array by replicating the given element n times."""
        return cls((x,) * n)
