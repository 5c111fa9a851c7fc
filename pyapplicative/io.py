"""
IO: a deferred synchronous effect.

Nothing happens when an IO is built, mapped or applied; the wrapped
effect only runs when run() is called.
"""
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
class IO[A](Functor[A]):
    """
    Wraps a zero-argument function performing a side effect.
    """
    effect: Callable[[], A]

    @classmethod
    def pure(cls, value: A) -> IO[A]:
        """Lifts a plain value; running it has no effect."""
        return cls(lambda: value)

    @classmethod
    def of(cls, value: A) -> IO[A]:
        """Alias of pure."""
        return cls.pure(value)

    def run(self) -> A:
        """Performs the effect and returns its result."""
        return self.effect()

    def unsafe_perform_io(self) -> A:
        """Alias of run."""
        return self.run()

    def map(self, f: Callable[[A], B]) -> IO[B]:
        return IO(lambda: f(self.effect()))

    def __mul__(self: IO[Callable[[B], C]], other: IO[B]) -> IO[C]:
        """Overrides the * operator for use as ap."""
        return self.ap(other)

    def ap(self: IO[Callable[[B], C]], other: IO[B]) -> IO[C]:
        """
        Runs this effect, then the other, and applies the first result
        to the second when the combined IO is run.
        """
        ensure_same(IO, other)
        return ap_from_chain(self, other, IO)

    def __rshift__(self, m: Callable[[A], IO[B]]) -> IO[B]:
        return self.chain(m)

    def chain(self, m: Callable[[A], IO[B]]) -> IO[B]:
        """The next IO is built from this one's result."""
        return IO(lambda: m(self.effect()).effect())

    def join(self: IO[IO[B]]) -> IO[B]:
        return IO(lambda: self.effect().effect())

    def __repr__(self):
        return f"IO({getattr(self.effect, '__name__', '?')})"
