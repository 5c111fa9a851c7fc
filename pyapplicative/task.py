"""
Task: a deferred, possibly asynchronous computation.

A Task is described by its fork function, fork(reject, resolve), which
starts the work and eventually calls exactly one of the two callbacks.
Nothing runs until the Task is forked.

Because the operands of ap are independent, Task.ap forks both of them
before either has finished:

    page = Task.of(render_page) * spawn(get_destinations) * spawn(get_events)

starts both fetches at once, while

    spawn(get_destinations) >> (lambda d: spawn(get_events, d))

has to wait for the first before the second can even be built.
"""
from __future__ import annotations
from concurrent.futures import Executor, Future
from dataclasses import dataclass
import logging
import threading
from typing import Any, Callable, TypeVar

from .applicative import ensure_callable, ensure_same
from .either import Either, Left, Right
from .functor import Functor

A = TypeVar("A")
B = TypeVar("B")
C = TypeVar("C")

type Reject = Callable[[Any], None]
type Resolve[A] = Callable[[A], None]
type Fork[A] = Callable[[Reject, Resolve[A]], None]

logger = logging.getLogger(__name__)

_PENDING = object()


def _settle(f: Callable, x: Any, reject: Reject, resolve: Resolve) -> None:
    # an exception in f, or in whatever resolve continues into, rejects
    # instead of escaping into a worker thread
    try:
        resolve(f(x))
    except Exception as ex:  # pylint: disable=broad-except
        reject(ex)


@dataclass(frozen=True)
class Task[A](Functor[A]):
    """
    Carrier for a deferred computation that resolves to A or rejects.
    """
    computation: Fork[A]

    @classmethod
    def pure(cls, value: A) -> Task[A]:
        """A Task that resolves immediately with value."""
        return cls(lambda _reject, resolve: resolve(value))

    @classmethod
    def of(cls, value: A) -> Task[A]:
        """Alias of pure."""
        return cls.pure(value)

    @classmethod
    def rejected(cls, error: Any) -> Task[Any]:
        """A Task that rejects immediately with error."""
        return cls(lambda reject, _resolve: reject(error))

    @classmethod
    def spawn(cls, fn: Callable[..., A], *args: Any,
              executor: Executor) -> Task[A]:
        """
        A Task that runs fn(*args) on the executor when forked.
        An exception raised by fn rejects the Task.
        """
        def fork(reject: Reject, resolve: Resolve[A]) -> None:
            def done(future: Future) -> None:
                ex = future.exception()
                if ex is not None:
                    logger.debug("task %s rejected: %r",
                                 getattr(fn, "__name__", fn), ex)
                    reject(ex)
                else:
                    _settle(Future.result, future, reject, resolve)
            logger.debug("task %s forked", getattr(fn, "__name__", fn))
            executor.submit(fn, *args).add_done_callback(done)
        return cls(fork)

    def fork(self, reject: Reject, resolve: Resolve[A]) -> None:
        """Starts the computation."""
        self.computation(reject, resolve)

    def map(self, f: Callable[[A], B]) -> Task[B]:
        return Task(lambda reject, resolve:
                    self.fork(reject, lambda a: _settle(f, a, reject, resolve)))

    def __mul__(self: Task[Callable[[B], C]], other: Task[B]) -> Task[C]:
        """Overrides the * operator for use as ap."""
        return self.ap(other)

    def ap(self: Task[Callable[[B], C]], other: Task[B]) -> Task[C]:
        """
        Forks this Task and the other side by side. Resolves with
        f(x) once both have resolved; the first rejection wins and f
        is then never called.
        """
        ensure_same(Task, other)

        def fork(reject: Reject, resolve: Resolve[C]) -> None:
            lock = threading.Lock()
            box: dict[str, Any] = {"f": _PENDING, "x": _PENDING,
                                   "settled": False}

            def settle_rejected(error: Any) -> None:
                with lock:
                    if box["settled"]:
                        return
                    box["settled"] = True
                reject(error)

            def arrived(key: str, value: Any) -> None:
                with lock:
                    if box["settled"]:
                        return
                    box[key] = value
                    if box["f"] is _PENDING or box["x"] is _PENDING:
                        return
                    box["settled"] = True
                    f, x = box["f"], box["x"]
                _settle(lambda v: ensure_callable(f)(v), x, reject, resolve)

            self.fork(settle_rejected, lambda f: arrived("f", f))
            other.fork(settle_rejected, lambda x: arrived("x", x))
        return Task(fork)

    def __rshift__(self, m: Callable[[A], Task[B]]) -> Task[B]:
        return self.chain(m)

    def chain(self, m: Callable[[A], Task[B]]) -> Task[B]:
        """The next Task is built from this one's result, so runs after it."""
        def fork(reject: Reject, resolve: Resolve[B]) -> None:
            def step(a: A) -> None:
                try:
                    m(a).fork(reject, resolve)
                except Exception as ex:  # pylint: disable=broad-except
                    reject(ex)
            self.fork(reject, step)
        return Task(fork)

    def join(self: Task[Task[B]]) -> Task[B]:
        return self.chain(lambda t: t)

    def run(self, timeout: float | None = None) -> Either[Any, A]:
        """
        Forks the Task and blocks until it settles.
        Returns Right(value) or Left(error); raises TimeoutError if it
        has not settled within timeout seconds.
        """
        settled = threading.Event()
        outcome: list[Either[Any, A]] = []

        def reject(error: Any) -> None:
            if not settled.is_set():
                outcome.append(Left(error))
                settled.set()

        def resolve(value: A) -> None:
            if not settled.is_set():
                outcome.append(Right(value))
                settled.set()

        self.fork(reject, resolve)
        if not settled.wait(timeout):
            raise TimeoutError(f"Task did not settle within {timeout}s")
        return outcome[0]

    def __repr__(self):
        return "Task(...)"
