"""Shared strategies and fixtures for pyapplicative tests."""

from concurrent.futures import ThreadPoolExecutor

import pytest
from hypothesis import strategies as st

from pyapplicative import Array, Container, Either, IO, Maybe, Task, V


def inc(x: int) -> int:
    return x + 1


def dbl(x: int) -> int:
    return x * 2


def neg(x: int) -> int:
    return -x


def square(x: int) -> int:
    return x * x


# =============================================================================
# STRATEGIES (Generators)
# =============================================================================

ints = st.integers(min_value=-10_000, max_value=10_000)

unary = st.sampled_from((inc, dbl, neg, square))

# pure constructors of the containers that compare with ==
comparable_pures = st.sampled_from(
    (Container.pure, Maybe.pure, Either.pure, Array.pure, V.pure))


def run_io(io: IO):
    return io.run()


def run_task(task: Task):
    return task.run(timeout=5)


# =============================================================================
# FIXTURES
# =============================================================================

@pytest.fixture
def executor():
    with ThreadPoolExecutor(max_workers=4) as pool:
        yield pool
