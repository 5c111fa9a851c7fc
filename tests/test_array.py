"""Tests for Array as monoid, applicative and traversable."""

import pytest
from hypothesis import given, strategies as st

from conftest import ints, unary
from pyapplicative import Array, Just, Maybe, Nothing, Right, Left, mconcat

arrays = st.lists(ints, max_size=8).map(lambda xs: Array(tuple(xs)))


@given(arrays, arrays, arrays)
def test_append_is_associative(a, b, c):
    assert a.append(b).append(c) == a.append(b.append(c))


@given(arrays)
def test_mempty_is_identity(a):
    assert a.append(Array.mempty()) == a == Array.mempty().append(a)
    assert a + Array.mempty() == a


@given(st.lists(arrays, min_size=1, max_size=5))
def test_mconcat_concatenates(parts):
    assert mconcat(parts) == Array(sum((p.a for p in parts), ()))


def test_mconcat_needs_an_element():
    with pytest.raises(ValueError):
        mconcat([])


@given(arrays, unary)
def test_map(a, f):
    assert a.map(f) == Array(tuple(f(x) for x in a))


def test_ap_is_cartesian_product():
    fs = Array.make(lambda x: x + 1, lambda x: x * 10)
    assert fs * Array.make(1, 2) == Array.make(2, 3, 10, 20)


def test_chain_flattens():
    assert (Array.make(1, 2) >> (lambda x: Array.make(x, x))) \
        == Array.make(1, 1, 2, 2)


def test_folds_and_filters():
    a = Array.make(1, 2, 3)
    assert a.foldl(lambda acc, x: acc - x, 0) == -6
    assert a.foldr(lambda x, acc: x - acc, 0) == 2
    assert a.foldmap(lambda x: Array.replicate(x, x), Array) \
        == Array.make(1, 2, 2, 3, 3, 3)
    assert a.filter(lambda x: x % 2) == Array.make(1, 3)
    assert 2 in a and 4 not in a
    assert len(a) == a.length == 3
    assert a[0] == 1
    assert Array.cons(0, a) == Array.make(0, 1, 2, 3)
    assert Array.snoc(a, 4) == Array.make(1, 2, 3, 4)


@given(st.lists(ints, min_size=1, max_size=6))
def test_traverse_maybe_all_present(xs):
    assert Array(tuple(xs)).traverse(Just) == Just(Array(tuple(xs)))


def test_traverse_maybe_short_circuits_on_nothing():
    half = lambda x: Just(x // 2) if x % 2 == 0 else Nothing  # noqa: E731
    assert Array.make(2, 4, 6).traverse(half) == Just(Array.make(1, 2, 3))
    assert Array.make(2, 3, 6).traverse(half) == Nothing


def test_sequence_either_keeps_first_left():
    assert Array.make(Right(1), Left("a"), Left("b")).sequence() == Left("a")
    assert Array.make(Right(1), Right(2)).sequence() \
        == Right(Array.make(1, 2))


def test_traverse_empty_needs_pure():
    assert Array.mempty().traverse(Just, Maybe.pure) == Just(Array.mempty())
    with pytest.raises(ValueError):
        Array.mempty().sequence()


def test_repr():
    assert repr(Array.make(1, "a")) == "[1, 'a']"
