"""Tests for Either: the first failure wins and stops evaluation."""

import pytest
from hypothesis import given, strategies as st

from conftest import ints, unary
from pyapplicative import Either, Left, Right, curry_n, either, from_either

errors = st.sampled_from(("invalid email", "name required", "too short"))


@given(ints, unary)
def test_right_maps_and_chains(x, f):
    assert Right(x).map(f) == Right(f(x))
    assert (Right(x) >> (lambda v: Right(f(v)))) == Right(f(x))
    assert Either.of(x) == Right(x)


@given(errors, unary)
def test_left_short_circuits(err, f):
    left = Left(err)
    assert left.map(f) == left
    assert (f & left) == left
    assert left.chain(lambda v: Right(f(v))) == left
    assert Right(f).ap(left) == left
    assert left.ap(Right(1)) == left


@given(errors, errors)
def test_first_failure_in_evaluation_order_wins(first, second):
    pair = curry_n(lambda a, b: (a, b))
    assert Either.of(pair) * Left(first) * Left(second) == Left(first)
    assert Either.of(pair) * Right(1) * Left(second) == Left(second)


def test_validation_scenario_reports_invalid_email():
    calls = []

    def create_user(email, name):
        calls.append((email, name))
        return {"email": email, "name": name}

    check_email = Left("invalid email")
    check_name = Right("Ada")
    result = Either.of(curry_n(create_user)) * check_email * check_name
    assert result == Left("invalid email")
    assert calls == []


def test_join():
    assert Right(Right(1)).join() == Right(1)
    assert Right(Left("e")).join() == Left("e")
    assert Left("e").join() == Left("e")


@given(ints, errors)
def test_fold_helpers(x, err):
    assert either(len, lambda r: r + 1, Right(x)) == x + 1
    assert either(len, lambda r: r + 1, Left(err)) == len(err)
    assert from_either(0, Right(x)) == x
    assert from_either(0, Left(err)) == 0


def test_either_rejects_other_values():
    with pytest.raises(TypeError):
        either(len, len, "not an either")


def test_repr_and_hash():
    assert repr(Left("e")) == "Left('e')"
    assert repr(Right(1)) == "Right(1)"
    assert len({Right(1), Right(1), Left(1)}) == 2
    assert Left(1) != Right(1)
