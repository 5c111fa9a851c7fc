"""
Property tests: every container obeys the functor and applicative laws.
"""

import pytest
from hypothesis import given, settings, strategies as st

from conftest import comparable_pures, ints, run_io, run_task, unary
from pyapplicative import IO, Just, Maybe, Nothing, Task, laws
from pyapplicative.laws import LawResult, equal_by


# =============================================================================
# PROPERTY TESTS
# =============================================================================

@given(comparable_pures, unary, unary, ints)
def test_all_laws_hold_for_comparable_containers(pure, f, g, x):
    results = laws.check_applicative(pure, f, g, x)
    assert len(results) == 7
    assert all(r.holds for r in results), [r for r in results if not r.holds]


@given(unary, unary, ints)
def test_all_laws_hold_for_io(f, g, x):
    results = laws.check_applicative(IO.pure, f, g, x, equal_by(run_io))
    assert all(r.holds for r in results)


@settings(max_examples=25, deadline=None)
@given(unary, unary, ints)
def test_all_laws_hold_for_task(f, g, x):
    results = laws.check_applicative(Task.pure, f, g, x, equal_by(run_task))
    assert all(r.holds for r in results)


@given(st.one_of(st.just(Nothing), ints.map(Just)), unary)
def test_interchange_and_identity_hold_for_nothing(v, f):
    assert laws.identity(Maybe.pure, v).holds
    assert laws.interchange(Maybe.pure, Nothing, 1).holds
    assert laws.functor_identity(v).holds
    assert laws.functor_composition(v, f, f).holds


# =============================================================================
# RESULT SHAPE
# =============================================================================

def test_results_carry_both_sides():
    result = laws.homomorphism(Just, str, 5)
    assert result == LawResult("homomorphism", True, Just("5"), Just("5"))


def test_broken_instance_is_reported():
    result = laws.map_via_ap(Just, lambda x: x + 1, 1,
                             equals=lambda a, b: a.a == b.a + 1)
    assert result.name == "map via ap"
    assert not result.holds


@pytest.mark.parametrize("name", [
    "functor identity", "functor composition", "identity", "homomorphism",
    "interchange", "composition", "map via ap",
])
def test_check_applicative_names_every_law(name):
    names = [r.name for r in laws.check_applicative(Just, abs, lambda x: x - 1, 3)]
    assert name in names
