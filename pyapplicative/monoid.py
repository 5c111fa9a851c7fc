# --------------------------------------------------------
# (c) Copyright 2014, 2020 by Jason DeLaat.
# Licensed under BSD 3-clause licence.
# --------------------------------------------------------
# pylint:disable=W2301
"""Monoid Implementation.

A monoid is a semigroup with an identity element, mempty:

    1. Closure: If 'a' and 'b' are in S, then 'a.append(b)' is also in S.
    2. Identity: a.append(mempty) == a == mempty.append(a)
    3. Associativity: (a.append(b)).append(c) == a.append(b.append(c))
"""

from typing import (
    Iterable,
    Protocol,
    Self,
)

from .semigroup import Semigroup

class Monoid(Semigroup, Protocol):
    """Base class for Monoid instances.

    To implement a monoid instance, provide append and mempty
    ensuring that the closure, identity, and associativity laws hold.
    """

    @classmethod
    def mempty(cls) -> Self:
        """Returns the identity element for this Monoid."""
        ...


def mconcat[M: Monoid](monoid_list: Iterable[M]) -> M:
    """Takes a list of monoid values and reduces them to a single value
    by applying the append operation to all elements of the list.
    Needs a non empty list, because the identity can't be found
    without knowing the type.
    """
    it = iter(monoid_list)
    try:
        result = next(it)
    except StopIteration:
        raise ValueError("mconcat needs at least one element") from None
    for value in it:
        result = result.append(value)
    return result
