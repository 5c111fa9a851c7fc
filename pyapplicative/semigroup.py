"""
This module provides a base protocol for Semigroup instances.
Validation uses it to combine the errors of independent failures.
"""

from typing import Protocol, Self


class Semigroup(Protocol):
    """Base class for Semigroup instances.

    To implement a semigroup instance, provide an append method
    ensuring that the closure and associativity laws hold:

        a.append(b).append(c) == a.append(b.append(c))
    """

    def append(self, other: Self) -> Self:
        """Combines two Semigroup instances."""
        ...
