"""
Exceptions raised by pyapplicative.

Absence and failure are modelled as values (Nothing, Left, Invalid);
these exceptions signal misuse of the containers themselves.
"""


class ApplicativeError(Exception):
    """
    Base class for pyapplicative errors
    """


class NotAFunctionError(ApplicativeError, TypeError):
    """
    Raised when ap is called on a container that does not hold a function
    """
    def __init__(self, value: object):
        super().__init__(
            f"Cannot apply {type(value).__name__} value {value!r}: "
            "container must hold a function")
        self.value = value


class ContainerMismatchError(ApplicativeError, TypeError):
    """
    Raised when ap combines containers of unrelated types
    """
    def __init__(self, expected: str, found: object):
        super().__init__(
            f"Cannot apply {expected} to {type(found).__name__}")
        self.expected = expected
        self.found = found


class ArityError(ApplicativeError, ValueError):
    """
    Raised when a function cannot be curried to the requested arity
    """
