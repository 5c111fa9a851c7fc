""" imports for pyapplicative """
from .applicative import Applicative, ap, lift_a2, lift_a3, lift_an
from .array import Array
from .container import Container
from .curry import arity, curry2, curry3, curry_n
from .either import Either, Left, Right, either, from_either
from .errors import ApplicativeError, ArityError, ContainerMismatchError, \
    NotAFunctionError
from .functor import Functor, map, replace, void #pylint: disable=W0622
from .io import IO
from .maybe import Maybe, Just, Nothing, from_maybe, from_nullable, maybe, \
    is_just, is_nothing
from .monad import Kleisli, Monad, ap_from_chain, comp, compose, \
    compose_kleisli, const, identity
from .monoid import Monoid, mconcat
from .semigroup import Semigroup
from .task import Task
from .validation import V, Valid, Invalid
