"""
lambdakit Combinator Types.

Function, predicate, comparator and partial-function wrappers, plus the
arity guards used to classify raw callables.
"""

from lambdakit.types.arity import (
    accepts_arity,
    declared_arity,
    is_comparator,
    is_function0,
    is_function1,
    is_function2,
    is_function3,
    is_predicate1,
    is_predicate2,
)
from lambdakit.types.function import Function0, Function1, Function2, Function3, coerce
from lambdakit.types.predicate import Predicate1, Predicate2
from lambdakit.types.comparator import Comparator
from lambdakit.types.operator import BinaryOperator, UnaryOperator
from lambdakit.types.option import Option
from lambdakit.types.partial_function import PartialFunction

__all__ = [
    # Arity guards
    "accepts_arity",
    "declared_arity",
    "is_comparator",
    "is_function0",
    "is_function1",
    "is_function2",
    "is_function3",
    "is_predicate1",
    "is_predicate2",
    # Wrappers
    "coerce",
    "Function0",
    "Function1",
    "Function2",
    "Function3",
    "Predicate1",
    "Predicate2",
    "Comparator",
    "UnaryOperator",
    "BinaryOperator",
    "Option",
    "PartialFunction",
]
