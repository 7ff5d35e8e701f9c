"""
lambdakit - Functional combinators and collection algorithms.

Typed wrappers for functions, predicates, comparators and partial functions
of arity 0 to 3, and a collection engine (filter, map, fold, group,
partition, sliding/split, sort, set difference) working uniformly over
sequences, mappings and strings.
"""

from lambdakit.config import Settings, configure, get_settings, override
from lambdakit.runtime import mappings, sequences, strings
from lambdakit.types import (
    BinaryOperator,
    Comparator,
    Function0,
    Function1,
    Function2,
    Function3,
    Option,
    PartialFunction,
    Predicate1,
    Predicate2,
    UnaryOperator,
)
from lambdakit.utils.errors import IllegalArgumentError, LambdakitError, NoSuchElementError

__version__ = "0.1.0"
__all__ = [
    "Settings",
    "configure",
    "get_settings",
    "override",
    "mappings",
    "sequences",
    "strings",
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
    "LambdakitError",
    "IllegalArgumentError",
    "NoSuchElementError",
]
