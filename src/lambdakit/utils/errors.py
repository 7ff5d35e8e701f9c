"""
Error types raised by lambdakit.

The hierarchy is flat: every failure is an argument problem
detected before a collection is traversed, or an access to a missing value.
"""


class LambdakitError(Exception):
    """Base exception for all lambdakit errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class IllegalArgumentError(LambdakitError, ValueError):
    """
    Raised when a caller passes an unusable argument.

    This error is raised when:
    - A required function, predicate, comparator or accumulator is None
    - A combinator argument is not callable
    - A raw callable has the wrong arity while strict arity checks are on
    - A window or chunk size is not positive for a non-empty source
    - A write target (e.g. the dict of ``put_if_absent``) is None
    """

    pass


class NoSuchElementError(LambdakitError, LookupError):
    """Raised when a value is requested from an empty ``Option``."""

    pass
