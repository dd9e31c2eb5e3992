"""
Exceptions raised by field backends and the residue algorithms.
"""


class FieldError(Exception):
    """Base class for all field errors."""


class DivisionByZero(FieldError, ZeroDivisionError):
    """Division by zero, or by an element with no inverse in a ring."""


class ParseError(FieldError, ValueError):
    """Malformed decimal text or non-canonical byte encoding."""


class LengthError(FieldError, ValueError):
    """Byte input wider than the field's fixed byte length."""


class NoSquareRoot(FieldError, ValueError):
    """Square root requested for an element that is not a quadratic residue."""


class InvariantViolation(FieldError, RuntimeError):
    """
    Internal consistency check failed.

    Raised when a result is impossible for an odd prime modulus, which means
    the modulus is not prime or the backend is defective.
    """
