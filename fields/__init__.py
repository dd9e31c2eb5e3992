"""
Fields subpackage: the field element contract and its backends.
"""

from .base import FieldElement
from .errors import (
    FieldError, DivisionByZero, ParseError, LengthError,
    NoSquareRoot, InvariantViolation
)
from .field import GF, PrimeFieldElement
from .named import (
    Bn128FieldElement, Curve25519FieldElement, OxfoiFieldElement,
    P256FieldElement, FIELDS
)

__all__ = [
    'FieldElement', 'GF', 'PrimeFieldElement',
    'FieldError', 'DivisionByZero', 'ParseError', 'LengthError',
    'NoSquareRoot', 'InvariantViolation',
    'Bn128FieldElement', 'Curve25519FieldElement', 'OxfoiFieldElement',
    'P256FieldElement', 'FIELDS'
]
