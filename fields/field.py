"""
Pure Python implementation of prime field arithmetic.

PrimeFieldElement is a backend for the FieldElement contract built on Python
integers. GF() creates new fields at runtime from a modulus and a name.
"""

from .base import FieldElement
from .errors import DivisionByZero, LengthError, ParseError

U64_LIMIT = 1 << 64


class PrimeFieldElement(FieldElement):
    """Element of GF(p), stored as its canonical integer in [0, p)."""

    __slots__ = ('value',)

    def __init__(self, value):
        self.value = value % self.modulus

    def _coerce(self, other):
        if isinstance(other, int):
            return other % self.modulus
        if type(other) is not type(self):
            raise TypeError(
                f"cannot combine {self.name} element with {type(other).__name__}"
            )
        return other.value

    def __add__(self, other):
        return type(self)(self.value + self._coerce(other))

    def __radd__(self, other):
        return self.__add__(other)

    def __sub__(self, other):
        return type(self)(self.value - self._coerce(other))

    def __rsub__(self, other):
        return type(self)(self._coerce(other) - self.value)

    def __mul__(self, other):
        return type(self)(self.value * self._coerce(other))

    def __rmul__(self, other):
        return self.__mul__(other)

    def __truediv__(self, other):
        divisor = self._coerce(other)
        try:
            other_inv = pow(divisor, -1, self.modulus)
        except ValueError:
            raise DivisionByZero(f"{divisor} has no inverse in {self.name}") from None
        return type(self)(self.value * other_inv)

    def __rtruediv__(self, other):
        return type(self)(self._coerce(other)) / self

    def __neg__(self):
        return type(self)(-self.value)

    def __eq__(self, other):
        if isinstance(other, int):
            return self.value == other
        if type(other) is not type(self):
            return NotImplemented
        return self.value == other.value

    def __hash__(self):
        return hash(self.value)

    def __int__(self):
        return self.value

    def serialize(self):
        return str(self.value)

    @classmethod
    def deserialize(cls, text):
        if not isinstance(text, str) or not (text.isascii() and text.isdigit()):
            raise ParseError(f"invalid {cls.name} element: {text!r}")
        value = int(text)
        if value >= cls.modulus:
            raise ParseError(f"{text} is not below the {cls.name} modulus")
        return cls(value)

    def to_bytes_le(self):
        return self.value.to_bytes(self.field_bytes_length, 'little')

    @classmethod
    def from_bytes_le(cls, data):
        if len(data) > cls.field_bytes_length:
            raise LengthError(
                f"incorrect number of bytes passed to {cls.name}: "
                f"expected at most {cls.field_bytes_length} got {len(data)}"
            )
        value = int.from_bytes(data, 'little')
        if value >= cls.modulus:
            raise ParseError(f"non-canonical {cls.name} encoding")
        return cls(value)

    @classmethod
    def from_int(cls, value):
        if not isinstance(value, int):
            raise TypeError(f"expected an int, got {type(value).__name__}")
        if not 0 <= value < U64_LIMIT:
            raise ValueError(f"{value} is not a 64-bit unsigned integer")
        return cls(value)

    @classmethod
    def prime(cls):
        return cls.modulus


# Calls to GF with identical modulus and name return the same class.
_field_cache = {}


def GF(modulus, name=None):
    """
    Create a prime field type for the given odd modulus.

    Primality is not checked: a composite modulus gives a commutative ring,
    on which the residue algorithms raise InvariantViolation.
    """
    if modulus < 3 or modulus % 2 == 0:
        raise ValueError(f"modulus must be odd and at least 3, got {modulus}")
    if name is None:
        name = f"f{modulus}"

    if (modulus, name) in _field_cache:
        return _field_cache[(modulus, name)]

    cls = type(
        f'GF({modulus})',
        (PrimeFieldElement,),
        {'__slots__': ()},
        modulus=modulus,
        name=name,
    )
    _field_cache[(modulus, name)] = cls
    return cls
