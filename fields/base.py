"""
Capability contract for prime field elements.

Every backend subclasses FieldElement and supplies the arithmetic operators,
the decimal string codec and the little-endian byte codec. The generic
algorithms in the residues package only ever use what is declared here.
"""

from abc import ABC, abstractmethod


class FieldElement(ABC):
    """Abstract base class for elements of a prime field."""

    # Class attributes to be defined by concrete implementations
    modulus = None
    name = None
    field_bytes_length = None

    __slots__ = ()

    def __init_subclass__(cls, modulus=None, name=None, **kwargs):
        """Bind a subclass to a specific modulus."""
        super().__init_subclass__(**kwargs)
        if modulus is not None:
            cls.modulus = modulus
            cls.name = name if name is not None else f"f{modulus}"
            cls.field_bytes_length = (modulus.bit_length() + 7) // 8

    @abstractmethod
    def __add__(self, other):
        raise NotImplementedError

    @abstractmethod
    def __sub__(self, other):
        raise NotImplementedError

    @abstractmethod
    def __mul__(self, other):
        raise NotImplementedError

    @abstractmethod
    def __truediv__(self, other):
        """Field division. Raises DivisionByZero for a zero divisor."""
        raise NotImplementedError

    @abstractmethod
    def __neg__(self):
        raise NotImplementedError

    @abstractmethod
    def __eq__(self, other):
        raise NotImplementedError

    @abstractmethod
    def __hash__(self):
        raise NotImplementedError

    @abstractmethod
    def serialize(self):
        """Return the decimal string representation."""
        raise NotImplementedError

    @classmethod
    @abstractmethod
    def deserialize(cls, text):
        """Parse an element from its decimal string representation."""
        raise NotImplementedError

    @abstractmethod
    def to_bytes_le(self):
        """Return exactly byte_len() little-endian bytes."""
        raise NotImplementedError

    @classmethod
    @abstractmethod
    def from_bytes_le(cls, data):
        """Parse an element from at most byte_len() little-endian bytes."""
        raise NotImplementedError

    @classmethod
    @abstractmethod
    def from_int(cls, value):
        """Create an element from an integer in [0, 2**64)."""
        raise NotImplementedError

    @classmethod
    def zero(cls):
        return cls.from_int(0)

    @classmethod
    def one(cls):
        return cls.from_int(1)

    @classmethod
    def prime(cls):
        """
        The prime modulus of the field.

        Generic implementation through the byte codec; backends that know
        their modulus should return it directly.
        """
        neg_one = (-cls.one()).to_bytes_le()
        return int.from_bytes(neg_one, 'little') + 1

    @classmethod
    def byte_len(cls):
        """Number of bytes produced by to_bytes_le."""
        return cls.field_bytes_length

    @classmethod
    def random(cls, rng):
        """Sample a uniform element using rng.randint."""
        value = rng.randint(0, cls.prime() - 1)
        return cls.from_bytes_le(value.to_bytes(cls.byte_len(), 'little'))

    def __str__(self):
        return self.serialize()

    def __repr__(self):
        return f"{type(self).__name__}({self.serialize()}, {self.name})"
