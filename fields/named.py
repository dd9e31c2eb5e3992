"""
Well-known scalar fields.
"""

from .field import PrimeFieldElement


class Bn128FieldElement(
    PrimeFieldElement,
    modulus=0x30644e72e131a029b85045b68181585d2833e84879b9709143e1f593f0000001,
    name="alt_bn128",
):
    """Scalar field of the alt_bn128 (BN254) curve."""
    __slots__ = ()


class Curve25519FieldElement(
    PrimeFieldElement,
    modulus=0x1000000000000000000000000000000014def9dea2f79cd65812631a5cf5d3ed,
    name="curve25519",
):
    """Scalar field of curve25519, the order of the ed25519 base point."""
    __slots__ = ()


class OxfoiFieldElement(
    PrimeFieldElement,
    modulus=0xffffffff00000001,
    name="oxfoi",
):
    """The 64-bit "goldilocks" field, p = 2^64 - 2^32 + 1."""
    __slots__ = ()


class P256FieldElement(
    PrimeFieldElement,
    modulus=0xffffffff00000000ffffffffffffffffbce6faada7179e84f3b9cac2fc632551,
    name="p256",
):
    """Scalar field for the NIST P-256 group."""
    __slots__ = ()


FIELDS = {
    field.name: field
    for field in (
        Bn128FieldElement,
        Curve25519FieldElement,
        OxfoiFieldElement,
        P256FieldElement,
    )
}
