"""
Conversions between field elements and arbitrary precision integers.

Only the byte codec of the FieldElement contract is used, so these work for
any backend.
"""

L60_MODULUS = 1 << 60


def to_integer(x):
    """Return the canonical integer in [0, p) for a field element."""
    return int.from_bytes(x.to_bytes_le(), 'little')


def from_integer(field, v):
    """
    Convert an integer into an element of field.

    The value is never truncated or reduced: an integer wider than
    field.byte_len() raises LengthError, and one that fits but is not below
    the modulus raises ParseError.
    """
    if v < 0:
        raise ValueError(f"cannot convert negative integer {v} to {field.name}")
    length = max(1, (v.bit_length() + 7) // 8)
    return field.from_bytes_le(v.to_bytes(length, 'little'))


def compact_string(x):
    """
    Lossy display form using only the lower 60 bits of the element.

    The plain decimal string is returned when it is not meaningfully longer.
    """
    plain_str = x.serialize()
    l60_str = f"{to_integer(x) % L60_MODULUS}_L60"
    if len(l60_str) + 3 < len(plain_str):
        return l60_str
    return plain_str


def log_floor(x, base):
    """Floor of the logarithm of x in the given base, over integer views."""
    e = to_integer(x)
    b = to_integer(base) if not isinstance(base, int) else base
    if b < 2:
        raise ValueError(f"logarithm base must be at least 2, got {b}")
    if e == 0:
        raise ValueError("logarithm of zero is undefined")

    result = 0
    power = b
    while power <= e:
        power *= b
        result += 1
    return result
