"""
Quadratic residuosity and square roots over any prime field backend.

The algorithms here make no timing guarantees: modular exponentiation and
control flow are both variable time.
"""

import logging
from enum import IntEnum

from fields import InvariantViolation, NoSquareRoot

from .bridge import from_integer, to_integer

logger = logging.getLogger(__name__)


class Residuosity(IntEnum):
    """Classification of a field element by its Legendre symbol."""
    NON_RESIDUE = -1
    ZERO = 0
    RESIDUE = 1


def legendre(x):
    """
    Calculate the Legendre symbol of a field element.

    Returns 1 for a quadratic residue, -1 for a non-residue and 0 for zero.
    """
    field = type(x)
    if x == field.zero():
        return 0

    p = field.prime()
    # (p - 1) / 2, derived with the field's own division
    e = to_integer((-field.one()) / (field.one() + field.one()))
    symbol = pow(to_integer(x), e, p)
    if symbol == 1:
        return 1
    if symbol == p - 1:
        return -1
    raise InvariantViolation(
        f"legendre symbol is not 1, -1, or 0 in {field.name}: modulus is not prime"
    )


def classify(x):
    return Residuosity(legendre(x))


def find_non_residue(field):
    """Return the smallest element from 2 upwards with Legendre symbol -1."""
    one = field.one()
    candidate = one + one
    while candidate != field.zero():
        if legendre(candidate) == -1:
            logger.debug("non-residue %s found in %s", candidate, field.name)
            return candidate
        candidate = candidate + one
    raise InvariantViolation(f"no quadratic non-residue exists in {field.name}")


def sqrt(x):
    """
    Prime field square root after Kumar (arXiv:2008.11814).

    Exponents are tracked as field elements and halved with field division.
    Always returns the smaller of the two roots.
    """
    field = type(x)
    if x == field.zero():
        return field.zero()
    if legendre(x) != 1:
        raise NoSquareRoot(f"{x} is not a quadratic residue in {field.name}")

    p = field.prime()
    a = to_integer(x)
    b = to_integer(find_non_residue(field))

    two = field.one() + field.one()
    m = (-field.one()) / two
    apow = -field.one()
    bpow = field.zero()

    iterations = 0
    while to_integer(apow) % 2 == 0:
        apow = apow / two
        bpow = bpow / two
        a_ = pow(a, to_integer(apow), p)
        b_ = pow(b, to_integer(bpow), p)
        if (a_ * b_) % p == p - 1:
            bpow = bpow + m
        iterations += 1
    logger.debug("sqrt in %s finished halving after %d iterations", field.name, iterations)

    apow = (apow + field.one()) / two
    bpow = bpow / two
    a_ = pow(a, to_integer(apow), p)
    b_ = pow(b, to_integer(bpow), p)
    root = (a_ * b_) % p
    other_root = p - root
    return from_integer(field, min(root, other_root))
