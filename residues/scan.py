"""
Scanning ranges of integers for quadratic residues.
"""

import logging
from collections import namedtuple

from fields import InvariantViolation

from .symbols import legendre, sqrt

logger = logging.getLogger(__name__)

ResidueTriple = namedtuple("ResidueTriple", ["value", "low_root", "high_root"])


def scan_residues(field, start, count):
    """
    Find the next `count` quadratic residues starting from the integer `start`.

    Candidates are start, start + 1, ... converted with field.from_int. Each
    result carries the residue, its smaller root and the negation of that root.

    Candidates must stay below 2**64: a scan that runs past that limit raises
    ValueError from field.from_int.
    """
    if start < 0 or count < 0:
        raise ValueError("start and count must be non-negative")

    out = []
    x = start
    while len(out) < count:
        element = field.from_int(x)
        if legendre(element) == 1:
            low_root = sqrt(element)
            high_root = -low_root
            _check_roots(element, low_root, high_root)
            out.append(ResidueTriple(element, low_root, high_root))
        # non-residues and zero have no roots to report
        x += 1

    logger.debug(
        "found %d residues in %s scanning %d..%d", count, field.name, start, x - 1
    )
    return out


def _check_roots(value, low_root, high_root):
    if not (
        value == low_root * low_root
        and value == high_root * high_root
        and -value == low_root * high_root
    ):
        raise InvariantViolation(
            f"roots {low_root}, {high_root} do not square to {value}"
        )
