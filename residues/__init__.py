"""
Residues subpackage: generic number theory over any FieldElement backend.
"""

from .bridge import to_integer, from_integer, compact_string, log_floor
from .symbols import Residuosity, legendre, classify, find_non_residue, sqrt
from .scan import ResidueTriple, scan_residues
from .timing import Transcript

__all__ = [
    'to_integer', 'from_integer', 'compact_string', 'log_floor',
    'Residuosity', 'legendre', 'classify', 'find_non_residue', 'sqrt',
    'ResidueTriple', 'scan_residues',
    'Transcript'
]
