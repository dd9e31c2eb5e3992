"""
List quadratic residues and their roots in one or more fields.
"""

import argparse
import logging
import sys

from fields import FIELDS, GF

from .bridge import compact_string
from .scan import scan_residues
from .timing import Transcript


def print_residues(field, start, count, out=None):
    """Print the next `count` residues in field starting from `start`."""
    out = out if out is not None else sys.stdout
    print(
        f"finding the next {count} residues in field {field.name}: starting at {start}",
        file=out,
    )
    for value, low_root, high_root in scan_residues(field, start, count):
        print(
            f"    -{compact_string(value)}_{field.name} = "
            f"{compact_string(low_root)} * {compact_string(high_root)}",
            file=out,
        )


def build_parser():
    parser = argparse.ArgumentParser(
        description="Find quadratic residues and their square roots in prime fields"
    )
    parser.add_argument('--field', action='append', choices=sorted(FIELDS),
                        help='named field to scan (repeatable, default: all)')
    parser.add_argument('--modulus', type=int, action='append', default=[],
                        help='custom odd prime modulus to scan (repeatable)')
    parser.add_argument('--start', type=int, default=360)
    parser.add_argument('--count', type=int, default=1000)
    parser.add_argument('--verbose', action='store_true', help='enable debug logging')
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(asctime)s %(name)s %(levelname)s %(message)s',
    )

    # all named fields unless the user picked fields or moduli
    names = args.field or ([] if args.modulus else sorted(FIELDS))
    fields = [FIELDS[name] for name in names]
    for modulus in args.modulus:
        try:
            fields.append(GF(modulus))
        except ValueError as e:
            parser.error(str(e))

    transcript = Transcript()
    for field in fields:
        transcript.stat_exec(
            f"{args.count} quadratic residues in {field.name}",
            lambda field=field: print_residues(field, args.start, args.count),
        )
    transcript.summary()
    return 0


if __name__ == "__main__":
    sys.exit(main())
