#!/usr/bin/env python3
"""
Test suite for the timing transcript and the residue listing command.
"""

import sys
import os
import io
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

import pytest

from fields import GF
from residues import Transcript
from residues.cli import main as cli_main, print_residues


def test_stat_exec_records_in_order(capsys):
    transcript = Transcript()
    assert transcript.stat_exec("first", lambda: 1) == 1
    assert transcript.stat_exec("second", lambda: "two") == "two"

    assert [name for name, _ in transcript.entries] == ["first", "second"]
    assert all(elapsed >= 0 for _, elapsed in transcript.entries)

    out = capsys.readouterr().out
    assert out.count("function executed in") == 2
    assert "||||" in out


def test_summary(capsys):
    transcript = Transcript()
    transcript.stat_exec("residues in f13", lambda: None)
    capsys.readouterr()

    transcript.summary()
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 1
    assert lines[0].startswith("residues in f13 executed in ")


def test_print_residues():
    out = io.StringIO()
    print_residues(GF(13, "f13"), 1, 3, out=out)
    lines = out.getvalue().splitlines()
    assert lines[0] == "finding the next 3 residues in field f13: starting at 1"
    assert lines[1:] == [
        "    -1_f13 = 1 * 12",
        "    -3_f13 = 4 * 9",
        "    -4_f13 = 2 * 11",
    ]


def test_main_custom_modulus(capsys):
    assert cli_main(["--modulus", "13", "--start", "1", "--count", "3"]) == 0
    out = capsys.readouterr().out
    assert "    -3_f13 = 4 * 9" in out
    assert "3 quadratic residues in f13 executed in" in out


def test_main_named_field(capsys):
    assert cli_main(["--field", "oxfoi", "--start", "360", "--count", "5"]) == 0
    out = capsys.readouterr().out
    assert out.count("_oxfoi = ") == 5
    assert "alt_bn128" not in out


def test_main_rejects_bad_modulus(capsys):
    with pytest.raises(SystemExit) as excinfo:
        cli_main(["--modulus", "100", "--count", "1"])
    assert excinfo.value.code == 2
    assert "modulus must be odd" in capsys.readouterr().err


def main():
    test_print_residues()
    print("All timing tests passed!")


if __name__ == "__main__":
    main()
