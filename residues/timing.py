"""
A simple ledger for timing functions and printing information.
"""

import time


def print_separator():
    print("||||||||||||||||||||||||||||||||||||||||")


class Transcript:
    """Records how long named calls took. Pass it to whatever needs timing."""

    def __init__(self):
        self.entries = []

    def stat_exec(self, name, fn):
        """Execute fn, print and store the elapsed time, and return its result."""
        start = time.perf_counter()
        result = fn()
        elapsed = time.perf_counter() - start
        print(f"^^^^^^^^^^ function executed in {elapsed * 1000:.0f} ms ^^^^^^^^^^")
        print_separator()

        self.entries.append((name, elapsed))
        return result

    def summary(self):
        """Print one line per recorded call, in call order."""
        for name, elapsed in self.entries:
            print(f"{name} executed in {elapsed * 1000:.0f} ms")
