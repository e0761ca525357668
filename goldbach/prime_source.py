"""
Prime source resolution.

Responsibility: produce the one PrimeSet a run uses, either by sieving
or by reading a static prime list (one unsigned integer per line).
"""

import re
from pathlib import Path

from .primes import PrimeSet
from .sieves import sieve_primes

_UNSIGNED = re.compile(rb'\+?[0-9]+')

# Largest value a prime list may hold (unsigned 64-bit)
MAX_PRIME = 2**64 - 1


class InvalidPrimeData(ValueError):
    """A prime list line is not an unsigned integer."""

    def __init__(self, path, line_number: int, text: str):
        self.path = path
        self.line_number = line_number
        self.text = text
        super().__init__(f"invalid data on line {line_number}: {text!r}")


def load_primes(path) -> PrimeSet:
    """
    Load primes from a static file delimited by newlines.

    The whole file is rejected if any line (including a blank one) is not
    an unsigned integer up to MAX_PRIME. Only a newline (optionally
    preceded by a carriage return) ends a line; any other byte, non-ASCII
    included, is invalid data. Duplicates collapse. Values are not checked
    for primality.

    Parameters
    ----------
    path : str or Path
        Prime list file.

    Returns
    -------
    PrimeSet

    Raises
    ------
    OSError
        File missing or unreadable.
    InvalidPrimeData
        A line is not an unsigned integer.
    """
    with open(path, 'rb') as f:
        data = f.read()

    # Lines end at b'\n' only, with one optional b'\r' before it; a final
    # newline does not start another line.
    lines = data.split(b'\n')
    terminated = len(lines) - 1
    if lines[-1] == b'':
        lines.pop()

    values = []
    for line_number, line in enumerate(lines, start=1):
        if line_number <= terminated and line.endswith(b'\r'):
            line = line[:-1]
        if not _UNSIGNED.fullmatch(line) or int(line) > MAX_PRIME:
            raise InvalidPrimeData(path, line_number,
                                   line.decode('ascii', errors='replace'))
        values.append(int(line))
    return PrimeSet(values)


def save_primes(path, primes: PrimeSet) -> Path:
    """Write primes in ascending order, one per line, readable by load_primes."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, 'w') as f:
        for p in primes:
            f.write(f"{p}\n")
    return path


def resolve_primes(config) -> PrimeSet:
    """
    Return the PrimeSet for a run.

    Uses config.primes_file verbatim when set, otherwise sieves up to
    config.n with config.algorithm.
    """
    if config.primes_file is not None:
        return load_primes(config.primes_file)
    return sieve_primes(config.n, config.algorithm)
