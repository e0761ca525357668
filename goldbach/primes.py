"""
Prime set container.

Responsibility: hold a set of primes for the lifetime of a run. No sieve
logic, no file handling.
"""

import numpy as np
from typing import Iterable, Iterator


class PrimeSet:
    """
    Immutable set of primes with O(1) membership and ascending iteration.

    Built once from a sieve or a prime list file and shared by reference
    for the rest of the run.
    """

    __slots__ = ('_ascending', '_members')

    def __init__(self, values: Iterable[int] = ()):
        members = frozenset(int(v) for v in values)
        if any(v < 0 for v in members):
            raise ValueError("PrimeSet values must be non-negative")
        self._members = members
        self._ascending = tuple(sorted(members))

    @classmethod
    def from_flags(cls, flags: np.ndarray) -> 'PrimeSet':
        """
        Build from a boolean array where flags[i] is True iff i is prime.

        Parameters
        ----------
        flags : np.ndarray
            Boolean primality flags indexed by integer.

        Returns
        -------
        PrimeSet
        """
        return cls(np.nonzero(flags)[0].tolist())

    def __contains__(self, n) -> bool:
        return n in self._members

    def __iter__(self) -> Iterator[int]:
        return iter(self._ascending)

    def __len__(self) -> int:
        return len(self._ascending)

    def __eq__(self, other) -> bool:
        if isinstance(other, PrimeSet):
            return self._members == other._members
        if isinstance(other, (set, frozenset)):
            return self._members == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._members)

    def __repr__(self) -> str:
        if len(self) <= 8:
            return f"PrimeSet({list(self._ascending)})"
        head = ', '.join(str(p) for p in self._ascending[:4])
        return f"PrimeSet([{head}, ..., {self._ascending[-1]}], size={len(self)})"

    @property
    def largest(self) -> int:
        """Largest member, or 0 for an empty set."""
        return self._ascending[-1] if self._ascending else 0

    def ascending(self) -> tuple:
        """Members in ascending numeric order."""
        return self._ascending

    def to_array(self) -> np.ndarray:
        """Return members as a sorted int64 array."""
        return np.array(self._ascending, dtype=np.int64)
