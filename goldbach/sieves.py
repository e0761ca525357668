"""
Sieve engine.

Responsibility: map a bound N to the exact set of primes <= N.
Two interchangeable algorithms, both returning boolean flag arrays:

- Sieve of Eratosthenes: strike multiples of each prime from p^2.
- Sieve of Atkin: toggle candidates by the mod-12 quadratic forms
      4x^2 + y^2  ≡ 1, 5 (mod 12)
      3x^2 + y^2  ≡ 7     (mod 12)
      3x^2 - y^2  ≡ 11    (mod 12), x > y
  then clear multiples of squares of the survivors.

Both must agree on every N.
"""

from enum import Enum
from math import isqrt

import numpy as np

from .primes import PrimeSet


class SieveAlgorithm(Enum):
    ERATOSTHENES = 'Eratosthenes'
    ATKIN = 'Atkin'

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, name: str) -> 'SieveAlgorithm':
        """Look up an algorithm by name, ignoring case."""
        for algo in cls:
            if algo.value.lower() == str(name).strip().lower():
                return algo
        choices = ', '.join(a.value for a in cls)
        raise ValueError(f"Unknown sieve algorithm {name!r} (expected one of: {choices})")


def _check_bound(N: int) -> None:
    if N < 0:
        raise ValueError(f"Sieve bound must be non-negative, got {N}")


def eratosthenes_flags(N: int) -> np.ndarray:
    """
    Return boolean array where flags[i] is True iff i is prime.

    Uses Sieve of Eratosthenes.

    Parameters
    ----------
    N : int
        Upper bound (inclusive).

    Returns
    -------
    np.ndarray
        Boolean array of length N+1.
    """
    _check_bound(N)
    flags = np.zeros(N + 1, dtype=bool)
    flags[2:] = True
    for p in range(2, isqrt(N) + 1):
        if flags[p]:
            flags[p*p::p] = False
    return flags


def atkin_flags(N: int) -> np.ndarray:
    """
    Return boolean array where flags[i] is True iff i is prime.

    Uses Sieve of Atkin.

    Parameters
    ----------
    N : int
        Upper bound (inclusive).

    Returns
    -------
    np.ndarray
        Boolean array of length N+1.
    """
    _check_bound(N)
    flags = np.zeros(N + 1, dtype=bool)
    root = isqrt(N)
    ys = np.arange(1, root + 1, dtype=np.int64)
    y_sq = ys * ys

    # For fixed x the values below are distinct in y, so a fancy-indexed
    # XOR toggles each one exactly once.
    for x in range(1, root + 1):
        x_sq = x * x

        n = 4 * x_sq + y_sq
        n = n[(n <= N) & ((n % 12 == 1) | (n % 12 == 5))]
        flags[n] ^= True

        n = 3 * x_sq + y_sq
        n = n[(n <= N) & (n % 12 == 7)]
        flags[n] ^= True

        n = 3 * x_sq - y_sq[:x - 1]  # y < x
        n = n[(n <= N) & (n % 12 == 11)]
        flags[n] ^= True

    # Survivors of the residue test that are divisible by a prime square
    for i in range(5, root + 1):
        if flags[i]:
            sq = i * i
            flags[sq::sq] = False

    # 2 and 3 never pass the residue test
    if N >= 2:
        flags[2] = True
    if N >= 3:
        flags[3] = True
    return flags


SIEVES = {
    SieveAlgorithm.ERATOSTHENES: eratosthenes_flags,
    SieveAlgorithm.ATKIN: atkin_flags,
}


def sieve_primes(N: int, algorithm: SieveAlgorithm) -> PrimeSet:
    """
    Return the set of all primes <= N.

    Parameters
    ----------
    N : int
        Upper bound (inclusive).
    algorithm : SieveAlgorithm
        Which sieve to run.

    Returns
    -------
    PrimeSet
    """
    return PrimeSet.from_flags(SIEVES[algorithm](N))
