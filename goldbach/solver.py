"""
Goldbach pair search over a range of even numbers.

Responsibility: find a witness pair (p, q), p + q = T, for each even T,
given a fixed PrimeSet. This file must not know how the primes were
produced.
"""

from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, Tuple

import pandas as pd

from .primes import PrimeSet


@dataclass(frozen=True)
class GoldbachResult:
    target: int
    pair: Optional[Tuple[int, int]]

    @property
    def found(self) -> bool:
        return self.pair is not None

    def __str__(self) -> str:
        if self.pair is None:
            return f"{self.target} has no solution"
        p, q = self.pair
        return f"{self.target} = {p} + {q}"


def validate_bound(n: int) -> None:
    """Raise ValueError unless n is an even integer >= 4."""
    if n < 4 or n % 2 != 0:
        raise ValueError("n must be >= 4 and even")


def solve(target: int, primes: PrimeSet) -> Optional[Tuple[int, int]]:
    """
    Find primes (p, q) with p + q = target.

    Candidates are tried in ascending order, so the pair with the smallest
    p is returned.

    Parameters
    ----------
    target : int
        Even number to decompose.
    primes : PrimeSet
        Candidate primes.

    Returns
    -------
    tuple or None
        (p, target - p), or None if no pair exists in the set.
    """
    for p in primes:
        # Past target/2 every pair would already have been seen as (q, p)
        if p > target // 2:
            break
        complement = max(target - p, 0)
        if complement in primes:
            return (p, complement)
    return None


def solve_target(target: int, primes: PrimeSet) -> GoldbachResult:
    return GoldbachResult(target, solve(target, primes))


def scan_range(n: int, primes: PrimeSet,
               stop_on_failure: bool = False) -> Iterator[GoldbachResult]:
    """
    Yield a GoldbachResult for every even T in [4, n].

    Parameters
    ----------
    n : int
        Upper bound (inclusive).
    primes : PrimeSet
        Shared prime set, not modified.
    stop_on_failure : bool
        Stop after yielding the first result without a pair.

    Yields
    ------
    GoldbachResult
    """
    for target in range(4, n + 1, 2):
        result = solve_target(target, primes)
        yield result
        if stop_on_failure and not result.found:
            return


def results_frame(results: Iterable[GoldbachResult]) -> pd.DataFrame:
    """
    Tabulate results as columns target, p, q, found.

    Missing pairs are <NA> in nullable integer columns.
    """
    rows = []
    for r in results:
        p, q = r.pair if r.found else (None, None)
        rows.append({'target': r.target, 'p': p, 'q': q, 'found': r.found})

    df = pd.DataFrame(rows, columns=['target', 'p', 'q', 'found'])
    return df.astype({'target': 'int64', 'p': 'Int64', 'q': 'Int64', 'found': bool})
