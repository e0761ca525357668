#!/usr/bin/env python3
"""
Verify the Sieve of Atkin produces identical results to the Sieve of
Eratosthenes.

Compares, for every bound in a grid:
1. The full prime sets
2. Prime counts against known values of pi(N)
3. Wall-clock time of each sieve

Usage:
    python -m goldbach.experiments.verify_sieves --N 1e7
    python -m goldbach.experiments.verify_sieves --N 1e6 --save
"""

import argparse
import sys
import time
from pathlib import Path

import numpy as np
import pandas as pd

from ..sieves import SIEVES, SieveAlgorithm

# pi(10^k)
KNOWN_PRIME_COUNTS = {
    10: 4,
    100: 25,
    1_000: 168,
    10_000: 1_229,
    100_000: 9_592,
    1_000_000: 78_498,
    10_000_000: 664_579,
    100_000_000: 5_761_455,
}


def compare_sieves(N: int, verbose: bool = True) -> dict:
    """
    Run both sieves up to N and compare their flag arrays.

    Parameters
    ----------
    N : int
        Upper bound (inclusive).
    verbose : bool
        Print mismatches and timings.

    Returns
    -------
    dict
        Bound, prime count, mismatch count, per-sieve timings.
    """
    flags = {}
    timings = {}
    for algo in SieveAlgorithm:
        t0 = time.time()
        flags[algo] = SIEVES[algo](N)
        timings[algo] = time.time() - t0

    era = flags[SieveAlgorithm.ERATOSTHENES]
    atk = flags[SieveAlgorithm.ATKIN]
    mismatches = np.nonzero(era != atk)[0]

    count = int(np.count_nonzero(era))
    expected = KNOWN_PRIME_COUNTS.get(N)

    if verbose:
        print(f"\n=== N = {N:,} ===")
        for algo in SieveAlgorithm:
            print(f"  {str(algo):<13} {timings[algo]:.3f}s")
        for n in mismatches[:10]:
            print(f"  MISMATCH at n={n}: eratosthenes={era[n]}, atkin={atk[n]}")
        if len(mismatches) == 0:
            print(f"  ✓ Both sieves find {count:,} primes")
        else:
            print(f"  ✗ {len(mismatches):,} mismatches found")
        if expected is not None and expected != count:
            print(f"  ✗ pi(N) should be {expected:,}, got {count:,}")

    return {
        'N': N,
        'prime_count': count,
        'expected_count': expected,
        'mismatches': len(mismatches),
        'eratosthenes_s': timings[SieveAlgorithm.ERATOSTHENES],
        'atkin_s': timings[SieveAlgorithm.ATKIN],
    }


def bound_grid(N_max: int) -> list:
    """Powers of ten up to N_max, plus N_max itself."""
    grid = [10 ** k for k in range(1, len(str(N_max))) if 10 ** k <= N_max]
    if N_max not in grid:
        grid.append(N_max)
    return grid


def run_verification(N_max: int, verbose: bool = True) -> pd.DataFrame:
    """Compare both sieves over bound_grid(N_max)."""
    rows = [compare_sieves(N, verbose) for N in bound_grid(N_max)]
    df = pd.DataFrame(rows)
    df['ok'] = (df['mismatches'] == 0) & (
        df['expected_count'].isna() | (df['expected_count'] == df['prime_count'])
    )
    return df


def main():
    parser = argparse.ArgumentParser(description='Verify Atkin and Eratosthenes sieves agree')
    parser.add_argument('--N', type=float, default=1e6, help='Largest bound (default: 1e6)')
    parser.add_argument('--save', action='store_true', help='Save results to data/results/')
    args = parser.parse_args()

    N = int(args.N)

    print("Sieve Verification")
    print(f"N = {N:,}")
    print("=" * 50)

    df = run_verification(N)

    print("\n" + "=" * 50)
    print(df.to_string(index=False))

    if args.save:
        outdir = Path('data/results')
        outdir.mkdir(parents=True, exist_ok=True)
        csv_path = outdir / f'verify_sieves_N{N}.csv'
        df.to_csv(csv_path, index=False)
        print(f"\nSaved to {csv_path}")

    if df['ok'].all():
        print("\n✓ All verifications passed!")
    else:
        print("\n✗ Some verifications failed!")
        sys.exit(1)


if __name__ == '__main__':
    main()
