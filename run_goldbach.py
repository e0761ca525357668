#!/usr/bin/env python3
"""
Goldbach's conjecture checker.

Prints a prime pair for every even number from 4 to n.

Usage:
    python run_goldbach.py -n 1000
    python run_goldbach.py -n 1000 --algorithm Eratosthenes --stop
    python run_goldbach.py -n 1000 --primes-file primes.txt
    python run_goldbach.py -n 1000 --config config/default.yaml --save
"""

import argparse
import sys
import time

from goldbach.config import load_config
from goldbach.prime_source import InvalidPrimeData, resolve_primes
from goldbach.sieves import SieveAlgorithm
from goldbach.solver import results_frame, scan_range, validate_bound


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Goldbach's Conjecture Solver")
    parser.add_argument('-n', type=int, default=None,
                        help='The upper bound to test the conjecture (required unless set in --config)')
    parser.add_argument('-s', '--stop', action='store_true', default=None,
                        help='Stop running after the first even without a solution is found')
    parser.add_argument('-p', '--primes-file', type=str, default=None,
                        help='Use a static list of primes from a file (delimited by newlines)')
    parser.add_argument('-a', '--algorithm', type=str, default=None,
                        choices=[algo.value for algo in SieveAlgorithm],
                        help='Algorithm to use to generate primes (default: Atkin)')
    parser.add_argument('--config', type=str, default=None,
                        help='YAML file with default settings')
    parser.add_argument('--save', action='store_true',
                        help='Save results as CSV under output_dir')
    parser.add_argument('-v', '--verbose', action='store_true', default=None,
                        help='Print progress')
    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = load_config(args.config).with_overrides(
            n=args.n,
            algorithm=args.algorithm,
            stop_on_failure=args.stop,
            primes_file=args.primes_file,
            verbose=args.verbose,
        )
        if config.n is None:
            parser.error('the following arguments are required: -n')
        validate_bound(config.n)
    except (OSError, ValueError) as e:
        print(e)
        return 1

    start = time.time()
    try:
        primes = resolve_primes(config)
    except (OSError, InvalidPrimeData) as e:
        print(f"Failed to load primes from {config.primes_file}: {e}")
        return 1

    if config.verbose:
        source = config.primes_file or f"Sieve of {config.algorithm}"
        print(f"Loaded {len(primes):,} primes from {source} in {time.time() - start:.2f}s")

    results = []
    failures = 0
    for result in scan_range(config.n, primes, config.stop_on_failure):
        print(result)
        results.append(result)
        failures += not result.found

    if config.verbose:
        print(f"Checked {len(results):,} even numbers, {failures:,} without a solution "
              f"({time.time() - start:.2f}s total)")

    if args.save:
        config.output_dir.mkdir(parents=True, exist_ok=True)
        csv_path = config.output_dir / f'goldbach_n{config.n}.csv'
        results_frame(results).to_csv(csv_path, index=False)
        print(f"Saved to {csv_path}")

    return 0


if __name__ == '__main__':
    sys.exit(main())
