#!/usr/bin/env python
"""
Command-line interface for Gamma-Black pricing.

This module provides the main CLI entrypoint for the gamma-black command.

Example usage:
    gamma-black --f 100 --sigma 0.2 --k 100 --t 1.0
    gamma-black --f 100 --sigma 0.2 --k 90 --t 0.5 --black
"""

import argparse
import logging
import sys

from gamma_black.analytics.gamma import price
from gamma_black.errors import PreconditionViolation


def parse_args(args: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Parameters
    ----------
    args : list[str] | None
        Command-line arguments. If None, uses sys.argv.

    Returns
    -------
    argparse.Namespace
        Parsed arguments.
    """
    parser = argparse.ArgumentParser(
        description="Gamma-distribution proxy for Black model option values",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )

    # Market parameters
    parser.add_argument("--f", type=float, required=True, help="Forward price")
    parser.add_argument("--sigma", type=float, required=True, help="Volatility")
    parser.add_argument("--k", type=float, required=True, help="Strike price")
    parser.add_argument("--t", type=float, required=True, help="Time to expiry (years)")

    # Output options
    parser.add_argument(
        "--black",
        action="store_true",
        help="Display Black model reference values and the proxy error",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    return parser.parse_args(args)


def main(args: list[str] | None = None) -> int:
    """Main entry point for CLI.

    Parameters
    ----------
    args : list[str] | None
        Command-line arguments. If None, uses sys.argv.

    Returns
    -------
    int
        Exit code (0 for success, non-zero for errors).
    """
    parsed = parse_args(args)

    if parsed.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    print("=" * 70)
    print("Gamma-Black Pricing")
    print("=" * 70)
    print("\nInput Parameters:")
    print(f"  Forward (f):            {parsed.f:,.2f}")
    print(f"  Volatility (σ):         {parsed.sigma:.4f}")
    print(f"  Strike (k):             {parsed.k:,.2f}")
    print(f"  Time to Expiry (t):     {parsed.t:.4f} years")

    try:
        result = price(parsed.f, parsed.sigma, parsed.k, parsed.t)
    except PreconditionViolation as e:
        print(f"\nError: {e}")
        return 1

    print("\nGamma Parameters:")
    print(f"  Scaled Vol (s):         {result.s:.6f}")
    print(f"  Shape (a):              {result.shape:.6f}")
    print(f"  Rate (b):               {result.rate:.6f}")

    print("\nResults (Gamma proxy):")
    print(f"  Put Value:              {result.put:.6f}")
    print(f"  Call Value:             {result.call:.6f}")

    if parsed.black:
        print("\nBlack Reference:")
        print(f"  Put Value:              {result.black_put:.6f}")
        print(f"  Call Value:             {result.black_call:.6f}")
        print(f"  Put Difference:         {result.put_error:.2e}")
        print(f"  Call Difference:        {result.call_error:.2e}")

    print("\n" + "=" * 70)
    return 0


if __name__ == "__main__":
    sys.exit(main())
