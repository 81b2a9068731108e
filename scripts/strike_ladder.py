#!/usr/bin/env python
"""
Gamma proxy versus Black model across strikes.

Prints put values under both distributions for a ladder of strikes and,
if matplotlib is available, plots the proxy error against moneyness.
"""

import sys
from pathlib import Path

import numpy as np

# Add parent directory to path to allow imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from gamma_black.analytics.black import black_put
from gamma_black.analytics.gamma import convert, put


def main():
    """Run strike ladder comparison."""
    f = 100.0
    sigma = 0.20
    t = 1.0

    strikes = np.linspace(60.0, 140.0, 17)
    a, b = convert(sigma * np.sqrt(t))

    print("=" * 80)
    print("Gamma Proxy vs Black Model")
    print("=" * 80)
    print(f"\nParameters: f={f}, sigma={sigma}, t={t}, a=b={a:.6f}")
    print("\n" + "-" * 80)
    print(f"{'Strike':<10} {'Moneyness':<12} {'Gamma Put':<15} "
          f"{'Black Put':<15} {'Difference':<15}")
    print("-" * 80)

    differences = []
    for k in strikes:
        gamma_value = put(f, sigma, k, t)
        black_value = black_put(f, sigma, k, t)
        diff = gamma_value - black_value
        differences.append(diff)

        print(f"{k:<10.1f} {k / f:<12.4f} {gamma_value:<15.6f} "
              f"{black_value:<15.6f} {diff:<15.2e}")

    print("-" * 80)

    differences = np.asarray(differences)
    print("\nProxy Error:")
    print(f"  Maximum |difference|:  {np.max(np.abs(differences)):.2e}")
    print(f"  Mean difference:       {np.mean(differences):.2e}")

    # Optional plotting
    try:
        import matplotlib.pyplot as plt

        plt.figure(figsize=(10, 6))
        plt.plot(strikes / f, differences, 'b-o', linewidth=2)
        plt.axhline(0.0, color='gray', linestyle=':', alpha=0.7)
        plt.xlabel('Moneyness (k/f)', fontsize=12)
        plt.ylabel('Gamma put - Black put', fontsize=12)
        plt.title(f'Gamma Proxy Error (s = {sigma * np.sqrt(t):.2f})', fontsize=14)
        plt.grid(True, alpha=0.3)
        plt.tight_layout()

        plots_dir = Path(__file__).parent.parent / "plots"
        plots_dir.mkdir(exist_ok=True)
        output_path = plots_dir / "strike_ladder.png"
        plt.savefig(output_path, dpi=150, bbox_inches='tight')
        print(f"\nPlot saved to: {output_path}")

    except ImportError:
        print("\nNote: matplotlib not available - skipping plot generation")

    print("=" * 80)


if __name__ == "__main__":
    main()
