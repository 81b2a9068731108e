"""
Parameter and result types for Gamma-Black pricing.
"""

from dataclasses import dataclass
from typing import NamedTuple


class GammaParameters(NamedTuple):
    """
    Shape and rate of a Gamma distribution.

    Unpacks and compares like a plain ``(a, b)`` pair.

    Attributes
    ----------
    shape : float
        Shape parameter a
    rate : float
        Rate parameter b (inverse scale)
    """

    shape: float
    rate: float

    @property
    def mean(self) -> float:
        return self.shape / self.rate

    @property
    def variance(self) -> float:
        return self.shape / self.rate**2


@dataclass
class GammaBlackResult:
    """
    Container for a Gamma-proxy valuation and its Black reference.

    Attributes
    ----------
    f : float
        Forward price
    sigma : float
        Volatility
    k : float
        Strike price
    t : float
        Time to expiry in years
    s : float
        Volatility-scaled time sigma * sqrt(t)
    shape : float
        Gamma shape parameter from moment matching
    rate : float
        Gamma rate parameter (equal to shape)
    put : float
        Gamma-proxy put value
    call : float
        Gamma-proxy call value
    black_put : float
        Black model put value on the same inputs
    black_call : float
        Black model call value on the same inputs
    """

    f: float
    sigma: float
    k: float
    t: float
    s: float
    shape: float
    rate: float
    put: float
    call: float
    black_put: float
    black_call: float

    @property
    def put_error(self) -> float:
        """Gamma-proxy put minus Black put."""
        return self.put - self.black_put

    @property
    def call_error(self) -> float:
        return self.call - self.black_call

    def __repr__(self) -> str:
        return (
            f"GammaBlackResult(\n"
            f"  s={self.s:.6f}, a=b={self.shape:.6f},\n"
            f"  put={self.put:.6f} (black {self.black_put:.6f}),\n"
            f"  call={self.call:.6f} (black {self.black_call:.6f})\n"
            f")"
        )
