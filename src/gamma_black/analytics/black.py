"""
Black model formulas on the forward.

Reference values for the Gamma proxy: the forward is log-normal,
F = f exp(s Z - s^2/2) with s = sigma sqrt(t), and prices are undiscounted.
"""

import math

from gamma_black.errors import check_market_inputs


def norm_cdf(x: float) -> float:
    """
    Cumulative distribution function for standard normal distribution.

    Parameters
    ----------
    x : float
        Input value

    Returns
    -------
    float
        CDF value at x: P(Z <= x) where Z ~ N(0,1)
    """
    return 0.5 * (1.0 + math.erf(x / math.sqrt(2.0)))


def norm_pdf(x: float) -> float:
    """Standard normal density exp(-x²/2)/√(2π)."""
    return math.exp(-0.5 * x**2) / math.sqrt(2.0 * math.pi)


def _d1_d2(f: float, sigma: float, k: float, t: float) -> tuple[float, float]:
    s = sigma * math.sqrt(t)
    d1 = (math.log(f / k) + 0.5 * s**2) / s
    return d1, d1 - s


def black_put(f: float, sigma: float, k: float, t: float) -> float:
    """
    Undiscounted Black put value E[(k - F)^+].

    Parameters
    ----------
    f : float
        Forward price (must be > 0)
    sigma : float
        Volatility (annualized, must be > 0)
    k : float
        Strike price (must be > 0)
    t : float
        Time to expiry in years (must be > 0)

    Returns
    -------
    float
        Put value k N(-d2) - f N(-d1)

    Raises
    ------
    PreconditionViolation
        If any input is not strictly positive
    """
    check_market_inputs(f, sigma, k, t)
    d1, d2 = _d1_d2(f, sigma, k, t)
    return k * norm_cdf(-d2) - f * norm_cdf(-d1)


def black_call(f: float, sigma: float, k: float, t: float) -> float:
    """
    Undiscounted Black call value E[(F - k)^+].

    Same parameters and preconditions as :func:`black_put`.
    """
    check_market_inputs(f, sigma, k, t)
    d1, d2 = _d1_d2(f, sigma, k, t)
    return f * norm_cdf(d1) - k * norm_cdf(d2)
