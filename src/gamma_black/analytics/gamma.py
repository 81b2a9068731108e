"""
Gamma distribution proxy for the Black model.

The Black forward F = f exp(s Z - s^2/2), s = sigma sqrt(t), has mean f and
variance f^2 (exp(s^2) - 1). Replacing the log-normal factor by a Gamma
variable G with the same first two moments gives F = f G, whose option values
are closed-form in the regularized incomplete Gamma function.

The Gamma distribution here is parametrized by shape a and rate b:

    g(x) = x^(a - 1) exp(-b x) b^a / Gamma(a),  x > 0

with mean a/b and variance a/b^2.
"""

import logging
import math

import numpy as np
from scipy import special

from gamma_black.analytics.black import black_call, black_put
from gamma_black.errors import check_market_inputs
from gamma_black.types import GammaBlackResult, GammaParameters

logger = logging.getLogger(__name__)


def pdf(x, a, b):
    """
    Gamma probability density with shape a and rate b.

    Parameters
    ----------
    x : float or np.ndarray
        Evaluation point(s)
    a : float or np.ndarray
        Shape parameter (expected > 0)
    b : float or np.ndarray
        Rate parameter (expected > 0)

    Returns
    -------
    float or np.ndarray
        x^(a-1) exp(-b x) b^a / Gamma(a)

    Notes
    -----
    Inputs are not validated. Evaluated in log space with ``gammaln`` so
    that large shapes do not overflow Gamma(a) and b^a separately.
    Non-positive x yields IEEE special values (nan or inf), never an error.
    """
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        log_density = (
            special.xlogy(a - 1, x) - b * x + special.xlogy(a, b) - special.gammaln(a)
        )
        return np.exp(log_density)


def cdf(x, a, b):
    """
    Gamma cumulative distribution P(X <= x) with shape a and rate b.

    The regularized lower incomplete Gamma function evaluated at (a, b x).
    Inputs are not validated.
    """
    return special.gammainc(a, b * x)


def convert(s: float) -> GammaParameters:
    """
    Moment-match a Gamma distribution to the Black log-normal factor.

    Solving 1 = a/b and exp(s^2) - 1 = a/b^2 gives b = 1/(exp(s^2) - 1)
    and a = b.

    Parameters
    ----------
    s : float
        Volatility-scaled time sigma * sqrt(t)

    Returns
    -------
    GammaParameters
        (a, b) with a == b exactly. Both are inf when s == 0.
    """
    with np.errstate(divide="ignore"):
        a = float(1.0 / np.expm1(np.float64(s) * s))

    return GammaParameters(a, a)


def put(f: float, sigma: float, k: float, t: float) -> float:
    """
    European put value under the Gamma proxy.

    E[(k - F)^+] = k P(F <= k) - E[F 1(F <= k)], and for F = f G

        E[F 1(G <= k/f)] = f (a/b) P(a + 1, b k/f) = f cdf(k/f, a + 1, b)

    since a/b = 1.

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
        Undiscounted put value

    Raises
    ------
    PreconditionViolation
        If any input is not strictly positive
    """
    check_market_inputs(f, sigma, k, t)

    s = sigma * math.sqrt(t)
    a, b = convert(s)
    logger.debug("Gamma parameters for s=%.6g: a=b=%.6g", s, a)

    first = k * cdf(k / f, a, b)
    expectation = f * cdf(k / f, a + 1, b)

    return float(first - expectation)


def call(f: float, sigma: float, k: float, t: float) -> float:
    """
    European call value under the Gamma proxy.

    Put-call parity on the forward, call = put + f - k, holds because
    the proxy has mean f.
    """
    return put(f, sigma, k, t) + f - k


def price(f: float, sigma: float, k: float, t: float) -> GammaBlackResult:
    """
    Value a put and a call under the Gamma proxy alongside the Black model.

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
    GammaBlackResult
        Gamma parameters, proxy values and Black reference values

    Raises
    ------
    PreconditionViolation
        If any input is not strictly positive
    """
    put_value = put(f, sigma, k, t)
    s = sigma * math.sqrt(t)
    shape, rate = convert(s)

    return GammaBlackResult(
        f=f,
        sigma=sigma,
        k=k,
        t=t,
        s=s,
        shape=shape,
        rate=rate,
        put=put_value,
        call=put_value + f - k,
        black_put=black_put(f, sigma, k, t),
        black_call=black_call(f, sigma, k, t),
    )
