"""
Exceptions raised by the Gamma-Black pricing functions.
"""


class PreconditionViolation(ValueError):
    """Raised when a pricing input is outside its valid domain.

    Subclasses ``ValueError`` so callers that guard pricing calls with
    ``except ValueError`` keep working.
    """


def check_market_inputs(f: float, sigma: float, k: float, t: float) -> None:
    """Raise PreconditionViolation unless f, sigma, k and t are all > 0."""
    # Written as `not x > 0` so NaN is rejected as well
    if not f > 0:
        raise PreconditionViolation(f"Forward f must be positive, got {f}")
    if not sigma > 0:
        raise PreconditionViolation(f"Volatility sigma must be positive, got {sigma}")
    if not k > 0:
        raise PreconditionViolation(f"Strike k must be positive, got {k}")
    if not t > 0:
        raise PreconditionViolation(f"Time to expiry t must be positive, got {t}")
