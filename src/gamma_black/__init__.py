"""
Gamma-Black Pricing

Closed-form option values for a Gamma-distributed forward moment-matched
to the Black model.
"""

from gamma_black._version import __version__

from gamma_black.analytics.black import black_call, black_put
from gamma_black.analytics.gamma import call, cdf, convert, pdf, price, put
from gamma_black.errors import PreconditionViolation
from gamma_black.types import GammaBlackResult, GammaParameters

__all__ = [
    # Version
    "__version__",
    # Gamma proxy
    "pdf",
    "cdf",
    "convert",
    "put",
    "call",
    "price",
    # Black reference
    "black_put",
    "black_call",
    # Types
    "GammaParameters",
    "GammaBlackResult",
    "PreconditionViolation",
]
