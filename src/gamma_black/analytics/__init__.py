"""
Analytics module for Gamma-proxy and Black pricing.

Special functions come from scipy.special.
"""

from gamma_black.analytics.black import black_call, black_put, norm_cdf, norm_pdf
from gamma_black.analytics.gamma import call, cdf, convert, pdf, price, put

__all__ = [
    "black_call",
    "black_put",
    "call",
    "cdf",
    "convert",
    "norm_cdf",
    "norm_pdf",
    "pdf",
    "price",
    "put",
]
