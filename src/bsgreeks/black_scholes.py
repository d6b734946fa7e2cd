"""Closed-form Black-Scholes price and Greeks for a single European option.

The engine is a pure function of its ``OptionRequest``: no state, no I/O,
no exceptions for out-of-domain input.  Non-positive S, K, T or sigma give
NaN / inf in the result rather than raising, so arithmetic runs on NumPy
scalars under ``np.errstate(all="ignore")``.
"""

from __future__ import annotations
import math
from typing import Callable

import numpy as np

from .core import OptionRequest, OptionResult, CALL
from .normal import norm_cdf

__all__ = ["d1_d2", "price"]

_SQRT_2PI = math.sqrt(2.0 * math.pi)


def d1_d2(spot, strike, time_to_expiry, risk_free_rate, volatility):
    """Return the (d1, d2) pair as NumPy float64 scalars."""
    S, K, T, r, sigma = (
        np.float64(x) for x in (spot, strike, time_to_expiry, risk_free_rate, volatility)
    )
    with np.errstate(all="ignore"):
        sig_sqrt_T = sigma * np.sqrt(T)
        d1 = (np.log(S / K) + (r + 0.5 * sigma * sigma) * T) / sig_sqrt_T
        d2 = d1 - sig_sqrt_T
    return d1, d2


def price(
    request: OptionRequest,
    *,
    cdf: Callable = norm_cdf,
) -> OptionResult:
    """Price ``request`` and compute delta, gamma, vega and theta.

    Parameters
    ----------
    request : OptionRequest
    cdf : callable
        Standard-normal CDF.  Defaults to the A&S approximation
        ``norm_cdf``; pass ``normal.exact_cdf`` for SciPy's.

    Returns
    -------
    OptionResult
        Vega is dPrice/dSigma (absolute, not per 1%); theta is per year.
    """
    S, K, T, r, sigma = (
        np.float64(x) for x in (
            request.spot, request.strike, request.time_to_expiry,
            request.risk_free_rate, request.volatility,
        )
    )
    sign = request.kind.sign

    # d1/d2 are derived once and shared by every output
    d1, d2 = d1_d2(S, K, T, r, sigma)

    with np.errstate(all="ignore"):
        disc_r = np.exp(-r * T)
        kernel = np.exp(-0.5 * d1 * d1)   # sqrt(2*pi) * pdf(d1)

        if request.kind is CALL:
            px = S * cdf(d1) - K * disc_r * cdf(d2)
        else:
            px = K * disc_r * cdf(-d2) - S * cdf(-d1)

        delta = sign * cdf(sign * d1)
        gamma = kernel / (S * sigma * np.sqrt(2.0 * np.pi * T))
        vega  = S * np.sqrt(T) * kernel / _SQRT_2PI
        theta = (-0.5 * sigma * S * kernel / np.sqrt(2.0 * np.pi * T)
                 - sign * r * K * disc_r * cdf(sign * d2))

    return OptionResult(
        price=float(px),
        delta=float(delta),
        gamma=float(gamma),
        vega=float(vega),
        theta=float(theta),
    )
