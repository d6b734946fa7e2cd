# normal.py
# Standard-normal CDF: a dependency-light rational approximation used by the
# engine, plus SciPy's exact CDF for callers that want full precision.
# Both accept scalars *or* NumPy arrays and broadcast.

from __future__ import annotations
import numpy as np
from scipy.stats import norm

__all__ = ["norm_cdf", "exact_cdf"]

# Abramowitz & Stegun 7.1.26 (erf), |error| < 1.5e-7
_P  = 0.3275911
_A1 = 0.254829592
_A2 = -0.284496736
_A3 = 1.421413741
_A4 = -1.453152027
_A5 = 1.061405429

_SQRT2 = np.sqrt(2.0)

exact_cdf = norm.cdf


def norm_cdf(x):
    """Cumulative standard-normal distribution N(x).

    Evaluates ``y = erf(|x| / sqrt(2)) / 2`` with the five-term A&S rational
    approximation and returns ``0.5 + y`` for ``x >= 0`` and ``0.5 - y``
    otherwise, so ``N(x) + N(-x) == 1`` up to rounding.  Max absolute error
    against the exact CDF is below 1e-7.

    NaN propagates; ``+inf`` and ``-inf`` map to 1 and 0.

    Returns
    -------
    np.ndarray or np.float64
        Same shape as ``x``; a 0-d input gives a NumPy scalar.
    """
    x = np.asarray(x, dtype=float)
    z = np.abs(x) / _SQRT2
    with np.errstate(all="ignore"):
        t = 1.0 / (1.0 + _P * z)
        poly = t * (_A1 + t * (_A2 + t * (_A3 + t * (_A4 + t * _A5))))
        y = 0.5 * (1.0 - poly * np.exp(-z * z))
    out = np.where(x >= 0.0, 0.5 + y, 0.5 - y)
    return out[()]
