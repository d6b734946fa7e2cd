from __future__ import annotations
from dataclasses import dataclass, asdict
from enum import Enum


class OptionKind(str, Enum):
    """European option type."""
    CALL = "call"
    PUT = "put"

    @property
    def sign(self) -> int:
        """+1 for calls, -1 for puts (used by delta and theta)."""
        return 1 if self is OptionKind.CALL else -1


CALL = OptionKind.CALL
PUT  = OptionKind.PUT


# ---------------------------------------------------------------------------
# Request / result values
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class OptionRequest:
    """Market and contract inputs for pricing a single European option.

    No checks are made here: S, K, T and sigma must be strictly positive for
    the closed form to be meaningful, and out-of-domain values simply yield
    NaN / inf from the engine.  Use ``validation.validate_request`` at the
    boundary when strict behaviour is wanted.

    Parameters
    ----------
    spot : float
        Price of the underlying (S).
    strike : float
        Strike price (K).
    time_to_expiry : float
        Years to expiry (T).
    risk_free_rate : float
        Continuously-compounded annual rate (r); may be negative.
    volatility : float
        Annualised volatility (sigma).
    kind : OptionKind
        ``CALL`` (default) or ``PUT``.
    """
    spot: float
    strike: float
    time_to_expiry: float
    risk_free_rate: float
    volatility: float
    kind: OptionKind = CALL


@dataclass(frozen=True)
class OptionResult:
    """Price and Greeks of one option.  Theta is per year."""
    price: float
    delta: float
    gamma: float
    vega: float
    theta: float

    def as_dict(self) -> dict[str, float]:
        return asdict(self)
