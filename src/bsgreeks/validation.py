"""Boundary validation for pricing inputs.

The pricing engine accepts anything and lets NaN propagate.  Callers that
collect inputs from people (the CLI, the interactive session) go through
this module instead: it parses text, enforces the positivity contract on
S, K, T and sigma, and reports problems as ``InvalidInput``.
"""

from __future__ import annotations

import logging
import math

from .core import OptionKind, OptionRequest, CALL, PUT

__all__ = [
    "InvalidInput",
    "parse_number",
    "parse_kind",
    "check_positive",
    "validate_request",
]

logger = logging.getLogger(__name__)

_KIND_ALIASES = {
    "c": CALL, "call": CALL,
    "p": PUT, "put": PUT,
}


class InvalidInput(ValueError):
    """A user-supplied pricing input was rejected.

    Parameters
    ----------
    message : str
    field : str, optional
        Name of the offending input (``"spot"``, ``"kind"``, ...).
    """

    def __init__(self, message: str, field: str | None = None):
        super().__init__(message)
        self.field = field


def parse_number(text, field: str | None = None) -> float:
    """Parse a finite float; the whole (stripped) token must be numeric."""
    if isinstance(text, (int, float)) and not isinstance(text, bool):
        value = float(text)
    else:
        token = str(text).strip()
        try:
            value = float(token)
        except ValueError:
            logger.debug("rejected %s=%r: not a number", field, text)
            raise InvalidInput(f"{field or 'value'} must be a number, got {text!r}",
                               field) from None
    if not math.isfinite(value):
        logger.debug("rejected %s=%r: not finite", field, text)
        raise InvalidInput(f"{field or 'value'} must be finite, got {text!r}", field)
    return value


def parse_kind(text) -> OptionKind:
    """Map ``c``/``call``/``p``/``put`` (any case) to an ``OptionKind``."""
    if isinstance(text, OptionKind):
        return text
    kind = _KIND_ALIASES.get(str(text).strip().lower())
    if kind is None:
        logger.debug("rejected kind=%r", text)
        raise InvalidInput(f"kind must be 'call' or 'put', got {text!r}", "kind")
    return kind


def check_positive(value: float, field: str) -> float:
    if not value > 0:
        logger.debug("rejected %s=%r: not positive", field, value)
        raise InvalidInput(f"{field} must be positive, got {value}", field)
    return value


def validate_request(
    spot,
    strike,
    time_to_expiry,
    risk_free_rate,
    volatility,
    kind=CALL,
) -> OptionRequest:
    """Build an ``OptionRequest`` from numbers or text, rejecting bad input.

    S, K, T and sigma must be finite and strictly positive; r must be
    finite (negative rates are allowed).

    Raises
    ------
    InvalidInput
        On the first offending field, with ``exc.field`` set.
    """
    values = {}
    for field, raw in (
        ("spot", spot),
        ("strike", strike),
        ("time_to_expiry", time_to_expiry),
        ("volatility", volatility),
    ):
        values[field] = check_positive(parse_number(raw, field), field)

    return OptionRequest(
        spot=values["spot"],
        strike=values["strike"],
        time_to_expiry=values["time_to_expiry"],
        risk_free_rate=parse_number(risk_free_rate, "risk_free_rate"),
        volatility=values["volatility"],
        kind=parse_kind(kind),
    )
