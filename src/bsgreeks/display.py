from __future__ import annotations

from .core import OptionResult

__all__ = ["DAYS_PER_YEAR", "format_result"]

DAYS_PER_YEAR = 365

_LABELS = (
    ("Price", "price"),
    ("Delta", "delta"),
    ("Gamma", "gamma"),
    ("Vega", "vega"),
    ("Theta", "theta"),
)


def format_result(
    result: OptionResult,
    *,
    decimals: int = 2,
    theta_per_day: bool = False,
) -> str:
    """Render ``result`` as the labelled ``Option Parameters`` block.

    The engine reports theta per year; ``theta_per_day`` rescales it by
    ``DAYS_PER_YEAR`` for display only.
    """
    values = result.as_dict()
    if theta_per_day:
        values["theta"] /= DAYS_PER_YEAR

    lines = ["", "Option Parameters:"]
    lines += [f"{label}: {values[key]:.{decimals}f}" for label, key in _LABELS]
    lines.append("")
    return "\n".join(lines) + "\n"
