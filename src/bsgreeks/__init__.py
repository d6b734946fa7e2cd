# bsgreeks — Black-Scholes price & Greeks for European options
# Public API

# Data model
from .core import OptionKind, OptionRequest, OptionResult, CALL, PUT

# Pricing engine
from .black_scholes import price, d1_d2
from .normal import norm_cdf, exact_cdf

# Boundary validation
from .validation import (
    InvalidInput, parse_number, parse_kind, check_positive, validate_request,
)

# Display
from .display import format_result

__all__ = [
    # Data model
    "OptionKind", "OptionRequest", "OptionResult", "CALL", "PUT",
    # Engine
    "price", "d1_d2", "norm_cdf", "exact_cdf",
    # Validation
    "InvalidInput", "parse_number", "parse_kind", "check_positive",
    "validate_request",
    # Display
    "format_result",
]

__version__ = "0.1.0"
