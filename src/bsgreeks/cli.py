import argparse
import json
import logging
import sys

from .core import CALL
from .black_scholes import price as bs_price
from .display import format_result
from .normal import norm_cdf, exact_cdf
from .validation import (
    InvalidInput, parse_number, parse_kind, check_positive, validate_request,
)

logger = logging.getLogger(__name__)

# (prompt, field, must be positive)
_PROMPTS = (
    ("Enter Stock price (S): ", "spot", True),
    ("Enter Strike price (K): ", "strike", True),
    ("Enter Time to expiration (T): ", "time_to_expiry", True),
    ("Enter Risk-free interest rate (r): ", "risk_free_rate", False),
    ("Enter Volatility (sigma): ", "volatility", True),
)
_KIND_PROMPT = "Enter Option type (c for call, p for put): "

def _number(s: str) -> float:
    try:
        return parse_number(s)
    except InvalidInput as e:
        raise argparse.ArgumentTypeError(str(e))

def _kind(s: str):
    try:
        return parse_kind(s)
    except InvalidInput:
        raise argparse.ArgumentTypeError("kind must be 'call' or 'put'")

def add_display(parser: argparse.ArgumentParser):
    parser.add_argument("--decimals", type=int, default=2, help="digits shown per field")
    parser.add_argument("--theta-per-day", dest="theta_per_day", action="store_true",
                        help="show theta per calendar day instead of per year")
    parser.add_argument("--exact-cdf", dest="exact_cdf", action="store_true",
                        help="use SciPy's normal CDF instead of the A&S approximation")

def _ask_number(ask, out, prompt: str, field: str, positive: bool) -> float:
    while True:
        try:
            value = parse_number(ask(prompt), field)
        except InvalidInput:
            out.write("Invalid input. Please enter a valid number.\n")
            continue
        if not positive:
            return value
        try:
            return check_positive(value, field)
        except InvalidInput:
            out.write("Invalid input. Please enter a positive number.\n")

def _ask_kind(ask, out):
    while True:
        try:
            return parse_kind(ask(_KIND_PROMPT))
        except InvalidInput:
            out.write("Invalid input. Please enter 'c' for call or 'p' for put.\n")

def run_interactive(ask=input, out=None, *, decimals: int = 2,
                    theta_per_day: bool = False, cdf=norm_cdf) -> int:
    """Prompt for options until EOF, pricing and printing each one.

    ``ask(prompt) -> str`` supplies answers and raises ``EOFError`` when the
    input is exhausted, as the builtin ``input`` does.
    """
    if out is None:
        out = sys.stdout
    priced = 0
    try:
        while True:
            fields = {field: _ask_number(ask, out, prompt, field, positive)
                      for prompt, field, positive in _PROMPTS}
            fields["kind"] = _ask_kind(ask, out)
            request = validate_request(**fields)
            logger.info("pricing %s", request)
            result = bs_price(request, cdf=cdf)
            out.write(format_result(result, decimals=decimals,
                                    theta_per_day=theta_per_day))
            priced += 1
    except (EOFError, KeyboardInterrupt):
        out.write("\n")
    logger.info("interactive session ended after %d option(s)", priced)
    return 0

def cmd_price(args) -> int:
    try:
        request = validate_request(args.S, args.K, args.T, args.r, args.sigma, args.kind)
    except InvalidInput as e:
        args.parser.error(str(e))
    logger.info("pricing %s", request)
    result = bs_price(request, cdf=exact_cdf if args.exact_cdf else norm_cdf)
    if args.json:
        print(json.dumps(result.as_dict()))
    else:
        sys.stdout.write(format_result(result, decimals=args.decimals,
                                       theta_per_day=args.theta_per_day))
    return 0

def cmd_interactive(args) -> int:
    return run_interactive(
        decimals=args.decimals,
        theta_per_day=args.theta_per_day,
        cdf=exact_cdf if args.exact_cdf else norm_cdf,
    )

def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="bsgreeks",
                                description="Black-Scholes price and Greeks")
    p.add_argument("--log-level", dest="log_level", default="WARNING",
                   choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    sub = p.add_subparsers(dest="cmd", required=True)

    p_px = sub.add_parser("price", help="price one European option")
    p_px.add_argument("--S", type=_number, required=True, help="spot")
    p_px.add_argument("--K", type=_number, required=True, help="strike")
    p_px.add_argument("--T", type=_number, required=True, help="years")
    p_px.add_argument("--r", type=_number, required=True, help="cont. risk-free")
    p_px.add_argument("--sigma", type=_number, required=True)
    p_px.add_argument("--kind", type=_kind, default=CALL, help="call|put")
    p_px.add_argument("--json", action="store_true", help="print JSON instead of text")
    add_display(p_px)
    p_px.set_defaults(func=cmd_price, parser=p_px)

    p_int = sub.add_parser("interactive", help="prompt for options until EOF")
    add_display(p_int)
    p_int.set_defaults(func=cmd_interactive, parser=p_int)
    return p

def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level,
                        format="%(levelname)s %(name)s: %(message)s")
    return args.func(args)

if __name__ == "__main__":
    raise SystemExit(main())
