"""Tests for boundary validation of pricing inputs."""

import math

import pytest
from bsgreeks import (
    OptionKind, OptionRequest, CALL, PUT, InvalidInput,
    parse_number, parse_kind, check_positive, validate_request,
)


class TestParseNumber:
    @pytest.mark.parametrize("text,expected", [
        ("100", 100.0),
        ("0.05", 0.05),
        ("-0.01", -0.01),
        ("  2.5 ", 2.5),
        ("1e-3", 1e-3),
    ])
    def test_valid(self, text, expected):
        assert parse_number(text) == expected

    @pytest.mark.parametrize("text", ["", "abc", "1.2.3", "12abc", "nan", "inf", "-inf"])
    def test_invalid(self, text):
        with pytest.raises(InvalidInput):
            parse_number(text)

    def test_numbers_pass_through(self):
        assert parse_number(3) == 3.0
        assert parse_number(0.25) == 0.25

    def test_field_is_reported(self):
        with pytest.raises(InvalidInput) as exc:
            parse_number("x", "spot")
        assert exc.value.field == "spot"

    def test_is_value_error(self):
        with pytest.raises(ValueError):
            parse_number("x")


class TestParseKind:
    @pytest.mark.parametrize("text", ["c", "C", "call", "CALL", " call "])
    def test_call(self, text):
        assert parse_kind(text) is CALL

    @pytest.mark.parametrize("text", ["p", "P", "put", "Put"])
    def test_put(self, text):
        assert parse_kind(text) is PUT

    def test_enum_passes_through(self):
        assert parse_kind(OptionKind.PUT) is PUT

    @pytest.mark.parametrize("text", ["", "x", "straddle", "cp"])
    def test_invalid(self, text):
        with pytest.raises(InvalidInput) as exc:
            parse_kind(text)
        assert exc.value.field == "kind"


class TestCheckPositive:
    def test_positive(self):
        assert check_positive(1e-9, "volatility") == 1e-9

    @pytest.mark.parametrize("value", [0.0, -1.0, math.nan])
    def test_rejects(self, value):
        with pytest.raises(InvalidInput):
            check_positive(value, "volatility")


class TestValidateRequest:
    def test_builds_request(self):
        req = validate_request("100", "95", "0.5", "-0.01", "0.3", "p")
        assert req == OptionRequest(100.0, 95.0, 0.5, -0.01, 0.3, PUT)

    def test_default_kind_is_call(self):
        assert validate_request(100, 100, 1.0, 0.05, 0.2).kind is CALL

    @pytest.mark.parametrize("field,index", [
        ("spot", 0), ("strike", 1), ("time_to_expiry", 2), ("volatility", 4),
    ])
    @pytest.mark.parametrize("bad", [0.0, -5.0])
    def test_rejects_non_positive(self, field, index, bad):
        args = [100.0, 100.0, 1.0, 0.05, 0.2]
        args[index] = bad
        with pytest.raises(InvalidInput) as exc:
            validate_request(*args)
        assert exc.value.field == field

    def test_rejects_non_finite_rate(self):
        with pytest.raises(InvalidInput) as exc:
            validate_request(100, 100, 1.0, "inf", 0.2)
        assert exc.value.field == "risk_free_rate"

    def test_rejects_bad_kind(self):
        with pytest.raises(InvalidInput):
            validate_request(100, 100, 1.0, 0.05, 0.2, "x")
