"""
Test suite for amounts module

Tests range validation and Decimal-based display scaling.
Display conversions must never lose precision.
"""

import pytest
from decimal import Decimal

from token_ledger.amounts import (
    U128_MAX, MAX_DECIMALS, validate_amount, validate_decimals,
    to_display, format_amount, parse_amount
)
from token_ledger.errors import InvalidAmount, TokenError


class TestValidateAmount:
    """Test amount range checks"""

    def test_bounds_accepted(self):
        assert validate_amount(0) == 0
        assert validate_amount(U128_MAX) == U128_MAX

    def test_out_of_range(self):
        with pytest.raises(InvalidAmount, match="negative"):
            validate_amount(-1)
        with pytest.raises(InvalidAmount, match="128-bit"):
            validate_amount(U128_MAX + 1)

    def test_wrong_types(self):
        """Test that bools, floats and strings are rejected"""
        for value in (True, 1.0, "1", None, Decimal("1")):
            with pytest.raises(InvalidAmount, match="must be an integer"):
                validate_amount(value)

    def test_field_name_in_message(self):
        with pytest.raises(InvalidAmount, match="initial_supply"):
            validate_amount(-5, "initial_supply")

    def test_invalid_amount_is_token_error(self):
        assert issubclass(InvalidAmount, TokenError)
        assert issubclass(InvalidAmount, ValueError)


class TestValidateDecimals:
    """Test decimal precision checks"""

    def test_valid_range(self):
        assert validate_decimals(0) == 0
        assert validate_decimals(18) == 18
        assert validate_decimals(MAX_DECIMALS) == MAX_DECIMALS

    def test_invalid(self):
        with pytest.raises(ValueError):
            validate_decimals(-1)
        with pytest.raises(ValueError):
            validate_decimals(MAX_DECIMALS + 1)
        with pytest.raises(ValueError):
            validate_decimals(2.0)


class TestDisplay:
    """Test scaling base units for display"""

    def test_to_display(self):
        assert to_display(1_000_000 * 10 ** 18, 18) == Decimal("1000000")
        assert to_display(5, 2) == Decimal("0.05")
        assert to_display(12345, 0) == Decimal("12345")

    def test_to_display_keeps_full_precision(self):
        """Test that the largest supply is scaled exactly"""
        value = to_display(U128_MAX, 18)
        assert str(value) == "340282366920938463463.374607431768211455"

    def test_format_amount(self):
        assert format_amount(123456, 2) == "1,234.56"
        assert format_amount(123456, 0) == "123,456"
        assert format_amount(1_000_000 * 10 ** 18, 18, "MTK") == "MTK 1,000,000.000000000000000000"

    def test_format_zero(self):
        assert format_amount(0, 2, "MTK") == "MTK 0.00"

    def test_format_without_symbol(self):
        assert format_amount(5, 1, None) == "0.5"


class TestParseAmount:
    """Test converting display strings to base units"""

    def test_parse(self):
        assert parse_amount("1234.56", 2) == 123456
        assert parse_amount("1,000", 2) == 100000
        assert parse_amount(" 0.5 ", 18) == 5 * 10 ** 17
        assert parse_amount("42", 0) == 42

    def test_too_many_decimal_places(self):
        with pytest.raises(ValueError, match="decimal places"):
            parse_amount("1.234", 2)

    def test_not_a_number(self):
        with pytest.raises(ValueError):
            parse_amount("abc", 2)
        with pytest.raises(ValueError):
            parse_amount("", 2)
        with pytest.raises(ValueError):
            parse_amount("NaN", 2)

    def test_long_values_keep_every_fractional_digit(self):
        """Test that digits beyond the context precision are still rejected"""
        with pytest.raises(ValueError, match="decimal places"):
            parse_amount("1" + "0" * 38 + ".05", 0)
        with pytest.raises(ValueError, match="decimal places"):
            parse_amount("1" + "0" * 20 + "." + "0" * 37 + "5", 18)

    def test_long_exact_value(self):
        assert parse_amount("1" + "0" * 20 + "." + "0" * 18, 18) == 10 ** 38

    def test_negative_rejected(self):
        with pytest.raises(InvalidAmount):
            parse_amount("-1", 2)

    def test_roundtrip_with_format(self):
        text = format_amount(987654321, 4)
        assert parse_amount(text, 4) == 987654321
