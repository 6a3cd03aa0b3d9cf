"""Tests for the DecimalPolicy."""

import decimal
from decimal import Decimal

import pytest

from src.domain.policies.decimal_policy import DecimalPolicy


def test_zero_is_normalized_to_scale() -> None:
    """zero() should carry exactly the configured number of digits."""
    policy = DecimalPolicy(decimals=2)

    assert policy.zero() == Decimal("0")
    assert str(policy.zero()) == "0.00"
    assert policy.zero().as_tuple().exponent == -2


def test_accessors_expose_configuration() -> None:
    """scale() and rounding_mode() should return the configured values."""
    policy = DecimalPolicy(decimals=3, rounding=decimal.ROUND_HALF_UP)

    assert policy.scale() == 3
    assert policy.rounding_mode() == decimal.ROUND_HALF_UP
    assert policy.interim_scale == 4


def test_quantize_uses_configured_rounding() -> None:
    """Half values should follow the configured rounding mode."""
    half_even = DecimalPolicy(decimals=2, rounding=decimal.ROUND_HALF_EVEN)
    half_up = DecimalPolicy(decimals=2, rounding=decimal.ROUND_HALF_UP)

    assert half_even.quantize(Decimal("1.005")) == Decimal("1.00")
    assert half_up.quantize(Decimal("1.005")) == Decimal("1.01")
    assert half_up.quantize(Decimal("1.0049"), scale=3) == Decimal("1.005")


def test_from_names_accepts_short_and_long_names() -> None:
    """Rounding names should be accepted with or without the ROUND_ prefix."""
    assert (
        DecimalPolicy.from_names(2, "half_up").rounding
        == decimal.ROUND_HALF_UP
    )
    assert (
        DecimalPolicy.from_names(2, "ROUND_FLOOR").rounding
        == decimal.ROUND_FLOOR
    )


def test_invalid_configuration_is_rejected() -> None:
    """Unknown rounding names and negative scales should raise."""
    with pytest.raises(ValueError):
        DecimalPolicy.from_names(2, "BANKERS")
    with pytest.raises(ValueError):
        DecimalPolicy(decimals=-1)
