"""Tests for balance arithmetic."""

import decimal
from decimal import Decimal

from src.domain.models.ledger import AmountSumRow
from src.domain.policies.decimal_policy import DecimalPolicy
from src.domain.services.balance import (
    add_first_entry_amount,
    compute_available_balance,
    compute_net_balance,
)

POLICY = DecimalPolicy(decimals=2, rounding=decimal.ROUND_HALF_EVEN)


def _rows(*totals) -> list[AmountSumRow]:
    return [AmountSumRow(total=total) for total in totals]


def test_add_first_entry_amount_rounds_to_requested_scale() -> None:
    """A single summary row should be added and rounded once."""
    result = add_first_entry_amount(
        POLICY.zero(),
        _rows(Decimal("10.0049")),
        POLICY,
        POLICY.interim_scale,
    )

    assert result == Decimal("10.005")
    assert result.as_tuple().exponent == -3


def test_add_first_entry_amount_ignores_anomalous_shapes() -> None:
    """No rows, several rows or a null total contribute nothing."""
    initial = Decimal("5.00")

    assert add_first_entry_amount(initial, [], POLICY, 3) is initial
    assert add_first_entry_amount(initial, None, POLICY, 3) is initial
    assert (
        add_first_entry_amount(
            initial,
            _rows(Decimal("1"), Decimal("2")),
            POLICY,
            3,
        )
        is initial
    )
    assert add_first_entry_amount(initial, _rows(None), POLICY, 3) is initial


def test_net_balance_matches_rounded_identity() -> None:
    """Net balance should equal round(deposits + adjustments - withdrawals)."""
    deposits = [Decimal("100.00"), Decimal("25.10")]
    adjustments = [Decimal("-0.10"), Decimal("3.33")]
    withdrawals = [Decimal("30.00"), Decimal("12.34")]

    result = compute_net_balance(
        _rows(sum(deposits + adjustments)),
        _rows(sum(withdrawals)),
        POLICY,
    )

    expected = POLICY.quantize(
        sum(deposits) + sum(adjustments) - sum(withdrawals)
    )
    assert result == expected == Decimal("85.99")
    assert str(result) == "85.99"


def test_net_balance_without_transactions_is_zero() -> None:
    """An account without transactions should have a zero balance."""
    result = compute_net_balance([], [], POLICY)

    assert str(result) == "0.00"


def test_split_batches_agree_after_final_rounding() -> None:
    """Summing in two aggregate batches should match one batch within a cent."""
    amounts = [
        Decimal("0.0049"),
        Decimal("10.1251"),
        Decimal("3.3333"),
        Decimal("7.0005"),
        Decimal("0.0149"),
    ]
    one_batch = POLICY.quantize(
        add_first_entry_amount(
            POLICY.zero(),
            _rows(sum(amounts)),
            POLICY,
            POLICY.interim_scale,
        )
    )
    for split in range(1, len(amounts)):
        running = add_first_entry_amount(
            POLICY.zero(),
            _rows(sum(amounts[:split])),
            POLICY,
            POLICY.interim_scale,
        )
        running = add_first_entry_amount(
            running,
            _rows(sum(amounts[split:])),
            POLICY,
            POLICY.interim_scale,
        )
        two_batches = POLICY.quantize(running)

        assert abs(two_batches - one_batch) <= Decimal("0.01")


def test_split_batches_are_exact_at_interim_precision() -> None:
    """Amounts already at interim precision should split without any drift."""
    amounts = [Decimal("1.005"), Decimal("2.115"), Decimal("0.335")]
    one_batch = compute_net_balance(_rows(sum(amounts)), [], POLICY)
    running = add_first_entry_amount(
        POLICY.zero(), _rows(amounts[0]), POLICY, POLICY.interim_scale
    )
    running = add_first_entry_amount(
        running, _rows(sum(amounts[1:])), POLICY, POLICY.interim_scale
    )

    assert POLICY.quantize(running) == one_batch == Decimal("3.46")


def test_available_balance_subtracts_holds() -> None:
    """Available balance should be the net balance minus held amounts."""
    result = compute_available_balance(
        Decimal("70.00"),
        _rows(Decimal("20.00")),
        POLICY,
    )

    assert result == Decimal("50.00")


def test_available_balance_without_holds_equals_net() -> None:
    """No hold rows should leave the net balance unchanged."""
    result = compute_available_balance(Decimal("70.00"), [], POLICY)

    assert str(result) == "70.00"
