"""Domain services for fin account balance arithmetic."""

from collections.abc import Sequence
from decimal import Decimal

from src.domain.models.ledger import AmountSumRow
from src.domain.policies.decimal_policy import DecimalPolicy
from src.utils.decimal_utils import coerce_decimal


def add_first_entry_amount(
    initial: Decimal,
    rows: Sequence[AmountSumRow] | None,
    policy: DecimalPolicy,
    scale: int,
) -> Decimal:
    """Add the total of a single summary row to a running amount.

    Aggregate queries are expected to return exactly one row. Any other
    shape (no rows, several rows, or a null total) adds nothing and returns
    ``initial`` unchanged rather than failing.

    Args:
        initial: Running amount.
        rows: Summary rows from an aggregate query.
        policy: Decimal policy providing the rounding mode.
        scale: Fractional digits to keep after the addition.

    Returns:
        Decimal: Updated running amount.
    """
    if not rows or len(rows) != 1:
        return initial
    total = rows[0].total
    if total is None:
        return initial
    return policy.quantize(initial + coerce_decimal(total), scale)


def compute_net_balance(
    increment_rows: Sequence[AmountSumRow],
    decrement_rows: Sequence[AmountSumRow],
    policy: DecimalPolicy,
) -> Decimal:
    """Return increments minus decrements, rounded once to the final scale."""
    increment_total = add_first_entry_amount(
        policy.zero(), increment_rows, policy, policy.interim_scale
    )
    decrement_total = add_first_entry_amount(
        policy.zero(), decrement_rows, policy, policy.interim_scale
    )
    return policy.quantize(increment_total - decrement_total)


def compute_available_balance(
    net_balance: Decimal,
    hold_rows: Sequence[AmountSumRow],
    policy: DecimalPolicy,
) -> Decimal:
    """Return the net balance minus held amounts, rounded to the final scale."""
    holds_total = add_first_entry_amount(
        policy.zero(), hold_rows, policy, policy.interim_scale
    )
    return policy.quantize(net_balance - holds_total)


__all__ = [
    "add_first_entry_amount",
    "compute_net_balance",
    "compute_available_balance",
]
