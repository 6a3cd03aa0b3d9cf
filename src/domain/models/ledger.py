"""Domain models for ledger transactions and authorization holds."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal


@dataclass(frozen=True)
class LedgerTransaction:
    """Settled, append-only transaction against a fin account."""

    transaction_id: str
    account_id: str
    transaction_type: str
    amount: Decimal
    transaction_date: datetime


@dataclass(frozen=True)
class AuthorizationHold:
    """Provisional reservation of funds not yet settled."""

    authorization_id: str
    account_id: str
    amount: Decimal
    authorization_date: datetime
    thru_date: datetime | None = None

    def is_expired_at(self, moment: datetime) -> bool:
        """Return whether the hold has expired at the given moment."""
        return self.thru_date is not None and self.thru_date <= moment


@dataclass(frozen=True)
class AmountSumRow:
    """Summary row returned by an aggregate amount query."""

    total: Decimal | None


@dataclass(frozen=True)
class FinAccountBalance:
    """Net and available balance of an account at a point in time.

    Attributes:
        account_id: Account the balances belong to.
        net_balance: Settled deposits and adjustments minus withdrawals.
        available_balance: Net balance minus non-expired holds.
        as_of: Moment the balances were computed for.
    """

    account_id: str
    net_balance: Decimal
    available_balance: Decimal
    as_of: datetime


__all__ = [
    "LedgerTransaction",
    "AuthorizationHold",
    "AmountSumRow",
    "FinAccountBalance",
]
