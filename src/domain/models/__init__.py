"""Domain models package."""

from .accounts import FinAccount
from .ledger import (
    AmountSumRow,
    AuthorizationHold,
    FinAccountBalance,
    LedgerTransaction,
)

__all__ = [
    "FinAccount",
    "AmountSumRow",
    "AuthorizationHold",
    "FinAccountBalance",
    "LedgerTransaction",
]
