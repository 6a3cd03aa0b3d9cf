"""Domain constants for fin account ledgers."""

DEPOSIT = "DEPOSIT"
WITHDRAWAL = "WITHDRAWAL"
ADJUSTMENT = "ADJUSTMENT"

INCREMENT_TRANSACTION_TYPES = (DEPOSIT, ADJUSTMENT)
DECREMENT_TRANSACTION_TYPES = (WITHDRAWAL,)

GIFTCERT_ACCOUNT_TYPE = "GIFTCERT_ACCOUNT"

# numbers plus uppercase characters
CODE_ALPHABET = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ"
MAX_CODE_ATTEMPTS = 1_000_000


__all__ = [
    "DEPOSIT",
    "WITHDRAWAL",
    "ADJUSTMENT",
    "INCREMENT_TRANSACTION_TYPES",
    "DECREMENT_TRANSACTION_TYPES",
    "GIFTCERT_ACCOUNT_TYPE",
    "CODE_ALPHABET",
    "MAX_CODE_ATTEMPTS",
]
