"""Credential validation helpers."""

from src.domain.models.accounts import FinAccount
from src.domain.services.normalization import strip_non_digits


def validate_code(account: FinAccount | None, presented_code: str | None) -> bool:
    """Check a presented code or PIN against the stored account code.

    The comparison is exact and case-sensitive. Normalization belongs to the
    lookup step that produced ``account``.

    Args:
        account: Resolved account, or None when lookup failed.
        presented_code: Code or PIN supplied by the caller.

    Returns:
        bool: True only when both codes are present and equal.
    """
    if account is None or account.code is None:
        return False
    return account.code == presented_code


def luhn_sum(digits: str) -> int:
    """Return the Luhn sum of a digit string.

    Weights alternate 1 and 2 starting from the rightmost digit; doubled
    values of 10 or more are folded to the sum of their digits.
    """
    total = 0
    for position, char in enumerate(reversed(digits)):
        digit = int(char)
        if position % 2 == 1:
            digit *= 2
            if digit >= 10:
                digit = digit % 10 + 1
        total += digit
    return total


def sum_is_mod10(total: int) -> bool:
    """Return whether a checksum total is divisible by ten."""
    return total % 10 == 0


def check_account_number_checksum(number: str | None) -> bool:
    """Validate a numeric account number with a Luhn-style checksum.

    Non-digit characters are ignored, so ``"4111-1111 1111 1111"`` behaves
    like ``"4111111111111111"``.

    Args:
        number: Account number, possibly with separators.

    Returns:
        bool: True when the Luhn sum of the digits is divisible by ten.
    """
    if number is None:
        return False
    return sum_is_mod10(luhn_sum(strip_non_digits(number)))


__all__ = [
    "validate_code",
    "luhn_sum",
    "sum_is_mod10",
    "check_account_number_checksum",
]
