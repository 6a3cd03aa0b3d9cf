"""Domain services package."""

from .balance import (
    add_first_entry_amount,
    compute_available_balance,
    compute_net_balance,
)
from .codes import generate_candidate_code
from .normalization import normalize_account_code, strip_non_digits
from .validation import (
    check_account_number_checksum,
    luhn_sum,
    sum_is_mod10,
    validate_code,
)

__all__ = [
    "add_first_entry_amount",
    "compute_available_balance",
    "compute_net_balance",
    "generate_candidate_code",
    "normalize_account_code",
    "strip_non_digits",
    "check_account_number_checksum",
    "luhn_sum",
    "sum_is_mod10",
    "validate_code",
]
