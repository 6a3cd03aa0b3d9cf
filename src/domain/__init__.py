"""Domain package for fin account rules and core models."""

from .constants import (
    CODE_ALPHABET,
    DECREMENT_TRANSACTION_TYPES,
    GIFTCERT_ACCOUNT_TYPE,
    INCREMENT_TRANSACTION_TYPES,
    MAX_CODE_ATTEMPTS,
)
from .exceptions import (
    AmbiguousFinAccountError,
    CodeSpaceExhaustedError,
    DuplicateFinAccountCodeError,
    FinAccountError,
)
from .models import (
    AmountSumRow,
    AuthorizationHold,
    FinAccount,
    FinAccountBalance,
    LedgerTransaction,
)
from .policies import DecimalPolicy
from .services import (
    add_first_entry_amount,
    check_account_number_checksum,
    compute_available_balance,
    compute_net_balance,
    generate_candidate_code,
    normalize_account_code,
    validate_code,
)

__all__ = [
    "CODE_ALPHABET",
    "DECREMENT_TRANSACTION_TYPES",
    "GIFTCERT_ACCOUNT_TYPE",
    "INCREMENT_TRANSACTION_TYPES",
    "MAX_CODE_ATTEMPTS",
    "AmbiguousFinAccountError",
    "CodeSpaceExhaustedError",
    "DuplicateFinAccountCodeError",
    "FinAccountError",
    "AmountSumRow",
    "AuthorizationHold",
    "FinAccount",
    "FinAccountBalance",
    "LedgerTransaction",
    "DecimalPolicy",
    "add_first_entry_amount",
    "check_account_number_checksum",
    "compute_available_balance",
    "compute_net_balance",
    "generate_candidate_code",
    "normalize_account_code",
    "validate_code",
]
