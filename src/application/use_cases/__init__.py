"""Application use cases package."""

from .generate_account_code import GenerateFinAccountCodeUseCase
from .get_balance import GetFinAccountBalanceUseCase, FinAccountBalance
from .issue_account import IssueFinAccountUseCase
from .resolve_account import ResolveFinAccountUseCase
from .validate_pin import ValidateFinAccountPinUseCase

__all__ = [
    "GenerateFinAccountCodeUseCase",
    "GetFinAccountBalanceUseCase",
    "FinAccountBalance",
    "IssueFinAccountUseCase",
    "ResolveFinAccountUseCase",
    "ValidateFinAccountPinUseCase",
]
