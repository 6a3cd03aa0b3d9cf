"""Application ports package."""

from .accounts_repository import FinAccountRepositoryPort
from .database import DatabaseEnginePort
from .ledger_repository import (
    AuthorizationRepositoryPort,
    LedgerRepositoryPort,
)

__all__ = [
    "FinAccountRepositoryPort",
    "DatabaseEnginePort",
    "AuthorizationRepositoryPort",
    "LedgerRepositoryPort",
]
