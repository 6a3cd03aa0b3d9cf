"""Composition root for wiring infrastructure adapters."""

from src.application.ports.accounts_repository import FinAccountRepositoryPort
from src.application.ports.database import DatabaseEnginePort
from src.application.ports.ledger_repository import (
    AuthorizationRepositoryPort,
    LedgerRepositoryPort,
)
from src.application.use_cases.generate_account_code import (
    GenerateFinAccountCodeUseCase,
)
from src.application.use_cases.get_balance import GetFinAccountBalanceUseCase
from src.application.use_cases.issue_account import IssueFinAccountUseCase
from src.application.use_cases.resolve_account import ResolveFinAccountUseCase
from src.application.use_cases.validate_pin import ValidateFinAccountPinUseCase
from src.infrastructure.accounts_repository import (
    SqlAlchemyFinAccountRepository,
)
from src.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from src.infrastructure.ledger_repository import (
    SqlAlchemyAuthorizationRepository,
    SqlAlchemyLedgerRepository,
)
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.settings import FinAccountSettings


def build_database_adapter() -> DatabaseEnginePort:
    """Return the database adapter instance."""
    return SqlAlchemyDatabaseEngineAdapter()


def build_accounts_repository(
    db_port: DatabaseEnginePort | None = None,
) -> FinAccountRepositoryPort:
    """Return the fin account repository."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyFinAccountRepository(resolved_db)


def build_ledger_repository(
    db_port: DatabaseEnginePort | None = None,
) -> LedgerRepositoryPort:
    """Return the transaction aggregate repository."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyLedgerRepository(resolved_db)


def build_authorization_repository(
    db_port: DatabaseEnginePort | None = None,
) -> AuthorizationRepositoryPort:
    """Return the authorization hold aggregate repository."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyAuthorizationRepository(resolved_db)


def build_balance_use_case(
    db_port: DatabaseEnginePort | None = None,
    settings: FinAccountSettings | None = None,
) -> GetFinAccountBalanceUseCase:
    """Return the balance calculator wired to the configured store."""
    resolved_db = db_port or build_database_adapter()
    resolved_settings = settings or FinAccountSettings.from_env()
    return GetFinAccountBalanceUseCase(
        build_ledger_repository(resolved_db),
        build_authorization_repository(resolved_db),
        resolved_settings.to_decimal_policy(),
        logger=get_app_logger(),
    )


def build_resolve_account_use_case(
    db_port: DatabaseEnginePort | None = None,
) -> ResolveFinAccountUseCase:
    """Return the account lookup use case."""
    return ResolveFinAccountUseCase(
        build_accounts_repository(db_port),
        logger=get_app_logger(),
    )


def build_validate_pin_use_case(
    db_port: DatabaseEnginePort | None = None,
) -> ValidateFinAccountPinUseCase:
    """Return the PIN validation use case."""
    return ValidateFinAccountPinUseCase(
        build_accounts_repository(db_port),
        logger=get_app_logger(),
    )


def build_issue_account_use_case(
    db_port: DatabaseEnginePort | None = None,
    settings: FinAccountSettings | None = None,
) -> IssueFinAccountUseCase:
    """Return the account issuance use case with its code generator."""
    resolved_settings = settings or FinAccountSettings.from_env()
    repository = build_accounts_repository(db_port)
    generator = GenerateFinAccountCodeUseCase(
        repository,
        logger=get_app_logger(),
    )
    return IssueFinAccountUseCase(
        repository,
        generator,
        code_length=resolved_settings.code_length,
        logger=get_app_logger(),
    )


__all__ = [
    "build_database_adapter",
    "build_accounts_repository",
    "build_ledger_repository",
    "build_authorization_repository",
    "build_balance_use_case",
    "build_resolve_account_use_case",
    "build_validate_pin_use_case",
    "build_issue_account_use_case",
]
