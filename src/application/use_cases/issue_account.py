"""Use case to create a fin account under a freshly generated code.

This is the caller side of the code generator contract: the code is checked
for uniqueness first, then inserted. A concurrent generator may claim the
same code in between; the store's unique constraint rejects the second
insert and the code is regenerated.
"""

from dataclasses import replace
from datetime import datetime
from typing import Callable
from uuid import uuid4

from src.application.ports.accounts_repository import FinAccountRepositoryPort
from src.application.use_cases.generate_account_code import (
    GenerateFinAccountCodeUseCase,
)
from src.domain.constants import GIFTCERT_ACCOUNT_TYPE
from src.domain.exceptions import DuplicateFinAccountCodeError
from src.domain.models.accounts import FinAccount
from src.infrastructure.logging.logger import get_app_logger


class IssueFinAccountUseCase:
    """Generate a unique code and persist a new account with it."""

    def __init__(
        self,
        accounts_repository: FinAccountRepositoryPort,
        code_generator: GenerateFinAccountCodeUseCase,
        code_length: int,
        logger=None,
        max_insert_attempts: int = 5,
        clock: Callable[[], datetime] = datetime.now,
        id_factory: Callable[[], str] = lambda: uuid4().hex,
    ) -> None:
        """Initialize the use case.

        Args:
            accounts_repository: Port used to insert the account.
            code_generator: Use case producing unused codes.
            code_length: Default number of characters per code.
            logger: Optional logger compatible with logging.Logger-like API.
            max_insert_attempts: Inserts tried before re-raising a collision.
            clock: Callable returning the current moment.
            id_factory: Callable producing new account identifiers.

        Raises:
            ValueError: If max_insert_attempts is lower than 1.
        """
        if max_insert_attempts < 1:
            raise ValueError(
                f"max_insert_attempts must be at least 1: {max_insert_attempts}"
            )
        self._accounts_repository = accounts_repository
        self._code_generator = code_generator
        self._code_length = code_length
        self._logger = logger or get_app_logger()
        self._max_insert_attempts = max_insert_attempts
        self._clock = clock
        self._id_factory = id_factory

    def execute(
        self,
        account_type: str = GIFTCERT_ACCOUNT_TYPE,
        code_length: int | None = None,
        from_date: datetime | None = None,
        thru_date: datetime | None = None,
    ) -> FinAccount:
        """Create and return a new account with a unique code.

        Raises:
            DuplicateFinAccountCodeError: If every insert attempt collided.
            CodeSpaceExhaustedError: If the generator found no unused code.
        """
        length = self._code_length if code_length is None else code_length
        account = FinAccount(
            account_id=self._id_factory(),
            code=None,
            account_type=account_type,
            from_date=from_date or self._clock(),
            thru_date=thru_date,
        )
        for attempt in range(1, self._max_insert_attempts + 1):
            account = replace(account, code=self._code_generator.execute(length))
            try:
                self._accounts_repository.insert_account(account)
            except DuplicateFinAccountCodeError:
                if attempt == self._max_insert_attempts:
                    raise
                self._logger.warning(
                    f"Fin account code collided on insert, retrying "
                    f"({attempt}/{self._max_insert_attempts})"
                )
                continue
            self._logger.info(
                f"Issued fin account {account.account_id} of type {account_type}"
            )
            return account


__all__ = ["IssueFinAccountUseCase"]
