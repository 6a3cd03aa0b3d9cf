"""Use case to resolve a raw account code to a single valid fin account."""

from datetime import datetime
from typing import Callable

from src.application.ports.accounts_repository import FinAccountRepositoryPort
from src.domain.exceptions import AmbiguousFinAccountError
from src.domain.models.accounts import FinAccount
from src.domain.services.normalization import normalize_account_code
from src.infrastructure.logging.logger import get_app_logger


class ResolveFinAccountUseCase:
    """Find the one account currently valid for a code."""

    def __init__(
        self,
        accounts_repository: FinAccountRepositoryPort,
        logger=None,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        """Initialize the use case.

        Args:
            accounts_repository: Port providing account lookups.
            logger: Optional logger compatible with logging.Logger-like API.
            clock: Callable returning the current moment.
        """
        self._accounts_repository = accounts_repository
        self._logger = logger or get_app_logger()
        self._clock = clock

    def execute(
        self,
        raw_code: str | None,
        now: datetime | None = None,
    ) -> FinAccount | None:
        """Return the account matching the normalized code.

        Codes double as secrets, so they are never written to the log.

        Args:
            raw_code: Code as entered, in any case, with separators.
            now: Moment used for the validity window. Defaults to the clock.

        Returns:
            FinAccount | None: The matching account, or None if none matches.

        Raises:
            AmbiguousFinAccountError: If several valid accounts match.
        """
        code = normalize_account_code(raw_code)
        if code is None:
            return None
        moment = now or self._clock()

        accounts = self._accounts_repository.find_valid_by_code(code, moment)
        if not accounts:
            self._logger.info("No fin account found for account code")
            return None
        if len(accounts) > 1:
            self._logger.error(f"Multiple fin accounts found ({len(accounts)})")
            raise AmbiguousFinAccountError(len(accounts))
        return accounts[0]


__all__ = ["ResolveFinAccountUseCase"]
