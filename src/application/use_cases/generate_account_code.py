"""Use case to generate a unique random fin account code.

The generated code is not reserved. Callers must persist the new account
immediately and rely on the store's unique constraint on the code column:
another generator may claim the same code between the uniqueness check and
the insert, in which case the insert fails and generation must be retried
(see ``IssueFinAccountUseCase``).
"""

from src.application.ports.accounts_repository import FinAccountRepositoryPort
from src.domain.constants import MAX_CODE_ATTEMPTS
from src.domain.exceptions import CodeSpaceExhaustedError
from src.domain.services.codes import generate_candidate_code
from src.infrastructure.logging.logger import get_app_logger


class GenerateFinAccountCodeUseCase:
    """Draw random codes until one is unused in the account store."""

    def __init__(
        self,
        accounts_repository: FinAccountRepositoryPort,
        logger=None,
        max_attempts: int = MAX_CODE_ATTEMPTS,
        rng=None,
    ) -> None:
        """Initialize the use case.

        Args:
            accounts_repository: Port used for collision checks.
            logger: Optional logger compatible with logging.Logger-like API.
            max_attempts: Number of candidates tried before giving up.
            rng: Optional random source with a ``choice`` method.
        """
        self._accounts_repository = accounts_repository
        self._logger = logger or get_app_logger()
        self._max_attempts = max_attempts
        self._rng = rng

    def execute(self, length: int) -> str:
        """Return a code of ``length`` characters not used by any account.

        Args:
            length: Number of characters in the code.

        Returns:
            str: Unused uppercase alphanumeric code.

        Raises:
            CodeSpaceExhaustedError: If no unused code was found within the
                attempt limit.
            ValueError: If length is smaller than one.
        """
        for attempt in range(1, self._max_attempts + 1):
            candidate = generate_candidate_code(length, self._rng)
            if not self._accounts_repository.exists_with_code(candidate):
                self._logger.debug(
                    f"Generated unique fin account code of length {length} "
                    f"after {attempt} attempt(s)"
                )
                return candidate

        self._logger.error(
            f"Unable to locate unique fin account code of length {length} "
            f"after {self._max_attempts} attempts"
        )
        raise CodeSpaceExhaustedError(length, self._max_attempts)


__all__ = ["GenerateFinAccountCodeUseCase"]
