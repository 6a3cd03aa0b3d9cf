"""Use case to validate a fin account PIN."""

from sqlalchemy.exc import SQLAlchemyError

from src.application.ports.accounts_repository import FinAccountRepositoryPort
from src.domain.services.validation import validate_code
from src.infrastructure.logging.logger import get_app_logger


class ValidateFinAccountPinUseCase:
    """Check a PIN against the code stored for an account id."""

    def __init__(
        self,
        accounts_repository: FinAccountRepositoryPort,
        logger=None,
    ) -> None:
        self._accounts_repository = accounts_repository
        self._logger = logger or get_app_logger()

    def execute(self, account_id: str, pin: str | None) -> bool:
        """Return whether the PIN matches; lookup failures yield False."""
        try:
            account = self._accounts_repository.fetch_account(account_id)
        except SQLAlchemyError as exc:
            self._logger.error(
                f"Fin account lookup failed during PIN validation: "
                f"{type(exc).__name__}"
            )
            return False

        if account is None:
            self._logger.info(f"Fin account record not found ({account_id})")
            return False
        return validate_code(account, pin)


__all__ = ["ValidateFinAccountPinUseCase"]
