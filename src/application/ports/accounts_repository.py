"""Port for reading and creating fin accounts."""

from datetime import datetime
from typing import Protocol

from src.domain.models.accounts import FinAccount


class FinAccountRepositoryPort(Protocol):
    """Port exposing the account store used by lookups and code issuance."""

    def find_valid_by_code(
        self,
        code: str,
        moment: datetime,
    ) -> list[FinAccount]:
        """Return accounts with exactly this code valid at ``moment``."""

    def exists_with_code(self, code: str) -> bool:
        """Return whether any account uses this code, regardless of validity."""

    def fetch_account(self, account_id: str) -> FinAccount | None:
        """Return the account with the given identifier, if any."""

    def insert_account(self, account: FinAccount) -> None:
        """Persist a new account.

        Raises:
            DuplicateFinAccountCodeError: If the code is already taken.
        """


__all__ = ["FinAccountRepositoryPort"]
