"""Ports for aggregate reads over the transaction and authorization logs."""

from collections.abc import Iterable
from datetime import datetime
from typing import Protocol

from src.domain.models.ledger import AmountSumRow


class LedgerRepositoryPort(Protocol):
    """Port exposing summed transaction amounts."""

    def fetch_transaction_sums(
        self,
        account_id: str,
        as_of: datetime,
        transaction_types: Iterable[str],
    ) -> list[AmountSumRow]:
        """Return the summed amount of matching transactions.

        At most one row is returned; no row when nothing matches.
        """


class AuthorizationRepositoryPort(Protocol):
    """Port exposing summed authorization holds."""

    def fetch_authorization_sums(
        self,
        account_id: str,
        as_of: datetime,
    ) -> list[AmountSumRow]:
        """Return the summed amount of non-expired holds authorized by as_of."""


__all__ = ["LedgerRepositoryPort", "AuthorizationRepositoryPort"]
