"""Use case to compute fin account balances from the ledger."""

from datetime import datetime
from decimal import Decimal
from typing import Callable

from src.application.ports.ledger_repository import (
    AuthorizationRepositoryPort,
    LedgerRepositoryPort,
)
from src.domain.constants import (
    DECREMENT_TRANSACTION_TYPES,
    INCREMENT_TRANSACTION_TYPES,
)
from src.domain.models.ledger import FinAccountBalance
from src.domain.policies.decimal_policy import DecimalPolicy
from src.domain.services.balance import (
    compute_available_balance,
    compute_net_balance,
)
from src.infrastructure.logging.logger import get_app_logger


class GetFinAccountBalanceUseCase:
    """Compute net and available balances as of a point in time.

    Balances are always derived from aggregate sums over the transaction and
    authorization logs; nothing is cached. Aggregates are combined one digit
    wider than the policy scale and rounded once into each result.
    """

    def __init__(
        self,
        ledger_repository: LedgerRepositoryPort,
        authorization_repository: AuthorizationRepositoryPort,
        decimal_policy: DecimalPolicy,
        logger=None,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        """Initialize the use case.

        Args:
            ledger_repository: Port providing summed transactions.
            authorization_repository: Port providing summed holds.
            decimal_policy: Scale and rounding for every result.
            logger: Optional logger compatible with logging.Logger-like API.
            clock: Callable returning the current moment.
        """
        self._ledger_repository = ledger_repository
        self._authorization_repository = authorization_repository
        self._policy = decimal_policy
        self._logger = logger or get_app_logger()
        self._clock = clock

    def net_balance(
        self,
        account_id: str,
        as_of: datetime | None = None,
    ) -> Decimal:
        """Return deposits and adjustments minus withdrawals up to as_of.

        Args:
            account_id: Account identifier.
            as_of: Inclusive upper bound on transaction dates. Defaults to now.

        Returns:
            Decimal: Net balance at the policy scale.
        """
        moment = as_of or self._clock()
        increments = self._ledger_repository.fetch_transaction_sums(
            account_id,
            moment,
            INCREMENT_TRANSACTION_TYPES,
        )
        decrements = self._ledger_repository.fetch_transaction_sums(
            account_id,
            moment,
            DECREMENT_TRANSACTION_TYPES,
        )
        return compute_net_balance(increments, decrements, self._policy)

    def available_balance(
        self,
        account_id: str,
        as_of: datetime | None = None,
    ) -> Decimal:
        """Return the net balance minus non-expired holds up to as_of.

        Args:
            account_id: Account identifier.
            as_of: Inclusive upper bound on dates. Defaults to now.

        Returns:
            Decimal: Available balance at the policy scale.
        """
        moment = as_of or self._clock()
        net_balance = self.net_balance(account_id, moment)
        return self._available_from_net(account_id, net_balance, moment)

    def execute(
        self,
        account_id: str,
        as_of: datetime | None = None,
    ) -> FinAccountBalance:
        """Return both balances computed for the same moment."""
        moment = as_of or self._clock()
        net_balance = self.net_balance(account_id, moment)
        available = self._available_from_net(account_id, net_balance, moment)
        self._logger.debug(
            f"Computed balances for fin account {account_id} as of {moment}"
        )
        return FinAccountBalance(
            account_id=account_id,
            net_balance=net_balance,
            available_balance=available,
            as_of=moment,
        )

    def _available_from_net(
        self,
        account_id: str,
        net_balance: Decimal,
        moment: datetime,
    ) -> Decimal:
        holds = self._authorization_repository.fetch_authorization_sums(
            account_id,
            moment,
        )
        return compute_available_balance(net_balance, holds, self._policy)


__all__ = ["GetFinAccountBalanceUseCase", "FinAccountBalance"]
