"""SQLAlchemy-backed aggregate reads over transactions and holds.

Each query returns a single summary row with the summed amount, or no row
when nothing matches (grouping by account yields no group). SQLite engines
sum through the exact ``decimal_sum`` aggregate since their built-in ``SUM``
adds ``NUMERIC`` values as floats.
"""

from collections.abc import Iterable
from datetime import datetime

from sqlalchemy import DateTime, bindparam, text
from sqlalchemy.engine import Engine
from sqlalchemy.sql.elements import TextClause

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.ledger_repository import (
    AuthorizationRepositoryPort,
    LedgerRepositoryPort,
)
from src.domain.models.ledger import AmountSumRow
from src.infrastructure.sqlite_decimal import DECIMAL_SUM_FUNCTION
from src.utils.decimal_utils import coerce_optional_decimal


def _sum_transactions_sql(sum_function: str) -> TextClause:
    return text(
        f"""
        SELECT {sum_function}(amount) AS total
        FROM fin_account_trans
        WHERE fin_account_id = :account_id
          AND transaction_date <= :as_of
          AND fin_account_trans_type_id IN :transaction_types
        GROUP BY fin_account_id
        """
    ).bindparams(
        bindparam("as_of", type_=DateTime()),
        bindparam("transaction_types", expanding=True),
    )


def _sum_authorizations_sql(sum_function: str) -> TextClause:
    return text(
        f"""
        SELECT {sum_function}(amount) AS total
        FROM fin_account_auth
        WHERE fin_account_id = :account_id
          AND authorization_date <= :as_of
          AND (thru_date IS NULL OR thru_date > :as_of)
        GROUP BY fin_account_id
        """
    ).bindparams(bindparam("as_of", type_=DateTime()))


SUM_TRANSACTIONS_SQL = _sum_transactions_sql("SUM")
SUM_AUTHORIZATIONS_SQL = _sum_authorizations_sql("SUM")
SQLITE_SUM_TRANSACTIONS_SQL = _sum_transactions_sql(DECIMAL_SUM_FUNCTION)
SQLITE_SUM_AUTHORIZATIONS_SQL = _sum_authorizations_sql(DECIMAL_SUM_FUNCTION)


def _is_sqlite(engine: Engine) -> bool:
    return engine.dialect.name == "sqlite"


def _to_sum_rows(rows) -> list[AmountSumRow]:
    return [AmountSumRow(total=coerce_optional_decimal(row.total)) for row in rows]


class SqlAlchemyLedgerRepository(LedgerRepositoryPort):
    """Summed transaction amounts read through SQLAlchemy."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the ledger engine.
        """
        self._db_port = db_port

    def fetch_transaction_sums(
        self,
        account_id: str,
        as_of: datetime,
        transaction_types: Iterable[str],
    ) -> list[AmountSumRow]:
        params = {
            "account_id": account_id,
            "as_of": as_of,
            "transaction_types": list(transaction_types),
        }
        engine = self._db_port.get_ledger_engine()
        with engine.connect() as conn:
            statement = (
                SQLITE_SUM_TRANSACTIONS_SQL
                if _is_sqlite(engine)
                else SUM_TRANSACTIONS_SQL
            )
            rows = conn.execute(statement, params).all()
        return _to_sum_rows(rows)


class SqlAlchemyAuthorizationRepository(AuthorizationRepositoryPort):
    """Summed non-expired authorization holds read through SQLAlchemy."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the ledger engine.
        """
        self._db_port = db_port

    def fetch_authorization_sums(
        self,
        account_id: str,
        as_of: datetime,
    ) -> list[AmountSumRow]:
        params = {"account_id": account_id, "as_of": as_of}
        engine = self._db_port.get_ledger_engine()
        with engine.connect() as conn:
            statement = (
                SQLITE_SUM_AUTHORIZATIONS_SQL
                if _is_sqlite(engine)
                else SUM_AUTHORIZATIONS_SQL
            )
            rows = conn.execute(statement, params).all()
        return _to_sum_rows(rows)


__all__ = [
    "SqlAlchemyLedgerRepository",
    "SqlAlchemyAuthorizationRepository",
    "SUM_TRANSACTIONS_SQL",
    "SUM_AUTHORIZATIONS_SQL",
    "SQLITE_SUM_TRANSACTIONS_SQL",
    "SQLITE_SUM_AUTHORIZATIONS_SQL",
]
