"""SQLAlchemy-backed repository for fin accounts."""

from dataclasses import asdict
from datetime import datetime

from sqlalchemy import DateTime, bindparam, text
from sqlalchemy.exc import IntegrityError

from src.application.ports.accounts_repository import FinAccountRepositoryPort
from src.application.ports.database import DatabaseEnginePort
from src.domain.exceptions import DuplicateFinAccountCodeError
from src.domain.models.accounts import FinAccount

_ACCOUNT_COLUMNS = {"from_date": DateTime, "thru_date": DateTime}

SELECT_VALID_BY_CODE_SQL = (
    text(
        """
        SELECT fin_account_id AS account_id,
               fin_account_code AS code,
               fin_account_type_id AS account_type,
               from_date,
               thru_date
        FROM fin_account
        WHERE fin_account_code = :code
          AND (from_date IS NULL OR from_date <= :moment)
          AND (thru_date IS NULL OR thru_date > :moment)
        """
    )
    .bindparams(bindparam("moment", type_=DateTime()))
    .columns(**_ACCOUNT_COLUMNS)
)

SELECT_BY_ID_SQL = text(
    """
    SELECT fin_account_id AS account_id,
           fin_account_code AS code,
           fin_account_type_id AS account_type,
           from_date,
           thru_date
    FROM fin_account
    WHERE fin_account_id = :account_id
    """
).columns(**_ACCOUNT_COLUMNS)

SELECT_CODE_EXISTS_SQL = text(
    """
    SELECT 1
    FROM fin_account
    WHERE fin_account_code = :code
    LIMIT 1
    """
)

INSERT_FIN_ACCOUNT_SQL = text(
    """
    INSERT INTO fin_account (
        fin_account_id,
        fin_account_code,
        fin_account_type_id,
        from_date,
        thru_date
    )
    VALUES (
        :account_id,
        :code,
        :account_type,
        :from_date,
        :thru_date
    )
    """
).bindparams(
    bindparam("from_date", type_=DateTime()),
    bindparam("thru_date", type_=DateTime()),
)


class SqlAlchemyFinAccountRepository(FinAccountRepositoryPort):
    """Repository backed by SQLAlchemy for fin accounts."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the ledger engine.
        """
        self._db_port = db_port

    def find_valid_by_code(
        self,
        code: str,
        moment: datetime,
    ) -> list[FinAccount]:
        engine = self._db_port.get_ledger_engine()
        with engine.connect() as conn:
            rows = conn.execute(
                SELECT_VALID_BY_CODE_SQL,
                {"code": code, "moment": moment},
            ).all()
        return [self._to_account(row) for row in rows]

    def exists_with_code(self, code: str) -> bool:
        engine = self._db_port.get_ledger_engine()
        with engine.connect() as conn:
            result = conn.execute(SELECT_CODE_EXISTS_SQL, {"code": code}).first()
        return result is not None

    def fetch_account(self, account_id: str) -> FinAccount | None:
        engine = self._db_port.get_ledger_engine()
        with engine.connect() as conn:
            row = conn.execute(
                SELECT_BY_ID_SQL,
                {"account_id": account_id},
            ).first()
        if row is None:
            return None
        return self._to_account(row)

    def insert_account(self, account: FinAccount) -> None:
        """Insert an account, translating code collisions.

        Raises:
            DuplicateFinAccountCodeError: If the code is already taken.
        """
        engine = self._db_port.get_ledger_engine()
        try:
            with engine.begin() as conn:
                conn.execute(INSERT_FIN_ACCOUNT_SQL, asdict(account))
        except IntegrityError as exc:
            if account.code is not None and self.exists_with_code(account.code):
                raise DuplicateFinAccountCodeError(
                    f"Fin account code already in use for {account.account_id}"
                ) from exc
            raise

    @staticmethod
    def _to_account(row) -> FinAccount:
        return FinAccount(
            account_id=row.account_id,
            code=row.code,
            account_type=row.account_type,
            from_date=row.from_date,
            thru_date=row.thru_date,
        )


__all__ = [
    "SqlAlchemyFinAccountRepository",
    "SELECT_VALID_BY_CODE_SQL",
    "SELECT_BY_ID_SQL",
    "SELECT_CODE_EXISTS_SQL",
    "INSERT_FIN_ACCOUNT_SQL",
]
