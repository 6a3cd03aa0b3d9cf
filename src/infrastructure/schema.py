"""DDL for the fin account tables.

The unique constraint on ``fin_account_code`` is what closes the race
between code generation and account insertion.
"""

from sqlalchemy.engine import Engine

CREATE_FIN_ACCOUNT_SQL = """
CREATE TABLE IF NOT EXISTS fin_account (
    fin_account_id TEXT PRIMARY KEY,
    fin_account_code TEXT UNIQUE,
    fin_account_type_id TEXT NOT NULL,
    from_date TIMESTAMP,
    thru_date TIMESTAMP
)
"""

CREATE_FIN_ACCOUNT_TRANS_SQL = """
CREATE TABLE IF NOT EXISTS fin_account_trans (
    fin_account_trans_id TEXT PRIMARY KEY,
    fin_account_id TEXT NOT NULL REFERENCES fin_account (fin_account_id),
    fin_account_trans_type_id TEXT NOT NULL,
    amount NUMERIC NOT NULL,
    transaction_date TIMESTAMP NOT NULL
)
"""

CREATE_FIN_ACCOUNT_AUTH_SQL = """
CREATE TABLE IF NOT EXISTS fin_account_auth (
    fin_account_auth_id TEXT PRIMARY KEY,
    fin_account_id TEXT NOT NULL REFERENCES fin_account (fin_account_id),
    amount NUMERIC NOT NULL,
    authorization_date TIMESTAMP NOT NULL,
    thru_date TIMESTAMP
)
"""

SCHEMA_STATEMENTS = (
    CREATE_FIN_ACCOUNT_SQL,
    CREATE_FIN_ACCOUNT_TRANS_SQL,
    CREATE_FIN_ACCOUNT_AUTH_SQL,
)


def ensure_schema(engine: Engine) -> None:
    """Create the fin account tables if they do not exist.

    Args:
        engine: SQLAlchemy engine for the ledger database.
    """
    with engine.begin() as conn:
        for statement in SCHEMA_STATEMENTS:
            conn.exec_driver_sql(statement)


__all__ = [
    "CREATE_FIN_ACCOUNT_SQL",
    "CREATE_FIN_ACCOUNT_TRANS_SQL",
    "CREATE_FIN_ACCOUNT_AUTH_SQL",
    "SCHEMA_STATEMENTS",
    "ensure_schema",
]
