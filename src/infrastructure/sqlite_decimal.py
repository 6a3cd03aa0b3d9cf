"""Exact decimal aggregation for SQLite engines.

SQLite stores ``NUMERIC`` values as INTEGER or REAL and its built-in ``SUM``
adds them as binary floats. ``decimal_sum`` re-reads every value through its
shortest decimal representation and adds in ``Decimal``, returning the total
as TEXT so no float reaches the balance rounding.
"""

from decimal import Decimal

from sqlalchemy import event
from sqlalchemy.engine import Engine

from src.utils.decimal_utils import coerce_decimal

DECIMAL_SUM_FUNCTION = "decimal_sum"


class DecimalSum:
    """SQLite aggregate adding values as ``Decimal``; NULLs are skipped."""

    def __init__(self) -> None:
        self._total: Decimal | None = None

    def step(self, value) -> None:
        if value is None:
            return
        amount = coerce_decimal(value)
        self._total = amount if self._total is None else self._total + amount

    def finalize(self) -> str | None:
        if self._total is None:
            return None
        return str(self._total)


def _register_decimal_sum(dbapi_connection, connection_record) -> None:
    dbapi_connection.create_aggregate(DECIMAL_SUM_FUNCTION, 1, DecimalSum)


def install_decimal_sum(engine: Engine) -> Engine:
    """Register ``decimal_sum`` on every new connection of a SQLite engine.

    Must be called before the engine opens its first connection.

    Args:
        engine: SQLite engine.

    Returns:
        Engine: The same engine, for chaining.
    """
    if not event.contains(engine, "connect", _register_decimal_sum):
        event.listen(engine, "connect", _register_decimal_sum)
    return engine


__all__ = ["DecimalSum", "DECIMAL_SUM_FUNCTION", "install_decimal_sum"]
