"""Shared fixtures for SQLAlchemy adapter tests."""

import pytest
from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool

from src.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from src.infrastructure.schema import ensure_schema
from src.infrastructure.sqlite_decimal import install_decimal_sum


@pytest.fixture
def sqlite_engine():
    """In-memory SQLite engine with the fin account schema."""
    engine = create_engine(
        "sqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
        future=True,
    )
    install_decimal_sum(engine)
    ensure_schema(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def db_port(sqlite_engine):
    """Database port serving the in-memory engine."""
    return SqlAlchemyDatabaseEngineAdapter(sqlite_engine)
