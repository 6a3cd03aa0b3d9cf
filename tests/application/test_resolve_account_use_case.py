"""Tests for the ResolveFinAccountUseCase."""

from datetime import datetime
from unittest.mock import MagicMock

import pytest

from src.application.use_cases.resolve_account import ResolveFinAccountUseCase
from src.domain.exceptions import AmbiguousFinAccountError
from src.domain.models.accounts import FinAccount
from tests.application.fakes import InMemoryAccountStore

NOW = datetime(2024, 6, 1, 12, 0)


def _account(account_id, code, from_date=None, thru_date=None) -> FinAccount:
    return FinAccount(
        account_id=account_id,
        code=code,
        account_type="GIFTCERT_ACCOUNT",
        from_date=from_date,
        thru_date=thru_date,
    )


def test_execute_normalizes_before_querying() -> None:
    """Raw codes should be uppercased and stripped of separators."""
    repository = MagicMock()
    expected = _account("FA1", "GC1234AB")
    repository.find_valid_by_code.return_value = [expected]
    use_case = ResolveFinAccountUseCase(repository, logger=MagicMock())

    result = use_case.execute("gc-1234 ab", now=NOW)

    assert result is expected
    repository.find_valid_by_code.assert_called_once_with("GC1234AB", NOW)


def test_execute_returns_none_when_no_account_matches() -> None:
    """An unknown code is an expected condition, not an error."""
    repository = MagicMock()
    repository.find_valid_by_code.return_value = []
    logger = MagicMock()
    use_case = ResolveFinAccountUseCase(repository, logger=logger)

    assert use_case.execute("NOPE42", now=NOW) is None
    logger.info.assert_called_once()
    assert "NOPE42" not in logger.info.call_args.args[0]


def test_execute_returns_none_for_missing_code() -> None:
    """A None code should short-circuit without querying."""
    repository = MagicMock()
    use_case = ResolveFinAccountUseCase(repository, logger=MagicMock())

    assert use_case.execute(None) is None
    repository.find_valid_by_code.assert_not_called()


def test_execute_raises_on_multiple_matches_without_leaking_code() -> None:
    """Ambiguity is a data-integrity failure and must not log the code."""
    store = InMemoryAccountStore(
        [_account("FA1", "SECRET99"), _account("FA2", "SECRET99")]
    )
    logger = MagicMock()
    use_case = ResolveFinAccountUseCase(store, logger=logger)

    with pytest.raises(AmbiguousFinAccountError) as excinfo:
        use_case.execute("secret-99", now=NOW)

    assert excinfo.value.match_count == 2
    assert "SECRET99" not in str(excinfo.value)
    logged = [
        str(arg)
        for method in (logger.debug, logger.info, logger.warning, logger.error)
        for call in method.call_args_list
        for arg in call.args
    ]
    assert logged
    assert not any(
        "SECRET99" in message or "secret-99" in message for message in logged
    )


def test_execute_only_considers_currently_valid_accounts() -> None:
    """Expired or not yet valid accounts should be filtered out."""
    store = InMemoryAccountStore(
        [
            _account("OLD", "GC1", thru_date=datetime(2024, 1, 1)),
            _account("NEW", "GC1", from_date=datetime(2024, 12, 1)),
            _account("CUR", "GC1", from_date=datetime(2024, 1, 1)),
        ]
    )
    use_case = ResolveFinAccountUseCase(store, logger=MagicMock())

    result = use_case.execute("gc1", now=NOW)

    assert result is not None
    assert result.account_id == "CUR"


def test_execute_defaults_to_clock() -> None:
    """Without an explicit moment the injected clock should be used."""
    repository = MagicMock()
    repository.find_valid_by_code.return_value = []
    use_case = ResolveFinAccountUseCase(
        repository,
        logger=MagicMock(),
        clock=lambda: NOW,
    )

    use_case.execute("GC1")

    repository.find_valid_by_code.assert_called_once_with("GC1", NOW)
