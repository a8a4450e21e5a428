"""Tests for the SQLAlchemy debts repository."""

from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest
from sqlalchemy import create_engine

from src.domain.exceptions import DebtRepositoryError
from src.domain.models import DebtDraft
from src.infrastructure.debts_repository import SqlAlchemyDebtsRepository


class _DbPort:
    def __init__(self, engine) -> None:
        self.engine = engine

    def get_debts_engine(self):
        return self.engine


def _draft(name: str, **overrides) -> DebtDraft:
    values = {
        "name": name,
        "debt_type": "Credit Card",
        "amount": Decimal("2500"),
        "interest_rate": Decimal("19.99"),
        "minimum_payment": Decimal("75.5"),
        "remaining_term": None,
    }
    values.update(overrides)
    return DebtDraft(**values)


@pytest.fixture
def repository(monkeypatch):
    """Repository bound to an in-memory SQLite database."""
    start = datetime(2025, 1, 1, tzinfo=timezone.utc)
    ticks = iter(start + timedelta(minutes=i) for i in range(100))
    monkeypatch.setattr(
        SqlAlchemyDebtsRepository,
        "_now",
        staticmethod(lambda: next(ticks)),
    )
    repo = SqlAlchemyDebtsRepository(_DbPort(create_engine("sqlite://")))
    repo.prepare_storage()
    return repo


def test_add_and_fetch_round_trip(repository) -> None:
    """Stored debts should come back with exact numeric values."""
    record = repository.add_debt("user-1", _draft("Visa", remaining_term=18))

    debts = repository.fetch_debts("user-1")

    assert debts == [record]
    assert debts[0].debt_type == "Credit Card"
    assert debts[0].amount == Decimal("2500")
    assert debts[0].interest_rate == Decimal("19.99")
    assert debts[0].minimum_payment == Decimal("75.5")
    assert debts[0].remaining_term == 18


def test_fetch_debts_is_scoped_and_newest_first(repository) -> None:
    first = repository.add_debt("user-1", _draft("Older"))
    second = repository.add_debt("user-1", _draft("Newer"))
    repository.add_debt("user-2", _draft("Someone else"))

    debts = repository.fetch_debts("user-1")

    assert [debt.id for debt in debts] == [second.id, first.id]


def test_update_debt_returns_stored_values(repository) -> None:
    record = repository.add_debt("user-1", _draft("Visa"))

    updated = repository.update_debt(
        record.id,
        _draft("Visa Gold", minimum_payment=Decimal("120")),
    )

    assert updated is not None
    assert updated.id == record.id
    assert updated.name == "Visa Gold"
    assert updated.minimum_payment == Decimal("120")


def test_update_missing_debt_returns_none(repository) -> None:
    assert repository.update_debt("missing", _draft("Visa")) is None


def test_delete_debt_reports_whether_a_row_matched(repository) -> None:
    record = repository.add_debt("user-1", _draft("Visa"))

    assert repository.debt_exists(record.id) is True
    assert repository.delete_debt(record.id) is True
    assert repository.debt_exists(record.id) is False
    assert repository.delete_debt(record.id) is False
    assert repository.fetch_debts("user-1") == []


def test_driver_errors_are_wrapped() -> None:
    """SQLAlchemy failures should surface as DebtRepositoryError."""
    repository = SqlAlchemyDebtsRepository(
        _DbPort(create_engine("sqlite://"))
    )

    with pytest.raises(DebtRepositoryError, match="user-1"):
        repository.fetch_debts("user-1")
