from datetime import date
from decimal import Decimal

import pytest

from chat_ledger.domain.ledger import LedgerBalance, LedgerBook
from chat_ledger.errors import LedgerError
from chat_ledger.models import ParsedTransaction, TransactionType


def make_transaction(
    type: TransactionType,
    amount: str,
    category: str = "other",
    day: date = date(2024, 5, 17),
) -> ParsedTransaction:
    return ParsedTransaction(
        type=type,
        amount=Decimal(amount),
        category=category,
        description="Test transaction",
        date=day,
    )

@pytest.fixture
def opening() -> LedgerBalance:
    return LedgerBalance(
        balance=Decimal("1000.50"),
        total_income=Decimal("2000"),
        total_expense=Decimal("999.50"),
    )

def test_apply_income(opening: LedgerBalance) -> None:
    after = opening.apply(make_transaction("income", "250.25"))
    assert after.balance == Decimal("1250.75")
    assert after.total_income == Decimal("2250.25")
    assert after.total_expense == Decimal("999.50")

def test_apply_expense(opening: LedgerBalance) -> None:
    after = opening.apply(make_transaction("expense", "0.50"))
    assert after.balance == Decimal("1000.00")
    assert after.total_income == Decimal("2000")
    assert after.total_expense == Decimal("1000.00")

@pytest.mark.parametrize("type", ["income", "expense"])
def test_revert_restores_totals(opening: LedgerBalance, type: TransactionType) -> None:
    tx = make_transaction(type, "1234.56")
    assert opening.apply(tx).revert(tx) == opening

def test_book_records_and_deletes() -> None:
    book = LedgerBook()
    salary = book.record(make_transaction("income", "50000", "salary"))
    lunch = book.record(make_transaction("expense", "300", "food"))

    assert book.balance.balance == Decimal("49700")
    assert book.balance.total_expense == Decimal("300")

    book.delete(lunch.id)
    book.delete(salary.id)
    assert book.balance == LedgerBalance()
    assert book.entries() == []

def test_delete_unknown_entry() -> None:
    book = LedgerBook()
    book.record(make_transaction("expense", "10"))
    with pytest.raises(LedgerError):
        book.delete("missing")
    assert book.balance.total_expense == Decimal("10")

def test_entries_newest_first_with_filters() -> None:
    book = LedgerBook()
    old = book.record(make_transaction("expense", "10", "food", day=date(2024, 5, 1)))
    recent = book.record(make_transaction("expense", "20", "transport", day=date(2024, 5, 20)))
    same_day = book.record(make_transaction("income", "30", "salary", day=date(2024, 5, 20)))

    assert [e.id for e in book.entries()] == [same_day.id, recent.id, old.id]
    assert [e.id for e in book.entries(type="expense")] == [recent.id, old.id]
    assert [e.id for e in book.entries(category="food")] == [old.id]
    assert [e.id for e in book.entries(limit=1)] == [same_day.id]
