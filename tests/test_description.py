import pytest

from chat_ledger.services.description import build_description


@pytest.mark.parametrize(
    "text,expected",
    [
        ("Bought 2 shirts for 500 taka", "Shirts for"),
        ("Paid - 1,200 tk electricity bill", "Electricity bill"),
        ("received 3000 from client for project", "From client for project"),
        ("I bought groceries for 500 taka", "I bought groceries for"),
        ("coffee   at   the   cafe $4.50", "Coffee at the cafe"),
    ],
)
def test_build_description(text: str, expected: str) -> None:
    assert build_description(text, "expense", "other") == expected

def test_leading_verb_must_be_whole_word() -> None:
    assert build_description("paying rent 5000", "expense", "bills") == "Paying rent"

def test_short_description_falls_back() -> None:
    assert build_description("500", "expense", "other") == "Expense - other"
    assert build_description("got 20", "income", "other_income") == "Income - other_income"
