from collections.abc import Generator
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient

from chat_ledger.app import create_app


@pytest.fixture
def client() -> Generator[TestClient, None, None]:
    with TestClient(create_app()) as test_client:
        yield test_client

def test_interpret(client: TestClient) -> None:
    response = client.post("/interpret", json={"text": "ordered food delivery for 800"})
    assert response.status_code == 200
    data = response.json()
    assert data["success"] is True
    assert data["error"] is None
    assert data["transaction"]["type"] == "expense"
    assert data["transaction"]["category"] == "food"
    assert Decimal(data["transaction"]["amount"]) == Decimal("800")

def test_interpret_without_amount(client: TestClient) -> None:
    response = client.post("/interpret", json={"text": "bought groceries"})
    assert response.status_code == 200
    data = response.json()
    assert data["success"] is False
    assert data["transaction"] is None
    assert data["error"]["kind"] == "no_amount_found"

def test_categories(client: TestClient) -> None:
    response = client.get("/categories")
    assert response.status_code == 200
    categories = response.json()
    assert categories[0] == "food"
    assert categories[-2:] == ["other", "other_income"]

def test_record_income(client: TestClient) -> None:
    response = client.post("/transactions", json={"text": "got my salary 50000"})
    assert response.status_code == 200
    data = response.json()
    assert data["entry"]["transaction"]["category"] == "salary"
    assert Decimal(data["balance"]["balance"]) == Decimal("50000")
    assert Decimal(data["balance"]["total_income"]) == Decimal("50000")
    assert data["message"].startswith("💰 Income Added!")

def test_failed_parse_leaves_ledger_alone(client: TestClient) -> None:
    response = client.post("/transactions", json={"text": "hello there"})
    assert response.status_code == 422
    assert "include a number" in response.json()["detail"]

    balance = client.get("/balance").json()
    assert Decimal(balance["balance"]) == 0
    assert client.get("/transactions").json() == []

def test_delete_reverts_balance(client: TestClient) -> None:
    recorded = client.post("/transactions", json={"text": "paid 1,200 tk electricity bill"}).json()
    assert "1,200 BDT" in recorded["message"]
    assert Decimal(recorded["balance"]["total_expense"]) == Decimal("1200")

    response = client.delete(f"/transactions/{recorded['entry']['id']}")
    assert response.status_code == 200
    balance = response.json()["balance"]
    assert Decimal(balance["balance"]) == 0
    assert Decimal(balance["total_expense"]) == 0

def test_delete_unknown(client: TestClient) -> None:
    response = client.delete("/transactions/does-not-exist")
    assert response.status_code == 404

def test_list_transactions_filter(client: TestClient) -> None:
    client.post("/transactions", json={"text": "got my salary 50000"})
    client.post("/transactions", json={"text": "lunch 300"})

    incomes = client.get("/transactions", params={"type": "income"}).json()
    assert len(incomes) == 1
    assert incomes[0]["transaction"]["category"] == "salary"
    assert len(client.get("/transactions").json()) == 2

def test_oversized_text_is_rejected(client: TestClient) -> None:
    response = client.post("/transactions", json={"text": "1 for" + " " * 5000 + "x"})
    assert response.status_code == 422
    assert client.get("/transactions").json() == []

def test_balance_summary(client: TestClient, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DEFAULT_CURRENCY", "BDT")
    client.post("/transactions", json={"text": "got my salary 50000"})
    client.post("/transactions", json={"text": "lunch 300"})

    response = client.get("/balance/summary")
    assert response.status_code == 200
    assert response.json() == {
        "balance": "BDT 49,700",
        "total_income": "BDT 50,000",
        "total_expense": "BDT 300",
        "spent_percent": 1,
    }
