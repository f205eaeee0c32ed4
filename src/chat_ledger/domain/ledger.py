import threading
import uuid
from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

from chat_ledger.errors import LedgerError
from chat_ledger.logger import get_logger
from chat_ledger.models import ParsedTransaction, TransactionType

logger = get_logger(__name__)

ZERO = Decimal("0")


class LedgerBalance(BaseModel):
    model_config = ConfigDict(frozen=True)

    balance: Decimal = ZERO
    total_income: Decimal = ZERO
    total_expense: Decimal = ZERO

    def apply(self, transaction: ParsedTransaction) -> "LedgerBalance":
        amount = transaction.amount
        if transaction.type == "income":
            return LedgerBalance(
                balance=self.balance + amount,
                total_income=self.total_income + amount,
                total_expense=self.total_expense,
            )
        return LedgerBalance(
            balance=self.balance - amount,
            total_income=self.total_income,
            total_expense=self.total_expense + amount,
        )

    def revert(self, transaction: ParsedTransaction) -> "LedgerBalance":
        amount = transaction.amount
        if transaction.type == "income":
            return LedgerBalance(
                balance=self.balance - amount,
                total_income=self.total_income - amount,
                total_expense=self.total_expense,
            )
        return LedgerBalance(
            balance=self.balance + amount,
            total_income=self.total_income,
            total_expense=self.total_expense - amount,
        )


class LedgerEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    transaction: ParsedTransaction
    created_at: datetime = Field(default_factory=datetime.now)


class LedgerBook:
    """In-memory record of applied transactions and the running balance."""

    def __init__(self, opening: LedgerBalance | None = None):
        self._lock = threading.Lock()
        self._entries: dict[str, LedgerEntry] = {}
        self._balance = opening or LedgerBalance()

    @property
    def balance(self) -> LedgerBalance:
        return self._balance

    def record(self, transaction: ParsedTransaction) -> LedgerEntry:
        entry = LedgerEntry(id=uuid.uuid4().hex, transaction=transaction)
        with self._lock:
            self._entries[entry.id] = entry
            self._balance = self._balance.apply(transaction)
        logger.info("[LEDGER] Recorded %s %s (%s)", transaction.type, transaction.amount, entry.id)
        return entry

    def delete(self, entry_id: str) -> LedgerEntry:
        with self._lock:
            entry = self._entries.pop(entry_id, None)
            if entry is None:
                raise LedgerError(f"Unknown transaction '{entry_id}'")
            self._balance = self._balance.revert(entry.transaction)
        logger.info("[LEDGER] Reverted %s %s (%s)", entry.transaction.type, entry.transaction.amount, entry_id)
        return entry

    def entries(
        self,
        type: TransactionType | None = None,
        category: str | None = None,
        limit: int | None = None,
    ) -> list[LedgerEntry]:
        with self._lock:
            newest_first = list(reversed(self._entries.values()))
        # Stable sort keeps insertion recency among entries with the same date
        newest_first.sort(key=lambda entry: entry.transaction.date, reverse=True)
        selected = [
            entry for entry in newest_first
            if (type is None or entry.transaction.type == type)
            and (category is None or entry.transaction.category == category)
        ]
        if limit is not None:
            selected = selected[:limit]
        return selected
