from pydantic import BaseModel, Field

from chat_ledger.domain.ledger import LedgerBalance, LedgerEntry

# A chat message, not a document
MAX_TEXT_LENGTH = 1000


class InterpretRequest(BaseModel):
    text: str = Field(min_length=1, max_length=MAX_TEXT_LENGTH)


class RecordedTransaction(BaseModel):
    entry: LedgerEntry
    balance: LedgerBalance
    message: str


class DeletedTransaction(BaseModel):
    entry: LedgerEntry
    balance: LedgerBalance


class BalanceSummary(BaseModel):
    balance: str
    total_income: str
    total_expense: str
    spent_percent: int
