import asyncio
from datetime import datetime
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query

from chat_ledger.api.dependencies import get_interpreter, get_ledger
from chat_ledger.api.schemas import (
    BalanceSummary,
    DeletedTransaction,
    InterpretRequest,
    RecordedTransaction,
)
from chat_ledger.core import settings
from chat_ledger.domain.amounts import detect_currency
from chat_ledger.domain.formatting import format_transaction_message, summarize_balance
from chat_ledger.domain.ledger import LedgerBalance, LedgerBook, LedgerEntry
from chat_ledger.errors import LedgerError
from chat_ledger.logger import get_logger
from chat_ledger.models import TransactionType
from chat_ledger.services.interpreter import TransactionInterpreter

logger = get_logger(__name__)

router = APIRouter()


@router.post("/transactions", response_model=RecordedTransaction)
async def record_transaction(
    req: InterpretRequest,
    interpreter: Annotated[TransactionInterpreter, Depends(get_interpreter)],
    ledger: Annotated[LedgerBook, Depends(get_ledger)],
) -> RecordedTransaction:
    result = await asyncio.to_thread(interpreter.interpret, req.text, datetime.now())
    if not result.success or result.transaction is None:
        # Nothing happened; the ledger stays as it was.
        detail = result.error.message if result.error else "Failed to parse your message."
        raise HTTPException(status_code=422, detail=detail)

    entry = ledger.record(result.transaction)
    currency = detect_currency(req.text, settings.get_default_currency())
    return RecordedTransaction(
        entry=entry,
        balance=ledger.balance,
        message=format_transaction_message(result.transaction, currency),
    )


@router.delete("/transactions/{entry_id}", response_model=DeletedTransaction)
async def delete_transaction(
    entry_id: str,
    ledger: Annotated[LedgerBook, Depends(get_ledger)],
) -> DeletedTransaction:
    try:
        entry = ledger.delete(entry_id)
    except LedgerError as e:
        logger.warning(f"[LEDGER] {e}")
        raise HTTPException(status_code=404, detail=str(e)) from e
    return DeletedTransaction(entry=entry, balance=ledger.balance)


@router.get("/transactions", response_model=list[LedgerEntry])
async def list_transactions(
    ledger: Annotated[LedgerBook, Depends(get_ledger)],
    type: TransactionType | None = None,
    category: str | None = None,
    limit: Annotated[int | None, Query(ge=1)] = None,
) -> list[LedgerEntry]:
    return ledger.entries(type=type, category=category, limit=limit)


@router.get("/balance", response_model=LedgerBalance)
async def get_balance(
    ledger: Annotated[LedgerBook, Depends(get_ledger)],
) -> LedgerBalance:
    return ledger.balance


@router.get("/balance/summary", response_model=BalanceSummary)
async def get_balance_summary(
    ledger: Annotated[LedgerBook, Depends(get_ledger)],
) -> BalanceSummary:
    summary = summarize_balance(ledger.balance, settings.get_default_currency())
    return BalanceSummary(**summary)
