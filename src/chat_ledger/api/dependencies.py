from fastapi import HTTPException, Request

from chat_ledger.domain.ledger import LedgerBook
from chat_ledger.services.interpreter import TransactionInterpreter


def get_interpreter(request: Request) -> TransactionInterpreter:
    interpreter = getattr(request.app.state, "interpreter", None)
    if not interpreter:
        raise HTTPException(status_code=500, detail="Interpreter not initialized")
    return interpreter


def get_ledger(request: Request) -> LedgerBook:
    ledger = getattr(request.app.state, "ledger", None)
    if ledger is None:
        raise HTTPException(status_code=500, detail="Ledger not initialized")
    return ledger
