import asyncio
from datetime import datetime
from typing import Annotated

from fastapi import APIRouter, Depends

from chat_ledger.api.dependencies import get_interpreter
from chat_ledger.api.schemas import InterpretRequest
from chat_ledger.domain.taxonomy import all_categories
from chat_ledger.models import InterpretResult
from chat_ledger.services.interpreter import TransactionInterpreter

router = APIRouter()


@router.post("/interpret", response_model=InterpretResult)
async def interpret_text(
    req: InterpretRequest,
    interpreter: Annotated[TransactionInterpreter, Depends(get_interpreter)],
) -> InterpretResult:
    return await asyncio.to_thread(interpreter.interpret, req.text, datetime.now())


@router.get("/categories")
async def get_categories() -> list[str]:
    return all_categories()
