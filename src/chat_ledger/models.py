from datetime import date as Date
from decimal import Decimal
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

TransactionType = Literal["income", "expense"]
Confidence = Literal["low", "medium", "high"]
IntentSource = Literal["income_patterns", "expense_patterns", "verb_fallback", "default"]
ErrorKind = Literal["no_amount_found", "internal_failure"]


class Diagnostics(BaseModel):
    model_config = ConfigDict(frozen=True)

    verbs: list[str] = Field(default_factory=list)
    nouns: list[str] = Field(default_factory=list) # first three only
    detected_patterns: dict[str, bool] = Field(default_factory=dict)
    decided_by: IntentSource = "default"
    category_score: int = 0


class ParsedTransaction(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: TransactionType
    amount: Decimal = Field(gt=0)
    category: str
    description: str = Field(min_length=1)
    date: Date
    confidence: Confidence = "medium"
    diagnostics: Optional[Diagnostics] = None


class InterpretError(BaseModel):
    kind: ErrorKind
    message: str


class InterpretResult(BaseModel):
    success: bool
    transaction: Optional[ParsedTransaction] = None
    error: Optional[InterpretError] = None

    @classmethod
    def ok(cls, transaction: ParsedTransaction) -> "InterpretResult":
        return cls(success=True, transaction=transaction)

    @classmethod
    def fail(cls, kind: ErrorKind, message: str) -> "InterpretResult":
        return cls(success=False, error=InterpretError(kind=kind, message=message))


class IntentDecision(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: TransactionType
    confidence: Confidence
    source: IntentSource
