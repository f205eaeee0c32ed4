from datetime import datetime

from chat_ledger.domain.amounts import extract_amount
from chat_ledger.domain.lexicon import analyze
from chat_ledger.errors import INTERNAL_FAILURE_MESSAGE, NoAmountFound
from chat_ledger.logger import get_logger
from chat_ledger.manager import IntentClassifier
from chat_ledger.models import Confidence, Diagnostics, InterpretResult, ParsedTransaction
from chat_ledger.services.description import build_description
from chat_ledger.services.scoring import CategoryScorer

logger = get_logger(__name__)

MAX_DIAGNOSTIC_NOUNS = 3
# A generic category score above this reports high confidence on its own.
STRONG_CATEGORY_SCORE = 3


class TransactionInterpreter:
    """
    Turns one free-text sentence into a ParsedTransaction.

    Stages run in a fixed order: amount, intent, category, description.
    Nothing is kept between calls, so one instance can be shared freely.
    """

    def __init__(
        self,
        classifier: IntentClassifier | None = None,
        scorer: CategoryScorer | None = None,
        include_diagnostics: bool = True,
    ):
        self.classifier = classifier or IntentClassifier()
        self.scorer = scorer or CategoryScorer()
        self.include_diagnostics = include_diagnostics

    def interpret(self, text: str, now: datetime) -> InterpretResult:
        try:
            transaction = self._parse(text, now)
        except NoAmountFound as exc:
            logger.debug("[INTERPRET] No amount in: '%s'", text[:50])
            return InterpretResult.fail("no_amount_found", exc.message)
        except Exception:
            logger.exception("[INTERPRET] Failed to parse: '%s'", text[:50])
            return InterpretResult.fail("internal_failure", INTERNAL_FAILURE_MESSAGE)

        logger.info(
            "[INTERPRET] %s %s -> %s (confidence: %s)",
            transaction.type,
            transaction.amount,
            transaction.category,
            transaction.confidence,
        )
        return InterpretResult.ok(transaction)

    def _parse(self, text: str, now: datetime) -> ParsedTransaction:
        amount = extract_amount(text)
        analysis = analyze(text)

        decision = self.classifier.classify(analysis)
        best = self.scorer.categorize(analysis, decision.type)

        confidence: Confidence = decision.confidence
        if best.score > STRONG_CATEGORY_SCORE:
            confidence = "high"

        diagnostics = None
        if self.include_diagnostics:
            diagnostics = Diagnostics(
                verbs=list(analysis.verbs),
                nouns=list(analysis.nouns[:MAX_DIAGNOSTIC_NOUNS]),
                detected_patterns=self.classifier.detected_patterns(analysis),
                decided_by=decision.source,
                category_score=best.score,
            )

        return ParsedTransaction(
            type=decision.type,
            amount=amount,
            category=best.category,
            description=build_description(text, decision.type, best.category),
            date=now.date(),
            confidence=confidence,
            diagnostics=diagnostics,
        )


_default_interpreter = TransactionInterpreter()


def interpret(text: str, now: datetime | None = None) -> InterpretResult:
    return _default_interpreter.interpret(text, now or datetime.now())
