import re
from typing import Protocol

from chat_ledger.domain.lexicon import LexicalAnalysis
from chat_ledger.models import IntentDecision, IntentSource, TransactionType

from .base import IntentRule


class Matcher(Protocol):
    def search(self, text: str) -> object: ...


INCOME_PATTERNS: tuple[Matcher, ...] = (
    # Income verbs
    re.compile(r"\b(earned|earn|received|receive|got|get|made|make|sold|sell)\b", re.IGNORECASE),
    # Income nouns
    re.compile(
        r"\b(salary|wage|paycheck|income|bonus|profit|revenue|commission|dividend|refund|cashback)\b",
        re.IGNORECASE,
    ),
    # Work sources
    re.compile(r"\bfrom\s+(work|job|client|company|freelance|project|gig)\b", re.IGNORECASE),
)

_WORD_RUN = re.compile(r"[\w\s]+")
_PREPOSITION = re.compile(r"\b(?:for|at|from|in|to)\s", re.IGNORECASE)
_SPACE_DIGIT = re.compile(r"\s\d")


class PrepositionBeforeNumber:
    """
    Matches the same texts as ``\\b(for|at|from|in|to)\\s+[\\w\\s]+\\s+\\d+``
    in linear time.

    A match lies inside one run of word/space characters: a preposition and a
    space, at least one more character, then a space and a digit. Taking the
    first preposition of each run and the first space-digit after it is enough.
    """

    def search(self, text: str) -> bool:
        for run in _WORD_RUN.finditer(text):
            start, end = run.span()
            preposition = _PREPOSITION.search(text, start, end)
            if preposition and _SPACE_DIGIT.search(text, preposition.end() + 1, end):
                return True
        return False


EXPENSE_PATTERNS: tuple[Matcher, ...] = (
    # Expense verbs
    re.compile(
        r"\b(bought|buy|purchased|purchase|paid|pay|spent|spend|cost|gave|give|ordered|order)\b",
        re.IGNORECASE,
    ),
    # "<preposition> <words> <number>", e.g. "for lunch 300"
    PrepositionBeforeNumber(),
    # Bills and fees
    re.compile(r"\b(bill|invoice|charge|fee|fine|penalty)\b", re.IGNORECASE),
    # Shopping venues
    re.compile(r"\b(shopping|store|mall|market|shop)\b", re.IGNORECASE),
)


class PatternRule(IntentRule):
    def __init__(
        self,
        name: IntentSource,
        type: TransactionType,
        patterns: tuple[Matcher, ...],
    ):
        self.name = name
        self.type = type
        self.patterns = patterns

    def matches(self, text: str) -> bool:
        return any(pattern.search(text) for pattern in self.patterns)

    def classify(self, analysis: LexicalAnalysis) -> IntentDecision | None:
        if not self.matches(analysis.text):
            return None
        return IntentDecision(type=self.type, confidence="high", source=self.name)


def income_rule() -> PatternRule:
    return PatternRule("income_patterns", "income", INCOME_PATTERNS)


def expense_rule() -> PatternRule:
    return PatternRule("expense_patterns", "expense", EXPENSE_PATTERNS)
