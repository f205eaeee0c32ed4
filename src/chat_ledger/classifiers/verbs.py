from chat_ledger.domain.lexicon import LexicalAnalysis
from chat_ledger.models import IntentDecision

from .base import IntentRule

INCOME_VERBS = frozenset({"earned", "received", "got", "made", "sold"})
EXPENSE_VERBS = frozenset({"bought", "paid", "spent", "purchased", "ordered"})


class VerbFallbackRule(IntentRule):
    """Looks only at the recognized verbs, for texts no pattern caught."""

    name = "verb_fallback"

    def classify(self, analysis: LexicalAnalysis) -> IntentDecision | None:
        verbs = set(analysis.verbs)
        if verbs & INCOME_VERBS:
            return IntentDecision(type="income", confidence="medium", source=self.name)
        if verbs & EXPENSE_VERBS:
            return IntentDecision(type="expense", confidence="medium", source=self.name)
        return None
