from abc import ABC, abstractmethod

from chat_ledger.domain.lexicon import LexicalAnalysis
from chat_ledger.models import IntentDecision


class IntentRule(ABC):
    name: str = "rule"

    @abstractmethod
    def classify(self, analysis: LexicalAnalysis) -> IntentDecision | None:
        """Decide income vs. expense, or return None to defer to the next rule."""
        pass
