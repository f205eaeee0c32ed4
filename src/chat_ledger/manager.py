from chat_ledger.classifiers.base import IntentRule
from chat_ledger.classifiers.patterns import PatternRule, expense_rule, income_rule
from chat_ledger.classifiers.verbs import VerbFallbackRule
from chat_ledger.domain.lexicon import LexicalAnalysis
from chat_ledger.logger import get_logger
from chat_ledger.models import IntentDecision

logger = get_logger(__name__)

DEFAULT_DECISION = IntentDecision(type="expense", confidence="medium", source="default")


class IntentClassifier:
    def __init__(self, rules: list[IntentRule] | None = None):
        if rules is None:
            # Income first: the expense set has a broad "for ... <number>" shape
            # that would swallow "received 3000 from client".
            rules = [income_rule(), expense_rule(), VerbFallbackRule()]
        self.rules = rules

    def classify(self, analysis: LexicalAnalysis) -> IntentDecision:
        for rule in self.rules:
            decision = rule.classify(analysis)
            if decision:
                logger.debug(
                    f"{rule.name} decided '{decision.type}' "
                    f"(confidence: {decision.confidence}) for: '{analysis.text[:50]}'"
                )
                return decision
            logger.debug(f"{rule.name} returned: None")

        logger.debug(f"No intent rule matched, defaulting to expense: '{analysis.text[:50]}'")
        return DEFAULT_DECISION

    def detected_patterns(self, analysis: LexicalAnalysis) -> dict[str, bool]:
        """Which pattern families match, regardless of which one decided."""
        return {
            rule.type: rule.matches(analysis.text)
            for rule in self.rules
            if isinstance(rule, PatternRule)
        }
