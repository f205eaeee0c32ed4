from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from chat_ledger.domain.lexicon import LexicalAnalysis
from chat_ledger.domain.taxonomy import (
    CATEGORY_TAXONOMY,
    INCOME_OVERRIDES,
    OTHER,
    OTHER_INCOME,
    CategorySignals,
)
from chat_ledger.models import TransactionType

KEYWORD_WEIGHT = 2
VERB_WEIGHT = 3
NOUN_WEIGHT = 1


@dataclass(frozen=True)
class CategoryScore:
    category: str
    score: int


def score_category(signals: CategorySignals, analysis: LexicalAnalysis) -> int:
    keyword_hits = sum(1 for keyword in signals.keywords if keyword in analysis.text)
    verb_hits = sum(1 for verb in signals.verbs if verb in analysis.verbs)
    noun_hits = sum(1 for noun in analysis.nouns if noun in signals.keywords)
    return keyword_hits * KEYWORD_WEIGHT + verb_hits * VERB_WEIGHT + noun_hits * NOUN_WEIGHT


class CategoryScorer:
    def __init__(self, taxonomy: Mapping[str, CategorySignals] = CATEGORY_TAXONOMY):
        self.taxonomy = taxonomy

    def score_all(self, analysis: LexicalAnalysis) -> Mapping[str, int]:
        return MappingProxyType({
            category: score_category(signals, analysis)
            for category, signals in self.taxonomy.items()
        })

    @staticmethod
    def pick(scores: Mapping[str, int]) -> CategoryScore:
        # A later category has to beat the leader outright to take over.
        best = CategoryScore(OTHER, 0)
        for category, score in scores.items():
            if score > best.score:
                best = CategoryScore(category, score)
        return best

    def categorize(self, analysis: LexicalAnalysis, type: TransactionType) -> CategoryScore:
        best = self.pick(self.score_all(analysis))
        if type != "income":
            return best
        return CategoryScore(apply_income_override(analysis.text, best), best.score)


def apply_income_override(text: str, best: CategoryScore) -> str:
    for category, markers in INCOME_OVERRIDES:
        if any(marker in text for marker in markers):
            return category
    if best.score == 0:
        return OTHER_INCOME
    return best.category
