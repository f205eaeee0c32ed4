from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

OTHER = "other"
OTHER_INCOME = "other_income"


@dataclass(frozen=True)
class CategorySignals:
    keywords: tuple[str, ...]
    verbs: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if not self.keywords:
            raise ValueError("A category needs at least one keyword.")


def build_taxonomy(entries: Mapping[str, CategorySignals]) -> Mapping[str, CategorySignals]:
    """Freeze a category table. Iteration order is the tie-break order."""
    return MappingProxyType(dict(entries))


CATEGORY_TAXONOMY: Mapping[str, CategorySignals] = build_taxonomy({
    "food": CategorySignals(
        keywords=(
            "food", "restaurant", "grocery", "groceries", "meal", "lunch", "dinner",
            "breakfast", "snack", "ate", "eat", "pizza", "burger", "rice", "chicken",
            "vegetable", "fruit", "apple", "banana", "coffee", "tea", "cake", "bread",
            "milk", "fish", "meat", "cooking", "kitchen", "recipe", "dish", "cuisine",
            "menu", "cafe", "bistro", "dine", "feed",
        ),
        verbs=("ate", "eat", "dine", "feed", "cook", "order"),
    ),
    "transport": CategorySignals(
        keywords=(
            "transport", "uber", "taxi", "bus", "train", "rickshaw", "fuel", "petrol",
            "gas", "parking", "toll", "ride", "car", "bike", "motorcycle", "aviation",
            "flight", "airline", "metro", "subway", "ferry", "boat", "ship",
        ),
        verbs=("drive", "ride", "travel", "commute", "fly"),
    ),
    "entertainment": CategorySignals(
        keywords=(
            "movie", "cinema", "game", "gaming", "concert", "show", "netflix", "spotify",
            "entertainment", "fun", "party", "music", "tv", "theater", "sports", "club",
            "bar", "pub", "disco", "festival", "event",
        ),
        verbs=("watch", "play", "enjoy", "attend", "celebrate"),
    ),
    "shopping": CategorySignals(
        keywords=(
            "shopping", "clothes", "shirt", "shoes", "dress", "mall", "online", "amazon",
            "flipkart", "fashion", "buy", "bought", "store", "shop", "market", "purchase",
            "retail", "brand", "item", "product",
        ),
        verbs=("buy", "bought", "purchase", "shop", "order"),
    ),
    "bills": CategorySignals(
        keywords=(
            "bill", "electricity", "water", "internet", "wifi", "phone", "mobile", "rent",
            "utility", "subscription", "insurance", "loan", "mortgage", "tax", "fine",
            "penalty", "fee", "charge",
        ),
        verbs=("pay", "paid", "owe", "charge"),
    ),
    "health": CategorySignals(
        keywords=(
            "doctor", "medicine", "hospital", "pharmacy", "medical", "health", "clinic",
            "checkup", "treatment", "surgery", "therapy", "dentist", "nurse", "patient",
            "diagnosis", "prescription",
        ),
        verbs=("visit", "consult", "treat", "heal", "cure"),
    ),
    "education": CategorySignals(
        keywords=(
            "book", "course", "class", "tuition", "school", "college", "university",
            "education", "study", "learning", "lesson", "teacher", "student", "exam",
            "degree", "certification",
        ),
        verbs=("study", "learn", "teach", "enroll", "graduate"),
    ),
    "salary": CategorySignals(
        keywords=(
            "salary", "wage", "paycheck", "income", "payment", "bonus", "overtime",
            "commission", "allowance", "stipend",
        ),
        verbs=("earned", "receive", "got", "paid"),
    ),
    "freelance": CategorySignals(
        keywords=(
            "freelance", "project", "client", "gig", "contract", "consulting", "service",
            "work", "job", "task", "assignment",
        ),
        verbs=("work", "complete", "deliver", "provide"),
    ),
    "investment": CategorySignals(
        keywords=(
            "investment", "stock", "share", "mutual", "fund", "bond", "dividend", "profit",
            "capital", "trading", "portfolio",
        ),
        verbs=("invest", "trade", "buy", "sell"),
    ),
})

# Checked in order; the first group found in the text decides the income category.
INCOME_OVERRIDES: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("salary", ("salary", "wage", "paycheck")),
    ("freelance", ("freelance", "project", "gig")),
    ("investment", ("investment", "dividend", "stock")),
)


def all_categories() -> list[str]:
    return [*CATEGORY_TAXONOMY.keys(), OTHER, OTHER_INCOME]
