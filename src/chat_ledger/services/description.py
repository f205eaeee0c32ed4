import re

from chat_ledger.domain.amounts import strip_currency, strip_numerals
from chat_ledger.models import TransactionType

MIN_DESCRIPTION_LENGTH = 3

LEADING_VERB_PATTERN = re.compile(
    r"^\s*(bought|buy|purchased|purchase|paid|pay|spent|spend|earned|earn|"
    r"received|receive|got|get)\b\s*",
    re.IGNORECASE,
)
WHITESPACE_PATTERN = re.compile(r"\s+")
LEADING_PUNCTUATION_PATTERN = re.compile(r"^[\s,.;:!\-–—]+")


def build_description(original_text: str, type: TransactionType, category: str) -> str:
    """
    Derive a display label from the user's own wording.

    "Bought 2 shirts for 500 taka" becomes "Shirts for". When almost nothing
    is left ("500") the label is synthesized from type and category instead.
    """
    description = strip_currency(original_text)
    description = strip_numerals(description)
    description = LEADING_VERB_PATTERN.sub("", description, count=1)
    description = WHITESPACE_PATTERN.sub(" ", description)
    description = LEADING_PUNCTUATION_PATTERN.sub("", description).rstrip()

    if len(description) < MIN_DESCRIPTION_LENGTH:
        label = "Income" if type == "income" else "Expense"
        return f"{label} - {category}"

    return description[0].upper() + description[1:]
