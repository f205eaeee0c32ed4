import re
from decimal import Decimal

from chat_ledger.errors import NoAmountFound

# Optional thousands grouping, optional two-digit decimal: 350, 1,200, 99.50
AMOUNT_PATTERN = re.compile(r"[0-9]+(?:,[0-9]{3})*(?:\.[0-9]{2})?")

CURRENCY_PATTERN = re.compile(
    r"(?<![a-z])(?:taka|tk|bdt|dollars?|usd|euros?|rupees?|rs|inr)(?![a-z])|[৳$€]",
    re.IGNORECASE,
)

CURRENCY_CODES = {
    "taka": "BDT",
    "tk": "BDT",
    "bdt": "BDT",
    "৳": "BDT",
    "dollar": "USD",
    "dollars": "USD",
    "usd": "USD",
    "$": "USD",
    "euro": "EUR",
    "euros": "EUR",
    "€": "EUR",
    "rupee": "INR",
    "rupees": "INR",
    "rs": "INR",
    "inr": "INR",
}


def extract_amount(text: str) -> Decimal:
    """
    Return the first numeral in ``text`` as a positive Decimal.

    The first match wins even when a later number is the real price
    ("bought 2 shirts for 500" gives 2).
    """
    match = AMOUNT_PATTERN.search(text)
    if not match:
        raise NoAmountFound()
    amount = Decimal(match.group(0).replace(",", ""))
    if amount <= 0:
        raise NoAmountFound()
    return amount


def strip_currency(text: str) -> str:
    return CURRENCY_PATTERN.sub("", text)


def strip_numerals(text: str) -> str:
    return AMOUNT_PATTERN.sub("", text)


def detect_currency(text: str, default: str) -> str:
    match = CURRENCY_PATTERN.search(text)
    if not match:
        return default
    return CURRENCY_CODES.get(match.group(0).lower(), default)
