from decimal import ROUND_HALF_UP, Decimal

from chat_ledger.domain.ledger import LedgerBalance
from chat_ledger.models import ParsedTransaction

CATEGORY_EMOJI = {
    "food": "🍔",
    "transport": "🚗",
    "entertainment": "🎬",
    "shopping": "🛍️",
    "bills": "📄",
    "health": "🏥",
    "education": "📚",
    "salary": "💼",
    "freelance": "💻",
    "investment": "📈",
    "other": "📦",
    "other_income": "💰",
}
FALLBACK_EMOJI = "📦"


def category_emoji(category: str) -> str:
    return CATEGORY_EMOJI.get(category, FALLBACK_EMOJI)


def format_amount(amount: Decimal) -> str:
    if amount == amount.to_integral_value():
        return f"{amount:,.0f}"
    return f"{amount:,.2f}"


def format_currency(amount: Decimal, currency: str) -> str:
    return f"{currency} {format_amount(amount)}"


def format_transaction_message(transaction: ParsedTransaction, currency: str) -> str:
    """Chat reply confirming a recorded transaction."""
    if transaction.type == "income":
        emoji, label = "💰", "Income"
    else:
        emoji, label = "💸", "Expense"
    return (
        f"{emoji} {label} Added!\n"
        f"💵 Amount: {format_amount(transaction.amount)} {currency}\n"
        f"📝 {transaction.description}\n"
        f"🏷️ Category: {category_emoji(transaction.category)} {transaction.category}"
    )


def calculate_percentage(part: Decimal | int, total: Decimal | int) -> int:
    if total == 0:
        return 0
    return int((Decimal(part) / Decimal(total) * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def summarize_balance(balance: LedgerBalance, currency: str) -> dict[str, str | int]:
    return {
        "balance": format_currency(balance.balance, currency),
        "total_income": format_currency(balance.total_income, currency),
        "total_expense": format_currency(balance.total_expense, currency),
        # Share of income already spent
        "spent_percent": calculate_percentage(balance.total_expense, balance.total_income),
    }
