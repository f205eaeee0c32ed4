"""
Small curated lexicon standing in for part-of-speech tagging.

The taxonomy only ever asks "is this word one of a few known verbs or
keywords", so a fixed verb list plus a determiner rule is enough to tell
"paid the bill" (verb) from "my work" (noun).
"""
import re
from dataclasses import dataclass

from chat_ledger.domain.amounts import strip_currency

# Letters in any script, so "goté" stays one word instead of yielding "got"
TOKEN_PATTERN = re.compile(r"[^\W\d_]+(?:'[^\W\d_]+)?")

VERB_LEXICON = frozenset({
    # income
    "earn", "earns", "earned", "earning",
    "receive", "receives", "received", "receiving",
    "get", "gets", "got", "getting",
    "make", "makes", "made", "making",
    "sell", "sells", "sold", "selling",
    "win", "won",
    # expense
    "buy", "buys", "bought", "buying",
    "purchase", "purchased", "purchasing",
    "pay", "pays", "paid", "paying",
    "spend", "spends", "spent", "spending",
    "cost", "costs",
    "give", "gives", "gave", "given",
    "order", "orders", "ordered", "ordering",
    "owe", "owed",
    "charge", "charged",
    # food
    "eat", "ate", "eating", "dine", "dined", "feed", "fed", "cook", "cooked",
    # transport
    "drive", "drove", "ride", "rode", "travel", "travelled", "traveled",
    "commute", "commuted", "fly", "flew", "took", "take",
    # entertainment
    "watch", "watched", "play", "played", "enjoy", "enjoyed",
    "attend", "attended", "celebrate", "celebrated",
    # shopping
    "shop", "shopped",
    # health
    "visit", "visited", "consult", "consulted", "treat", "treated",
    "heal", "healed", "cure", "cured",
    # education
    "study", "studied", "learn", "learned", "learnt", "teach", "taught",
    "enroll", "enrolled", "graduate", "graduated",
    # freelance
    "work", "worked", "complete", "completed", "deliver", "delivered",
    "provide", "provided",
    # investment
    "invest", "invested", "trade", "traded",
})

# A lexicon word right after one of these is read as a noun ("my work", "the order").
NOUN_MARKERS = frozenset({
    "a", "an", "the", "my", "your", "his", "her", "our", "their", "its",
    "this", "that", "these", "those", "some", "from", "for", "of", "at", "on",
    "in", "with", "by", "per",
})

STOP_WORDS = frozenset({
    "i", "me", "we", "us", "you", "he", "she", "it", "they", "them",
    "my", "your", "his", "her", "our", "their", "its", "mine",
    "a", "an", "the", "this", "that", "these", "those", "some", "any",
    "and", "or", "but", "so", "then",
    "for", "from", "to", "at", "in", "on", "of", "with", "by", "per", "via", "into",
    "is", "was", "were", "am", "are", "be", "been", "being", "has", "have", "had",
    "do", "did", "does", "just", "also", "only", "today", "yesterday", "tonight",
    "today's", "i've", "i'm", "i'd",
})


@dataclass(frozen=True)
class LexicalAnalysis:
    text: str
    tokens: tuple[str, ...]
    verbs: tuple[str, ...]
    nouns: tuple[str, ...]


def tokenize(text: str) -> list[str]:
    return TOKEN_PATTERN.findall(text.lower())


def split_parts_of_speech(tokens: list[str]) -> tuple[list[str], list[str]]:
    verbs: list[str] = []
    nouns: list[str] = []
    previous: str | None = None
    for token in tokens:
        if token in VERB_LEXICON and previous not in NOUN_MARKERS:
            verbs.append(token)
        elif len(token) > 1 and token not in STOP_WORDS:
            nouns.append(token)
        previous = token
    return verbs, nouns


def analyze(text: str) -> LexicalAnalysis:
    cleaned = strip_currency(text).lower()
    tokens = tokenize(cleaned)
    verbs, nouns = split_parts_of_speech(tokens)
    return LexicalAnalysis(
        text=cleaned,
        tokens=tuple(tokens),
        verbs=tuple(verbs),
        nouns=tuple(nouns),
    )
