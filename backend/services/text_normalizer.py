"""
Text normalization for lexical retrieval.

Turns free text into the token stream used by every vector computation:
lowercase, punctuation stripped, stopwords and short words removed, and
each remaining word reduced by a small rule-based suffix stemmer.
"""
import re
from typing import List, Tuple

# Common English stopwords
STOPWORDS = frozenset({
    "a", "an", "and", "are", "as", "at", "be", "by", "for", "from", "has", "he",
    "in", "is", "it", "its", "of", "on", "that", "the", "to", "was", "will", "with",
    "this", "but", "they", "have", "had", "what", "said", "each", "which",
    "she", "do", "how", "their", "if", "up", "out", "many", "then", "them", "these",
    "so", "some", "her", "would", "make", "like", "into", "him", "time", "two",
    "more", "go", "no", "way", "could", "my", "than", "first", "been", "call",
    "who", "oil", "sit", "now", "find", "down", "day", "did", "get", "come",
    "made", "may", "part",
})

MIN_TOKEN_LENGTH = 3

# (suffix, replacement, token must be longer than), first match wins
STEM_RULES: Tuple[Tuple[str, str, int], ...] = (
    ("ies", "y", 3),
    ("ied", "y", 3),
    ("s", "", 3),
    ("ed", "", 4),
    ("ing", "", 5),
    ("ly", "", 4),
    ("er", "", 4),
    ("est", "", 5),
)

_NON_WORD = re.compile(r"[^\w\s]")


def stem(token: str) -> str:
    """Strip a common English suffix from a lowercase token."""
    for suffix, replacement, min_length in STEM_RULES:
        if not token.endswith(suffix) or len(token) <= min_length:
            continue
        if suffix == "s" and token.endswith("ss"):
            continue
        return token[:-len(suffix)] + replacement
    return token


def normalize(text: str) -> List[str]:
    """
    Normalize text into stemmed tokens.

    Args:
        text: Arbitrary input text

    Returns:
        Tokens in order of appearance (duplicates kept)
    """
    cleaned = _NON_WORD.sub(" ", text.lower())
    return [
        stem(token)
        for token in cleaned.split()
        if token not in STOPWORDS and len(token) >= MIN_TOKEN_LENGTH
    ]
