"""Heuristic text utilities used for opportunity scoring and summaries."""

import re
from collections import Counter

POSITIVE_WORDS = ("good", "great", "excellent", "amazing", "wonderful")
NEGATIVE_WORDS = ("bad", "poor", "terrible", "awful", "horrible")


def score_relevance(content: str, keywords: list[str]) -> int:
    """
    Percentage (0-100) of keywords found in content, case-insensitive.

    Returns 0 when there are no keywords.
    """
    if not keywords:
        return 0
    lowered = (content or "").lower()
    matched = sum(1 for kw in keywords if kw.lower() in lowered)
    return int(matched * 100 / len(keywords) + 0.5)


def summarize(content: str, max_length: int = 200) -> str:
    """Truncate content to max_length characters, ending with '...' when cut"""
    content = content or ""
    if len(content) <= max_length:
        return content
    return content[: max_length - 3] + "..."


def extract_keywords(content: str, count: int = 5) -> list[str]:
    """Most frequent words longer than three characters"""
    words = re.findall(r"\b\w+\b", (content or "").lower())
    frequency = Counter(word for word in words if len(word) > 3)
    return [word for word, _ in frequency.most_common(count)]


def classify_sentiment(content: str) -> str:
    """'positive', 'negative' or 'neutral' by keyword counts"""
    lowered = (content or "").lower()
    positive = sum(1 for word in POSITIVE_WORDS if word in lowered)
    negative = sum(1 for word in NEGATIVE_WORDS if word in lowered)
    if positive > negative:
        return "positive"
    if negative > positive:
        return "negative"
    return "neutral"
