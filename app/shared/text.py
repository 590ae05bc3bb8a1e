import re
from collections.abc import Iterable
from functools import lru_cache

# Keywords this short only count as whole words ("ai" must not match "said")
SHORT_KEYWORD_MAX_LEN = 3


@lru_cache(maxsize=1024)
def keyword_pattern(keyword: str) -> re.Pattern[str]:
    """Compile the case-insensitive matcher for a keyword."""
    escaped = re.escape(keyword.lower())
    if len(keyword) <= SHORT_KEYWORD_MAX_LEN:
        escaped = rf"\b{escaped}\b"
    return re.compile(escaped, re.IGNORECASE)


def count_occurrences(text: str, keyword: str) -> int:
    """Count every occurrence of keyword in text."""
    if not text or not keyword:
        return 0
    return len(keyword_pattern(keyword).findall(text))


def contains_keyword(text: str, keyword: str) -> bool:
    if not text or not keyword:
        return False
    return keyword_pattern(keyword).search(text) is not None


def matched_keywords(text: str, keywords: Iterable[str]) -> list[str]:
    """Return keywords present in text, preserving their table order."""
    return [kw for kw in keywords if contains_keyword(text, kw)]


def normalize_tag(tag: str) -> str:
    """'Machine-Learning' -> 'machine learning'"""
    return re.sub(r"[-_\s]+", " ", tag or "").strip().lower()
