"""Keyword extraction from job titles and descriptions."""

import re

from matchwise.scoring.vocabulary import (
    BACKEND_SIGNALS,
    COMMON_WORDS,
    FRONTEND_SIGNALS,
    TECH_KEYWORDS,
)

# Pattern per vocabulary term, word-boundary anchored (ASCII word semantics)
_KEYWORD_PATTERNS: tuple[tuple[str, re.Pattern[str]], ...] = tuple(
    (keyword, re.compile(rf"\b{re.escape(keyword)}\b", re.IGNORECASE | re.ASCII))
    for keyword in TECH_KEYWORDS
)

_NON_ALNUM = re.compile(r"[^a-zA-Z0-9]")
_CAPITALIZED = re.compile(r"^[A-Z]")


def extract_keywords(text: str | None) -> list[str]:
    """Extract technology and domain keywords from free text.

    Three passes, results deduplicated in discovery order:

    1. Vocabulary terms (``TECH_KEYWORDS``) found on word boundaries.
    2. Capitalized tokens of 3+ alphanumeric characters that are not common
       English words, treated as proper-noun technology mentions
       ("Kafka" -> "kafka").
    3. Domain keywords injected from substrings, so "Senior UI Developer"
       always yields ``frontend``.

    Args:
        text: Job title and description, concatenated.

    Returns:
        Lowercase keywords; empty for blank input.
    """
    if not text or not text.strip():
        return []

    found: list[str] = []

    def add(keyword: str) -> None:
        if keyword not in found:
            found.append(keyword)

    lower_text = text.lower()

    for keyword, pattern in _KEYWORD_PATTERNS:
        if pattern.search(lower_text):
            add(keyword)

    for word in text.split():
        cleaned = _NON_ALNUM.sub("", word).lower()
        if len(cleaned) >= 3 and cleaned not in COMMON_WORDS and _CAPITALIZED.match(word):
            add(cleaned)

    if any(signal in lower_text for signal in FRONTEND_SIGNALS):
        add("frontend")
    if any(signal in lower_text for signal in BACKEND_SIGNALS):
        add("backend")
    if "full" in lower_text and "stack" in lower_text:
        add("fullstack")
        add("frontend")
        add("backend")

    return found
