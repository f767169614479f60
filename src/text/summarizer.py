"""Keyword-scored extractive summarizer."""

from __future__ import annotations

import re

KEYWORDS: tuple[str, ...] = (
    "important",
    "key",
    "main",
    "conclusion",
    "summary",
    "takeaway",
    "result",
    "finding",
    "analysis",
    "research",
)

_SENTENCE_SPLIT_RE = re.compile(r"[.!?]+")


def split_sentences(text: str, min_length: int = 10) -> list[str]:
    parts = (s.strip() for s in _SENTENCE_SPLIT_RE.split(text))
    return [s for s in parts if len(s) > min_length]


def score_sentence(sentence: str, keywords: tuple[str, ...] = KEYWORDS) -> int:
    lowered = sentence.lower()
    return sum(1 for keyword in keywords if keyword in lowered)


def summarise(text: str, max_sentences: int = 3) -> str:
    """Return the *max_sentences* sentences mentioning the most keywords.

    Ties keep document order. Sentences of ten characters or fewer are
    ignored.
    """
    if not text or not text.strip():
        return ""

    sentences = split_sentences(text)
    if not sentences:
        return ""

    ranked = sorted(sentences, key=score_sentence, reverse=True)
    return ". ".join(ranked[:max_sentences]) + "."
