from __future__ import annotations

from collections import Counter

from resume_fit.schemas import KeywordSets

from .tokenize import tokenize

KEYWORD_CAP = 40
MISSING_CAP = 25


def rank_by_frequency(tokens: list[str], limit: int = KEYWORD_CAP) -> list[str]:
    # Counter keeps first-seen order and most_common sorts stably, so ties stay in text order.
    return [token for token, _ in Counter(tokens).most_common(limit)]


def extract_keywords(resume_text: str | None, jd_text: str | None) -> KeywordSets:
    resume_keywords = rank_by_frequency(tokenize(resume_text))
    jd_keywords = rank_by_frequency(tokenize(jd_text))

    present = set(resume_keywords)
    missing = [keyword for keyword in jd_keywords if keyword not in present][:MISSING_CAP]

    return KeywordSets(
        resume_keywords=resume_keywords,
        jd_keywords=jd_keywords,
        missing_in_resume=missing,
    )
