from __future__ import annotations

import re

STOP_WORDS: frozenset[str] = frozenset(
    {
        "and", "or", "the", "a", "an", "to", "of", "for", "with", "in", "on", "at", "by", "from", "as",
        "is", "are", "be", "have", "has", "was", "were", "this", "that", "it", "you", "we", "they", "i",
    }
)

# Wider list used when building per-section term sets for scoring.
SCORING_STOP_WORDS: frozenset[str] = STOP_WORDS | frozenset(
    {
        "but", "been", "had", "do", "does", "did", "will", "would", "could", "should", "may",
        "might", "can", "must", "shall", "these", "those", "he", "she", "what", "which", "who",
        "when", "where", "why", "how", "all", "each", "every", "both", "few", "more", "most",
        "some", "such",
    }
)

_NON_TOKEN_RE = re.compile(r"[^a-z0-9+#./\-\s]")
_MIN_TOKEN_LEN = 3


def tokenize(text: str | None, stop_words: frozenset[str] = STOP_WORDS) -> list[str]:
    """Lowercase, strip non-token characters and drop stop words and tokens shorter than three chars."""
    cleaned = _NON_TOKEN_RE.sub(" ", (text or "").lower())
    return [token for token in cleaned.split() if len(token) >= _MIN_TOKEN_LEN and token not in stop_words]
