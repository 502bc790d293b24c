from __future__ import annotations

import re

from .rank import CandidateEvidence, KeywordCandidate

_CONTEXT_CHARS = 60


def _snippet(text: str, start: int, length: int) -> str:
    begin = max(0, start - _CONTEXT_CHARS)
    end = min(len(text), start + length + _CONTEXT_CHARS)
    return re.sub(r"\s+", " ", text[begin:end]).strip()


def attach_evidence(candidates: list[KeywordCandidate], resume_text: str) -> list[KeywordCandidate]:
    """Return copies of the candidates carrying a resume excerpt when the term occurs there."""
    enriched: list[KeywordCandidate] = []
    for candidate in candidates:
        pattern = re.compile(rf"\b{re.escape(candidate.term)}\b", re.IGNORECASE)
        match = pattern.search(resume_text or "")
        if match:
            evidence = CandidateEvidence(
                supported=True,
                excerpt=_snippet(resume_text, match.start(), len(candidate.term)),
            )
        else:
            evidence = CandidateEvidence(supported=False)
        enriched.append(candidate.model_copy(update={"evidence": evidence}))
    return enriched
