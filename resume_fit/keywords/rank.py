from __future__ import annotations

import re
from collections import Counter
from collections.abc import Callable
from typing import Literal

from pydantic import BaseModel, Field

JDSection = Literal["requirements", "responsibilities", "preferred", "other"]
TermType = Literal["tool", "method", "domain", "metric", "soft"]
CandidatePriority = Literal["critical", "important", "nice"]
Placement = Literal["skills", "summary", "bullet"]

_TOOL_RE = re.compile(r"sql|python|hubspot|salesforce|segment|mixpanel|amplitude|figma|jira", re.IGNORECASE)
_METHOD_RE = re.compile(r"a/?b|experimentation|nurture|roadmap|research|funnels?|onboarding|retention", re.IGNORECASE)
_DOMAIN_RE = re.compile(r"real.?estate|fintech|health", re.IGNORECASE)
_METRIC_RE = re.compile(r"nps|conversion|mau|arr|retention|churn", re.IGNORECASE)

_SECTION_WEIGHTS: dict[str, int] = {"requirements": 3, "responsibilities": 2, "preferred": 1, "other": 0}
_TYPE_WEIGHTS: dict[str, float] = {"tool": 2.0, "method": 1.5, "domain": 1.5, "metric": 1.0, "soft": 0.5}
_PLACEMENTS: dict[str, list[Placement]] = {
    "tool": ["skills", "bullet"],
    "method": ["summary", "bullet"],
    "domain": ["summary", "bullet"],
    "metric": ["bullet"],
    "soft": ["bullet"],
}


class CandidateEvidence(BaseModel):
    supported: bool
    excerpt: str | None = None


class KeywordCandidate(BaseModel):
    term: str
    jd_tf: int = Field(ge=0)
    jd_section: JDSection = "other"
    type: TermType
    resume_present: bool
    resume_freq: int = Field(ge=0)
    score: float
    priority: CandidatePriority
    where: list[Placement] = Field(default_factory=list)
    evidence: CandidateEvidence | None = None


def classify_term(term: str) -> TermType:
    if _TOOL_RE.search(term):
        return "tool"
    if _METHOD_RE.search(term):
        return "method"
    if _DOMAIN_RE.search(term):
        return "domain"
    if _METRIC_RE.search(term):
        return "metric"
    return "soft"


def rank_candidates(
    jd_tokens: list[str],
    resume_tokens: list[str],
    *,
    jd_section_index: dict[str, JDSection] | None = None,
    type_classifier: Callable[[str], TermType] | None = None,
) -> list[KeywordCandidate]:
    """Score every job-description term; terms missing from the resume bubble up."""
    jd_freq = Counter(jd_tokens)
    resume_freq = Counter(resume_tokens)
    section_index = jd_section_index or {}
    classify = type_classifier or classify_term

    candidates: list[KeywordCandidate] = []
    for term in jd_freq:
        jd_tf = jd_freq[term]
        in_resume = resume_freq.get(term, 0)
        jd_section = section_index.get(term, "other")
        section_weight = _SECTION_WEIGHTS[jd_section]
        term_type = classify(term)

        score = (
            5 * section_weight
            + 3 * jd_tf
            + 2 * _TYPE_WEIGHTS[term_type]
            + (2 if in_resume else 0)
            - (0.9 if in_resume else 0)
        )

        if section_weight >= 3:
            priority: CandidatePriority = "critical"
        elif section_weight >= 2:
            priority = "important"
        else:
            priority = "nice"

        candidates.append(
            KeywordCandidate(
                term=term,
                jd_tf=jd_tf,
                jd_section=jd_section,
                type=term_type,
                resume_present=in_resume > 0,
                resume_freq=in_resume,
                score=score,
                priority=priority,
                where=list(_PLACEMENTS[term_type]),
            )
        )

    candidates.sort(key=lambda item: item.score, reverse=True)
    return candidates
