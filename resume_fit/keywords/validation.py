from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Literal

logger = logging.getLogger(__name__)

KeywordCategory = Literal["experience", "technical", "tools", "soft", "domain"]

_EXPERIENCE_RE = re.compile(r"\d+\+?\s*years?", re.IGNORECASE)
_ACRONYM_RE = re.compile(r"^[A-Z]{2,}$")
_INTERFACE_RE = re.compile(r"API|SDK|CLI|UI|UX", re.IGNORECASE)
_TOOLS_RE = re.compile(
    r"docker|kubernetes|jira|hubspot|salesforce|aws|azure|gcp|react|python|javascript|typescript|node\.?js",
    re.IGNORECASE,
)
_SOFT_RE = re.compile(r"leadership|communication|agile|remote|team|collaboration|scrum|kanban", re.IGNORECASE)

_SUGGESTIONS: dict[str, str] = {
    "experience": 'Add "{keyword}" to your job descriptions or summary to show you meet the experience requirement.',
    "technical": 'Add "{keyword}" to your skills section or mention it in relevant experience bullet points.',
    "tools": 'Add "{keyword}" to your skills section or describe projects where you used this tool.',
    "soft": 'Demonstrate "{keyword}" through specific examples in your experience descriptions.',
    "domain": 'Show "{keyword}" expertise by mentioning relevant projects, industries, or technologies in your experience.',
}


@dataclass(slots=True)
class KeywordValidationResult:
    valid: list[str] = field(default_factory=list)
    invalid: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)


@dataclass(slots=True)
class KeywordMatchDebug:
    keyword: str
    found: bool
    strategy: Literal["exact-phrase", "token"]
    details: str


def validate_extracted_keywords(keywords: list[str], job_description: str) -> KeywordValidationResult:
    """Split extracted keywords by whether they literally occur in the job description."""
    jd_lower = (job_description or "").lower()
    result = KeywordValidationResult()

    for keyword in keywords:
        if keyword.lower() in jd_lower:
            result.valid.append(keyword)
            continue
        result.invalid.append(keyword)
        result.warnings.append(f'Keyword "{keyword}" not found in job description')
        logger.warning("keyword_not_in_job_description keyword=%r", keyword)

    if result.invalid:
        logger.info(
            "keyword_validation invalid=%d total=%d",
            len(result.invalid),
            len(keywords),
        )
    return result


def is_keyword_present(keyword: str, resume_text: str, resume_tokens: set[str]) -> bool:
    """Multi-word phrases match as substrings; single words must be whole tokens."""
    keyword_lower = keyword.lower()
    if " " in keyword_lower:
        return keyword_lower in (resume_text or "").lower()
    return keyword_lower in resume_tokens


def categorize_keyword(keyword: str) -> KeywordCategory:
    if _EXPERIENCE_RE.search(keyword):
        return "experience"
    if _ACRONYM_RE.match(keyword) or _INTERFACE_RE.search(keyword):
        return "technical"
    if _TOOLS_RE.search(keyword):
        return "tools"
    if _SOFT_RE.search(keyword):
        return "soft"
    return "domain"


def debug_keyword_match(keyword: str, resume_text: str, resume_tokens: set[str]) -> KeywordMatchDebug:
    found = is_keyword_present(keyword, resume_text, resume_tokens)
    if " " in keyword:
        details = (
            f'Found exact phrase "{keyword}" in resume'
            if found
            else f'Phrase "{keyword}" not found. Resume may have partial matches only.'
        )
        return KeywordMatchDebug(keyword=keyword, found=found, strategy="exact-phrase", details=details)

    details = (
        f'Found token "{keyword}" in resume'
        if found
        else f'Token "{keyword}" not found. Check for variations or synonyms.'
    )
    return KeywordMatchDebug(keyword=keyword, found=found, strategy="token", details=details)


def get_suggestion_for_keyword(keyword: str) -> str:
    return _SUGGESTIONS[categorize_keyword(keyword)].format(keyword=keyword)
