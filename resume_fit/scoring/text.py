from __future__ import annotations

import re
from dataclasses import dataclass

from resume_fit.keywords.tokenize import SCORING_STOP_WORDS, tokenize
from resume_fit.schemas import Experience, ResumeData

ACTION_VERBS: frozenset[str] = frozenset(
    {
        # leadership / strategy
        "led", "directed", "managed", "oversaw", "headed", "chaired", "orchestrated",
        "spearheaded", "championed", "pioneered", "established", "founded", "shaped",
        "owned", "governed",
        # building / creating
        "built", "created", "designed", "developed", "engineered", "architected",
        "constructed", "launched", "shipped", "deployed", "implemented", "prototyped",
        "configured", "assembled", "authored", "produced", "crafted",
        # improving / optimizing
        "improved", "optimized", "streamlined", "revamped", "redesigned", "rebuilt",
        "restructured", "modernized", "upgraded", "refined", "enhanced", "transformed",
        "overhauled", "consolidated", "strengthened", "elevated", "repositioned",
        # analysis / research
        "analyzed", "researched", "evaluated", "assessed", "audited", "benchmarked",
        "investigated", "mapped", "identified", "discovered", "spotted", "diagnosed",
        "tested", "validated", "surveyed", "interviewed", "experimented",
        # growth / revenue
        "grew", "increased", "expanded", "scaled", "boosted", "doubled", "tripled",
        "accelerated", "maximized", "generated", "monetized", "captured",
        # reduction / efficiency
        "reduced", "cut", "decreased", "eliminated", "killed", "removed", "minimized",
        "shortened", "simplified", "automated",
        # communication / influence
        "presented", "pitched", "negotiated", "persuaded", "advocated", "communicated",
        "published", "documented", "reported", "briefed", "advised", "coached",
        "mentored", "trained", "educated", "informed",
        # execution / delivery
        "delivered", "executed", "completed", "achieved", "accomplished", "fulfilled",
        "resolved", "solved", "fixed", "addressed", "handled", "processed",
        "facilitated", "coordinated", "organized", "prioritized", "triaged",
        # acquisition
        "recruited", "hired", "sourced", "acquired", "secured", "won", "closed",
        "converted", "attracted", "onboarded",
        # data / technical
        "migrated", "integrated", "debugged", "programmed", "coded", "scripted",
        "queried", "modeled", "forecasted", "calculated", "quantified", "measured",
        "tracked", "monitored", "instrumented",
        # collaboration
        "partnered", "collaborated", "aligned", "unified", "mobilized", "rallied",
        "supported", "enabled", "empowered",
        # process / operations
        "standardized", "formalized", "systematized", "instituted", "introduced",
        "initiated", "defined", "scoped", "planned", "budgeted", "allocated",
        "distributed", "maintained", "sustained",
        # often missed
        "ran", "turned", "found", "drove", "conducted", "navigated", "transitioned",
        "synthesized", "distilled", "leveraged", "utilized", "translated",
    }
)

_LIST_MARKER_RE = re.compile(r"^[-*•–—]\s+")
METRIC_RE = re.compile(r"\d+[%$]?|\d+[kKmMbB]\+?")

_PHRASE_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"\d+\+?\s*years?\s+(?:of\s+)?experience"),
    re.compile(r"[a-z]+\s+[a-z]+\s+(?:engineer|developer|manager|analyst|designer|architect|scientist|lead)"),
    re.compile(r"(?:machine|deep|natural language|computer|data|artificial)\s+(?:learning|processing|science|intelligence|vision)"),
    re.compile(r"\b[a-z]+\s+(?:api|sdk|cli|ui|ux)\b"),
    re.compile(r"[a-z]+'s\s+degree"),
    re.compile(r"full\s+stack|front\s+end|back\s+end"),
    re.compile(r"product\s+management|project\s+management|program\s+management"),
    re.compile(r"customer\s+success|customer\s+service|sales\s+development"),
    re.compile(r"\b(?:saas|b2b|b2c|fintech|insurtech|healthtech|edtech)\b"),
)

SUMMARY_SECTION = "Summary"
EDUCATION_SECTION = "Education"
SKILLS_SECTION = "Skills"


@dataclass(frozen=True, slots=True)
class SectionText:
    text: str
    terms: frozenset[str]


def extract_leading_verb(bullet: str) -> str:
    """First word of a bullet with any list marker removed, lowercased."""
    stripped = _LIST_MARKER_RE.sub("", (bullet or "").strip(), count=1)
    words = stripped.lower().split()
    return words[0] if words else ""


def has_metric(text: str) -> bool:
    return bool(METRIC_RE.search(text or ""))


def section_terms(text: str | None) -> frozenset[str]:
    """Multi-word technical phrases plus single tokens found in a block of text."""
    if not text:
        return frozenset()
    normalized = text.lower()
    phrases = {match.strip() for pattern in _PHRASE_PATTERNS for match in pattern.findall(normalized)}
    return frozenset(phrases) | frozenset(tokenize(normalized, SCORING_STOP_WORDS))


def keyword_exists_in_text(keyword_lower: str, text_lower: str, terms: frozenset[str]) -> bool:
    if " " in keyword_lower:
        return keyword_lower in text_lower
    return keyword_lower in terms


def experience_label(experience: Experience) -> str:
    return experience.company or experience.role or "Experience"


def experience_key(experience: Experience, index: int) -> str:
    return experience.id or str(index)


def _section(text: str) -> SectionText:
    return SectionText(text=text.lower(), terms=section_terms(text))


def build_section_map(resume: ResumeData) -> dict[str, SectionText]:
    """Summary, one entry per experience, then combined Education and Skills."""
    sections: dict[str, SectionText] = {}

    about = resume.about or ""
    if about.strip():
        sections[SUMMARY_SECTION] = _section(about)

    for experience in resume.experiences:
        parts = [experience.role or "", experience.company or ""]
        parts.extend(description.content or "" for description in experience.descriptions)
        text = " ".join(parts)
        if text.strip():
            sections[experience_label(experience)] = _section(text)

    education_text = " ".join(
        f"{entry.degree or ''} {entry.school or ''} {entry.description or ''}" for entry in resume.education
    )
    if education_text.strip():
        sections[EDUCATION_SECTION] = _section(education_text)

    skills_text = " ".join(skill.name or "" for skill in resume.skills)
    if skills_text.strip():
        sections[SKILLS_SECTION] = _section(skills_text)

    return sections


def experiences_with_content(resume: ResumeData) -> list[Experience]:
    return [
        experience
        for experience in resume.experiences
        if (experience.role or experience.company)
        and any((description.content or "").strip() for description in experience.descriptions)
    ]
