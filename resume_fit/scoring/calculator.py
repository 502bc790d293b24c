"""Resume scoring.

Five dimensions, each 0-100:

1. keyword: section-aware match against job keywords. A keyword found in one
   section earns 0.6, in two or more 1.0. Primary (must-have) keywords carry a
   higher weight. A spread bonus of up to 7 points rewards keywords appearing
   across many sections.
2. metrics: share of experience bullets that contain a number.
3. action_verbs: share of bullets that open with a strong verb.
4. length: experience count, bullet count, summary length and skill count.
5. completeness: whether the required sections are filled in at all.

``overall`` is a weighted blend read from scoring.yaml. Without keyword
context (no job description or no keywords) the keyword dimension is left out
of the blend.
"""

from __future__ import annotations

import math

from resume_fit.core.config.scoring import get_scoring_value, get_weight_table
from resume_fit.schemas import KeywordMatch, ResumeData, ScoreBreakdown

from .text import ACTION_VERBS, build_section_map, extract_leading_verb, has_metric, keyword_exists_in_text

NEUTRAL_KEYWORD_SCORE = 50

_WITH_KEYWORDS_DEFAULTS = {
    "keyword": 0.45,
    "metrics": 0.15,
    "action_verbs": 0.15,
    "length": 0.10,
    "completeness": 0.15,
}
_WITHOUT_KEYWORDS_DEFAULTS = {
    "keyword": 0.0,
    "metrics": 0.30,
    "action_verbs": 0.30,
    "length": 0.15,
    "completeness": 0.25,
}


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def has_keyword_context(job_description: str | None, keywords: list[str] | None) -> bool:
    return bool(job_description and job_description.strip()) and bool(keywords)


def keyword_universe(extracted_keywords: list[str] | None, primary_keywords: list[str] | None) -> list[str]:
    """Extracted keywords followed by any primary keyword not already listed, deduplicated case-insensitively."""
    seen: set[str] = set()
    universe: list[str] = []
    for keyword in list(extracted_keywords or []) + list(primary_keywords or []):
        if not isinstance(keyword, str) or not keyword.strip():
            continue
        key = keyword.lower()
        if key in seen:
            continue
        seen.add(key)
        universe.append(keyword)
    return universe


def match_keywords_to_sections(
    resume: ResumeData,
    keywords: list[str],
    primary_keywords: list[str] | None = None,
) -> list[KeywordMatch]:
    sections = build_section_map(resume)
    primary = {keyword.lower() for keyword in primary_keywords or []}
    partial_score = float(get_scoring_value("matching.section_scores.partial", 0.6))
    full_score = float(get_scoring_value("matching.section_scores.full", 1.0))

    matches: list[KeywordMatch] = []
    for keyword in keywords:
        keyword_lower = keyword.lower()
        hit_sections = [
            name
            for name, section in sections.items()
            if keyword_exists_in_text(keyword_lower, section.text, section.terms)
        ]
        count = len(hit_sections)
        if count == 0:
            score, status = 0.0, "missing"
        elif count == 1:
            score, status = partial_score, "partial"
        else:
            score, status = full_score, "full"

        matches.append(
            KeywordMatch(
                keyword=keyword,
                sections=hit_sections,
                section_count=count,
                score=score,
                status=status,
                is_primary=keyword_lower in primary,
            )
        )
    return matches


def _keyword_curve(ratio: float) -> float:
    if ratio >= 0.8:
        return 100.0
    if ratio >= 0.6:
        return 85 + ((ratio - 0.6) / 0.2) * 15
    if ratio >= 0.4:
        return 70 + ((ratio - 0.4) / 0.2) * 15
    return ratio * 175


def calculate_keyword_score(
    resume: ResumeData,
    job_description: str | None,
    extracted_keywords: list[str] | None,
    primary_keywords: list[str] | None = None,
) -> tuple[int, list[KeywordMatch]]:
    keywords = keyword_universe(extracted_keywords, primary_keywords)
    if not has_keyword_context(job_description, keywords):
        return NEUTRAL_KEYWORD_SCORE, []

    matches = match_keywords_to_sections(resume, keywords, primary_keywords)

    primary_weight = float(get_scoring_value("matching.weights.primary", 2.0))
    secondary_weight = float(get_scoring_value("matching.weights.secondary", 1.0))
    weighted_total = 0.0
    weighted_max = 0.0
    for match in matches:
        weight = primary_weight if match.is_primary else secondary_weight
        weighted_total += match.score * weight
        weighted_max += weight
    ratio = weighted_total / weighted_max if weighted_max > 0 else 0.0

    score = _keyword_curve(ratio)

    sections = build_section_map(resume)
    if sections:
        hit_sections = {name for match in matches for name in match.sections}
        spread_bonus = float(get_scoring_value("matching.spread_bonus_max", 7))
        score = min(100.0, score + (len(hit_sections) / len(sections)) * spread_bonus)

    return round_half_up(score), matches


def calculate_metrics_score(resume: ResumeData) -> int:
    bullets = resume.bullets()
    if not bullets:
        return 0

    ratio = sum(1 for bullet in bullets if has_metric(bullet)) / len(bullets)
    if ratio >= 0.70:
        score = 100.0
    elif ratio >= 0.50:
        score = 90 + ((ratio - 0.50) / 0.20) * 10
    else:
        score = ratio * 180
    return round_half_up(score)


def calculate_action_verbs_score(resume: ResumeData) -> int:
    bullets = resume.bullets()
    if not bullets:
        return 0

    ratio = sum(1 for bullet in bullets if extract_leading_verb(bullet) in ACTION_VERBS) / len(bullets)
    if ratio >= 0.90:
        score = 100.0
    elif ratio >= 0.70:
        score = 90 + ((ratio - 0.70) / 0.20) * 10
    else:
        score = ratio * 128.57
    return round_half_up(score)


def _band(value: int, bands: tuple[tuple[int, int, int], ...], floor: tuple[int, int]) -> int:
    for low, high, points in bands:
        if low <= value <= high:
            return points
    minimum, points = floor
    return points if value >= minimum else 0


def calculate_length_score(resume: ResumeData) -> int:
    """Content density: 3-5 roles, 10-20 bullets, 100-250 char summary and 8-15 skills score best."""
    experience_count = sum(1 for exp in resume.experiences if exp.role and exp.company)
    bullet_count = sum(1 for bullet in resume.bullets() if bullet.strip())
    summary_length = len((resume.about or "").strip())
    skill_count = sum(1 for skill in resume.skills if (skill.name or "").strip())

    score = 0
    score += _band(experience_count, ((3, 5, 30), (2, 6, 20)), (1, 10))
    score += _band(bullet_count, ((10, 20, 30), (6, 25, 20)), (3, 10))
    score += _band(summary_length, ((100, 250, 20), (50, 350, 15)), (1, 5))
    score += _band(skill_count, ((8, 15, 20), (5, 20, 15)), (3, 5))
    return score


def calculate_completeness_score(resume: ResumeData) -> int:
    score = 0
    if (resume.about or "").strip():
        score += 25
    if any(exp.role and exp.company for exp in resume.experiences):
        score += 20
    if any(bullet.strip() for bullet in resume.bullets()):
        score += 25
    if any((skill.name or "").strip() for skill in resume.skills):
        score += 20
    if any(entry.degree or entry.school for entry in resume.education):
        score += 10
    return score


def calculate_resume_score(
    resume_data: ResumeData,
    job_description: str | None = None,
    extracted_keywords: list[str] | None = None,
    primary_keywords: list[str] | None = None,
) -> ScoreBreakdown:
    keyword, keyword_matches = calculate_keyword_score(
        resume_data, job_description, extracted_keywords, primary_keywords
    )
    dimensions = {
        "keyword": keyword,
        "metrics": calculate_metrics_score(resume_data),
        "action_verbs": calculate_action_verbs_score(resume_data),
        "length": calculate_length_score(resume_data),
        "completeness": calculate_completeness_score(resume_data),
    }

    if keyword_matches:
        weights = get_weight_table("overall.with_keywords", _WITH_KEYWORDS_DEFAULTS)
    else:
        weights = get_weight_table("overall.without_keywords", _WITHOUT_KEYWORDS_DEFAULTS)

    blended = sum(dimensions[name] * weights.get(name, 0.0) for name in dimensions)
    overall = max(0, min(100, round_half_up(blended)))

    return ScoreBreakdown(overall=overall, keyword_matches=keyword_matches, **dimensions)
