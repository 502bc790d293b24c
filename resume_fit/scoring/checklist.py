from __future__ import annotations

import math
import re

from resume_fit.core.config.scoring import get_scoring_value
from resume_fit.keywords.validation import categorize_keyword
from resume_fit.schemas import ChecklistItem, FlaggedBullet, KeywordMatch, ResumeData, ScoreBreakdown

from .calculator import keyword_universe, round_half_up
from .text import (
    ACTION_VERBS,
    SKILLS_SECTION,
    SUMMARY_SECTION,
    experience_key,
    experience_label,
    experiences_with_content,
    extract_leading_verb,
    has_metric,
    keyword_exists_in_text,
    section_terms,
)

_PRIORITY_ORDER = {"high": 0, "medium": 1, "low": 2}

_CATEGORY_HEADINGS = (
    ("technical", "Technical Skills"),
    ("tools", "Tools & Platforms"),
    ("experience", "Experience Level"),
    ("domain", "Domain Knowledge"),
    ("soft", "Soft Skills"),
)

_TECH_FIRST_RE = re.compile(r"API|SDK|CLI|UI|UX", re.IGNORECASE)
_TECH_TOOL_RE = re.compile(r"docker|kubernetes|jira|salesforce|aws|azure|gcp|python|sql", re.IGNORECASE)
_ACRONYM_RE = re.compile(r"^[A-Z]{2,}$")

_METRIC_REASON = (
    "Add a number to this bullet: revenue, users, team size, time saved, or a percentage. "
    'Even ranges like "20-30%" work.'
)
_VERB_REASON = "Lead with a strong verb (Shipped, Reduced, Drove, Launched) to grab attention in the first 2 seconds."


def _plural(count: int, word: str) -> str:
    return f"{count} {word}" if count == 1 else f"{count} {word}s"


def _is_technical(keyword: str) -> bool:
    return bool(_ACRONYM_RE.match(keyword) or _TECH_FIRST_RE.search(keyword) or _TECH_TOOL_RE.search(keyword))


def find_bullets_without_metrics(resume: ResumeData) -> list[FlaggedBullet]:
    flagged: list[FlaggedBullet] = []
    for index, experience in enumerate(resume.experiences):
        for bullet_index, description in enumerate(experience.descriptions):
            content = description.content or ""
            if content.strip() and not has_metric(content):
                flagged.append(
                    FlaggedBullet(
                        experience_id=experience_key(experience, index),
                        bullet_index=bullet_index,
                        content=content,
                        reason=_METRIC_REASON,
                    )
                )
    return flagged


def find_bullets_without_action_verbs(resume: ResumeData) -> list[FlaggedBullet]:
    flagged: list[FlaggedBullet] = []
    for index, experience in enumerate(resume.experiences):
        for bullet_index, description in enumerate(experience.descriptions):
            content = description.content or ""
            if content.strip() and extract_leading_verb(content) not in ACTION_VERBS:
                flagged.append(
                    FlaggedBullet(
                        experience_id=experience_key(experience, index),
                        bullet_index=bullet_index,
                        content=content,
                        reason=_VERB_REASON,
                    )
                )
    return flagged


def _missing_keywords_explanation(missing: list[KeywordMatch]) -> str:
    grouped: dict[str, list[str]] = {category: [] for category, _ in _CATEGORY_HEADINGS}
    for match in missing:
        grouped[categorize_keyword(match.keyword)].append(match.keyword)

    blocks = ["Add these keywords from the job description to improve your ATS match:"]
    for category, heading in _CATEGORY_HEADINGS:
        if grouped[category]:
            lines = "\n".join(f"  • {keyword}" for keyword in grouped[category])
            blocks.append(f"**{heading}:**\n{lines}")
    return "\n\n".join(blocks)


def _keyword_items(resume: ResumeData, scores: ScoreBreakdown, keywords: list[str]) -> list[ChecklistItem]:
    items: list[ChecklistItem] = []
    matches = scores.keyword_matches
    missing = [match for match in matches if match.status == "missing"]
    partial = [match for match in matches if match.status == "partial"]
    keyword_good = int(get_scoring_value("checklist.keyword_good", 90))
    keyword_high_below = int(get_scoring_value("checklist.keyword_high_priority_below", 70))

    missing_primary = [match.keyword for match in missing if match.is_primary]
    if missing_primary:
        items.append(
            ChecklistItem(
                id="primary-keywords-missing",
                text=f"Work in {_plural(len(missing_primary), 'must-have keyword')} from the job description: "
                + ", ".join(missing_primary),
                completed=False,
                explanation=(
                    "These terms were marked as must-haves for this job. Recruiters and ATS filters "
                    "look for them first, so add each one to a bullet or your skills section."
                ),
                priority="high",
                missing_keywords=missing_primary,
            )
        )

    if scores.keyword < keyword_good and missing:
        items.append(
            ChecklistItem(
                id="keywords-missing",
                text=f"Add {_plural(len(missing), 'more relevant skill')} to catch ATS keywords "
                "that don't appear in your bullets",
                completed=False,
                explanation=_missing_keywords_explanation(missing),
                priority="high" if scores.keyword < keyword_high_below else "medium",
                missing_keywords=[match.keyword for match in missing],
            )
        )
    elif scores.keyword >= keyword_good:
        items.append(
            ChecklistItem(
                id="keywords-good",
                text=f"Strong keyword match ({scores.keyword}/100)",
                completed=True,
                explanation="Your resume has excellent keyword alignment with the job description.",
                priority="high",
            )
        )

    with_content = experiences_with_content(resume)
    positions = {id(experience): index for index, experience in enumerate(resume.experiences)}

    # Only broad terms already in Skills or Summary are worth spreading into bullets.
    spread_candidates = [
        match for match in partial if any(section in (SKILLS_SECTION, SUMMARY_SECTION) for section in match.sections)
    ]
    for match in spread_candidates[:3]:
        section_name = match.sections[0] if match.sections else SKILLS_SECTION
        target = next(
            (experience for experience in with_content if experience_label(experience) not in match.sections),
            None,
        )
        target_name = experience_label(target) if target else "an experience entry"
        items.append(
            ChecklistItem(
                id=f"keyword-spread-{match.keyword}",
                text=(
                    f'You mention "{match.keyword}" only in {section_name}. Add it to a bullet under '
                    f"{target_name} too. ATS tools score keywords higher when they appear across multiple sections."
                ),
                completed=False,
                explanation=(
                    f'"{match.keyword}" was found in {section_name} but not elsewhere. Keywords that appear in '
                    "multiple sections (Skills + Experience bullets) score higher in ATS screening."
                ),
                priority="medium",
            )
        )

    if with_content:
        most_recent = with_content[0]
        label = experience_label(most_recent)
        if not any(label in match.sections for match in matches):
            candidates = [match.keyword for match in matches if label not in match.sections]
            suggested = sorted(candidates, key=lambda keyword: 0 if _is_technical(keyword) else 1)[:3]
            if suggested:
                keyword_list = ", ".join(suggested)
                items.append(
                    ChecklistItem(
                        id=f"role-skills-{experience_key(most_recent, positions[id(most_recent)])}",
                        text=(
                            f"Your {label} role is missing key terms from this job. Try adding {keyword_list} "
                            "to your bullets or a skills line under this role."
                        ),
                        completed=False,
                        explanation=(
                            f"Your most recent experience at {label} doesn't mention these target keywords. "
                            "Adding them to bullet points or a role-specific skills line helps ATS tools score "
                            "your resume higher."
                        ),
                        priority="medium",
                    )
                )

    for experience in with_content:
        bullets = [description.content or "" for description in experience.descriptions if (description.content or "").strip()]
        if len(bullets) < 2:
            continue

        best_count = 0
        best_index = 0
        for index, bullet in enumerate(bullets):
            bullet_lower = bullet.lower()
            terms = section_terms(bullet)
            count = sum(1 for keyword in keywords if keyword_exists_in_text(keyword.lower(), bullet_lower, terms))
            if count > best_count:
                best_count = count
                best_index = index

        if best_count > 0 and best_index != 0:
            label = experience_label(experience)
            items.append(
                ChecklistItem(
                    id=f"bullet-order-{experience_key(experience, positions[id(experience)])}",
                    text=f"Move your strongest bullet to the top of {label}. Recruiters often only read the first 2.",
                    completed=False,
                    explanation=(
                        f"Your bullet #{best_index + 1} at {label} has the most keyword matches ({best_count}). "
                        "Moving it to the top position increases visibility."
                    ),
                    priority="low",
                )
            )

    return items


def _metrics_items(resume: ResumeData, scores: ScoreBreakdown, bullet_count: int) -> list[ChecklistItem]:
    if bullet_count == 0:
        return [
            ChecklistItem(
                id="metrics",
                text="Add experience bullets with quantifiable metrics",
                completed=False,
                explanation="Start by adding work experience with measurable achievements (numbers, %, $).",
                priority="high",
            )
        ]

    flagged = find_bullets_without_metrics(resume)
    with_metrics = round_half_up((scores.metrics / 100) * bullet_count)
    percent = round_half_up((with_metrics / bullet_count) * 100)
    needed_for_perfect = max(0, math.ceil(bullet_count * 0.70) - with_metrics)
    good_text = f"{with_metrics} of {bullet_count} bullets have metrics ({percent}%)"

    if with_metrics >= 3 and percent >= 30:
        tail = (
            f" Adding numbers to {needed_for_perfect} more will boost your score to 100."
            if needed_for_perfect > 0
            else " You have excellent metric coverage!"
        )
        return [
            ChecklistItem(
                id="metrics-good",
                text=good_text,
                completed=True,
                explanation=f"Good! You have quantifiable achievements in your resume.{tail}",
                priority="high",
                flagged_bullets=flagged,
            )
        ]

    needed = max(3, math.ceil(bullet_count * 0.30)) - with_metrics
    if needed <= 0:
        return [
            ChecklistItem(
                id="metrics-good",
                text=good_text,
                completed=True,
                explanation=(
                    f"Good! Adding numbers to {needed_for_perfect} more bullets will boost your score "
                    f"from {scores.metrics} to 100."
                ),
                priority="high",
                flagged_bullets=flagged,
            )
        ]

    return [
        ChecklistItem(
            id="metrics",
            text=(
                f"Add a number to {_plural(needed, 'more bullet')}: revenue, users, team size, "
                "time saved, or a percentage"
            ),
            completed=False,
            explanation=(
                f"Currently {percent}% of your bullets have metrics (target 30%+). Even ranges like "
                '"20-30%" work. Numbers make achievements concrete and more likely to get interviews.'
            ),
            priority="high",
            flagged_bullets=flagged,
        )
    ]


def _action_verb_items(resume: ResumeData, scores: ScoreBreakdown, bullet_count: int) -> list[ChecklistItem]:
    if bullet_count == 0:
        return []

    flagged = find_bullets_without_action_verbs(resume)
    with_verbs = round_half_up((scores.action_verbs / 100) * bullet_count)
    percent = round_half_up((with_verbs / bullet_count) * 100)
    needed_for_perfect = max(0, math.ceil(bullet_count * 0.90) - with_verbs)
    good_text = f"{with_verbs} of {bullet_count} bullets use action verbs ({percent}%)"

    if percent >= 50:
        tail = (
            f" Leading {needed_for_perfect} more with strong verbs will boost your score to 100."
            if needed_for_perfect > 0
            else " You have excellent action verb usage!"
        )
        return [
            ChecklistItem(
                id="action-verbs-good",
                text=good_text,
                completed=True,
                explanation=f"Good! Most of your bullets start with strong action verbs.{tail}",
                priority="medium",
                flagged_bullets=flagged,
            )
        ]

    needed = math.ceil(bullet_count * 0.50) - with_verbs
    if needed <= 0:
        return [
            ChecklistItem(
                id="action-verbs-good",
                text=good_text,
                completed=True,
                explanation=(
                    f"Good! Leading {needed_for_perfect} more bullets with strong verbs will boost your score "
                    f"from {scores.action_verbs} to 100."
                ),
                priority="medium",
                flagged_bullets=flagged,
            )
        ]

    return [
        ChecklistItem(
            id="action-verbs",
            text=(
                f"Lead with a strong verb on {_plural(needed, 'more bullet')} (Shipped, Reduced, Drove, Launched) "
                "to grab attention in the first 2 seconds"
            ),
            completed=False,
            explanation=(
                f"Currently {percent}% of your bullets start with action verbs (target 50%+). "
                'Avoid weak starts like "responsible for" or "helped with."'
            ),
            priority="medium",
            flagged_bullets=flagged,
        )
    ]


def _content_items(resume: ResumeData, scores: ScoreBreakdown, bullet_count: int) -> list[ChecklistItem]:
    items: list[ChecklistItem] = []

    if scores.length < int(get_scoring_value("checklist.length_review_below", 60)):
        if bullet_count < 10:
            items.append(
                ChecklistItem(
                    id="content-length",
                    text=f"Add {_plural(10 - bullet_count, 'more experience bullet point')}",
                    completed=False,
                    explanation=(
                        "Aim for 10-20 total bullets across all experiences to properly showcase your qualifications."
                    ),
                    priority="medium",
                )
            )
        elif bullet_count > 25:
            items.append(
                ChecklistItem(
                    id="content-length",
                    text=f"Reduce to 20 bullet points (currently {bullet_count})",
                    completed=False,
                    explanation="Resumes with 10-20 bullets are easier to scan. Remove less relevant bullets.",
                    priority="low",
                )
            )

    summary_length = len((resume.about or "").strip())
    if summary_length < int(get_scoring_value("checklist.summary_min_chars", 100)):
        items.append(
            ChecklistItem(
                id="summary",
                text="Add a summary, your 10-second pitch to hiring managers. 2-3 sentences on why you're the one.",
                completed=False,
                explanation=(
                    "A strong summary (100-250 characters) helps recruiters quickly understand your value "
                    "proposition. Focus on your top skills and what you bring to this specific role."
                ),
                priority="medium",
            )
        )
    elif summary_length > int(get_scoring_value("checklist.summary_max_chars", 350)):
        items.append(
            ChecklistItem(
                id="summary",
                text="Shorten summary to under 250 characters",
                completed=False,
                explanation="Keep your summary concise. Recruiters spend about 7 seconds on the initial review.",
                priority="low",
            )
        )

    if not any((skill.name or "").strip() for skill in resume.skills):
        items.append(
            ChecklistItem(
                id="skills-missing",
                text="Add a skills section with the tools and strengths you use most",
                completed=False,
                explanation="ATS filters match against a skills list first. Aim for 8-15 specific skills.",
                priority="medium",
            )
        )

    return items


def generate_checklist(
    resume_data: ResumeData,
    scores: ScoreBreakdown,
    job_description: str | None = None,
    extracted_keywords: list[str] | None = None,
    primary_keywords: list[str] | None = None,
) -> list[ChecklistItem]:
    """Turn a score breakdown into ordered, actionable improvements."""
    checklist: list[ChecklistItem] = []

    if job_description and job_description.strip():
        keywords = keyword_universe(extracted_keywords, primary_keywords)
        if not keywords:
            return [
                ChecklistItem(
                    id="keywords-pending",
                    text="Keywords are being extracted from job description...",
                    completed=False,
                    explanation="Please wait while the job description is analyzed. This takes a few seconds.",
                    priority="high",
                )
            ]
        checklist.extend(_keyword_items(resume_data, scores, keywords))

    bullet_count = len(resume_data.bullets())
    checklist.extend(_metrics_items(resume_data, scores, bullet_count))
    checklist.extend(_action_verb_items(resume_data, scores, bullet_count))
    checklist.extend(_content_items(resume_data, scores, bullet_count))

    return sorted(checklist, key=lambda item: (_PRIORITY_ORDER[item.priority], item.completed))
