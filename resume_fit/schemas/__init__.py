from .resume import Education, Experience, ExperienceDescription, ResumeData, Skill
from .scoring import (
    ChecklistItem,
    FlaggedBullet,
    KeywordMatch,
    KeywordSets,
    ScoreBreakdown,
    TieredKeywords,
)

__all__ = [
    "ResumeData",
    "Experience",
    "ExperienceDescription",
    "Education",
    "Skill",
    "KeywordSets",
    "TieredKeywords",
    "KeywordMatch",
    "ScoreBreakdown",
    "FlaggedBullet",
    "ChecklistItem",
]
