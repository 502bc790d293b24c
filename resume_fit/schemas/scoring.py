from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

MatchStatus = Literal["missing", "partial", "full"]
Priority = Literal["high", "medium", "low"]


class KeywordSets(BaseModel):
    resume_keywords: list[str] = Field(default_factory=list)
    jd_keywords: list[str] = Field(default_factory=list)
    missing_in_resume: list[str] = Field(default_factory=list)


class TieredKeywords(BaseModel):
    all: list[str]
    primary: list[str] = Field(default_factory=list)
    secondary: list[str] = Field(default_factory=list)


class KeywordMatch(BaseModel):
    keyword: str
    sections: list[str] = Field(default_factory=list)
    section_count: int = Field(ge=0)
    score: float = Field(ge=0.0, le=1.0)
    status: MatchStatus
    is_primary: bool = False


class ScoreBreakdown(BaseModel):
    overall: int = Field(ge=0, le=100)
    keyword: int = Field(ge=0, le=100)
    metrics: int = Field(ge=0, le=100)
    action_verbs: int = Field(ge=0, le=100)
    length: int = Field(ge=0, le=100)
    completeness: int = Field(ge=0, le=100)
    keyword_matches: list[KeywordMatch] = Field(default_factory=list)


class FlaggedBullet(BaseModel):
    experience_id: str
    bullet_index: int = Field(ge=0)
    content: str
    reason: str


class ChecklistItem(BaseModel):
    id: str
    text: str
    completed: bool
    explanation: str
    priority: Priority
    flagged_bullets: list[FlaggedBullet] | None = None
    missing_keywords: list[str] | None = None
