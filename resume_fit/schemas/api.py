from __future__ import annotations

from pydantic import BaseModel, Field

from .resume import ResumeData
from .scoring import ChecklistItem, ScoreBreakdown, TieredKeywords


class ExtractKeywordsRequest(BaseModel):
    resume_text: str = Field(default="", max_length=50000)
    job_description_text: str = Field(default="", max_length=50000)


class ParseKeywordsRequest(BaseModel):
    raw: str | None = Field(default=None, max_length=50000)


class ParseKeywordsResponse(BaseModel):
    tiered: TieredKeywords | None = None


class KeywordPlanRequest(BaseModel):
    resume_text: str = Field(default="", max_length=50000)
    job_description_text: str = Field(min_length=1, max_length=50000)
    limit: int = Field(default=10, ge=1, le=40)


class ResumeScoreRequest(BaseModel):
    resume: ResumeData
    job_description: str | None = Field(default=None, max_length=50000)
    extracted_keywords: str | None = Field(
        default=None,
        max_length=50000,
        description="Stored keyword column: a JSON array or {keywords, primary} object.",
    )
    primary_keywords: list[str] | None = Field(default=None, max_length=40)


class ResumeScoreResponse(BaseModel):
    scores: ScoreBreakdown
    checklist: list[ChecklistItem] = Field(default_factory=list)


class StoreKeywordsRequest(BaseModel):
    job_description: str = Field(min_length=1, max_length=50000)
    keywords: list[str] = Field(default_factory=list, max_length=100)
    primary: list[str] = Field(default_factory=list, max_length=40)


class StoreKeywordsResponse(BaseModel):
    extracted_keywords: str | None = None
    rejected: list[str] = Field(default_factory=list)


class KeywordCheckRequest(BaseModel):
    resume_text: str = Field(default="", max_length=50000)
    keywords: list[str] = Field(default_factory=list, max_length=100)


class KeywordCheck(BaseModel):
    keyword: str
    found: bool
    strategy: str
    details: str
    suggestion: str | None = None
