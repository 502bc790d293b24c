from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _none_as_empty(value: Any) -> Any:
    return [] if value is None else value


class ExperienceDescription(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: str | None = None
    content: str | None = None
    order: int | None = None


class Experience(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: str | None = None
    role: str | None = None
    company: str | None = None
    descriptions: list[ExperienceDescription] = Field(default_factory=list)

    @field_validator("descriptions", mode="before")
    @classmethod
    def _descriptions_default(cls, value: Any) -> Any:
        return _none_as_empty(value)


class Education(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: str | None = None
    degree: str | None = None
    school: str | None = None
    description: str | None = None


class Skill(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: str | None = None
    name: str | None = None


class ResumeData(BaseModel):
    """Builder resume content as supplied by the persistence layer.

    Stored rows may carry ``null`` for any list column; those load as empty lists.
    """

    model_config = ConfigDict(extra="ignore")

    id: str | None = None
    name: str | None = None
    role: str | None = None
    about: str | None = None
    experiences: list[Experience] = Field(default_factory=list)
    education: list[Education] = Field(default_factory=list)
    skills: list[Skill] = Field(default_factory=list)

    @field_validator("experiences", "education", "skills", mode="before")
    @classmethod
    def _lists_default(cls, value: Any) -> Any:
        return _none_as_empty(value)

    def bullets(self) -> list[str]:
        return [description.content or "" for exp in self.experiences for description in exp.descriptions]
