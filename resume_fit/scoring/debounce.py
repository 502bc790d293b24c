from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from typing import Any, Protocol

from resume_fit.core.config import settings
from resume_fit.schemas import ChecklistItem, ResumeData, ScoreBreakdown

from .calculator import calculate_resume_score
from .checklist import generate_checklist

logger = logging.getLogger(__name__)

ScoreFn = Callable[..., ScoreBreakdown]

_UNSET: Any = object()


class Scheduler(Protocol):
    def schedule(self, fn: Callable[[], None], delay_ms: int) -> Any:
        """Run ``fn`` once after ``delay_ms`` and return a handle for ``cancel``."""

    def cancel(self, handle: Any) -> None:
        """Drop a scheduled call; cancelling a finished handle is a no-op."""


class AsyncioScheduler:
    """Timer backed by the running event loop's ``call_later``."""

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None) -> None:
        self._loop = loop

    def _get_loop(self) -> asyncio.AbstractEventLoop:
        if self._loop is None:
            self._loop = asyncio.get_running_loop()
        return self._loop

    def schedule(self, fn: Callable[[], None], delay_ms: int) -> asyncio.TimerHandle:
        return self._get_loop().call_later(max(0, delay_ms) / 1000.0, fn)

    def cancel(self, handle: asyncio.TimerHandle) -> None:
        handle.cancel()


class ResumeScoreTracker:
    """Keeps a resume score current while its inputs change.

    Every ``update`` supersedes the pending recalculation, so a burst of edits
    inside the quiet period produces a single recalculation against the latest
    inputs. ``previous_score`` holds the overall score from before the most
    recent change that moved it.
    """

    def __init__(
        self,
        resume_data: ResumeData,
        job_description: str | None = None,
        extracted_keywords: list[str] | None = None,
        primary_keywords: list[str] | None = None,
        *,
        debounce_ms: int | None = None,
        scheduler: Scheduler | None = None,
        score_fn: ScoreFn = calculate_resume_score,
    ) -> None:
        self.resume_data = resume_data
        self.job_description = job_description
        self.extracted_keywords = extracted_keywords
        self.primary_keywords = primary_keywords
        self.debounce_ms = settings.score_debounce_ms if debounce_ms is None else debounce_ms
        self._scheduler: Scheduler = scheduler or AsyncioScheduler()
        self._score_fn = score_fn
        self._handle: Any = None
        self._checklist: list[ChecklistItem] | None = None
        self.previous_score: int | None = None
        self.scores: ScoreBreakdown = self._score()

    @property
    def pending(self) -> bool:
        return self._handle is not None

    @property
    def checklist(self) -> list[ChecklistItem]:
        if self._checklist is None:
            self._checklist = generate_checklist(
                self.resume_data,
                self.scores,
                self.job_description,
                self.extracted_keywords,
                self.primary_keywords,
            )
        return self._checklist

    def update(
        self,
        *,
        resume_data: ResumeData | None = None,
        job_description: str | None = _UNSET,
        extracted_keywords: list[str] | None = _UNSET,
        primary_keywords: list[str] | None = _UNSET,
    ) -> None:
        if resume_data is not None:
            self.resume_data = resume_data
        if job_description is not _UNSET:
            self.job_description = job_description
        if extracted_keywords is not _UNSET:
            self.extracted_keywords = extracted_keywords
        if primary_keywords is not _UNSET:
            self.primary_keywords = primary_keywords
        self._checklist = None

        if self._handle is not None:
            self._scheduler.cancel(self._handle)
        self._handle = self._scheduler.schedule(self._recalculate, self.debounce_ms)

    def flush(self) -> None:
        """Run a pending recalculation now instead of waiting for the quiet period."""
        if self._handle is None:
            return
        self._scheduler.cancel(self._handle)
        self._recalculate()

    def close(self) -> None:
        if self._handle is not None:
            self._scheduler.cancel(self._handle)
            self._handle = None

    def _score(self) -> ScoreBreakdown:
        return self._score_fn(
            self.resume_data,
            self.job_description,
            self.extracted_keywords,
            self.primary_keywords,
        )

    def _recalculate(self) -> None:
        self._handle = None
        new_scores = self._score()
        if new_scores.overall != self.scores.overall:
            self.previous_score = self.scores.overall
        self.scores = new_scores
        self._checklist = None
        logger.debug(
            "resume_score_recalculated overall=%s previous=%s",
            new_scores.overall,
            self.previous_score,
        )
