from .calculator import calculate_resume_score, match_keywords_to_sections
from .checklist import generate_checklist
from .debounce import AsyncioScheduler, ResumeScoreTracker, Scheduler

__all__ = [
    "calculate_resume_score",
    "match_keywords_to_sections",
    "generate_checklist",
    "Scheduler",
    "AsyncioScheduler",
    "ResumeScoreTracker",
]
