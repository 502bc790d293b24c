import logging

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from resume_fit.core.config.scoring import ScoringConfigError, get_scoring_config

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/health", summary="Health Check", description="Report whether the scoring engine can serve requests.")
async def health_check():
    try:
        sections = sorted(get_scoring_config())
    except ScoringConfigError as exc:
        logger.error("health_check_failed error=%s", exc)
        return JSONResponse(status_code=503, content={"status": "unhealthy", "scoring_config": None})
    return {"status": "healthy", "scoring_config": sections}
