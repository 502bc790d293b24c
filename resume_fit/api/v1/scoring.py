import logging

from fastapi import APIRouter, Request

from resume_fit.core.rate_limit import rate_limit
from resume_fit.keywords import (
    KeywordCandidate,
    attach_evidence,
    debug_keyword_match,
    extract_keywords,
    get_suggestion_for_keyword,
    parse_tiered_keywords,
    rank_candidates,
    serialize_tiered_keywords,
    tokenize,
    validate_extracted_keywords,
)
from resume_fit.schemas import KeywordSets
from resume_fit.schemas.api import (
    ExtractKeywordsRequest,
    KeywordCheck,
    KeywordCheckRequest,
    KeywordPlanRequest,
    ParseKeywordsRequest,
    ParseKeywordsResponse,
    ResumeScoreRequest,
    ResumeScoreResponse,
    StoreKeywordsRequest,
    StoreKeywordsResponse,
)
from resume_fit.scoring import calculate_resume_score, generate_checklist

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/keywords/extract", response_model=KeywordSets)
@rate_limit()
async def keywords_extract(request: Request, payload: ExtractKeywordsRequest):
    _ = request
    return extract_keywords(payload.resume_text, payload.job_description_text)


@router.post("/keywords/parse", response_model=ParseKeywordsResponse)
@rate_limit()
async def keywords_parse(request: Request, payload: ParseKeywordsRequest):
    _ = request
    return ParseKeywordsResponse(tiered=parse_tiered_keywords(payload.raw))


@router.post("/keywords/plan", response_model=list[KeywordCandidate])
@rate_limit()
async def keywords_plan(request: Request, payload: KeywordPlanRequest):
    _ = request
    candidates = rank_candidates(tokenize(payload.job_description_text), tokenize(payload.resume_text))
    return attach_evidence(candidates[: payload.limit], payload.resume_text)


@router.post("/keywords/store", response_model=StoreKeywordsResponse)
@rate_limit()
async def keywords_store(request: Request, payload: StoreKeywordsRequest):
    _ = request
    checked = validate_extracted_keywords(payload.keywords, payload.job_description)
    return StoreKeywordsResponse(
        extracted_keywords=serialize_tiered_keywords(checked.valid, payload.primary),
        rejected=checked.invalid,
    )


@router.post("/keywords/check", response_model=list[KeywordCheck])
@rate_limit()
async def keywords_check(request: Request, payload: KeywordCheckRequest):
    _ = request
    resume_tokens = set(tokenize(payload.resume_text))
    checks: list[KeywordCheck] = []
    for keyword in payload.keywords:
        result = debug_keyword_match(keyword, payload.resume_text, resume_tokens)
        checks.append(
            KeywordCheck(
                keyword=result.keyword,
                found=result.found,
                strategy=result.strategy,
                details=result.details,
                suggestion=None if result.found else get_suggestion_for_keyword(keyword),
            )
        )
    return checks


@router.post("/resume/score", response_model=ResumeScoreResponse)
@rate_limit()
async def resume_score(request: Request, payload: ResumeScoreRequest):
    _ = request
    tiered = parse_tiered_keywords(payload.extracted_keywords)
    keywords = tiered.all if tiered else None
    if payload.primary_keywords is not None:
        primary = payload.primary_keywords
    else:
        primary = tiered.primary if tiered else None

    scores = calculate_resume_score(payload.resume, payload.job_description, keywords, primary)
    checklist = generate_checklist(payload.resume, scores, payload.job_description, keywords, primary)
    logger.info(
        "resume_scored overall=%s keywords=%d checklist_items=%d",
        scores.overall,
        len(keywords or []),
        len(checklist),
    )
    return ResumeScoreResponse(scores=scores, checklist=checklist)
