import logging

from fastapi import APIRouter, Depends, HTTPException, Query, Request
from slowapi import Limiter
from slowapi.util import get_remote_address

from api.dependencies import get_dictionary, get_suggestion_limit
from config import settings
from models.requests import (
    AnalyzeRequest,
    GuidanceRequest,
    JobDescriptionRequest,
    ResumeRequest,
    TextRequest,
)
from models.responses import AnalysisResponse, IndustryResponse, RoleCorrectionResponse
from models.schemas import (
    CategoryDictionary,
    JDAnalysis,
    KeywordBag,
    MatchResult,
    Recommendation,
    RecommendationContext,
    RoleDefinition,
    RoleGuidance,
    StructureReport,
)
from services import (
    comparator,
    jd_parser,
    keyword_extractor,
    resume_analyzer,
    role_classifier,
    role_guidance,
    section_parser,
    template_recommendations,
)
from services.role_database import get_industry_info

logger = logging.getLogger(__name__)

router = APIRouter()
limiter = Limiter(key_func=get_remote_address)


def _check_length(text: str, limit: int, label: str) -> None:
    if len(text) > limit:
        logger.warning("Rejected %s of %d chars (limit %d)", label.lower(), len(text), limit)
        raise HTTPException(status_code=400, detail=f"{label} too long (max {limit} chars)")


@router.get("/health")
async def health():
    return {"status": "ok"}


@router.post("/keywords", response_model=KeywordBag)
@limiter.limit(settings.rate_limit)
async def keywords(
    request: Request,
    body: TextRequest,
    dictionary: CategoryDictionary = Depends(get_dictionary),
):
    return keyword_extractor.extract(body.text, dictionary)


@router.post("/jd/parse", response_model=JDAnalysis)
@limiter.limit(settings.rate_limit)
async def parse_jd(request: Request, body: JobDescriptionRequest):
    _check_length(body.job_description, settings.max_jd_chars, "Job description")
    return jd_parser.parse_job_description(body.job_description)


@router.post("/match", response_model=MatchResult)
@limiter.limit(settings.rate_limit)
async def match(request: Request, body: AnalyzeRequest):
    _check_length(body.resume_text, settings.max_resume_chars, "Resume")
    _check_length(body.job_description, settings.max_jd_chars, "Job description")
    if not body.job_description.strip():
        raise HTTPException(status_code=400, detail="Job description is required for keyword matching")
    jd = jd_parser.parse_job_description(body.job_description)
    return comparator.score_match(
        body.resume_text, jd.keywords, settings.overused_word_threshold
    )


@router.post("/match/strength", response_model=MatchResult)
@limiter.limit(settings.rate_limit)
async def match_strength(request: Request, body: ResumeRequest):
    _check_length(body.resume_text, settings.max_resume_chars, "Resume")
    return comparator.score_strength(body.resume_text)


@router.post("/structure", response_model=StructureReport)
@limiter.limit(settings.rate_limit)
async def structure(request: Request, body: ResumeRequest):
    _check_length(body.resume_text, settings.max_resume_chars, "Resume")
    return section_parser.check_structure(body.resume_text)


@router.post("/industry", response_model=IndustryResponse)
@limiter.limit(settings.rate_limit)
async def industry(request: Request, body: TextRequest):
    detected = role_classifier.detect_industry(body.text)
    return IndustryResponse(industry=detected, name=get_industry_info(detected).name)


@router.get("/roles/suggest", response_model=list[str])
@limiter.limit(settings.rate_limit)
async def roles_suggest(
    request: Request,
    q: str = Query("", max_length=200),
    limit: int = Depends(get_suggestion_limit),
):
    return role_classifier.suggest_roles(q, limit)


@router.get("/roles/correct", response_model=RoleCorrectionResponse)
@limiter.limit(settings.rate_limit)
async def roles_correct(request: Request, q: str = Query(..., max_length=200)):
    return RoleCorrectionResponse(query=q, correction=role_classifier.correct_role(q))


@router.get("/roles/find", response_model=RoleDefinition)
@limiter.limit(settings.rate_limit)
async def roles_find(request: Request, q: str = Query(..., max_length=200)):
    role = role_classifier.find_role(q)
    if role is None:
        raise HTTPException(status_code=404, detail=f"No role definition matches '{q}'")
    return role


@router.post("/recommend/templates", response_model=list[Recommendation])
@limiter.limit(settings.rate_limit)
async def recommend_templates(request: Request, body: RecommendationContext):
    return template_recommendations.recommend_templates(body)


@router.post("/recommend/guidance", response_model=RoleGuidance)
@limiter.limit(settings.rate_limit)
async def recommend_guidance(request: Request, body: GuidanceRequest):
    return role_guidance.guidance_for_role(
        body.role, body.level, body.region, body.flags, body.keywords
    )


@router.post("/analyze", response_model=AnalysisResponse)
@limiter.limit(settings.rate_limit)
async def analyze(request: Request, body: AnalyzeRequest):
    _check_length(body.resume_text, settings.max_resume_chars, "Resume")
    _check_length(body.job_description, settings.max_jd_chars, "Job description")
    if not body.resume_text.strip():
        raise HTTPException(status_code=400, detail="Resume text is empty")
    logger.info(
        "Analyze request: resume=%d chars jd=%d chars",
        len(body.resume_text), len(body.job_description),
    )
    return resume_analyzer.analyze(body.resume_text, body.job_description)
