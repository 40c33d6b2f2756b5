"""Orchestrator: resume vs. job description analysis.

Pipeline:
1. Structure check (sections, ATS formatting, content quality)
2. JD parsing (role, seniority, skills, metadata)
3. Keyword matching against the resume (or resume-only strength mode)
4. Skill and credential alignment
5. Keyword density
6. Weighted overall score and plain-language summary
"""

import logging

from config import settings
from models.responses import AnalysisResponse, ScoreBreakdown
from services.comparator import (
    compare_jd_to_resume,
    compute_keyword_density,
    score_match,
    score_strength,
)
from services.jd_parser import parse_job_description
from services.keyword_extractor import extract_keywords
from services.section_parser import check_structure

logger = logging.getLogger(__name__)

# Weights for the overall score when a JD is present
W_KEYWORD = 0.70
W_STRUCTURE = 0.30

MAX_LISTED = 5


def _compute_overall(keyword_score: int, structure_score: int) -> int:
    raw = W_KEYWORD * keyword_score + W_STRUCTURE * structure_score
    return min(100, max(0, round(raw)))


def analyze(resume_text: str, job_description: str = "") -> AnalysisResponse:
    """Run the full analysis; a blank JD switches to resume-only scoring."""
    structure = check_structure(resume_text)

    if not job_description.strip():
        logger.info("No job description supplied, scoring resume strength only")
        match = score_strength(resume_text)
        found = [m.keyword for m in match.matched]
        return AnalysisResponse(
            overall_score=structure.score,
            score_breakdown=ScoreBreakdown(structure=structure.score),
            scoring_method="strength",
            match=match,
            structure=structure,
            matched_keywords=found,
            keyword_density=compute_keyword_density(resume_text, found),
            summary=(
                f"Resume-only review: {len(found)} skills detected, "
                f"structure score {structure.score}/100."
            ),
            strengths=[f"Detected skill: {kw}" for kw in found[:MAX_LISTED]],
            weaknesses=structure.warnings[:MAX_LISTED],
        )

    jd = parse_job_description(job_description)
    match = score_match(resume_text, jd.keywords, settings.overused_word_threshold)
    resume_skills = sorted(extract_keywords(resume_text).skills)
    comparison = compare_jd_to_resume(jd, resume_skills, resume_text)

    matched = [m.keyword for m in match.matched]
    missing = [m.keyword for m in match.missing]
    keyword_density = compute_keyword_density(resume_text, matched + missing)
    overall = _compute_overall(match.score, structure.score)

    role = jd.detected_role or jd.role_type or "this role"
    summary = (
        f"Matched {len(matched)} of {match.total_keywords} job description keywords "
        f"for {role} ({jd.seniority_level.value} level, {jd.industry}). "
        f"Skill alignment is {comparison.overall_alignment}."
    )
    weaknesses = [f"Missing keyword: {kw}" for kw in missing[:MAX_LISTED]]
    if not comparison.experience_match:
        weaknesses.append("Experience requirement not evidenced in resume")
    if not comparison.education_match:
        weaknesses.append("Education requirement not evidenced in resume")

    logger.debug("Analysis complete: overall=%d keywords=%d", overall, match.score)
    return AnalysisResponse(
        overall_score=overall,
        score_breakdown=ScoreBreakdown(keywords_match=match.score, structure=structure.score),
        scoring_method="keyword",
        jd_analysis=jd,
        match=match,
        structure=structure,
        comparison=comparison,
        missing_keywords=missing,
        matched_keywords=matched,
        keyword_density=keyword_density,
        summary=summary,
        strengths=[f"Matched keyword: {kw}" for kw in matched[:MAX_LISTED]],
        weaknesses=weaknesses,
    )
