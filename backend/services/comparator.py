"""Resume vs. job description keyword comparison and strength scoring."""

import logging
import re
from collections import Counter

from models.schemas.jd_analysis import JDAnalysis
from models.schemas.keywords import Importance, KeywordBag
from models.schemas.match_result import (
    JDResumeComparison,
    KeywordMatch,
    MatchResult,
    PartialSkillMatch,
    SkillGap,
)
from services.keyword_extractor import contains_phrase, count_phrase, extract_keywords
from services.lexicons import MATCH_CATEGORY_LABELS, OVERUSE_STOPWORDS
from services.role_database import get_industry_info
from services.section_parser import check_structure

logger = logging.getLogger(__name__)

OVERUSED_THRESHOLD = 5
MIN_OVERUSED_LENGTH = 4
STRENGTH_CATEGORIES = ("skills", "tools", "technologies")

# Base skill -> spellings treated as a partial match for it.
SKILL_VARIATIONS: dict[str, tuple[str, ...]] = {
    "javascript": ("js", "es6", "ecmascript"),
    "typescript": ("ts",),
    "python": ("py", "python3"),
    "machine learning": ("ml", "deep learning"),
    "project management": ("pm", "project manager"),
    "customer service": ("client service", "customer support"),
    "data analysis": ("data analytics", "analytics"),
}

STRONG_ALIGNMENT = 0.7
MODERATE_ALIGNMENT = 0.4
MAX_ADVICE = 5

_YEARS_RE = re.compile(r"\d+\+?\s*(?:years?|yrs?)", re.IGNORECASE)
EDUCATION_TERMS = ("bachelor", "master", "phd", "degree", "diploma", "university", "college")


def _ordered_categories(bag: KeywordBag) -> list[str]:
    known = [name for name in MATCH_CATEGORY_LABELS if name in bag.categories]
    extra = sorted(name for name in bag.categories if name not in MATCH_CATEGORY_LABELS)
    return known + extra


def _check_keywords(
    resume_text: str, bag: KeywordBag, categories: list[str]
) -> tuple[list[KeywordMatch], list[KeywordMatch]]:
    """Boundary-test each phrase once, under the first category listing it."""
    lower = resume_text.lower()
    matched: list[KeywordMatch] = []
    missing: list[KeywordMatch] = []
    seen: set[str] = set()

    for category in categories:
        label = MATCH_CATEGORY_LABELS.get(category, category)
        for keyword in sorted(bag.get(category)):
            if keyword in seen:
                continue
            seen.add(keyword)
            found = contains_phrase(lower, keyword)
            match = KeywordMatch(keyword=keyword, category=label, found=found)
            (matched if found else missing).append(match)
    return matched, missing


def find_overused_words(
    resume_text: str, threshold: int = OVERUSED_THRESHOLD
) -> list[str]:
    """Whitespace tokens longer than 3 chars that repeat ``threshold``+ times."""
    counts = Counter(
        word for word in resume_text.lower().split()
        if len(word) >= MIN_OVERUSED_LENGTH
    )
    return [
        word for word, count in counts.items()
        if count >= threshold and word not in OVERUSE_STOPWORDS
    ]


def compute_keyword_density(
    resume_text: str, keywords: list[str]
) -> dict[str, float]:
    """Compute keyword density (occurrences / total words) for each keyword.

    Returns dict of keyword -> density percentage.
    ATS optimal range: 1-3% per primary keyword.
    """
    words = resume_text.lower().split()
    total_words = len(words)
    if total_words == 0:
        return {}

    densities = {}
    for kw in keywords:
        count = count_phrase(resume_text, kw)
        densities[kw] = round((count / total_words) * 100, 2)

    return densities


def score_match(
    resume_text: str,
    jd_keywords: KeywordBag,
    overused_threshold: int = OVERUSED_THRESHOLD,
) -> MatchResult:
    """Score how many JD keywords the resume contains.

    ``score = round(100 * matched / total)``; 0 when the JD yielded no
    keywords.
    """
    matched, missing = _check_keywords(
        resume_text, jd_keywords, _ordered_categories(jd_keywords)
    )
    total = len(matched) + len(missing)
    score = round(100 * len(matched) / total) if total else 0
    overused = find_overused_words(resume_text, overused_threshold)

    suggestions = []
    if missing:
        names = ", ".join(m.keyword for m in missing[:10])
        suggestions.append(f"Add these job description keywords if they apply to you: {names}")
    if overused:
        suggestions.append(
            f"Vary your wording - these words appear {overused_threshold}+ times: "
            f"{', '.join(overused[:5])}"
        )

    logger.debug("Keyword match: %d/%d (score=%d)", len(matched), total, score)
    return MatchResult(
        matched=matched,
        missing=missing,
        overused=overused,
        score=score,
        total_keywords=total,
        suggestions=suggestions,
    )


def score_strength(resume_text: str) -> MatchResult:
    """Resume-only score when no job description is available.

    The score comes from the structure check; ``matched`` lists the
    skills, tools, and technologies the lexicons find in the resume.
    """
    report = check_structure(resume_text)
    bag = extract_keywords(resume_text)
    matched, _ = _check_keywords(resume_text, bag, list(STRENGTH_CATEGORIES))

    return MatchResult(
        matched=matched,
        missing=[],
        overused=[],
        score=report.score,
        total_keywords=len(matched),
        suggestions=report.warnings + report.suggestions,
    )


def find_partial_skill_match(jd_skill: str, resume_skills: list[str]) -> str | None:
    """A resume skill that is a known variant of the JD skill, if any."""
    jd_lower = jd_skill.lower()
    for base, variants in SKILL_VARIATIONS.items():
        spellings = (base,) + variants
        if not any(contains_phrase(jd_lower, s) for s in spellings):
            continue
        for resume_skill in resume_skills:
            if any(contains_phrase(resume_skill, s) for s in spellings):
                return resume_skill
    return None


def _comparison_advice(
    matched: list[str],
    missing: list[SkillGap],
    partial: list[PartialSkillMatch],
    jd: JDAnalysis,
) -> list[str]:
    advice = []
    if matched:
        advice.append(
            f"Your resume matches {len(matched)} key skills from this job description."
        )

    required_missing = [m.skill for m in missing if m.importance == Importance.REQUIRED.value]
    if 0 < len(required_missing) <= 3:
        advice.append(
            f"Add these required skills if you have them: {', '.join(required_missing)}"
        )
    elif len(required_missing) > 3:
        advice.append(
            f"{len(required_missing)} required skills are missing. "
            "Consider if this role is a good fit."
        )

    if partial:
        advice.append(
            f'Consider using exact terminology: "{partial[0].jd_skill}" '
            f'instead of "{partial[0].resume_skill}"'
        )

    info = get_industry_info(jd.industry)
    if info.certification_bodies and jd.certifications:
        advice.append(
            f"This role values certifications. Highlight any {info.name} "
            "certifications prominently."
        )
    return advice[:MAX_ADVICE]


def compare_jd_to_resume(
    jd: JDAnalysis, resume_skills: list[str], resume_text: str
) -> JDResumeComparison:
    """Align a parsed JD's hard skills and certifications with a resume."""
    lower = resume_text.lower()
    skills_lower = [s.lower() for s in resume_skills if s.strip()]

    matched: list[str] = []
    partial: list[PartialSkillMatch] = []
    missing: list[SkillGap] = []

    for skill in jd.hard_skills:
        phrase = skill.phrase.lower()
        if any(phrase in rs or rs in phrase for rs in skills_lower) or contains_phrase(lower, phrase):
            matched.append(skill.phrase)
            continue
        resume_skill = find_partial_skill_match(phrase, skills_lower)
        if resume_skill:
            partial.append(PartialSkillMatch(jd_skill=skill.phrase, resume_skill=resume_skill))
        else:
            missing.append(SkillGap(skill=skill.phrase, importance=skill.importance.value))

    matched_certs = [c.phrase for c in jd.certifications if c.phrase.lower() in lower]
    missing_certs = [c.phrase for c in jd.certifications if c.phrase.lower() not in lower]

    total = len(jd.hard_skills)
    rate = (len(matched) + 0.5 * len(partial)) / total if total else 0.0
    if rate >= STRONG_ALIGNMENT:
        alignment = "strong"
    elif rate >= MODERATE_ALIGNMENT:
        alignment = "moderate"
    else:
        alignment = "weak"

    experience_match = not jd.experience_requirements or bool(_YEARS_RE.search(resume_text))
    education_match = not jd.education_requirements or any(
        term in lower for term in EDUCATION_TERMS
    )

    return JDResumeComparison(
        matched_skills=matched,
        partial_matches=partial,
        missing_skills=missing,
        matched_certifications=matched_certs,
        missing_certifications=missing_certs,
        experience_match=experience_match,
        education_match=education_match,
        overall_alignment=alignment,
        advice=_comparison_advice(matched, missing, partial, jd),
    )
