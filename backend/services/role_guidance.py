"""Role- and level-aware resume guidance.

Guidance profiles are ranked with the same weighted scorer as templates;
the winning profile's tips lead the returned guidance, followed by
level, industry, photo, and ATS advice from the static tables below.
"""

import logging

from models.schemas.recommendation import (
    PhotoAdvice,
    Recommendation,
    RecommendationContext,
    RoleGuidance,
    ScoringOption,
)
from models.schemas.roles import RoleDefinition
from services.recommender import BonusOutcome, DEFAULT_SCORER, WeightedScorer
from services.role_classifier import detect_industry_from_title, find_role
from services.role_database import get_industry_info

logger = logging.getLogger(__name__)

DEFAULT_LEVEL = "mid"
DEFAULT_REGION = "GLOBAL"

LEVEL_GUIDANCE: dict[str, dict[str, str]] = {
    "intern": {
        "summary_focus": "Focus on academic achievements, relevant coursework, and career goals.",
        "experience_focus": "Highlight internships, part-time jobs, and volunteer work. Any work experience counts.",
        "length_advice": "Keep resume to 1 page. Quality over quantity.",
    },
    "fresher": {
        "summary_focus": "Lead with your education and key skills. Show eagerness to learn and contribute.",
        "experience_focus": "Include internships, projects, and any relevant experience. Describe transferable skills.",
        "length_advice": "1 page is ideal. Focus on potential, not just experience.",
    },
    "junior": {
        "summary_focus": "Highlight 1-2 years of relevant experience and key accomplishments.",
        "experience_focus": "Show progression and learning. Quantify achievements where possible.",
        "length_advice": "1 page preferred. Can extend to 2 if content is strong.",
    },
    "mid": {
        "summary_focus": "Emphasize expertise and track record of results.",
        "experience_focus": "Focus on impact and achievements. Less on basic responsibilities.",
        "length_advice": "1-2 pages. Quality achievements matter more than length.",
    },
    "senior": {
        "summary_focus": "Lead with leadership, strategic impact, and domain expertise.",
        "experience_focus": "Highlight leadership, mentoring, and business impact.",
        "length_advice": "2 pages acceptable. Focus on senior-level achievements.",
    },
    "lead": {
        "summary_focus": "Emphasize team leadership, project delivery, and technical direction.",
        "experience_focus": "Show team size managed, project scope, and organizational impact.",
        "length_advice": "2 pages. Include both technical and leadership achievements.",
    },
    "manager": {
        "summary_focus": "Lead with management scope, team development, and business results.",
        "experience_focus": "Quantify team size, budget managed, and business outcomes.",
        "length_advice": "2 pages. Balance management and functional expertise.",
    },
    "director": {
        "summary_focus": "Focus on strategic vision, organizational transformation, and P&L responsibility.",
        "experience_focus": "Highlight department-level achievements, strategy execution, and cross-functional leadership.",
        "length_advice": "2 pages. Executive summary style.",
    },
    "executive": {
        "summary_focus": "Lead with company-wide impact, board-level experience, and industry recognition.",
        "experience_focus": "Focus on strategic initiatives, M&A, fundraising, and market positioning.",
        "length_advice": "2-3 pages acceptable for C-level. Consider executive bio format.",
    },
}

INDUSTRY_GUIDANCE: dict[str, dict] = {
    "technology": {
        "recruiter_focus": ["Relevant tech stack", "Scale of projects", "Team collaboration", "System design thinking"],
        "common_mistakes": ["Listing every technology ever used", "No quantified impact",
                            "Too focused on responsibilities vs achievements"],
        "ats_importance": "high",
        "format": "technical",
    },
    "healthcare": {
        "recruiter_focus": ["Current licensure", "Patient care experience", "Specialization", "Safety record"],
        "common_mistakes": ["Missing license numbers", "Not specifying patient populations", "Ignoring soft skills"],
        "ats_importance": "medium",
        "format": "formal",
    },
    "finance": {
        "recruiter_focus": ["Relevant certifications", "Industry experience", "Technical skills", "Attention to detail"],
        "common_mistakes": ["Not quantifying financial impact", "Missing software skills",
                            "Vague compliance experience"],
        "ats_importance": "high",
        "format": "formal",
    },
    "education": {
        "recruiter_focus": ["Certification status", "Student success metrics", "Technology integration",
                            "Differentiated instruction"],
        "common_mistakes": ["Not showing student outcomes", "Missing credential details",
                            "Generic teaching descriptions"],
        "ats_importance": "medium",
        "format": "professional",
    },
    "sales": {
        "recruiter_focus": ["Numbers, numbers, numbers", "Consistent performance", "Industry experience",
                            "CRM proficiency"],
        "common_mistakes": ["No revenue numbers", 'Vague "exceeded targets"',
                            "Not specifying sales type (B2B/B2C)"],
        "ats_importance": "medium",
        "format": "professional",
    },
    "marketing": {
        "recruiter_focus": ["Measurable results", "Creative + analytical balance", "Channel expertise",
                            "Brand experience"],
        "common_mistakes": ["No metrics on campaigns", "Too creative, not results-focused",
                            "Missing tool proficiency"],
        "ats_importance": "medium",
        "format": "creative",
    },
    "legal": {
        "recruiter_focus": ["Bar status", "Relevant practice areas", "Deal/case volume", "Writing ability"],
        "common_mistakes": ["Missing bar admission details", "Too much jargon", "Not quantifying case load"],
        "ats_importance": "medium",
        "format": "formal",
    },
    "hospitality": {
        "recruiter_focus": ["Customer service mindset", "Operational experience", "Team leadership",
                            "Revenue awareness"],
        "common_mistakes": ["No guest satisfaction metrics", "Missing service certifications",
                            "Not specifying venue type"],
        "ats_importance": "low",
        "format": "professional",
    },
    "construction": {
        "recruiter_focus": ["Project portfolio", "On-time/budget delivery", "Safety compliance", "Team management"],
        "common_mistakes": ["Not quantifying project values", "Missing safety record",
                            "Vague project descriptions"],
        "ats_importance": "medium",
        "format": "technical",
    },
    "trades": {
        "recruiter_focus": ["Valid licenses", "Specialization", "Reliability", "Physical capability"],
        "common_mistakes": ["Missing license numbers", "Not listing specific skills", "No safety mentions"],
        "ats_importance": "low",
        "format": "technical",
    },
}

INDUSTRY_ACTION_VERBS: dict[str, list[str]] = {
    "technology": ["Developed", "Engineered", "Implemented", "Optimized", "Architected", "Deployed"],
    "healthcare": ["Administered", "Assessed", "Coordinated", "Monitored", "Treated", "Documented"],
    "finance": ["Analyzed", "Audited", "Reconciled", "Forecasted", "Budgeted", "Reported"],
    "education": ["Taught", "Developed", "Assessed", "Mentored", "Facilitated", "Implemented"],
    "sales": ["Generated", "Closed", "Exceeded", "Negotiated", "Cultivated", "Acquired"],
    "marketing": ["Launched", "Created", "Drove", "Increased", "Optimized", "Managed"],
}
GENERIC_ACTION_VERBS = ["Managed", "Led", "Developed", "Improved", "Created", "Delivered"]

INDUSTRY_METRICS: dict[str, list[str]] = {
    "technology": ["Reduced latency by X%", "Handled X daily users", "Improved performance by X%"],
    "healthcare": ["Cared for X patients daily", "Achieved X% satisfaction", "Reduced errors by X%"],
    "finance": ["Managed $X budget", "Reduced costs by X%", "Improved accuracy to X%"],
    "education": ["Improved scores by X%", "Taught X students", "Achieved X% pass rate"],
    "sales": ["Achieved X% of quota", "Generated $X revenue", "Closed X deals"],
    "marketing": ["Increased traffic by X%", "Achieved Xx ROI", "Grew audience by X%"],
}
GENERIC_METRICS = ["Improved X by Y%", "Managed team of X", "Delivered $X in value"]

GENERIC_MISTAKES = [
    "Using the same resume for every application",
    "Not quantifying achievements",
    "Typos and grammatical errors",
    "Including irrelevant information",
    "Making it too long",
]
GENERIC_RECRUITER_FOCUS = [
    "Relevant experience",
    "Measurable achievements",
    "Required skills match",
    "Career progression",
    "Professional presentation",
]

BASE_ATS_TIPS = [
    "Use standard section headers (Experience, Education, Skills).",
    "Avoid tables, graphics, and complex formatting.",
    "Include keywords from the job description naturally.",
]
HIGH_ATS_TIPS = [
    "ATS screening is common in this industry. Keyword matching is crucial.",
    "Use exact terminology from job postings.",
]

TONE_ADVICE = {
    "formal": "Use formal, professional language. Avoid contractions and casual expressions.",
    "technical": "Technical precision is valued. Use industry-specific terminology accurately.",
    "creative": "Some creativity is acceptable, but keep it professional. Let your work speak.",
    "conversational": "A slightly warmer tone is acceptable, but remain professional.",
}
DEFAULT_TONE_ADVICE = "Use clear, professional language throughout."

FORMAT_ADVICE = {
    "formal": "Use a traditional, conservative format. Clean lines, standard fonts, minimal decoration.",
    "technical": "Technical clarity is key. Clear sections, consistent formatting, easy to scan.",
    "creative": "Subtle design elements are acceptable, but readability comes first.",
}
DEFAULT_FORMAT_ADVICE = "Use a clean, professional format with clear sections."
EXECUTIVE_FORMAT_ADVICE = (
    "Consider an executive format with a prominent summary section. "
    "Leadership and strategic impact should be immediately visible."
)

PHOTO_BY_REGION = {
    "US": "not_recommended", "UK": "not_recommended", "EU": "recommended",
    "IN": "optional", "ME": "recommended", "APAC": "optional",
    "LATAM": "recommended", "AFRICA": "optional", "GLOBAL": "optional",
}
PHOTO_BY_INDUSTRY = {
    "hospitality": "recommended", "aviation": "recommended", "sales": "recommended",
    "beauty": "recommended", "media": "optional", "technology": "not_recommended",
    "legal": "not_recommended", "finance": "optional",
}
PHOTO_TIPS = [
    "Use a recent, professional headshot.",
    "Dress appropriately for your industry.",
    "Ensure good lighting and a neutral background.",
    "Avoid selfies, group photos, or casual images.",
]

_ALL_LEVELS = ("intern", "fresher", "junior", "mid", "senior", "lead", "manager", "director", "executive")


def _levels(*scores: int) -> dict[str, int]:
    return dict(zip(_ALL_LEVELS, scores))


GUIDANCE_PROFILES: tuple[ScoringOption, ...] = (
    ScoringOption(
        option_id="technical-depth",
        name="Technical Depth",
        fit={
            "industry": {
                "technology": 95, "telecommunications": 90, "trades": 85, "manufacturing": 85,
                "construction": 80, "energy": 80, "logistics": 75, "finance": 70,
                "healthcare": 60, "education": 55, "marketing": 55, "legal": 50,
                "sales": 50, "hospitality": 50, "arts": 45,
            },
            "level": _levels(70, 75, 85, 90, 90, 80, 65, 55, 50),
        },
        features=frozenset({"ats"}),
        strengths=(
            "Lead the skills section with the exact tools and stack the posting names",
            "Describe the scale of systems you built or maintained",
        ),
        limitations=("Pure technical detail can hide the business impact of your work",),
    ),
    ScoringOption(
        option_id="credential-led",
        name="Credential-Led",
        fit={
            "industry": {
                "healthcare": 95, "legal": 95, "aviation": 95, "education": 90, "trades": 90,
                "finance": 85, "government": 85, "security": 85, "construction": 80,
                "technology": 60, "sales": 50, "marketing": 45, "arts": 40,
            },
            "level": _levels(80, 85, 85, 80, 80, 75, 75, 70, 65),
        },
        features=frozenset({"ats"}),
        strengths=(
            "Place licenses and certifications near the top with their numbers and expiry dates",
            "Name the regulatory frameworks you work within",
        ),
        limitations=("Credentials alone do not show how well you perform",),
    ),
    ScoringOption(
        option_id="impact-metrics",
        name="Impact & Metrics",
        fit={
            "industry": {
                "sales": 95, "marketing": 90, "consulting": 90, "real_estate": 90,
                "finance": 85, "retail": 85, "logistics": 85, "technology": 80,
                "hospitality": 75, "healthcare": 65, "education": 65, "legal": 60,
            },
            "level": _levels(50, 55, 75, 90, 95, 90, 90, 85, 85),
        },
        features=frozenset({"ats"}),
        strengths=(
            "Open bullets with a number such as revenue, percentage, or volume",
            "Compare results against targets or the prior period",
        ),
        limitations=("Early-career candidates may have few numbers to show",),
    ),
    ScoringOption(
        option_id="creative-portfolio",
        name="Creative Portfolio",
        fit={
            "industry": {
                "arts": 95, "media": 95, "marketing": 85, "beauty": 85,
                "technology": 60, "finance": 40, "healthcare": 40, "government": 40,
                "legal": 35,
            },
            "level": _levels(80, 80, 80, 80, 75, 75, 70, 65, 60),
        },
        features=frozenset({"portfolio"}),
        strengths=(
            "Link a portfolio and name the work samples it contains",
            "Pair each project with the result it produced",
        ),
        limitations=("Design-heavy layouts can break ATS parsing",),
    ),
    ScoringOption(
        option_id="entry-potential",
        name="Entry-Level Potential",
        fit={
            "level": _levels(95, 95, 80, 50, 35, 30, 30, 25, 20),
        },
        features=frozenset({"entry", "transferable"}),
        strengths=(
            "Put education, projects, and internships before work history",
            "Show coursework and certifications that map to the role",
        ),
        limitations=("Reads as junior if you already have several years of experience",),
    ),
    ScoringOption(
        option_id="leadership-scope",
        name="Leadership Scope",
        fit={
            "industry": {"consulting": 85, "government": 80, "nonprofit": 80},
            "level": _levels(20, 20, 35, 65, 85, 95, 95, 95, 95),
        },
        features=frozenset({"transferable"}),
        strengths=(
            "Quantify the team size and budget you were responsible for",
            "Lead with decisions you owned and their organizational outcome",
        ),
        limitations=("Needs concrete leadership examples to be credible",),
    ),
)


def _entry_bonus(option, context):
    if context.has_flag("fresher") and option.has_feature("entry"):
        return BonusOutcome(points=10, reasoning="Suited to candidates seeking a first role")
    return None


def _career_change_bonus(option, context):
    if context.has_flag("career_changing") and option.has_feature("transferable"):
        return BonusOutcome(points=10, reasoning="Frames transferable experience for a new field")
    return None


def _keyword_bonus(option, context):
    if context.keywords and option.has_feature("ats"):
        return BonusOutcome(points=5, reasoning="Keyword-aligned content helps ATS screening")
    return None


GUIDANCE_SCORER = WeightedScorer(
    factors=DEFAULT_SCORER.factors,
    bonus_rules=(_entry_bonus, _career_change_bonus, _keyword_bonus),
)


def _resolve_industry(role: str | None, role_def: RoleDefinition | None) -> str:
    if role_def:
        return role_def.industry
    if role:
        return detect_industry_from_title(role)
    return "other"


def rank_guidance_profiles(context: RecommendationContext) -> list[Recommendation]:
    """Guidance profiles ranked for ``context``, best first."""
    industry = context.industry
    if not industry:
        role_def = find_role(context.role) if context.role else None
        industry = _resolve_industry(context.role, role_def)
    level = context.experience_level or DEFAULT_LEVEL
    if context.has_flag("fresher"):
        level = "fresher"
    prepared = context.model_copy(update={"industry": industry, "experience_level": level})
    return GUIDANCE_SCORER.rank(GUIDANCE_PROFILES, prepared)


def photo_advice(role_def: RoleDefinition | None, industry: str, region: str) -> PhotoAdvice:
    if role_def:
        recommendation = role_def.photo_recommendation
    elif region in ("US", "UK"):
        recommendation = "not_recommended"
    else:
        recommendation = PHOTO_BY_INDUSTRY.get(industry) or PHOTO_BY_REGION.get(region, "optional")

    if recommendation == "required":
        reason = (f"Photos are standard practice in {industry} roles. "
                  "Recruiters expect to see a professional headshot.")
    elif recommendation == "recommended":
        reason = (f"Photos are common in {industry}. "
                  "A professional headshot can make your application more personal.")
    elif recommendation == "not_recommended":
        reason = "Photos are not expected and may introduce bias. Focus on your qualifications instead."
    else:
        reason = "Photos are optional. Include one only if you have a professional headshot."

    tips = (["Omit photo to focus attention on qualifications."]
            if recommendation == "not_recommended" else list(PHOTO_TIPS))
    return PhotoAdvice(recommendation=recommendation, reason=reason, tips=tips)


def ats_tips(industry: str, role_def: RoleDefinition | None) -> list[str]:
    tips = list(BASE_ATS_TIPS)
    if INDUSTRY_GUIDANCE.get(industry, {}).get("ats_importance") == "high":
        tips.extend(HIGH_ATS_TIPS)
    if role_def and role_def.ats_keywords:
        tips.append(
            f"Include these keywords if relevant: {', '.join(role_def.ats_keywords[:5])}"
        )
    return tips


def tone_advice(industry: str, role_def: RoleDefinition | None) -> str:
    style = role_def.tone_style if role_def else get_industry_info(industry).resume_style
    return TONE_ADVICE.get(style, DEFAULT_TONE_ADVICE)


def format_advice(industry: str, level: str) -> str:
    if level in ("executive", "director"):
        return EXECUTIVE_FORMAT_ADVICE
    style = INDUSTRY_GUIDANCE.get(industry, {}).get("format", "professional")
    return FORMAT_ADVICE.get(style, DEFAULT_FORMAT_ADVICE)


def guidance_for_role(
    role: str,
    level: str = DEFAULT_LEVEL,
    region: str = DEFAULT_REGION,
    flags: list[str] | None = None,
    keywords: list[str] | None = None,
) -> RoleGuidance:
    """Assemble resume guidance for a target role and experience level."""
    role_def = find_role(role)
    industry = _resolve_industry(role, role_def)
    level_info = LEVEL_GUIDANCE.get(level, LEVEL_GUIDANCE[DEFAULT_LEVEL])
    industry_info = get_industry_info(industry)
    industry_guidance = INDUSTRY_GUIDANCE.get(industry, {})

    context = RecommendationContext(
        role=role, industry=industry, experience_level=level, region=region,
        flags=flags or [], keywords=keywords or [],
    )
    ranked = rank_guidance_profiles(context)
    logger.debug(
        "Guidance for %r: industry=%s level=%s profile=%s",
        role, industry, level, ranked[0].option_id if ranked else None,
    )

    if role_def:
        verbs = list(role_def.action_verbs)
        metrics = list(role_def.metric_examples)
        keywords_out = list(role_def.ats_keywords)
    else:
        verbs = INDUSTRY_ACTION_VERBS.get(industry, GENERIC_ACTION_VERBS)
        metrics = INDUSTRY_METRICS.get(industry, GENERIC_METRICS)
        keywords_out = list(industry_info.key_skill_categories)

    return RoleGuidance(
        role=role,
        industry=industry,
        level=level,
        profile=ranked[0] if ranked else None,
        ranked_profiles=ranked,
        summary_focus=level_info["summary_focus"],
        experience_focus=level_info["experience_focus"],
        length_advice=level_info["length_advice"],
        tone_advice=tone_advice(industry, role_def),
        format_advice=format_advice(industry, level),
        photo_advice=photo_advice(role_def, industry, region),
        ats_keywords=keywords_out,
        ats_tips=ats_tips(industry, role_def),
        action_verbs=list(verbs) or GENERIC_ACTION_VERBS,
        metric_examples=list(metrics) or GENERIC_METRICS,
        common_mistakes=industry_guidance.get("common_mistakes", GENERIC_MISTAKES),
        recruiter_focus=industry_guidance.get("recruiter_focus", GENERIC_RECRUITER_FOCUS),
    )
