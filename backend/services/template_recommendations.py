"""Resume template recommendations built on the weighted scorer."""

import logging
from functools import lru_cache

from models.schemas.recommendation import (
    PremiumVerdict,
    Recommendation,
    RecommendationContext,
    ScoringOption,
)
from models.schemas.roles import RoleDefinition
from services.recommender import BonusOutcome, DEFAULT_SCORER, WeightedScorer
from services.role_classifier import detect_industry_from_title, find_role
from services.role_database import REGION_ATS_PREVALENCE, REGION_PHOTO_REQUIREMENTS

logger = logging.getLogger(__name__)

FRESHER = "fresher"
CAREER_CHANGING = "career_changing"
DEFAULT_LEVEL = "mid"

TEMPLATES: tuple[ScoringOption, ...] = (
    ScoringOption(
        option_id="template1free",
        name="Free ATS Template",
        suitability={"ats": 95, "visual": 70, "density": 85, "formality": 80},
        features=frozenset({"color_accent"}),
        strengths=(
            "Highest ATS compatibility - parsed correctly by all major ATS systems",
            "Clean, distraction-free layout focuses recruiters on content",
            "Single-column format ensures proper reading order",
            "Standard section headings recognized by keyword scanners",
            "Works well for content-heavy resumes",
        ),
        limitations=(
            "Less visually distinctive than premium templates",
            "No AI bullet rewriting included",
            "May appear too basic for creative roles",
            "No sidebar for skills visualization",
        ),
        fit={
            "industry": {
                "technology": 85, "healthcare": 90, "finance": 90, "education": 85,
                "manufacturing": 90, "government": 95, "consulting": 85, "legal": 90,
                "logistics": 90, "trades": 85, "retail": 80, "hospitality": 75,
                "marketing": 65, "media": 60, "arts": 55,
            },
            "level": {
                "intern": 85, "fresher": 90, "junior": 90, "mid": 85, "senior": 80,
                "lead": 75, "manager": 75, "director": 70, "executive": 65,
            },
        },
        notes={"region": {
            "US": "Excellent choice - US employers heavily use ATS",
            "UK": "Good fit - clean CV format appreciated",
            "DE": "Suitable but consider adding photo section",
            "AE": "Add photo and personal details manually",
            "IN": "Strong choice - ATS common in Indian tech hiring",
            "AU": "Good fit - similar to US/UK standards",
            "JP": "May need adaptation for Rirekisho format",
        }},
    ),
    ScoringOption(
        option_id="template2",
        name="AI-Enhanced Template",
        suitability={"ats": 90, "visual": 85, "density": 80, "formality": 85},
        features=frozenset({"ai_rewriting", "premium", "color_accent"}),
        strengths=(
            "AI-powered bullet rewriting transforms generic descriptions into impact statements",
            "Professional design with subtle color accents",
            "Optimized for both ATS parsing and human readability",
            "Better visual hierarchy guides recruiter attention",
            "Suitable for competitive job markets",
        ),
        limitations=(
            "Requires a one-time payment",
            "AI rewriting depends on quality of input",
            "Slightly less ATS-safe than pure text template",
            "Not suitable for extremely traditional industries",
        ),
        fit={
            "industry": {
                "technology": 95, "healthcare": 85, "finance": 90, "education": 80,
                "manufacturing": 80, "government": 75, "consulting": 95, "legal": 85,
                "logistics": 80, "trades": 70, "retail": 75, "hospitality": 70,
                "marketing": 90, "media": 85, "arts": 75, "sales": 90,
            },
            "level": {
                "intern": 70, "fresher": 75, "junior": 85, "mid": 95, "senior": 95,
                "lead": 90, "manager": 90, "director": 85, "executive": 80,
            },
        },
        notes={"region": {
            "US": "Excellent - AI optimization valuable in competitive market",
            "UK": "Good fit - professional presentation appreciated",
            "DE": "Acceptable - formal design suits German expectations",
            "AE": "Good - professional look valued in Gulf region",
            "IN": "Strong choice - tech roles benefit from AI optimization",
            "AU": "Good fit - achievement-focused content works well",
            "JP": "Consider traditional format instead",
        }},
    ),
)


@lru_cache(maxsize=256)
def _role_definition(role: str) -> RoleDefinition | None:
    return find_role(role)


def _resolved_role(context: RecommendationContext) -> RoleDefinition | None:
    return _role_definition(context.role) if context.role else None


def _entry_ats_bonus(option, context):
    if not (context.has_flag(FRESHER) or context.has_flag(CAREER_CHANGING)):
        return None
    if option.suitability.get("ats", 0) >= 90:
        return BonusOutcome(
            points=8, reasoning="High ATS compatibility important for entry-level/career change",
        )
    return None


def _fresher_premium_warning(option, context):
    if context.has_flag(FRESHER) and option.has_feature("premium"):
        return BonusOutcome(
            warning="Consider free template first - build strong content before investing",
        )
    return None


def _career_change_rewriting(option, context):
    if context.has_flag(CAREER_CHANGING) and option.has_feature("ai_rewriting"):
        return BonusOutcome(
            points=10, reasoning="AI rewriting helps translate experience to new field",
        )
    return None


def _regional_photo(option, context):
    if not context.region or option.has_feature("photo"):
        return None
    if REGION_PHOTO_REQUIREMENTS.get(context.region) in ("required", "expected"):
        return BonusOutcome(warning=f"{context.region} typically expects photos - add manually")
    return None


def _regional_ats(option, context):
    if context.region and REGION_ATS_PREVALENCE.get(context.region) == "very_high":
        return BonusOutcome(
            points=option.suitability.get("ats", 0) * 0.1,
            reasoning="ATS compatibility critical in this region",
        )
    return None


def _technical_density(option, context):
    role = _resolved_role(context)
    if role and role.industry == "technology" and option.suitability.get("density", 0) >= 80:
        return BonusOutcome(
            points=5, reasoning="Good content density for detailed technical experience",
        )
    return None


def _executive_presentation(option, context):
    role = _resolved_role(context)
    if role and context.experience_level in ("director", "executive"):
        if option.suitability.get("visual", 0) >= 80:
            return BonusOutcome(points=5)
    return None


def _creative_visuals(option, context):
    role = _resolved_role(context)
    if role and role.industry in ("marketing", "media", "arts"):
        return BonusOutcome(points=option.suitability.get("visual", 0) * 0.15)
    return None


def _keyword_rewriting(option, context):
    if option.has_feature("ai_rewriting") and context.keywords:
        return BonusOutcome(
            points=10, reasoning="AI rewriting can optimize bullets for job description keywords",
        )
    return None


def _experienced_rewriting(option, context):
    if option.has_feature("ai_rewriting") and context.experience_level in ("mid", "senior", "lead"):
        return BonusOutcome(points=5)
    return None


TEMPLATE_SCORER = WeightedScorer(
    factors=DEFAULT_SCORER.factors,
    note_fields=("region",),
    bonus_rules=(
        _entry_ats_bonus,
        _fresher_premium_warning,
        _career_change_rewriting,
        _regional_photo,
        _regional_ats,
        _technical_density,
        _executive_presentation,
        _creative_visuals,
        _keyword_rewriting,
        _experienced_rewriting,
    ),
)


def prepare_context(context: RecommendationContext) -> RecommendationContext:
    """Fill in industry from the role title and settle the experience level."""
    industry = context.industry
    if not industry and context.role:
        industry = detect_industry_from_title(context.role)

    level = context.experience_level or DEFAULT_LEVEL
    if context.has_flag(FRESHER):
        level = FRESHER
    return context.model_copy(update={"industry": industry, "experience_level": level})


def recommend_templates(context: RecommendationContext) -> list[Recommendation]:
    """Templates ranked for ``context``, best first."""
    prepared = prepare_context(context)
    logger.debug(
        "Recommending templates for role=%s industry=%s level=%s",
        prepared.role, prepared.industry, prepared.experience_level,
    )
    return TEMPLATE_SCORER.rank(TEMPLATES, prepared)


def _is_premium(option_id: str) -> bool:
    return any(t.option_id == option_id and t.has_feature("premium") for t in TEMPLATES)


def best_template_for_role(role: str) -> Recommendation:
    return recommend_templates(RecommendationContext(role=role))[0]


def best_free_template(context: RecommendationContext) -> Recommendation | None:
    for rec in recommend_templates(context):
        if not _is_premium(rec.option_id):
            return rec
    return None


def is_premium_worth_it(context: RecommendationContext) -> PremiumVerdict:
    """Whether the premium template earns its price for this profile."""
    recs = recommend_templates(context)
    free = next((r for r in recs if not _is_premium(r.option_id)), None)
    premium = next((r for r in recs if _is_premium(r.option_id)), None)
    if free is None or premium is None:
        return PremiumVerdict(worth_it=False, reasoning=["Unable to compare templates"])

    diff = premium.score - free.score
    reasoning = []
    if diff >= 15:
        reasoning.append(f"Premium template scores {diff} points higher for your profile")
    if context.experience_level in ("mid", "senior", "lead", "manager"):
        reasoning.append("Career level justifies investment in professional presentation")
    if context.industry in ("technology", "consulting", "finance"):
        reasoning.append("Competitive industry benefits from AI-optimized content")

    if context.has_flag(FRESHER):
        reasoning.append("Focus on building strong content first - free template sufficient")
        return PremiumVerdict(worth_it=False, reasoning=reasoning)

    worth_it = diff >= 10 or context.experience_level in ("senior", "lead", "manager", "director")
    return PremiumVerdict(worth_it=worth_it, reasoning=reasoning)


def recommended_section_order(context: RecommendationContext) -> list[str]:
    """Resume section order suited to the candidate's situation."""
    level = context.experience_level
    industry = context.industry
    if not industry and context.role:
        industry = detect_industry_from_title(context.role)

    if context.has_flag(FRESHER) or level in ("fresher", "intern"):
        return ["summary", "education", "projects", "skills", "experience", "certifications"]
    if context.has_flag(CAREER_CHANGING):
        return ["summary", "skills", "experience", "projects", "education", "certifications"]
    if industry in ("healthcare", "legal"):
        return ["summary", "certifications", "experience", "skills", "education", "projects"]
    if industry == "technology":
        return ["summary", "experience", "projects", "skills", "education", "certifications"]
    if level in ("director", "executive"):
        return ["summary", "experience", "skills", "education", "certifications"]
    return ["summary", "experience", "skills", "education", "certifications", "projects"]
