"""Inputs and outputs of the weighted recommendation scorer."""

from pydantic import BaseModel, ConfigDict


class RecommendationContext(BaseModel):
    """Caller-assembled bundle describing who the recommendation is for.

    ``flags`` carries boolean hints such as ``fresher`` or
    ``career_changing``.
    """
    role: str | None = None
    industry: str | None = None
    experience_level: str | None = None
    region: str | None = None
    keywords: list[str] = []
    flags: list[str] = []

    def has_flag(self, flag: str) -> bool:
        return flag in self.flags


class ScoringOption(BaseModel):
    """A candidate option (template, guidance profile) with its fit tables.

    ``fit`` maps factor name -> context value -> 0-100 fit. ``notes``
    maps factor name -> context value -> a sentence appended to the
    reasoning when that value is requested. ``suitability`` holds the
    option's intrinsic 0-100 ratings used by bonus rules.
    """
    model_config = ConfigDict(frozen=True)

    option_id: str
    name: str
    fit: dict[str, dict[str, int]] = {}
    notes: dict[str, dict[str, str]] = {}
    suitability: dict[str, int] = {}
    features: frozenset[str] = frozenset()
    strengths: tuple[str, ...] = ()
    limitations: tuple[str, ...] = ()

    def has_feature(self, feature: str) -> bool:
        return feature in self.features


class Recommendation(BaseModel):
    option_id: str
    name: str = ""
    score: int = 0
    reasoning: list[str] = []
    warnings: list[str] = []
    suggestions: list[str] = []


class PhotoAdvice(BaseModel):
    recommendation: str  # required | recommended | optional | not_recommended
    reason: str
    tips: list[str] = []


class RoleGuidance(BaseModel):
    role: str
    industry: str
    level: str
    profile: Recommendation | None = None
    ranked_profiles: list[Recommendation] = []
    summary_focus: str = ""
    experience_focus: str = ""
    length_advice: str = ""
    tone_advice: str = ""
    format_advice: str = ""
    photo_advice: PhotoAdvice | None = None
    ats_keywords: list[str] = []
    ats_tips: list[str] = []
    action_verbs: list[str] = []
    metric_examples: list[str] = []
    common_mistakes: list[str] = []
    recruiter_focus: list[str] = []


class PremiumVerdict(BaseModel):
    worth_it: bool
    reasoning: list[str] = []
