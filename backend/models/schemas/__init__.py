"""Typed records exchanged between the analysis services."""

from models.schemas.jd_analysis import JDAnalysis, SeniorityLevel, Urgency
from models.schemas.keywords import (
    CategoryDictionary,
    ExtractedKeyword,
    Importance,
    KeywordBag,
)
from models.schemas.match_result import (
    JDResumeComparison,
    KeywordMatch,
    MatchResult,
    PartialSkillMatch,
    SkillGap,
)
from models.schemas.recommendation import (
    PhotoAdvice,
    PremiumVerdict,
    Recommendation,
    RecommendationContext,
    RoleGuidance,
    ScoringOption,
)
from models.schemas.roles import IndustryInfo, RoleDefinition
from models.schemas.structure_report import SectionCheck, StructureReport

__all__ = [
    "CategoryDictionary",
    "ExtractedKeyword",
    "Importance",
    "IndustryInfo",
    "JDAnalysis",
    "JDResumeComparison",
    "KeywordBag",
    "KeywordMatch",
    "MatchResult",
    "PartialSkillMatch",
    "PhotoAdvice",
    "PremiumVerdict",
    "Recommendation",
    "RecommendationContext",
    "RoleDefinition",
    "RoleGuidance",
    "ScoringOption",
    "SectionCheck",
    "SeniorityLevel",
    "SkillGap",
    "StructureReport",
    "Urgency",
]
