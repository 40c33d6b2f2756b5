"""Static role and industry reference records."""

from pydantic import BaseModel, ConfigDict


class RoleDefinition(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    aliases: tuple[str, ...] = ()
    industry: str = "other"
    levels: tuple[str, ...] = ()
    core_skills: tuple[str, ...] = ()
    tools: tuple[str, ...] = ()
    certifications: tuple[str, ...] = ()
    ats_keywords: tuple[str, ...] = ()
    action_verbs: tuple[str, ...] = ()
    metric_examples: tuple[str, ...] = ()
    tone_style: str = "professional"  # formal | professional | creative | technical
    photo_recommendation: str = "optional"
    demand_level: str = "medium"
    growth_trend: str = "stable"
    fresher_friendly: bool = False
    fresher_alternatives: tuple[str, ...] = ()


class IndustryInfo(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    description: str = ""
    key_skill_categories: tuple[str, ...] = ()
    certification_bodies: tuple[str, ...] = ()
    resume_style: str = "professional"
