"""Resume vs. job description comparison results."""

from pydantic import BaseModel


class KeywordMatch(BaseModel):
    keyword: str
    category: str  # skill, tool, tech, soft, role, business, certification
    found: bool


class MatchResult(BaseModel):
    matched: list[KeywordMatch] = []
    missing: list[KeywordMatch] = []
    overused: list[str] = []
    score: int = 0
    total_keywords: int = 0
    suggestions: list[str] = []


class SkillGap(BaseModel):
    skill: str
    importance: str


class PartialSkillMatch(BaseModel):
    jd_skill: str
    resume_skill: str


class JDResumeComparison(BaseModel):
    """Skill and credential alignment between a parsed JD and a resume."""
    matched_skills: list[str] = []
    partial_matches: list[PartialSkillMatch] = []
    missing_skills: list[SkillGap] = []
    matched_certifications: list[str] = []
    missing_certifications: list[str] = []
    experience_match: bool = True
    education_match: bool = True
    overall_alignment: str = "weak"  # strong | moderate | weak
    advice: list[str] = []
