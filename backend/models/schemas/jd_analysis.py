"""Structured view of a job description."""

from enum import Enum

from pydantic import BaseModel

from models.schemas.keywords import ExtractedKeyword, KeywordBag


class SeniorityLevel(str, Enum):
    ENTRY = "entry"
    MID = "mid"
    SENIOR = "senior"
    LEAD = "lead"
    UNKNOWN = "unknown"


class Urgency(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class JDAnalysis(BaseModel):
    """Output of ``jd_parser.parse_job_description``.

    ``core_skills`` and ``nice_to_have`` split the lexicon skills by their
    position relative to the first "nice to have / preferred / bonus"
    marker. ``hard_skills`` are the industry dictionary hits with
    per-sentence importance.
    """
    role_type: str = ""
    detected_role: str | None = None
    seniority_level: SeniorityLevel = SeniorityLevel.UNKNOWN
    seniority_signals: list[str] = []
    core_skills: list[str] = []
    nice_to_have: list[str] = []
    responsibilities: list[str] = []
    industry: str = "other"

    hard_skills: list[ExtractedKeyword] = []
    soft_skills: list[ExtractedKeyword] = []
    tools: list[ExtractedKeyword] = []
    certifications: list[ExtractedKeyword] = []
    education_requirements: list[str] = []
    experience_requirements: list[str] = []
    keywords: KeywordBag = KeywordBag()

    is_remote: bool = False
    location: str | None = None
    salary_mentioned: bool = False
    urgency: Urgency = Urgency.LOW

    confidence: int = 50
    warnings: list[str] = []
