from pydantic import BaseModel

from models.schemas.jd_analysis import JDAnalysis
from models.schemas.match_result import JDResumeComparison, MatchResult
from models.schemas.structure_report import StructureReport


class ScoreBreakdown(BaseModel):
    keywords_match: int = 0
    structure: int = 0


class AnalysisResponse(BaseModel):
    overall_score: int = 0
    score_breakdown: ScoreBreakdown = ScoreBreakdown()
    scoring_method: str = "keyword"  # keyword | strength
    jd_analysis: JDAnalysis | None = None
    match: MatchResult = MatchResult()
    structure: StructureReport = StructureReport()
    comparison: JDResumeComparison | None = None
    missing_keywords: list[str] = []
    matched_keywords: list[str] = []
    keyword_density: dict[str, float] = {}
    summary: str = ""
    strengths: list[str] = []
    weaknesses: list[str] = []


class RoleCorrectionResponse(BaseModel):
    query: str
    correction: str | None = None


class IndustryResponse(BaseModel):
    industry: str
    name: str
