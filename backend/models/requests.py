from pydantic import BaseModel, Field


class TextRequest(BaseModel):
    text: str = Field(..., max_length=50000, description="Plain text to analyze")


class JobDescriptionRequest(BaseModel):
    job_description: str = Field(..., max_length=10000, description="Job description text")


class ResumeRequest(BaseModel):
    resume_text: str = Field(..., max_length=50000, description="Plain text resume content")


class AnalyzeRequest(BaseModel):
    resume_text: str = Field(..., max_length=50000, description="Plain text resume content")
    job_description: str = Field("", max_length=10000, description="Job description text; blank for resume-only scoring")


class GuidanceRequest(BaseModel):
    role: str = Field(..., min_length=1, max_length=200)
    level: str = "mid"
    region: str = "GLOBAL"
    flags: list[str] = []
    keywords: list[str] = []
