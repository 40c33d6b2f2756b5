"""Resume section presence and ATS formatting checks."""

from pydantic import BaseModel


class SectionCheck(BaseModel):
    section_name: str
    present: bool
    required: bool = False
    warning: str | None = None


class StructureReport(BaseModel):
    sections: list[SectionCheck] = []
    score: int = 0
    warnings: list[str] = []
    suggestions: list[str] = []

    @property
    def missing_sections(self) -> list[str]:
        return [s.section_name for s in self.sections if not s.present]
