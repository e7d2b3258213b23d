from pydantic import BaseModel, Field


class ResumeAnalysis(BaseModel):
    """Structured fields the LLM extracts from resume text."""

    skills: list[str] = Field(default_factory=list)
    experience: str = ""
    education: str = ""
    summary: str = ""

    @classmethod
    def placeholder(cls) -> "ResumeAnalysis":
        return cls(
            skills=[],
            experience="Not analyzed",
            education="Not analyzed",
            summary="AI analysis unavailable",
        )


class MatchAnalysis(BaseModel):
    """Candidate vs job fit. Stored verbatim as Application.ai_analysis."""

    score: float
    matched_skills: list[str] = Field(default_factory=list)
    missing_skills: list[str] = Field(default_factory=list)
    reasoning: str = ""
