from datetime import datetime

from pydantic import BaseModel, EmailStr, field_validator

from app.schemas.analysis import ResumeAnalysis
from app.schemas.application import ApplicationResponse
from app.schemas.job import JobResponse


class CandidateSubmission(BaseModel):
    """Form fields that accompany a resume upload."""

    name: str
    email: EmailStr
    phone: str | None = None
    job_id: str

    @field_validator("name", "job_id")
    @classmethod
    def not_blank(cls, v: str) -> str:
        v = (v or "").strip()
        if not v:
            raise ValueError("must not be blank")
        return v

    @field_validator("phone")
    @classmethod
    def empty_phone_is_none(cls, v: str | None) -> str | None:
        v = (v or "").strip()
        return v or None


class CandidateResponse(BaseModel):
    id: str
    name: str
    email: str
    phone: str | None = None
    resume_url: str | None = None
    skills: list[str] | None = None
    experience: str | None = None
    education: str | None = None
    linkedin_url: str | None = None
    portfolio_url: str | None = None
    created_at: datetime | None = None

    class Config:
        from_attributes = True


class CandidateApplication(ApplicationResponse):
    job: JobResponse | None = None


class RankedCandidate(CandidateResponse):
    applications: list[CandidateApplication] = []
    best_match_score: int | None = None


class SubmissionResponse(BaseModel):
    candidate: CandidateResponse
    application: ApplicationResponse
    analysis: ResumeAnalysis
