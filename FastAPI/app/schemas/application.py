from datetime import datetime
from typing import Any, Literal

from pydantic import BaseModel

ApplicationStatus = Literal["applied", "screening", "interview", "offer", "hired", "rejected"]


class ApplicationResponse(BaseModel):
    id: str
    job_id: str
    candidate_id: str
    status: str
    match_score: int | None = None
    ai_analysis: dict[str, Any] | None = None
    notes: str | None = None
    applied_at: datetime | None = None
    updated_at: datetime | None = None

    class Config:
        from_attributes = True


class ApplicationStatusUpdate(BaseModel):
    status: ApplicationStatus


class RecentApplication(BaseModel):
    id: str
    candidate_name: str
    job_title: str
    status: str
    match_score: int | None = None
    applied_at: datetime | None = None


class PipelineCard(BaseModel):
    id: str
    status: str
    match_score: int | None = None
    applied_at: datetime | None = None
    candidate_name: str
    candidate_email: str
    job_title: str
    job_department: str


class PipelineColumn(BaseModel):
    status: str
    count: int
    applications: list[PipelineCard]


class StatsResponse(BaseModel):
    total_jobs: int
    active_jobs: int
    total_candidates: int
    total_applications: int
    interviews_scheduled: int
    offers_extended: int
