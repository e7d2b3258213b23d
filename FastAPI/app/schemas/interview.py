from datetime import datetime
from typing import Literal

from pydantic import BaseModel, EmailStr, Field

from app.schemas.application import ApplicationResponse
from app.schemas.candidate import CandidateResponse
from app.schemas.job import JobResponse

InterviewStatus = Literal["scheduled", "completed", "cancelled"]


class InterviewCreate(BaseModel):
    application_id: str
    scheduled_at: datetime
    duration: int = Field(default=60, ge=1, le=24 * 60)
    interviewer_name: str | None = None
    interviewer_email: EmailStr | None = None
    meeting_link: str | None = None
    notes: str | None = None


class InterviewStatusUpdate(BaseModel):
    status: InterviewStatus


class InterviewResponse(BaseModel):
    id: str
    application_id: str
    scheduled_at: datetime
    duration: int
    interviewer_name: str | None = None
    interviewer_email: str | None = None
    meeting_link: str | None = None
    notes: str | None = None
    status: str
    created_at: datetime | None = None

    class Config:
        from_attributes = True


class EnrichedInterview(InterviewResponse):
    candidate_name: str
    job_title: str


class ApplicationDetail(ApplicationResponse):
    candidate: CandidateResponse
    job: JobResponse
    interviews: list[InterviewResponse] = []
