import logging
from typing import Literal

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from app.database import get_db
from app.repos.application_repo import get_by_id as get_application_by_id
from app.repos.interview_repo import create as create_interview, update_status
from app.schemas.interview import (
    EnrichedInterview,
    InterviewCreate,
    InterviewResponse,
    InterviewStatusUpdate,
)
from app.services.aggregate_views import interviews_view

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/interviews", tags=["interviews"])


@router.get("", response_model=list[EnrichedInterview])
def list_interviews(
    bucket: Literal["upcoming", "past"] | None = None,
    db: Session = Depends(get_db),
):
    return [
        EnrichedInterview(
            **InterviewResponse.model_validate(row["interview"]).model_dump(),
            candidate_name=row["candidate_name"],
            job_title=row["job_title"],
        )
        for row in interviews_view(db, bucket=bucket)
    ]


@router.post("", response_model=InterviewResponse, status_code=status.HTTP_201_CREATED)
def schedule_interview(data: InterviewCreate, db: Session = Depends(get_db)):
    """Store an interview slot. Does not change the application's status."""
    if not get_application_by_id(db, data.application_id):
        raise HTTPException(status_code=404, detail="Application not found")
    interview = create_interview(db, data.model_dump())
    logger.info("Interview %s scheduled for application %s at %s", interview.id, data.application_id, data.scheduled_at)
    return interview


@router.patch("/{interview_id}/status", response_model=InterviewResponse)
def update_interview_status(
    interview_id: str,
    data: InterviewStatusUpdate,
    db: Session = Depends(get_db),
):
    interview = update_status(db, interview_id, data.status)
    if not interview:
        raise HTTPException(status_code=404, detail="Interview not found")
    return interview
