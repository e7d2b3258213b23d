import logging

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from app.config import settings
from app.core.errors import InvalidInputError, NotFoundError
from app.database import get_db
from app.repos.application_repo import get_all as get_all_applications, get_with_relations
from app.schemas.application import (
    ApplicationResponse,
    ApplicationStatusUpdate,
    PipelineColumn,
    RecentApplication,
)
from app.schemas.interview import ApplicationDetail
from app.services.aggregate_views import pipeline_view, recent_applications
from app.services.application_lifecycle import transition_status

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/applications", tags=["applications"])


@router.get("", response_model=list[ApplicationResponse])
def list_applications(db: Session = Depends(get_db)):
    return get_all_applications(db)


# Fixed paths must be registered before /{application_id}.
@router.get("/recent", response_model=list[RecentApplication])
def get_recent_applications(
    limit: int | None = Query(default=None, ge=1, le=100),
    db: Session = Depends(get_db),
):
    return recent_applications(db, limit or settings.recent_applications_limit)


@router.get("/pipeline", response_model=list[PipelineColumn])
def get_pipeline(db: Session = Depends(get_db)):
    """Applications grouped into kanban columns by status."""
    return pipeline_view(db)


@router.get("/{application_id}", response_model=ApplicationDetail)
def get_application(application_id: str, db: Session = Depends(get_db)):
    application = get_with_relations(db, application_id)
    if not application:
        raise HTTPException(status_code=404, detail="Application not found")
    if not application.candidate or not application.job:
        raise HTTPException(status_code=404, detail="Related data not found")
    return application


@router.patch("/{application_id}/status", response_model=ApplicationResponse)
def update_application_status(
    application_id: str,
    data: ApplicationStatusUpdate,
    db: Session = Depends(get_db),
):
    """Move an application to any pipeline status (no forward-only rule)."""
    try:
        return transition_status(db, application_id, data.status)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e
    except InvalidInputError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e
