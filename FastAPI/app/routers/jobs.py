import logging
from typing import Literal

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from app.database import get_db
from app.repos.application_repo import get_by_job as get_applications_by_job
from app.repos.job_repo import create as create_job, get_all as get_all_jobs, get_by_id, update as update_job
from app.schemas.application import ApplicationResponse
from app.schemas.job import JobCreate, JobResponse, JobUpdate

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/jobs", tags=["jobs"])


@router.get("", response_model=list[JobResponse])
def list_jobs(
    status: Literal["active", "closed", "draft"] | None = None,
    db: Session = Depends(get_db),
):
    return get_all_jobs(db, status=status)


@router.get("/{job_id}", response_model=JobResponse)
def get_job(job_id: str, db: Session = Depends(get_db)):
    job = get_by_id(db, job_id)
    if not job:
        raise HTTPException(status_code=404, detail="Job not found")
    return job


@router.post("", response_model=JobResponse, status_code=status.HTTP_201_CREATED)
def post_job(data: JobCreate, db: Session = Depends(get_db)):
    try:
        job = create_job(db, data.model_dump())
    except Exception as e:
        logger.exception("Failed creating job title=%r: %s", data.title, e)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to create job") from e
    logger.info("Job created: %s (%s)", job.id, job.title)
    return job


@router.patch("/{job_id}", response_model=JobResponse)
def patch_job(job_id: str, data: JobUpdate, db: Session = Depends(get_db)):
    # Only salary_range may be cleared; other columns are NOT NULL.
    changes = {
        k: v for k, v in data.model_dump(exclude_unset=True).items()
        if v is not None or k == "salary_range"
    }
    if not changes:
        raise HTTPException(status_code=400, detail="No fields to update")
    job = update_job(db, job_id, changes)
    if not job:
        raise HTTPException(status_code=404, detail="Job not found")
    logger.info("Job %s updated: %s", job_id, ", ".join(sorted(changes)))
    return job


@router.get("/{job_id}/applications", response_model=list[ApplicationResponse])
def list_job_applications(job_id: str, db: Session = Depends(get_db)):
    """Applications for one job, best match first."""
    if not get_by_id(db, job_id):
        raise HTTPException(status_code=404, detail="Job not found")
    return get_applications_by_job(db, job_id)
