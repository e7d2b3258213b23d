"""Dashboard counters, computed straight from the tables on every call."""

from sqlalchemy import func
from sqlalchemy.orm import Session

from app.models.application import Application
from app.models.candidate import Candidate
from app.models.interview import Interview
from app.models.job import Job


def get_stats(db: Session) -> dict:
    """Return dashboard stats."""
    total_jobs = db.query(func.count(Job.id)).scalar() or 0
    active_jobs = db.query(func.count(Job.id)).filter(Job.status == "active").scalar() or 0
    total_candidates = db.query(func.count(Candidate.id)).scalar() or 0
    total_applications = db.query(func.count(Application.id)).scalar() or 0
    interviews_scheduled = (
        db.query(func.count(Interview.id)).filter(Interview.status == "scheduled").scalar() or 0
    )
    offers_extended = db.query(func.count(Application.id)).filter(Application.status == "offer").scalar() or 0
    return {
        "total_jobs": total_jobs,
        "active_jobs": active_jobs,
        "total_candidates": total_candidates,
        "total_applications": total_applications,
        "interviews_scheduled": interviews_scheduled,
        "offers_extended": offers_extended,
    }
