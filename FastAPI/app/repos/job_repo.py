from sqlalchemy.orm import Session

from app.models.job import Job
from app.core.ids import generate_id


def create(db: Session, data: dict) -> Job:
    job = Job(id=generate_id(), **data)
    db.add(job)
    db.commit()
    db.refresh(job)
    return job


def get_by_id(db: Session, job_id: str) -> Job | None:
    return db.query(Job).filter(Job.id == job_id).first()


def get_all(db: Session, status: str | None = None) -> list[Job]:
    """All jobs, newest first. Optional status filter (active/closed/draft)."""
    q = db.query(Job)
    if status is not None:
        q = q.filter(Job.status == status)
    return q.order_by(Job.created_at.desc()).all()


def update(db: Session, job_id: str, changes: dict) -> Job | None:
    job = get_by_id(db, job_id)
    if not job:
        return None
    for field, value in changes.items():
        setattr(job, field, value)
    db.commit()
    db.refresh(job)
    return job
