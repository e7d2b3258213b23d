from sqlalchemy.orm import Session, joinedload

from app.core.ids import generate_id
from app.models.application import Application
from app.models.interview import Interview


def create(db: Session, data: dict) -> Interview:
    interview = Interview(id=generate_id(), **data)
    db.add(interview)
    db.commit()
    db.refresh(interview)
    return interview


def get_by_id(db: Session, interview_id: str) -> Interview | None:
    return db.query(Interview).filter(Interview.id == interview_id).first()


def get_all_enriched(db: Session) -> list[Interview]:
    """All interviews in chronological order, with application -> candidate/job loaded."""
    return (
        db.query(Interview)
        .options(
            joinedload(Interview.application).joinedload(Application.candidate),
            joinedload(Interview.application).joinedload(Application.job),
        )
        .order_by(Interview.scheduled_at.asc())
        .all()
    )


def get_by_application(db: Session, application_id: str) -> list[Interview]:
    return (
        db.query(Interview)
        .filter(Interview.application_id == application_id)
        .order_by(Interview.scheduled_at.asc())
        .all()
    )


def update_status(db: Session, interview_id: str, status: str) -> Interview | None:
    interview = get_by_id(db, interview_id)
    if not interview:
        return None
    interview.status = status
    db.commit()
    db.refresh(interview)
    return interview
