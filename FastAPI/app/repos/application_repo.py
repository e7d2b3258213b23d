from sqlalchemy.orm import Session, joinedload

from app.core.ids import generate_id, utcnow
from app.models.application import Application


def create(
    db: Session,
    job_id: str,
    candidate_id: str,
    match_score: int | None = None,
    ai_analysis: dict | None = None,
    status: str = "applied",
) -> Application:
    application = Application(
        id=generate_id(),
        job_id=job_id,
        candidate_id=candidate_id,
        status=status,
        match_score=match_score,
        ai_analysis=ai_analysis,
    )
    db.add(application)
    db.commit()
    db.refresh(application)
    return application


def get_by_id(db: Session, application_id: str) -> Application | None:
    return db.query(Application).filter(Application.id == application_id).first()


def get_with_relations(db: Session, application_id: str) -> Application | None:
    return (
        db.query(Application)
        .options(
            joinedload(Application.candidate),
            joinedload(Application.job),
            joinedload(Application.interviews),
        )
        .filter(Application.id == application_id)
        .first()
    )


def get_all(db: Session, limit: int | None = None) -> list[Application]:
    """All applications, most recent first."""
    q = db.query(Application).order_by(Application.applied_at.desc())
    if limit is not None:
        q = q.limit(limit)
    return q.all()


def get_all_enriched(db: Session, limit: int | None = None) -> list[Application]:
    """Same as get_all with candidate and job eagerly loaded for denormalized views."""
    q = (
        db.query(Application)
        .options(joinedload(Application.candidate), joinedload(Application.job))
        .order_by(Application.applied_at.desc())
    )
    if limit is not None:
        q = q.limit(limit)
    return q.all()


def get_by_job(db: Session, job_id: str) -> list[Application]:
    return (
        db.query(Application)
        .filter(Application.job_id == job_id)
        .order_by(Application.match_score.desc().nullslast(), Application.applied_at.desc())
        .all()
    )


def update_status(db: Session, application_id: str, status: str) -> Application | None:
    """Set status and bump updated_at. Score and analysis are never touched here."""
    application = get_by_id(db, application_id)
    if not application:
        return None
    application.status = status
    application.updated_at = utcnow()
    db.commit()
    db.refresh(application)
    return application
