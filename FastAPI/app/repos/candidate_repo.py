import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.errors import ConflictError
from app.core.ids import generate_id
from app.models.candidate import Candidate

logger = logging.getLogger(__name__)


def normalize_email(email: str) -> str:
    return (email or "").strip().lower()


def get_by_email(db: Session, email: str) -> Candidate | None:
    return db.query(Candidate).filter(Candidate.email == normalize_email(email)).first()


def get_by_id(db: Session, candidate_id: str) -> Candidate | None:
    return db.query(Candidate).filter(Candidate.id == candidate_id).first()


def get_all(db: Session) -> list[Candidate]:
    """All candidates, newest first."""
    return db.query(Candidate).order_by(Candidate.created_at.desc()).all()


def create(
    db: Session,
    name: str,
    email: str,
    *,
    phone: str | None = None,
    resume_url: str | None = None,
    resume_text: str | None = None,
    skills: list[str] | None = None,
    experience: str | None = None,
    education: str | None = None,
    linkedin_url: str | None = None,
    portfolio_url: str | None = None,
) -> Candidate:
    """
    Insert a candidate. Raises ConflictError when the email already exists
    (the unique index caught a concurrent insert); the session is rolled back.
    """
    candidate = Candidate(
        id=generate_id(),
        name=name,
        email=normalize_email(email),
        phone=phone,
        resume_url=resume_url,
        resume_text=resume_text,
        skills=skills,
        experience=experience,
        education=education,
        linkedin_url=linkedin_url,
        portfolio_url=portfolio_url,
    )
    db.add(candidate)
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        logger.info("Candidate insert conflicted on email=%s", candidate.email)
        raise ConflictError(f"Candidate with email {candidate.email} already exists") from e
    db.refresh(candidate)
    return candidate
