"""Row builders for tests that run against the in-memory database."""
from datetime import datetime, timedelta, timezone

from app.core.ids import generate_id
from app.models import Application, Candidate, Interview, Job


def make_job(db, **overrides) -> Job:
    fields = {
        "id": generate_id(),
        "title": "Backend Engineer",
        "department": "Engineering",
        "location": "Remote",
        "employment_type": "Full-time",
        "description": "Build APIs",
        "requirements": ["Python", "SQL"],
        "responsibilities": "Ship features",
        "status": "active",
    }
    fields.update(overrides)
    job = Job(**fields)
    db.add(job)
    db.commit()
    return job


def make_candidate(db, email: str, created_at: datetime | None = None, **overrides) -> Candidate:
    fields = {
        "id": generate_id(),
        "name": email.split("@")[0].title(),
        "email": email,
        "skills": ["Python"],
        "experience": "3 years",
    }
    if created_at is not None:
        fields["created_at"] = created_at
    fields.update(overrides)
    candidate = Candidate(**fields)
    db.add(candidate)
    db.commit()
    return candidate


def make_application(db, job: Job, candidate: Candidate, status="applied", score=None, applied_at=None) -> Application:
    application = Application(
        id=generate_id(),
        job_id=job.id,
        candidate_id=candidate.id,
        status=status,
        match_score=score,
    )
    if applied_at is not None:
        application.applied_at = applied_at
    db.add(application)
    db.commit()
    return application


def make_interview(db, application: Application, scheduled_at: datetime, status="scheduled") -> Interview:
    interview = Interview(
        id=generate_id(),
        application_id=application.id,
        scheduled_at=scheduled_at,
        status=status,
    )
    db.add(interview)
    db.commit()
    return interview


def minutes_from_now(minutes: int) -> datetime:
    return datetime.now(timezone.utc) + timedelta(minutes=minutes)


def hours_ago(hours: int) -> datetime:
    return datetime.now(timezone.utc) - timedelta(hours=hours)
