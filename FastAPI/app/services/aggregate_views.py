"""
Read-only projections for the dashboard, kanban board, candidate list and schedule.
Everything is recomputed from the tables on each call.
"""
import logging
from collections import defaultdict
from typing import Any

from sqlalchemy.orm import Session

from app.core.ids import as_utc, utcnow
from app.models.application import APPLICATION_STATUSES, Application
from app.models.candidate import Candidate
from app.models.interview import Interview
from app.repos.application_repo import get_all_enriched as get_applications_enriched
from app.repos.candidate_repo import get_all as get_all_candidates
from app.repos.interview_repo import get_all_enriched as get_interviews_enriched

logger = logging.getLogger(__name__)
UNKNOWN = "Unknown"


def _pipeline_card(app: Application) -> dict[str, Any]:
    candidate, job = app.candidate, app.job
    return {
        "id": app.id,
        "status": app.status,
        "match_score": app.match_score,
        "applied_at": app.applied_at,
        "candidate_name": candidate.name if candidate else UNKNOWN,
        "candidate_email": candidate.email if candidate else "",
        "job_title": job.title if job else UNKNOWN,
        "job_department": job.department if job else UNKNOWN,
    }


def group_by_status(cards: list[dict[str, Any]]) -> list[dict[str, Any]]:
    """
    Partition cards into kanban columns. Every known status gets a column even when
    empty; an unexpected stored status gets its own trailing column.
    """
    columns: dict[str, list[dict[str, Any]]] = {s: [] for s in APPLICATION_STATUSES}
    for card in cards:
        columns.setdefault(card["status"], []).append(card)
    return [
        {"status": status, "count": len(items), "applications": items}
        for status, items in columns.items()
    ]


def pipeline_view(db: Session) -> list[dict[str, Any]]:
    cards = [_pipeline_card(a) for a in get_applications_enriched(db)]
    return group_by_status(cards)


def recent_applications(db: Session, limit: int) -> list[dict[str, Any]]:
    recent = []
    for app in get_applications_enriched(db, limit=limit):
        recent.append(
            {
                "id": app.id,
                "candidate_name": app.candidate.name if app.candidate else UNKNOWN,
                "job_title": app.job.title if app.job else UNKNOWN,
                "status": app.status,
                "match_score": app.match_score,
                "applied_at": app.applied_at,
            }
        )
    return recent


def _best_score(applications: list[Application]) -> int | None:
    if not applications:
        return None
    return max(a.match_score or 0 for a in applications)


def rank_candidates(entries: list[tuple[Candidate, list[Application]]]) -> list[tuple[Candidate, list[Application]]]:
    """
    Order candidates by their best match score, highest first. Unscored applications
    count as 0. Candidates without applications go last, newest first.
    `entries` is expected newest-first; sorting is stable so ties keep that order.
    """
    with_apps = [e for e in entries if e[1]]
    without_apps = [e for e in entries if not e[1]]
    with_apps.sort(key=lambda e: _best_score(e[1]), reverse=True)
    without_apps.sort(key=lambda e: as_utc(e[0].created_at) or utcnow(), reverse=True)
    return with_apps + without_apps


def ranked_candidates(db: Session) -> list[dict[str, Any]]:
    # One pass over all applications (most recent first), grouped per candidate.
    by_candidate: dict[str, list[Application]] = defaultdict(list)
    for app in get_applications_enriched(db):
        by_candidate[app.candidate_id].append(app)
    entries = [(c, by_candidate.get(c.id, [])) for c in get_all_candidates(db)]
    ranked = []
    for candidate, applications in rank_candidates(entries):
        ranked.append(
            {
                "candidate": candidate,
                "applications": applications,
                "best_match_score": _best_score(applications),
            }
        )
    logger.debug("Ranked %d candidates", len(ranked))
    return ranked


def _enriched_interview(interview: Interview) -> dict[str, Any]:
    app = interview.application
    candidate = app.candidate if app else None
    job = app.job if app else None
    return {
        "interview": interview,
        "candidate_name": candidate.name if candidate else UNKNOWN,
        "job_title": job.title if job else UNKNOWN,
    }


def is_upcoming(interview: Interview, now) -> bool:
    return interview.status == "scheduled" and as_utc(interview.scheduled_at) >= now


def interviews_view(db: Session, bucket: str | None = None) -> list[dict[str, Any]]:
    """
    Interviews with candidate name and job title, chronological.
    bucket="upcoming" keeps scheduled interviews from now on; bucket="past" keeps the
    rest, most recent first.
    """
    interviews = get_interviews_enriched(db)
    if bucket is not None:
        now = utcnow()
        if bucket == "upcoming":
            interviews = [i for i in interviews if is_upcoming(i, now)]
        elif bucket == "past":
            interviews = [i for i in interviews if not is_upcoming(i, now)]
            interviews.reverse()
        else:
            raise ValueError(f"Unknown interview bucket {bucket!r}")
    return [_enriched_interview(i) for i in interviews]
