"""
Application lifecycle: create an application with an AI match score, and move it
between pipeline statuses.

AI calls are enrichment only. Resume analysis and match scoring may fail or be
disabled and the submission still goes through; only a missing job or an
unreadable resume file stops it.
"""
import logging
import math
from dataclasses import dataclass

from sqlalchemy.orm import Session

from resume_reader.contact import extract_links
from resume_reader.extractor import extract_text

from app.core.errors import ConflictError, InvalidInputError, NotFoundError
from app.models.application import APPLICATION_STATUSES, Application
from app.models.candidate import Candidate
from app.models.job import Job
from app.repos.application_repo import create as create_application, update_status
from app.repos.candidate_repo import create as create_candidate, get_by_email as get_candidate_by_email
from app.repos.job_repo import get_by_id as get_job_by_id
from app.schemas.analysis import MatchAnalysis, ResumeAnalysis
from app.schemas.candidate import CandidateSubmission
from app.services.llm_client import analyze_resume, match_candidate_to_job
from app.services.resume_storage import delete_resume, store_resume

logger = logging.getLogger(__name__)

MIN_SCORE = 0
MAX_SCORE = 100


@dataclass
class SubmissionResult:
    candidate: Candidate
    application: Application
    analysis: ResumeAnalysis


def bound_score(raw: float) -> int:
    """Round half up to the nearest integer and clamp into [0, 100]."""
    return max(MIN_SCORE, min(MAX_SCORE, math.floor(raw + 0.5)))


def _analyze(resume_text: str) -> tuple[ResumeAnalysis, bool]:
    """Returns (analysis, ok). Falls back to the placeholder analysis on any failure."""
    try:
        return analyze_resume(resume_text), True
    except Exception as e:
        logger.warning("Resume analysis unavailable, continuing without it: %s", e)
        return ResumeAnalysis.placeholder(), False


def _score(skills: list[str], experience: str, job: Job) -> tuple[int | None, dict | None]:
    """Best-effort match scoring. Returns (match_score, ai_analysis) or (None, None)."""
    if not job.requirements:
        logger.info("Job %s has no requirements; skipping match scoring", job.id)
        return None, None
    try:
        result: MatchAnalysis = match_candidate_to_job(
            skills,
            experience,
            list(job.requirements),
            job.description or "",
        )
    except Exception as e:
        logger.warning("Match scoring unavailable for job=%s, storing no score: %s", job.id, e)
        return None, None
    if not math.isfinite(result.score):
        logger.warning("Match scoring returned a non-finite score for job=%s, storing no score", job.id)
        return None, None
    score = bound_score(result.score)
    if score != result.score:
        logger.debug("Match score %.2f stored as %d", result.score, score)
    payload = result.model_dump()
    payload["score"] = score
    return score, payload


def _resolve_candidate(
    db: Session,
    submission: CandidateSubmission,
    filename: str,
    content: bytes,
    resume_text: str,
    analysis: ResumeAnalysis,
) -> Candidate:
    existing = get_candidate_by_email(db, submission.email)
    if existing:
        logger.info("Candidate %s already exists; reusing for new application", existing.id)
        return existing

    links = extract_links(resume_text)
    resume_url = store_resume(content, filename)
    try:
        candidate = create_candidate(
            db,
            name=submission.name,
            email=submission.email,
            phone=submission.phone,
            resume_url=resume_url,
            resume_text=resume_text,
            skills=analysis.skills,
            experience=analysis.experience,
            education=analysis.education,
            linkedin_url=links["linkedin_url"],
            portfolio_url=links["portfolio_url"],
        )
    except ConflictError:
        # A concurrent submission inserted the same email first.
        delete_resume(resume_url)
        candidate = get_candidate_by_email(db, submission.email)
        if candidate is None:
            raise
        logger.info("Resolved email conflict to existing candidate %s", candidate.id)
        return candidate
    except Exception:
        delete_resume(resume_url)
        raise
    logger.info("Created candidate %s", candidate.id)
    return candidate


def submit_application(
    db: Session,
    submission: CandidateSubmission,
    filename: str,
    content: bytes,
) -> SubmissionResult:
    """
    Create (or reuse) the candidate for this email and a fresh application for the job.

    Raises NotFoundError when the job does not exist, and the resume reader's
    UnsupportedFormatError / ResumeParseError when the file cannot be read.
    """
    job = get_job_by_id(db, submission.job_id)
    if not job:
        raise NotFoundError("Job", submission.job_id)

    resume_text = extract_text(content, filename)
    analysis, analyzed = _analyze(resume_text)
    candidate = _resolve_candidate(db, submission, filename, content, resume_text, analysis)

    if analyzed:
        skills, experience = analysis.skills, analysis.experience
    else:
        skills, experience = list(candidate.skills or []), candidate.experience or ""
    match_score, ai_analysis = _score(skills, experience, job)

    application = create_application(
        db,
        job_id=job.id,
        candidate_id=candidate.id,
        match_score=match_score,
        ai_analysis=ai_analysis,
        status="applied",
    )
    logger.info(
        "Application %s created: candidate=%s job=%s match_score=%s",
        application.id,
        candidate.id,
        job.id,
        match_score,
    )
    return SubmissionResult(candidate=candidate, application=application, analysis=analysis)


def transition_status(db: Session, application_id: str, new_status: str) -> Application:
    """
    Move an application to any of the pipeline statuses. There is no ordering:
    recruiters may move backward or reopen hired/rejected applications.
    """
    if new_status not in APPLICATION_STATUSES:
        raise InvalidInputError(f"Invalid status {new_status!r}; expected one of {', '.join(APPLICATION_STATUSES)}")
    application = update_status(db, application_id, new_status)
    if not application:
        raise NotFoundError("Application", application_id)
    logger.info("Application %s moved to %s", application_id, new_status)
    return application
