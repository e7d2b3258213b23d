import logging

from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile, status
from pydantic import ValidationError
from sqlalchemy.orm import Session

from resume_reader.extractor import ResumeParseError, UnsupportedFormatError

from app.config import settings
from app.core.errors import NotFoundError
from app.database import get_db
from app.repos.candidate_repo import get_by_id
from app.schemas.application import ApplicationResponse
from app.schemas.candidate import (
    CandidateApplication,
    CandidateResponse,
    CandidateSubmission,
    RankedCandidate,
    SubmissionResponse,
)
from app.services.aggregate_views import ranked_candidates
from app.services.application_lifecycle import submit_application

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/candidates", tags=["candidates"])


def _submission_error(exc: ValidationError) -> str:
    fields = {str(err["loc"][0]) for err in exc.errors() if err.get("loc")}
    if "email" in fields:
        return "A valid email address is required"
    return "Name, email, and job are required"


@router.get("", response_model=list[RankedCandidate])
def list_candidates(db: Session = Depends(get_db)):
    """Candidates with their applications, best match score first."""
    out = []
    for entry in ranked_candidates(db):
        out.append(
            RankedCandidate(
                **CandidateResponse.model_validate(entry["candidate"]).model_dump(),
                applications=[CandidateApplication.model_validate(a) for a in entry["applications"]],
                best_match_score=entry["best_match_score"],
            )
        )
    return out


@router.get("/{candidate_id}", response_model=CandidateResponse)
def get_candidate(candidate_id: str, db: Session = Depends(get_db)):
    candidate = get_by_id(db, candidate_id)
    if not candidate:
        raise HTTPException(status_code=404, detail="Candidate not found")
    return candidate


@router.post("/upload", response_model=SubmissionResponse, status_code=status.HTTP_201_CREATED)
def upload_candidate(
    resume: UploadFile | None = File(None, description="Resume (.pdf or .docx)"),
    name: str | None = Form(None),
    email: str | None = Form(None),
    phone: str | None = Form(None),
    job_id: str | None = Form(None),
    db: Session = Depends(get_db),
):
    """Upload a resume for a job. AI analysis and match scoring are best-effort."""
    if resume is None or not resume.filename:
        raise HTTPException(status_code=400, detail="No resume file uploaded")
    if not (name or "").strip() or not (email or "").strip() or not (job_id or "").strip():
        raise HTTPException(status_code=400, detail="Name, email, and job are required")
    try:
        submission = CandidateSubmission(name=name, email=email, phone=phone, job_id=job_id)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=_submission_error(e)) from e

    content = resume.file.read()
    max_bytes = settings.max_resume_upload_mb * 1024 * 1024
    if len(content) > max_bytes:
        raise HTTPException(status_code=413, detail=f"File too large. Max allowed is {settings.max_resume_upload_mb}MB.")

    logger.info("Resume upload: file=%s job=%s", resume.filename, submission.job_id)
    try:
        result = submit_application(db, submission, resume.filename, content)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e
    except UnsupportedFormatError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e
    except ResumeParseError as e:
        logger.warning("Resume parse failed for %s: %s", resume.filename, e)
        raise HTTPException(status_code=400, detail="Failed to parse resume file") from e
    except Exception as e:
        logger.exception("Resume upload failed for job=%s: %s", submission.job_id, e)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to process upload") from e

    return SubmissionResponse(
        candidate=CandidateResponse.model_validate(result.candidate),
        application=ApplicationResponse.model_validate(result.application),
        analysis=result.analysis,
    )
