import logging

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import FileResponse
from sqlalchemy.orm import Session

from app.database import get_db
from app.repos.stats_repo import get_stats
from app.schemas.application import StatsResponse
from app.services.resume_storage import resolve_stored_resume

logger = logging.getLogger(__name__)
router = APIRouter(tags=["dashboard"])

_MEDIA_TYPES = {
    ".pdf": "application/pdf",
    ".docx": "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
}


@router.get("/stats", response_model=StatsResponse)
def dashboard_stats(db: Session = Depends(get_db)):
    try:
        return get_stats(db)
    except Exception as e:
        logger.exception("Failed to load dashboard stats: %s", e)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to load stats") from e


@router.get("/uploads/{filename}")
def get_uploaded_resume(filename: str):
    path = resolve_stored_resume(filename)
    if path is None:
        raise HTTPException(status_code=404, detail="File not found")
    return FileResponse(path, media_type=_MEDIA_TYPES.get(path.suffix.lower(), "application/octet-stream"))
