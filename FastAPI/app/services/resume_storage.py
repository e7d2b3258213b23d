import logging
from pathlib import Path

from app.config import settings
from app.core.ids import generate_id

logger = logging.getLogger(__name__)
URL_PREFIX = "/uploads"


def _upload_dir() -> Path:
    path = Path(settings.upload_dir)
    path.mkdir(parents=True, exist_ok=True)
    return path


def store_resume(content: bytes, filename: str) -> str:
    """Write an accepted upload under a fresh name and return the URL it is served from."""
    suffix = Path(filename or "").suffix.lower()
    stored_name = f"{generate_id()}{suffix}"
    (_upload_dir() / stored_name).write_bytes(content)
    logger.info("Stored resume %s as %s (%d bytes)", filename, stored_name, len(content))
    return f"{URL_PREFIX}/{stored_name}"


def resolve_stored_resume(name: str) -> Path | None:
    """Map a requested name to a stored file. Only the basename is honored."""
    safe_name = Path(name or "").name
    if not safe_name:
        return None
    path = _upload_dir() / safe_name
    return path if path.is_file() else None


def delete_resume(url: str | None) -> None:
    """Remove a file written by store_resume. Missing files are ignored."""
    if not url:
        return
    path = _upload_dir() / Path(url).name
    path.unlink(missing_ok=True)
    logger.info("Removed unreferenced resume %s", path.name)
