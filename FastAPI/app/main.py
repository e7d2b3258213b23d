import logging
import sys
from pathlib import Path

# Ensure repo root is on path so "resume_reader" resolves (it lives outside FastAPI)
_repo_root = Path(__file__).resolve().parents[2]
if str(_repo_root) not in sys.path:
    sys.path.insert(0, str(_repo_root))

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy import text

from app.config import settings
from app.core.rate_limiter import rate_limiter
from app.database import init_db, engine
from app.logging_config import setup_logging
from app.routers import applications, candidates, interviews, jobs, stats

setup_logging()
logger = logging.getLogger(__name__)

UPLOAD_PATH = "/candidates/upload"

app = FastAPI(
    title="TalentFlow API",
    description="Job postings, candidates, applications pipeline and interview scheduling with AI match scoring.",
    version="1.0.0",
)

cors_origins = [o.strip() for o in settings.cors_allow_origins.split(",") if o.strip()]
app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(stats.router)
app.include_router(jobs.router)
app.include_router(candidates.router)
app.include_router(applications.router)
app.include_router(interviews.router)


@app.exception_handler(Exception)
async def unhandled_exception_handler(request, exc):
    logger.exception("Unhandled server error on %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=500, content={"detail": "Internal server error"})


@app.middleware("http")
async def apply_rate_limits(request, call_next):
    if request.method != "POST" or request.url.path != UPLOAD_PATH:
        return await call_next(request)

    limit = settings.rate_limit_upload_per_min
    if limit > 0:
        client_ip = request.client.host if request.client else "unknown"
        allowed, retry_after = rate_limiter.allow(f"{client_ip}:{UPLOAD_PATH}", limit=limit, window_seconds=60)
        if not allowed:
            return JSONResponse(
                status_code=429,
                content={"detail": "Too many uploads. Please retry shortly."},
                headers={"Retry-After": str(retry_after)},
            )

    return await call_next(request)


@app.get("/health/live")
def health_live():
    return {"status": "ok"}


@app.get("/health/ready")
def health_ready():
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        return {"status": "ready"}
    except Exception:
        logger.exception("Readiness check failed")
        return JSONResponse(status_code=503, content={"status": "not_ready"})


@app.on_event("startup")
def on_startup():
    logger.info("Starting TalentFlow API")
    env = (settings.app_env or "development").lower()
    if "username:password@" in settings.database_url:
        if env in {"production", "prod"}:
            raise RuntimeError("DATABASE_URL placeholder credentials are not allowed in production")
        logger.warning("DATABASE_URL appears to use placeholder credentials. Set DATABASE_URL in .env.")
    if not settings.bedrock_llm_enabled:
        logger.warning("Bedrock LLM disabled: uploads will be stored without analysis or match scores.")
    init_db()


@app.get("/")
def root():
    return {"message": "TalentFlow API. POST a resume to /candidates/upload to apply a candidate to a job."}
