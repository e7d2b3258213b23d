from app.models.job import Job, JOB_STATUSES
from app.models.candidate import Candidate
from app.models.application import Application, APPLICATION_STATUSES
from app.models.interview import Interview, INTERVIEW_STATUSES

__all__ = [
    "Job",
    "Candidate",
    "Application",
    "Interview",
    "JOB_STATUSES",
    "APPLICATION_STATUSES",
    "INTERVIEW_STATUSES",
]
