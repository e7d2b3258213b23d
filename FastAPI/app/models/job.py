from sqlalchemy import CheckConstraint, Column, String, Text, DateTime
from sqlalchemy.orm import relationship

from app.core.ids import utcnow
from app.database import Base
from app.models.types import JSONType, one_of

JOB_STATUSES = ("active", "closed", "draft")


class Job(Base):
    """Open (or closed/draft) job posting that candidates apply to."""

    __tablename__ = "jobs"
    __table_args__ = (CheckConstraint(one_of("status", JOB_STATUSES), name="ck_jobs_status"),)

    id = Column(String, primary_key=True, index=True)
    title = Column(String, nullable=False)
    department = Column(String, nullable=False)
    location = Column(String, nullable=False)
    employment_type = Column(String, nullable=False)  # Full-time, Part-time, Contract
    description = Column(Text, nullable=False)
    requirements = Column(JSONType, nullable=False, default=list)  # ordered skill requirements
    responsibilities = Column(Text, nullable=False)
    salary_range = Column(String)
    status = Column(String, nullable=False, default="active")
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)

    applications = relationship(
        "Application",
        back_populates="job",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
