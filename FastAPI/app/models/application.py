from sqlalchemy import CheckConstraint, Column, String, Integer, Text, DateTime, ForeignKey
from sqlalchemy.orm import relationship

from app.core.ids import utcnow
from app.database import Base
from app.models.types import JSONType, one_of

# Column order on the kanban board. Any status may move to any other.
APPLICATION_STATUSES = ("applied", "screening", "interview", "offer", "hired", "rejected")


class Application(Base):
    """One candidate's pursuit of one job: lifecycle status + AI match score."""

    __tablename__ = "applications"
    __table_args__ = (
        CheckConstraint(one_of("status", APPLICATION_STATUSES), name="ck_applications_status"),
        CheckConstraint(
            "match_score IS NULL OR (match_score >= 0 AND match_score <= 100)",
            name="ck_applications_match_score",
        ),
    )

    id = Column(String, primary_key=True, index=True)
    job_id = Column(String, ForeignKey("jobs.id", ondelete="CASCADE"), nullable=False, index=True)
    candidate_id = Column(String, ForeignKey("candidates.id", ondelete="CASCADE"), nullable=False, index=True)
    status = Column(String, nullable=False, default="applied")
    match_score = Column(Integer)  # 0-100, NULL when matching was unavailable
    ai_analysis = Column(JSONType)  # score, matched_skills, missing_skills, reasoning
    notes = Column(Text)
    applied_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)

    job = relationship("Job", back_populates="applications")
    candidate = relationship("Candidate", back_populates="applications")
    interviews = relationship(
        "Interview",
        back_populates="application",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
