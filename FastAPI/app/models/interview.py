from sqlalchemy import CheckConstraint, Column, String, Integer, Text, DateTime, ForeignKey
from sqlalchemy.orm import relationship

from app.core.ids import utcnow
from app.database import Base
from app.models.types import one_of

INTERVIEW_STATUSES = ("scheduled", "completed", "cancelled")


class Interview(Base):
    __tablename__ = "interviews"
    __table_args__ = (
        CheckConstraint(one_of("status", INTERVIEW_STATUSES), name="ck_interviews_status"),
        CheckConstraint("duration > 0", name="ck_interviews_duration"),
    )

    id = Column(String, primary_key=True, index=True)
    application_id = Column(
        String, ForeignKey("applications.id", ondelete="CASCADE"), nullable=False, index=True
    )
    scheduled_at = Column(DateTime(timezone=True), nullable=False)
    duration = Column(Integer, nullable=False, default=60)  # minutes
    interviewer_name = Column(String)
    interviewer_email = Column(String)
    meeting_link = Column(String)
    notes = Column(Text)
    status = Column(String, nullable=False, default="scheduled")
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)

    application = relationship("Application", back_populates="interviews")
