from sqlalchemy import Column, String, Text, DateTime
from sqlalchemy.orm import relationship

from app.core.ids import utcnow
from app.database import Base
from app.models.types import JSONType


class Candidate(Base):
    __tablename__ = "candidates"

    id = Column(String, primary_key=True, index=True)
    name = Column(String, nullable=False)
    # Dedup key across uploads; the unique index is the only guard against racing submissions.
    email = Column(String, unique=True, index=True, nullable=False)
    phone = Column(String)
    resume_url = Column(String)
    resume_text = Column(Text)
    skills = Column(JSONType)
    experience = Column(Text)
    education = Column(Text)
    linkedin_url = Column(String)
    portfolio_url = Column(String)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)

    applications = relationship(
        "Application",
        back_populates="candidate",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
