"""
Job Posting Model
"""
from sqlalchemy import Column, String, Text, Float, DateTime, JSON, Uuid
from datetime import datetime, timezone
import uuid

from app.core.database import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class JobPosting(Base):
    __tablename__ = "job_posting"

    # Primary Key
    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)

    # Basic Info
    job_title = Column(Text, nullable=False, index=True)
    company = Column(Text, nullable=False)
    location = Column(Text, nullable=False)
    salary = Column(Float, nullable=False)
    job_type = Column(String(50), nullable=False)  # JobType label
    description = Column(Text, nullable=False)
    job_qualifications = Column(JSON, nullable=False)  # list of strings

    # Timestamps (set once at insert; there is no update path)
    created_at = Column(DateTime(timezone=True), default=_utcnow, nullable=False, index=True)
    updated_at = Column(DateTime(timezone=True), default=_utcnow, nullable=False)

    def __repr__(self) -> str:
        return f"<JobPosting {self.id} {self.job_title!r}>"
