"""
Job Repository - job posting data access
"""
from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy import text
from datetime import datetime, timezone
from typing import List, Optional
from uuid import UUID

from app.core.exceptions import PersistenceError
from app.core.logging import logger
from app.models.job import JobPosting
from app.schemas.job import JobRecord


class JobRepository:
    """Job posting data access layer"""

    def __init__(self, db: Session):
        self.db = db

    def create(self, record: JobRecord) -> JobPosting:
        """Persist a validated record; id and timestamps are assigned here"""
        now = datetime.now(timezone.utc)
        job = JobPosting(
            job_title=record.job_title,
            company=record.company,
            location=record.location,
            salary=record.salary,
            job_type=record.job_type.value,
            description=record.description,
            job_qualifications=list(record.job_qualifications),
            created_at=now,
            updated_at=now,
        )
        try:
            self.db.add(job)
            self.db.commit()
            self.db.refresh(job)
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.exception(f"Job insert failed: {e}")
            raise PersistenceError(str(e)) from e
        return job

    def find_all(self, title_filter: str = "") -> List[JobPosting]:
        """Jobs whose title contains title_filter (case-insensitive), newest first"""
        query = self.db.query(JobPosting)
        if title_filter:
            query = query.filter(
                JobPosting.job_title.icontains(title_filter, autoescape=True)
            )
        try:
            return query.order_by(JobPosting.created_at.desc()).all()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.exception(f"Job query failed: {e}")
            raise PersistenceError(str(e)) from e

    def find_by_id(self, job_id: UUID) -> Optional[JobPosting]:
        """Job by ID, or None if absent"""
        try:
            return self.db.query(JobPosting).filter(JobPosting.id == job_id).first()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.exception(f"Job lookup failed for {job_id}: {e}")
            raise PersistenceError(str(e)) from e

    def delete_by_id(self, job_id: UUID) -> Optional[JobPosting]:
        """Remove a job in one transaction and return it, or None if absent"""
        try:
            job = (
                self.db.query(JobPosting)
                .filter(JobPosting.id == job_id)
                .with_for_update()
                .first()
            )
            if job is None:
                self.db.rollback()
                return None
            self.db.delete(job)
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.exception(f"Job delete failed for {job_id}: {e}")
            raise PersistenceError(str(e)) from e
        return job

    def ping(self) -> bool:
        """True if the database answers"""
        try:
            self.db.execute(text("SELECT 1"))
            return True
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.warning(f"Database ping failed: {e}")
            return False
