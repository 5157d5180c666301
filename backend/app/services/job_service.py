"""
Job Posting Service
"""
from sqlalchemy.orm import Session
from typing import List, Optional, Union
from uuid import UUID

from app.core.exceptions import JobValidationError
from app.core.logging import logger
from app.models.job import JobPosting
from app.repositories.job_repository import JobRepository
from app.schemas.job import JobCreateRequest, JobRecord, REQUIRED_FIELDS
from app.utils.validators import find_missing_fields, normalize_qualifications


def coerce_salary(value: Union[float, str]) -> Union[float, str]:
    """Numeric strings become numbers; anything else is left for validation"""
    if isinstance(value, str):
        try:
            return float(value.strip())
        except ValueError:
            return value
    return value


class JobService:
    """Job posting service for handling job operations"""

    def __init__(self, db: Session):
        self.repository = JobRepository(db)

    def create_job(self, request: JobCreateRequest) -> JobPosting:
        """
        Create job posting

        - Reject when any required field is missing
        - Normalize qualifications into a list
        - Coerce salary to a number
        - Validate and persist
        """
        payload = request.model_dump()
        missing = find_missing_fields(payload, REQUIRED_FIELDS)
        if missing:
            raise JobValidationError(
                f"Missing required fields ({', '.join(REQUIRED_FIELDS)})",
                missing_fields=missing,
            )

        record = JobRecord.build(
            job_title=request.jobTitle,
            company=request.company,
            location=request.location,
            salary=coerce_salary(request.salary),
            job_type=request.jobType,
            description=request.description,
            job_qualifications=normalize_qualifications(request.jobQualifications),
        )

        job = self.repository.create(record)
        logger.info(f"Created job {job.id} ({job.job_title!r})")
        return job

    def get_job_by_id(self, job_id: UUID) -> Optional[JobPosting]:
        """Get job by ID"""
        return self.repository.find_by_id(job_id)

    def get_jobs(self, search: str = "") -> List[JobPosting]:
        """Get jobs whose title matches search"""
        jobs = self.repository.find_all(search)
        logger.info(f"Found {len(jobs)} jobs (search={search!r})")
        return jobs

    def delete_job(self, job_id: UUID) -> Optional[JobPosting]:
        """Delete job posting"""
        job = self.repository.delete_by_id(job_id)
        if job is not None:
            logger.info(f"Deleted job {job_id}")
        return job
