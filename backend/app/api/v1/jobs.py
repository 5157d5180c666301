"""
Job Posting API Routes
"""
from fastapi import APIRouter, Depends, status
from typing import Optional

from app.core.exceptions import APIError, PersistenceError
from app.core.logging import logger
from app.dependencies import get_job_service
from app.schemas.job import (
    JobCreateRequest,
    JobCreateResponse,
    JobDeleteResponse,
    JobDetailResponse,
    JobListResponse,
    JobResponse,
)
from app.services.job_service import JobService
from app.utils.validators import parse_job_id

router = APIRouter()


def _not_found() -> APIError:
    return APIError(status.HTTP_404_NOT_FOUND, "Job not found")


@router.post("", response_model=JobCreateResponse, status_code=status.HTTP_201_CREATED)
def create_job(
    request: Optional[JobCreateRequest] = None,
    service: JobService = Depends(get_job_service)
):
    """
    Create a job posting

    - 400 when a required field is missing or invalid
    - jobQualifications may be a newline-separated string
    """
    try:
        # no body at all reports every field as missing
        job = service.create_job(request or JobCreateRequest())
    except PersistenceError as e:
        logger.error(f"Error creating job: {e}")
        raise APIError(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "Failed to create job",
            error=str(e),
            details=repr(e.__cause__) if e.__cause__ else str(e),
        )

    return JobCreateResponse(
        message="Job created successfully",
        data=JobResponse.model_validate(job),
    )


@router.get("", response_model=JobListResponse)
def list_jobs(
    search: str = "",
    service: JobService = Depends(get_job_service)
):
    """List job postings, newest first, optionally filtered by title"""
    try:
        jobs = service.get_jobs(search)
    except PersistenceError as e:
        logger.error(f"Error fetching jobs: {e}")
        raise APIError(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "Server Error: Unable to fetch jobs",
            error=str(e),
        )

    return JobListResponse(
        count=len(jobs),
        data=[JobResponse.model_validate(job) for job in jobs],
    )


@router.get("/{job_id}", response_model=JobDetailResponse)
def get_job(
    job_id: str,
    service: JobService = Depends(get_job_service)
):
    """Job posting detail"""
    parsed_id = parse_job_id(job_id)
    try:
        job = service.get_job_by_id(parsed_id)
    except PersistenceError as e:
        logger.error(f"Error fetching job details: {e}")
        raise APIError(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "Server Error: Unable to fetch job details",
            error=str(e),
        )

    if job is None:
        raise _not_found()
    return JobDetailResponse(data=JobResponse.model_validate(job))


@router.delete("/{job_id}", response_model=JobDeleteResponse)
def delete_job(
    job_id: str,
    service: JobService = Depends(get_job_service)
):
    """Delete a job posting and return what was removed"""
    parsed_id = parse_job_id(job_id)
    try:
        job = service.delete_job(parsed_id)
    except PersistenceError as e:
        logger.error(f"Error deleting job: {e}")
        raise APIError(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "Server Error: Unable to delete job",
            error=str(e),
        )

    if job is None:
        raise _not_found()
    return JobDeleteResponse(
        message="Job deleted successfully",
        data=JobResponse.model_validate(job),
    )
