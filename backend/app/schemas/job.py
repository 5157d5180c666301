"""
Job Posting Schemas
"""
from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationError, field_validator
from typing import Optional, List, Union, Any
from datetime import datetime, timezone
from enum import Enum
from uuid import UUID
import math

from app.core.exceptions import JobValidationError


class JobType(str, Enum):
    """Employment arrangement"""
    FULL_TIME_ON_SITE = "Full-time (On-site)"
    PART_TIME_ON_SITE = "Part-time (On-site)"
    FULL_TIME_REMOTE = "Full-time (Remote)"
    PART_TIME_REMOTE = "Part-time (Remote)"


# Wire names of the create payload, in the order they are reported
REQUIRED_FIELDS = [
    "jobTitle",
    "company",
    "location",
    "salary",
    "jobType",
    "description",
    "jobQualifications",
]

_WIRE_NAMES = {
    "job_title": "jobTitle",
    "job_type": "jobType",
    "job_qualifications": "jobQualifications",
}


class JobRecord(BaseModel):
    """
    Validated job posting, not yet stored.

    Build it with JobRecord.build() to get a JobValidationError (keyed by
    wire field names) instead of pydantic's ValidationError.
    """
    model_config = ConfigDict(frozen=True)

    job_title: str = Field(min_length=1)
    company: str = Field(min_length=1)
    location: str = Field(min_length=1)
    salary: float
    job_type: JobType
    description: str = Field(min_length=1)
    job_qualifications: List[str]

    @field_validator("job_title", "company", "location", "description")
    @classmethod
    def not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be blank")
        return value

    @field_validator("salary")
    @classmethod
    def finite_salary(cls, value: float) -> float:
        if not math.isfinite(value):
            raise ValueError("must be a finite number")
        return value

    @classmethod
    def build(cls, **fields: Any) -> "JobRecord":
        try:
            return cls.model_validate(fields)
        except ValidationError as e:
            details = {}
            for err in e.errors():
                name = str(err["loc"][0]) if err["loc"] else "body"
                details[_WIRE_NAMES.get(name, name)] = err["msg"]
            raise JobValidationError("Invalid job data", details=details) from e


class JobCreateRequest(BaseModel):
    """
    Raw create payload. Every field is optional so that absent ones can be
    reported together instead of failing on the first.
    """
    jobTitle: Optional[str] = None
    company: Optional[str] = None
    location: Optional[str] = None
    salary: Optional[Union[float, str]] = None
    jobType: Optional[str] = None
    description: Optional[str] = None
    jobQualifications: Optional[Union[List[str], str]] = None


class JobResponse(BaseModel):
    """Stored job posting as returned to clients"""
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    job_title: str = Field(validation_alias=AliasChoices("job_title", "jobTitle"), serialization_alias="jobTitle")
    company: str
    location: str
    salary: float
    job_type: JobType = Field(validation_alias=AliasChoices("job_type", "jobType"), serialization_alias="jobType")
    description: str
    job_qualifications: List[str] = Field(validation_alias=AliasChoices("job_qualifications", "jobQualifications"), serialization_alias="jobQualifications")
    created_at: datetime = Field(validation_alias=AliasChoices("created_at", "createdAt"), serialization_alias="createdAt")
    updated_at: datetime = Field(validation_alias=AliasChoices("updated_at", "updatedAt"), serialization_alias="updatedAt")

    @field_validator("created_at", "updated_at")
    @classmethod
    def as_utc(cls, value: datetime) -> datetime:
        # SQLite hands back naive values; stored times are always UTC
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)


class JobCreateResponse(BaseModel):
    success: bool = True
    message: str
    data: JobResponse


class JobListResponse(BaseModel):
    """Job list response schema"""
    success: bool = True
    count: int
    data: List[JobResponse]


class JobDetailResponse(BaseModel):
    success: bool = True
    data: JobResponse


class JobDeleteResponse(BaseModel):
    success: bool = True
    message: str
    data: JobResponse
