"""
SQLAlchemy Models
"""
from app.models.job import JobPosting

__all__ = [
    "JobPosting",
]
