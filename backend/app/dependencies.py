"""
Dependency Injection
"""
from typing import Generator
from fastapi import Depends, Request
from sqlalchemy.orm import Session

from app.services.job_service import JobService


def get_db(request: Request) -> Generator:
    """Get database session"""
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()


def get_job_service(db: Session = Depends(get_db)) -> JobService:
    return JobService(db)
