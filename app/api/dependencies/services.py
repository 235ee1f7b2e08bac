"""Service dependency providers for FastAPI dependency injection."""

from fastapi import Depends, Request
from sqlalchemy.orm import Session
from typing import Optional

from app.api.dependencies.database import get_db
from app.services.company_services import CompanyService
from app.services.job_services import JobService
from app.repositories.company import CompanyRepository
from app.repositories.job import JobRepository


def get_correlation_id(request: Request) -> Optional[str]:
	"""Extract or generate correlation ID for logging and tracing."""
	from app.core.observability import generate_correlation_id
	cid = getattr(request.state, "correlation_id", None)
	if not cid:
		cid = generate_correlation_id(request.headers.get("X-Correlation-ID"))
		setattr(request.state, "correlation_id", cid)
	return cid


# Repository Dependencies
def get_job_repository(
    db: Session = Depends(get_db),
    correlation_id: Optional[str] = Depends(get_correlation_id)
) -> JobRepository:
    """Provide JobRepository instance."""
    return JobRepository(db=db, correlation_id=correlation_id)


def get_company_repository(
    db: Session = Depends(get_db),
    correlation_id: Optional[str] = Depends(get_correlation_id)
) -> CompanyRepository:
    """Provide CompanyRepository instance."""
    return CompanyRepository(db=db, correlation_id=correlation_id)


# Service Dependencies
def get_job_service(
    job_repo: JobRepository = Depends(get_job_repository),
    correlation_id: Optional[str] = Depends(get_correlation_id)
) -> JobService:
    """Provide JobService instance."""
    return JobService(job_repo=job_repo, correlation_id=correlation_id)


def get_company_service(
    company_repo: CompanyRepository = Depends(get_company_repository),
    correlation_id: Optional[str] = Depends(get_correlation_id)
) -> CompanyService:
    """Provide CompanyService instance."""
    return CompanyService(correlation_id=correlation_id, company_repo=company_repo)
