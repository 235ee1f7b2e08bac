from fastapi import Depends
from sqlalchemy.orm import Session

from app.api.router import create_router
from app.api.dependencies.database import get_db
from app.api.dependencies.filters import query_filters
from app.api.dependencies.services import get_job_service
from app.services.job_services import JobService
from app.schemas.job import JobCreate, JobDetail, JobFilter, JobListing, JobRead, JobUpdate


router = create_router("job")


@router.post("", status_code=201, response_model=JobRead)
def create_job(
	job_in: JobCreate,
	db: Session = Depends(get_db),
	job_service: JobService = Depends(get_job_service),
):
	"""Create a job. An unknown company handle is a 400."""
	return job_service.create_job(job_in, db)


@router.get("", response_model=list[JobListing])
def list_jobs(
	criteria: JobFilter = Depends(query_filters(JobFilter)),
	db: Session = Depends(get_db),
	job_service: JobService = Depends(get_job_service),
):
	"""
	List jobs ordered by title.

	Optional query filters: `title`, `minSalary`, `hasEquity`.
	"""
	return job_service.list_jobs(criteria, db)


@router.get("/{job_id}", response_model=JobDetail)
def get_job(
	job_id: int,
	db: Session = Depends(get_db),
	job_service: JobService = Depends(get_job_service),
):
	return job_service.get_job(job_id, db)


@router.patch("/{job_id}", response_model=JobRead)
def update_job(
	job_id: int,
	job_in: JobUpdate,
	db: Session = Depends(get_db),
	job_service: JobService = Depends(get_job_service),
):
	"""Partially update a job; `id` and `companyHandle` cannot change."""
	return job_service.update_job(job_id, job_in, db)


@router.delete("/{job_id}")
def delete_job(
	job_id: int,
	db: Session = Depends(get_db),
	job_service: JobService = Depends(get_job_service),
):
	job_service.delete_job(job_id, db)
	return {"deleted": job_id}
