from __future__ import annotations

from typing import Optional, List

from sqlalchemy.orm import Session

from app.services.base import BaseService
from app.repositories.job import JobRepository
from app.schemas.job import JobCreate, JobDetail, JobFilter, JobListing, JobRead, JobUpdate


class JobService(BaseService):
	"""Job board operations, one transaction per call."""

	def __init__(self, job_repo: JobRepository, correlation_id: Optional[str] = None):
		super().__init__(correlation_id)
		self._set_repositories(job_repo=job_repo)

	def create_job(self, job_in: JobCreate, db: Session) -> JobRead:
		self.log_operation("create_job_attempt", company_handle=job_in.company_handle)
		return self.run_in_transaction(db, lambda: self.job_repo.create(job_in))

	def list_jobs(self, criteria: Optional[JobFilter], db: Session) -> List[JobListing]:
		return self.run_read(db, lambda: self.job_repo.find_all(criteria))

	def get_job(self, job_id: int, db: Session) -> JobDetail:
		return self.run_read(db, lambda: self.job_repo.get(job_id))

	def update_job(self, job_id: int, job_in: JobUpdate, db: Session) -> JobRead:
		self.log_operation("update_job_attempt", job_id=job_id)
		return self.run_in_transaction(db, lambda: self.job_repo.update(job_id, job_in))

	def delete_job(self, job_id: int, db: Session) -> None:
		self.log_operation("delete_job_attempt", job_id=job_id)
		self.run_in_transaction(db, lambda: self.job_repo.remove(job_id))
