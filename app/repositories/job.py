"""Job repository for job-related database operations."""

from typing import Any, List, Mapping, Optional, Union
from sqlalchemy.orm import Session

from app.repositories.base import BaseRepository
from app.repositories.sql import (
	FilterClauseBuilder,
	UpdateClauseBuilder,
	JOB_FIELD_NAME_MAP,
	JOB_FILTER_PREDICATES,
	named_placeholder,
	param_name,
)
from app.db.models.job import Job
from app.schemas.company import CompanyRead
from app.schemas.job import JobCreate, JobDetail, JobFilter, JobListing, JobRead, JobUpdate
from app.services.exceptions import JobNotFoundError

JOB_COLUMNS = ["id", "title", "salary", "equity", "company_handle"]
_RETURNING = ", ".join(JOB_COLUMNS)

update_clause = UpdateClauseBuilder(placeholder=named_placeholder)
job_filter_clause = FilterClauseBuilder(JOB_FILTER_PREDICATES, placeholder=named_placeholder)


class JobRepository(BaseRepository[Job]):
	"""Repository for Job entity operations.

	Every method issues exactly one statement. Reads of a specific id and
	writes that target an id raise ``JobNotFoundError`` when no row matches;
	listing never does.
	"""

	def __init__(self, db: Session, correlation_id: Optional[str] = None):
		super().__init__(db, Job, correlation_id)

	def create(self, job_in: Union[JobCreate, Mapping[str, Any]]) -> JobRead:
		"""Insert a job and return the stored row, including its generated id.

		An unknown ``company_handle`` is rejected by the foreign key; the
		resulting ``IntegrityError`` propagates unchanged.
		"""
		if not isinstance(job_in, JobCreate):
			job_in = JobCreate.model_validate(job_in)
		params = job_in.model_dump()

		row = self._execute(
			"create",
			f"""INSERT INTO jobs (title, salary, equity, company_handle)
			VALUES (:title, :salary, :equity, :company_handle)
			RETURNING {_RETURNING}""",
			params,
			result_columns=JOB_COLUMNS,
		).mappings().one()

		self._log_operation("create", job_id=row["id"], company_handle=row["company_handle"])
		return JobRead.model_validate(dict(row))

	def find_all(self, criteria: Union[JobFilter, Mapping[str, Any], None] = None) -> List[JobListing]:
		"""List jobs with their company name, filtered and ordered by title.

		Args:
			criteria: Any of ``title`` (case-insensitive substring),
				``minSalary`` (salary at least) and ``hasEquity`` (only jobs
				with non-zero equity when true)
		"""
		if criteria is not None and not isinstance(criteria, JobFilter):
			criteria = JobFilter.model_validate(criteria)
		filters = criteria.model_dump(by_alias=True, exclude_none=True) if criteria else {}

		where = job_filter_clause.build(filters)
		sql = """SELECT j.id, j.title, j.salary, j.equity, j.company_handle,
			c.name AS company_name
			FROM jobs j
			JOIN companies c ON c.handle = j.company_handle"""
		if where:
			sql += f"\n\t\t\tWHERE {where.clause}"
		sql += "\n\t\t\tORDER BY j.title"

		rows = self._execute(
			"find_all",
			sql,
			where.bind_params(),
			bind_columns=where.bind_columns(),
			result_columns=JOB_COLUMNS,
		).mappings().all()

		self._log_operation("find_all", filters=sorted(filters), count=len(rows))
		return [JobListing.model_validate(dict(r)) for r in rows]

	def get(self, job_id: int) -> JobDetail:
		"""Get one job with its full company record.

		Raises:
			JobNotFoundError: if no job has this id
		"""
		row = self._execute(
			"get",
			"""SELECT j.id, j.title, j.salary, j.equity,
			c.handle, c.name, c.num_employees, c.description, c.logo_url
			FROM jobs j
			JOIN companies c ON c.handle = j.company_handle
			WHERE j.id = :id""",
			{"id": job_id},
			result_columns=["id", "title", "salary", "equity"],
		).mappings().first()

		self._log_operation("get", job_id=job_id, found=row is not None)
		if row is None:
			raise JobNotFoundError(job_id, correlation_id=self.correlation_id)

		return JobDetail(
			id=row["id"],
			title=row["title"],
			salary=row["salary"],
			equity=row["equity"],
			company=CompanyRead(
				handle=row["handle"],
				name=row["name"],
				num_employees=row["num_employees"],
				description=row["description"],
				logo_url=row["logo_url"],
			),
		)

	def update(self, job_id: int, payload: Union[JobUpdate, Mapping[str, Any]]) -> JobRead:
		"""Apply a partial update and return the updated row.

		Only the fields present in ``payload`` change. ``id`` and
		``companyHandle`` are not part of ``JobUpdate`` and are rejected.

		Raises:
			EmptyInputError: if ``payload`` sets no fields
			JobNotFoundError: if no job has this id
		"""
		if not isinstance(payload, JobUpdate):
			payload = JobUpdate.model_validate(payload)
		data = payload.model_dump(exclude_unset=True, by_alias=True)

		set_clause = update_clause.build(data, JOB_FIELD_NAME_MAP)
		id_index = len(set_clause.values) + 1
		params = set_clause.bind_params()
		params[param_name(id_index)] = job_id
		bind_columns = set_clause.bind_columns()
		bind_columns[param_name(id_index)] = "id"

		row = self._execute(
			"update",
			f"""UPDATE jobs
			SET {set_clause.clause}
			WHERE id = {named_placeholder(id_index)}
			RETURNING {_RETURNING}""",
			params,
			bind_columns=bind_columns,
			result_columns=JOB_COLUMNS,
		).mappings().first()

		self._log_operation("update", job_id=job_id, fields=list(data.keys()), found=row is not None)
		if row is None:
			raise JobNotFoundError(job_id, correlation_id=self.correlation_id)
		return JobRead.model_validate(dict(row))

	def remove(self, job_id: int) -> None:
		"""Delete a job.

		Raises:
			JobNotFoundError: if no job has this id
		"""
		row = self._execute(
			"remove",
			"DELETE FROM jobs WHERE id = :id RETURNING id",
			{"id": job_id},
		).first()

		self._log_operation("remove", job_id=job_id, found=row is not None)
		if row is None:
			raise JobNotFoundError(job_id, correlation_id=self.correlation_id)
