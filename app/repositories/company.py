"""Company repository for company-related database operations."""

from typing import Any, List, Mapping, Optional, Union
from sqlalchemy.orm import Session

from app.repositories.base import BaseRepository
from app.repositories.sql import (
    FilterClauseBuilder,
    UpdateClauseBuilder,
    COMPANY_FIELD_NAME_MAP,
    COMPANY_FILTER_PREDICATES,
    named_placeholder,
    param_name,
)
from app.db.models.company import Company
from app.db.models.job import Job
from app.schemas.company import (
    CompanyCreate,
    CompanyDetail,
    CompanyFilter,
    CompanyJob,
    CompanyRead,
    CompanyUpdate,
)
from app.services.exceptions import CompanyNotFoundError

COMPANY_COLUMNS = ["handle", "name", "num_employees", "description", "logo_url"]
_RETURNING = ", ".join(COMPANY_COLUMNS)

update_clause = UpdateClauseBuilder(placeholder=named_placeholder)
company_filter_clause = FilterClauseBuilder(COMPANY_FILTER_PREDICATES, placeholder=named_placeholder)


class CompanyRepository(BaseRepository[Company]):
    """Repository for Company entity operations."""

    def __init__(self, db: Session, correlation_id: Optional[str] = None):
        super().__init__(db, Company, correlation_id)

    def create(self, company_in: Union[CompanyCreate, Mapping[str, Any]]) -> CompanyRead:
        """Insert a company. A duplicate handle or name raises ``IntegrityError``."""
        if not isinstance(company_in, CompanyCreate):
            company_in = CompanyCreate.model_validate(company_in)

        row = self._execute(
            "create",
            f"""INSERT INTO companies (handle, name, num_employees, description, logo_url)
            VALUES (:handle, :name, :num_employees, :description, :logo_url)
            RETURNING {_RETURNING}""",
            company_in.model_dump(),
            result_columns=COMPANY_COLUMNS,
        ).mappings().one()

        self._log_operation("create", handle=row["handle"])
        return CompanyRead.model_validate(dict(row))

    def find_all(self, criteria: Union[CompanyFilter, Mapping[str, Any], None] = None) -> List[CompanyRead]:
        """List companies ordered by name.

        Args:
            criteria: Any of ``nameLike`` (case-insensitive substring),
                ``minEmployees`` and ``maxEmployees`` (inclusive bounds)
        """
        if criteria is not None and not isinstance(criteria, CompanyFilter):
            criteria = CompanyFilter.model_validate(criteria)
        filters = criteria.model_dump(by_alias=True, exclude_none=True) if criteria else {}

        where = company_filter_clause.build(filters)
        sql = f"SELECT {_RETURNING} FROM companies"
        if where:
            sql += f" WHERE {where.clause}"
        sql += " ORDER BY name"

        rows = self._execute(
            "find_all",
            sql,
            where.bind_params(),
            bind_columns=where.bind_columns(),
            result_columns=COMPANY_COLUMNS,
        ).mappings().all()

        self._log_operation("find_all", filters=sorted(filters), count=len(rows))
        return [CompanyRead.model_validate(dict(r)) for r in rows]

    def get(self, handle: str) -> CompanyDetail:
        """Get a company together with its jobs.

        Raises:
            CompanyNotFoundError: if no company has this handle
        """
        row = self._execute(
            "get",
            f"SELECT {_RETURNING} FROM companies WHERE handle = :handle",
            {"handle": handle},
            result_columns=COMPANY_COLUMNS,
        ).mappings().first()

        self._log_operation("get", handle=handle, found=row is not None)
        if row is None:
            raise CompanyNotFoundError(handle, correlation_id=self.correlation_id)

        jobs = Job.__table__.c
        job_rows = self._execute(
            "get_jobs",
            """SELECT id, title, salary, equity FROM jobs
            WHERE company_handle = :handle
            ORDER BY id""",
            {"handle": handle},
            result_types={"id": jobs.id.type, "equity": jobs.equity.type},
        ).mappings().all()

        return CompanyDetail(
            **dict(row),
            jobs=[CompanyJob.model_validate(dict(j)) for j in job_rows],
        )

    def update(self, handle: str, payload: Union[CompanyUpdate, Mapping[str, Any]]) -> CompanyRead:
        """Apply a partial update and return the updated company.

        Raises:
            EmptyInputError: if ``payload`` sets no fields
            CompanyNotFoundError: if no company has this handle
        """
        if not isinstance(payload, CompanyUpdate):
            payload = CompanyUpdate.model_validate(payload)
        data = payload.model_dump(exclude_unset=True, by_alias=True)

        set_clause = update_clause.build(data, COMPANY_FIELD_NAME_MAP)
        handle_index = len(set_clause.values) + 1
        params = set_clause.bind_params()
        params[param_name(handle_index)] = handle
        bind_columns = set_clause.bind_columns()
        bind_columns[param_name(handle_index)] = "handle"

        row = self._execute(
            "update",
            f"""UPDATE companies
            SET {set_clause.clause}
            WHERE handle = {named_placeholder(handle_index)}
            RETURNING {_RETURNING}""",
            params,
            bind_columns=bind_columns,
            result_columns=COMPANY_COLUMNS,
        ).mappings().first()

        self._log_operation("update", handle=handle, fields=list(data.keys()), found=row is not None)
        if row is None:
            raise CompanyNotFoundError(handle, correlation_id=self.correlation_id)
        return CompanyRead.model_validate(dict(row))

    def remove(self, handle: str) -> None:
        """Delete a company; its jobs go with it (``ON DELETE CASCADE``).

        Raises:
            CompanyNotFoundError: if no company has this handle
        """
        row = self._execute(
            "remove",
            "DELETE FROM companies WHERE handle = :handle RETURNING handle",
            {"handle": handle},
        ).first()

        self._log_operation("remove", handle=handle, found=row is not None)
        if row is None:
            raise CompanyNotFoundError(handle, correlation_id=self.correlation_id)
