"""Company service: transactional wrappers around CompanyRepository."""

from typing import Optional, List
from sqlalchemy.orm import Session

from app.services.base import BaseService
from app.services.exceptions import ValidationError
from app.repositories.company import CompanyRepository
from app.schemas.company import (
    CompanyCreate,
    CompanyDetail,
    CompanyFilter,
    CompanyRead,
    CompanyUpdate,
)


class CompanyService(BaseService):
    """Service class for company operations."""

    def __init__(self, correlation_id: Optional[str] = None, **repositories):
        """Initialize company service.

        Args:
            correlation_id: Optional request correlation ID for logging
            **repositories: Repository instances (company_repo)
        """
        super().__init__(correlation_id)
        if repositories:
            self._set_repositories(**repositories)

        if not hasattr(self, 'company_repo'):
            raise ValidationError(
                field="company_repo",
                message="CompanyRepository is required for CompanyService",
                correlation_id=correlation_id
            )

    def create_company(self, company_in: CompanyCreate, db: Session) -> CompanyRead:
        self.log_operation("create_company_attempt", handle=company_in.handle)
        return self.run_in_transaction(db, lambda: self.company_repo.create(company_in))

    def list_companies(self, criteria: Optional[CompanyFilter], db: Session) -> List[CompanyRead]:
        return self.run_read(db, lambda: self.company_repo.find_all(criteria))

    def get_company(self, handle: str, db: Session) -> CompanyDetail:
        return self.run_read(db, lambda: self.company_repo.get(handle))

    def update_company(self, handle: str, company_in: CompanyUpdate, db: Session) -> CompanyRead:
        self.log_operation("update_company_attempt", handle=handle)
        return self.run_in_transaction(db, lambda: self.company_repo.update(handle, company_in))

    def delete_company(self, handle: str, db: Session) -> None:
        self.log_operation("delete_company_attempt", handle=handle)
        self.run_in_transaction(db, lambda: self.company_repo.remove(handle))
