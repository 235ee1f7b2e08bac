from fastapi import Depends
from sqlalchemy.orm import Session

from app.api.router import create_router
from app.api.dependencies.database import get_db
from app.api.dependencies.filters import query_filters
from app.api.dependencies.services import get_company_service
from app.services.company_services import CompanyService
from app.schemas.company import CompanyCreate, CompanyDetail, CompanyFilter, CompanyRead, CompanyUpdate

router = create_router("company", plural="companies")

@router.post("", status_code=201, response_model=CompanyRead)
def create_company(
	company_in: CompanyCreate,
	db: Session = Depends(get_db),
	company_service: CompanyService = Depends(get_company_service)
):
	return company_service.create_company(company_in, db)

@router.get("", response_model=list[CompanyRead])
def list_companies(
	criteria: CompanyFilter = Depends(query_filters(CompanyFilter)),
	db: Session = Depends(get_db),
	company_service: CompanyService = Depends(get_company_service)
):
	"""
	List companies ordered by name.

	Optional query filters: `nameLike`, `minEmployees`, `maxEmployees`.
	"""
	return company_service.list_companies(criteria, db)

@router.get("/{handle}", response_model=CompanyDetail)
def get_company(
	handle: str,
	db: Session = Depends(get_db),
	company_service: CompanyService = Depends(get_company_service)
):
	return company_service.get_company(handle, db)

@router.patch("/{handle}", response_model=CompanyRead)
def update_company(
	handle: str,
	company_in: CompanyUpdate,
	db: Session = Depends(get_db),
	company_service: CompanyService = Depends(get_company_service)
):
	return company_service.update_company(handle, company_in, db)

@router.delete("/{handle}")
def delete_company(
	handle: str,
	db: Session = Depends(get_db),
	company_service: CompanyService = Depends(get_company_service)
):
	company_service.delete_company(handle, db)
	return {"deleted": handle}
