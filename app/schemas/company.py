from decimal import Decimal
from typing import List, Optional

from pydantic import ConfigDict, Field, field_validator, model_validator

from .mixin import CamelModel


class CompanyRead(CamelModel):
	handle: str
	name: str
	num_employees: Optional[int] = None
	description: str
	logo_url: Optional[str] = None


class CompanyJob(CamelModel):
	"""A job as listed on its company's page."""
	id: int
	title: str
	salary: Optional[int] = None
	equity: Optional[Decimal] = None


class CompanyDetail(CompanyRead):
	jobs: List[CompanyJob] = Field(default_factory=list)


class CompanyCreate(CamelModel):
	"""Input validation for creating a company."""
	model_config = ConfigDict(extra="forbid")

	handle: str = Field(..., min_length=1, max_length=25)
	name: str = Field(..., min_length=1)
	num_employees: Optional[int] = Field(default=None, ge=0)
	description: str
	logo_url: Optional[str] = None


class CompanyUpdate(CamelModel):
	"""Partial update of a company. ``handle`` is immutable and not accepted."""
	model_config = ConfigDict(extra="forbid")

	name: Optional[str] = Field(default=None, min_length=1)
	num_employees: Optional[int] = Field(default=None, ge=0)
	description: Optional[str] = None
	logo_url: Optional[str] = None

	@field_validator("name", "description")
	@classmethod
	def not_null(cls, v):
		if v is None:
			raise ValueError("cannot be null")
		return v


class CompanyFilter(CamelModel):
	"""Recognized query filters for listing companies."""
	model_config = ConfigDict(extra="forbid")

	name_like: Optional[str] = None
	min_employees: Optional[int] = Field(default=None, ge=0)
	max_employees: Optional[int] = Field(default=None, ge=0)

	@model_validator(mode="after")
	def check_employee_range(self):
		if (
			self.min_employees is not None
			and self.max_employees is not None
			and self.min_employees > self.max_employees
		):
			raise ValueError("minEmployees cannot be greater than maxEmployees")
		return self
