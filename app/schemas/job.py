from __future__ import annotations

from decimal import Decimal
from typing import Optional

from pydantic import ConfigDict, Field, field_validator

from .company import CompanyRead
from .mixin import CamelModel


class JobCreate(CamelModel):
	model_config = ConfigDict(extra="forbid")

	title: str = Field(..., min_length=1)
	salary: Optional[int] = Field(default=None, ge=0)
	equity: Optional[Decimal] = Field(default=None, ge=0, le=1)
	company_handle: str = Field(..., min_length=1, max_length=25)


class JobUpdate(CamelModel):
	"""Partial update of a job.

	``id`` and ``companyHandle`` are immutable, so they are not fields here and
	``extra="forbid"`` rejects them.
	"""
	model_config = ConfigDict(extra="forbid")

	title: Optional[str] = Field(default=None, min_length=1)
	salary: Optional[int] = Field(default=None, ge=0)
	equity: Optional[Decimal] = Field(default=None, ge=0, le=1)

	@field_validator("title")
	@classmethod
	def title_not_null(cls, v: Optional[str]) -> str:
		if v is None:
			raise ValueError("title cannot be null")
		return v


class JobFilter(CamelModel):
	"""Recognized query filters for listing jobs."""
	model_config = ConfigDict(extra="forbid")

	title: Optional[str] = None
	min_salary: Optional[int] = Field(default=None, ge=0)
	has_equity: Optional[bool] = None


class JobRead(CamelModel):
	id: int
	title: str
	salary: Optional[int] = None
	equity: Optional[Decimal] = None
	company_handle: str


class JobListing(JobRead):
	company_name: str


class JobDetail(CamelModel):
	id: int
	title: str
	salary: Optional[int] = None
	equity: Optional[Decimal] = None
	company: CompanyRead
