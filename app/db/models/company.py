from sqlalchemy import CheckConstraint, Column, Integer, String, Text
from sqlalchemy.orm import relationship
from app.db.base_class import Base


class Company(Base):
	__tablename__ = "companies"

	handle = Column(String(25), primary_key=True)
	name = Column(Text, unique=True, nullable=False)
	num_employees = Column(Integer, CheckConstraint("num_employees >= 0", name="ck_companies_num_employees"), nullable=True)
	description = Column(Text, nullable=False)
	logo_url = Column(Text, nullable=True)

	jobs = relationship("Job", back_populates="company", cascade="all, delete-orphan", passive_deletes=True)
