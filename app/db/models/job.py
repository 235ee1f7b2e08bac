from sqlalchemy import CheckConstraint, Column, ForeignKey, Integer, Numeric, String, Text
from sqlalchemy.orm import relationship
from app.db.base_class import Base


class Job(Base):
	__tablename__ = "jobs"
	__table_args__ = (
		CheckConstraint("salary >= 0", name="ck_jobs_salary"),
		CheckConstraint("equity >= 0 AND equity <= 1.0", name="ck_jobs_equity"),
	)

	id = Column(Integer, primary_key=True, index=True)
	title = Column(Text, nullable=False)
	salary = Column(Integer, nullable=True)
	equity = Column(Numeric(asdecimal=True), nullable=True)  # fraction in [0, 1]
	company_handle = Column(String(25), ForeignKey("companies.handle", ondelete="CASCADE"), nullable=False, index=True)

	company = relationship("Company", back_populates="jobs")
