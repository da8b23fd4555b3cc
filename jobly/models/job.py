# job.py
from sqlalchemy import CheckConstraint, Column, ForeignKey, Integer, Numeric, String, Text
from sqlalchemy.orm import relationship
from jobly.database import Base


class JobModel(Base):
    __tablename__ = "jobs"
    __table_args__ = (
        CheckConstraint("salary >= 0", name="ck_jobs_salary_non_negative"),
        CheckConstraint("equity <= 1.0", name="ck_jobs_equity_max_one"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(Text, index=True, nullable=False)
    salary = Column(Integer, nullable=True)
    equity = Column(Numeric(asdecimal=False), nullable=True)
    company_handle = Column(
        String(25),
        ForeignKey("companies.handle", ondelete="CASCADE"),
        index=True,
        nullable=False,
    )

    company = relationship("CompanyModel", back_populates="jobs")
