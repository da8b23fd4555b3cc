# company.py
from sqlalchemy import Column, Integer, String, Text
from sqlalchemy.orm import relationship
from jobly.database import Base


class CompanyModel(Base):
    __tablename__ = "companies"

    handle = Column(String(25), primary_key=True)
    name = Column(Text, unique=True, nullable=False)
    num_employees = Column(Integer, nullable=True)
    description = Column(Text, nullable=False)
    logo_url = Column(Text, nullable=True)

    jobs = relationship("JobModel", back_populates="company", passive_deletes=True)
