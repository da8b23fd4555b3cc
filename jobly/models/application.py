# application.py
from sqlalchemy import Column, Enum, ForeignKey, Integer
from jobly.database import Base


APPLICATION_STATES = ("interested", "applied", "accepted", "rejected")


class ApplicationModel(Base):
    __tablename__ = "applications"

    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), primary_key=True)
    job_id = Column(Integer, ForeignKey("jobs.id", ondelete="CASCADE"), primary_key=True)
    state = Column(
        Enum(*APPLICATION_STATES, name="application_state"),
        nullable=False,
        default="applied",
        server_default="applied",
    )
