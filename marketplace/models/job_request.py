from sqlalchemy import JSON, Column, Integer, Text
from sqlalchemy.orm import relationship
from marketplace.database import Base


class JobRequest(Base):
    __tablename__ = "job_requests"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(Text, nullable=False)
    location = Column(Text, nullable=False)
    job_type = Column(Text, nullable=False)
    workers = Column(Integer, nullable=False)
    categories = Column(JSON)
    # Simple schedule
    duration = Column(Text)
    budget = Column(Text)
    deadline = Column(Text)
    # Detailed schedule
    start_date = Column(Text)
    start_time = Column(Text)
    hours_per_day = Column(Integer)
    number_of_days = Column(Integer)
    description = Column(Text, nullable=False)
    contact_info = Column(Text, nullable=False)
    user_id = Column(Text, nullable=False, index=True)
    created_at = Column(Text, nullable=False, index=True)

    quotes = relationship("Quote", back_populates="job_request")
