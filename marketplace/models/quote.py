from sqlalchemy import Column, ForeignKey, Integer, Text
from sqlalchemy.orm import relationship
from marketplace.database import Base


class Quote(Base):
    __tablename__ = "quotes"

    id = Column(Integer, primary_key=True, autoincrement=True)
    job_request_id = Column(Integer, ForeignKey("job_requests.id"), nullable=False, index=True)
    provider_id = Column(Text, ForeignKey("providers.id"), nullable=False, index=True)
    amount = Column(Text, nullable=False)
    timeline = Column(Text, nullable=False)
    comments = Column(Text, nullable=False)
    status = Column(Text, nullable=False, default="pending")
    created_at = Column(Text, nullable=False, index=True)

    job_request = relationship("JobRequest", back_populates="quotes")
    provider = relationship("Provider", back_populates="quotes")
