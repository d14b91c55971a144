from sqlalchemy import JSON, Column, Integer, Text
from sqlalchemy.orm import relationship
from marketplace.database import Base


class Provider(Base):
    __tablename__ = "providers"

    # A provider profile is keyed by its owner's user id
    id = Column(Text, primary_key=True)
    user_id = Column(Text, nullable=False, unique=True)
    company_name = Column(Text, nullable=False)
    contact_person = Column(Text, nullable=False)
    phone = Column(Text, nullable=False)
    email = Column(Text, nullable=False)
    address = Column(Text, nullable=False)
    specialization = Column(JSON, nullable=False)
    years_in_business = Column(Integer, nullable=False, default=0)
    description = Column(Text, nullable=False)
    created_at = Column(Text, nullable=False)

    quotes = relationship("Quote", back_populates="provider")
