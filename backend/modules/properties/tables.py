"""
SQLAlchemy table for property listings.
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, Float, Integer, String, Text

from shared.database import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class PropertyRow(Base):
    __tablename__ = "properties"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    title = Column(String(255), nullable=False)
    type = Column(String(64), nullable=False)
    description = Column(Text, nullable=False)
    price = Column(Float, nullable=False)
    address = Column(String(255), nullable=False)
    city = Column(String(128), nullable=False)
    state = Column(String(128), nullable=False)
    square_feet = Column(Float, nullable=False)
    year_built = Column(Integer, nullable=False)
    bedrooms = Column(Integer, nullable=False)
    created_at = Column(DateTime(timezone=True), default=_utcnow, index=True)
    updated_at = Column(DateTime(timezone=True), default=_utcnow, onupdate=_utcnow)
