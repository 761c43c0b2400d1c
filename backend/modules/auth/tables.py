"""
SQLAlchemy table for user accounts.

The unique index on ``email`` is what keeps one account per address when
signups race; application code never relies on a read-then-write check.
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import Column, Date, DateTime, String

from shared.database import Base


class UserRow(Base):
    __tablename__ = "users"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    email = Column(String(255), unique=True, index=True, nullable=False)
    password_hash = Column(String(255), nullable=False)
    name = Column(String(255), nullable=False)
    phone_number = Column(String(64), nullable=False)
    gender = Column(String(32), nullable=False)
    date_of_birth = Column(Date, nullable=False)
    street = Column(String(255), nullable=False)
    city = Column(String(128), nullable=False)
    state = Column(String(128), nullable=False)
    zip_code = Column(String(32), nullable=False)
    created_at = Column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
