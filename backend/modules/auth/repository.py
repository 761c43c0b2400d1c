"""
User repository for database access.

Encapsulates all SQLAlchemy queries and data mapping for the ``users``
table. Emails are expected to arrive already normalized.
"""

import logging
import uuid
from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError

from shared.repository import BaseRepository

from .exceptions import DuplicateEmailError
from .models import Address, NewUser, UserRecord
from .tables import UserRow

logger = logging.getLogger(__name__)


class UserRepository(BaseRepository[UserRecord]):
    """
    Repository for user accounts.

    Read and create only; accounts are never updated or deleted here.
    """

    async def get_by_email(self, email: str) -> Optional[UserRecord]:
        """Look up a user by (normalized) email."""
        async with self._sessions() as session:
            result = await session.execute(select(UserRow).where(UserRow.email == email))
            row = result.scalar_one_or_none()
            return self._map_to_record(row) if row else None

    async def get_by_id(self, user_id: str) -> Optional[UserRecord]:
        """Look up a user by ID."""
        async with self._sessions() as session:
            row = await session.get(UserRow, user_id)
            return self._map_to_record(row) if row else None

    async def create(self, user: NewUser) -> UserRecord:
        """
        Insert a new user.

        Raises:
            DuplicateEmailError: If the email is already taken. The
                transaction is rolled back and nothing is written.
        """
        row = UserRow(
            id=str(uuid.uuid4()),
            email=user.email,
            password_hash=user.password_hash,
            name=user.name,
            phone_number=user.phone_number,
            gender=user.gender,
            date_of_birth=user.date_of_birth,
            street=user.address.street,
            city=user.address.city,
            state=user.address.state,
            zip_code=user.address.zip_code,
        )
        async with self._sessions() as session:
            session.add(row)
            try:
                await session.commit()
            except IntegrityError:
                await session.rollback()
                logger.info("Rejected duplicate signup for existing email")
                raise DuplicateEmailError(user.email)
            return self._map_to_record(row)

    # -------------------------------------------------------------------------
    # Mapping helpers
    # -------------------------------------------------------------------------

    def _map_to_record(self, row: UserRow) -> UserRecord:
        return UserRecord(
            id=row.id,
            email=row.email,
            password_hash=row.password_hash,
            name=row.name,
            phone_number=row.phone_number,
            gender=row.gender,
            date_of_birth=row.date_of_birth,
            address=Address(
                street=row.street,
                city=row.city,
                state=row.state,
                zip_code=row.zip_code,
            ),
            created_at=row.created_at,
        )
