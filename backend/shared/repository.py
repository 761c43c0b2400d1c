"""
Base repository class for database access.

Provides a common abstraction layer for all repositories, encapsulating
session factory access and providing shared utilities for data operations.
"""

from typing import TypeVar, Generic

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker


T = TypeVar("T")


class BaseRepository(Generic[T]):
    """
    Base class for all repositories.

    Provides common functionality for database operations:
    - Session factory access via self._sessions
    - Generic type parameter for model type hints

    Subclasses should implement domain-specific data access methods
    and handle row-to-Pydantic model mapping internally. Each method
    opens its own short-lived session and commits before returning.

    Example:
        class UserRepository(BaseRepository[UserRecord]):
            async def get_by_id(self, user_id: str) -> Optional[UserRecord]:
                async with self._sessions() as session:
                    row = await session.get(UserRow, user_id)
                    return self._map_to_record(row) if row else None
    """

    def __init__(self, sessions: async_sessionmaker[AsyncSession]) -> None:
        """
        Initialize the repository with a session factory.

        Args:
            sessions: Async session factory bound to the application engine.
        """
        self._sessions = sessions
