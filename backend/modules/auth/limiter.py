"""
Login-attempt limiting.

No throttling policy is defined yet. ``NoopLoginAttemptLimiter`` is the
default wired into ``AuthService``; a real policy plugs in by implementing
``ILoginAttemptLimiter`` and passing it to the service.
"""

from .interfaces import ILoginAttemptLimiter


class NoopLoginAttemptLimiter(ILoginAttemptLimiter):
    """Limiter that never refuses an attempt."""

    async def check(self, email: str) -> None:
        return None

    async def record_failure(self, email: str) -> None:
        return None

    async def record_success(self, email: str) -> None:
        return None
