import pytest

from modules.auth.interfaces import IAuthService, ILoginAttemptLimiter, IUserRepository
from modules.auth.limiter import NoopLoginAttemptLimiter
from modules.auth.service import AuthService


class TestAuthInterface:
    def test_auth_service_has_interface_methods(self):
        """AuthService should have all IAuthService methods."""
        methods = ["signup", "login", "validate_token", "get_user_by_id"]
        for method in methods:
            assert hasattr(IAuthService, method)
            assert callable(getattr(AuthService, method))

    def test_repository_satisfies_protocol(self, user_repository):
        assert isinstance(user_repository, IUserRepository)

    def test_service_satisfies_protocol(self, auth_service):
        assert isinstance(auth_service, IAuthService)


class TestNoopLimiter:
    def test_satisfies_protocol(self):
        assert isinstance(NoopLoginAttemptLimiter(), ILoginAttemptLimiter)

    @pytest.mark.asyncio
    async def test_never_refuses(self):
        limiter = NoopLoginAttemptLimiter()
        for _ in range(100):
            await limiter.check("test@example.com")
            await limiter.record_failure("test@example.com")
        await limiter.record_success("test@example.com")
