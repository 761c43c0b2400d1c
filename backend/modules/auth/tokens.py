"""
Session token issuance and verification.

Tokens are HS256 JWTs (PyJWT) carrying ``sub`` (user ID), ``email``,
``iat`` and ``exp``. Verification is stateless: signature plus expiry.
"""

from datetime import datetime, timedelta, timezone
from typing import Callable, Optional

import jwt

from .exceptions import BadSignatureError, ExpiredTokenError, MalformedTokenError
from .models import TokenPayload

Clock = Callable[[], datetime]


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class TokenService:
    """
    Issues and verifies signed, time-bound bearer tokens.

    The signing secret and expiry horizon are passed in explicitly so
    tests can inject their own; nothing here reads global settings.
    """

    def __init__(
        self,
        secret: str,
        expiry: timedelta,
        algorithm: str = "HS256",
        clock: Optional[Clock] = None,
    ) -> None:
        if not secret:
            raise ValueError("Token signing secret must not be empty")
        self._secret = secret
        self._expiry = expiry
        self._algorithm = algorithm
        self._clock = clock or _utcnow

    def issue(self, user_id: str, email: str) -> str:
        """Create a signed token for ``user_id`` expiring after the horizon."""
        now = self._clock()
        payload = {
            "sub": user_id,
            "email": email,
            "iat": int(now.timestamp()),
            "exp": int((now + self._expiry).timestamp()),
        }
        return jwt.encode(payload, self._secret, algorithm=self._algorithm)

    def verify(self, token: str) -> TokenPayload:
        """
        Verify a token and return its claims.

        Raises:
            MalformedTokenError: Not a decodable JWT or required claims missing
            BadSignatureError: Signed with another secret or payload altered
            ExpiredTokenError: Past its ``exp`` claim
        """
        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                options={"require": ["sub", "iat", "exp"]},
            )
        except jwt.ExpiredSignatureError:
            raise ExpiredTokenError()
        except jwt.InvalidSignatureError:
            raise BadSignatureError()
        except jwt.InvalidTokenError as e:
            raise MalformedTokenError(f"Malformed authentication token: {e}")

        try:
            return TokenPayload(**payload)
        except (TypeError, ValueError) as e:
            raise MalformedTokenError(f"Malformed authentication token: {e}")
