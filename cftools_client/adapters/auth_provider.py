"""
Bearer token acquisition for the CFTools data API.
"""

import asyncio
import time
from dataclasses import dataclass
from typing import Callable, Optional

from shared.logging import get_logger
from shared.errors import AuthenticationError
from .http import CFToolsHttp

TOKEN_LIFETIME_SECONDS = 24 * 60 * 60
REFRESH_MARGIN_SECONDS = 60 * 60


@dataclass(frozen=True)
class LoginCredentials:
    application_id: str
    secret: str

    @classmethod
    def of(cls, application_id: str, secret: str) -> "LoginCredentials":
        return cls(application_id, secret)

    def __repr__(self) -> str:
        return f"LoginCredentials(application_id={self.application_id!r}, secret='***')"


class CFToolsAuthorizationProvider:
    """Registers the application and hands out a cached bearer token.

    A token is reused until it is within ``REFRESH_MARGIN_SECONDS`` of its
    lifetime, then a new one is registered. Concurrent callers share a
    single registration.
    """

    def __init__(
        self,
        credentials: LoginCredentials,
        http: CFToolsHttp,
        clock: Optional[Callable[[], float]] = None,
    ):
        self.credentials = credentials
        self.http = http
        self._clock = clock or time.time
        self._token: Optional[str] = None
        self._refresh_at = 0.0
        self._lock: Optional[asyncio.Lock] = None
        self.logger = get_logger("cftools.auth")

    def _has_valid_token(self) -> bool:
        return self._token is not None and self._clock() < self._refresh_at

    async def provide_token(self) -> str:
        if self._has_valid_token():
            return self._token  # type: ignore[return-value]

        # Created on first use so the lock belongs to the running loop
        if self._lock is None:
            self._lock = asyncio.Lock()

        async with self._lock:
            if self._has_valid_token():
                return self._token  # type: ignore[return-value]

            response = await self.http.request(
                "POST",
                "v1/auth/register",
                endpoint="auth_register",
                json={
                    "application_id": self.credentials.application_id,
                    "secret": self.credentials.secret,
                },
            )
            token = response.get("token") if isinstance(response, dict) else None
            if not token:
                raise AuthenticationError(
                    "Token registration returned no token",
                    details={"application_id": self.credentials.application_id},
                )

            self._token = token
            self._refresh_at = self._clock() + TOKEN_LIFETIME_SECONDS - REFRESH_MARGIN_SECONDS
            self.logger.info("Registered CFTools token", application_id=self.credentials.application_id)
            return token

    def invalidate(self) -> None:
        """Forget the current token so the next call registers again."""
        self._token = None
        self._refresh_at = 0.0
