"""
JWT creation and verification.

Tokens are HS256 JWTs carrying the ``TokenClaims`` (``id``, ``email``,
``role``) plus ``iat`` / ``exp``.  The secret comes from
``Settings.resolve_jwt_secret`` and is injected at construction.
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone

import jwt as pyjwt

from auth.errors import TokenError
from auth.models import TokenClaims
from config.settings import Settings

logger = logging.getLogger(__name__)

_DEFAULT_EXPIRY = timedelta(days=1)


class TokenIssuer:
    def __init__(
        self,
        secret: str,
        expires_in: timedelta = _DEFAULT_EXPIRY,
        algorithm: str = "HS256",
    ) -> None:
        if not secret:
            raise ValueError("TokenIssuer requires a non-empty secret")
        self._secret = secret
        self.expires_in = expires_in
        self.algorithm = algorithm

    @classmethod
    def from_settings(cls, settings: Settings) -> "TokenIssuer":
        return cls(
            secret=settings.resolve_jwt_secret(),
            expires_in=timedelta(seconds=settings.jwt_expiry_seconds),
            algorithm=settings.jwt_algorithm,
        )

    def sign(self, claims: TokenClaims) -> str:
        """Sign ``claims`` into a token that expires after ``expires_in``."""
        now = datetime.now(timezone.utc)
        payload = {
            **claims.model_dump(),
            "iat": now,
            "exp": now + self.expires_in,
        }
        try:
            return pyjwt.encode(payload, self._secret, algorithm=self.algorithm)
        except (pyjwt.PyJWTError, NotImplementedError, TypeError, ValueError) as exc:
            logger.error("Failed to sign token: %s", exc)
            raise TokenError("Failed to authenticate token") from exc

    def verify(self, token: str) -> TokenClaims:
        """
        Verify ``token`` and return its claims.

        Raises ``TokenError`` on expired, malformed or tampered tokens.
        """
        try:
            payload = pyjwt.decode(
                token,
                self._secret,
                algorithms=[self.algorithm],
                options={"require": ["exp", "iat"]},
            )
            return TokenClaims(
                id=payload["id"],
                email=payload["email"],
                role=payload["role"],
            )
        except (pyjwt.PyJWTError, KeyError, ValueError) as exc:
            logger.error("Failed to authenticate token: %s", exc)
            raise TokenError("Failed to authenticate token") from exc
