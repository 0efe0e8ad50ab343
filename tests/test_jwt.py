"""Tests for JWT signing and verification."""

from __future__ import annotations

import string
import time
from datetime import timedelta

import jwt as pyjwt
import pytest

from auth.errors import TokenError
from auth.jwt import TokenIssuer
from auth.models import TokenClaims
from config.settings import Settings

SECRET = "super-secret-jwt-token-for-testing-only"
CLAIMS = TokenClaims(id=1, email="a@b.com", role="user")

_B64URL = string.ascii_uppercase + string.ascii_lowercase + string.digits + "-_"


def _flip(char: str) -> str:
    """Flip the high bit of a base64url digit so the decoded bytes change."""
    return _B64URL[_B64URL.index(char) ^ 32]


@pytest.fixture
def issuer() -> TokenIssuer:
    return TokenIssuer(SECRET)


class TestTokenIssuer:
    def test_round_trip(self, issuer: TokenIssuer) -> None:
        token = issuer.sign(CLAIMS)
        assert issuer.verify(token) == CLAIMS

    def test_expires_one_day_after_issue(self, issuer: TokenIssuer) -> None:
        payload = pyjwt.decode(issuer.sign(CLAIMS), SECRET, algorithms=["HS256"])
        assert payload["exp"] - payload["iat"] == 86400
        assert payload["id"] == 1
        assert payload["email"] == "a@b.com"
        assert payload["role"] == "user"

    def test_expired_token_raises(self) -> None:
        issuer = TokenIssuer(SECRET, expires_in=timedelta(seconds=-60))
        token = issuer.sign(CLAIMS)
        with pytest.raises(TokenError):
            issuer.verify(token)

    def test_wrong_secret_raises(self, issuer: TokenIssuer) -> None:
        token = TokenIssuer("another-secret").sign(CLAIMS)
        with pytest.raises(TokenError):
            issuer.verify(token)

    def test_tampering_any_byte_fails(self, issuer: TokenIssuer) -> None:
        token = issuer.sign(CLAIMS)
        for i, char in enumerate(token):
            if char == ".":
                continue
            forged = token[:i] + _flip(char) + token[i + 1:]
            with pytest.raises(TokenError):
                issuer.verify(forged)

    def test_missing_claims_raise(self, issuer: TokenIssuer) -> None:
        token = pyjwt.encode(
            {"id": 1, "iat": int(time.time()), "exp": int(time.time()) + 60},
            SECRET,
            algorithm="HS256",
        )
        with pytest.raises(TokenError):
            issuer.verify(token)

    def test_garbage_raises(self, issuer: TokenIssuer) -> None:
        with pytest.raises(TokenError):
            issuer.verify("not-a-token")

    def test_sign_failure_raises_token_error(self) -> None:
        issuer = TokenIssuer(SECRET, algorithm="NOPE")
        with pytest.raises(TokenError):
            issuer.sign(CLAIMS)

    def test_empty_secret_rejected(self) -> None:
        with pytest.raises(ValueError):
            TokenIssuer("")


class TestFromSettings:
    def test_uses_configured_secret_and_expiry(self) -> None:
        settings = Settings(_env_file=None, jwt_secret=SECRET, jwt_expiry_seconds=120)
        issuer = TokenIssuer.from_settings(settings)
        payload = pyjwt.decode(issuer.sign(CLAIMS), SECRET, algorithms=["HS256"])
        assert payload["exp"] - payload["iat"] == 120
