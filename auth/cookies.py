"""
Auth cookie helpers.

Cookies are always ``HttpOnly``, scoped to ``Settings.cookie_path``, use
``Settings.cookie_samesite`` and live exactly as long as the token they
carry.  ``Secure`` follows ``Settings.secure_cookies``.
"""

from __future__ import annotations

from starlette.responses import Response

from config.settings import Settings


def set_cookie(response: Response, name: str, value: str, settings: Settings) -> None:
    response.set_cookie(
        key=name,
        value=value,
        max_age=settings.jwt_expiry_seconds,
        path=settings.cookie_path,
        httponly=True,
        secure=settings.secure_cookies,
        samesite=settings.cookie_samesite,
    )


def clear_cookie(response: Response, name: str, settings: Settings) -> None:
    response.delete_cookie(
        key=name,
        path=settings.cookie_path,
        httponly=True,
        secure=settings.secure_cookies,
        samesite=settings.cookie_samesite,
    )
