"""
Tests for the auth cookie attributes.
"""

from starlette.responses import Response

from auth.cookies import clear_cookie, set_cookie
from config.settings import Settings


def _set_cookie_header(response: Response) -> str:
    return response.headers["set-cookie"].lower()


class TestSetCookie:
    def test_development_attributes(self):
        settings = Settings(_env_file=None, environment="development")
        response = Response()
        set_cookie(response, "token", "abc", settings)

        header = _set_cookie_header(response)
        assert header.startswith("token=abc")
        assert "httponly" in header
        assert "max-age=86400" in header
        assert "path=/" in header
        assert "samesite=strict" in header
        assert "; secure" not in header

    def test_secure_in_production(self):
        settings = Settings(_env_file=None, environment="production", jwt_secret="s")
        response = Response()
        set_cookie(response, "token", "abc", settings)
        assert "; secure" in _set_cookie_header(response)

    def test_secure_override(self):
        settings = Settings(_env_file=None, environment="development", cookie_secure=True)
        response = Response()
        set_cookie(response, "token", "abc", settings)
        assert "; secure" in _set_cookie_header(response)


class TestClearCookie:
    def test_expires_cookie(self):
        settings = Settings(_env_file=None)
        response = Response()
        clear_cookie(response, "token", settings)

        header = _set_cookie_header(response)
        assert header.startswith('token=""')
        assert "max-age=0" in header
        assert "httponly" in header
