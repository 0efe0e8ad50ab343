"""
Auth API routes: sign-up, sign-in, sign-out.

Route prefix: /api/auth
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse, PlainTextResponse
from sqlalchemy.ext.asyncio import AsyncSession

from auth.cookies import set_cookie
from auth.dependencies import db_session, get_settings, get_token_issuer
from auth.errors import UserAlreadyExistsError
from auth.jwt import TokenIssuer
from auth.models import PublicUser, TokenClaims
from auth.service import create_user
from auth.validation import ValidationFailed, validate_signup
from config.settings import Settings

logger = logging.getLogger(__name__)

router = APIRouter(tags=["auth"])


async def _read_json(request: Request):
    """Return the decoded body, or ``None`` when it is missing or not JSON."""
    try:
        return await request.json()
    except ValueError:
        return None


# ── Endpoints ──────────────────────────────────────────────────────────


@router.post("/sign-up", status_code=status.HTTP_201_CREATED)
async def sign_up(
    request: Request,
    session: AsyncSession = Depends(db_session),
    settings: Settings = Depends(get_settings),
    token_issuer: TokenIssuer = Depends(get_token_issuer),
) -> JSONResponse:
    """Register a new user and set the auth cookie."""
    result = validate_signup(await _read_json(request))
    if isinstance(result, ValidationFailed):
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": "Validation failed", "details": result.details},
        )

    data = result.data
    try:
        user = await create_user(
            session,
            name=data.name,
            email=data.email,
            password=data.password,
            role=data.role,
        )
    except UserAlreadyExistsError as exc:
        logger.warning("Sign up rejected, email already registered: %s", exc.email)
        return JSONResponse(
            status_code=status.HTTP_409_CONFLICT,
            content={"error": "User with this email already exists"},
        )
    except Exception:
        logger.error("Sign up error for %s", data.email)
        raise

    token = token_issuer.sign(TokenClaims.for_user(user))

    response = JSONResponse(
        status_code=status.HTTP_201_CREATED,
        content={
            "message": "User registered successfully!",
            "user": PublicUser.model_validate(user).model_dump(),
        },
    )
    set_cookie(response, settings.cookie_name, token, settings)

    logger.info("User registered successfully: %s", data.email)
    return response


@router.post("/sign-in", response_class=PlainTextResponse)
async def sign_in() -> str:
    return "POST /api/auth/sign-in response"


@router.post("/sign-out", response_class=PlainTextResponse)
async def sign_out() -> str:
    return "POST /api/auth/sign-out response"
