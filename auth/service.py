"""
User persistence for the auth routes.

``create_user`` owns the "email is unique" rule: it checks first for a
friendly error and relies on the unique index on ``users.email`` to stay
correct under concurrent signups.
"""

from __future__ import annotations

import logging
from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from auth.errors import UnclassifiedStoreError, UserAlreadyExistsError
from auth.models import User
from auth.password import hash_password

logger = logging.getLogger(__name__)


async def get_user_by_email(session: AsyncSession, email: str) -> Optional[User]:
    result = await session.execute(select(User).where(User.email == email))
    return result.scalar_one_or_none()


async def create_user(
    session: AsyncSession,
    *,
    name: str,
    email: str,
    password: str,
    role: str = "user",
) -> User:
    """
    Hash ``password`` and insert a new user.

    Raises ``UserAlreadyExistsError`` if ``email`` is taken and
    ``UnclassifiedStoreError`` for any other database failure.
    """
    try:
        if await get_user_by_email(session, email) is not None:
            raise UserAlreadyExistsError(email)

        user = User(
            name=name,
            email=email,
            password=hash_password(password),
            role=role,
        )
        session.add(user)
        await session.flush()
        await session.commit()
    except IntegrityError as exc:
        await session.rollback()
        # Lost a race with a concurrent signup for the same email.
        try:
            existing = await get_user_by_email(session, email)
        except SQLAlchemyError as lookup_exc:
            raise UnclassifiedStoreError(str(lookup_exc)) from exc
        if existing is not None:
            raise UserAlreadyExistsError(email) from exc
        raise UnclassifiedStoreError(str(exc.orig)) from exc
    except SQLAlchemyError as exc:
        await session.rollback()
        raise UnclassifiedStoreError(str(exc)) from exc

    logger.info("Created user %s (id=%s, role=%s)", user.email, user.id, user.role)
    return user
