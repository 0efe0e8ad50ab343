"""
Request body validation for the auth endpoints.

``validate_signup`` / ``validate_sign_in`` never raise: they return either
``ValidationOk`` carrying the normalized model or ``ValidationFailed``
carrying one ``{field, message}`` entry per violation.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Generic, List, Literal, Type, TypeVar, Union

from pydantic import BaseModel, EmailStr, Field, ValidationError, field_validator

_EMAIL_MAX_LENGTH = 255


class _EmailInput(BaseModel):
    email: EmailStr

    @field_validator("email", mode="before")
    @classmethod
    def normalize_email(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip().lower()
        return value

    @field_validator("email")
    @classmethod
    def check_email_length(cls, value: str) -> str:
        if len(value) > _EMAIL_MAX_LENGTH:
            raise ValueError(f"Email should have at most {_EMAIL_MAX_LENGTH} characters")
        return value


class SignupInput(_EmailInput):
    name: str = Field(..., min_length=2, max_length=50)
    password: str = Field(..., min_length=6, max_length=20)
    role: Literal["user", "admin"] = "user"


class SignInInput(_EmailInput):
    password: str = Field(..., min_length=6, max_length=20)


# ── Result types ──────────────────────────────────────────────────────

M = TypeVar("M", bound=BaseModel)


@dataclass(frozen=True)
class ValidationOk(Generic[M]):
    data: M
    ok: bool = field(default=True, init=False)


@dataclass(frozen=True)
class ValidationFailed:
    details: List[Dict[str, str]]
    ok: bool = field(default=False, init=False)


ValidationResult = Union[ValidationOk[M], ValidationFailed]


def format_validation_errors(exc: ValidationError) -> List[Dict[str, str]]:
    """Flatten pydantic errors into ``{field, message}`` entries."""
    details = []
    for err in exc.errors():
        loc = ".".join(str(part) for part in err["loc"]) or "body"
        details.append({"field": loc, "message": err["msg"]})
    return details


def _validate(model: Type[M], raw: Any) -> ValidationResult:
    if not isinstance(raw, dict):
        return ValidationFailed(
            details=[{"field": "body", "message": "Request body must be a JSON object"}]
        )
    try:
        return ValidationOk(data=model.model_validate(raw))
    except ValidationError as exc:
        return ValidationFailed(details=format_validation_errors(exc))


def validate_signup(raw: Any) -> ValidationResult:
    return _validate(SignupInput, raw)


def validate_sign_in(raw: Any) -> ValidationResult:
    return _validate(SignInInput, raw)
