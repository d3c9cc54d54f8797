"""
Declarative payload schemas.

Two pydantic models describe the auth and task payloads. Validation stops at
the first violated rule and reports it as a readable message such as
``"name" length must be less than or equal to 20 characters long``.
"""

# Standard library imports
from typing import Any, Literal, Mapping

# External package imports
from email_validator import EmailNotValidError, validate_email
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from pydantic_core import ErrorDetails

# Local application imports
from ...domain.constants import TaskCategory
from .result import ValidationResult


ALLOWED_EMAIL_TLDS = ("com", "net", "ca", "co")
MIN_EMAIL_DOMAIN_SEGMENTS = 2
OWNER_LENGTH = 16


class AuthSchema(BaseModel):
    """Schema for register/login payloads"""
    model_config = ConfigDict(extra="forbid", strict=True)

    email: str
    # No minimum length or complexity rule
    password: str = Field(min_length=1, max_length=20)

    @field_validator("email")
    @classmethod
    def check_email(cls, value: str) -> str:
        try:
            validate_email(value, check_deliverability=False)
        except EmailNotValidError:
            raise ValueError("must be a valid email")

        labels = value.rsplit("@", 1)[-1].split(".")
        if len(labels) < MIN_EMAIL_DOMAIN_SEGMENTS:
            raise ValueError("must be a valid email")
        if labels[-1].lower() not in ALLOWED_EMAIL_TLDS:
            raise ValueError("must be a valid email")
        return value


class TaskSchema(BaseModel):
    """Schema for a complete task record"""
    model_config = ConfigDict(extra="forbid", strict=True)

    owner: str
    name: str = Field(min_length=1, max_length=20)
    # Absent is fine, explicit null is not a string
    description: str = Field(default=None, min_length=1, max_length=100)
    category: Literal["Cleaning", "Shopping", "Work"]

    @field_validator("owner")
    @classmethod
    def check_owner(cls, value: str) -> str:
        if len(value) != OWNER_LENGTH:
            raise ValueError(f"length must be {OWNER_LENGTH} characters long")
        return value


def _describe(error: ErrorDetails) -> str:
    """Turn a single pydantic error into a readable message"""
    location = error.get("loc") or ()
    field = str(location[0]) if location else "value"
    error_type = error["type"]
    context = error.get("ctx") or {}

    if error_type == "missing":
        return f'"{field}" is required'
    if error_type == "extra_forbidden":
        return f'"{field}" is not allowed'
    if error_type == "model_type":
        return '"value" must be of type object'
    if error_type == "string_type":
        return f'"{field}" must be a string'
    if error_type == "string_too_short":
        return f'"{field}" is not allowed to be empty'
    if error_type == "string_too_long":
        return (
            f'"{field}" length must be less than or equal to '
            f'{context.get("max_length")} characters long'
        )
    if error_type == "literal_error":
        return f'"{field}" must be one of [{", ".join(TaskCategory.values())}]'
    if error_type == "value_error" and "error" in context:
        return f'"{field}" {context["error"]}'
    return f'"{field}" {error["msg"]}'


def _validate(schema: type[BaseModel], payload: Any) -> ValidationResult:
    try:
        schema.model_validate(payload)
    except ValidationError as exception:
        return ValidationResult.invalid(_describe(exception.errors()[0]))
    return ValidationResult.ok()


def validate_auth_payload(payload: Mapping[str, Any]) -> ValidationResult:
    """
    Validate a register/login payload

    Args:
        payload: Request body

    Returns:
        ValidationResult with the first violation message on failure
    """
    return _validate(AuthSchema, payload)


def validate_task_payload(payload: Mapping[str, Any]) -> ValidationResult:
    """
    Validate a full task payload (creation, or a task after an update merge)

    Args:
        payload: Task fields

    Returns:
        ValidationResult with the first violation message on failure
    """
    return _validate(TaskSchema, payload)
