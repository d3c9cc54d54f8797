from .result import ValidationResult
from .schemas import (
    AuthSchema,
    TaskSchema,
    validate_auth_payload,
    validate_task_payload,
)

__all__ = [
    "ValidationResult",
    "AuthSchema",
    "TaskSchema",
    "validate_auth_payload",
    "validate_task_payload",
]
