from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of a schema check: valid, or invalid with the first violation"""
    valid: bool
    message: Optional[str] = None

    @classmethod
    def ok(cls) -> "ValidationResult":
        return cls(valid=True)

    @classmethod
    def invalid(cls, message: str) -> "ValidationResult":
        return cls(valid=False, message=message)
