# Standard library imports
from dataclasses import dataclass
from typing import Any, Dict, Optional

# Local application imports
from ..constants import TaskFields


@dataclass
class Task:
    """
    Pure domain model for Task entity.

    A task belongs to the user identified by ``owner``; the owner is set once
    at creation and never changes. Field constraints (lengths, category set)
    live in the task schema, so a merged task can be re-validated before it
    is persisted.
    """
    id: Optional[str]
    owner: str
    name: str
    category: str
    description: Optional[str] = None

    def to_payload(self) -> Dict[str, Any]:
        """Task fields as a schema payload (absent fields omitted)"""
        payload: Dict[str, Any] = {
            TaskFields.OWNER: self.owner,
            TaskFields.NAME: self.name,
            TaskFields.DESCRIPTION: self.description,
            TaskFields.CATEGORY: self.category,
        }
        return {key: value for key, value in payload.items() if value is not None}
