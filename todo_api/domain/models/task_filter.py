"""
Task search filter expression.

A filter is a list of equality clauses over the searchable task fields
(owner, name, category) combined either with AND or with OR. A filter with
no clauses matches every task.
"""

# Standard library imports
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional, Tuple

# Local application imports
from ..constants import TaskFields


class FilterMode(str, Enum):
    """How the clauses of a TaskFilter are combined"""
    AND = "and"
    OR = "or"


SEARCHABLE_FIELDS: Tuple[str, ...] = (
    TaskFields.OWNER,
    TaskFields.NAME,
    TaskFields.CATEGORY,
)


@dataclass(frozen=True)
class TaskFilter:
    """AND-of-clauses, OR-of-clauses, or empty"""
    mode: FilterMode = FilterMode.AND
    clauses: Tuple[Tuple[str, Any], ...] = ()

    @classmethod
    def build(
        cls,
        owner: Any = None,
        name: Any = None,
        category: Any = None,
        operator: Optional[Any] = None,
    ) -> "TaskFilter":
        """
        Build a filter from whichever search fields are present

        A field counts as present when it is truthy, so null and empty-string
        values are ignored. Only ``operator == "or"`` selects OR; anything
        else (including no operator) selects AND.

        Args:
            owner: Owner to match
            name: Task name to match
            category: Category to match
            operator: "or" to combine clauses with OR

        Returns:
            TaskFilter instance
        """
        values = {
            TaskFields.OWNER: owner,
            TaskFields.NAME: name,
            TaskFields.CATEGORY: category,
        }
        clauses = tuple(
            (field, values[field]) for field in SEARCHABLE_FIELDS if values[field]
        )
        mode = FilterMode.OR if operator == FilterMode.OR.value else FilterMode.AND
        return cls(mode=mode, clauses=clauses)

    @property
    def is_empty(self) -> bool:
        return not self.clauses

    def matches(self, record: Dict[str, Any]) -> bool:
        """Evaluate the filter against a plain task record"""
        if self.is_empty:
            return True
        results = (record.get(field) == value for field, value in self.clauses)
        if self.mode is FilterMode.OR:
            return any(results)
        return all(results)
