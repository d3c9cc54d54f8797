"""Constants for Task model field names and categories"""

from enum import Enum


class TaskFields:
    """Field name constants for Task model"""
    OWNER = "owner"
    NAME = "name"
    DESCRIPTION = "description"
    CATEGORY = "category"

    # MongoDB specific
    MONGO_ID = "_id"  # MongoDB's internal _id field


class TaskCategory(str, Enum):
    """Allowed task categories"""
    CLEANING = "Cleaning"
    SHOPPING = "Shopping"
    WORK = "Work"

    @classmethod
    def values(cls) -> list[str]:
        return [category.value for category in cls]
