from typing import TYPE_CHECKING
from motor.motor_asyncio import AsyncIOMotorDatabase
from ...infrastructure.db.mongo_connection import (
    get_user_collection,
    get_task_collection,
)

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class DatabaseProvider:
    """Database provider - registers the database handle and its collections"""

    @staticmethod
    def register(container: "BaseContainer", database: AsyncIOMotorDatabase) -> None:
        """
        Register the database and all collections as singletons.
        The database handle is created and closed by the application lifespan.
        """
        container.register_singleton("database", database)
        container.register_singleton("user_collection", get_user_collection(database))
        container.register_singleton("task_collection", get_task_collection(database))
