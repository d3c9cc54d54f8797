from .mongo_connection import (
    create_mongo_client,
    get_database,
    get_user_collection,
    get_task_collection,
    ping_database,
)
from .mongo_user_repository import MongoUserRepository
from .mongo_task_repository import MongoTaskRepository

__all__ = [
    "create_mongo_client",
    "get_database",
    "get_user_collection",
    "get_task_collection",
    "ping_database",
    "MongoUserRepository",
    "MongoTaskRepository",
]
