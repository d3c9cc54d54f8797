# Standard library imports
import logging

# External package imports
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase, AsyncIOMotorCollection

# Local application imports
from ...core.config import Settings

logger = logging.getLogger(__name__)


USER_COLLECTION = "users"
TASK_COLLECTION = "tasks"


def create_mongo_client(settings: Settings) -> AsyncIOMotorClient:
    """
    Create a MongoDB client. The caller owns it and must close it.

    Args:
        settings: Application settings holding the connection string

    Returns:
        Motor client (connects lazily on first operation)
    """
    return AsyncIOMotorClient(settings.mongo_uri)


def get_database(client: AsyncIOMotorClient, settings: Settings) -> AsyncIOMotorDatabase:
    """
    Get the application database from a client

    Returns:
        MongoDB database instance
    """
    return client[settings.mongo_database_name]


def get_user_collection(database: AsyncIOMotorDatabase) -> AsyncIOMotorCollection:
    """
    Get users collection from MongoDB

    Returns:
        MongoDB collection for users
    """
    return database[USER_COLLECTION]


def get_task_collection(database: AsyncIOMotorDatabase) -> AsyncIOMotorCollection:
    """
    Get tasks collection from MongoDB

    Returns:
        MongoDB collection for tasks
    """
    return database[TASK_COLLECTION]


async def ping_database(database: AsyncIOMotorDatabase) -> bool:
    """Check the server answers; logs and returns False on failure."""
    try:
        await database.command("ping")
    except Exception as e:
        logger.error(f"Error connecting to database: {e}")
        return False
    logger.info("Connected to database.")
    return True
