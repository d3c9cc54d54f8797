# Standard library imports
from pathlib import Path
from contextlib import asynccontextmanager
from typing import Dict
import logging

# External package imports
from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# Local application imports
from .api.v1 import auth_router, task_router
from .api.error_handlers import register_exception_handlers
from .core.config import get_settings
from .di.container import DIContainer
from .infrastructure.db.mongo_connection import create_mongo_client, get_database, ping_database

logger = logging.getLogger(__name__)


WELCOME_MESSAGE = "Welcome to my simple to-do list backend!"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup/shutdown events.

    Opens the MongoDB client, builds the DI container on ``app.state`` and
    closes the client on shutdown. An unreachable database is logged but does
    not stop startup; requests then fail with store errors.
    """
    settings = get_settings()
    mongo_client = create_mongo_client(settings)
    database = get_database(mongo_client, settings)

    await ping_database(database)

    app.state.container = DIContainer(database)
    logger.info("Dependency container initialized")

    try:
        yield
    finally:
        mongo_client.close()
        logger.info("Application shutdown complete")


def create_application() -> FastAPI:
    """
    Create and configure FastAPI application.

    This function sets up the FastAPI application with:
    - Environment variable loading
    - CORS middleware configuration
    - API route registration
    - JSON error handlers

    Returns:
        Configured FastAPI application instance
    """
    # Load environment variables from .env file
    env_path = Path(__file__).resolve().parent.parent / ".env"
    load_dotenv(env_path)

    settings = get_settings()

    application = FastAPI(
        title="To-do API",
        version="1.0.0",
        description="Simple to-do list backend: user registration/login and task CRUD",
        lifespan=lifespan
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(application)

    @application.get("/")
    async def welcome() -> Dict[str, str]:
        return {"message": WELCOME_MESSAGE}

    # Register API routers
    application.include_router(task_router, prefix="/tasks")
    application.include_router(auth_router, prefix="/auth")

    return application


# Create application instance
app = create_application()
