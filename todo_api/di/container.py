# External package imports
from fastapi import Request
from motor.motor_asyncio import AsyncIOMotorDatabase

# Local application imports
from .base_container import BaseContainer
from .providers import (
    AuthProvider,
    DatabaseProvider,
    RepositoryProvider,
    TaskProvider,
)


class DIContainer(BaseContainer):
    """
    Main dependency injection container.
    Composes all providers in the correct order.

    Registration order is important:
    1. Database collections (DatabaseProvider)
    2. Repositories (RepositoryProvider) - depends on collections
    3. Use cases (AuthProvider, TaskProvider) - depend on repositories
    """

    def __init__(self, database: AsyncIOMotorDatabase) -> None:
        super().__init__()
        self.setup(database)

    def setup(self, database: AsyncIOMotorDatabase) -> None:
        """
        Setup dependency registrations by composing all providers.
        Order matters: database → repositories → use cases
        """
        DatabaseProvider.register(self, database)
        RepositoryProvider.register(self)
        AuthProvider.register(self)
        TaskProvider.register(self)


def get_container(request: Request) -> BaseContainer:
    """
    FastAPI dependency returning the container built at startup

    Returns:
        Container stored on the application state by the lifespan
    """
    return request.app.state.container
