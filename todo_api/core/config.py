# Standard library imports
import os
from typing import Final, List, Optional


def _build_mongo_uri() -> str:
    """
    Resolve the MongoDB connection string.

    MONGO_URI wins when set. Otherwise an Atlas SRV URI is assembled from the
    MONGODB_USER / MONGODB_PASSWORD / MONGODB_CLUSTER / MONGODB_DATABASE
    credentials, falling back to a local server.
    """
    explicit_uri = os.getenv("MONGO_URI")
    if explicit_uri:
        return explicit_uri

    user = os.getenv("MONGODB_USER")
    password = os.getenv("MONGODB_PASSWORD")
    cluster = os.getenv("MONGODB_CLUSTER")
    database = os.getenv("MONGODB_DATABASE")
    if user and password and cluster and database:
        return (
            f"mongodb+srv://{user}:{password}@{cluster}.{database}"
            f"/todo-api?retryWrites=true&w=majority"
        )

    return "mongodb://localhost:27017"


class Settings:
    """
    Application settings loaded from environment variables.

    This class centralizes all configuration settings for the application.
    All settings are loaded from environment variables with sensible defaults.
    """

    def __init__(self) -> None:
        # Database Configuration
        self.mongo_uri: Final[str] = _build_mongo_uri()
        self.mongo_database_name: Final[str] = os.getenv("MONGO_DB_NAME", "todo-api")

        # Password hashing
        self.bcrypt_rounds: Final[int] = int(os.getenv("BCRYPT_ROUNDS", "10"))

        # Server Configuration
        self.host: Final[str] = os.getenv("HOST", "0.0.0.0")
        self.port: Final[int] = int(os.getenv("PORT", "3000"))
        self.log_level: Final[str] = os.getenv("LOG_LEVEL", "INFO").upper()
        self.cors_origins: Final[List[str]] = [
            origin.strip()
            for origin in os.getenv("CORS_ORIGINS", "*").split(",")
            if origin.strip()
        ]


# Global settings instance (singleton pattern)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get application settings (singleton pattern)

    Returns:
        Settings instance with all configuration values
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
