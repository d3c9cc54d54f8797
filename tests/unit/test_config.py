"""
Unit tests for todo_api.core.config
"""
import os
from unittest.mock import patch

from todo_api.core.config import Settings


CREDENTIAL_VARS = ("MONGO_URI", "MONGODB_USER", "MONGODB_PASSWORD", "MONGODB_CLUSTER", "MONGODB_DATABASE")


def _clean_env(**overrides):
    env = {key: value for key, value in os.environ.items() if key not in CREDENTIAL_VARS}
    env.update(overrides)
    return patch.dict(os.environ, env, clear=True)


class TestSettings:
    """Tests for Settings"""

    def test_explicit_mongo_uri_wins(self):
        with _clean_env(MONGO_URI="mongodb://db:27017", MONGODB_USER="u"):
            assert Settings().mongo_uri == "mongodb://db:27017"

    def test_atlas_uri_assembled_from_credentials(self):
        with _clean_env(
            MONGODB_USER="alice",
            MONGODB_PASSWORD="pw",
            MONGODB_CLUSTER="cluster0",
            MONGODB_DATABASE="abcde.mongodb.net",
        ):
            assert Settings().mongo_uri == (
                "mongodb+srv://alice:pw@cluster0.abcde.mongodb.net"
                "/todo-api?retryWrites=true&w=majority"
            )

    def test_falls_back_to_local_server(self):
        with _clean_env(MONGODB_USER="alice"):
            assert Settings().mongo_uri == "mongodb://localhost:27017"

    def test_defaults(self):
        with _clean_env():
            for key in ("MONGO_DB_NAME", "BCRYPT_ROUNDS", "PORT", "CORS_ORIGINS"):
                os.environ.pop(key, None)
            settings = Settings()
        assert settings.mongo_database_name == "todo-api"
        assert settings.bcrypt_rounds == 10
        assert settings.port == 3000
        assert settings.cors_origins == ["*"]

    def test_cors_origins_split(self):
        with _clean_env(CORS_ORIGINS="http://a.com, http://b.com"):
            assert Settings().cors_origins == ["http://a.com", "http://b.com"]
