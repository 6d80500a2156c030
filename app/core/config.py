"""
Application configuration.

Loads settings from environment variables and .env file.
All configuration is centralized here, with no scattered magic strings.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Attributes:
        project_name: Display name for the API.
        version: Current API version string.
        debug: Enable debug mode. Must be False in production.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        api_prefix: Path prefix under which every router is mounted.
        docs_enabled: Serve Swagger UI at /api-docs and ReDoc at /redoc.
        mongo_uri: MongoDB connection URI (``MONGO_URI``).
        mongo_db: Name of the database holding users, blogs and comments.
        mongo_timeout_ms: Server selection timeout for the Mongo client.
        bcrypt_rounds: Cost factor for password hashing.
        rate_limit_enabled: Toggle per-route rate limiting.
        rate_limit_default: Default rate limit for all endpoints.
        host: Bind address for the bundled uvicorn runner.
        port: Bind port for the bundled uvicorn runner.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    project_name: str = "Blogging API"
    version: str = "1.0.0"
    debug: bool = False
    log_level: str = "INFO"
    api_prefix: str = "/api"
    docs_enabled: bool = True

    mongo_uri: str = "mongodb://localhost:27017"
    mongo_db: str = "blogging"
    mongo_timeout_ms: int = 5000

    bcrypt_rounds: int = 10

    rate_limit_enabled: bool = True
    rate_limit_default: str = "60/minute"

    host: str = "0.0.0.0"
    port: int = 3000


settings = Settings()
