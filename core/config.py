"""
core/config.py -- Centralized application configuration via pydantic-settings.

All environment variable reads for PizzaStore happen here. No module should
call os.getenv() or os.environ.get() directly. The bootstrap code builds a
Settings instance once and hands it to create_app(); everything downstream
receives its configuration from app.state.settings.

Design patterns used:
  Singleton via lru_cache: get_settings() instantiates Settings once at first
      call and returns the cached instance on every subsequent call. Only the
      bootstrap (asgi.py, main.py) calls it.

  BaseSettings (pydantic-settings): Reads values from environment variables
      and an optional .env file automatically. Nested fields use a double
      underscore delimiter, so JwtConfig:SecretKey is read from
      JWT__SECRET_KEY and JwtConfig:LifetimeMinutes from JWT__LIFETIME_MINUTES.

  @model_validator(mode="after"): Runs the SECRET_KEY policy after all
      fields are resolved: Development generates a key with a warning,
      any other environment refuses to start without one.

Layer rule: core/ is the kernel. This module may not import from api/,
auth/, or pizza/.
"""

import logging
import secrets
from functools import lru_cache

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger("pizzastore.config")

DEVELOPMENT = "Development"


class JwtConfig(BaseModel):
    """Signing and validation parameters for session tokens.

    Frozen so the same instance can be shared by the token issuer and the
    auth gate without either side mutating it.
    """

    model_config = ConfigDict(frozen=True)

    # Empty string is the sentinel for "not configured". Settings replaces it
    # or raises, so the token service never signs with "".
    secret_key: str = ""
    issuer: str = "PizzaStore"
    audience: str = "PizzaStoreClients"
    lifetime_minutes: float = Field(default=60.0, gt=0)


class Settings(BaseSettings):
    """Application settings loaded from environment variables and .env file.

    All fields have defaults so Settings() can be instantiated in test
    environments without a real .env file.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
    )

    # ------------------------------------------------------------------
    # Core
    # ------------------------------------------------------------------

    # "Development" turns on the admin/admin login bypass and the docs UI.
    environment: str = "Production"
    log_level: str = "INFO"

    # ------------------------------------------------------------------
    # Auth
    # ------------------------------------------------------------------

    jwt: JwtConfig = Field(default_factory=JwtConfig)

    # ------------------------------------------------------------------
    # HTTP
    # ------------------------------------------------------------------

    cors_origins: list[str] = ["http://localhost", "http://localhost:5024", "http://127.0.0.1"]

    @property
    def is_development(self) -> bool:
        return self.environment == DEVELOPMENT

    # ------------------------------------------------------------------
    # Validators
    # ------------------------------------------------------------------

    @model_validator(mode="after")
    def validate_secret_key(self) -> "Settings":
        """Enforce the signing key policy.

        Development: auto-generate a random key with a warning. Tokens will
            not survive a restart, which is fine for local work.

        Any other environment: refuse to start if JWT__SECRET_KEY is missing.

        Both: reject keys shorter than 32 characters.
        """
        key = self.jwt.secret_key
        if not key:
            if self.is_development:
                key = secrets.token_hex(32)
                self.jwt = self.jwt.model_copy(update={"secret_key": key})
                logger.warning("Using auto-generated JWT secret key. Tokens will not persist across restarts.")
            else:
                raise ValueError(
                    "JWT__SECRET_KEY is required outside development. "
                    "Set it in your environment or .env file, "
                    "or set ENVIRONMENT=Development."
                )
        if len(key) < 32:
            raise ValueError("JWT__SECRET_KEY must be at least 32 characters.")
        return self


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide Settings singleton.

    In tests, build Settings(...) directly and pass it to create_app()
    instead of going through this cache.
    """
    return Settings()
