"""Application settings using pydantic-settings.

Settings are loaded from environment variables with sensible defaults
for development. Production deployments should set all values explicitly.
"""

from functools import lru_cache

from pydantic import Field, SecretStr, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class DatabaseSettings(BaseSettings):
    """Database connection settings.

    Environment variables:
        IAM_DB_HOST: Database host (default: localhost)
        IAM_DB_PORT: Database port (default: 5432)
        IAM_DB_DATABASE: Database name (default: iam)
        IAM_DB_USERNAME: Database user (default: iam)
        IAM_DB_PASSWORD: Database password (required in production)
        IAM_DB_POOL_MIN_CONNECTIONS: Minimum connections in pool (default: 2)
        IAM_DB_POOL_MAX_CONNECTIONS: Maximum connections in pool (default: 10)
        IAM_DB_CREATE_SCHEMA: Create missing tables at startup (default: false)
    """

    model_config = SettingsConfigDict(
        env_prefix="IAM_DB_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    host: str = Field(default="localhost", description="Database host")
    port: int = Field(default=5432, description="Database port")
    database: str = Field(default="iam", description="Database name")
    username: str = Field(default="iam", description="Database username")
    password: SecretStr = Field(
        default=SecretStr(""),
        description="Database password",
    )
    pool_min_connections: int = Field(
        default=2,
        description="Minimum connections in pool",
        ge=1,
        le=100,
    )
    pool_max_connections: int = Field(
        default=10,
        description="Maximum connections in pool",
        ge=1,
        le=100,
    )
    create_schema: bool = Field(
        default=False,
        description="Create missing tables at startup",
    )

    @model_validator(mode="after")
    def validate_pool_settings(self) -> "DatabaseSettings":
        """Validate pool max >= min."""
        if self.pool_max_connections < self.pool_min_connections:
            raise ValueError(
                f"pool_max_connections ({self.pool_max_connections}) must be >= "
                f"pool_min_connections ({self.pool_min_connections})"
            )
        return self

    @property
    def connection_string(self) -> str:
        """Generate a connection string (without password for logging)."""
        return f"postgresql://{self.username}@{self.host}:{self.port}/{self.database}"


class KeycloakSettings(BaseSettings):
    """Keycloak admin API settings.

    Environment variables:
        IAM_KEYCLOAK_SERVER_URL: Keycloak base URL (default: http://localhost:8081)
        IAM_KEYCLOAK_REALM: Realm users are created in (default: saas-iam)
        IAM_KEYCLOAK_ADMIN_REALM: Realm the admin logs into (default: master)
        IAM_KEYCLOAK_ADMIN_CLIENT_ID: Client used for the admin login (default: admin-cli)
        IAM_KEYCLOAK_ADMIN_USERNAME: Admin username (default: admin)
        IAM_KEYCLOAK_ADMIN_PASSWORD: Admin password (default: admin)
        IAM_KEYCLOAK_TIMEOUT_SECONDS: Per-request timeout (default: 10)
    """

    model_config = SettingsConfigDict(
        env_prefix="IAM_KEYCLOAK_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    server_url: str = Field(
        default="http://localhost:8081", description="Keycloak base URL"
    )
    realm: str = Field(default="saas-iam", description="Realm managed by the service")
    admin_realm: str = Field(default="master", description="Realm for admin login")
    admin_client_id: str = Field(
        default="admin-cli", description="Client ID for admin login"
    )
    admin_username: str = Field(default="admin", description="Admin username")
    admin_password: SecretStr = Field(
        default=SecretStr("admin"), description="Admin password"
    )
    timeout_seconds: float = Field(
        default=10.0,
        description="Timeout for each call to Keycloak",
        gt=0,
        le=120,
    )


class Settings(BaseSettings):
    """Main application settings aggregating all configuration sections."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Application metadata
    app_name: str = Field(default="IAM Service", description="Application name")
    debug: bool = Field(default=False, description="Debug mode")

    @property
    def database(self) -> DatabaseSettings:
        """Get database settings."""
        return get_database_settings()

    @property
    def keycloak(self) -> KeycloakSettings:
        """Get Keycloak settings."""
        return get_keycloak_settings()


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()


@lru_cache
def get_database_settings() -> DatabaseSettings:
    """Get cached database settings.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return DatabaseSettings()


@lru_cache
def get_keycloak_settings() -> KeycloakSettings:
    """Get cached Keycloak settings."""
    return KeycloakSettings()
