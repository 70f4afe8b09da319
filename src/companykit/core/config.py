"""Configuration management for companykit.

This module uses Pydantic Settings to load and validate configuration from
environment variables and .env files. Configuration is loaded once when the
host application starts and is immutable during runtime.
"""

from functools import lru_cache
from typing import Literal

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class RoleConfig(BaseModel):
    """A role definition as it appears in configuration."""

    key: str = Field(..., min_length=1, description="Stable role identifier")
    name: str = Field(..., min_length=1, description="Display name (translatable)")
    permissions: list[str] = Field(default_factory=list)
    description: str = Field("", description="Description (translatable)")


DEFAULT_ROLES: list[RoleConfig] = [
    RoleConfig(
        key="admin",
        name="Administrator",
        permissions=["create", "read", "update", "delete"],
        description="Administrator users can perform any action.",
    ),
    RoleConfig(
        key="editor",
        name="Editor",
        permissions=["read", "create", "update"],
        description="Editor users have the ability to read, create, and update.",
    ),
]


class Settings(BaseSettings):
    """Application configuration settings.

    Settings are loaded from environment variables and .env files.
    All configuration values are validated at startup.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="COMPANYKIT_",
        case_sensitive=False,
        extra="ignore",
    )

    # Application Settings
    app_name: str = "companykit"
    app_version: str = "0.1.0"
    environment: Literal["development", "production", "testing"] = "development"
    debug: bool = False

    # Database Settings
    database_url: str = "sqlite+aiosqlite:///./ck_data/companykit.db"
    db_echo: bool = False

    # Logging Settings
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    log_format: Literal["json", "console"] = "json"

    # Feature Settings
    company_invitations: bool = Field(
        default=True,
        description="Invite employees by email instead of adding registered users directly",
    )
    home_route: str = Field(
        default="/dashboard",
        description="Where users are redirected after leaving a company",
    )

    # Company Settings
    company_name_max_length: int = 255
    personal_company_suffix: str = "'s Company"

    # Roles, in the order they are offered to users
    roles: list[RoleConfig] = Field(default_factory=lambda: list(DEFAULT_ROLES))

    @field_validator("roles")
    @classmethod
    def validate_unique_role_keys(cls, v: list[RoleConfig]) -> list[RoleConfig]:
        """Reject configurations that define the same role key twice."""
        keys = [role.key for role in v]
        duplicates = sorted({key for key in keys if keys.count(key) > 1})
        if duplicates:
            raise ValueError(f"Duplicate role keys: {', '.join(duplicates)}")
        return v

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment == "development"

    @property
    def is_testing(self) -> bool:
        """Check if running in testing environment."""
        return self.environment == "testing"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    This function caches the settings instance to avoid reloading
    configuration on every call. Settings are loaded once at startup.

    Returns:
        Settings: Cached application settings instance.
    """
    return Settings()
