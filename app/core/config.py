# python
# app/core/config.py
"""Configuration settings for the DIY Projects application.

Uses Pydantic BaseSettings for environment variable management.
"""
import os
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import URL, make_url


class EnvironmentEnum(str, Enum):
    development = "development"
    testing = "testing"
    staging = "staging"
    production = "production"


class LogLevelEnum(str, Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LogFormatEnum(str, Enum):
    simple = "simple"
    json = "json"


class DatabaseSettings(BaseModel):
    """Connection parameters handed to the connection provider.

    ``url_override`` takes precedence over the individual fields when set, which
    is how tests point the application at SQLite.
    """

    model_config = ConfigDict(frozen=True)

    host: str = "localhost"
    port: int = 3306
    name: str = "projects"
    user: str = "projects"
    password: str = "projects"
    driver: str = "mysql+pymysql"
    echo: bool = False
    url_override: str | None = None

    @property
    def url(self) -> URL:
        if self.url_override:
            return make_url(self.url_override)
        return URL.create(
            self.driver,
            username=self.user,
            password=self.password,
            host=self.host,
            port=self.port,
            database=self.name,
        )

    @property
    def safe_url(self) -> str:
        """Connection URL with the password masked, suitable for logs."""
        return self.url.render_as_string(hide_password=True)


class Settings(BaseSettings):
    # Pydantic v2 settings configuration
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ===== Application Settings =====
    app_name: str = Field(default="DIY Projects API", description="Application name")
    environment: EnvironmentEnum = Field(
        default=EnvironmentEnum.development, description="Environment type"
    )
    debug: bool = Field(default=False, description="Debug mode")
    version: str = Field(default="1.0.0", description="Application version")

    # ===== Database Settings =====
    db_host: str = Field(default="localhost", description="Database host")
    db_port: int = Field(default=3306, description="Database port")
    db_name: str = Field(default="projects", description="Database schema name")
    db_user: str = Field(default="projects", description="Database user")
    db_password: str = Field(default="projects", description="Database password")
    db_driver: str = Field(default="mysql+pymysql", description="SQLAlchemy driver name")
    db_echo: bool = Field(default=False, description="Echo SQL statements")

    database_url: str | None = Field(
        default=None, description="Full database URL, overrides the db_* fields"
    )
    # Test database URL
    test_database_url: str | None = Field(default=None, description="Test database URL")

    # ===== Monitoring & Logging =====
    log_level: LogLevelEnum = Field(default=LogLevelEnum.INFO, description="Logging level")
    log_format: LogFormatEnum = Field(default=LogFormatEnum.simple, description="Log format")

    # ===== Server Settings =====
    host: str = Field(default="127.0.0.1", description="Host to bind the server")
    port: int = Field(default=8000, description="Port to bind the server")

    # ===== Computed Properties =====
    @property
    def is_development(self) -> bool:
        return self.environment == EnvironmentEnum.development

    @property
    def is_production(self) -> bool:
        return self.environment == EnvironmentEnum.production

    @property
    def is_testing(self) -> bool:
        return self.environment == EnvironmentEnum.testing

    @property
    def effective_database_url(self) -> str | None:
        # For testing, prioritize TEST_DATABASE_URL
        if os.getenv("TESTING") == "true" and self.test_database_url:
            return self.test_database_url
        return self.database_url

    @property
    def database(self) -> DatabaseSettings:
        return DatabaseSettings(
            host=self.db_host,
            port=self.db_port,
            name=self.db_name,
            user=self.db_user,
            password=self.db_password,
            driver=self.db_driver,
            echo=self.db_echo or self.debug,
            url_override=(self.effective_database_url or "").strip() or None,
        )

    # ===== Validation Methods =====
    @field_validator("environment", mode="before")
    @classmethod
    def validate_environment(cls, v):
        if v and isinstance(v, str):
            lv = v.lower()
            if lv in ["dev", "develop"]:
                return "development"
            if lv in ["prod"]:
                return "production"
            return lv
        return v

    @field_validator("db_port", "port")
    @classmethod
    def validate_port(cls, v):
        if not 0 < v < 65536:
            raise ValueError("Port must be between 1 and 65535")
        return v


settings = Settings()


def get_config_summary() -> dict:
    return {
        "app_name": settings.app_name,
        "version": settings.version,
        "environment": settings.environment,
        "debug": settings.debug,
        "database": settings.database.safe_url,
        "log_level": settings.log_level,
        "log_format": settings.log_format,
    }


__all__ = [
    "settings",
    "Settings",
    "DatabaseSettings",
    "get_config_summary",
    "EnvironmentEnum",
    "LogLevelEnum",
    "LogFormatEnum",
]
