"""
Configuration management for AuthGate.

This module handles all application configuration using Pydantic Settings
for environment variable management and validation.
"""

from __future__ import annotations

from typing import Any, List, Optional

from pydantic import Field, validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class GitHubConfig(BaseSettings):
    """GitHub OAuth application settings."""

    model_config = SettingsConfigDict(
        env_prefix="GITHUB_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore"
    )

    client_id: str = Field(
        default="",
        description="GitHub OAuth app client ID"
    )
    client_secret: str = Field(
        default="",
        description="GitHub OAuth app client secret"
    )
    token_url: str = Field(
        default="https://github.com/login/oauth/access_token",
        description="Authorization code exchange endpoint"
    )
    api_base_url: str = Field(
        default="https://api.github.com",
        description="GitHub REST API base URL"
    )
    user_agent: str = Field(
        default="MCP-Orchestrator",
        description="User-Agent sent to the GitHub API"
    )
    timeout: float = Field(
        default=5.0,
        description="Upper bound in seconds for a single GitHub call",
        gt=0,
        le=60
    )

    @validator("api_base_url", "token_url")
    def strip_trailing_slash(cls, v: str) -> str:
        """Normalize endpoint URLs."""
        return v.rstrip("/")


class CookieConfig(BaseSettings):
    """Credential cookie settings."""

    model_config = SettingsConfigDict(
        env_prefix="COOKIE_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore"
    )

    name: str = Field(
        default="github_token",
        description="Cookie carrying the signed credential",
        min_length=1
    )
    max_age: int = Field(
        default=86400,
        description="Credential lifetime in seconds",
        ge=60,
        le=86400
    )
    secure: bool = Field(
        default=True,
        description="Only send the cookie over HTTPS"
    )
    same_site: str = Field(
        default="lax",
        description="SameSite attribute"
    )
    domain: Optional[str] = Field(
        default=None,
        description="Cookie domain (host-only when unset)"
    )
    secret_key: Optional[str] = Field(
        default=None,
        description="Key used to sign the cookie value"
    )

    @validator("same_site")
    def validate_same_site(cls, v: str) -> str:
        """Validate SameSite attribute."""
        valid_values = {"lax", "strict", "none"}
        if v.lower() not in valid_values:
            raise ValueError(f"Invalid SameSite value: {v}. Must be one of {valid_values}")
        return v.lower()


class ServerConfig(BaseSettings):
    """Server configuration settings."""

    model_config = SettingsConfigDict(
        env_prefix="SERVER_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore"
    )

    host: str = Field(
        default="0.0.0.0",
        description="Server host address"
    )
    port: int = Field(
        default=8000,
        description="Server port",
        ge=1,
        le=65535
    )
    workers: int = Field(
        default=1,
        description="Number of worker processes",
        ge=1,
        le=16
    )
    reload: bool = Field(
        default=False,
        description="Enable auto-reload in development"
    )

    # Extra CORS origins besides the frontend URL
    cors_origins: List[str] = Field(
        default_factory=list,
        description="Additional allowed CORS origins"
    )


class LoggingConfig(BaseSettings):
    """Logging configuration settings."""

    model_config = SettingsConfigDict(
        env_prefix="LOG_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore"
    )

    level: str = Field(
        default="INFO",
        description="Logging level"
    )
    format: str = Field(
        default="json",
        description="Log format (json or text)"
    )
    file_path: Optional[str] = Field(
        default=None,
        description="Log file path (optional)"
    )
    max_file_size: int = Field(
        default=10485760,  # 10MB
        description="Maximum log file size in bytes",
        ge=1048576,  # 1MB
        le=104857600  # 100MB
    )
    backup_count: int = Field(
        default=5,
        description="Number of backup log files",
        ge=1,
        le=20
    )

    @validator("level")
    def validate_level(cls, v: str) -> str:
        """Validate logging level."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in valid_levels:
            raise ValueError(f"Invalid log level: {v}. Must be one of {valid_levels}")
        return v.upper()

    @validator("format")
    def validate_format(cls, v: str) -> str:
        """Validate log format."""
        valid_formats = {"json", "text"}
        if v.lower() not in valid_formats:
            raise ValueError(f"Invalid log format: {v}. Must be one of {valid_formats}")
        return v.lower()


class Settings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Application info
    app_name: str = Field(
        default="AuthGate",
        description="Application name"
    )
    app_version: str = Field(
        default="0.1.0",
        description="Application version"
    )
    app_description: str = Field(
        default="GitHub OAuth session gateway",
        description="Application description"
    )

    # Environment
    environment: str = Field(
        default="development",
        description="Application environment"
    )
    debug: bool = Field(
        default=False,
        description="Enable debug mode"
    )

    # Where the browser lands after a successful login
    frontend_url: str = Field(
        default="http://localhost:5173",
        description="Frontend base URL"
    )
    login_redirect_query: str = Field(
        default="authed=1",
        description="Query marker appended to the post-login redirect"
    )

    # Sub-configurations
    github: GitHubConfig = Field(default_factory=GitHubConfig)
    cookie: CookieConfig = Field(default_factory=CookieConfig)
    server: ServerConfig = Field(default_factory=ServerConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @validator("environment")
    def validate_environment(cls, v: str) -> str:
        """Validate environment."""
        valid_envs = {"development", "staging", "production", "testing"}
        if v.lower() not in valid_envs:
            raise ValueError(f"Invalid environment: {v}. Must be one of {valid_envs}")
        return v.lower()

    @validator("frontend_url")
    def validate_frontend_url(cls, v: str) -> str:
        """Drop trailing slash from the frontend URL."""
        return v.rstrip("/")

    def model_post_init(self, __context: Any) -> None:
        """Reject cookie settings that are unsafe in production."""
        if self.environment != "production":
            return
        if not self.cookie.secure:
            raise ValueError("COOKIE_SECURE cannot be disabled in production")
        if not self.cookie.secret_key:
            raise ValueError("COOKIE_SECRET_KEY must be set in production")

    @property
    def login_redirect_url(self) -> str:
        """URL the callback redirects to after a successful login."""
        separator = "&" if "?" in self.frontend_url else "?"
        return f"{self.frontend_url}{separator}{self.login_redirect_query}"


# Global settings instance
settings = Settings()


def get_settings() -> Settings:
    """Get application settings."""
    return settings


def reload_settings() -> Settings:
    """Reload settings from environment."""
    global settings
    settings = Settings()
    return settings
