"""
Shared Configuration Module

Centralized configuration for the RMS search service using Pydantic Settings.
Supports environment variables, .env files, and runtime overrides.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application-wide configuration settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Environment
    environment: Literal["development", "staging", "production"] = "development"
    debug: bool = Field(default=True, description="Enable debug mode")

    # API Configuration
    api_v1_prefix: str = "/api/v1"
    search_service_host: str = "0.0.0.0"
    search_service_port: int = 10003

    # Collaborators
    employee_service_url: str = "http://localhost:10001/employee"
    campus_service_url: str = "http://localhost:10002/campus"
    work_order_service_url: str = "http://localhost:10004/workorder"
    batch_service_url: str = "http://localhost:10005/batch"

    # Resolution
    lookup_timeout_seconds: float = Field(
        default=10.0,
        gt=0,
        description="Upper bound for a single collaborator lookup",
    )
    resolve_siblings_concurrently: bool = Field(
        default=False,
        description="Resolve sibling subtrees (buildings, rooms, associates) as concurrent tasks",
    )

    # Circuit breaker
    circuit_failure_threshold: int = Field(default=5, ge=1)
    circuit_success_threshold: int = Field(default=2, ge=1)
    circuit_reset_timeout_seconds: int = Field(default=60, ge=1)

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    log_format: Literal["json", "text"] = "json"

    # CORS
    cors_origins: list[str] = Field(
        default_factory=lambda: ["http://localhost:3000", "http://localhost:4200"]
    )


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Returns:
        Settings: Application settings singleton
    """
    return Settings()


# Convenience exports
settings = get_settings()
