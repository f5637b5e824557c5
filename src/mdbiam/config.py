"""Application configuration from environment variables."""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # MongoDB
    mongodb_uri: str | None = Field(
        default=None,
        description="MongoDB connection string of the audited credentials",
    )
    auth_type: str = Field(
        default="SCRAM",
        description="Authentication type: Generic, SCRAM, X.509, AWS.IAM, OIDC, Kerberos, LDAP",
    )
    tls_certificate_key_file: str | None = Field(
        default=None,
        description="Client certificate + key (PEM), required for X.509",
    )
    tls_ca_file: str | None = Field(default=None, description="CA bundle (PEM)")
    app_name: str = Field(default="mdb-iam-util", description="Driver appName")
    server_selection_timeout_ms: int = Field(
        default=10_000,
        ge=0,
        description="Driver serverSelectionTimeoutMS",
    )

    # API
    api_host: str = Field(default="127.0.0.1", description="Audit API bind host")
    api_port: int = Field(default=8000, description="Audit API bind port")

    # Application
    environment: Literal["development", "staging", "production"] = Field(
        default="development",
        description="Environment name",
    )
    log_level: str = Field(default="INFO", description="Logging level")
    debug: bool = Field(default=False, description="Debug mode")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
