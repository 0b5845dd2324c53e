"""Configuration management for the osdsctl application."""
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

# Load environment variables from .env file if it exists
load_dotenv()

# Tenant used by control planes running without an auth strategy
DEFAULT_TENANT_ID = "e93b4c0934da416eb9c8d120c5d04d96"


class Config:
    """Application configuration with sensible defaults."""

    # Control plane API
    ENDPOINT: str = os.getenv("OPENSDS_ENDPOINT", "http://localhost:50040")
    API_VERSION: str = os.getenv("OPENSDS_API_VERSION", "v1beta")
    TENANT_ID: str = os.getenv("OPENSDS_TENANT_ID", DEFAULT_TENANT_ID)
    AUTH_TOKEN: str = os.getenv("OPENSDS_AUTH_TOKEN", "")

    # Timeouts (in seconds)
    API_TIMEOUT: float = float(os.getenv("API_TIMEOUT", "30"))

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "WARNING").upper()
    LOG_FORMAT: str = os.getenv(
        "LOG_FORMAT",
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    # Security
    # Header and body keys (lowercase) whose values never reach the logs
    REDACT_KEYS: tuple = ("x-auth-token", "authorization", "password", "secret")


@dataclass(frozen=True)
class ClientSettings:
    """Connection settings resolved for a single invocation."""
    endpoint: str
    tenant_id: str
    api_version: str = "v1beta"
    auth_token: str = ""
    timeout: float = 30.0

    def __post_init__(self):
        """Validate the merged settings."""
        required = {
            "endpoint (--endpoint or OPENSDS_ENDPOINT)": self.endpoint,
            "tenant (--tenant or OPENSDS_TENANT_ID)": self.tenant_id,
        }
        missing = [k for k, v in required.items() if not v]
        if missing:
            raise ValueError(f"Missing required configuration: {', '.join(missing)}")
        if self.timeout <= 0:
            raise ValueError(f"API_TIMEOUT must be positive, got {self.timeout}")

    @classmethod
    def resolve(
        cls,
        endpoint: Optional[str] = None,
        tenant_id: Optional[str] = None,
        auth_token: Optional[str] = None,
    ) -> "ClientSettings":
        """Merge command-line overrides on top of the environment."""
        return cls(
            endpoint=(endpoint or Config.ENDPOINT).rstrip("/"),
            tenant_id=tenant_id or Config.TENANT_ID,
            api_version=Config.API_VERSION,
            auth_token=auth_token or Config.AUTH_TOKEN,
            timeout=Config.API_TIMEOUT,
        )
