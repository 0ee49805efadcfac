"""
Configuration settings for the application.
"""

import logging
import os
from typing import Optional

from dotenv import load_dotenv

from managed_provisioning.exceptions import ConfigurationError

# Load environment variables from .env file
_ = load_dotenv()


class Settings:
    """Application settings loaded from environment variables."""

    def __init__(self):
        self.registry_path: Optional[str] = (
            self._get_env("PROVISIONING_REGISTRY_PATH", "") or None
        )
        self.log_level: str = self._get_log_level("PROVISIONING_LOG_LEVEL", "INFO")
        self.host: str = self._get_env("HOST", "127.0.0.1")
        self.port: int = self._get_int_env("PORT", 8000)
        self.reload: bool = self._get_env("RELOAD", "0") in {"1", "true", "True"}

    def _get_env(self, key: str, default: str) -> str:
        """Get an environment variable with a default value."""
        return os.getenv(key, default)

    def _get_int_env(self, key: str, default: int) -> int:
        """Get an integer environment variable, raise error if it is not one."""
        value = os.getenv(key)
        if not value:
            return default
        try:
            return int(value)
        except ValueError:
            raise ConfigurationError(
                f"Environment variable {key} must be an integer, got {value!r}"
            )

    def _get_log_level(self, key: str, default: str) -> str:
        """Get a logging level name, raise error if logging does not know it."""
        value = self._get_env(key, default).upper()
        if not isinstance(logging.getLevelName(value), int):
            raise ConfigurationError(f"Unknown log level in {key}: {value}")
        return value


# Global settings instance
settings = Settings()
