"""Configuration management for the user directory client."""

import os
from pathlib import Path
from typing import Optional
from pydantic import BaseModel, ValidationError, field_validator
from dotenv import load_dotenv

DEFAULT_BASE_URL = "https://reqres.in/api/"
DEFAULT_TIMEOUT = 5.0


class UserDirectoryError(Exception):
    """Base exception for the user directory client."""


class UserDirectoryConfigError(UserDirectoryError):
    """Raised when the client configuration is invalid."""


class ClientConfig(BaseModel):
    """Connection settings for the remote user directory."""

    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT
    verbose: bool = False

    @field_validator("base_url")
    @classmethod
    def _normalize_base_url(cls, value: str) -> str:
        value = value.strip()
        if not value.startswith(("http://", "https://")):
            raise ValueError(f"base_url must be an http(s) URL, got {value!r}")
        # Relative paths resolve under the base only when it ends with a slash
        return value if value.endswith("/") else value + "/"

    @field_validator("timeout")
    @classmethod
    def _check_timeout(cls, value: float) -> float:
        if value <= 0:
            raise ValueError(f"timeout must be positive, got {value}")
        return value

    @classmethod
    def create(cls, **values) -> "ClientConfig":
        """Build a config, raising UserDirectoryConfigError on bad values."""
        try:
            return cls(**values)
        except ValidationError as e:
            raise UserDirectoryConfigError(f"Invalid configuration: {e}") from e

    @classmethod
    def from_env(cls, env_file: Optional[Path] = None) -> "ClientConfig":
        """Load configuration from environment variables and an optional .env file."""
        _load_env_file(env_file)

        values = {}
        base_url = os.getenv("USER_DIRECTORY_BASE_URL")
        if base_url:
            values["base_url"] = base_url
        timeout = os.getenv("USER_DIRECTORY_TIMEOUT")
        if timeout:
            values["timeout"] = timeout
        verbose = os.getenv("USER_DIRECTORY_VERBOSE")
        if verbose:
            values["verbose"] = verbose

        return cls.create(**values)


def _load_env_file(env_file: Optional[Path] = None) -> None:
    """Load variables from a .env file without overriding the environment."""
    path = env_file or Path.cwd() / ".env"
    if path.exists():
        load_dotenv(path, override=False)
