"""Tests for configuration management."""

import os
from unittest.mock import patch

import pytest

from user_directory.config import DEFAULT_BASE_URL, ClientConfig, UserDirectoryConfigError

ENV_VARS = ("USER_DIRECTORY_BASE_URL", "USER_DIRECTORY_TIMEOUT", "USER_DIRECTORY_VERBOSE")


@pytest.fixture
def clean_env():
    """Run a test with the client's environment variables unset."""
    with patch.dict(os.environ):
        for name in ENV_VARS:
            os.environ.pop(name, None)
        yield os.environ


class TestClientConfig:
    """Test ClientConfig model."""

    def test_defaults(self):
        """Test default connection settings."""
        config = ClientConfig()

        assert config.base_url == DEFAULT_BASE_URL
        assert config.timeout == 5.0
        assert config.verbose is False

    def test_base_url_gets_trailing_slash(self):
        """Test base URLs are normalized to end with a slash."""
        assert ClientConfig(base_url="https://example.org/api").base_url == "https://example.org/api/"

    def test_invalid_values(self):
        """Test invalid values raise a configuration error."""
        with pytest.raises(UserDirectoryConfigError):
            ClientConfig.create(timeout=0)

        with pytest.raises(UserDirectoryConfigError):
            ClientConfig.create(base_url="ftp://example.org/")


class TestFromEnv:
    """Test loading configuration from the environment."""

    def test_no_environment(self, clean_env, tmp_path):
        """Test defaults apply when nothing is set."""
        config = ClientConfig.from_env(tmp_path / ".env")

        assert config == ClientConfig()

    def test_environment_variables(self, clean_env, tmp_path):
        """Test environment variables override defaults."""
        clean_env["USER_DIRECTORY_BASE_URL"] = "http://localhost:8080/api"
        clean_env["USER_DIRECTORY_TIMEOUT"] = "2.5"
        clean_env["USER_DIRECTORY_VERBOSE"] = "true"

        config = ClientConfig.from_env(tmp_path / ".env")

        assert config.base_url == "http://localhost:8080/api/"
        assert config.timeout == 2.5
        assert config.verbose is True

    def test_env_file(self, clean_env, tmp_path):
        """Test values are read from a .env file."""
        env_file = tmp_path / ".env"
        env_file.write_text("USER_DIRECTORY_BASE_URL=https://directory.example.org/api/\n")

        config = ClientConfig.from_env(env_file)

        assert config.base_url == "https://directory.example.org/api/"

    def test_invalid_timeout(self, clean_env, tmp_path):
        """Test a non-numeric timeout raises a configuration error."""
        clean_env["USER_DIRECTORY_TIMEOUT"] = "soon"

        with pytest.raises(UserDirectoryConfigError):
            ClientConfig.from_env(tmp_path / ".env")
