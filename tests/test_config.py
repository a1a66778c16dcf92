"""
Unit tests for client configuration.
"""

import dataclasses

import pytest

from prostore_client import ClientConfig, ConfigurationError


class TestClientConfig:
    """Test ClientConfig validation and loading."""

    def test_defaults(self):
        """Test config with default timeout."""
        config = ClientConfig("https://example.store/", "user", "secret")

        assert config.url == "https://example.store/"
        assert config.base_url == "https://example.store"
        assert config.timeout == 30

    def test_strips_all_trailing_slashes(self):
        """Test base_url strips repeated trailing slashes."""
        config = ClientConfig("https://example.store///", "user", "secret")

        assert config.base_url == "https://example.store"

    def test_immutable(self):
        """Test config cannot be changed after construction."""
        config = ClientConfig("https://example.store", "user", "secret")

        with pytest.raises(dataclasses.FrozenInstanceError):
            config.private_token = "other"

    def test_repr_hides_token(self):
        """Test private token does not leak through repr."""
        config = ClientConfig("https://example.store", "user", "very-secret-token")

        assert "very-secret-token" not in repr(config)
        assert "user" in repr(config)

    @pytest.mark.parametrize("args,kwargs", [
        (("", "user", "secret"), {}),
        (("/", "user", "secret"), {}),
        (("https://example.store", "", "secret"), {}),
        (("https://example.store", "user", ""), {}),
        (("https://example.store", "user", "secret"), {"timeout": 0}),
    ])
    def test_invalid(self, args, kwargs):
        """Test invalid configuration is rejected."""
        with pytest.raises(ConfigurationError):
            ClientConfig(*args, **kwargs)

    def test_from_env(self):
        """Test loading config from environment variables."""
        env = {
            "PROSTORE_URL": "https://example.store",
            "PROSTORE_USER_ID": "user",
            "PROSTORE_PRIVATE_TOKEN": "secret",
            "PROSTORE_TIMEOUT": "12.5",
        }
        config = ClientConfig.from_env(environ=env)

        assert config == ClientConfig("https://example.store", "user", "secret", 12.5)

    def test_from_env_os_environ(self, monkeypatch):
        """Test loading config from the process environment."""
        monkeypatch.setenv("SHOP_URL", "https://shop.test")
        monkeypatch.setenv("SHOP_USER_ID", "user")
        monkeypatch.setenv("SHOP_PRIVATE_TOKEN", "secret")
        monkeypatch.delenv("SHOP_TIMEOUT", raising=False)

        config = ClientConfig.from_env(prefix="SHOP_")

        assert config.base_url == "https://shop.test"
        assert config.timeout == 30

    def test_from_env_missing(self):
        """Test missing variable raises ConfigurationError."""
        env = {"PROSTORE_URL": "https://example.store", "PROSTORE_USER_ID": "user"}

        with pytest.raises(ConfigurationError, match="PROSTORE_PRIVATE_TOKEN"):
            ClientConfig.from_env(environ=env)

    def test_from_env_bad_timeout(self):
        """Test non-numeric timeout raises ConfigurationError."""
        env = {
            "PROSTORE_URL": "https://example.store",
            "PROSTORE_USER_ID": "user",
            "PROSTORE_PRIVATE_TOKEN": "secret",
            "PROSTORE_TIMEOUT": "soon",
        }

        with pytest.raises(ConfigurationError):
            ClientConfig.from_env(environ=env)
