"""Configuration objects for the ProStore API client."""

import os
from dataclasses import dataclass, field
from typing import Mapping, Optional

from .constants import DEFAULT_TIMEOUT, ENV_PREFIX
from .exceptions import ConfigurationError


@dataclass(frozen=True)
class ClientConfig:
    """
    Immutable settings for one client instance.

    Args:
        url: Store URL including schema, e.g. ``https://example.store``
        user_id: ProStore user id (hex-encoded ObjectId)
        private_token: Secret token obtained via API login
        timeout: HTTP timeout in seconds
    """

    url: str
    user_id: str
    private_token: str = field(repr=False)
    timeout: float = DEFAULT_TIMEOUT

    def __post_init__(self):
        if not self.url or not self.url.strip('/'):
            raise ConfigurationError("url cannot be empty")

        if not self.user_id:
            raise ConfigurationError("user_id cannot be empty")

        if not self.private_token:
            raise ConfigurationError("private_token cannot be empty")

        if self.timeout <= 0:
            raise ConfigurationError("timeout must be positive")

    @property
    def base_url(self) -> str:
        """Store URL with trailing slashes stripped."""
        return self.url.rstrip('/')

    @classmethod
    def from_env(cls, prefix: str = ENV_PREFIX,
                 environ: Optional[Mapping[str, str]] = None) -> "ClientConfig":
        """
        Build configuration from environment variables.

        Reads ``<prefix>URL``, ``<prefix>USER_ID``, ``<prefix>PRIVATE_TOKEN``
        and optionally ``<prefix>TIMEOUT``.

        Raises:
            ConfigurationError: If a required variable is missing or
                the timeout is not a number
        """
        env = os.environ if environ is None else environ

        values = {}
        for name in ('url', 'user_id', 'private_token'):
            key = prefix + name.upper()
            if not env.get(key):
                raise ConfigurationError(f"{key} is not set")
            values[name] = env[key]

        timeout = env.get(prefix + 'TIMEOUT')
        if timeout:
            try:
                values['timeout'] = float(timeout)
            except ValueError:
                raise ConfigurationError(
                    f"{prefix}TIMEOUT must be a number, got {timeout!r}"
                )

        return cls(**values)


__all__ = ["ClientConfig"]
