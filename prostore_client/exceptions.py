"""
Custom exceptions for ProStore API client library.

Transport failures are not wrapped: callers get the
``requests.RequestException`` raised by the session.
"""


class ProStoreClientError(Exception):
    """Base exception for ProStore client errors."""
    pass


class ConfigurationError(ProStoreClientError):
    """Raised when client configuration is invalid."""
    pass


class HTTPError(ProStoreClientError):
    """Raised when the server answers with status 400 or above."""

    def __init__(self, status_code: int):
        super().__init__(f"Server returned {status_code}")
        self.status_code = status_code
