"""
ProStore API Client Library

A Python client library that signs requests to the ProStore
administrative API with per-request nonce/token headers.

Example usage:
    from prostore_client import ApiClient, ClientConfig

    client = ApiClient(ClientConfig(
        url="https://example.store",
        user_id="54b4c1d3bab9e22843c99ea4",
        private_token="your-private-token",
    ))
    products = client.get("admin/products")
"""

from .auth import compute_token, derive_headers, generate_nonce, verify_headers
from .client import ApiClient, RequestTemplate, Verb
from .config import ClientConfig
from .exceptions import (
    ProStoreClientError,
    ConfigurationError,
    HTTPError
)
from .constants import (
    HEADER_AUTH_USER_ID,
    HEADER_AUTH_NONCE,
    HEADER_AUTH_TOKEN,
    NONCE_LENGTH,
    NONCE_ALPHABET,
    DEFAULT_CONFIG
)

__version__ = "1.0.0"
__all__ = [
    "ApiClient",
    "ClientConfig",
    "RequestTemplate",
    "Verb",
    "compute_token",
    "derive_headers",
    "generate_nonce",
    "verify_headers",
    "ProStoreClientError",
    "ConfigurationError",
    "HTTPError",
    "HEADER_AUTH_USER_ID",
    "HEADER_AUTH_NONCE",
    "HEADER_AUTH_TOKEN",
    "NONCE_LENGTH",
    "NONCE_ALPHABET",
    "DEFAULT_CONFIG"
]
