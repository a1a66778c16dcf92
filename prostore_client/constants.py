"""
Constants for ProStore API client library.
Header names and nonce format must match what ProStore servers expect.
"""

import string

# HTTP Headers sent with every request
HEADER_AUTH_USER_ID = "ProStore-Auth-UserId"
HEADER_AUTH_NONCE = "ProStore-Auth-Nonce"
HEADER_AUTH_TOKEN = "ProStore-Auth-Token"

AUTH_HEADERS = (HEADER_AUTH_USER_ID, HEADER_AUTH_NONCE, HEADER_AUTH_TOKEN)

# Nonce format
NONCE_LENGTH = 32
NONCE_ALPHABET = string.ascii_uppercase + string.ascii_lowercase + string.digits

# SHA-256 hex digest length
TOKEN_LENGTH = 64

# All endpoints live under {url}/api
API_PREFIX = "api"

# Default configuration values
DEFAULT_TIMEOUT = 30  # HTTP timeout in seconds

DEFAULT_CONFIG = {
    'timeout': DEFAULT_TIMEOUT,
}

# Environment variables read by ClientConfig.from_env()
ENV_PREFIX = "PROSTORE_"
