"""
ProStore request authentication.

Every request carries three headers: the user id, a fresh random nonce
and ``SHA256(nonce + ":" + private_token)`` in lowercase hex. The server
holds the same private token and recomputes the digest.
"""

import hashlib
import hmac
import secrets
from typing import Dict, Mapping

from .constants import (
    HEADER_AUTH_USER_ID,
    HEADER_AUTH_NONCE,
    HEADER_AUTH_TOKEN,
    NONCE_ALPHABET,
    NONCE_LENGTH
)


def generate_nonce(length: int = NONCE_LENGTH) -> str:
    """Return a random string of ``length`` characters from NONCE_ALPHABET."""
    return ''.join(secrets.choice(NONCE_ALPHABET) for _ in range(length))


def compute_token(nonce: str, private_token: str) -> str:
    """
    Compute the auth token for a nonce.

    Args:
        nonce: Request nonce
        private_token: Shared secret

    Returns:
        Hex-encoded SHA-256 of ``nonce:private_token``
    """
    message = f"{nonce}:{private_token}"
    return hashlib.sha256(message.encode('utf-8')).hexdigest()


def derive_headers(user_id: str, private_token: str) -> Dict[str, str]:
    """
    Derive authentication headers for a single request.

    Must be called once per request: the nonce is never reused.

    Args:
        user_id: ProStore user id
        private_token: Shared secret

    Returns:
        Dict with the user id, nonce and token headers
    """
    nonce = generate_nonce()
    return {
        HEADER_AUTH_USER_ID: user_id,
        HEADER_AUTH_NONCE: nonce,
        HEADER_AUTH_TOKEN: compute_token(nonce, private_token)
    }


def _valid_nonce(nonce: str) -> bool:
    return len(nonce) == NONCE_LENGTH and all(c in NONCE_ALPHABET for c in nonce)


def verify_headers(headers: Mapping[str, str], private_token: str) -> bool:
    """
    Check auth headers the way a ProStore server does.

    Args:
        headers: Received request headers
        private_token: Shared secret of the claimed user

    Returns:
        True if all headers are present and the token matches the nonce
    """
    user_id = headers.get(HEADER_AUTH_USER_ID)
    nonce = headers.get(HEADER_AUTH_NONCE)
    token = headers.get(HEADER_AUTH_TOKEN)

    if not user_id or not nonce or not token:
        return False

    if not _valid_nonce(nonce):
        return False

    expected = compute_token(nonce, private_token)

    # Use constant-time comparison to prevent timing attacks
    return hmac.compare_digest(expected.encode('utf-8'), token.encode('utf-8'))
