#!/usr/bin/env python3
"""
Basic usage examples for ProStore API client library.

This script demonstrates how to use the client library to make
authenticated requests to a ProStore store.

Configuration is read from PROSTORE_URL, PROSTORE_USER_ID and
PROSTORE_PRIVATE_TOKEN.
"""

import json
import logging
import sys

import requests

from prostore_client import (
    ApiClient,
    ClientConfig,
    ProStoreClientError,
    compute_token,
    verify_headers
)
from prostore_client.constants import HEADER_AUTH_NONCE, HEADER_AUTH_TOKEN


def main():
    """Run basic usage examples."""
    logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    try:
        config = ClientConfig.from_env()
    except ProStoreClientError as e:
        print(f"Configuration error: {e}")
        return 1

    print("=== ProStore Python Client Basic Usage Examples ===\n")

    print("1. Creating API client...")
    client = ApiClient(config)
    print(f"   Client created for: {client.base_url}")
    print(f"   User id: {config.user_id}")
    print(f"   Private token: {config.private_token[:8]}...\n")

    with client:
        # Example 1: Auth headers, derived fresh on every call
        print("2. Deriving auth headers...")
        headers = client.auth_headers()
        nonce = headers[HEADER_AUTH_NONCE]
        print(f"   Nonce: {nonce}")
        print(f"   Token: {headers[HEADER_AUTH_TOKEN]}")
        print(f"   Recomputed: {compute_token(nonce, config.private_token) == headers[HEADER_AUTH_TOKEN]}")
        print(f"   Verification: {'✓ Valid' if verify_headers(headers, config.private_token) else '✗ Invalid'}")
        print()

        # Example 2: Plain call, errors raised
        print("3. GET echo...")
        try:
            data = client.get('echo')
            print(f"   ✓ Response: {json.dumps(data)}")
        except (ProStoreClientError, requests.RequestException) as e:
            print(f"   ✗ Request failed: {e}")
        print()

        # Example 3: Callback style
        print("4. POST echo with callback...")

        def on_done(err, data=None):
            if err:
                print(f"   ✗ Request failed: {err}")
            else:
                print(f"   ✓ Response: {json.dumps(data)}")

        client.post('echo', {'json': {'data': 'Hello!'}}, on_done)
        print()

        # Example 4: Low-level template for a file upload
        print("5. Uploading a file...")
        template = client.prepare_request('post', 'admin/storage/hello.txt')
        try:
            response = client.send(template, {
                'json': False,
                'files': {'file': ('hello.txt', b'Hello, ProStore!', 'text/plain')}
            })
            print(f"   Status: {response.status_code}")
        except requests.RequestException as e:
            print(f"   ✗ Upload failed: {e}")

    print("\n=== Examples completed ===")
    return 0


if __name__ == "__main__":
    sys.exit(main())
