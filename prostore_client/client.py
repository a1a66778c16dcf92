"""
ProStore API client.

Signs every request with fresh ProStore auth headers and dispatches it
through a ``requests`` session. JSON is used for request and response
bodies unless the caller opts out (e.g. for multipart file uploads).
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from http.cookiejar import DefaultCookiePolicy
from types import MappingProxyType
from typing import Any, Callable, Dict, Mapping, Optional, Union

import requests

from .auth import derive_headers
from .config import ClientConfig
from .constants import API_PREFIX, DEFAULT_CONFIG
from .exceptions import ConfigurationError, HTTPError

logger = logging.getLogger(__name__)

Callback = Callable[..., None]
Options = Mapping[str, Any]
OptionsArg = Union[Options, Callback, None]


class Verb(str, Enum):
    """HTTP verbs supported by the convenience methods."""

    GET = 'get'
    POST = 'post'
    PUT = 'put'
    DELETE = 'delete'


@dataclass(frozen=True)
class RequestTemplate:
    """
    Request defaults for one signed call.

    Holds the lowercase verb, absolute URL and a snapshot of the auth
    headers taken when the template was prepared. ``json`` selects JSON
    decoding of the response; per-call options are merged on top by
    :meth:`merge`.
    """

    method: str
    url: str
    headers: Mapping[str, str] = field(repr=False)
    json: bool = True
    timeout: Optional[float] = None

    def decodes_json(self, options: Optional[Options] = None) -> bool:
        """Whether the response body should be decoded as JSON."""
        if options and isinstance(options.get('json'), bool):
            return options['json']
        return self.json

    def merge(self, options: Optional[Options] = None) -> Dict[str, Any]:
        """
        Build keyword arguments for ``requests.Session.request``.

        A boolean ``json`` option toggles response decoding and is not
        sent; any other ``json`` value is the request body. Caller headers
        are kept, but cannot override the auth headers.
        """
        kwargs = dict(options or {})

        if isinstance(kwargs.get('json'), bool):
            del kwargs['json']

        headers = dict(kwargs.pop('headers', None) or {})
        headers.update(self.headers)
        if self.decodes_json(options):
            headers.setdefault('Accept', 'application/json')
        kwargs['headers'] = headers

        if self.timeout is not None:
            kwargs.setdefault('timeout', self.timeout)

        return kwargs


class ApiClient:
    """
    Client for the ProStore administrative API.

    Usage::

        client = ApiClient(ClientConfig(
            url="https://example.store",
            user_id="54b4c1d3bab9e22843c99ea4",
            private_token="e3b0c442...",
        ))
        products = client.get("admin/products")
    """

    def __init__(self, config: ClientConfig, session: Optional[requests.Session] = None):
        """
        Initialize API client.

        Args:
            config: Store URL and credentials
            session: Optional HTTP session; one that refuses cookies is
                created if omitted
        """
        self.config = config
        self._owns_session = session is None
        self.session = session if session is not None else self._new_session()

    @classmethod
    def from_options(cls, url: str, user_id: str, private_token: str, **config) -> "ApiClient":
        """
        Create client from keyword options.

        Args:
            url: Store URL including schema
            user_id: ProStore user id
            private_token: Secret token
            **config: Configuration options (timeout)
        """
        unknown = set(config) - set(DEFAULT_CONFIG)
        if unknown:
            raise ConfigurationError(f"unknown config options: {', '.join(sorted(unknown))}")

        # Merge default config with user overrides
        options = {**DEFAULT_CONFIG, **config}
        return cls(ClientConfig(url, user_id, private_token, **options))

    @staticmethod
    def _new_session() -> requests.Session:
        """Create a session that never stores cookies between calls."""
        session = requests.Session()
        session.cookies.set_policy(DefaultCookiePolicy(allowed_domains=[]))
        return session

    @property
    def base_url(self) -> str:
        """Base URL for API endpoints, e.g. ``https://example.store/api``."""
        return f"{self.config.base_url}/{API_PREFIX}"

    def build_url(self, endpoint: str) -> str:
        """
        Construct endpoint URL.

        Args:
            endpoint: API endpoint, e.g. ``admin/products``

        Returns:
            URL, e.g. ``https://example.store/api/admin/products``

        Raises:
            ValueError: If endpoint is empty
        """
        if not endpoint or not endpoint.strip():
            raise ValueError("endpoint cannot be empty")

        if endpoint.startswith('/'):
            endpoint = endpoint[1:]
        return f"{self.base_url}/{endpoint}"

    def auth_headers(self) -> Dict[str, str]:
        """Derive fresh auth headers; every call consumes a new nonce."""
        return derive_headers(self.config.user_id, self.config.private_token)

    def prepare_request(self, method: Union[Verb, str], endpoint: str) -> RequestTemplate:
        """
        Prepare a signed request template.

        Low-level entry point, mostly useful for file uploads::

            template = client.prepare_request('post', 'admin/storage/index.html')
            with open('index.html', 'rb') as f:
                client.send(template, {'json': False, 'files': {'file': f}})

        Args:
            method: HTTP method
            endpoint: API endpoint

        Returns:
            RequestTemplate with URL and auth headers filled in
        """
        if isinstance(method, Verb):
            method = method.value

        return RequestTemplate(
            method=method.lower(),
            url=self.build_url(endpoint),
            headers=MappingProxyType(self.auth_headers()),
            timeout=self.config.timeout
        )

    def send(self, template: RequestTemplate, options: Optional[Options] = None) -> requests.Response:
        """
        Dispatch a prepared template.

        Args:
            template: Template from :meth:`prepare_request`
            options: Per-call ``requests`` arguments (json, params, data, files...)

        Returns:
            requests.Response object

        Raises:
            requests.RequestException: If the transport fails
        """
        kwargs = template.merge(options)

        logger.debug("%s %s", template.method.upper(), template.url)
        response = self.session.request(template.method, template.url, **kwargs)
        logger.debug("%s %s -> %s", template.method.upper(), template.url, response.status_code)

        return response

    def request(self, verb: Union[Verb, str], endpoint: str,
                options: OptionsArg = None,
                callback: Optional[Callback] = None) -> Any:
        """
        Perform a request to an API endpoint.

        If ``options`` is callable it is used as the callback. With a
        callback, the result is delivered exactly once as
        ``callback(None, data)`` or ``callback(error)``; without one, the
        data is returned and errors are raised.

        Args:
            verb: HTTP verb
            endpoint: API endpoint
            options: Per-call ``requests`` arguments
            callback: Optional ``callback(err, data=None)``

        Returns:
            Decoded response body, or None when a callback is given

        Raises:
            requests.RequestException: On transport failure (no callback)
            HTTPError: If the server returned status 400 or above (no callback)
        """
        if callable(options):
            callback = options
            options = {}

        if not isinstance(verb, Verb):
            verb = Verb(verb.lower())

        try:
            data = self._call(verb, endpoint, options)
        except (requests.RequestException, HTTPError) as exc:
            if callback is None:
                raise
            callback(exc)
            return None

        if callback is None:
            return data
        callback(None, data)
        return None

    def _call(self, verb: Verb, endpoint: str, options: Optional[Options]) -> Any:
        template = self.prepare_request(verb, endpoint)
        response = self.send(template, options)

        if response.status_code >= 400:
            raise HTTPError(response.status_code)

        return self._decode(response, template.decodes_json(options))

    @staticmethod
    def _decode(response: requests.Response, decode_json: bool) -> Any:
        """Decode response body; non-JSON text is returned as is."""
        if not decode_json:
            return response.content

        if not response.content:
            return None

        try:
            return response.json()
        except ValueError:
            return response.text

    def get(self, endpoint: str, options: OptionsArg = None, callback: Optional[Callback] = None) -> Any:
        """Make authenticated GET request."""
        return self.request(Verb.GET, endpoint, options, callback)

    def post(self, endpoint: str, options: OptionsArg = None, callback: Optional[Callback] = None) -> Any:
        """Make authenticated POST request."""
        return self.request(Verb.POST, endpoint, options, callback)

    def put(self, endpoint: str, options: OptionsArg = None, callback: Optional[Callback] = None) -> Any:
        """Make authenticated PUT request."""
        return self.request(Verb.PUT, endpoint, options, callback)

    def delete(self, endpoint: str, options: OptionsArg = None, callback: Optional[Callback] = None) -> Any:
        """Make authenticated DELETE request."""
        return self.request(Verb.DELETE, endpoint, options, callback)

    def close(self):
        """Close HTTP session if this client created it."""
        if self._owns_session and self.session:
            self.session.close()

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()
