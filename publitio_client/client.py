"""
Publitio API client.

Every call signs a fresh auth query, builds the request URI, sends the
request over a shared session and parses the JSON object that comes back.
"""

import logging
import math
from typing import BinaryIO, Mapping, Optional
from urllib.parse import urlsplit

from .constants import DEFAULT_CONFIG
from .exceptions import ClosedClientError, ConfigurationError
from .response import ApiResponse, parse_response
from .signer import sign
from .transport import Transport
from .uri import build_uri

logger = logging.getLogger(__name__)


class PublitioClient:
    """
    Client for making authenticated requests to the Publitio API.

    Owns an HTTP session for its whole lifetime. Call ``close()`` when done,
    or use the client as a context manager.
    """

    def __init__(self, key: str, secret: str, **config):
        """
        Initialize Publitio client.

        Args:
            key: API key, from the Publitio dashboard
            secret: API secret, from the Publitio dashboard
            **config: Configuration options (timeout, base_url, session)
        """
        self.key = key
        self.secret = secret

        # Merge default config with user overrides
        self.config = {**DEFAULT_CONFIG, **config}

        # Validate configuration
        self._validate_config()

        self.transport = Transport(self.config['timeout'], self.config['session'])
        self._closed = False

    def _validate_config(self):
        """Validate client configuration."""
        if not self.key:
            raise ConfigurationError("key cannot be empty")

        if not self.secret:
            raise ConfigurationError("secret cannot be empty")

        timeout = self.config['timeout']
        values = timeout if isinstance(timeout, tuple) else (timeout,)
        if not values or len(values) > 2 or any(
                isinstance(v, bool) or not isinstance(v, (int, float))
                or not math.isfinite(v) or v <= 0 for v in values):
            raise ConfigurationError("timeout must be positive and finite (or a (connect, read) pair)")

        try:
            base = urlsplit(self.config['base_url'])
        except (TypeError, ValueError, AttributeError) as e:
            raise ConfigurationError(f"invalid base_url: {e}") from e
        if base.scheme not in ('http', 'https') or not base.netloc:
            raise ConfigurationError("base_url must be an absolute http(s) URL")

    @property
    def closed(self) -> bool:
        return self._closed

    def _check_open(self):
        if self._closed:
            raise ClosedClientError("client has been closed")

    def _request(self, method: str, path: str, parameters: Optional[Mapping],
                 timeout=None) -> ApiResponse:
        self._check_open()
        uri = build_uri(path, parameters, sign(self.key, self.secret), self.config['base_url'])
        response = self.transport.execute(method, uri, timeout=timeout)
        try:
            return parse_response(response)
        finally:
            response.close()

    def get(self, path: str, parameters: Optional[Mapping] = None, timeout=None) -> ApiResponse:
        """
        Make a GET API call.

        Args:
            path: Target endpoint path, such as "/files/list" or "files/show/<file_id>"
            parameters: Optional query parameters to send with the request
            timeout: Per-call timeout override

        Returns:
            Parsed JSON response
        """
        return self._request('GET', path, parameters, timeout)

    def put(self, path: str, parameters: Optional[Mapping] = None, timeout=None) -> ApiResponse:
        """Make a PUT API call, e.g. "/files/update/<file_id>"."""
        return self._request('PUT', path, parameters, timeout)

    def delete(self, path: str, parameters: Optional[Mapping] = None, timeout=None) -> ApiResponse:
        """Make a DELETE API call, e.g. "/files/delete/<file_id>"."""
        return self._request('DELETE', path, parameters, timeout)

    def upload_file(self, path: str, stream: BinaryIO, parameters: Optional[Mapping] = None,
                    timeout=None) -> ApiResponse:
        """
        Upload a file to the given endpoint, such as "/files/create" or
        "/watermarks/create".

        Args:
            path: Target endpoint path
            stream: Binary file-like object, sent as the multipart part "file"
            parameters: Optional query parameters to send with the request
            timeout: Per-call timeout override

        Returns:
            Parsed JSON response
        """
        self._check_open()
        uri = build_uri(path, parameters, sign(self.key, self.secret), self.config['base_url'])
        response = self.transport.execute_multipart_upload(uri, stream, timeout=timeout)
        try:
            return parse_response(response)
        finally:
            response.close()

    def close(self):
        """Close HTTP session. Calling it again does nothing."""
        if self._closed:
            return
        self._closed = True
        self.transport.close()
        logger.debug("Publitio client closed")

    def __enter__(self):
        """Context manager entry."""
        self._check_open()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()
