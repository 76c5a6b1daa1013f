"""
HTTP transport over a single shared requests session.

The transport keeps no per-request state; the session's connection pool is
the only thing mutated by a request.
"""

import logging
from typing import BinaryIO, Optional

import requests

from .constants import UPLOAD_FIELD_NAME, UPLOAD_CONTENT_TYPE
from .exceptions import TransportError
from .uri import strip_query

logger = logging.getLogger(__name__)


class Transport:
    """
    Executes signed requests against the API.

    Responses are opened with ``stream=True``; the caller must read and
    close them.
    """

    def __init__(self, timeout=30, session: Optional[requests.Session] = None):
        """
        Initialize transport.

        Args:
            timeout: Default timeout in seconds, or a (connect, read) tuple
            session: Existing session to take ownership of
        """
        self.timeout = timeout
        self.session = session if session is not None else requests.Session()

    def _send(self, method: str, uri: str, timeout=None, **kwargs) -> requests.Response:
        if timeout is None:
            timeout = self.timeout
        try:
            response = self.session.request(method, uri, timeout=timeout, stream=True, **kwargs)
        except requests.RequestException as e:
            logger.warning("%s %s failed: %s", method, strip_query(uri), e)
            raise TransportError(f"HTTP request failed: {e}") from e

        logger.debug("%s %s -> %s", method, strip_query(uri), response.status_code)
        return response

    def execute(self, method: str, uri: str, timeout=None) -> requests.Response:
        """Make a request without a body (GET, PUT, DELETE)."""
        return self._send(method, uri, timeout=timeout)

    def execute_multipart_upload(self, uri: str, stream: BinaryIO, filename: str = "file",
                                 timeout=None) -> requests.Response:
        """
        POST the stream as a single multipart part named ``file``.

        requests builds the multipart body in memory, so the whole stream
        is read before anything is sent. Mind this for large media files.

        Args:
            uri: Signed request URI
            stream: Binary file-like object to upload
            filename: Filename reported in the part's Content-Disposition
            timeout: Per-call timeout override
        """
        files = {UPLOAD_FIELD_NAME: (filename, stream, UPLOAD_CONTENT_TYPE)}
        return self._send('POST', uri, timeout=timeout, files=files)

    def close(self):
        """Close HTTP session."""
        self.session.close()
