"""
Response parsing.

Every API response body is expected to be a single JSON object.
"""

import json
import logging
from typing import Optional

import requests

from .exceptions import ResponseFormatError, TransportError

logger = logging.getLogger(__name__)

FORMAT_ERROR_HINT = (
    "Failed to parse JSON properly. This might be because you made an API call "
    "to an invalid endpoint, or an internal server error occurred."
)


class ApiResponse(dict):
    """Decoded JSON object, with the HTTP status it arrived with."""

    def __init__(self, data=(), status_code: Optional[int] = None):
        super().__init__(data)
        self.status_code = status_code

    def __repr__(self):
        return f"ApiResponse(status_code={self.status_code}, {dict.__repr__(self)})"


def parse_body(content: bytes, status_code: Optional[int] = None) -> ApiResponse:
    """
    Decode a response body as a single JSON object.

    Args:
        content: Raw response bytes
        status_code: HTTP status, attached to the result or the error

    Returns:
        ApiResponse holding the decoded object

    Raises:
        ResponseFormatError: If the body is empty, not JSON, or not an object
    """
    try:
        data = json.loads(content)
    except (ValueError, TypeError, RecursionError) as e:
        # JSONDecodeError and UnicodeDecodeError are both ValueErrors;
        # RecursionError comes from deeply nested arrays or objects
        logger.warning("Unparseable response body (status %s): %s", status_code, e)
        raise ResponseFormatError(
            f"{FORMAT_ERROR_HINT} (HTTP status: {status_code})", status_code
        ) from e

    if not isinstance(data, dict):
        logger.warning("Response body is a JSON %s, not an object (status %s)",
                       type(data).__name__, status_code)
        raise ResponseFormatError(
            f"{FORMAT_ERROR_HINT} Expected a JSON object, got {type(data).__name__} "
            f"(HTTP status: {status_code})",
            status_code
        )

    return ApiResponse(data, status_code)


def parse_response(response: requests.Response) -> ApiResponse:
    """
    Read the whole body of a response and parse it.

    The caller stays responsible for closing the response.

    Raises:
        TransportError: If reading the body fails
        ResponseFormatError: If the body is not a single JSON object
    """
    try:
        content = response.content
    except requests.RequestException as e:
        raise TransportError(f"Failed to read response body: {e}") from e
    return parse_body(content, response.status_code)
