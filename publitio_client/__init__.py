"""
Publitio Client Library

A Python client for the Publitio file and media API. Requests are signed
with the per-request key/timestamp/nonce/signature query scheme the API
expects, and responses are parsed into plain dictionaries.

Example usage:
    from publitio_client import PublitioClient

    with PublitioClient("your-key", "your-secret") as api:
        files = api.get("/files/list", {"limit": "10"})
"""

from .client import PublitioClient
from .exceptions import (
    PublitioClientError,
    ConfigurationError,
    UriConstructionError,
    TransportError,
    ResponseFormatError,
    ClosedClientError
)
from .response import ApiResponse, parse_body, parse_response
from .signer import SignedQuery, compute_signature, generate_nonce, sign
from .transport import Transport
from .uri import build_uri
from .constants import (
    API_BASE_URL,
    DEFAULT_CONFIG,
    NONCE_MIN,
    NONCE_MAX
)

__version__ = "1.0.0"
__all__ = [
    "PublitioClient",
    "PublitioClientError",
    "ConfigurationError",
    "UriConstructionError",
    "TransportError",
    "ResponseFormatError",
    "ClosedClientError",
    "ApiResponse",
    "parse_body",
    "parse_response",
    "SignedQuery",
    "compute_signature",
    "generate_nonce",
    "sign",
    "Transport",
    "build_uri",
    "API_BASE_URL",
    "DEFAULT_CONFIG",
    "NONCE_MIN",
    "NONCE_MAX"
]
