"""
Custom exceptions for the Publitio client library.
"""


class PublitioClientError(Exception):
    """Base exception for Publitio client errors."""
    pass


class ConfigurationError(PublitioClientError):
    """Raised when client configuration is invalid."""
    pass


class UriConstructionError(PublitioClientError):
    """Raised when a path or parameter cannot be turned into a request URI."""
    pass


class TransportError(PublitioClientError):
    """Raised when the HTTP request fails (connection, timeout, read error)."""
    pass


class ResponseFormatError(PublitioClientError):
    """
    Raised when the response body is not a single JSON object.

    This usually means the call went to an invalid endpoint path, or an
    internal server error occurred upstream.
    """

    def __init__(self, message, status_code=None):
        super().__init__(message)
        self.status_code = status_code


class ClosedClientError(PublitioClientError):
    """Raised when an operation is attempted after the client was closed."""
    pass
