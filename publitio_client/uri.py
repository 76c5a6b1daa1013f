"""
Request URI assembly.

Caller parameters come first, in the order the mapping yields them, followed
by the four signed auth fields.
"""

import re
from collections.abc import Mapping
from typing import List, Optional, Tuple
from urllib.parse import quote, urlencode, urlsplit

from .constants import API_BASE_URL, AUTH_PARAMS
from .exceptions import UriConstructionError
from .signer import SignedQuery

# Characters left unescaped in the path (RFC 3986 pchar plus "/")
_PATH_SAFE = "/:@-._~!$&'()*+,;="

_SCHEME_RE = re.compile(r'^[A-Za-z][A-Za-z0-9+.\-]*://')
_CONTROL_RE = re.compile(r'[\x00-\x1f\x7f]')


def _encode_path(path: str) -> str:
    if not isinstance(path, str):
        raise UriConstructionError(f"path must be a string, got {type(path).__name__}")
    if not path.strip('/'):
        raise UriConstructionError("path cannot be empty")
    if _SCHEME_RE.match(path) or path.startswith('//'):
        raise UriConstructionError(f"path must be relative to the API base, got {path!r}")
    if _CONTROL_RE.search(path):
        raise UriConstructionError(f"path contains control characters: {path!r}")
    if any(segment in ('.', '..') for segment in path.split('/')):
        raise UriConstructionError(f"path cannot contain '.' or '..' segments: {path!r}")
    _check_encodable(path, "path")
    return quote(path.lstrip('/'), safe=_PATH_SAFE)


def _check_encodable(text: str, what: str):
    try:
        text.encode('utf-8')
    except UnicodeEncodeError as e:
        raise UriConstructionError(f"{what} is not valid UTF-8 text: {text!r}") from e


def _query_pairs(parameters) -> List[Tuple[str, str]]:
    if parameters is None:
        return []
    if not isinstance(parameters, Mapping):
        raise UriConstructionError(
            f"parameters must be a mapping, got {type(parameters).__name__}"
        )

    pairs = []
    for name, value in parameters.items():
        if not isinstance(name, str) or not name:
            raise UriConstructionError(f"invalid parameter name: {name!r}")
        if name in AUTH_PARAMS:
            raise UriConstructionError(f"parameter {name!r} is reserved for request signing")
        if isinstance(value, bool) or not isinstance(value, (str, int, float)):
            raise UriConstructionError(
                f"parameter {name!r} must be a string or number, got {type(value).__name__}"
            )
        _check_encodable(name, "parameter name")
        value = str(value)
        _check_encodable(value, f"parameter {name!r}")
        pairs.append((name, value))
    return pairs


def build_uri(path: str, parameters: Optional[Mapping] = None,
              signed_query: Optional[SignedQuery] = None,
              base_url: str = API_BASE_URL) -> str:
    """
    Build the full request URI.

    Args:
        path: Endpoint path, such as "/files/list" or "files/show/<file_id>"
        parameters: Optional query parameters
        signed_query: Auth fields, appended after the caller parameters
        base_url: Scheme, host and base path of the API

    Returns:
        Absolute URI with a percent-encoded query string

    Raises:
        UriConstructionError: If the path or a parameter is unusable
    """
    pairs = _query_pairs(parameters)
    if signed_query is not None:
        pairs.extend(signed_query.items())

    uri = f"{base_url.rstrip('/')}/{_encode_path(path)}"
    if pairs:
        uri = f"{uri}?{urlencode(pairs)}"

    # The result must still point at the configured host
    base = urlsplit(base_url)
    try:
        built = urlsplit(uri)
        built.port  # raises ValueError on a malformed port
    except ValueError as e:
        raise UriConstructionError(f"invalid URI for path {path!r}: {e}") from e
    if (built.scheme, built.netloc) != (base.scheme, base.netloc):
        raise UriConstructionError(f"path {path!r} escapes the API host")

    return uri


def strip_query(uri: str) -> str:
    """Return the URI without its query string, for logging."""
    return uri.split('?', 1)[0]
