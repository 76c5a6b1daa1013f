"""
Constants for the Publitio client library.
"""

# API endpoint (scheme, host and v1 base path)
API_SCHEME = "https"
API_HOST = "api.publit.io"
API_BASE_PATH = "/v1"
API_BASE_URL = f"{API_SCHEME}://{API_HOST}{API_BASE_PATH}"

# Auth query fields, in the order they are appended to every request
PARAM_API_KEY = "api_key"
PARAM_API_TIMESTAMP = "api_timestamp"
PARAM_API_NONCE = "api_nonce"
PARAM_API_SIGNATURE = "api_signature"

AUTH_PARAMS = (
    PARAM_API_KEY,
    PARAM_API_TIMESTAMP,
    PARAM_API_NONCE,
    PARAM_API_SIGNATURE,
)

# Nonce range: 8 decimal digits, upper bound exclusive
NONCE_MIN = 10000000
NONCE_MAX = 100000000

# Multipart field carrying the uploaded bytes
UPLOAD_FIELD_NAME = "file"
UPLOAD_CONTENT_TYPE = "application/octet-stream"

# Default configuration values
DEFAULT_CONFIG = {
    'timeout': 30,              # HTTP timeout in seconds
    'base_url': API_BASE_URL,
    'session': None,            # optional pre-built requests.Session
}
