"""
Request signing for the Publitio API.

Every request carries four query fields: the API key, a Unix timestamp,
an 8-digit random nonce and a SHA-1 signature over
``timestamp + nonce + secret``. A fresh set is generated per request.
"""

import hashlib
import random
import time
from typing import Iterator, NamedTuple, Optional, Tuple

from .constants import (
    PARAM_API_KEY,
    PARAM_API_TIMESTAMP,
    PARAM_API_NONCE,
    PARAM_API_SIGNATURE,
    NONCE_MIN,
    NONCE_MAX
)

# OS entropy source; failures propagate to the caller
_random = random.SystemRandom()


class SignedQuery(NamedTuple):
    """Auth fields for a single request. Never reuse across requests."""

    api_key: str
    api_timestamp: str
    api_nonce: str
    api_signature: str

    def items(self) -> Iterator[Tuple[str, str]]:
        """Yield ``(name, value)`` pairs in wire order."""
        yield PARAM_API_KEY, self.api_key
        yield PARAM_API_TIMESTAMP, self.api_timestamp
        yield PARAM_API_NONCE, self.api_nonce
        yield PARAM_API_SIGNATURE, self.api_signature


def compute_signature(timestamp: str, nonce: str, secret: str) -> str:
    """
    Compute the request signature.

    The service expects SHA-1 over the three values concatenated with no
    separator. Changing the digest breaks compatibility with the API.

    Args:
        timestamp: Unix seconds as a decimal string
        nonce: 8-digit decimal nonce
        secret: API secret

    Returns:
        Lowercase hex digest
    """
    message = f"{timestamp}{nonce}{secret}"
    return hashlib.sha1(message.encode('utf-8')).hexdigest()


def generate_nonce() -> str:
    """Return a random 8-digit decimal nonce."""
    return str(_random.randrange(NONCE_MIN, NONCE_MAX))


def sign(key: str, secret: str, now: Optional[float] = None) -> SignedQuery:
    """
    Generate the auth query fields for one request.

    Args:
        key: API key, sent as-is
        secret: API secret, only ever used as digest input
        now: Unix time override (defaults to the current time)

    Returns:
        SignedQuery with all four fields filled in
    """
    if now is None:
        now = time.time()
    timestamp = str(int(now))
    nonce = generate_nonce()
    signature = compute_signature(timestamp, nonce, secret)
    return SignedQuery(key, timestamp, nonce, signature)
