import hashlib
import hmac
import re
import time
from typing import Dict, Optional, Union

from .._utils.constants import SIGNATURE_TIMESTAMP_KEY, SIGNATURE_V1_KEY
from ..models import ErrorCode, WebhookVerificationError
from .models import SignatureHeaderValue

Payload = Union[str, bytes]

_TIMESTAMP_PATTERN = re.compile(r"\d+")


def _malformed(message: str) -> WebhookVerificationError:
    return WebhookVerificationError(message, ErrorCode.MALFORMED_HEADER)


def parse_signature_header(header: Optional[str]) -> SignatureHeaderValue:
    """Parse a ``t=<unix seconds>,v1=<hex signature>`` header.

    Components other than ``t`` and ``v1`` are ignored. A key that appears
    more than once is rejected.

    Raises:
        WebhookVerificationError: with code ``MALFORMED_HEADER`` when the
            header is empty, is not a comma separated ``key=value`` list,
            has a missing or non-integer ``t`` or a missing ``v1``.
    """
    if not header or not isinstance(header, str):
        raise _malformed("Missing or invalid signature header")

    components: Dict[str, str] = {}
    for part in header.split(","):
        key, sep, value = part.strip().partition("=")
        if not sep or not key:
            raise _malformed("Invalid signature header format")
        if key in components and key in (SIGNATURE_TIMESTAMP_KEY, SIGNATURE_V1_KEY):
            raise _malformed(f"Duplicate '{key}' in signature header")
        components[key] = value

    timestamp = components.get(SIGNATURE_TIMESTAMP_KEY)
    if timestamp is None:
        raise _malformed("Missing timestamp in signature header")
    if not _TIMESTAMP_PATTERN.fullmatch(timestamp):
        raise _malformed("Invalid timestamp in signature header")

    signature = components.get(SIGNATURE_V1_KEY)
    if not signature:
        raise _malformed("Missing v1 signature in signature header")

    return SignatureHeaderValue(timestamp=int(timestamp), signature=signature)


def _as_bytes(payload: Payload) -> bytes:
    return payload.encode("utf-8") if isinstance(payload, str) else bytes(payload)


def compute_signature(payload: Payload, secret: str, timestamp: int) -> str:
    """HMAC-SHA256 of ``"<timestamp>.<payload>"`` keyed with ``secret``, as lowercase hex."""
    signed_payload = f"{timestamp}.".encode("utf-8") + _as_bytes(payload)
    return hmac.new(secret.encode("utf-8"), signed_payload, hashlib.sha256).hexdigest()


def generate_signature_header(
    payload: Payload, secret: str, timestamp: Optional[int] = None
) -> str:
    """Build the signature header the API would send for ``payload``.

    Useful for testing webhook endpoints. ``timestamp`` defaults to now.
    """
    if timestamp is None:
        timestamp = int(time.time())
    signature = compute_signature(payload, secret, timestamp)
    return f"{SIGNATURE_TIMESTAMP_KEY}={timestamp},{SIGNATURE_V1_KEY}={signature}"
