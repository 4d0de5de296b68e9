"""Verification of inbound Workbench webhook deliveries.

Every delivery carries an ``X-Workbench-Signature`` header of the form
``t=<unix seconds>,v1=<hex HMAC-SHA256>``. The signature covers the string
``"<t>.<raw body>"`` and is keyed with the webhook secret.
"""

from .._utils.constants import HEADER_SIGNATURE as SIGNATURE_HEADER
from ._signature import (
    compute_signature,
    generate_signature_header,
    parse_signature_header,
)
from ._verify import construct_event, verify_signature
from .models import SignatureHeaderValue, WebhookEvent

__all__ = [
    "SIGNATURE_HEADER",
    "SignatureHeaderValue",
    "WebhookEvent",
    "compute_signature",
    "construct_event",
    "generate_signature_header",
    "parse_signature_header",
    "verify_signature",
]
