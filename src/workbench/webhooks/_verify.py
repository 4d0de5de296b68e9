import hmac
import json
import time
from logging import getLogger
from typing import Callable, Optional

from pydantic import ValidationError

from .._utils.constants import DEFAULT_WEBHOOK_TOLERANCE, LOGGER_NAME
from ..models import ErrorCode, WebhookVerificationError
from ._signature import Payload, compute_signature, parse_signature_header
from .models import WebhookEvent

logger = getLogger(f"{LOGGER_NAME}.webhooks")

Clock = Callable[[], float]


def _reject(message: str, code: ErrorCode) -> WebhookVerificationError:
    logger.debug(f"Webhook rejected: {code.value}")
    return WebhookVerificationError(message, code)


def verify_signature(
    payload: Payload,
    signature_header: Optional[str],
    secret: str,
    tolerance: int = DEFAULT_WEBHOOK_TOLERANCE,
    *,
    clock: Optional[Clock] = None,
) -> bool:
    """Verify that a webhook payload was signed by Workbench.

    Args:
        payload: The raw request body, exactly as received.
        signature_header: Value of the ``X-Workbench-Signature`` header.
        secret: The webhook secret (``whsec_...``).
        tolerance: Maximum age in seconds of the signature timestamp, in
            either direction. ``0`` disables the freshness check.
        clock: Returns the current unix time; defaults to ``time.time``.

    Returns:
        bool: Always ``True``; every failure raises.

    Raises:
        WebhookVerificationError: ``MALFORMED_HEADER``, ``STALE_SIGNATURE``,
            ``CLOCK_SKEW`` or ``INVALID_SIGNATURE``.

    Examples:
        ```python
        from workbench.webhooks import verify_signature

        verify_signature(
            request.body,
            request.headers["X-Workbench-Signature"],
            os.environ["WORKBENCH_WEBHOOK_SECRET"],
        )
        ```
    """
    try:
        header = parse_signature_header(signature_header)
    except WebhookVerificationError as e:
        raise _reject(e.message, ErrorCode.MALFORMED_HEADER) from None

    if tolerance > 0:
        now = int((clock or time.time)())
        age = now - header.timestamp
        if age > tolerance:
            raise _reject(
                f"Webhook timestamp is too old ({age} seconds). "
                f"Maximum allowed age is {tolerance} seconds.",
                ErrorCode.STALE_SIGNATURE,
            )
        if age < -tolerance:
            raise _reject(
                "Webhook timestamp is in the future. Check your server clock.",
                ErrorCode.CLOCK_SKEW,
            )

    expected = compute_signature(payload, secret, header.timestamp).encode("utf-8")
    provided = header.signature.encode("utf-8")

    if len(expected) != len(provided) or not hmac.compare_digest(expected, provided):
        raise _reject("Invalid webhook signature", ErrorCode.INVALID_SIGNATURE)

    return True


def construct_event(
    payload: Payload,
    signature_header: Optional[str],
    secret: str,
    tolerance: int = DEFAULT_WEBHOOK_TOLERANCE,
    *,
    clock: Optional[Clock] = None,
) -> WebhookEvent:
    """Verify a webhook delivery and parse it into a :class:`WebhookEvent`.

    Raises:
        WebhookVerificationError: any verification failure (see
            :func:`verify_signature`), or ``INVALID_PAYLOAD`` when the
            verified payload is not a JSON object with an ``event`` key.
    """
    verify_signature(payload, signature_header, secret, tolerance, clock=clock)

    try:
        body = json.loads(payload)
    except ValueError as e:
        raise _reject(
            "Invalid webhook payload: not valid JSON", ErrorCode.INVALID_PAYLOAD
        ) from e

    try:
        return WebhookEvent.model_validate(body)
    except ValidationError as e:
        raise _reject(
            "Invalid webhook payload: expected an object with an 'event' key",
            ErrorCode.INVALID_PAYLOAD,
        ) from e
