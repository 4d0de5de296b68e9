"""Python SDK for the Workbench CRM API.

```python
from workbench import Workbench
from workbench.webhooks import construct_event

workbench = Workbench(api_key="wbk_live_xxx")
clients = workbench.clients.list(status="active")

event = construct_event(body, signature_header, webhook_secret)
```
"""

from ._config import Config
from ._services import (
    AsyncTransport,
    Transport,
    TransportError,
    TransportResponse,
    TransportTimeout,
)
from ._utils import BackoffPolicy, RequestSpec
from ._utils.constants import SDK_VERSION as __version__
from ._workbench import Workbench
from .models import ErrorCode, ErrorDetail, WebhookVerificationError, WorkbenchError
from .webhooks import (
    SIGNATURE_HEADER,
    SignatureHeaderValue,
    WebhookEvent,
    compute_signature,
    construct_event,
    generate_signature_header,
    parse_signature_header,
    verify_signature,
)

__all__ = [
    "AsyncTransport",
    "BackoffPolicy",
    "Config",
    "ErrorCode",
    "ErrorDetail",
    "RequestSpec",
    "SIGNATURE_HEADER",
    "SignatureHeaderValue",
    "Transport",
    "TransportError",
    "TransportResponse",
    "TransportTimeout",
    "WebhookEvent",
    "WebhookVerificationError",
    "Workbench",
    "WorkbenchError",
    "__version__",
    "compute_signature",
    "construct_event",
    "generate_signature_header",
    "parse_signature_header",
    "verify_signature",
]
