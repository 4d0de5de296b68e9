# Defaults
DEFAULT_BASE_URL = "https://api.tryworkbench.app"
DEFAULT_TIMEOUT_MS = 30000
DEFAULT_MAX_RETRIES = 3
DEFAULT_WEBHOOK_TOLERANCE = 300

# Environment variables
ENV_API_KEY = "WORKBENCH_API_KEY"
ENV_ACCESS_TOKEN = "WORKBENCH_ACCESS_TOKEN"
ENV_BASE_URL = "WORKBENCH_BASE_URL"

# Headers
HEADER_AUTHORIZATION = "Authorization"
HEADER_CONTENT_TYPE = "Content-Type"
HEADER_ACCEPT = "Accept"
HEADER_USER_AGENT = "User-Agent"
HEADER_SIGNATURE = "X-Workbench-Signature"

# Signature header components
SIGNATURE_TIMESTAMP_KEY = "t"
SIGNATURE_V1_KEY = "v1"

SDK_VERSION = "0.1.0"
USER_AGENT = f"workbench-python/{SDK_VERSION}"

LOGGER_NAME = "workbench"
