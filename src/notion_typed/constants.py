"""
Project-wide constants for the Notion typed client
"""  # noqa: D200, D212, D415

# ==============================================================================
# API Configuration
# ==============================================================================

API_ROOT_URL = "https://api.notion.com/v1"
API_VERSION = "2021-05-13"  # Sent as the Notion-Version header

# ==============================================================================
# Network Configuration
# ==============================================================================

NETWORK_TIMEOUT = 30.0  # seconds
CANCEL_POLL_INTERVAL = 0.05  # seconds between cancel-token checks
TRANSPORT_MAX_WORKERS = 4  # threads used for cancellable exchanges

# Responses with a status at or below this value are decoded as success
SUCCESS_STATUS_CEILING = 300

JSON_CONTENT_TYPE = "application/json"
