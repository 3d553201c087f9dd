"""Protocol constants for the Zif daemon HTTP API."""

from __future__ import annotations

from pyzif import __version__

USER_AGENT = f"pyzif/{__version__}"

# Default HTTP bind of zifd ("bind.http").
DEFAULT_BASE_URL = "http://127.0.0.1:8080"

# Command endpoints
RESOLVE_ENDPOINT = "/self/resolve/{address}/"

# Command result status value for success
STATUS_OK = "ok"

# DHT entry limits enforced by the daemon
MAX_ENTRY_NAME_LENGTH = 32
MAX_ENTRY_DESC_LENGTH = 160
MAX_ENTRY_PUBLIC_ADDRESS_LENGTH = 253
MAX_ENTRY_PORT = 65535
