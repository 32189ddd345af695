"""Configuration constants for the wallet heartbeat dashboard."""

from typing import Final

# API
API_BASE_URL: Final[str] = "https://dashboard.layeredge.io/api"
DASHBOARD_ORIGIN: Final[str] = "https://dashboard.layeredge.io"
DEFAULT_HEADERS: Final[dict[str, str]] = {
    "Accept": "*/*",
    "Accept-Encoding": "gzip, deflate, br",
    "Accept-Language": "en-US,en;q=0.9",
    "Content-Type": "application/json",
    "Origin": DASHBOARD_ORIGIN,
    "Referer": f"{DASHBOARD_ORIGIN}/",
    "User-Agent": (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/131.0.0.0 Safari/537.36"
    ),
}

# Timeouts and intervals (seconds)
API_TIMEOUT: Final[int] = 10
PING_INTERVAL: Final[float] = 30.0
MIN_RENDER_INTERVAL: Final[float] = 0.1

# Display Constants
WALLETS_PER_PAGE: Final[int] = 5
EMPTY_MARKER: Final[str] = "-"

# Files
WALLETS_FILE: Final[str] = "data.txt"
LOG_FILE: Final[str] = "edgebeat.log"
LOG_LEVEL: Final[str] = "INFO"
