"""JSON HTTP helpers and the reward dashboard API client."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import Any

import requests

from edgebeat.config import API_BASE_URL, API_TIMEOUT, DEFAULT_HEADERS

logger = logging.getLogger(__name__)

# Heartbeat status codes with a dedicated user-facing message
STATUS_MESSAGES: dict[int, str] = {
    500: "Internal server error",
    504: "Gateway timeout",
}


class ApiError(RuntimeError):
    """Raised when a JSON API request fails."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


@dataclass(frozen=True)
class ClientConfig:
    """Connection settings shared by every request."""

    base_url: str = API_BASE_URL
    headers: dict[str, str] = field(default_factory=lambda: dict(DEFAULT_HEADERS))
    timeout: int | float = API_TIMEOUT

    def url(self, path: str) -> str:
        return f"{self.base_url.rstrip('/')}/{path.lstrip('/')}"


def request_json(
    session: requests.Session,
    method: str,
    url: str,
    *,
    params: dict | None = None,
    json: dict | None = None,
    timeout: int | float = API_TIMEOUT,
) -> tuple[Any | None, str | None, int | None]:
    """Request JSON and return (data, error_message, status_code)."""
    status_code = None
    try:
        resp = session.request(
            method,
            url,
            params=params,
            json=json,
            timeout=timeout,
        )
        status_code = resp.status_code
        resp.raise_for_status()
        return resp.json(), None, status_code
    except requests.RequestException as exc:
        logger.error("HTTP error for %s %s: %s", method.upper(), url, exc)
        return None, str(exc), status_code
    except ValueError as exc:
        logger.error("JSON parse error for %s %s: %s", method.upper(), url, exc)
        return None, str(exc), status_code


def extract_points(payload: Any, default: float) -> float:
    """
    Read the node point total from a response payload.

    Args:
        payload: Decoded JSON response
        default: Value to keep when the field is missing or malformed

    Returns:
        Reported point total, or default
    """
    if not isinstance(payload, dict):
        return default
    value = payload.get("nodePoints")
    if value is None and isinstance(payload.get("data"), dict):
        value = payload["data"].get("nodePoints")
    if value is None or isinstance(value, bool):
        return default
    if isinstance(value, (int, float)):
        return value
    try:
        return float(value)
    except (TypeError, ValueError):
        logger.warning("Ignoring malformed nodePoints value %r", value)
        return default


class RewardClient:
    """Client for the node-points and claim-points endpoints."""

    def __init__(
        self,
        config: ClientConfig | None = None,
        session: requests.Session | None = None,
    ) -> None:
        self.config = config or ClientConfig()
        self._session = session or requests.Session()
        self._session.headers.update(self.config.headers)

    def _call(
        self,
        method: str,
        path: str,
        action: str,
        *,
        params: dict | None = None,
        json: dict | None = None,
        status_messages: dict[int, str] | None = None,
    ) -> Any:
        data, err, status = request_json(
            self._session,
            method,
            self.config.url(path),
            params=params,
            json=json,
            timeout=self.config.timeout,
        )
        if err is None and data is not None:
            return data
        if status_messages and status in status_messages:
            raise ApiError(status_messages[status], status)
        raise ApiError(f"Failed to {action}: {err or 'empty response'}", status)

    def check_points(self, wallet: str) -> Any:
        """GET the current point total of a wallet."""
        return self._call(
            "GET", "/node-points", "check points", params={"wallet": wallet}
        )

    def update_points(self, wallet: str, *, started_at: int | None = None) -> Any:
        """
        Report a heartbeat for a wallet.

        Args:
            wallet: Wallet address
            started_at: Client timestamp in epoch milliseconds (defaults to now)

        Returns:
            Decoded response, expected to carry ``nodePoints``
        """
        if started_at is None:
            started_at = int(time.time() * 1000)
        return self._call(
            "POST",
            "/node-points",
            "update points",
            json={"walletAddress": wallet, "lastStartTime": started_at},
            status_messages=STATUS_MESSAGES,
        )

    def claim_points(self, wallet: str) -> Any:
        """Claim accrued points for a wallet."""
        return self._call(
            "POST", "/claim-points", "claim points", json={"walletAddress": wallet}
        )

    def close(self) -> None:
        self._session.close()
