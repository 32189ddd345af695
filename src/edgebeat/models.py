"""Per-wallet status records and the shared application state."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class WalletState(str, Enum):
    """Lifecycle label of a wallet heartbeat."""

    STARTING = "starting"
    CLAIMED = "claimed"
    CLAIM_FAILED = "claim-failed"
    RUNNING = "running"
    ERROR = "error"

    @property
    def label(self) -> str:
        return _LABELS[self]


_LABELS = {
    WalletState.STARTING: "Starting",
    WalletState.CLAIMED: "Claimed",
    WalletState.CLAIM_FAILED: "Claim failed",
    WalletState.RUNNING: "Running",
    WalletState.ERROR: "Error",
}


@dataclass
class WalletStatus:
    """Last known state of one wallet.

    Every mutator is a plain synchronous update so a render never sees a
    half-applied record.
    """

    state: WalletState = WalletState.STARTING
    last_ping: str | None = None
    points: float = 0
    error: str | None = None

    def mark_claimed(self) -> None:
        self.state = WalletState.CLAIMED

    def mark_claim_failed(self) -> None:
        self.state = WalletState.CLAIM_FAILED

    def record_success(self, points: float, when: str) -> None:
        self.state = WalletState.RUNNING
        self.last_ping = when
        self.points = points
        self.error = None

    def record_failure(self, message: str) -> None:
        self.state = WalletState.ERROR
        self.error = message


@dataclass
class AppState:
    """Ordered wallet list plus the status table keyed by wallet."""

    wallets: list[str] = field(default_factory=list)
    statuses: dict[str, WalletStatus] = field(default_factory=dict)

    @classmethod
    def from_wallets(cls, wallets: list[str]) -> "AppState":
        """Create one status entry per wallet before any heartbeat starts."""
        state = cls(wallets=list(wallets))
        for wallet in state.wallets:
            state.statuses.setdefault(wallet, WalletStatus())
        return state

    def status(self, wallet: str) -> WalletStatus:
        return self.statuses[wallet]

    def unique_wallets(self) -> list[str]:
        """Wallets in file order with duplicates removed."""
        return list(dict.fromkeys(self.wallets))
