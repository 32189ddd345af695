"""Formatting helpers for dashboard values."""

from typing import Any

from edgebeat.config import EMPTY_MARKER
from edgebeat.models import WalletState

STATE_COLORS: dict[WalletState, str] = {
    WalletState.RUNNING: "green",
    WalletState.ERROR: "red",
    WalletState.CLAIMED: "bright_green",
    WalletState.CLAIM_FAILED: "magenta",
    WalletState.STARTING: "yellow",
}


def short_address(wallet: str, *, head: int = 6, tail: int = 4) -> str:
    """Shorten a wallet address to ``0x1234...abcd``."""
    if len(wallet) <= head + tail:
        return wallet
    return f"{wallet[:head]}...{wallet[-tail:]}"


def fmt_num(value: Any, *, decimals: int = 2, empty: str = EMPTY_MARKER) -> str:
    """Format a number with separators for large values."""
    if value is None:
        return empty
    try:
        num = float(value)
    except (TypeError, ValueError):
        return str(value)
    if num.is_integer():
        return f"{num:,.0f}"
    return f"{num:,.{decimals}f}"


def state_color(state: WalletState) -> str:
    """Return a color token for a wallet state."""
    return STATE_COLORS.get(state, "default")
