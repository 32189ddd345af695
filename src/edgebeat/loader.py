"""Wallet list loading."""

from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


class WalletSourceError(OSError):
    """Raised when the wallet list cannot be read."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Cannot read wallet file {path}: {reason}")
        self.path = path
        self.reason = reason


def parse_wallets(text: str) -> list[str]:
    """Split text into non-blank, stripped lines, keeping their order."""
    return [line.strip() for line in text.splitlines() if line.strip()]


def load_wallets(path: str | Path) -> list[str]:
    """
    Read the newline-delimited wallet list.

    Args:
        path: Text file with one wallet address per line

    Returns:
        Wallet addresses in file order, blank lines dropped

    Raises:
        WalletSourceError: If the file cannot be read
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise WalletSourceError(path, str(exc)) from exc
    wallets = parse_wallets(text)
    logger.info("Loaded %d wallets from %s", len(wallets), path)
    return wallets
