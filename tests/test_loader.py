import pytest

from edgebeat.loader import WalletSourceError, load_wallets, parse_wallets
from edgebeat.models import AppState, WalletState


def test_parse_wallets_drops_blank_lines():
    text = "0xaaa\n\n  \n0xbbb\r\n0xccc\n"
    assert parse_wallets(text) == ["0xaaa", "0xbbb", "0xccc"]


def test_load_wallets_preserves_order_and_duplicates(tmp_path):
    path = tmp_path / "data.txt"
    path.write_text("0x3\n0x1\n\n0x2\n0x1\n")
    assert load_wallets(path) == ["0x3", "0x1", "0x2", "0x1"]


def test_load_wallets_missing_file(tmp_path):
    path = tmp_path / "missing.txt"
    with pytest.raises(WalletSourceError) as excinfo:
        load_wallets(path)
    assert excinfo.value.path == path
    assert "missing.txt" in str(excinfo.value)


def test_one_status_per_wallet(tmp_path):
    path = tmp_path / "data.txt"
    path.write_text("0xa\n\n0xb\n0xc\n")
    state = AppState.from_wallets(load_wallets(path))
    assert list(state.statuses) == ["0xa", "0xb", "0xc"]
    assert all(s.state is WalletState.STARTING for s in state.statuses.values())
    assert all(s.points == 0 and s.last_ping is None for s in state.statuses.values())


def test_duplicates_share_one_status():
    state = AppState.from_wallets(["0xa", "0xb", "0xa"])
    assert len(state.wallets) == 3
    assert len(state.statuses) == 2
    assert state.unique_wallets() == ["0xa", "0xb"]
