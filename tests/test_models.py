from edgebeat.models import WalletState, WalletStatus


def test_state_machine_labels():
    status = WalletStatus()
    assert status.state is WalletState.STARTING
    status.mark_claim_failed()
    assert status.state is WalletState.CLAIM_FAILED
    assert status.error is None


def test_failure_then_success_clears_error():
    status = WalletStatus()
    status.record_success(10, "09:00:00")
    status.record_failure("Gateway timeout")
    assert (status.state, status.points, status.last_ping) == (WalletState.ERROR, 10, "09:00:00")

    status.record_success(11, "09:00:30")
    assert status.state is WalletState.RUNNING
    assert status.error is None
    assert status.points == 11
