"""Wallet dashboard screen with live heartbeat status."""

from __future__ import annotations

import logging
from typing import Optional

from textual.app import ComposeResult
from textual.containers import Container
from textual.screen import Screen
from textual.widgets import Static

from edgebeat.api import RewardClient
from edgebeat.config import MIN_RENDER_INTERVAL, PING_INTERVAL, WALLETS_PER_PAGE
from edgebeat.models import AppState
from edgebeat.pager import Pager
from edgebeat.render import render_dashboard
from edgebeat.scheduler import HeartbeatScheduler
from edgebeat.throttle import RenderThrottle

logger = logging.getLogger(__name__)


class WalletDashboardScreen(Screen):
    """Paginated view of every wallet's heartbeat status."""

    BINDINGS = [
        ("up,k", "select_prev", "Up"),
        ("down,j", "select_next", "Down"),
        ("left,h", "prev_page", "Previous Page"),
        ("right,l", "next_page", "Next Page"),
        ("enter,r", "check_points", "Check Points"),
    ]

    def __init__(
        self,
        state: AppState,
        client: RewardClient,
        *,
        interval: float = PING_INTERVAL,
        page_size: int = WALLETS_PER_PAGE,
        min_render_interval: float = MIN_RENDER_INTERVAL,
    ) -> None:
        """
        Initialize the dashboard.

        Args:
            state: Wallet list and status table shared with the scheduler
            client: Reward API client
            interval: Seconds between heartbeats
            page_size: Wallets shown per page
            min_render_interval: Minimum seconds between two redraws
        """
        super().__init__()
        self.wallet_state = state
        self.pager = Pager(len(state.wallets), page_size)
        self.scheduler = HeartbeatScheduler(
            state,
            client,
            self,
            interval=interval,
            on_change=self.request_render,
        )
        self.throttle = RenderThrottle(
            self._draw, self, min_interval=min_render_interval
        )
        self._body: Optional[Static] = None

    def compose(self) -> ComposeResult:
        self._body = Static("", id="dashboard-body")
        yield Container(self._body, id="dashboard-wrapper")

    def on_mount(self) -> None:
        """Start one heartbeat per wallet and paint the first frame."""
        for wallet in self.wallet_state.unique_wallets():
            self.run_worker(
                self.scheduler.start_heartbeat(wallet),
                name=f"heartbeat_{wallet}",
                group="heartbeat",
            )
        self.request_render()

    def on_unmount(self) -> None:
        self.shutdown()

    def shutdown(self) -> None:
        """Stop heartbeat timers and any pending redraw."""
        self.scheduler.stop()
        self.throttle.cancel()

    def request_render(self) -> None:
        self.throttle.request()

    def _draw(self) -> None:
        if self._body is None:
            return
        self._body.update(
            render_dashboard(self.wallet_state, self.pager, interval=self.scheduler.interval)
        )

    def action_select_prev(self) -> None:
        self.pager.move_up()
        self.request_render()

    def action_select_next(self) -> None:
        self.pager.move_down()
        self.request_render()

    def action_prev_page(self) -> None:
        self.pager.prev_page()
        self.request_render()

    def action_next_page(self) -> None:
        self.pager.next_page()
        self.request_render()

    def action_check_points(self) -> None:
        """Query the selected wallet's current points."""
        if not self.wallet_state.wallets:
            return
        wallet = self.wallet_state.wallets[self.pager.selected]
        self.run_worker(
            self.scheduler.refresh_points(wallet),
            name=f"check_{wallet}",
            group="check",
        )
