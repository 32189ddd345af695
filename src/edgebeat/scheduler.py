"""Per-wallet claim and heartbeat scheduling."""

from __future__ import annotations

import asyncio
import logging
import threading
from datetime import datetime
from functools import partial
from typing import Any, Callable, Optional, Protocol

from edgebeat.api import ApiError, RewardClient, extract_points
from edgebeat.config import PING_INTERVAL
from edgebeat.models import AppState

logger = logging.getLogger(__name__)


class TimerHost(Protocol):
    """Anything that can arm a repeating timer, e.g. a Textual screen."""

    def set_interval(self, interval: float, callback: Callable[[], Any], *, name: str | None = None) -> Any:
        ...


def clock_time(now: datetime) -> str:
    return now.strftime("%H:%M:%S")


async def run_detached(func: Callable[..., Any], *args: Any) -> Any:
    """
    Run a blocking call on a daemon thread and await its result.

    Interpreter shutdown never joins these threads, so quitting abandons any
    request still in flight. A result arriving after the loop closed, or
    after the awaiting task was cancelled, is dropped.
    """
    loop = asyncio.get_running_loop()
    future = loop.create_future()

    def resolve(result: Any, error: Optional[Exception]) -> None:
        if future.done():
            return
        if error is not None:
            future.set_exception(error)
        else:
            future.set_result(result)

    def run() -> None:
        result, error = None, None
        try:
            result = func(*args)
        except Exception as exc:
            error = exc
        try:
            loop.call_soon_threadsafe(resolve, result, error)
        except RuntimeError:
            logger.debug("Event loop closed, dropping result of %s", thread.name)

    thread = threading.Thread(
        target=run,
        name=f"edgebeat-http-{getattr(func, '__name__', 'call')}",
        daemon=True,
    )
    thread.start()
    return await future


class HeartbeatScheduler:
    """
    Run one independent heartbeat per wallet.

    Each wallet is claimed once, updated once, then updated again on a fixed
    interval for the rest of the process. Failures only touch the status of
    the wallet they belong to and are never retried outside the next tick.
    """

    def __init__(
        self,
        state: AppState,
        client: RewardClient,
        timers: TimerHost,
        *,
        interval: float = PING_INTERVAL,
        on_change: Optional[Callable[[], None]] = None,
        now: Callable[[], datetime] = datetime.now,
    ) -> None:
        self.state = state
        self.client = client
        self.interval = interval
        self._timers = timers
        self._on_change = on_change
        self._now = now
        # wallet -> timer handle; None while claim and first update are pending
        self._handles: dict[str, Any] = {}
        self._in_flight: set[str] = set()
        self._stopped = False

    @property
    def active_count(self) -> int:
        """Number of armed recurring timers."""
        return sum(1 for handle in self._handles.values() if handle is not None)

    def is_running(self, wallet: str) -> bool:
        return self._handles.get(wallet) is not None

    async def start_heartbeat(self, wallet: str) -> None:
        """Claim, update, then arm the recurring update timer for a wallet."""
        if self._stopped or wallet in self._handles:
            return
        self._handles[wallet] = None

        await self._claim(wallet)
        await self._update(wallet)

        if self._stopped:
            return
        self._handles[wallet] = self._timers.set_interval(
            self.interval,
            partial(self._tick, wallet),
            name=f"heartbeat-{wallet}",
        )
        logger.info("Heartbeat armed for %s every %ss", wallet, self.interval)
        self._notify()

    async def refresh_points(self, wallet: str) -> None:
        """Query the current point total without changing the state label."""
        status = self.state.status(wallet)
        try:
            result = await run_detached(self.client.check_points, wallet)
        except ApiError as exc:
            logger.warning("Points check failed for %s: %s", wallet, exc)
            status.error = str(exc)
        else:
            status.points = extract_points(result, status.points)
        self._notify()

    def stop(self) -> None:
        """Stop every heartbeat timer; later starts become no-ops."""
        self._stopped = True
        for handle in self._handles.values():
            if handle is not None:
                handle.stop()
        self._handles.clear()

    async def _tick(self, wallet: str) -> None:
        await self._update(wallet)
        self._notify()

    async def _claim(self, wallet: str) -> None:
        status = self.state.status(wallet)
        try:
            await run_detached(self.client.claim_points, wallet)
        except ApiError as exc:
            logger.warning("Claim failed for %s: %s", wallet, exc)
            status.mark_claim_failed()
        else:
            status.mark_claimed()

    async def _update(self, wallet: str) -> bool:
        """Send one heartbeat. Returns False if one is already in flight."""
        if wallet in self._in_flight:
            logger.debug("Previous heartbeat for %s still running, skipping tick", wallet)
            return False
        self._in_flight.add(wallet)
        status = self.state.status(wallet)
        try:
            result = await run_detached(self.client.update_points, wallet)
        except ApiError as exc:
            logger.error("Heartbeat failed for %s: %s", wallet, exc)
            status.record_failure(str(exc))
        else:
            status.record_success(
                extract_points(result, status.points), clock_time(self._now())
            )
        finally:
            self._in_flight.discard(wallet)
        return True

    def _notify(self) -> None:
        if self._on_change is not None:
            self._on_change()
