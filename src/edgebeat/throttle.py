"""Coalescing of rapid redraw requests."""

from __future__ import annotations

import time
from typing import Any, Callable, Optional, Protocol

from edgebeat.config import MIN_RENDER_INTERVAL


class TimerFactory(Protocol):
    """Anything that can arm a one-shot timer, e.g. a Textual screen."""

    def set_timer(self, delay: float, callback: Callable[[], Any], *, name: str | None = None) -> Any:
        ...


class RenderThrottle:
    """
    Debounce draws to at most one per ``min_interval``.

    A request arriving too soon after the last draw replaces the single
    pending timer instead of drawing; the pending draw fires once at the end
    of the interval and renders whatever the state is at that moment.
    """

    def __init__(
        self,
        draw: Callable[[], None],
        timers: TimerFactory,
        *,
        min_interval: float = MIN_RENDER_INTERVAL,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._draw = draw
        self._timers = timers
        self.min_interval = min_interval
        self._clock = clock
        self._last_draw = float("-inf")
        self._pending: Optional[Any] = None
        self.draw_count = 0

    @property
    def pending(self) -> bool:
        return self._pending is not None

    def request(self) -> None:
        """Draw now, or defer to the end of the current interval."""
        if self._clock() - self._last_draw < self.min_interval:
            self.cancel()
            self._pending = self._timers.set_timer(
                self.min_interval, self._flush, name="render"
            )
            return
        self.cancel()
        self._draw_now()

    def cancel(self) -> None:
        if self._pending is not None:
            self._pending.stop()
            self._pending = None

    def _flush(self) -> None:
        self._pending = None
        self._draw_now()

    def _draw_now(self) -> None:
        self._last_draw = self._clock()
        self.draw_count += 1
        self._draw()
