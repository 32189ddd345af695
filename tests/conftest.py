"""Shared test doubles."""

from __future__ import annotations

import threading
from typing import Any, Callable

import pytest


class FakeHandle:
    def __init__(self, delay: float, callback: Callable[[], Any], name: str | None) -> None:
        self.delay = delay
        self.callback = callback
        self.name = name
        self.stopped = False

    def stop(self) -> None:
        self.stopped = True


class FakeTimers:
    """Stand-in for a Textual message pump's timer methods."""

    def __init__(self) -> None:
        self.intervals: list[FakeHandle] = []
        self.timers: list[FakeHandle] = []

    def set_interval(self, interval, callback, *, name=None):
        handle = FakeHandle(interval, callback, name)
        self.intervals.append(handle)
        return handle

    def set_timer(self, delay, callback, *, name=None):
        handle = FakeHandle(delay, callback, name)
        self.timers.append(handle)
        return handle

    def active(self, kind: str = "intervals") -> list[FakeHandle]:
        return [h for h in getattr(self, kind) if not h.stopped]


class FakeClient:
    """RewardClient double with scripted results per call."""

    def __init__(self, *, claim=None, updates=None, check=None) -> None:
        self.claim_result = claim if claim is not None else {"success": True}
        self.update_results = list(updates or [])
        self.check_result = check if check is not None else {}
        self.calls: list[tuple[str, str]] = []
        self.gate: threading.Event | None = None
        self.closed = False

    @staticmethod
    def _resolve(result):
        if isinstance(result, Exception):
            raise result
        return result

    def claim_points(self, wallet):
        self.calls.append(("claim", wallet))
        return self._resolve(self.claim_result)

    def update_points(self, wallet, *, started_at=None):
        self.calls.append(("update", wallet))
        if self.gate is not None:
            self.gate.wait(timeout=5)
        result = self.update_results.pop(0) if self.update_results else {"nodePoints": 0}
        return self._resolve(result)

    def check_points(self, wallet):
        self.calls.append(("check", wallet))
        return self._resolve(self.check_result)

    def close(self):
        self.closed = True


@pytest.fixture
def timers() -> FakeTimers:
    return FakeTimers()
