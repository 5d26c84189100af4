"""The blinking state of a text cursor, driven by an explicit clock."""

from __future__ import annotations

import heapq
import time
from enum import Enum

__all__ = ["BlinkCursor", "INTERVAL", "PAUSE_DELAY"]

INTERVAL = 0.5
PAUSE_DELAY = 0.3


class _Timer(Enum):
    BLINK = "blink"
    RESUME = "resume"


def _now(now: float | None) -> float:
    return time.monotonic() if now is None else float(now)


class BlinkCursor:
    """Toggles cursor visibility every half second.

    Each scheduled blink carries the epoch it was scheduled in; a blink whose
    epoch is stale does nothing, which is how stopping and pausing cancel the
    running blink loop. Pausing keeps the cursor shown and resumes blinking
    after a short delay. Time advances only through :meth:`advance`.
    """

    def __init__(self) -> None:
        self._visible = False
        self.paused = False
        self.epoch = 0
        self._timers: list[tuple[float, int, _Timer, int]] = []
        self._sequence = 0

    def _schedule(self, deadline: float, kind: _Timer, epoch: int) -> None:
        self._sequence += 1
        heapq.heappush(self._timers, (deadline, self._sequence, kind, epoch))

    def _next_epoch(self) -> int:
        self.epoch += 1
        return self.epoch

    def _blink(self, epoch: int, now: float) -> bool:
        if self.paused or epoch != self.epoch:
            return False
        self._visible = not self._visible
        self._schedule(now + INTERVAL, _Timer.BLINK, self._next_epoch())
        return True

    def start(self, now: float | None = None) -> bool:
        """Start blinking; return True if the cursor toggled."""
        return self._blink(self.epoch, _now(now))

    def stop(self) -> None:
        """Stop blinking; pending blinks become stale."""
        self.epoch = 0

    def pause(self, now: float | None = None) -> None:
        """Show the cursor steadily, then resume blinking after a delay."""
        self.paused = True
        self._schedule(_now(now) + PAUSE_DELAY, _Timer.RESUME, self._next_epoch())

    def advance(self, now: float | None = None) -> bool:
        """Fire every timer due by ``now``; return True if any changed state."""
        now = _now(now)
        changed = False
        while self._timers and self._timers[0][0] <= now:
            deadline, _, kind, epoch = heapq.heappop(self._timers)
            if kind is _Timer.RESUME:
                self.paused = False
                changed = True
            changed = self._blink(epoch, deadline) or changed
        return changed

    @property
    def pending(self) -> int:
        """Number of timers not yet fired."""
        return len(self._timers)

    def visible(self) -> bool:
        """Whether the cursor should be drawn; always True while paused."""
        return self.paused or self._visible