"""Fixed-interval tick gate decoupling simulation rate from frame rate."""

from __future__ import annotations


class TickGate:
    """Latches a "step due" flag once every *step_interval* seconds.

    The gate is fed the current time once per frame. Times only need to
    come from a monotonic source; the unit is whatever *step_interval*
    is expressed in. Without a *start* time the first :meth:`update`
    sets the baseline and does not fire.
    """

    def __init__(self, step_interval: float, start: float | None = None) -> None:
        if step_interval <= 0:
            raise ValueError("step_interval must be positive.")
        self.step_interval = step_interval
        self.last_tick = start
        self.due = False

    def update(self, now: float) -> bool:
        """Fire if a full interval has elapsed since the last tick."""
        if self.last_tick is None:
            self.last_tick = now
            self.due = False
        elif now - self.last_tick >= self.step_interval:
            self.last_tick = now
            self.due = True
        else:
            self.due = False
        return self.due

    def reset(self, now: float | None = None) -> None:
        self.last_tick = now
        self.due = False
